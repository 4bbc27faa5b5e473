"""
GBIF API client.

Low-level HTTP client for the GBIF API v1. Translates transport and HTTP
failures into the domain errors in ``occurrence_mapper.errors``.

API docs: https://techdocs.gbif.org/en/openapi/v1/occurrence
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from occurrence_mapper.errors import DataSourceUnavailable, InvalidTaxonKey
from occurrence_mapper.services.http import session as default_session

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# API configuration
# ---------------------------------------------------------------------------
API_BASE = "https://api.gbif.org/v1"
MAX_PAGE_SIZE = 300  # API maximum ``limit`` for /occurrence/search


class GbifClient:
    """Read-only access to the GBIF occurrence and species endpoints.

    Pass a custom ``session`` (or a fake client with the same methods) to
    the preparer instead of relying on the shared module session.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        api_base: str = API_BASE,
    ) -> None:
        self.session = session or default_session
        self.api_base = api_base.rstrip("/")

    def _get(self, endpoint: str, params: dict[str, Any] | None = None) -> requests.Response:
        """GET an endpoint, mapping network failures to ``DataSourceUnavailable``."""
        url = f"{self.api_base}/{endpoint}"
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = self.session.get(url, params=params or {})
        except requests.RequestException as exc:
            raise DataSourceUnavailable(f"GBIF request failed: {exc}") from exc
        if resp.status_code >= 500 or resp.status_code == 429:
            raise DataSourceUnavailable(
                f"GBIF returned HTTP {resp.status_code} for {endpoint}"
            )
        return resp

    def _json(self, resp: requests.Response) -> dict[str, Any]:
        try:
            resp.raise_for_status()
            data: dict[str, Any] = resp.json()
        except requests.HTTPError as exc:
            raise DataSourceUnavailable(f"GBIF request failed: {exc}") from exc
        except ValueError as exc:
            raise DataSourceUnavailable("GBIF returned a non-JSON response") from exc
        return data

    def search_occurrences(self, params: dict[str, Any]) -> dict[str, Any]:
        """GET /occurrence/search: one page of occurrence records.

        ``limit`` above ``MAX_PAGE_SIZE`` is capped to a single page.
        """
        page_params = dict(params)
        limit = page_params.get("limit")
        if limit is not None and limit > MAX_PAGE_SIZE:
            logger.warning(
                "Requested limit %s exceeds GBIF page size; capping at %s",
                limit,
                MAX_PAGE_SIZE,
            )
            page_params["limit"] = MAX_PAGE_SIZE

        resp = self._get("occurrence/search", page_params)
        if resp.status_code == 400:
            raise InvalidTaxonKey(
                f"GBIF rejected occurrence query for taxonKey={params.get('taxonKey')!r}"
            )
        return self._json(resp)

    def get_taxon(self, taxon_key: int) -> dict[str, Any]:
        """GET /species/{key}: backbone name usage for a taxon key."""
        resp = self._get(f"species/{taxon_key}")
        if resp.status_code in (400, 404):
            raise InvalidTaxonKey(f"Unknown GBIF taxon key: {taxon_key}")
        return self._json(resp)

    def match_name(self, name: str) -> int:
        """GET /species/match: resolve a scientific name to a taxon key."""
        data = self._json(self._get("species/match", {"name": name}))
        if data.get("matchType") == "NONE" or data.get("usageKey") is None:
            raise InvalidTaxonKey(f"No GBIF taxon matches name {name!r}")
        usage_key: int = data["usageKey"]
        logger.info(
            "Matched %r to taxon %s (%s, %s)",
            name,
            usage_key,
            data.get("scientificName"),
            data.get("rank"),
        )
        return usage_key
