"""Occurrence fetching and preparation for point mapping.

The pipeline is a fixed sequence of steps, each usable on its own::

    fetch_occurrences   OccurrenceQuery -> raw GBIF records (source order)
    project_records     raw records     -> rows with the fixed field set
    to_point_geometries rows            -> GeoDataFrame of WGS84 points

``prepare`` runs all three.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import geopandas as gpd
import pandas as pd

from occurrence_mapper.datasources.gbif.client import GbifClient
from occurrence_mapper.schemas import ATTRIBUTE_FIELDS, COORDINATE_FIELDS, WGS84

if TYPE_CHECKING:
    from occurrence_mapper.schemas import OccurrenceQuery

logger = logging.getLogger(__name__)

# prepared field -> GBIF keys to read it from, in order
_COORDINATE_SOURCES = {
    "longitude": ("decimalLongitude", "longitude"),
    "latitude": ("decimalLatitude", "latitude"),
}


# =============================================================================
# Steps
# =============================================================================


def fetch_occurrences(query: OccurrenceQuery, client: GbifClient) -> list[dict[str, Any]]:
    """Query the occurrence service and return records in source order.

    GBIF answers an unknown taxon key with an empty page, so the key is
    looked up only when nothing came back. An unknown key then fails with
    ``InvalidTaxonKey``; a known key gives an empty list.
    """
    data = client.search_occurrences(query.to_params())
    results: list[dict[str, Any]] = data.get("results", [])
    if not results:
        client.get_taxon(query.taxon_key)
    logger.debug(
        "GBIF matched %s records for taxon %s, returned %s",
        data.get("count"),
        query.taxon_key,
        len(results),
    )
    return results[: query.limit]


def _coordinate(record: dict[str, Any], field: str) -> float | None:
    for key in _COORDINATE_SOURCES[field]:
        value = record.get(key)
        if value is not None:
            return float(value)
    return None


def project_records(records: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Keep only genus, species, family, eventDate, longitude and latitude.

    Records without both coordinates are dropped.
    """
    rows: list[dict[str, Any]] = []
    for record in records:
        lon = _coordinate(record, "longitude")
        lat = _coordinate(record, "latitude")
        if lon is None or lat is None:
            continue
        row = {field: record.get(field) for field in ATTRIBUTE_FIELDS}
        row["longitude"] = lon
        row["latitude"] = lat
        rows.append(row)
    return rows


def to_point_geometries(rows: list[dict[str, Any]]) -> gpd.GeoDataFrame:
    """Turn projected rows into a GeoDataFrame of points in EPSG:4326."""
    df = pd.DataFrame(rows, columns=[*ATTRIBUTE_FIELDS, *COORDINATE_FIELDS])
    return gpd.GeoDataFrame(
        df[list(ATTRIBUTE_FIELDS)],
        geometry=gpd.points_from_xy(df["longitude"], df["latitude"]),
        crs=WGS84,
    )


# =============================================================================
# Pipeline
# =============================================================================


def prepare(query: OccurrenceQuery, client: GbifClient | None = None) -> gpd.GeoDataFrame:
    """
    Fetch occurrences for a taxon and return them as map-ready points.

    Args:
        query: Taxon key, coordinate requirement and record limit.
        client: GBIF client to use. Defaults to one on the shared session.

    Returns:
        GeoDataFrame with columns ``genus, species, family, eventDate,
        geometry`` in source order. Empty (same columns, same CRS) when
        nothing matches.

    Raises:
        InvalidTaxonKey: The taxon key is not known to GBIF.
        DataSourceUnavailable: GBIF could not be reached.
    """
    client = client or GbifClient()
    records = fetch_occurrences(query, client)
    rows = project_records(records)
    if len(rows) < len(records):
        logger.info("Dropped %s records without coordinates", len(records) - len(rows))
    gdf = to_point_geometries(rows)
    logger.info("Prepared %s occurrences for taxon %s", len(gdf), query.taxon_key)
    return gdf
