"""
Prefect flow: GBIF occurrences -> interactive map page.

Run locally:
    python -m occurrence_mapper.flows.occurrence_map
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from prefect import flow, task
from prefect.cache_policies import NONE

from occurrence_mapper.datasources import gbif
from occurrence_mapper.renderers.occurrence_map import (
    DEFAULT_TITLE,
    build_occurrence_map_html,
    render_page,
)
from occurrence_mapper.schemas import OccurrenceQuery

if TYPE_CHECKING:
    import geopandas as gpd


# Retries live in the HTTP session. Inputs are frames and clients, so no
# input-hash caching.
@task(name="prepare-occurrences", cache_policy=NONE)
def prepare_occurrences(
    query: OccurrenceQuery, client: gbif.GbifClient | None = None
) -> gpd.GeoDataFrame:
    """Fetch and prepare occurrences as WGS84 points."""
    return gbif.prepare(query, client=client)


@task(name="render-map", cache_policy=NONE)
def render_map(occurrences: gpd.GeoDataFrame, title: str = DEFAULT_TITLE) -> str:
    """Render the full HTML page for the prepared occurrences."""
    map_div, map_script = build_occurrence_map_html(occurrences, title=title)
    return render_page(title, map_div, map_script)


@task(name="write-map")
def write_map(html: str, output_path: Path) -> Path:
    """Write the page to disk, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as f:
        f.write(html)
    return output_path


@flow(name="occurrence-map", log_prints=True)
def build_occurrence_map(
    taxon_key: int,
    limit: int = 100,
    output_path: Path = Path("occurrence_map.html"),
    title: str | None = None,
    api_base: str = gbif.API_BASE,
) -> dict[str, Any]:
    """
    Fetch occurrences for a taxon and write them as an interactive map.

    Errors from the data source propagate to the caller unchanged.
    """
    query = OccurrenceQuery(taxon_key=taxon_key, require_coordinates=True, limit=limit)
    client = gbif.GbifClient(api_base=api_base)

    print(f"Fetching up to {limit} occurrences for taxon {taxon_key}...")
    occurrences = prepare_occurrences(query, client=client)
    print(f"Prepared {len(occurrences)} occurrences.")

    print("Rendering map...")
    html = render_map(occurrences, title=title or f"{DEFAULT_TITLE} (taxon {taxon_key})")

    path = write_map(html, Path(output_path))
    print(f"Map written: {path}")
    return {"occurrences": len(occurrences), "output": str(path)}


if __name__ == "__main__":
    from occurrence_mapper.config import get_settings

    settings = get_settings()
    result = build_occurrence_map(
        taxon_key=settings.default_taxon_key,
        limit=settings.default_limit,
        output_path=settings.output_path,
        api_base=settings.gbif_api_base,
    )
    print(f"Flow complete: {result}")
