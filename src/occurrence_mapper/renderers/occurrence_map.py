"""Leaflet map renderer for prepared occurrences.

Generates an interactive map with one circle marker per occurrence,
colored by species, with a family/species/date popup and a species legend.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd

from occurrence_mapper.renderers import render_template
from occurrence_mapper.renderers.species_palette import (
    UNKNOWN_COLOR,
    SpeciesStyle,
    build_species_palette,
    species_label,
)

if TYPE_CHECKING:
    import geopandas as gpd

DEFAULT_TITLE = "Species Occurrences"


def _escape_js(text: str) -> str:
    """Escape a string for safe embedding inside a JS double-quoted string."""
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("</", "<\\/")
    )


def _text(value: object) -> str:
    """Cell value as display text; None and NaN become empty."""
    if isinstance(value, str):
        return value
    if value is None or pd.isna(value):
        return ""
    return str(value)


def _year_range(event_dates: list[str]) -> str:
    """Derive year range string from event dates, e.g. '1998-2023'."""
    years: set[int] = set()
    for event_date in event_dates:
        if len(event_date) >= 4 and event_date[:4].isdigit():
            years.add(int(event_date[:4]))
    if not years:
        return "unknown dates"
    min_year, max_year = min(years), max(years)
    if min_year == max_year:
        return str(min_year)
    return f"{min_year}–{max_year}"


def build_occurrence_map_html(
    occurrences: gpd.GeoDataFrame,
    palette: dict[str, SpeciesStyle] | None = None,
    title: str = DEFAULT_TITLE,
) -> tuple[str, str]:
    """Build an interactive Leaflet map of prepared occurrences.

    Each marker carries the fields the JS template needs for its popup
    (family, species, event date) and its species color.

    Returns a (map_div_html, map_script_js) tuple.
    """
    if occurrences.empty:
        return (
            render_template("occurrence_map.html.j2", title=title, obs_count=0, legend=[]),
            "",
        )

    if palette is None:
        palette = build_species_palette(occurrences)

    markers_js_parts: list[str] = []
    event_dates: list[str] = []
    for row in occurrences.itertuples(index=False):
        point = row.geometry
        if point is None or point.is_empty:
            continue

        species = species_label(row.species)
        event_date = _text(row.eventDate)
        event_dates.append(event_date)

        style = palette.get(species)
        color = style.color if style else UNKNOWN_COLOR

        marker = (
            "{"
            f"lat:{point.y},lon:{point.x},"
            f'family:"{_escape_js(_text(row.family))}",'
            f'species:"{_escape_js(species)}",'
            f'date:"{_escape_js(event_date)}",'
            f'color:"{color}"'
            "}"
        )
        markers_js_parts.append(marker)

    markers_js = "[" + ",".join(markers_js_parts) + "]"
    min_lon, min_lat, max_lon, max_lat = occurrences.total_bounds

    map_div = render_template(
        "occurrence_map.html.j2",
        title=title,
        years=_year_range(event_dates),
        obs_count=len(markers_js_parts),
        legend=list(palette.values()),
    )

    map_script = render_template(
        "occurrence_map_script.html.j2",
        markers_json=markers_js,
        bounds=[[min_lat, min_lon], [max_lat, max_lon]],
    )

    return (map_div, map_script)


def render_page(title: str, map_div: str, map_script: str) -> str:
    """Wrap the map fragments in a standalone HTML document."""
    return render_template("page.html.j2", title=title, map_div=map_div, map_script=map_script)
