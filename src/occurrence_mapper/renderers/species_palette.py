"""Species visual styling: colors, initials, and palette assignment."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import geopandas as gpd

UNKNOWN_SPECIES = "Unknown"
UNKNOWN_COLOR = "#888888"

_SPECIES_COLORS = [
    "#e6194b",  # red
    "#3cb44b",  # green
    "#4363d8",  # blue
    "#f58231",  # orange
    "#911eb4",  # purple
    "#42d4f4",  # cyan
    "#f032e6",  # magenta
    "#bfef45",  # lime
    "#fabed4",  # pink
    "#469990",  # teal
    "#dcbeff",  # lavender
    "#9a6324",  # brown
    "#ffe119",  # yellow
    "#aaffc3",  # mint
    "#808000",  # olive
]


@dataclass
class SpeciesStyle:
    """Visual style for a species on the map and in the legend."""

    color: str
    initials: str
    species: str
    count: int


def species_label(value: object) -> str:
    """Legend/colour key for a species cell; blanks and NaN become Unknown."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    return UNKNOWN_SPECIES


def build_species_palette(occurrences: gpd.GeoDataFrame) -> dict[str, SpeciesStyle]:
    """Assign a color and 2-letter abbreviation to each species.

    Species are ranked by occurrence count (ties broken by name), so the
    most common species always get the first colors. Records without a
    species name share the grey ``Unknown`` entry.
    """
    counts = Counter(species_label(v) for v in occurrences["species"])
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))

    palette: dict[str, SpeciesStyle] = {}
    i = 0
    for name, count in ranked:
        if name == UNKNOWN_SPECIES:
            color = UNKNOWN_COLOR
        else:
            color = _SPECIES_COLORS[i % len(_SPECIES_COLORS)]
            i += 1
        palette[name] = SpeciesStyle(
            color=color,
            initials=species_initials(name),
            species=name,
            count=count,
        )
    return palette


def species_initials(name: str) -> str:
    """Derive a 2-letter abbreviation, e.g. 'Bombus terrestris' -> 'BT'."""
    words = name.split()
    if len(words) >= 2:
        return (words[0][0] + words[-1][0]).upper()
    if len(name) >= 2:
        return name[:2].upper()
    return name.upper()
