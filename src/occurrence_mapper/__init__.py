"""Occurrence Mapper - GBIF species occurrences on an interactive map.

Architecture::

    datasources/   External APIs (GBIF occurrence search, taxon lookup)
    renderers/     Pure data → HTML (species palette, Leaflet map page)
    flows/         Prefect orchestration (prepare → render → write)
    services/      Shared utilities (HTTP client with retry)

Data flow: datasources/gbif (GeoDataFrame) → renderers → occurrence_map.html
"""

__version__ = "0.1.0"

from occurrence_mapper.config import Settings
from occurrence_mapper.errors import (
    DataSourceUnavailable,
    InvalidTaxonKey,
    OccurrenceMapperError,
)
from occurrence_mapper.schemas import OccurrenceQuery

__all__ = [
    "DataSourceUnavailable",
    "InvalidTaxonKey",
    "OccurrenceMapperError",
    "OccurrenceQuery",
    "Settings",
    "__version__",
]
