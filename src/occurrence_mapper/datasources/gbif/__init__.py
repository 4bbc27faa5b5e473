"""GBIF occurrence data source.

Public API:
  - client: GbifClient, API_BASE, MAX_PAGE_SIZE
  - occurrences: prepare, fetch_occurrences, project_records, to_point_geometries
"""

from occurrence_mapper.datasources.gbif.client import API_BASE, MAX_PAGE_SIZE, GbifClient
from occurrence_mapper.datasources.gbif.occurrences import (
    fetch_occurrences,
    prepare,
    project_records,
    to_point_geometries,
)

__all__ = [
    "API_BASE",
    "MAX_PAGE_SIZE",
    "GbifClient",
    "fetch_occurrences",
    "prepare",
    "project_records",
    "to_point_geometries",
]
