"""
Domain models for occurrence mapping.

Pydantic models for the query sent to the occurrence service, plus the
fixed column layout of the prepared (map-ready) dataset.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# =============================================================================
# Prepared dataset layout
# =============================================================================

#: Attribute columns kept from each occurrence record, in output order.
ATTRIBUTE_FIELDS: tuple[str, ...] = ("genus", "species", "family", "eventDate")

#: Coordinate columns, normalised from GBIF's decimalLongitude/decimalLatitude.
COORDINATE_FIELDS: tuple[str, ...] = ("longitude", "latitude")

#: Columns of the prepared GeoDataFrame, in order.
PREPARED_COLUMNS: tuple[str, ...] = (*ATTRIBUTE_FIELDS, "geometry")

#: Longitude/latitude on the WGS84 ellipsoid.
WGS84 = "EPSG:4326"


# =============================================================================
# Query
# =============================================================================


class OccurrenceQuery(BaseModel):
    """A species-occurrence search against the external data source."""

    model_config = {"frozen": True}

    taxon_key: int = Field(..., gt=0, description="GBIF backbone taxon key")
    require_coordinates: bool = Field(default=True, description="Only georeferenced records")
    limit: int = Field(default=100, gt=0, description="Maximum records to return")

    def to_params(self) -> dict[str, Any]:
        """Request parameters for ``/occurrence/search``."""
        return {
            "taxonKey": self.taxon_key,
            "hasCoordinate": "true" if self.require_coordinates else "false",
            "limit": self.limit,
        }
