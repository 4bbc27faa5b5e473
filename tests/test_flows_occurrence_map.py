"""
Tests for the occurrence map flow.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from occurrence_mapper.datasources.gbif import to_point_geometries
from occurrence_mapper.errors import InvalidTaxonKey
from occurrence_mapper.flows import occurrence_map
from occurrence_mapper.schemas import OccurrenceQuery

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE_ROWS = [
    {
        "genus": "Bombus",
        "species": "Bombus terrestris",
        "family": "Apidae",
        "eventDate": "2021-06-12",
        "longitude": -3.7,
        "latitude": 40.4,
    },
    {
        "genus": "Bombus",
        "species": "Bombus pascuorum",
        "family": "Apidae",
        "eventDate": "2022-07-01",
        "longitude": 2.35,
        "latitude": 48.85,
    },
]


class TestPrepareOccurrences:
    """Task wrapper around gbif.prepare."""

    @patch("occurrence_mapper.flows.occurrence_map.gbif.prepare")
    def test_delegates_to_prepare(self, mock_prepare: Mock) -> None:
        gdf = to_point_geometries(SAMPLE_ROWS)
        mock_prepare.return_value = gdf
        client = Mock()
        query = OccurrenceQuery(taxon_key=3240854, limit=10)

        result = occurrence_map.prepare_occurrences(query, client=client)

        assert result is gdf
        mock_prepare.assert_called_once_with(query, client=client)


class TestRenderMap:
    """Rendering the page."""

    def test_render_map(self) -> None:
        html = occurrence_map.render_map(to_point_geometries(SAMPLE_ROWS), title="Bumblebees")
        assert "<title>Bumblebees</title>" in html
        assert "Bombus pascuorum" in html


class TestWriteMap:
    """Writing the page to disk."""

    def test_creates_parent_dirs(self, tmp_path: Path) -> None:
        output = tmp_path / "maps" / "bombus.html"
        result = occurrence_map.write_map("<html></html>", output)
        assert result == output
        assert output.read_text(encoding="utf-8") == "<html></html>"


class TestBuildOccurrenceMap:
    """The full flow."""

    @patch("occurrence_mapper.flows.occurrence_map.gbif.prepare")
    def test_writes_map(self, mock_prepare: Mock, tmp_path: Path) -> None:
        mock_prepare.return_value = to_point_geometries(SAMPLE_ROWS)
        output = tmp_path / "map.html"

        result = occurrence_map.build_occurrence_map(
            taxon_key=3240854, limit=50, output_path=output
        )

        assert result == {"occurrences": 2, "output": str(output)}
        html = output.read_text(encoding="utf-8")
        assert "Species Occurrences (taxon 3240854)" in html
        assert "Bombus terrestris" in html

        query = mock_prepare.call_args.args[0]
        assert query == OccurrenceQuery(taxon_key=3240854, require_coordinates=True, limit=50)

    @patch("occurrence_mapper.flows.occurrence_map.gbif.prepare")
    def test_uses_api_base(self, mock_prepare: Mock, tmp_path: Path) -> None:
        mock_prepare.return_value = to_point_geometries([])
        occurrence_map.build_occurrence_map(
            taxon_key=1,
            output_path=tmp_path / "map.html",
            api_base="https://gbif.example.org/v1",
        )
        client = mock_prepare.call_args.kwargs["client"]
        assert client.api_base == "https://gbif.example.org/v1"

    @patch("occurrence_mapper.flows.occurrence_map.gbif.prepare")
    def test_empty_result_still_writes_page(self, mock_prepare: Mock, tmp_path: Path) -> None:
        mock_prepare.return_value = to_point_geometries([])
        output = tmp_path / "map.html"

        result = occurrence_map.build_occurrence_map(taxon_key=1, output_path=output)

        assert result["occurrences"] == 0
        assert "No occurrences" in output.read_text(encoding="utf-8")

    @patch("occurrence_mapper.flows.occurrence_map.gbif.prepare")
    def test_errors_propagate(self, mock_prepare: Mock, tmp_path: Path) -> None:
        mock_prepare.side_effect = InvalidTaxonKey("Unknown GBIF taxon key: 42")
        output = tmp_path / "map.html"

        with pytest.raises(InvalidTaxonKey):
            occurrence_map.build_occurrence_map(taxon_key=42, output_path=output)
        assert not output.exists()
