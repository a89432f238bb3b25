"""Unit tests for the polygon file I/O layer.

Tests for PolygonReader, TriangleWriter, and converter functions.
"""

import json
from pathlib import Path

import pytest

from earclipper.domain import Point, Polygon
from earclipper.exceptions import PolygonFormatError, PolygonLoadError, PolygonSaveError
from earclipper.io.converter import (
    PolygonRecord,
    TriangleDocument,
    parse_document,
    polygon_to_record,
    record_to_polygon,
    record_to_triangles,
    triangles_to_record,
)
from earclipper.io.reader import PolygonReader
from earclipper.io.writer import TriangleWriter


@pytest.fixture
def polygon_file(tmp_path: Path) -> Path:
    """Write a two-polygon document, the second one unnamed."""
    path = tmp_path / "shapes.json"
    path.write_text(
        json.dumps(
            {
                "polygons": [
                    {"name": "square", "vertices": [[0, 0], [10, 0], [10, 10], [0, 10]]},
                    {"vertices": [[0, 0], [4, 0], [0, 3]]},
                ]
            }
        )
    )
    return path


class TestConverter:
    """Tests for document conversion helpers."""

    def test_bare_list_becomes_single_polygon(self):
        document = parse_document([[0, 0], [1, 0], [0, 1]], default_name="tri")
        assert len(document.polygons) == 1
        assert document.polygons[0].name == "tri"
        assert document.polygons[0].vertices == [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]

    def test_unnamed_record_gets_positional_name(self):
        record = PolygonRecord(vertices=[(0, 0), (1, 0), (0, 1)])
        polygon = record_to_polygon(record, 4)
        assert polygon.name == "polygon_4"
        assert polygon.points[1] == Point(1.0, 0.0)

    def test_polygon_record_roundtrip(self):
        polygon = Polygon.from_pairs([(0, 0), (2, 0), (0, 2)], name="p")
        assert record_to_polygon(polygon_to_record(polygon), 0) == polygon

    def test_triangles_record_carries_area(self):
        points = [Point(0, 0), Point(0, 10), Point(10, 10), Point(0, 0), Point(10, 10), Point(10, 0)]
        record = triangles_to_record("square", points)
        assert len(record.triangles) == 2
        assert record.area == pytest.approx(100.0)
        assert record_to_triangles(record) == points


class TestPolygonReader:
    """Tests for PolygonReader class."""

    def test_load_nonexistent_file(self):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = PolygonReader(Path("nonexistent.json"))
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_polygon_count_before_load(self):
        """Test accessing polygon_count before loading raises RuntimeError."""
        reader = PolygonReader(Path("shapes.json"))
        with pytest.raises(RuntimeError, match="Polygons not loaded"):
            _ = reader.polygon_count

    def test_iter_polygons_before_load(self):
        reader = PolygonReader(Path("shapes.json"))
        with pytest.raises(RuntimeError, match="Polygons not loaded"):
            list(reader.iter_polygons())

    def test_read_document(self, polygon_file: Path):
        with PolygonReader(polygon_file) as reader:
            assert reader.polygon_count == 2
            polygons = reader.read_all()

        assert [p.name for p in polygons] == ["square", "polygon_1"]
        assert len(polygons[0]) == 4

    def test_close_drops_document(self, polygon_file: Path):
        reader = PolygonReader(polygon_file)
        reader.load()
        reader.close()
        with pytest.raises(RuntimeError):
            _ = reader.polygon_count

    def test_bare_list_named_after_file(self, tmp_path: Path):
        path = tmp_path / "arrow.json"
        path.write_text("[[0, 0], [10, 5], [0, 10], [3, 5]]")
        with PolygonReader(path) as reader:
            polygons = reader.read_all()
        assert polygons[0].name == "arrow"

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(PolygonLoadError):
            PolygonReader(path).load()

    def test_wrong_layout(self, tmp_path: Path):
        path = tmp_path / "wrong.json"
        path.write_text(json.dumps({"polygons": [{"vertices": [[0, 0, 0]]}]}))
        with pytest.raises(PolygonFormatError) as exc_info:
            PolygonReader(path).load()
        assert exc_info.value.path == str(path)


class TestTriangleWriter:
    """Tests for TriangleWriter class."""

    def test_get_output_path(self):
        assert TriangleWriter.get_output_path(Path("/data/shapes.json")) == Path(
            "/data/shapes-triangles.json"
        )

    def test_get_output_path_without_suffix(self):
        assert TriangleWriter.get_output_path(Path("shapes")) == Path("shapes-triangles.json")

    def test_save_document(self, tmp_path: Path):
        output = tmp_path / "out.json"
        writer = TriangleWriter(output)
        writer.add_triangles("tri", [Point(0, 0), Point(0, 4), Point(3, 0)])
        writer.add_error("bad", "Polygon needs at least 3 vertices, got 2", "InvalidPolygonError")
        writer.save()

        document = TriangleDocument.model_validate_json(output.read_text())
        assert document.polygons[0].name == "tri"
        assert document.polygons[0].area == pytest.approx(6.0)
        assert document.errors[0].error_type == "InvalidPolygonError"

    def test_save_to_missing_directory(self, tmp_path: Path):
        writer = TriangleWriter(tmp_path / "missing" / "out.json")
        with pytest.raises(PolygonSaveError):
            writer.save()
