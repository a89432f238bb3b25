"""Triangle writer for saving triangulation results.

This module provides the TriangleWriter class for writing triangle lists
to a JSON document next to the input polygon file.
"""

from pathlib import Path

from earclipper.domain import Point
from earclipper.exceptions import PolygonSaveError
from earclipper.io.converter import ErrorRecord, TriangleDocument, triangles_to_record


class TriangleWriter:
    """Collects triangulation results and writes them as JSON.

    Example:
        writer = TriangleWriter(Path("shapes-triangles.json"))
        writer.add_triangles("square", points)
        writer.save()
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the triangle writer.

        Args:
            output_path: Path where the document will be saved
        """
        self._output_path = output_path
        self._document = TriangleDocument()

    @property
    def document(self) -> TriangleDocument:
        return self._document

    def add_triangles(self, name: str, points: list[Point]) -> None:
        """Add the triangles of one polygon.

        Args:
            name: Polygon name
            points: Flat triangle list, three points per triangle
        """
        self._document.polygons.append(triangles_to_record(name, points))

    def add_error(self, name: str, error: str, error_type: str) -> None:
        """Record a polygon that failed to triangulate."""
        self._document.errors.append(ErrorRecord(name=name, error=error, error_type=error_type))

    def save(self) -> None:
        """Write the document to the output path.

        Raises:
            PolygonSaveError: If the file cannot be written
        """
        try:
            self._output_path.write_text(
                self._document.model_dump_json(indent=2), encoding="utf-8"
            )
        except OSError as e:
            raise PolygonSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_output_path(input_path: Path) -> Path:
        """Generate output path with the triangles naming convention.

        Converts: shapes.json -> shapes-triangles.json

        Args:
            input_path: Original polygon file path

        Returns:
            Path with -triangles suffix before extension
        """
        stem = input_path.stem
        suffix = input_path.suffix or ".json"
        return input_path.parent / f"{stem}-triangles{suffix}"
