"""Polygon reader for loading JSON polygon files.

This module provides the PolygonReader class for loading polygon files
and converting them into domain models.
"""

import json
from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from earclipper.domain import Polygon
from earclipper.exceptions import PolygonFormatError, PolygonLoadError
from earclipper.io.converter import PolygonDocument, parse_document, record_to_polygon


class PolygonReader:
    """Loads polygon files and extracts domain polygons.

    Example:
        reader = PolygonReader(Path("shapes.json"))
        reader.load()
        for polygon in reader.iter_polygons():
            print(polygon.name)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the polygon reader.

        Args:
            path: Path to the JSON polygon file
        """
        self._path = path
        self._document: PolygonDocument | None = None

    def load(self) -> None:
        """Load and validate the polygon file.

        Raises:
            FileNotFoundError: If the file does not exist
            PolygonLoadError: If the file is not valid JSON
            PolygonFormatError: If the JSON does not match the document layout
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Polygon file not found: {self._path}")

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise PolygonLoadError(str(self._path), str(e)) from e

        try:
            self._document = parse_document(data, default_name=self._path.stem)
        except ValidationError as e:
            raise PolygonFormatError(str(self._path), str(e)) from e

    @property
    def polygon_count(self) -> int:
        """Return number of polygons in the file.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("Polygons not loaded. Call load() first.")

        return len(self._document.polygons)

    def iter_polygons(self) -> Iterator[Polygon]:
        """Iterate over all polygons in file order.

        Yields:
            Polygon domain models

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("Polygons not loaded. Call load() first.")

        for index, record in enumerate(self._document.polygons):
            yield record_to_polygon(record, index)

    def read_all(self) -> list[Polygon]:
        return list(self.iter_polygons())

    def close(self) -> None:
        """Drop the loaded document."""
        self._document = None

    def __enter__(self) -> "PolygonReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
