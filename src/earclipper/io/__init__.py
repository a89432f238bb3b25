"""Polygon file I/O layer for earclipper.

This module handles reading polygon files and writing triangle files.
Documents are JSON validated with Pydantic, kept apart from the domain
models by the converter module.

Key classes:
- PolygonReader: Load polygon files and extract polygons
- TriangleWriter: Save triangulation results
"""

from earclipper.io.reader import PolygonReader
from earclipper.io.writer import TriangleWriter

__all__ = [
    "PolygonReader",
    "TriangleWriter",
]
