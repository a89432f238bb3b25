"""Converters between polygon file documents and domain models.

Polygon files are JSON documents validated with Pydantic models. This
module defines those models and converts them to and from the domain
types (Polygon, Point, Triangle).
"""

from typing import Any

from pydantic import BaseModel, Field

from earclipper.domain import Point, Polygon, Triangle, group_triangles

Coordinate = tuple[float, float]


class PolygonRecord(BaseModel):
    """One polygon as stored in an input file."""

    name: str | None = None
    vertices: list[Coordinate]


class PolygonDocument(BaseModel):
    """Input file layout: a list of named polygons."""

    polygons: list[PolygonRecord]


class TriangulatedPolygonRecord(BaseModel):
    """Triangles produced for one polygon."""

    name: str
    triangles: list[tuple[Coordinate, Coordinate, Coordinate]]
    area: float


class ErrorRecord(BaseModel):
    """A polygon that could not be triangulated."""

    name: str
    error: str
    error_type: str


class TriangleDocument(BaseModel):
    """Output file layout."""

    polygons: list[TriangulatedPolygonRecord] = Field(default_factory=list)
    errors: list[ErrorRecord] = Field(default_factory=list)


def parse_document(data: Any, default_name: str) -> PolygonDocument:
    """Validate raw JSON data as a polygon document.

    A bare list of [x, y] pairs is accepted as a single polygon named
    ``default_name``.

    Raises:
        pydantic.ValidationError: If the data does not match either layout
    """
    if isinstance(data, list):
        data = {"polygons": [{"name": default_name, "vertices": data}]}
    return PolygonDocument.model_validate(data)


def record_to_polygon(record: PolygonRecord, index: int) -> Polygon:
    """Convert a file record to a domain Polygon.

    Unnamed polygons are named after their position in the file.
    """
    name = record.name if record.name is not None else f"polygon_{index}"
    return Polygon(points=[Point(x, y) for x, y in record.vertices], name=name)


def polygon_to_record(polygon: Polygon) -> PolygonRecord:
    return PolygonRecord(name=polygon.name, vertices=[p.to_tuple() for p in polygon.points])


def triangles_to_record(name: str, points: list[Point]) -> TriangulatedPolygonRecord:
    """Convert a flat triangle point list to an output record.

    Args:
        name: Polygon name
        points: Flat triangle list, three points per triangle

    Returns:
        Output record with the total triangle area
    """
    triangles: list[Triangle] = group_triangles(points)
    return TriangulatedPolygonRecord(
        name=name,
        triangles=[(t.a.to_tuple(), t.b.to_tuple(), t.c.to_tuple()) for t in triangles],
        area=sum(t.area() for t in triangles),
    )


def record_to_triangles(record: TriangulatedPolygonRecord) -> list[Point]:
    """Inverse of triangles_to_record, back to a flat point list."""
    return [Point(x, y) for triangle in record.triangles for x, y in triangle]
