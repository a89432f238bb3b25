"""Triangle output and vertex classification types.

This module defines the value types produced while clipping ears:
- VertexType: Convex/concave tag for a polygon vertex
- VertexClassification: Result of one classification pass
- Triangle: Three points cut from a polygon
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from earclipper.domain.polygon import Point


class VertexType(Enum):
    """Turn direction of a vertex relative to clockwise winding.

    A vertex is CONVEX when the turn formed with its neighbors bends with
    the winding (collinear vertices count as convex), CONCAVE otherwise.
    """

    CONVEX = auto()
    CONCAVE = auto()


@dataclass(frozen=True, slots=True)
class VertexClassification:
    """Vertex tags for one state of the working polygon.

    Produced fresh by every classification pass and passed explicitly to
    the ear test, so no count survives between passes or calls.

    Attributes:
        types: One tag per vertex, aligned with the working vertex list
        concave_count: Number of CONCAVE tags in ``types``
    """

    types: tuple[VertexType, ...]
    concave_count: int

    def __len__(self) -> int:
        return len(self.types)

    def __getitem__(self, index: int) -> VertexType:
        return self.types[index]

    def is_concave(self, index: int) -> bool:
        return self.types[index] is VertexType.CONCAVE

    @property
    def is_convex_polygon(self) -> bool:
        """True when no vertex is concave, so every vertex is an ear."""
        return self.concave_count == 0


@dataclass(frozen=True, slots=True)
class Triangle:
    """A triangle cut from a polygon.

    Attributes:
        a: Previous neighbor of the clipped ear tip
        b: Ear tip
        c: Next neighbor of the clipped ear tip
    """

    a: Point
    b: Point
    c: Point

    def vertices(self) -> tuple[Point, Point, Point]:
        return (self.a, self.b, self.c)

    def signed_area(self) -> float:
        """Signed area, positive for counter-clockwise vertex order."""
        return (
            (self.b.x - self.a.x) * (self.c.y - self.a.y)
            - (self.c.x - self.a.x) * (self.b.y - self.a.y)
        ) / 2.0

    def area(self) -> float:
        return abs(self.signed_area())

    def centroid(self) -> Point:
        return Point(
            (self.a.x + self.b.x + self.c.x) / 3.0,
            (self.a.y + self.b.y + self.c.y) / 3.0,
        )

    def to_list(self) -> list[list[float]]:
        """Serialize to nested [x, y] lists for JSON output."""
        return [[p.x, p.y] for p in self.vertices()]

    def to_dict(self) -> dict[str, Any]:
        return {"vertices": [p.to_dict() for p in self.vertices()]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Triangle":
        a, b, c = (Point.from_dict(p) for p in data["vertices"])
        return cls(a, b, c)


def group_triangles(points: Sequence[Point]) -> list[Triangle]:
    """Group a flat triangle point list into Triangle values.

    Args:
        points: Flat list whose length is a multiple of 3

    Returns:
        One Triangle per consecutive triple

    Raises:
        ValueError: If the length is not a multiple of 3
    """
    if len(points) % 3 != 0:
        raise ValueError(f"Triangle list length must be a multiple of 3, got {len(points)}")
    return [Triangle(points[i], points[i + 1], points[i + 2]) for i in range(0, len(points), 3)]


def flatten_triangles(triangles: Sequence[Triangle]) -> list[Point]:
    """Inverse of group_triangles."""
    return [p for t in triangles for p in t.vertices()]
