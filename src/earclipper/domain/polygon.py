"""Core geometric types for polygon representation.

This module defines the fundamental geometric types used throughout earclipper:
- Point: An immutable 2D point
- Polygon: An ordered, closed polygon boundary
- WindingDirection: Enum for polygon winding direction
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class WindingDirection(Enum):
    """Polygon winding direction.

    With the y axis pointing up, a positive shoelace sum means the vertices
    are listed counter-clockwise. Ear clipping normalizes every polygon to
    clockwise order before classifying its vertices.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts. Two points with the same
    coordinates are equal; there is no identity beyond the coordinates.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


PointLike = Point | tuple[float, float] | Sequence[float]


def as_point(value: PointLike) -> Point:
    """Coerce a Point or an (x, y) pair into a Point.

    Args:
        value: Point instance or two-element sequence of numbers

    Returns:
        Point with float coordinates

    Raises:
        ValueError: If a sequence does not hold exactly two coordinates
    """
    if isinstance(value, Point):
        return value
    if len(value) != 2:
        raise ValueError(f"Expected an (x, y) pair, got {len(value)} values")
    return Point(float(value[0]), float(value[1]))


def as_points(values: Iterable[PointLike]) -> list[Point]:
    """Coerce an iterable of points or (x, y) pairs into a list of Points."""
    return [as_point(v) for v in values]


@dataclass
class Polygon:
    """A closed polygon boundary.

    A polygon is an ordered sequence of points; the last point connects back
    to the first. Order encodes winding direction.

    Attributes:
        points: List of points forming the boundary
        name: Optional label used by files and batch processing
    """

    points: list[Point]
    name: str | None = field(default=None)

    def __len__(self) -> int:
        return len(self.points)

    def signed_area(self) -> float:
        """Calculate signed area using shoelace formula.

        The sign of the area indicates winding direction:
        - Positive area: counter-clockwise winding
        - Negative area: clockwise winding

        Returns:
            Signed area of the polygon, 0.0 for fewer than 3 points
        """
        n = len(self.points)
        if n < 3:
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.points[i].x * self.points[j].y
            area -= self.points[j].x * self.points[i].y

        return area / 2.0

    def area(self) -> float:
        """Absolute area of the polygon."""
        return abs(self.signed_area())

    def winding(self) -> WindingDirection | None:
        """Winding direction, or None for a zero-area polygon."""
        area = self.signed_area()
        if area < 0:
            return WindingDirection.CLOCKWISE
        if area > 0:
            return WindingDirection.COUNTER_CLOCKWISE
        return None

    def is_clockwise(self) -> bool:
        return self.winding() is WindingDirection.CLOCKWISE

    def reversed(self) -> "Polygon":
        """Return a copy with the opposite winding direction."""
        return Polygon(points=list(reversed(self.points)), name=self.name)

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the polygon.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.points:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def contains_point(self, x: float, y: float) -> bool:
        """Check if point is inside polygon using ray casting algorithm.

        Casts a ray from the point to the right and counts intersections
        with polygon edges. Odd count means inside, even means outside.

        Args:
            x: X coordinate of point to test
            y: Y coordinate of point to test

        Returns:
            True if point is inside polygon, False otherwise
        """
        n = len(self.points)
        if n < 3:
            return False

        inside = False
        j = n - 1

        for i in range(n):
            xi, yi = self.points[i].x, self.points[i].y
            xj, yj = self.points[j].x, self.points[j].y

            if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
                inside = not inside

            j = i

        return inside

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the polygon
        """
        return {
            "name": self.name,
            "points": [p.to_dict() for p in self.points],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a polygon

        Returns:
            Polygon instance
        """
        points = [Point.from_dict(p) for p in data["points"]]
        return cls(points=points, name=data.get("name"))

    @classmethod
    def from_pairs(cls, pairs: Iterable[PointLike], name: str | None = None) -> "Polygon":
        """Build a polygon from (x, y) pairs."""
        return cls(points=as_points(pairs), name=name)
