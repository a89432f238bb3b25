"""Polygon sources for common shapes.

Generates outline vertices that can be fed straight into the triangulator.
"""

import math

from earclipper.domain import Point
from earclipper.exceptions import InvalidPolygonError, ShapeError

LOW_RESOLUTION = 15
MEDIUM_RESOLUTION = 30
HIGH_RESOLUTION = 50
DEFAULT_RESOLUTION = HIGH_RESOLUTION


def ellipse_vertices(
    radius_a: float,
    radius_b: float,
    resolution: int = DEFAULT_RESOLUTION,
    center: tuple[float, float] = (0.0, 0.0),
) -> list[Point]:
    """Sample the outline of an axis-aligned ellipse.

    Points are placed at evenly spaced angles, counter-clockwise, starting
    on the positive x axis.

    Args:
        radius_a: Radius along the x axis
        radius_b: Radius along the y axis
        resolution: Number of outline vertices
        center: Ellipse center

    Returns:
        ``resolution`` outline points

    Raises:
        InvalidPolygonError: If resolution is below 3
        ShapeError: If a radius is not positive
    """
    if resolution < 3:
        raise InvalidPolygonError(resolution)
    if radius_a <= 0 or radius_b <= 0:
        raise ShapeError(f"ellipse radii must be positive, got {radius_a} and {radius_b}")

    cx, cy = center
    points: list[Point] = []
    for i in range(resolution):
        theta = 2.0 * math.pi * i / resolution
        points.append(Point(cx + radius_a * math.cos(theta), cy + radius_b * math.sin(theta)))
    return points


def regular_polygon(
    sides: int,
    radius: float,
    center: tuple[float, float] = (0.0, 0.0),
    rotation: float = 0.0,
) -> list[Point]:
    """Vertices of a regular polygon inscribed in a circle.

    Args:
        sides: Number of sides
        radius: Circumradius
        center: Polygon center
        rotation: Angle of the first vertex in radians

    Returns:
        ``sides`` points in counter-clockwise order
    """
    if sides < 3:
        raise InvalidPolygonError(sides)
    if radius <= 0:
        raise ShapeError(f"radius must be positive, got {radius}")

    cx, cy = center
    step = 2.0 * math.pi / sides
    return [
        Point(cx + radius * math.cos(rotation + i * step), cy + radius * math.sin(rotation + i * step))
        for i in range(sides)
    ]
