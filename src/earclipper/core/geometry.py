"""Geometric predicates for ear clipping.

This module provides the mathematical utilities the triangulator is built on:
- Spanned-area sign (orientation of three points)
- Signed area and winding of a polygon (shoelace formula)
- Point-in-triangle testing (inside or on the boundary)
- Point-in-polygon testing (ray casting algorithm)
- Wrap-around index arithmetic for closed vertex lists

All functions are pure, stateless, and designed for use in parallel processing.
"""

from collections.abc import Sequence

from earclipper.domain import Point


def previous_index(index: int, count: int) -> int:
    """Index of the previous vertex in a closed list of ``count`` vertices."""
    return (index - 1 + count) % count


def next_index(index: int, count: int) -> int:
    """Index of the next vertex in a closed list of ``count`` vertices."""
    return (index + 1) % count


def spanned_area(p1: Point, p2: Point, p3: Point) -> float:
    """Twice the area spanned by three points, signed.

    The value is positive when p1, p2, p3 turn clockwise (y axis up) and
    negative when they turn counter-clockwise.

    Examples:
        >>> spanned_area(Point(0.0, 0.0), Point(0.0, 1.0), Point(1.0, 0.0))
        1.0
    """
    return p1.x * (p3.y - p2.y) + p2.x * (p1.y - p3.y) + p3.x * (p2.y - p1.y)


def spanned_area_sign(p1: Point, p2: Point, p3: Point) -> int:
    """Sign of the spanned area of three points.

    Returns:
        1 for a clockwise turn, -1 for a counter-clockwise turn, 0 if collinear
    """
    area = spanned_area(p1, p2, p3)
    if area > 0:
        return 1
    if area < 0:
        return -1
    return 0


def is_collinear(p1: Point, p2: Point, p3: Point) -> bool:
    return spanned_area_sign(p1, p2, p3) == 0


def is_convex_turn(previous: Point, current: Point, following: Point) -> bool:
    """Check whether a vertex is convex under clockwise winding.

    Collinear vertices count as convex.
    """
    return spanned_area_sign(previous, current, following) >= 0


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> p1 = Point(0.0, 0.0)
        >>> p2 = Point(1.0, 0.0)
        >>> p3 = Point(1.0, 1.0)
        >>> p4 = Point(0.0, 1.0)
        >>> signed_area([p1, p2, p3, p4])  # CCW square
        1.0
        >>> signed_area([p1, p4, p3, p2])  # CW square
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def is_clockwise(points: Sequence[Point]) -> bool:
    """Check whether a polygon is listed in clockwise order.

    A zero-area polygon is not clockwise.
    """
    return signed_area(points) < 0


def all_collinear(points: Sequence[Point]) -> bool:
    """Check whether all points lie on one line (or coincide).

    Repeated points are ignored when choosing the reference line, so a
    polygon whose vertices are each doubled is still judged by its shape.
    """
    if not points:
        return True

    origin = points[0]
    other = next((p for p in points if p != origin), None)
    if other is None:
        return True

    return all(spanned_area_sign(origin, other, p) == 0 for p in points)


def point_in_triangle(point: Point, a: Point, b: Point, c: Point) -> bool:
    """Check whether a point lies inside or on the boundary of a triangle.

    Tests the spanned-area sign of the point against each edge. The point is
    inside-or-on when all three signs are non-negative or all three are
    non-positive, which covers both vertex orders and collinear cases.

    Args:
        point: The point to test
        a: First triangle vertex
        b: Second triangle vertex
        c: Third triangle vertex

    Returns:
        True if the point is inside or on the triangle, False otherwise

    Examples:
        >>> a, b, c = Point(0.0, 0.0), Point(0.0, 2.0), Point(2.0, 0.0)
        >>> point_in_triangle(Point(0.5, 0.5), a, b, c)
        True
        >>> point_in_triangle(Point(0.0, 1.0), a, b, c)  # On an edge
        True
        >>> point_in_triangle(Point(2.0, 2.0), a, b, c)
        False
    """
    sign1 = spanned_area_sign(a, b, point)
    sign2 = spanned_area_sign(b, c, point)
    sign3 = spanned_area_sign(c, a, point)

    if sign1 >= 0 and sign2 >= 0 and sign3 >= 0:
        return True
    return sign1 <= 0 and sign2 <= 0 and sign3 <= 0


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts intersections
    with polygon edges. Odd number of intersections = inside, even = outside.

    Args:
        point: The point to test
        polygon: List of points forming the polygon boundary

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> p1 = Point(0.0, 0.0)
        >>> p2 = Point(2.0, 0.0)
        >>> p3 = Point(2.0, 2.0)
        >>> p4 = Point(0.0, 2.0)
        >>> square = [p1, p2, p3, p4]
        >>> point_in_polygon(Point(1.0, 1.0), square)  # Center
        True
        >>> point_in_polygon(Point(3.0, 3.0), square)  # Outside
        False
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        # Check if ray from point intersects edge (j, i)
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside
