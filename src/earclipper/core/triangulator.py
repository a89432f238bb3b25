"""Ear-clipping triangulation of simple polygons.

Decomposes a simple, hole-free polygon into triangles by repeatedly cutting
"ears": convex vertices whose triangle with their two neighbors contains no
concave vertex. Collinear vertices are pruned as they appear so that zero-area
slivers are never emitted.

The vertex list is normalized to clockwise order and reclassified from scratch
on every pass. Each pass is O(n), so a full triangulation is O(n^2).

Key components:
- classify_vertices: Tag each vertex CONVEX or CONCAVE
- is_ear_tip: Ear validity test against the concave vertices
- cut_ear_tip: Emit an ear and prune collinear neighbors
- EarClippingTriangulator: Stateless triangulator with an iteration cap
- compute_triangles: Functional entry point
"""

import logging
from collections.abc import Sequence
from typing import Protocol

from earclipper.config import TriangulationConfig
from earclipper.core.geometry import (
    all_collinear,
    is_clockwise,
    is_collinear,
    is_convex_turn,
    next_index,
    point_in_triangle,
    previous_index,
)
from earclipper.domain import (
    Point,
    PointLike,
    VertexClassification,
    VertexType,
    as_points,
)
from earclipper.exceptions import InvalidPolygonError, NonTerminatingError

logger = logging.getLogger(__name__)


class TriangulationAlgorithm(Protocol):
    """Anything that turns a polygon into a flat triangle list."""

    def compute_triangles(self, vertices: Sequence[PointLike]) -> list[Point]:
        """Triangulate a polygon.

        Returns:
            Flat list of points where every three consecutive points form
            a triangle
        """
        ...


def ensure_clockwise(vertices: list[Point]) -> bool:
    """Reverse the vertex list in place unless it is already clockwise.

    Args:
        vertices: Working vertex list, modified in place

    Returns:
        True if the list was reversed
    """
    if is_clockwise(vertices):
        return False
    vertices.reverse()
    return True


def classify_vertices(vertices: list[Point]) -> VertexClassification:
    """Normalize winding and tag every vertex as convex or concave.

    Args:
        vertices: Working vertex list; reversed in place if not clockwise

    Returns:
        Tags aligned with the (possibly reversed) list plus the concave count
    """
    ensure_clockwise(vertices)

    count = len(vertices)
    types: list[VertexType] = []
    concave_count = 0

    for index in range(count):
        previous_vertex = vertices[previous_index(index, count)]
        next_vertex = vertices[next_index(index, count)]

        if is_convex_turn(previous_vertex, vertices[index], next_vertex):
            types.append(VertexType.CONVEX)
        else:
            types.append(VertexType.CONCAVE)
            concave_count += 1

    return VertexClassification(types=tuple(types), concave_count=concave_count)


def is_any_concave_vertex_in_triangle(
    vertices: Sequence[Point],
    classification: VertexClassification,
    previous: int,
    tip: int,
    following: int,
) -> bool:
    """Check whether a concave vertex lies inside or on the triangle.

    The triangle's own three vertices are skipped by index. Only concave
    vertices can invalidate an ear, so convex ones are not tested.
    """
    a, b, c = vertices[previous], vertices[tip], vertices[following]

    for index, vertex in enumerate(vertices):
        if index in (previous, tip, following):
            continue
        if not classification.is_concave(index):
            continue
        if point_in_triangle(vertex, a, b, c):
            return True

    return False


def is_ear_tip(
    vertices: Sequence[Point],
    index: int,
    classification: VertexClassification,
) -> bool:
    """Check whether a vertex can be clipped as an ear.

    Args:
        vertices: Clockwise working vertex list
        index: Candidate ear tip
        classification: Tags for the current state of ``vertices``

    Returns:
        True if the vertex is convex and no other concave vertex lies
        inside or on its triangle
    """
    if classification.is_concave(index):
        return False

    # Without concave vertices every vertex is an ear
    if classification.is_convex_polygon:
        return True

    count = len(vertices)
    return not is_any_concave_vertex_in_triangle(
        vertices,
        classification,
        previous_index(index, count),
        index,
        next_index(index, count),
    )


def find_ear_tip(
    vertices: Sequence[Point],
    classification: VertexClassification,
) -> int | None:
    """Index of the first ear tip in vertex order, or None if there is none."""
    for index in range(len(vertices)):
        if is_ear_tip(vertices, index, classification):
            return index
    return None


def is_collinear_at(vertices: Sequence[Point], index: int) -> bool:
    """Check whether a vertex is collinear with its two neighbors."""
    count = len(vertices)
    return is_collinear(
        vertices[previous_index(index, count)],
        vertices[index],
        vertices[next_index(index, count)],
    )


def remove_collinear_neighbors(vertices: list[Point], cut_index: int) -> int:
    """Prune neighbors of a removed ear that became collinear.

    Checks the vertex that moved into the cut position first. If it was
    removed and more than three vertices remain, its new previous neighbor
    is checked too; otherwise only the previous neighbor of the cut position
    is checked.

    Args:
        vertices: Working vertex list with the ear tip already removed
        cut_index: Index the ear tip occupied before removal

    Returns:
        Number of vertices removed (0, 1 or 2)
    """
    check_next = cut_index % len(vertices)
    check_previous = previous_index(check_next, len(vertices))

    if is_collinear_at(vertices, check_next):
        del vertices[check_next]

        if len(vertices) > 3:
            check_previous = previous_index(check_next, len(vertices))
            if is_collinear_at(vertices, check_previous):
                del vertices[check_previous]
                return 2
        return 1

    if is_collinear_at(vertices, check_previous):
        del vertices[check_previous]
        return 1

    return 0


def cut_ear_tip(vertices: list[Point], index: int, triangles: list[Point]) -> bool:
    """Clip the ear at ``index``.

    Appends the triangle (previous, tip, next) to ``triangles`` unless it is
    collinear, removes the tip, then prunes collinear neighbors.

    Args:
        vertices: Working vertex list, modified in place
        index: Ear tip to remove
        triangles: Flat output list, appended to in place

    Returns:
        True if a triangle was emitted
    """
    count = len(vertices)
    previous = previous_index(index, count)
    following = next_index(index, count)

    emitted = not is_collinear(vertices[previous], vertices[index], vertices[following])
    if emitted:
        triangles.append(vertices[previous])
        triangles.append(vertices[index])
        triangles.append(vertices[following])

    del vertices[index]

    if len(vertices) >= 3:
        removed = remove_collinear_neighbors(vertices, index)
        if removed:
            logger.debug("Pruned %d collinear vertices after cutting ear %d", removed, index)

    return emitted


class EarClippingTriangulator:
    """Triangulates simple polygons without holes by ear clipping.

    The triangulator holds only immutable configuration; all working state
    lives in local variables of ``compute_triangles``, so one instance can be
    shared across threads and repeated calls.

    Example:
        triangulator = EarClippingTriangulator()
        points = triangulator.compute_triangles([(0, 0), (10, 0), (10, 10), (0, 10)])
        # len(points) == 6
    """

    def __init__(self, config: TriangulationConfig | None = None) -> None:
        """Initialize the triangulator.

        Args:
            config: Triangulation settings (defaults when None)
        """
        self.config = config or TriangulationConfig()

    def compute_triangles(self, vertices: Sequence[PointLike]) -> list[Point]:
        """Triangulate a simple polygon.

        Args:
            vertices: Polygon boundary as Points or (x, y) pairs, any winding

        Returns:
            Flat list of points; every three consecutive points form a
            triangle in clockwise order. A 3-vertex polygon is returned
            unchanged. All-collinear input yields an empty list.

        Raises:
            InvalidPolygonError: If fewer than 3 vertices are given
            NonTerminatingError: If no ear can be found or the iteration
                cap is exceeded (self-intersecting or duplicate-point input)

        Self-intersecting input is not detected. A polygon with crossing edges
        may still yield (overlapping) triangles instead of raising.
        """
        points = as_points(vertices)
        vertex_count = len(points)

        if vertex_count < 3:
            raise InvalidPolygonError(vertex_count)

        if all_collinear(points):
            logger.warning("All %d vertices are collinear, no triangles emitted", vertex_count)
            return []

        if vertex_count == 3:
            return points

        cap = self.config.iteration_cap(vertex_count)
        working = list(points)
        triangles: list[Point] = []
        iterations = 0

        while len(working) >= 3:
            if iterations >= cap:
                raise NonTerminatingError(vertex_count, iterations, len(working))
            iterations += 1

            classification = classify_vertices(working)
            ear = find_ear_tip(working, classification)
            if ear is None:
                raise NonTerminatingError(vertex_count, iterations, len(working))

            cut_ear_tip(working, ear, triangles)

        logger.debug(
            "Triangulated %d vertices into %d triangles in %d iterations",
            vertex_count,
            len(triangles) // 3,
            iterations,
        )
        return triangles


def compute_triangles(
    vertices: Sequence[PointLike],
    max_iterations: int | None = None,
) -> list[Point]:
    """Triangulate a simple polygon by ear clipping.

    Convenience wrapper around EarClippingTriangulator.

    Args:
        vertices: Polygon boundary as Points or (x, y) pairs
        max_iterations: Cap on clipping passes (None = vertex count squared)

    Returns:
        Flat list of points, three per triangle
    """
    config = TriangulationConfig(max_iterations=max_iterations)
    return EarClippingTriangulator(config).compute_triangles(vertices)
