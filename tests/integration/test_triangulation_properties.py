"""Integration tests checking structural properties of triangulations.

Every shape here is a simple polygon, so its triangulation must:
- use only input vertices
- cover exactly the polygon area
- emit clockwise, non-degenerate triangles that lie inside the polygon
- use at most n - 2 triangles, exactly n - 2 when no ear turns out collinear
"""

import math

import pytest

from earclipper.core.geometry import point_in_polygon, point_in_triangle, signed_area
from earclipper.core.shapes import ellipse_vertices, regular_polygon
from earclipper.core.triangulator import compute_triangles
from earclipper.domain import Point, as_points, group_triangles


def _star(points: int, outer: float, inner: float) -> list[Point]:
    vertices = []
    for i in range(points * 2):
        radius = outer if i % 2 == 0 else inner
        angle = math.pi / 2 + i * math.pi / points
        vertices.append(Point(radius * math.cos(angle), radius * math.sin(angle)))
    return vertices


SHAPES = {
    "square": as_points([(0, 0), (10, 0), (10, 10), (0, 10)]),
    "l_shape": as_points([(0, 0), (20, 0), (20, 10), (10, 10), (10, 20), (0, 20)]),
    "notch": as_points([(0, 0), (10, 0), (10, 10), (5, 5), (0, 10)]),
    "comb": as_points([
        (0, 0), (30, 0), (30, 20), (25, 20), (25, 5), (20, 5),
        (20, 20), (15, 20), (15, 5), (10, 5), (10, 20), (0, 20),
    ]),
    "star": _star(5, 10.0, 4.0),
    "ellipse": ellipse_vertices(12.0, 7.0, resolution=30),
    "hexagon": regular_polygon(6, 5.0, center=(2.0, -1.0), rotation=0.3),
    "spiral": as_points([
        (0, 0), (10, 0), (10, 10), (2, 10), (2, 4), (6, 4),
        (6, 6), (4, 6), (4, 8), (8, 8), (8, 2), (0, 2),
    ]),
}

# No cut ever leaves three consecutive vertices on a line
NO_COLLINEAR_EARS = {"square", "ellipse", "hexagon", "l_shape", "star"}
# A cut lines up a remaining vertex with its neighbors, which is then pruned
COLLINEAR_EARS = {"notch", "comb"}


@pytest.fixture(params=sorted(SHAPES), ids=sorted(SHAPES))
def shape(request):
    return request.param, SHAPES[request.param]


def _sample_points(vertices: list[Point], steps: int = 23) -> list[Point]:
    """Grid points strictly inside the polygon's bounding box."""
    xs = [p.x for p in vertices]
    ys = [p.y for p in vertices]
    min_x, max_x, min_y, max_y = min(xs), max(xs), min(ys), max(ys)
    samples = []
    for i in range(steps):
        for j in range(steps):
            samples.append(
                Point(
                    min_x + (max_x - min_x) * (i + 0.37) / steps,
                    min_y + (max_y - min_y) * (j + 0.61) / steps,
                )
            )
    return samples


class TestTriangulationProperties:
    """Properties that hold for any simple polygon."""

    def test_only_input_vertices_are_emitted(self, shape):
        _, vertices = shape
        assert set(compute_triangles(vertices)) <= set(vertices)

    def test_triangle_count(self, shape):
        name, vertices = shape
        triangles = group_triangles(compute_triangles(vertices))

        assert 1 <= len(triangles) <= len(vertices) - 2
        if name in NO_COLLINEAR_EARS:
            assert len(triangles) == len(vertices) - 2
        if name in COLLINEAR_EARS:
            assert len(triangles) < len(vertices) - 2

    def test_area_is_preserved(self, shape):
        _, vertices = shape
        triangles = group_triangles(compute_triangles(vertices))

        assert sum(t.area() for t in triangles) == pytest.approx(abs(signed_area(vertices)))

    def test_triangles_are_clockwise_and_non_degenerate(self, shape):
        _, vertices = shape
        for triangle in group_triangles(compute_triangles(vertices)):
            assert triangle.signed_area() < 0

    def test_triangles_lie_inside_polygon(self, shape):
        _, vertices = shape
        for triangle in group_triangles(compute_triangles(vertices)):
            assert point_in_polygon(triangle.centroid(), vertices)

    def test_interior_is_covered(self, shape):
        _, vertices = shape
        triangles = group_triangles(compute_triangles(vertices))

        for sample in _sample_points(vertices):
            if point_in_polygon(sample, vertices):
                assert any(point_in_triangle(sample, t.a, t.b, t.c) for t in triangles)

    def test_input_is_not_modified(self, shape):
        _, vertices = shape
        before = list(vertices)
        compute_triangles(vertices)
        assert vertices == before

    def test_winding_does_not_change_area(self, shape):
        _, vertices = shape
        forward = group_triangles(compute_triangles(vertices))
        backward = group_triangles(compute_triangles(list(reversed(vertices))))

        assert sum(t.area() for t in backward) == pytest.approx(sum(t.area() for t in forward))
