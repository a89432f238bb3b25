"""Core algorithms for earclipper.

This module contains:

- Geometric predicates (spanned-area sign, signed area, containment)
- The ear-clipping triangulator
- Polygon sources (ellipses, regular polygons)
- Parallel batch processing

All services are designed to be:
- Stateless (safe for use in worker processes)
- Pure (no side effects beyond their explicit outputs)

Key functions:
- compute_triangles: Triangulate a polygon into a flat point list
- classify_vertices: Tag vertices convex or concave
- is_ear_tip: Ear validity test
- spanned_area_sign: Orientation of three points
- signed_area: Polygon area using shoelace formula
- point_in_triangle: Inside-or-on test for a triangle
- point_in_polygon: Test if point is inside polygon

Key classes:
- EarClippingTriangulator: Stateless triangulator with an iteration cap
- BatchProcessor: Parallel triangulation of many polygons
"""

from earclipper.core.geometry import (
    all_collinear,
    is_clockwise,
    is_collinear,
    point_in_polygon,
    point_in_triangle,
    signed_area,
    spanned_area,
    spanned_area_sign,
)
from earclipper.core.processor import (
    BatchProcessor,
    BatchResult,
    PolygonOutcome,
    triangulate_polygon,
)
from earclipper.core.shapes import ellipse_vertices, regular_polygon
from earclipper.core.triangulator import (
    EarClippingTriangulator,
    TriangulationAlgorithm,
    classify_vertices,
    compute_triangles,
    is_ear_tip,
)

__all__ = [
    # Processor classes
    "BatchProcessor",
    "BatchResult",
    # Triangulator classes
    "EarClippingTriangulator",
    "PolygonOutcome",
    "TriangulationAlgorithm",
    # Geometry functions
    "all_collinear",
    "classify_vertices",
    "compute_triangles",
    "ellipse_vertices",
    "is_clockwise",
    "is_collinear",
    "is_ear_tip",
    "point_in_polygon",
    "point_in_triangle",
    "regular_polygon",
    "signed_area",
    "spanned_area",
    "spanned_area_sign",
    "triangulate_polygon",
]
