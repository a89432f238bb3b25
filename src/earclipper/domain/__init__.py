"""Domain models for earclipper.

This module contains the core domain models representing polygons, their
vertex classification and the triangles cut from them. All models are
designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of file formats and the CLI

Key classes:
- Point: An immutable 2D point
- Polygon: A closed polygon boundary
- Triangle: Three points cut from a polygon
- VertexClassification: Convex/concave tags for one classification pass
"""

from earclipper.domain.polygon import (
    Point,
    PointLike,
    Polygon,
    WindingDirection,
    as_point,
    as_points,
)
from earclipper.domain.triangle import (
    Triangle,
    VertexClassification,
    VertexType,
    flatten_triangles,
    group_triangles,
)

__all__: list[str] = [
    # Enums
    "VertexType",
    "WindingDirection",
    # Core types
    "Point",
    "PointLike",
    "Polygon",
    "Triangle",
    "VertexClassification",
    # Helpers
    "as_point",
    "as_points",
    "flatten_triangles",
    "group_triangles",
]
