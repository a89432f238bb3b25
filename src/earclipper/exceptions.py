"""Exception hierarchy for earclipper."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from earclipper.utils.logging import ProcessingStats


class EarClipperError(Exception):
    """Base exception for all earclipper errors."""

    pass


class GeometryError(EarClipperError):
    """Errors in geometric calculations."""

    pass


class InvalidPolygonError(GeometryError):
    """Polygon has too few vertices to be triangulated."""

    def __init__(self, vertex_count: int) -> None:
        self.vertex_count = vertex_count
        super().__init__(
            f"Polygon needs at least 3 vertices, got {vertex_count}"
        )


class NonTerminatingError(GeometryError):
    """Ear clipping stopped making progress.

    Raised when a pass finds no ear tip or the iteration cap is exceeded,
    which happens for self-intersecting or duplicate-point input.
    """

    def __init__(self, vertex_count: int, iterations: int, remaining: int) -> None:
        self.vertex_count = vertex_count
        self.iterations = iterations
        self.remaining = remaining
        super().__init__(
            f"Triangulation of {vertex_count} vertices did not terminate: "
            f"{remaining} vertices left after {iterations} iterations"
        )


class ShapeError(GeometryError):
    """Invalid parameters for a shape generator."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid shape: {reason}")


class PolygonFileError(EarClipperError):
    """Errors related to polygon file loading or saving."""

    pass


class PolygonLoadError(PolygonFileError):
    """Error loading a polygon file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load polygons '{path}': {reason}")


class PolygonSaveError(PolygonFileError):
    """Error saving a triangle file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save triangles '{path}': {reason}")


class PolygonFormatError(PolygonFileError):
    """Polygon file content does not match the expected document layout."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid polygon file '{path}': {details}")


class ProcessingCancelledError(EarClipperError):
    """Processing was cancelled by user."""

    def __init__(
        self,
        processed_count: int,
        pending_count: int,
        stats: "ProcessingStats | None" = None,
    ) -> None:
        self.processed_count = processed_count
        self.pending_count = pending_count
        self.stats = stats
        super().__init__(
            f"Processing cancelled: {processed_count} completed, {pending_count} pending"
        )
