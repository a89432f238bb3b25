"""Parallel batch triangulation.

This module triangulates many independent polygons, fanning them out to
worker processes with ProcessPoolExecutor. The triangulator keeps no state
between calls, so every worker can run the same code on its own input.

Key components:
- triangulate_polygon: Top-level picklable function for parallel execution
- BatchProcessor: Orchestrates a batch and collects statistics
- BatchResult: Per-polygon outcomes in input order
"""

import time
import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any

from earclipper.config import EarClipperSettings, TriangulationConfig
from earclipper.core.triangulator import EarClippingTriangulator
from earclipper.domain import Point, Polygon
from earclipper.exceptions import ProcessingCancelledError
from earclipper.utils import ProcessingLogger, ProcessingStats, configure_logging


def triangulate_polygon(
    polygon_dict: dict[str, Any],
    config_dict: dict[str, Any],
) -> dict[str, Any]:
    """Triangulate a single serialized polygon.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    Deserializes the polygon, runs the triangulator and returns a result dict.

    Args:
        polygon_dict: Serialized polygon (from Polygon.to_dict())
        config_dict: Serialized triangulation configuration

    Returns:
        Dictionary containing either:
        - Success: {"name", "triangles": [point dicts], "triangle_count", "duration_ms"}
        - Error: {"name", "error", "error_type", "traceback", "duration_ms"}
    """
    start_time = time.time()
    name = polygon_dict.get("name") or "unnamed"

    try:
        polygon = Polygon.from_dict(polygon_dict)
        triangulator = EarClippingTriangulator(TriangulationConfig(**config_dict))
        points = triangulator.compute_triangles(polygon.points)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "name": name,
            "triangles": [p.to_dict() for p in points],
            "triangle_count": len(points) // 3,
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "name": name,
            "error": str(e),
            "error_type": type(e).__name__,
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


@dataclass
class PolygonOutcome:
    """Result of triangulating one polygon in a batch.

    Attributes:
        name: Polygon name
        triangles: Flat triangle list (empty on error)
        error: Error message, None on success
        error_type: Exception class name, None on success
    """

    name: str
    triangles: list[Point] = field(default_factory=list)
    error: str | None = None
    error_type: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchResult:
    """Outcomes of a batch run in input order, plus statistics."""

    outcomes: list[PolygonOutcome]
    stats: ProcessingStats

    @property
    def succeeded(self) -> list[PolygonOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self) -> list[PolygonOutcome]:
        return [o for o in self.outcomes if not o.ok]


class BatchProcessor:
    """Orchestrates triangulation of many polygons.

    Manages the workflow:
    1. Serialize polygons and configuration for workers
    2. Triangulate in worker processes (inline when max_workers is 1)
    3. Collect results and update statistics
    4. Return outcomes in input order

    Example:
        processor = BatchProcessor(EarClipperSettings())
        result = processor.process(polygons, max_workers=4)
    """

    def __init__(self, config: EarClipperSettings) -> None:
        """Initialize batch processor with configuration.

        Args:
            config: Settings containing triangulation, processing and logging config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
        )

    def process(
        self,
        polygons: Sequence[Polygon],
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> BatchResult:
        """Triangulate a batch of polygons.

        Args:
            polygons: Polygons to triangulate; unnamed ones get positional names
            max_workers: Maximum worker processes (None = config, then auto)
            progress_callback: Optional callback(completed, total, name, success)

        Returns:
            BatchResult with one outcome per polygon, in input order

        Raises:
            ProcessingCancelledError: If processing is interrupted by the user
        """
        stats = ProcessingStats()
        stats.start_time = time.time()
        processing_logger = ProcessingLogger(self.logger, stats)

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        config_dict = self.config.triangulation.model_dump()
        tasks: list[dict[str, Any]] = []
        for index, polygon in enumerate(polygons):
            polygon_dict = polygon.to_dict()
            if not polygon_dict["name"]:
                polygon_dict["name"] = f"polygon_{index}"
            tasks.append(polygon_dict)

        self.logger.info(
            "Starting batch triangulation",
            polygon_count=len(tasks),
            max_workers=max_workers,
        )

        if max_workers == 1:
            results = self._process_inline(tasks, config_dict, processing_logger, progress_callback)
        else:
            results = self._process_parallel(
                tasks, config_dict, max_workers, processing_logger, progress_callback
            )

        stats.end_time = time.time()

        outcomes: list[PolygonOutcome] = []
        for index, task in enumerate(tasks):
            result = results.get(index)
            if result is None:
                processing_logger.log_polygon_skipped(task["name"], "batch stopped early")
                continue
            if "error" in result:
                outcomes.append(
                    PolygonOutcome(
                        name=result["name"],
                        error=result["error"],
                        error_type=result["error_type"],
                    )
                )
            else:
                outcomes.append(
                    PolygonOutcome(
                        name=result["name"],
                        triangles=[Point.from_dict(p) for p in result["triangles"]],
                    )
                )

        self.logger.info(
            "Batch complete",
            processed=stats.processed_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            triangles=stats.triangles_emitted,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return BatchResult(outcomes=outcomes, stats=stats)

    def _record(
        self,
        result: dict[str, Any],
        processing_logger: ProcessingLogger,
    ) -> bool:
        """Log one worker result and update statistics.

        Returns:
            True if the polygon was triangulated
        """
        if "error" in result:
            processing_logger.log_polygon_error(
                name=result["name"],
                error=result["error"],
                error_type=result["error_type"],
                traceback=result.get("traceback"),
            )
            return False

        processing_logger.log_polygon_complete(
            name=result["name"],
            triangle_count=result["triangle_count"],
            duration_ms=result.get("duration_ms", 0.0),
        )
        return True

    def _process_inline(
        self,
        tasks: list[dict[str, Any]],
        config_dict: dict[str, Any],
        processing_logger: ProcessingLogger,
        progress_callback: Callable[[int, int, str, bool], None] | None,
    ) -> dict[int, dict[str, Any]]:
        """Triangulate tasks one after another in this process."""
        results: dict[int, dict[str, Any]] = {}
        total = len(tasks)

        for index, polygon_dict in enumerate(tasks):
            processing_logger.log_polygon_start(polygon_dict["name"], len(polygon_dict["points"]))
            result = triangulate_polygon(polygon_dict, config_dict)
            results[index] = result
            success = self._record(result, processing_logger)

            if progress_callback is not None:
                progress_callback(index + 1, total, polygon_dict["name"], success)

            if not success and self.config.processing.fail_fast:
                break

        return results

    def _process_parallel(
        self,
        tasks: list[dict[str, Any]],
        config_dict: dict[str, Any],
        max_workers: int | None,
        processing_logger: ProcessingLogger,
        progress_callback: Callable[[int, int, str, bool], None] | None,
    ) -> dict[int, dict[str, Any]]:
        """Triangulate tasks in parallel using ProcessPoolExecutor."""
        results: dict[int, dict[str, Any]] = {}
        total = len(tasks)
        completed = 0
        pending_futures: dict[Future, int] = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for index, polygon_dict in enumerate(tasks):
                processing_logger.log_polygon_start(
                    polygon_dict["name"], len(polygon_dict["points"])
                )
                future = executor.submit(triangulate_polygon, polygon_dict, config_dict)
                pending_futures[future] = index

            try:
                for future in as_completed(list(pending_futures)):
                    index = pending_futures.pop(future)
                    name = tasks[index]["name"]

                    try:
                        result = future.result()
                    except Exception as e:
                        # Executor-level error (e.g. a worker process died)
                        result = {
                            "name": name,
                            "error": str(e),
                            "error_type": type(e).__name__,
                            "traceback": traceback.format_exc(),
                        }

                    results[index] = result
                    success = self._record(result, processing_logger)

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, name, success)

                    if not success and self.config.processing.fail_fast:
                        for f in pending_futures:
                            f.cancel()
                        break

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                stats = processing_logger.stats
                stats.was_cancelled = True
                stats.cancelled_count = len(pending_futures)
                stats.end_time = time.time()

                executor.shutdown(wait=True, cancel_futures=True)
                raise ProcessingCancelledError(
                    processed_count=completed,
                    pending_count=len(pending_futures),
                    stats=stats,
                ) from None

        return results
