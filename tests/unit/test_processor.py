"""Unit tests for batch triangulation."""

from unittest.mock import patch

import pytest

from earclipper.config import EarClipperSettings, ProcessingConfig, TriangulationConfig
from earclipper.core.processor import BatchProcessor, PolygonOutcome, triangulate_polygon
from earclipper.domain import Point, Polygon
from earclipper.exceptions import ProcessingCancelledError

SQUARE = Polygon.from_pairs([(0, 0), (10, 0), (10, 10), (0, 10)], name="square")
L_SHAPE = Polygon.from_pairs([(0, 0), (20, 0), (20, 10), (10, 10), (10, 20), (0, 20)])
SEGMENT = Polygon.from_pairs([(0, 0), (1, 1)], name="segment")
HOURGLASS = Polygon.from_pairs(
    [(0, 0), (10, 0), (5, 5), (10, 10), (0, 10), (5, 5)], name="hourglass"
)


def _settings(**processing: object) -> EarClipperSettings:
    return EarClipperSettings(processing=ProcessingConfig(**processing))


class TestTriangulatePolygon:
    """Tests for the worker function."""

    def test_success_result(self):
        result = triangulate_polygon(SQUARE.to_dict(), TriangulationConfig().model_dump())

        assert result["name"] == "square"
        assert result["triangle_count"] == 2
        assert result["triangles"][0] == {"x": 0.0, "y": 0.0}
        assert "error" not in result
        assert result["duration_ms"] >= 0

    def test_error_result(self):
        result = triangulate_polygon(SEGMENT.to_dict(), TriangulationConfig().model_dump())

        assert result["error_type"] == "InvalidPolygonError"
        assert "at least 3 vertices" in result["error"]
        assert "Traceback" in result["traceback"]

    def test_iteration_cap_is_applied(self):
        config = TriangulationConfig(max_iterations=1).model_dump()
        result = triangulate_polygon(L_SHAPE.to_dict(), config)
        assert result["error_type"] == "NonTerminatingError"

    def test_unnamed_polygon(self):
        result = triangulate_polygon(L_SHAPE.to_dict(), {})
        assert result["name"] == "unnamed"


class TestPolygonOutcome:
    """Tests for PolygonOutcome."""

    def test_ok_flag(self):
        assert PolygonOutcome(name="a").ok
        assert not PolygonOutcome(name="b", error="boom", error_type="ValueError").ok


class TestBatchProcessorInline:
    """Tests for BatchProcessor without worker processes."""

    def test_mixed_batch(self):
        processor = BatchProcessor(_settings(max_workers=1))
        result = processor.process([SQUARE, L_SHAPE, SEGMENT])

        assert [o.name for o in result.outcomes] == ["square", "polygon_1", "segment"]
        assert len(result.succeeded) == 2
        assert result.failed[0].error_type == "InvalidPolygonError"
        assert result.outcomes[0].triangles[:3] == [Point(0, 0), Point(0, 10), Point(10, 10)]
        assert len(result.outcomes[1].triangles) == 12

        stats = result.stats
        assert stats.processed_count == 2
        assert stats.error_count == 1
        assert stats.triangles_emitted == 6
        assert stats.errors[0][0] == "segment"
        assert stats.duration_seconds >= 0

    def test_explicit_worker_count_overrides_config(self):
        processor = BatchProcessor(_settings(max_workers=4))
        result = processor.process([SQUARE], max_workers=1)
        assert result.outcomes[0].ok

    def test_non_terminating_polygon_is_reported(self):
        processor = BatchProcessor(_settings(max_workers=1))
        result = processor.process([HOURGLASS, SQUARE])

        assert result.outcomes[0].error_type == "NonTerminatingError"
        assert result.outcomes[1].ok

    def test_fail_fast_stops_batch(self):
        processor = BatchProcessor(_settings(max_workers=1, fail_fast=True))
        result = processor.process([SEGMENT, SQUARE, L_SHAPE])

        assert [o.name for o in result.outcomes] == ["segment"]
        assert result.stats.skipped_count == 2
        assert result.stats.processed_count == 0

    def test_progress_callback(self):
        calls = []
        processor = BatchProcessor(_settings(max_workers=1))
        processor.process(
            [SQUARE, SEGMENT],
            progress_callback=lambda done, total, name, ok: calls.append((done, total, name, ok)),
        )

        assert calls == [(1, 2, "square", True), (2, 2, "segment", False)]

    def test_empty_batch(self):
        result = BatchProcessor(_settings(max_workers=1)).process([])
        assert result.outcomes == []
        assert result.stats.processed_count == 0


class TestBatchProcessorParallel:
    """Tests for BatchProcessor with worker processes."""

    @pytest.mark.parametrize("max_workers", [2])
    def test_outcomes_in_input_order(self, max_workers):
        polygons = [SQUARE, L_SHAPE, SEGMENT, HOURGLASS]
        processor = BatchProcessor(_settings())
        result = processor.process(polygons, max_workers=max_workers)

        assert [o.name for o in result.outcomes] == ["square", "polygon_1", "segment", "hourglass"]
        assert [o.ok for o in result.outcomes] == [True, True, False, False]
        assert result.stats.triangles_emitted == 6
        assert result.stats.error_count == 2

    def test_matches_inline_results(self):
        inline = BatchProcessor(_settings(max_workers=1)).process([SQUARE, L_SHAPE])
        parallel = BatchProcessor(_settings(max_workers=2)).process([SQUARE, L_SHAPE])

        assert [o.triangles for o in parallel.outcomes] == [o.triangles for o in inline.outcomes]


class TestCancellation:
    """Tests for Ctrl+C handling during a parallel batch."""

    def test_interrupt_raises_cancelled_error(self):
        processor = BatchProcessor(_settings())

        with patch("earclipper.core.processor.as_completed", side_effect=KeyboardInterrupt):
            with pytest.raises(ProcessingCancelledError) as exc_info:
                processor.process([SQUARE, L_SHAPE], max_workers=2)

        assert exc_info.value.processed_count == 0
        assert exc_info.value.pending_count == 2

        stats = exc_info.value.stats
        assert stats is not None
        assert stats.was_cancelled
        assert stats.cancelled_count == 2
        assert stats.processed_count == 0
