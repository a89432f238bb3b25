"""Configuration settings for earclipper."""

from pathlib import Path

from pydantic import BaseModel, Field


class TriangulationConfig(BaseModel):
    """Configuration for the ear-clipping triangulator."""

    max_iterations: int | None = Field(
        default=None,
        ge=1,
        description="Cap on ear-clipping passes (None = vertex count squared)",
    )

    def iteration_cap(self, vertex_count: int) -> int:
        """Resolve the pass cap for a polygon of the given size.

        Args:
            vertex_count: Number of input vertices

        Returns:
            Configured cap, or vertex_count squared when unset
        """
        if self.max_iterations is not None:
            return self.max_iterations
        return max(vertex_count * vertex_count, 1)


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker processes (None = auto)",
    )
    fail_fast: bool = Field(
        default=False,
        description="Stop the batch at the first polygon that fails",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class EarClipperSettings(BaseModel):
    """Main application settings."""

    triangulation: TriangulationConfig = Field(default_factory=TriangulationConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> EarClipperSettings:
    """Get default application settings."""
    return EarClipperSettings()
