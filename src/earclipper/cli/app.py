"""CLI application entry point for earclipper.

This module provides the main CLI interface using Typer.
"""

import os
from pathlib import Path
from typing import Annotated

import typer

from earclipper import __version__
from earclipper.cli.output import (
    console,
    create_progress,
    print_cancellation_summary,
    print_error,
    print_file_info,
    print_header,
    print_outcomes,
    print_processing_info,
    print_step,
    print_success,
    print_triangles,
)
from earclipper.config import (
    EarClipperSettings,
    LoggingConfig,
    ProcessingConfig,
    TriangulationConfig,
)
from earclipper.core import BatchProcessor, EarClippingTriangulator, ellipse_vertices
from earclipper.core.shapes import DEFAULT_RESOLUTION
from earclipper.domain import group_triangles
from earclipper.exceptions import (
    EarClipperError,
    PolygonFormatError,
    PolygonLoadError,
    PolygonSaveError,
    ProcessingCancelledError,
)
from earclipper.io import PolygonReader, TriangleWriter

# Create the Typer app
app = typer.Typer(
    name="earclipper",
    help="Triangulate simple polygons by ear clipping.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]earclipper[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Triangulate simple polygons by ear clipping."""


@app.command()
def triangulate(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Path to input JSON polygon file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-triangles.json)",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto, 1 = no worker processes)",
            min=1,
        ),
    ] = None,
    max_iterations: Annotated[
        int | None,
        typer.Option(
            "--max-iterations",
            help="Cap on ear-clipping passes per polygon (default: vertex count squared)",
            min=1,
        ),
    ] = None,
    fail_fast: Annotated[
        bool,
        typer.Option(
            "--fail-fast",
            help="Stop at the first polygon that cannot be triangulated",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Triangulate every polygon in a JSON file.

    The file holds either {"polygons": [{"name": ..., "vertices": [[x, y], ...]}]}
    or a bare list of [x, y] pairs.

    Example:
        earclipper triangulate shapes.json

    This will create shapes-triangles.json with the triangles of every polygon.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_file.exists():
        print_error(
            f"Input file not found: {input_file}",
            details=f"The file '{input_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_file.is_file():
        print_error(
            f"Input path is not a file: {input_file}",
            details="Please provide a path to a JSON polygon file.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = EarClipperSettings(
        triangulation=TriangulationConfig(max_iterations=max_iterations),
        processing=ProcessingConfig(max_workers=workers, fail_fast=fail_fast),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )

    output_path = output if output is not None else TriangleWriter.get_output_path(input_file)

    try:
        if not quiet:
            print_step("Loading polygons")

        reader = PolygonReader(input_file)
        reader.load()
        polygons = reader.read_all()
        reader.close()

        if not quiet:
            print_file_info(
                path=str(input_file),
                polygon_count=len(polygons),
                vertex_count=sum(len(p) for p in polygons),
            )

        if not polygons:
            if not quiet:
                console.print("\nNo polygons found. Nothing to process.")
            raise typer.Exit(code=0)

        if not quiet:
            actual_workers = workers if workers else os.cpu_count() or 1
            print_step("Triangulating")
            print_processing_info(actual_workers, is_auto=(workers is None))

        processor = BatchProcessor(settings)

        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task(
                        f"Triangulating {len(polygons)} polygons",
                        total=len(polygons),
                    )

                    def update_progress(completed: int, *_: object) -> None:
                        progress.update(task_id, completed=completed)

                    result = processor.process(polygons, progress_callback=update_progress)
            else:
                result = processor.process(polygons)
        except ProcessingCancelledError as e:
            if not quiet:
                print_cancellation_summary(
                    processed=e.processed_count,
                    cancelled=e.pending_count,
                )
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        writer = TriangleWriter(output_path)
        for outcome in result.outcomes:
            if outcome.ok:
                writer.add_triangles(outcome.name, outcome.triangles)
            else:
                writer.add_error(outcome.name, outcome.error or "", outcome.error_type or "")
        writer.save()

        stats = result.stats
        if not quiet:
            if verbose:
                print_step("Results")
                print_outcomes(result.outcomes)

            print_success(str(output_path), stats)

        if stats.error_count > 0:
            for outcome in result.failed:
                print_error(f"{outcome.name}: {outcome.error}")
            raise typer.Exit(code=1)

    except PolygonLoadError as e:
        print_error(f"Could not load polygons: {e.reason}")
        raise typer.Exit(code=1)
    except PolygonFormatError as e:
        print_error("Could not read polygons: unexpected file layout", details=e.details)
        raise typer.Exit(code=1)
    except PolygonSaveError as e:
        print_error(f"Could not save triangles: {e.reason}")
        raise typer.Exit(code=1)
    except EarClipperError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command()
def ellipse(
    radius_a: Annotated[
        float,
        typer.Argument(help="Radius along the x axis", show_default=False),
    ],
    radius_b: Annotated[
        float,
        typer.Argument(help="Radius along the y axis", show_default=False),
    ],
    resolution: Annotated[
        int,
        typer.Option(
            "--resolution",
            "-r",
            help="Number of outline vertices",
            min=3,
        ),
    ] = DEFAULT_RESOLUTION,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the triangles to this JSON file",
        ),
    ] = None,
) -> None:
    """Triangulate an ellipse outline.

    Example:
        earclipper ellipse 40 20 --resolution 30
    """
    try:
        vertices = ellipse_vertices(radius_a, radius_b, resolution)
        points = EarClippingTriangulator().compute_triangles(vertices)
        triangles = group_triangles(points)

        print_triangles(resolution, triangles)

        if output is not None:
            writer = TriangleWriter(output)
            writer.add_triangles("ellipse", points)
            writer.save()
            console.print(f"  {output}")

    except EarClipperError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
