"""Console output for the earclipper CLI.

All printing goes through one Rich console so progress bars, tables and
messages share the same terminal handling.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from earclipper.core.processor import PolygonOutcome
from earclipper.domain import Triangle
from earclipper.utils import ProcessingStats

console = Console()

SYM_STEP = "▸"
SYM_OK = "✓"
SYM_ERR = "✗"
SYM_DOT = "·"


def create_progress() -> Progress:
    """Progress bar counting polygons as they finish."""
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    console.print(f"\n[bold]earclipper[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    console.print(f"\n{SYM_STEP} {message}")


def print_file_info(path: str, polygon_count: int, vertex_count: int) -> None:
    """Print the input file and its size.

    Args:
        path: Path to the polygon file
        polygon_count: Number of polygons in the file
        vertex_count: Total number of vertices across all polygons
    """
    # Text keeps Rich from reading brackets in the path as markup
    console.print(Text("  ") + Text(path))
    console.print(f"  {polygon_count:,} polygons {SYM_DOT} {vertex_count:,} vertices")


def _format_duration(seconds: float) -> str:
    if seconds >= 60:
        minutes, rest = divmod(seconds, 60)
        return f"{int(minutes)}m {rest:.1f}s"
    if seconds >= 1:
        return f"{seconds:.1f}s"
    return f"{seconds * 1000:.0f}ms"


def print_processing_info(workers: int, is_auto: bool = False) -> None:
    """Print the worker count used for the batch."""
    mode = "inline" if workers == 1 else f"{workers} workers"
    if is_auto:
        mode += " (auto)"
    console.print(f"  {mode} {SYM_DOT} Ctrl+C to cancel")


def print_outcomes(outcomes: list[PolygonOutcome]) -> None:
    """Print a per-polygon table of triangle counts and errors."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Polygon")
    table.add_column("Triangles", justify="right")
    table.add_column("Status")

    for outcome in outcomes:
        if outcome.ok:
            table.add_row(outcome.name, str(len(outcome.triangles) // 3), f"[green]{SYM_OK}[/green]")
        else:
            table.add_row(outcome.name, "-", f"[red]{SYM_ERR} {outcome.error_type}[/red]")

    console.print(table)


def print_triangles(vertex_count: int, triangles: list[Triangle]) -> None:
    """Print a one-line summary of a single triangulation."""
    area = sum(t.area() for t in triangles)
    console.print(
        f"  {vertex_count} vertices {SYM_DOT} {len(triangles)} triangles "
        f"{SYM_DOT} area {area:.2f}"
    )


def print_success(output_path: str, stats: ProcessingStats) -> None:
    """Print the batch summary.

    Args:
        output_path: Path of the written triangle file
        stats: Statistics collected during the batch
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_duration(stats.duration_seconds)}"
    )
    console.print(Text("  ") + Text(output_path, style="bold"))

    color = "red" if stats.error_count else "green"
    console.print(
        f"  {stats.processed_count} polygons {SYM_DOT} {stats.triangles_emitted} triangles "
        f"{SYM_DOT} [{color}]{stats.error_count} errors[/{color}]"
    )

    if stats.avg_polygon_time_ms is not None:
        console.print(
            f"  {stats.avg_polygon_time_ms:.1f}ms avg per polygon "
            f"({stats.min_polygon_time_ms:.1f}-{stats.max_polygon_time_ms:.1f}ms)"
        )


def print_error(message: str, details: str | None = None) -> None:
    """Print an error line with optional indented details."""
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_summary(processed: int, cancelled: int) -> None:
    """Print what was finished before the user interrupted the batch."""
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {processed} polygons triangulated {SYM_DOT} {cancelled} never started")
    console.print("  No triangle file written")
