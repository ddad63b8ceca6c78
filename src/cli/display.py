"""Rich display helpers for the hike CLI."""

from rich.console import Console
from rich.table import Table

from hiketrack.formatters import (
    format_date,
    format_distance,
    format_duration,
    format_elevation,
    format_pace,
    format_speed,
)
from hiketrack.models import HikeRecord, StatsSnapshot

console = Console()
err_console = Console(stderr=True)


def display_error(message: str) -> None:
    err_console.print(f"[bold red]✗[/bold red] {message}")


def display_info(message: str) -> None:
    console.print(f"[cyan]ℹ[/cyan] {message}")


def display_success(message: str) -> None:
    console.print(f"[bold green]✓[/bold green] {message}")


def display_progress(message: str, done: bool = False) -> None:
    """Show a progress line, or a completed line when done."""
    if done:
        console.print(f"[green]✓[/green] {message}")
    else:
        console.print(f"[yellow]⋯[/yellow] {message}")


def display_stats(stats: StatsSnapshot, title: str = "Hike Stats") -> None:
    table = Table(title=title, show_header=False, title_style="bold")
    table.add_column("Stat", style="bold #FC4C02")
    table.add_column("Value", justify="right")

    table.add_row("Distance", format_distance(stats.distance_meters))
    table.add_row("Duration", format_duration(stats.duration_seconds))
    table.add_row("Pace", format_pace(stats.pace_min_per_km))
    table.add_row("Elevation", format_elevation(stats.elevation_gain_meters))
    table.add_row("Speed", format_speed(stats.current_speed_mps))

    console.print(table)


def display_hike_list(records: list[HikeRecord]) -> None:
    if not records:
        display_info("No hikes yet. Track a hike to see your history here.")
        return

    table = Table(title="Hike History")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Date")
    table.add_column("Distance", justify="right")
    table.add_column("Duration", justify="right")
    table.add_column("Pace", justify="right")
    table.add_column("Elevation", justify="right")

    for record in records:
        stats = record.stats
        table.add_row(
            record.id,
            format_date(record.date),
            format_distance(stats.distance_meters),
            format_duration(stats.duration_seconds),
            format_pace(stats.pace_min_per_km),
            format_elevation(stats.elevation_gain_meters),
        )

    console.print(table)


def display_hike(record: HikeRecord) -> None:
    console.print(f"[bold]{format_date(record.date)}[/bold]  [dim]{record.id}[/dim]")
    display_stats(record.stats, title=f"{record.point_count} route points")
