"""Saved hike commands for hike CLI."""

from pathlib import Path

import typer

from cli import display
from cli.sinks import open_sink
from cli.user_config import get_user_id, set_user_id
from hiketrack.errors import PersistenceError


def list_hikes(
    local: Path | None = typer.Option(None, "--local", "-l", help="Local hike store directory"),
    user: str | None = typer.Option(None, "--user", "-u", help="User id (defaults to config)"),
) -> None:
    """List saved hikes, newest first."""
    user_id = user or get_user_id()
    sink = open_sink(local, user_id)
    try:
        records = sink.list(user_id)
    except PersistenceError as e:
        display.display_error(str(e))
        raise typer.Exit(1) from None
    display.display_hike_list(records)


def show_hike(
    hike_id: str = typer.Argument(..., help="Hike id"),
    local: Path | None = typer.Option(None, "--local", "-l", help="Local hike store directory"),
    user: str | None = typer.Option(None, "--user", "-u", help="User id (defaults to config)"),
) -> None:
    """Show one saved hike."""
    sink = open_sink(local, user or get_user_id())
    try:
        record = sink.get(hike_id)
    except PersistenceError as e:
        display.display_error(str(e))
        raise typer.Exit(1) from None

    if record is None:
        display.display_error(f"Hike {hike_id} not found")
        raise typer.Exit(1)
    display.display_hike(record)


def delete_hike(
    hike_id: str = typer.Argument(..., help="Hike id"),
    local: Path | None = typer.Option(None, "--local", "-l", help="Local hike store directory"),
    user: str | None = typer.Option(None, "--user", "-u", help="User id (defaults to config)"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a saved hike."""
    if not yes:
        typer.confirm(f"Delete hike {hike_id}?", abort=True)

    sink = open_sink(local, user or get_user_id())
    try:
        sink.delete(hike_id)
    except PersistenceError as e:
        display.display_error(str(e))
        raise typer.Exit(1) from None
    display.display_success(f"Deleted hike {hike_id}")


def set_user(user_id: str = typer.Argument(..., help="User id to store")) -> None:
    """Remember the user id used by other commands."""
    set_user_id(user_id)
    display.display_success(f"Using user {user_id}")
