"""Replay a recorded GPS track through a tracking session."""

from pathlib import Path

import typer

from cli import display
from cli.sinks import open_sink
from cli.user_config import get_user_id
from hiketrack.errors import HikeTrackError, PersistenceError
from hiketrack.models import StatsSnapshot
from hiketrack.tracking import (
    ManualTicker,
    ReplayLocationSource,
    SessionState,
    TrackingSession,
    load_samples,
)


def replay_track(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON array of samples"),
    save: bool = typer.Option(True, "--save/--no-save", help="Save the hike when done"),
    local: Path | None = typer.Option(None, "--local", "-l", help="Local hike store directory"),
    user: str | None = typer.Option(None, "--user", "-u", help="User id (defaults to config)"),
    auto_pause: float | None = typer.Option(
        None,
        "--auto-pause",
        help="Pause across gaps longer than this many seconds",
        min=0,
    ),
) -> None:
    """
    Replay recorded samples as if they came from the GPS.

    Examples:
        hike replay walk.json --no-save
        hike replay walk.json --local ./hikes
        hike replay walk.json --auto-pause 60
    """
    user_id = user or get_user_id()

    try:
        samples = load_samples(file)
    except HikeTrackError as e:
        display.display_error(str(e))
        raise typer.Exit(1) from None

    source = ReplayLocationSource(samples)
    ticker = ManualTicker()
    latest: list[StatsSnapshot] = [StatsSnapshot()]
    sink = open_sink(local, user_id) if save else None

    session = TrackingSession(
        source,
        sink,
        clock=source.clock,
        ticker=ticker,
        user_id=user_id,
        on_stats=latest.append,
    )

    try:
        session.start()
    except HikeTrackError as e:
        display.display_error(f"Could not start tracking: {e}")
        raise typer.Exit(1) from None

    display.display_progress(f"Replaying {len(samples)} samples...")

    pauses = 0
    while (upcoming := source.peek()) is not None:
        gap = upcoming.timestamp - source.clock()
        if auto_pause is not None and gap > auto_pause:
            session.pause()
            source.advance_to(upcoming.timestamp)
            session.resume()
            pauses += 1
        source.emit()
        ticker.fire()

    final_state = session.stop()
    final_stats = session.stats if final_state is SessionState.STOPPED else latest[-1]

    display.display_progress(
        f"Replayed {len(samples)} samples, {len(session.route)} kept, {pauses} pauses",
        done=True,
    )
    display.display_stats(final_stats)

    if final_state is SessionState.DISCARDED:
        display.display_info("Your tracking session was too short to save.")
        return

    if not save:
        session.discard()
        display.display_info("Not saved (--no-save)")
        return

    try:
        saved_id = session.save()
    except PersistenceError as e:
        display.display_error(f"Could not save your hike: {e}")
        raise typer.Exit(1) from None

    display.display_success(f"Your hike has been saved ({saved_id})")
