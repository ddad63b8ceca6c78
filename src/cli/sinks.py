"""Choose where the CLI reads and writes hikes."""

import logging
from pathlib import Path

import typer
from pydantic import ValidationError

from cli import display
from hiketrack.local_store import LocalHikeStore
from hiketrack.supabase_client import get_supabase_client, get_supabase_settings
from hiketrack.supabase_ops import HikeRecordRepository
from hiketrack.tracking import HikeRecordSink

logger = logging.getLogger(__name__)


def open_sink(local: Path | None, user_id: str | None) -> HikeRecordSink:
    """
    Open the local JSON store when a path is given, Supabase otherwise.

    Raises:
        typer.Exit: If Supabase is selected but not configured
    """
    if local is not None:
        logger.debug(f"Using local hike store at {local}")
        return LocalHikeStore(local, user_id=user_id)

    try:
        settings = get_supabase_settings()
    except ValidationError:
        display.display_error("Supabase is not configured (set SUPABASE_URL and SUPABASE_KEY)")
        display.display_info("Or pass --local DIR to use a local hike store")
        raise typer.Exit(1) from None

    return HikeRecordRepository(
        get_supabase_client(),
        user_id=user_id,
        table=settings.hike_records_table,
    )
