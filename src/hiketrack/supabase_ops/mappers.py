"""Map HikeRecord models to and from hike_records table rows."""

from datetime import datetime
from typing import Any

from ..models import HikeRecord, RoutePoint, StatsSnapshot


def hike_record_to_dict(record: HikeRecord) -> dict[str, Any]:
    """
    Convert a HikeRecord to a row for the hike_records table.

    Stats are flattened into columns; the route is stored as a JSON array.

    Args:
        record: Hike record to store

    Returns:
        Dict ready for insert
    """
    stats = record.stats
    return {
        "id": record.id,
        "user_id": record.user_id,
        "date": record.date.isoformat(),
        "route_coordinates": [p.model_dump() for p in record.route_coordinates],
        "point_count": record.point_count,
        "distance_meters": stats.distance_meters,
        "duration_seconds": stats.duration_seconds,
        "pace_min_per_km": stats.pace_min_per_km,
        "elevation_gain_meters": stats.elevation_gain_meters,
        "current_speed_mps": stats.current_speed_mps,
    }


def dict_to_hike_record(row: dict[str, Any]) -> HikeRecord:
    """
    Convert a hike_records row back into a HikeRecord.

    Args:
        row: Row as returned by Supabase

    Returns:
        HikeRecord

    Raises:
        ValidationError: If the row does not describe a valid record
        KeyError: If a required column is missing
    """
    date = row["date"]
    if isinstance(date, str):
        date = datetime.fromisoformat(date.replace("Z", "+00:00"))

    return HikeRecord(
        id=str(row["id"]),
        user_id=row.get("user_id"),
        date=date,
        route_coordinates=[RoutePoint.model_validate(p) for p in row.get("route_coordinates") or []],
        stats=StatsSnapshot(
            distance_meters=row["distance_meters"],
            duration_seconds=row["duration_seconds"],
            pace_min_per_km=row.get("pace_min_per_km"),
            elevation_gain_meters=row.get("elevation_gain_meters") or 0.0,
            current_speed_mps=row.get("current_speed_mps") or 0.0,
        ),
    )
