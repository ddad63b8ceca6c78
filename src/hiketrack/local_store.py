"""Device-local hike storage: one JSON file per user."""

import json
import logging
import re
from datetime import UTC, datetime
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .errors import PersistenceError
from .models import HikeRecord

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(list[HikeRecord])

ANONYMOUS_USER = "anonymous"


class LocalHikeStore:
    """
    Hike record sink writing to ``<root>/hike_records_<user_id>.json``.

    Records are kept newest first. Used for offline tracking and by the CLI
    when no Supabase project is configured. get() and delete() look in the
    default owner's file first, then in every other user's file under root.

    Args:
        root: Directory holding the JSON files
        user_id: Owner of records saved without one
    """

    def __init__(self, root: str | Path, user_id: str | None = None) -> None:
        self.root = Path(root)
        self.user_id = user_id

    def _path(self, user_id: str | None) -> Path:
        owner = user_id or self.user_id or ANONYMOUS_USER
        safe = re.sub(r"[^A-Za-z0-9_.-]", "_", owner)
        return self.root / f"hike_records_{safe}.json"

    def _owner_paths(self) -> list[Path]:
        """The default owner's file first, then every other user file under root."""
        default = self._path(None)
        others = sorted(p for p in self.root.glob("hike_records_*.json") if p != default)
        return [default, *others]

    def _read(self, user_id: str | None) -> list[HikeRecord]:
        return self._read_path(self._path(user_id))

    def _read_path(self, path: Path) -> list[HikeRecord]:
        if not path.exists():
            return []
        try:
            with open(path, encoding="utf-8") as f:
                return _records_adapter.validate_python(json.load(f))
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Failed to read hikes from {path}: {e}")
            raise PersistenceError(f"Could not read {path}") from e

    def _write(self, user_id: str | None, records: list[HikeRecord]) -> None:
        self._write_path(self._path(user_id), records)

    def _write_path(self, path: Path, records: list[HikeRecord]) -> None:
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            tmp = path.with_suffix(".tmp")
            tmp.write_bytes(_records_adapter.dump_json(records, indent=2))
            tmp.replace(path)
        except OSError as e:
            logger.error(f"Failed to write hikes to {path}: {e}")
            raise PersistenceError(f"Could not write {path}") from e

    def save(self, record: HikeRecord) -> str:
        if record.user_id is None:
            record = record.model_copy(update={"user_id": self.user_id or ANONYMOUS_USER})
        records = [r for r in self._read(record.user_id) if r.id != record.id]
        records.insert(0, record)
        records.sort(key=lambda r: _as_utc(r.date), reverse=True)
        self._write(record.user_id, records)
        logger.info(f"Saved hike {record.id} to {self._path(record.user_id)}")
        return record.id

    def list(self, user_id: str | None = None) -> list[HikeRecord]:
        records = self._read(user_id)
        return sorted(records, key=lambda r: _as_utc(r.date), reverse=True)

    def get(self, record_id: str) -> HikeRecord | None:
        for path in self._owner_paths():
            found = next((r for r in self._read_path(path) if r.id == record_id), None)
            if found is not None:
                return found
        return None

    def delete(self, record_id: str) -> None:
        for path in self._owner_paths():
            records = self._read_path(path)
            remaining = [r for r in records if r.id != record_id]
            if len(remaining) != len(records):
                self._write_path(path, remaining)
                logger.info(f"Deleted hike {record_id} from {path}")
                return
        logger.warning(f"Hike {record_id} not found, nothing deleted")


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
