"""Repository for hike records stored in Supabase."""

import logging
from typing import Any, cast

import httpx
from postgrest.exceptions import APIError
from pydantic import ValidationError

from supabase import Client

from ..errors import PersistenceError
from ..models import HikeRecord
from .mappers import dict_to_hike_record, hike_record_to_dict

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "hike_records"


class HikeRecordRepository:
    """
    Hike record sink backed by a Supabase table.

    Network and database failures are raised as PersistenceError so the
    tracking session can keep the record and let the caller retry.
    """

    def __init__(
        self,
        supabase: Client,
        user_id: str | None = None,
        table: str = DEFAULT_TABLE,
    ):
        """
        Initialize repository with Supabase client.

        Args:
            supabase: Authenticated Supabase client
            user_id: Default owner for saved and listed records
            table: Table holding hike records
        """
        self.supabase = supabase
        self.user_id = user_id
        self.table = table

    def save(self, record: HikeRecord) -> str:
        """
        Upsert a hike record.

        Upserting on id makes a retried save idempotent.

        Args:
            record: Finished hike

        Returns:
            Saved record id

        Raises:
            PersistenceError: If the insert fails
        """
        if record.user_id is None and self.user_id is not None:
            record = record.model_copy(update={"user_id": self.user_id})

        try:
            result = self.supabase.table(self.table).upsert(hike_record_to_dict(record)).execute()
        except (APIError, httpx.HTTPError) as e:
            logger.error(f"Failed to save hike {record.id}: {e}")
            raise PersistenceError(f"Could not save hike {record.id}") from e

        data_list = cast(list[dict[str, Any]], result.data)
        saved_id = str(data_list[0]["id"]) if data_list else record.id
        logger.info(f"Saved hike {saved_id} ({record.point_count} points)")
        return saved_id

    def list(self, user_id: str | None = None) -> list[HikeRecord]:
        """
        Get a user's hikes, newest first.

        Args:
            user_id: Owner (defaults to the repository's user)

        Returns:
            List of HikeRecord

        Raises:
            PersistenceError: If the query fails
        """
        owner = user_id or self.user_id
        query = self.supabase.table(self.table).select("*")
        if owner is not None:
            query = query.eq("user_id", owner)

        try:
            result = query.order("date", desc=True).execute()
        except (APIError, httpx.HTTPError) as e:
            logger.error(f"Failed to list hikes for user {owner}: {e}")
            raise PersistenceError("Could not load hikes") from e

        return [self._to_record(row) for row in cast(list[dict[str, Any]], result.data)]

    def get(self, record_id: str) -> HikeRecord | None:
        """
        Get a single hike by id.

        Returns:
            HikeRecord, or None if not found
        """
        try:
            result = (
                self.supabase.table(self.table)
                .select("*")
                .eq("id", record_id)
                .limit(1)
                .execute()
            )
        except (APIError, httpx.HTTPError) as e:
            logger.error(f"Failed to load hike {record_id}: {e}")
            raise PersistenceError(f"Could not load hike {record_id}") from e

        data_list = cast(list[dict[str, Any]], result.data)
        if not data_list:
            logger.debug(f"Hike {record_id} not found")
            return None
        return self._to_record(data_list[0])

    def delete(self, record_id: str) -> None:
        """
        Delete a hike by id.

        Raises:
            PersistenceError: If the delete fails
        """
        try:
            self.supabase.table(self.table).delete().eq("id", record_id).execute()
        except (APIError, httpx.HTTPError) as e:
            logger.error(f"Failed to delete hike {record_id}: {e}")
            raise PersistenceError(f"Could not delete hike {record_id}") from e

        logger.info(f"Deleted hike {record_id}")

    @staticmethod
    def _to_record(row: dict[str, Any]) -> HikeRecord:
        try:
            return dict_to_hike_record(row)
        except (KeyError, ValidationError) as e:
            logger.error(f"Malformed hike row {row.get('id')}: {e}")
            raise PersistenceError(f"Malformed hike record {row.get('id')}") from e
