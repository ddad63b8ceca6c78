"""Supabase client connection utilities for hiketrack."""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from supabase import Client, create_client

from .config import find_env_file

logger = logging.getLogger(__name__)

# Find env file once at module load
_env_file = find_env_file()


class SupabaseSettings(BaseSettings):
    """
    Supabase connection settings loaded from environment variables.

    Attributes:
        supabase_url: Supabase project URL (local or production)
        supabase_key: Supabase anon or service role key
        hike_records_table: Table holding saved hikes
    """

    model_config = SettingsConfigDict(
        env_file=_env_file,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    supabase_url: str = Field(
        description="Supabase project URL",
        examples=["http://127.0.0.1:54321", "https://xxx.supabase.co"],
    )

    supabase_key: str = Field(
        description="Supabase key used by the app",
    )

    hike_records_table: str = Field(
        default="hike_records",
        description="Table holding saved hike records",
    )


@lru_cache
def get_supabase_settings() -> SupabaseSettings:
    """
    Get Supabase settings (cached singleton pattern).

    Returns:
        SupabaseSettings instance loaded from environment

    Raises:
        ValidationError: If required environment variables are missing
    """
    return SupabaseSettings()  # type: ignore[call-arg]


@lru_cache
def get_supabase_client() -> Client:
    """
    Get a Supabase client built from SupabaseSettings (cached).

    Returns:
        Supabase client instance

    Example:
        ```python
        supabase = get_supabase_client()
        result = supabase.table("hike_records").select("*").eq("user_id", user_id).execute()
        ```
    """
    settings = get_supabase_settings()
    logger.debug(f"Connecting to Supabase at {settings.supabase_url}")
    return create_client(settings.supabase_url, settings.supabase_key)
