"""Supabase database operations for hiketrack."""

from .hike_repository import HikeRecordRepository
from .mappers import dict_to_hike_record, hike_record_to_dict

__all__ = [
    "HikeRecordRepository",
    "dict_to_hike_record",
    "hike_record_to_dict",
]
