"""Utility functions."""

from .data_url import guess_image_type, to_data_url
from .datetime import (
    days_from_now,
    ensure_aware,
    epoch_millis,
    from_iso,
    now_utc,
    start_of_day,
    to_iso,
)
from .ids import new_member_id, time_based_id, unique_id

__all__ = [
    "days_from_now",
    "ensure_aware",
    "epoch_millis",
    "from_iso",
    "guess_image_type",
    "new_member_id",
    "now_utc",
    "start_of_day",
    "time_based_id",
    "to_data_url",
    "to_iso",
    "unique_id",
]
