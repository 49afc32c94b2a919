"""Timezone-aware date/time helpers for the hotel club application."""

from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from flask import current_app


def get_timezone() -> ZoneInfo:
    """Get the configured timezone."""
    tz_name = current_app.config.get('TIMEZONE', 'America/Lima')
    return ZoneInfo(tz_name)


def get_now() -> datetime:
    """Get current datetime in the configured timezone."""
    return datetime.now(get_timezone())


def get_cancellation_deadline(start_date: date) -> datetime:
    """
    Last moment a member may cancel a stay: the configured hour (noon by
    default) of the day before check-in, in the configured timezone.
    """
    hour = current_app.config.get('CANCELLATION_CUTOFF_HOUR', 12)
    day_before = start_date - timedelta(days=1)
    return datetime.combine(day_before, time(hour=hour), tzinfo=get_timezone())
