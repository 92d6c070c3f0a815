"""Reporting periods and chart buckets.

A period ("7d", "30d", ...) maps to a number of days; the number of days
selects the bucket width of the chart series:

    days <= 30         daily    key "YYYY-MM-DD"
    30 < days <= 180   weekly   key "YYYY-MM-DD" of the Monday
    days > 180         monthly  key "YYYY-MM"
"""

from datetime import date, timedelta
from typing import List, Optional

PERIOD_DAYS = {
    "7d": 7,
    "30d": 30,
    "180d": 180,
    "360d": 360,
}
DEFAULT_PERIOD = "30d"

DAILY = 1
WEEKLY = 7
MONTHLY = 30


def resolve_period_days(period: Optional[str]) -> int:
    """Number of days covered by ``period``; unknown values fall back to 30d."""
    return PERIOD_DAYS.get(period or DEFAULT_PERIOD, PERIOD_DAYS[DEFAULT_PERIOD])


def interval_for_days(days: int) -> int:
    if days <= 30:
        return DAILY
    if days <= 180:
        return WEEKLY
    return MONTHLY


def bucket_key_for(day: date, interval_days: int) -> str:
    """Key of the bucket that contains ``day``."""
    if interval_days == DAILY:
        return day.isoformat()
    if interval_days == WEEKLY:
        return (day - timedelta(days=day.weekday())).isoformat()
    return f"{day.year:04d}-{day.month:02d}"


def _bucket_start(day: date, interval_days: int) -> date:
    if interval_days == DAILY:
        return day
    if interval_days == WEEKLY:
        return day - timedelta(days=day.weekday())
    return day.replace(day=1)


def _next_bucket_start(start: date, interval_days: int) -> date:
    if interval_days in (DAILY, WEEKLY):
        return start + timedelta(days=interval_days)
    if start.month == 12:
        return start.replace(year=start.year + 1, month=1)
    return start.replace(month=start.month + 1)


def bucket_keys(today: date, days: int, interval_days: int) -> List[str]:
    """Every bucket key from ``today - days`` through ``today``, ascending.

    Walks calendar buckets rather than fixed day offsets so that no month
    or week in the range is skipped.
    """
    keys = []
    current = _bucket_start(today - timedelta(days=days), interval_days)
    last = _bucket_start(today, interval_days)
    while current <= last:
        keys.append(bucket_key_for(current, interval_days))
        current = _next_bucket_start(current, interval_days)
    return keys
