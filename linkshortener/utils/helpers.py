"""Helper utilities shared by the services and the CLI.

Functions:
    utcnow() -> datetime
        Current time as a timezone-aware UTC datetime
    expiry_from(start, ttl_hours) -> datetime
        Compute an absolute expiration time from a TTL in hours
    remaining_time(expires_at, now) -> timedelta
        Time left until expiration, never negative
    format_timedelta(delta) -> str
        Render a duration as a compact human string (e.g. '1d 02h 03m')

Example:
    >>> from datetime import datetime, UTC
    >>> start = datetime(2025, 10, 15, tzinfo=UTC)
    >>> expiry_from(start, 24)
    datetime.datetime(2025, 10, 16, 0, 0, tzinfo=datetime.timezone.utc)
"""

from datetime import datetime, timedelta, UTC


# Smallest validity window a link can get, even if its TTL is 0
MIN_VALIDITY = timedelta(milliseconds=1)


def utcnow() -> datetime:
    return datetime.now(UTC)


def expiry_from(start: datetime, ttl_hours: int) -> datetime:
    """Compute an absolute expiration time from a TTL in hours

    Args:
        start (datetime):
            Moment the TTL starts counting from (creation or edit time).
        ttl_hours (int):
            Time-to-live in hours (already clamped by the caller).

    Returns:
        datetime:
            `start + ttl_hours`, but at least `start + 1ms`.
    """
    return start + max(timedelta(hours=ttl_hours), MIN_VALIDITY)


def remaining_time(expires_at: datetime, now: datetime) -> timedelta:
    return max(expires_at - now, timedelta(0))


def format_timedelta(delta: timedelta) -> str:
    """Render a duration as a compact human string

    Example:
        >>> format_timedelta(timedelta(days=1, hours=2, minutes=3, seconds=59))
        '1d 02h 03m'
        >>> format_timedelta(timedelta(seconds=30))
        '0m'
    """
    minutes = int(delta.total_seconds()) // 60
    days, minutes = divmod(minutes, 60 * 24)
    hours, minutes = divmod(minutes, 60)

    if days:
        return f'{days}d {hours:02d}h {minutes:02d}m'
    if hours:
        return f'{hours}h {minutes:02d}m'
    return f'{minutes}m'
