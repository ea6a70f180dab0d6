"""Timestamp helpers for snapshots and reports."""

from datetime import datetime, timezone


def now_iso() -> str:
    """Current UTC time as an ISO 8601 string with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def format_local(value: str | None = None) -> str:
    """Format an ISO timestamp (or now) the way the reports display dates.

    Args:
        value: ISO 8601 timestamp. Defaults to the current time.

    Returns:
        Local date and time as 'dd/mm/yyyy, HH:MM:SS', or the input unchanged if unparseable.

    """
    if value is None:
        moment = datetime.now()
    else:
        try:
            moment = datetime.fromisoformat(value.replace('Z', '+00:00')).astimezone()
        except ValueError:
            return value
    return moment.strftime('%d/%m/%Y, %H:%M:%S')
