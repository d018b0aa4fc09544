"""Date and time formatting."""

import logging
from datetime import date, datetime

logger = logging.getLogger(__name__)

DEFAULT_DATE_TIME_FORMAT = "YYYY-MM-DD hh:mm:ss"


def _parse(value: object) -> datetime | None:
    """Return ``value`` as a datetime, or None if it is not a date or ISO string."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str) and value.strip():
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            logger.debug("Not an ISO 8601 date: %r", value)
    return None


def format_date_time(
    value: datetime | date | str | None, fmt: str | None = DEFAULT_DATE_TIME_FORMAT
) -> str | None:
    """Render ``value`` with the ``YYYY MM DD hh mm ss`` tokens of ``fmt``.

    Timezone-aware values are rendered in local time.

    Args:
        value: A `datetime`, a `date` or an ISO 8601 string.
        fmt: Format string; ``None`` uses ``"YYYY-MM-DD hh:mm:ss"``.

    Returns:
        str | None: The formatted date, or None for invalid input.

    Examples:
        >>> format_date_time("2024-03-05T07:08:09", "DD/MM/YYYY hh.mm")
        '05/03/2024 07.08'
    """
    if fmt is None:
        fmt = DEFAULT_DATE_TIME_FORMAT
    if not isinstance(fmt, str):
        return None
    parsed = _parse(value)
    if parsed is None:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()

    tokens = {
        "YYYY": str(parsed.year),
        "MM": f"{parsed.month:02d}",
        "DD": f"{parsed.day:02d}",
        "hh": f"{parsed.hour:02d}",
        "mm": f"{parsed.minute:02d}",
        "ss": f"{parsed.second:02d}",
    }
    result = fmt
    for token, replacement in tokens.items():
        result = result.replace(token, replacement)
    return result


def get_gmt_offset(value: datetime | date | str | None = None) -> str:
    """Return the UTC offset of ``value`` as ``"+HHMM"`` or ``"-HHMM"``.

    Naive values (and ``None`` or ``""``, meaning now) use the local
    timezone; aware values use their own offset.

    Returns:
        str: The offset, or ``"0"`` for invalid input.

    Examples:
        >>> get_gmt_offset("2024-01-01T00:00:00+05:30")
        '+0530'
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        parsed: datetime | None = datetime.now().astimezone()
    else:
        parsed = _parse(value)
    if parsed is None:
        return "0"
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()

    offset = parsed.utcoffset()
    minutes = int(offset.total_seconds() // 60) if offset is not None else 0
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}{minutes:02d}"
