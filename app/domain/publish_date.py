"""Publish date handling: widget shape collapsing, interpretation, formatting.

Date pickers hand over either a single value or a one-element list holding
it. Values are epoch milliseconds, ``date``/``datetime`` objects or ISO-8601
strings; all are read as a calendar day in local time.
"""

from datetime import date, datetime
from typing import Any, Optional


def collapse_date_value(raw: Any) -> Optional[Any]:
    """Collapse a list to its first element, or to absent when empty.

    Any other value is returned unchanged.
    """
    if isinstance(raw, (list, tuple)):
        return raw[0] if len(raw) > 0 else None
    return raw


def is_absent(value: Any) -> bool:
    return value is None or value == ""


def _from_epoch_millis(millis: float) -> date:
    return datetime.fromtimestamp(millis / 1000).date()


def to_calendar_date(value: Any) -> date:
    """Interpret a date value as a local calendar day.

    Raises ValueError when the value cannot be read as a date.
    """
    if isinstance(value, datetime):
        # aware values are shifted to local time before taking the day
        return value.astimezone().date() if value.tzinfo else value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, bool):
        raise ValueError(f"unsupported date value: {value!r}")
    if isinstance(value, (int, float)):
        try:
            return _from_epoch_millis(value)
        except (OverflowError, OSError) as e:
            raise ValueError(f"timestamp out of range: {value!r}") from e
    if isinstance(value, str):
        s = value.strip()
        if s.isdigit() or (s.startswith("-") and s[1:].isdigit()):
            return to_calendar_date(int(s))
        parsed = datetime.fromisoformat(s)
        return to_calendar_date(parsed)
    raise ValueError(f"unsupported date value: {value!r}")


def format_date_stamp(value: Any) -> str:
    """Format as an 8-digit ``YYYYMMDD`` stamp; time of day is ignored."""
    d = to_calendar_date(value)
    return f"{d.year:04d}{d.month:02d}{d.day:02d}"
