"""Domain: publish date collapsing, interpretation and formatting"""

from datetime import date, datetime, timedelta, timezone

import pytest

from app.domain.publish_date import (
    collapse_date_value,
    format_date_stamp,
    is_absent,
    to_calendar_date,
)


def _millis(dt: datetime) -> int:
    return int(dt.timestamp() * 1000)


def test_collapse_takes_only_first_element():
    assert collapse_date_value([111, 222]) == 111
    assert collapse_date_value(("2025-06-01",)) == "2025-06-01"


def test_collapse_empty_list_is_absent():
    assert collapse_date_value([]) is None


def test_collapse_passes_scalars_through():
    assert collapse_date_value(123) == 123
    assert collapse_date_value(None) is None


def test_is_absent():
    assert is_absent(None)
    assert is_absent("")
    assert not is_absent(0)
    assert not is_absent("2025-06-01")


def test_format_ignores_time_of_day():
    assert format_date_stamp(_millis(datetime(2025, 3, 7, 0, 0))) == "20250307"
    assert format_date_stamp(_millis(datetime(2025, 3, 7, 23, 59, 59))) == "20250307"
    assert format_date_stamp(datetime(2025, 3, 7, 12, 30)) == "20250307"
    assert format_date_stamp(date(2025, 3, 7)) == "20250307"


def test_format_accepts_iso_and_digit_strings():
    assert format_date_stamp("2025-03-07") == "20250307"
    assert format_date_stamp("2025-03-07T18:45:00") == "20250307"
    assert format_date_stamp(str(_millis(datetime(2025, 3, 7, 9, 0)))) == "20250307"


def test_aware_datetime_is_read_in_local_time():
    aware = datetime(2025, 3, 7, 12, 0, tzinfo=timezone(timedelta(hours=0)))
    assert to_calendar_date(aware) == aware.astimezone().date()


@pytest.mark.parametrize("value", ["not a date", "2025-13-40", True, object()])
def test_malformed_values_raise_value_error(value):
    with pytest.raises(ValueError):
        to_calendar_date(value)
