from datetime import date, datetime, timedelta

import pytest

from src.attendance_import.attendance_import.common.datetime_utils import (
    is_weekend_label,
    parse_date,
    parse_serial_date,
    parse_time,
)
from src.attendance_import.attendance_import.core.exceptions import InvalidDate, InvalidTime


@pytest.mark.parametrize(
    "token",
    ["03/06/2024", "3/6/2024", "03-06-2024", "2024-06-03", "2024-6-3", "2024-06-03 08:15:00", "45446"],
)
def test_all_supported_date_formats_agree(token):
    assert parse_date(token) == date(2024, 6, 3)


def test_serial_date_matches_spreadsheet_calendar():
    assert parse_serial_date(45292) == date(2024, 1, 1)
    assert parse_serial_date(45444) == date(2024, 6, 1)


@pytest.mark.parametrize("serial", [45291, 45322, 45350, 45351, 45443, 45657])
def test_adjacent_serials_are_adjacent_days_across_month_and_year(serial):
    assert parse_serial_date(serial + 1) - parse_serial_date(serial) == timedelta(days=1)


@pytest.mark.parametrize("token", ["", "abc", "32/01/2024", "2024-02-30", "03.06.2024"])
def test_bad_dates_raise_invalid_date(token):
    with pytest.raises(InvalidDate):
        parse_date(token)


def test_huge_serial_is_invalid_date_not_overflow():
    with pytest.raises(InvalidDate):
        parse_date("99999999999")


def test_parse_time_combines_with_base_date():
    assert parse_time("8:05", date(2024, 6, 3)) == datetime(2024, 6, 3, 8, 5)
    assert parse_time("17:30:15", date(2024, 6, 3)) == datetime(2024, 6, 3, 17, 30, 15)


@pytest.mark.parametrize("token", [None, "", "-", "8h", "25:00"])
def test_optional_time_gives_none(token):
    assert parse_time(token, date(2024, 6, 3)) is None


def test_time_after_a_date_keeps_only_the_clock():
    assert parse_time("2024-06-03 08:15:00", date(2024, 6, 3)) == datetime(2024, 6, 3, 8, 15)
    assert parse_time("03/06/2024 17:30", date(2024, 6, 3)) == datetime(2024, 6, 3, 17, 30)


def test_required_time_raises():
    with pytest.raises(InvalidTime) as exc:
        parse_time("25:00", date(2024, 6, 3), required=True)
    assert "Định dạng giờ không hợp lệ" in str(exc.value)


def test_weekend_labels_are_case_insensitive():
    assert is_weekend_label("cn", ("CN", "T.7"))
    assert is_weekend_label(" T.7 ", ("CN", "T.7"))
    assert not is_weekend_label("T.2", ("CN", "T.7"))
    assert not is_weekend_label(None, ("CN", "T.7"))
