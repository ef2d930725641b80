import pytest

from src.attendance_import.attendance_import.imports.parsers.generic_columns import GenericColumnParser, map_header
from src.attendance_import.attendance_import.imports.readers import read_rows


@pytest.mark.parametrize(
    "header, field",
    [
        ("STT", "stt"),
        ("Mã NV", "employee_code"),
        ("Mã nhân viên", "employee_code"),
        ("Employee Code", "employee_code"),
        ("Họ và tên", "employee_name"),
        ("Phòng ban", "department"),
        ("Ngày", "date"),
        ("Thứ", "day_of_week"),
        ("Giờ vào", "check_in"),
        ("Check-in", "check_in"),
        ("Giờ ra", "check_out"),
        ("Đi trễ", "late"),
        ("Về sớm", "early"),
        ("Tăng ca", "overtime"),
        ("Công", "work_factor"),
        ("Tổng giờ", "total_hours"),
        ("Ca", "shift"),
        ("Ký hiệu", "shift"),
    ],
)
def test_header_vocabulary(header, field):
    assert map_header(header) == field


def test_unknown_header_passes_through():
    assert map_header("  Ghi chú ") == "Ghi chú"


def test_header_mapping():
    rows = read_rows(
        "Mã NV,Họ tên,Ngày,Giờ vào,Giờ ra,Công,Ca\n"
        "00042,An,03/06/2024,08:00,17:30,1,HC\n"
        ",,04/06/2024,08:00,17:30,1,\n"
    )
    result = GenericColumnParser().parse(rows)

    assert len(result.rows) == 1
    row = result.rows[0]
    assert row.row_ref == 2
    assert row.get("employee_code") == "00042"
    assert row.get("employee_name") == "An"
    assert row.get("check_out") == "17:30"
    assert row.get("work_factor") == "1"
    assert row.get("shift") == "HC"


def test_first_duplicate_column_wins():
    rows = read_rows("Mã NV,Ngày,Vào,Ra,Vào,Ra\n00042,03/06/2024,08:00,12:00,13:00,17:00\n")
    row = GenericColumnParser().parse(rows).rows[0]
    assert row.get("check_in") == "08:00"
    assert row.get("check_out") == "12:00"


def test_positional_fallback_when_no_header_recognized():
    rows = read_rows(
        "x1,x2,x3,x4,x5,x6,x7,x8\n"
        "1,00042,An,IT,03/06/2024,T.2,08:00,17:00\n"
        "2,,,,04/06/2024,T.3,08:00,17:00\n"
        "3,00043,Bình,IT,04/06/2024,T.3,08:00,12:00\n"
    )
    result = GenericColumnParser().parse(rows)

    assert [r.get("employee_code") for r in result.rows] == ["00042", "00043"]
    first = result.rows[0]
    assert first.get("date") == "03/06/2024"
    assert first.get("day_of_week") == "T.2"
    assert first.get("check_in") == "08:00"
    assert first.get("check_out") == "17:00"


def test_header_only_file_has_no_rows():
    assert GenericColumnParser().parse(read_rows("Mã NV,Ngày\n")).rows == ()
