from src.attendance_import.attendance_import.core.enums import ImportFormat
from src.attendance_import.attendance_import.imports.parsers.detail_block import DetailBlockParser
from src.attendance_import.attendance_import.imports.readers import read_rows

DETAIL_CSV = """Mã nhân viên: 00007         Tên nhân viên: A         Phòng ban: --------,,,,,
Ngày,Thứ,Vào 1,Ra 1,Vào 2,Ra 2
,,Vào,Ra,Vào,Ra
01/06/2024,T.7,08:00,17:00,,
02/06/2024,CN,-,-,,
03/06/2024,T.2,08:10,,,
Bảng chi tiết tăng ca,,,,,
04/06/2024,T.3,08:00,17:00,,
Mã nhân viên: 00008         Tên nhân viên: Trần Văn B         Phòng ban: IT,,,,,
Ngày,Thứ,Vào 1,Ra 1,Vào 2,Ra 2
03/06/2024,T.2,07:55,17:05,,
"""


def test_single_row_block():
    csv_text = (
        "Mã nhân viên: 00007         Tên nhân viên: A,,,\n"
        "Ngày,Thứ,Vào 1,Ra 1\n"
        "01/06/2024,T.7,08:00,17:00\n"
    )
    result = DetailBlockParser().parse(read_rows(csv_text))

    assert result.source == ImportFormat.DETAIL_BLOCK
    assert len(result.rows) == 1
    row = result.rows[0]
    assert row.get("employee_code") == "00007"
    assert row.get("employee_name") == "A"
    assert row.get("date") == "01/06/2024"
    assert row.get("day_of_week") == "T.7"
    assert row.get("check_in") == "08:00"
    assert row.get("check_out") == "17:00"


def test_blocks_skip_missing_times_and_stop_at_section_marker():
    result = DetailBlockParser().parse(read_rows(DETAIL_CSV))

    assert [(r.get("employee_code"), r.get("date")) for r in result.rows] == [
        ("00007", "01/06/2024"),
        ("00008", "03/06/2024"),
    ]
    assert result.rows[1].get("employee_name") == "Trần Văn B"


def test_employee_header_recognition():
    assert DetailBlockParser.is_employee_header("Mã nhân viên: 00002   Tên nhân viên: Dung")
    assert DetailBlockParser.is_employee_header("Mã NV: 00002   Tên nhân viên: Dung")
    assert not DetailBlockParser.is_employee_header("Ngày,Thứ,Vào 1,Ra 1")


def test_rows_outside_a_block_are_ignored():
    result = DetailBlockParser().parse(read_rows("Ngày,Thứ,Vào 1,Ra 1\n01/06/2024,T.7,08:00,17:00\n"))
    assert result.rows == ()
