from datetime import date, datetime, time
from io import BytesIO

import pandas as pd
import pytest

from src.attendance_import.attendance_import.common.datetime_utils import parse_time
from src.attendance_import.attendance_import.core.exceptions import StructuralDetectionFailure
from src.attendance_import.attendance_import.imports.readers import is_excel, read_rows


def test_csv_bytes_with_bom():
    content = "\ufeffMã NV,Ngày\n00042,03/06/2024\n".encode("utf-8")
    rows = read_rows(content)

    assert rows[0].cells == ("Mã NV", "Ngày")
    assert rows[1].cells == ("00042", "03/06/2024")


def test_blank_rows_dropped_but_numbering_is_physical():
    rows = read_rows("a,b\n\n , \nc,d\n")
    assert [(r.number, r.cells) for r in rows] == [(1, ("a", "b")), (4, ("c", "d"))]


def test_quoted_cells_keep_commas():
    rows = read_rows('Mã NV,Ghi chú\n00042,"đi muộn, về sớm"\n')
    assert rows[1].cell(1) == "đi muộn, về sớm"
    assert rows[1].cell(5) == ""


def test_excel_detection():
    assert is_excel(b"PK\x03\x04rest")
    assert is_excel(b"\xd0\xcf\x11\xe0rest")
    assert is_excel("a,b", "bang_cong.XLSX")
    assert not is_excel(b"a,b\n", "bang_cong.csv")


def test_excel_cells_rendered_like_csv():
    frame = pd.DataFrame(
        [
            ["Mã NV", "Ngày", "Giờ vào", "Công"],
            ["00042", datetime(2024, 6, 3), time(8, 0), 1],
            ["00043", datetime(2024, 6, 4), time(13, 30), 0.5],
        ]
    )
    buf = BytesIO()
    frame.to_excel(buf, header=False, index=False)

    rows = read_rows(buf.getvalue(), filename="bang_cong.xlsx")

    assert rows[0].cells == ("Mã NV", "Ngày", "Giờ vào", "Công")
    assert rows[1].cells == ("00042", "03/06/2024", "08:00:00", "1")
    assert rows[2].cells == ("00043", "04/06/2024", "13:30:00", "0.5")


def test_broken_excel_is_structural_failure():
    with pytest.raises(StructuralDetectionFailure):
        read_rows(b"PK\x03\x04 not really a workbook", filename="broken.xlsx")


def test_excel_timestamp_in_check_in_column_keeps_clock_time():
    frame = pd.DataFrame(
        [
            ["Mã NV", "Ngày", "Giờ vào", "Giờ ra"],
            ["00042", datetime(2024, 6, 3), datetime(2024, 6, 3, 8, 15), datetime(2024, 6, 3, 17, 30)],
        ]
    )
    buf = BytesIO()
    frame.to_excel(buf, header=False, index=False)

    row = read_rows(buf.getvalue(), filename="cham_cong.xlsx")[1]

    assert row.cell(2) == "2024-06-03 08:15:00"
    assert parse_time(row.cell(2), date(2024, 6, 3)) == datetime(2024, 6, 3, 8, 15)
    assert parse_time(row.cell(3), date(2024, 6, 3)) == datetime(2024, 6, 3, 17, 30)
