import json
from types import SimpleNamespace

import pytest

import src.attendance_import.attendance_import.main as cli
from src.attendance_import.attendance_import.employees.model import RegistryEmployee
from src.attendance_import.attendance_import.imports.service import ImportService


class InMemoryEmployees:
    def fetch_all_employees(self):
        return [RegistryEmployee(id=42, code="NV00042", full_name="An")]


class InMemoryAttendance:
    def __init__(self):
        self.days = {}

    def upsert_attendance_day(self, *, employee_id, work_date, status, overtime_hours, **extra):
        self.days[(employee_id, work_date)] = status


@pytest.fixture
def attendance(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    repo = InMemoryAttendance()
    service = ImportService(repo, InMemoryEmployees())
    monkeypatch.setattr(cli, "build_container", lambda **kwargs: SimpleNamespace(import_service=service))
    return repo


def test_cli_prints_report_as_json(tmp_path, capsys, attendance):
    path = tmp_path / "bang_cong.csv"
    path.write_text("STT,Mã NV,Tên,1,2,3\n,,,T.2,T.3,T.4\n001,00042,An,1,0,1.5\n", encoding="utf-8")

    code = cli.main([str(path), "--format", "monthly", "--month", "6", "--year", "2024", "--user", "admin"])

    assert code == cli.EXIT_OK
    report = json.loads(capsys.readouterr().out)
    assert report["success"] == 3
    assert report["format"] == "monthly_grid"
    assert report["period"] == {"month": 6, "year": 2024}
    assert report["imported_by"] == "admin"
    assert len(attendance.days) == 3


def test_cli_structural_failure_exit_code(tmp_path, capsys, attendance):
    path = tmp_path / "rac.csv"
    path.write_text("foo\nbar\n", encoding="utf-8")

    assert cli.main([str(path)]) == cli.EXIT_STRUCTURE
    assert "error" in json.loads(capsys.readouterr().err)


def test_cli_missing_file(tmp_path, attendance):
    assert cli.main([str(tmp_path / "missing.csv")]) == cli.EXIT_USAGE


def test_cli_month_requires_year(tmp_path, attendance):
    with pytest.raises(SystemExit):
        cli.main([str(tmp_path / "x.csv"), "--month", "6"])
