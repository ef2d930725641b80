"""Ví dụ: gọi ImportService trực tiếp (không qua CLI).

Registry được truyền sẵn nên không cần đọc bảng employees; kết quả vẫn ghi
vào attendance_days của CSDL trong DB_CONFIG.
"""

from config import load_settings

from src.attendance_import.attendance_import.container import build_container
from src.attendance_import.attendance_import.employees.model import RegistryEmployee
from src.attendance_import.attendance_import.employees.resolver import RegistryIndex

SAMPLE_CSV = """Mã nhân viên: 00007         Tên nhân viên: Dung         Phòng ban: --------,,,
Ngày,Thứ,Vào 1,Ra 1
,,Vào,Ra
03/06/2024,T.2,08:00,17:30
04/06/2024,T.3,08:15,12:00
"""


def main():
    settings = load_settings()
    container = build_container(db_config=settings.DB_CONFIG, settings=settings)
    registry = RegistryIndex.from_employees([RegistryEmployee(id=7, code="NV00007", full_name="Dung")])

    report = container.import_service.import_file(SAMPLE_CSV, acting_user="example", registry=registry)
    print(report.to_dict())


if __name__ == "__main__":
    main()
