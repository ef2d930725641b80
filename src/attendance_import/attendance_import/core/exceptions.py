class DomainError(Exception):
    """Base exception for business rule violations."""


class StructuralDetectionFailure(DomainError):
    """Raised when no parser recognizes the file layout. Fatal for the batch."""


class InvalidRecord(DomainError):
    """Raised when one parsed row cannot become an attendance record."""


class InvalidDate(InvalidRecord):
    """Raised when a date token cannot be parsed or lies outside the period."""


class InvalidTime(InvalidRecord):
    """Raised when a required time token cannot be parsed."""


class EmployeeNotFound(DomainError):
    """Raised when a raw employee code matches nobody in the registry."""

    def __init__(self, code: str):
        super().__init__(f"Không tìm thấy nhân viên với mã: {code}")
        self.code = code


class PersistenceFailure(DomainError):
    """Raised by repositories when one attendance day cannot be stored."""
