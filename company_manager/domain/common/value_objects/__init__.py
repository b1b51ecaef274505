"""Value objects shared across all domain modules."""

from .date_of_birth import DateOfBirth
from .document_number import DocumentNumber
from .email import Email
from .ids import (
    DepartmentId,
    EmployeeId,
    EmployeePhoneId,
    JobTitleId,
    RoleId,
    UserAccountId,
)
from .phone_number import PhoneNumber

__all__ = [
    # IDs
    "DepartmentId",
    "EmployeeId",
    "EmployeePhoneId",
    "JobTitleId",
    "RoleId",
    "UserAccountId",
    # Parsed values
    "DateOfBirth",
    "DocumentNumber",
    "Email",
    "PhoneNumber",
]
