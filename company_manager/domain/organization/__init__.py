"""Organization domain layer: employees, departments and job titles."""

from company_manager.domain.organization.entities import (
    Department,
    Employee,
    EmployeePhone,
    JobTitle,
    PhoneType,
)
from company_manager.domain.organization.exceptions import (
    DepartmentNameAlreadyInUseError,
    DepartmentNotFoundError,
    DocumentAlreadyInUseError,
    EmailAlreadyInUseError,
    EmployeeNotFoundError,
    JobTitleNameAlreadyInUseError,
    JobTitleNotFoundError,
)

__all__ = [
    "Department",
    "DepartmentNameAlreadyInUseError",
    "DepartmentNotFoundError",
    "DocumentAlreadyInUseError",
    "EmailAlreadyInUseError",
    "Employee",
    "EmployeeNotFoundError",
    "EmployeePhone",
    "JobTitle",
    "JobTitleNameAlreadyInUseError",
    "JobTitleNotFoundError",
    "PhoneType",
]
