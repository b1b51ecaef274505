from .department import Department
from .employee import Employee
from .employee_phone import EmployeePhone, PhoneType
from .job_title import JobTitle

__all__ = [
    "Department",
    "Employee",
    "EmployeePhone",
    "JobTitle",
    "PhoneType",
]
