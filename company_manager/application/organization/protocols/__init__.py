from .department_repository import DepartmentRepositoryProtocol
from .employee_repository import EmployeeRepositoryProtocol
from .job_title_repository import JobTitleRepositoryProtocol

__all__ = [
    "DepartmentRepositoryProtocol",
    "EmployeeRepositoryProtocol",
    "JobTitleRepositoryProtocol",
]
