from .department_repository import DepartmentRepository
from .employee_repository import EmployeeRepository
from .job_title_repository import JobTitleRepository

__all__ = ["DepartmentRepository", "EmployeeRepository", "JobTitleRepository"]
