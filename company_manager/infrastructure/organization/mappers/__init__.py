from .department_mapper import DepartmentMapper
from .employee_mapper import EmployeeMapper
from .job_title_mapper import JobTitleMapper

__all__ = ["DepartmentMapper", "EmployeeMapper", "JobTitleMapper"]
