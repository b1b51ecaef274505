"""Organization context schemas."""

from company_manager.infrastructure.organization.schemas.department_schemas import (
    DepartmentRequest,
)
from company_manager.infrastructure.organization.schemas.employee_schemas import (
    EmployeeCreateRequest,
    EmployeeUpdateRequest,
)
from company_manager.infrastructure.organization.schemas.job_title_schemas import JobTitleRequest

__all__ = [
    "DepartmentRequest",
    "EmployeeCreateRequest",
    "EmployeeUpdateRequest",
    "JobTitleRequest",
]
