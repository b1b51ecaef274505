"""List employees use case."""

from uuid import UUID

from company_manager.application.common.filters import EmployeeFilter
from company_manager.application.common.pagination import (
    DEFAULT_PAGE_SIZE,
    PageRequest,
    PageResult,
    clamp_page_size,
)
from company_manager.application.organization.protocols.employee_repository import (
    EmployeeRepositoryProtocol,
)
from company_manager.application.organization.use_cases.dtos import EmployeeDTO


class ListEmployeesUseCase:
    """Paged employee search."""

    def __init__(self, employee_repository: EmployeeRepositoryProtocol) -> None:
        self.employee_repository = employee_repository

    def list_employees(
        self,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        department_id: UUID | None = None,
        name_or_email: str | None = None,
        job_title_id: UUID | None = None,
    ) -> PageResult[EmployeeDTO]:
        """
        Search employees.

        Args:
            page: 1-indexed page; values below 1 read as 1
            page_size: Clamped into [1, MAX_PAGE_SIZE]
            department_id: Only employees of this department
            name_or_email: Case-insensitive substring of first name, last name or e-mail
            job_title_id: Only employees holding this job title

        Returns:
            One page of employees, ordered by name
        """
        request = PageRequest(max(page, 1), clamp_page_size(page_size))
        employee_filter = EmployeeFilter(
            department_id=department_id,
            name_or_email=name_or_email,
            job_title_id=job_title_id,
        )
        items, total = self.employee_repository.search(employee_filter, request)
        return PageResult(
            items=[EmployeeDTO.from_entity(e) for e in items],
            total=total,
            page=request.page_safe,
            page_size=request.page_size_safe,
        )
