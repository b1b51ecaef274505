"""List departments use case."""

from company_manager.application.common.filters import DepartmentFilter
from company_manager.application.common.pagination import (
    DEFAULT_PAGE_SIZE,
    PageRequest,
    PageResult,
    clamp_page_size,
)
from company_manager.application.organization.protocols.department_repository import (
    DepartmentRepositoryProtocol,
)
from company_manager.application.organization.use_cases.dtos import DepartmentDTO


class ListDepartmentsUseCase:
    """Paged department search."""

    def __init__(self, department_repository: DepartmentRepositoryProtocol) -> None:
        self.department_repository = department_repository

    def list_departments(
        self,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        name_contains: str | None = None,
    ) -> PageResult[DepartmentDTO]:
        request = PageRequest(max(page, 1), clamp_page_size(page_size))
        items, total = self.department_repository.search(
            DepartmentFilter(name_contains=name_contains), request
        )
        return PageResult(
            items=[DepartmentDTO.from_entity(d) for d in items],
            total=total,
            page=request.page_safe,
            page_size=request.page_size_safe,
        )
