"""List job titles use case."""

from company_manager.application.common.filters import JobTitleFilter
from company_manager.application.common.pagination import (
    DEFAULT_PAGE_SIZE,
    PageRequest,
    PageResult,
    clamp_page_size,
)
from company_manager.application.organization.protocols.job_title_repository import (
    JobTitleRepositoryProtocol,
)
from company_manager.application.organization.use_cases.dtos import JobTitleDTO


class ListJobTitlesUseCase:
    """Paged job title search, ordered by hierarchy level then name."""

    def __init__(self, job_title_repository: JobTitleRepositoryProtocol) -> None:
        self.job_title_repository = job_title_repository

    def list_job_titles(
        self,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        name_contains: str | None = None,
        hierarchy_level: int | None = None,
        is_active: bool | None = None,
    ) -> PageResult[JobTitleDTO]:
        request = PageRequest(max(page, 1), clamp_page_size(page_size))
        job_title_filter = JobTitleFilter(
            name_contains=name_contains,
            hierarchy_level=hierarchy_level,
            is_active=is_active,
        )
        items, total = self.job_title_repository.search(job_title_filter, request)
        return PageResult(
            items=[JobTitleDTO.from_entity(j) for j in items],
            total=total,
            page=request.page_safe,
            page_size=request.page_size_safe,
        )
