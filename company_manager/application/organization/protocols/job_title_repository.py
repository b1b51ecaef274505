from typing import Protocol

from company_manager.application.common.filters import JobTitleFilter
from company_manager.application.common.pagination import PageRequest
from company_manager.domain.common.value_objects.ids import JobTitleId
from company_manager.domain.organization.entities.job_title import JobTitle


class JobTitleRepositoryProtocol(Protocol):
    def find_by_id(self, job_title_id: JobTitleId) -> JobTitle | None: ...

    def find_by_name(self, name: str) -> JobTitle | None: ...

    def search(
        self, job_title_filter: JobTitleFilter, page: PageRequest
    ) -> tuple[list[JobTitle], int]: ...

    def save(self, job_title: JobTitle) -> JobTitle: ...

    def delete(self, job_title_id: JobTitleId) -> bool: ...
