"""Get job title by id use case."""

from company_manager.application.organization.protocols.job_title_repository import (
    JobTitleRepositoryProtocol,
)
from company_manager.application.organization.use_cases.dtos import JobTitleDTO
from company_manager.domain.common.value_objects.ids import JobTitleId


class GetJobTitleByIdUseCase:
    def __init__(self, job_title_repository: JobTitleRepositoryProtocol) -> None:
        self.job_title_repository = job_title_repository

    def get_job_title(self, job_title_id: JobTitleId) -> JobTitleDTO | None:
        job_title = self.job_title_repository.find_by_id(job_title_id)
        return JobTitleDTO.from_entity(job_title) if job_title else None
