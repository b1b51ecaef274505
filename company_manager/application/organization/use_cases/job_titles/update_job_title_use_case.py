"""Update job title use case."""

import structlog

from company_manager.application.organization.protocols.job_title_repository import (
    JobTitleRepositoryProtocol,
)
from company_manager.application.organization.use_cases.dtos import JobTitleDTO
from company_manager.domain.common.value_objects.ids import JobTitleId
from company_manager.domain.organization.exceptions import (
    JobTitleNameAlreadyInUseError,
    JobTitleNotFoundError,
)
from company_manager.infrastructure.organization.schemas import JobTitleRequest

logger = structlog.get_logger(__name__)


class UpdateJobTitleUseCase:
    def __init__(self, job_title_repository: JobTitleRepositoryProtocol) -> None:
        self.job_title_repository = job_title_repository

    def update_job_title(self, job_title_id: JobTitleId, request: JobTitleRequest) -> JobTitleDTO:
        """
        Replace a job title's name, level and description.

        Raises:
            JobTitleNotFoundError: If the job title does not exist
            JobTitleNameAlreadyInUseError: If another job title has the name
        """
        job_title = self.job_title_repository.find_by_id(job_title_id)
        if job_title is None:
            raise JobTitleNotFoundError(job_title_id)

        owner = self.job_title_repository.find_by_name(request.name)
        if owner is not None and owner.id != job_title.id:
            raise JobTitleNameAlreadyInUseError(request.name)

        job_title.update(request.name, request.hierarchy_level, request.description)
        job_title = self.job_title_repository.save(job_title)

        logger.info("job_title_updated", job_title_id=str(job_title.id))
        return JobTitleDTO.from_entity(job_title)
