"""Create job title use case."""

import structlog

from company_manager.application.organization.protocols.job_title_repository import (
    JobTitleRepositoryProtocol,
)
from company_manager.application.organization.use_cases.dtos import JobTitleDTO
from company_manager.domain.organization.entities.job_title import JobTitle
from company_manager.domain.organization.exceptions import JobTitleNameAlreadyInUseError
from company_manager.infrastructure.organization.schemas import JobTitleRequest

logger = structlog.get_logger(__name__)


class CreateJobTitleUseCase:
    """Use case for creating job titles."""

    def __init__(self, job_title_repository: JobTitleRepositoryProtocol) -> None:
        self.job_title_repository = job_title_repository

    def create_job_title(self, request: JobTitleRequest) -> JobTitleDTO:
        """
        Create an active job title.

        Raises:
            JobTitleNameAlreadyInUseError: If another job title has the name
        """
        if self.job_title_repository.find_by_name(request.name) is not None:
            raise JobTitleNameAlreadyInUseError(request.name)

        job_title = self.job_title_repository.save(
            JobTitle.create(request.name, request.hierarchy_level, request.description)
        )

        logger.info(
            "job_title_created",
            job_title_id=str(job_title.id),
            name=job_title.name,
            hierarchy_level=job_title.hierarchy_level,
        )
        return JobTitleDTO.from_entity(job_title)
