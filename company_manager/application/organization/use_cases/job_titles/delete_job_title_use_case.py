"""Delete job title use case."""

import structlog

from company_manager.application.organization.protocols.job_title_repository import (
    JobTitleRepositoryProtocol,
)
from company_manager.domain.common.value_objects.ids import JobTitleId

logger = structlog.get_logger(__name__)


class DeleteJobTitleUseCase:
    def __init__(self, job_title_repository: JobTitleRepositoryProtocol) -> None:
        self.job_title_repository = job_title_repository

    def delete_job_title(self, job_title_id: JobTitleId) -> None:
        """Delete a job title. Missing job titles are ignored."""
        if self.job_title_repository.delete(job_title_id):
            logger.info("job_title_deleted", job_title_id=str(job_title_id))
