"""Delete department use case."""

import structlog

from company_manager.application.organization.protocols.department_repository import (
    DepartmentRepositoryProtocol,
)
from company_manager.domain.common.value_objects.ids import DepartmentId

logger = structlog.get_logger(__name__)


class DeleteDepartmentUseCase:
    def __init__(self, department_repository: DepartmentRepositoryProtocol) -> None:
        self.department_repository = department_repository

    def delete_department(self, department_id: DepartmentId) -> None:
        """Delete a department. Missing departments are ignored."""
        if self.department_repository.delete(department_id):
            logger.info("department_deleted", department_id=str(department_id))
