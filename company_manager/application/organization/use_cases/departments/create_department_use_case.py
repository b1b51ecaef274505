"""Create department use case."""

import structlog

from company_manager.application.organization.protocols.department_repository import (
    DepartmentRepositoryProtocol,
)
from company_manager.application.organization.use_cases.dtos import DepartmentDTO
from company_manager.domain.organization.entities.department import Department
from company_manager.domain.organization.exceptions import DepartmentNameAlreadyInUseError
from company_manager.infrastructure.organization.schemas import DepartmentRequest

logger = structlog.get_logger(__name__)


class CreateDepartmentUseCase:
    """Use case for creating departments."""

    def __init__(self, department_repository: DepartmentRepositoryProtocol) -> None:
        self.department_repository = department_repository

    def create_department(self, request: DepartmentRequest) -> DepartmentDTO:
        """
        Create a department.

        Raises:
            DepartmentNameAlreadyInUseError: If another department has the name
        """
        if self.department_repository.find_by_name(request.name) is not None:
            raise DepartmentNameAlreadyInUseError(request.name)

        department = self.department_repository.save(
            Department.create(request.name, request.description)
        )

        logger.info("department_created", department_id=str(department.id), name=department.name)
        return DepartmentDTO.from_entity(department)
