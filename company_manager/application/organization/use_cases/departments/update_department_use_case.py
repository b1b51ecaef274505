"""Update department use case."""

import structlog

from company_manager.application.organization.protocols.department_repository import (
    DepartmentRepositoryProtocol,
)
from company_manager.application.organization.use_cases.dtos import DepartmentDTO
from company_manager.domain.common.value_objects.ids import DepartmentId
from company_manager.domain.organization.exceptions import (
    DepartmentNameAlreadyInUseError,
    DepartmentNotFoundError,
)
from company_manager.infrastructure.organization.schemas import DepartmentRequest

logger = structlog.get_logger(__name__)


class UpdateDepartmentUseCase:
    """Use case for renaming and describing departments."""

    def __init__(self, department_repository: DepartmentRepositoryProtocol) -> None:
        self.department_repository = department_repository

    def update_department(
        self, department_id: DepartmentId, request: DepartmentRequest
    ) -> DepartmentDTO:
        """
        Update a department's name and description.

        Raises:
            DepartmentNotFoundError: If the department does not exist
            DepartmentNameAlreadyInUseError: If another department has the name
        """
        department = self.department_repository.find_by_id(department_id)
        if department is None:
            raise DepartmentNotFoundError(department_id)

        owner = self.department_repository.find_by_name(request.name)
        if owner is not None and owner.id != department.id:
            raise DepartmentNameAlreadyInUseError(request.name)

        department.rename(request.name)
        department.update_description(request.description)
        department = self.department_repository.save(department)

        logger.info("department_updated", department_id=str(department.id))
        return DepartmentDTO.from_entity(department)
