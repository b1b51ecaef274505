"""Get department by id use case."""

from company_manager.application.organization.protocols.department_repository import (
    DepartmentRepositoryProtocol,
)
from company_manager.application.organization.use_cases.dtos import DepartmentDTO
from company_manager.domain.common.value_objects.ids import DepartmentId


class GetDepartmentByIdUseCase:
    def __init__(self, department_repository: DepartmentRepositoryProtocol) -> None:
        self.department_repository = department_repository

    def get_department(self, department_id: DepartmentId) -> DepartmentDTO | None:
        department = self.department_repository.find_by_id(department_id)
        return DepartmentDTO.from_entity(department) if department else None
