"""Get employee by id use case."""

from company_manager.application.organization.protocols.employee_repository import (
    EmployeeRepositoryProtocol,
)
from company_manager.application.organization.use_cases.dtos import EmployeeDTO
from company_manager.domain.common.value_objects.ids import EmployeeId


class GetEmployeeByIdUseCase:
    def __init__(self, employee_repository: EmployeeRepositoryProtocol) -> None:
        self.employee_repository = employee_repository

    def get_employee(self, employee_id: EmployeeId) -> EmployeeDTO | None:
        employee = self.employee_repository.find_by_id(employee_id)
        return EmployeeDTO.from_entity(employee) if employee else None
