from typing import Protocol

from company_manager.application.common.filters import EmployeeFilter
from company_manager.application.common.pagination import PageRequest
from company_manager.domain.common.value_objects import DocumentNumber, Email
from company_manager.domain.common.value_objects.ids import EmployeeId
from company_manager.domain.organization.entities.employee import Employee


class EmployeeRepositoryProtocol(Protocol):
    def find_by_id(self, employee_id: EmployeeId) -> Employee | None: ...

    def find_by_email(self, email: Email) -> Employee | None: ...

    def find_by_document(self, document_number: DocumentNumber) -> Employee | None: ...

    def search(
        self, employee_filter: EmployeeFilter, page: PageRequest
    ) -> tuple[list[Employee], int]: ...

    def save(self, employee: Employee) -> Employee: ...

    def delete(self, employee_id: EmployeeId) -> bool: ...
