from typing import Protocol

from company_manager.application.common.filters import DepartmentFilter
from company_manager.application.common.pagination import PageRequest
from company_manager.domain.common.value_objects.ids import DepartmentId
from company_manager.domain.organization.entities.department import Department


class DepartmentRepositoryProtocol(Protocol):
    def find_by_id(self, department_id: DepartmentId) -> Department | None: ...

    def find_by_name(self, name: str) -> Department | None: ...

    def exists(self, department_id: DepartmentId) -> bool: ...

    def search(
        self, department_filter: DepartmentFilter, page: PageRequest
    ) -> tuple[list[Department], int]: ...

    def save(self, department: Department) -> Department: ...

    def delete(self, department_id: DepartmentId) -> bool: ...
