from typing import Protocol

from company_manager.domain.access_control.role import Role
from company_manager.domain.common.value_objects.ids import RoleId


class RoleRepositoryProtocol(Protocol):
    def find_by_id(self, role_id: RoleId) -> Role | None: ...

    def find_by_name(self, name: str) -> Role | None: ...

    def save(self, role: Role) -> Role: ...
