from typing import Protocol

from company_manager.domain.common.value_objects.ids import EmployeeId, UserAccountId
from company_manager.domain.identity.entities.user_account import UserAccount


class UserAccountRepositoryProtocol(Protocol):
    def find_by_id(self, account_id: UserAccountId) -> UserAccount | None: ...

    def find_by_user_name(self, user_name: str) -> UserAccount | None: ...

    def find_by_employee_id(self, employee_id: EmployeeId) -> UserAccount | None: ...

    def count(self) -> int: ...

    def save(self, account: UserAccount) -> UserAccount: ...

    def delete(self, account_id: UserAccountId) -> bool: ...
