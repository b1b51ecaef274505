"""Permission claims issued for an account."""

from company_manager.application.identity.protocols.role_repository import RoleRepositoryProtocol
from company_manager.domain.access_control.hierarchical_role import all_permissions
from company_manager.domain.identity.entities.user_account import UserAccount


def resolve_permissions(account: UserAccount, role_repository: RoleRepositoryProtocol) -> list[str]:
    """Permissions of the account's role; SuperUser gets every known permission."""
    role = role_repository.find_by_id(account.role_id)
    if role is None:
        return []
    if role.is_super_user:
        return sorted(set(all_permissions()) | role.permissions)
    return sorted(role.permissions)
