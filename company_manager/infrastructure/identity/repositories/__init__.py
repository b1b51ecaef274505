from .role_repository import RoleRepository
from .user_account_repository import UserAccountRepository

__all__ = ["RoleRepository", "UserAccountRepository"]
