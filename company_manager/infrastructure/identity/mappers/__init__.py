from .role_mapper import RoleMapper
from .user_account_mapper import UserAccountMapper

__all__ = ["RoleMapper", "UserAccountMapper"]
