from .password_service import PasswordServiceProtocol
from .role_repository import RoleRepositoryProtocol
from .token_service import TokenServiceProtocol
from .user_account_repository import UserAccountRepositoryProtocol

__all__ = [
    "PasswordServiceProtocol",
    "RoleRepositoryProtocol",
    "TokenServiceProtocol",
    "UserAccountRepositoryProtocol",
]
