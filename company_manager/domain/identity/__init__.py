"""Identity domain layer."""

from company_manager.domain.identity.entities.user_account import UserAccount
from company_manager.domain.identity.exceptions import (
    AccountInactiveError,
    AccountLockedOutError,
    InvalidCredentialsError,
    PasswordVerificationError,
    RoleNotFoundError,
    UserAccountNotFoundError,
    UserNameAlreadyExistsError,
)

__all__ = [
    "AccountInactiveError",
    "AccountLockedOutError",
    "InvalidCredentialsError",
    "PasswordVerificationError",
    "RoleNotFoundError",
    "UserAccount",
    "UserAccountNotFoundError",
    "UserNameAlreadyExistsError",
]
