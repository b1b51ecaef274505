"""Identity domain exceptions."""

from datetime import datetime

from company_manager.domain.common.exceptions import DomainError, EntityNotFoundError


class UserAccountNotFoundError(EntityNotFoundError):
    """Raised when a user account cannot be found."""

    def __init__(self, account_id: object, message: str | None = None) -> None:
        super().__init__("UserAccount", account_id, message)


class RoleNotFoundError(EntityNotFoundError):
    """Raised when a role cannot be found."""

    def __init__(self, role_id: object, message: str | None = None) -> None:
        super().__init__("Role", role_id, message)


class UserNameAlreadyExistsError(DomainError):
    """Raised when an account is created for a user name that is already taken."""

    def __init__(self, user_name: str) -> None:
        super().__init__(f"User name '{user_name}' is already in use.", {"user_name": user_name})
        self.user_name = user_name


class InvalidCredentialsError(DomainError):
    """Raised when authentication fails due to invalid credentials."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials.")


class AccountInactiveError(DomainError):
    """Raised when an inactive account tries to authenticate or refresh."""

    def __init__(self) -> None:
        super().__init__("User account is not active.")


class AccountLockedOutError(DomainError):
    """Raised when a locked-out account tries to authenticate."""

    def __init__(self, lockout_end_utc: datetime) -> None:
        super().__init__(
            f"Account is locked out until {lockout_end_utc.isoformat()}.",
            {"lockout_end_utc": lockout_end_utc.isoformat()},
        )
        self.lockout_end_utc = lockout_end_utc


class PasswordVerificationError(DomainError):
    """Raised when current password verification fails during password change."""

    def __init__(self) -> None:
        super().__init__("Current password is incorrect.")
