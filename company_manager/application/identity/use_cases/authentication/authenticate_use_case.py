"""Use case for authenticating a user with e-mail and password."""

from datetime import timedelta

import structlog

from company_manager.application.identity.dtos import AuthResult
from company_manager.application.identity.protocols.password_service import (
    PasswordServiceProtocol,
)
from company_manager.application.identity.protocols.role_repository import RoleRepositoryProtocol
from company_manager.application.identity.protocols.token_service import TokenServiceProtocol
from company_manager.application.identity.protocols.user_account_repository import (
    UserAccountRepositoryProtocol,
)
from company_manager.application.identity.use_cases.authentication.permissions import (
    resolve_permissions,
)
from company_manager.domain.identity.exceptions import (
    AccountInactiveError,
    AccountLockedOutError,
    InvalidCredentialsError,
)
from company_manager.infrastructure.identity.schemas import AuthenticateRequest

logger = structlog.get_logger(__name__)


class AuthenticateUseCase:
    """Use case for authenticating a user with e-mail and password."""

    def __init__(
        self,
        user_account_repository: UserAccountRepositoryProtocol,
        role_repository: RoleRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
        max_failed_attempts: int,
        lockout_minutes: int,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_account_repository = user_account_repository
        self.role_repository = role_repository
        self.password_service = password_service
        self.token_service = token_service
        self.max_failed_attempts = max_failed_attempts
        self.lockout_for = timedelta(minutes=lockout_minutes)

    def authenticate(self, request: AuthenticateRequest) -> AuthResult:
        """
        Authenticate a user with e-mail and password.

        A wrong password counts as a failed attempt; reaching the limit locks
        the account. A successful login clears the counter.

        Args:
            request: Validated login request (e-mail already normalized)

        Returns:
            Tokens and the identity they were issued for

        Raises:
            InvalidCredentialsError: If the account is unknown or the password is wrong
            AccountInactiveError: If the account is deactivated
            AccountLockedOutError: If the account is locked out
        """
        account = self.user_account_repository.find_by_user_name(request.email)

        if account is None:
            # Same hashing cost as a real miss
            self.password_service.verify_password(
                request.password, self.password_service.get_dummy_hash()
            )
            logger.info("login_failed", email=request.email, reason="unknown_user")
            raise InvalidCredentialsError

        if not account.is_active:
            logger.info("login_failed", user_id=str(account.id), reason="inactive")
            raise AccountInactiveError

        if account.is_locked_out and account.lockout_end_utc is not None:
            logger.info("login_failed", user_id=str(account.id), reason="locked_out")
            raise AccountLockedOutError(account.lockout_end_utc)

        if not self.password_service.verify_password(request.password, account.password_hash):
            account.record_failed_login_attempt(self.max_failed_attempts, self.lockout_for)
            self.user_account_repository.save(account)
            if account.is_locked_out:
                logger.warning(
                    "account_locked_out",
                    user_id=str(account.id),
                    failed_attempts=account.access_failed_count,
                    lockout_end_utc=account.lockout_end_utc.isoformat()
                    if account.lockout_end_utc
                    else None,
                )
            else:
                logger.info(
                    "login_failed",
                    user_id=str(account.id),
                    reason="bad_password",
                    failed_attempts=account.access_failed_count,
                )
            raise InvalidCredentialsError

        account.reset_failures_after_successful_login()
        self.user_account_repository.save(account)

        permissions = resolve_permissions(account, self.role_repository)
        token_pair = self.token_service.create_token_pair(account, permissions)

        logger.info("user_authenticated", user_id=str(account.id), email=account.user_name)

        return AuthResult(
            access_token=token_pair.access_token,
            refresh_token=token_pair.refresh_token,
            expires_at=token_pair.expires_at,
            user_id=account.id.value,
            user_name=account.user_name,
        )
