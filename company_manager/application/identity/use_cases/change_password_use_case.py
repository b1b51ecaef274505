"""Change password use case."""

import structlog

from company_manager.application.identity.protocols.password_service import (
    PasswordServiceProtocol,
)
from company_manager.application.identity.protocols.user_account_repository import (
    UserAccountRepositoryProtocol,
)
from company_manager.domain.common.exceptions import BusinessRuleViolationError
from company_manager.domain.identity.exceptions import (
    PasswordVerificationError,
    UserAccountNotFoundError,
)
from company_manager.infrastructure.identity.schemas import ChangePasswordRequest

logger = structlog.get_logger(__name__)


class ChangePasswordUseCase:
    """Use case for replacing the password of an account."""

    def __init__(
        self,
        user_account_repository: UserAccountRepositoryProtocol,
        password_service: PasswordServiceProtocol,
    ) -> None:
        self.user_account_repository = user_account_repository
        self.password_service = password_service

    def change_password(self, request: ChangePasswordRequest) -> None:
        """
        Change the password after checking the current one.

        The new hash rotates the security stamp, so every token issued before
        the change is refused from now on.

        Raises:
            UserAccountNotFoundError: If no account has the e-mail
            PasswordVerificationError: If the current password is wrong
            BusinessRuleViolationError: If the new password equals the current one
        """
        account = self.user_account_repository.find_by_user_name(request.email)
        if account is None:
            raise UserAccountNotFoundError(request.email, "User account not found.")

        if not self.password_service.verify_password(
            request.current_password, account.password_hash
        ):
            logger.info("password_change_rejected", user_id=str(account.id))
            raise PasswordVerificationError

        if self.password_service.verify_password(request.new_password, account.password_hash):
            raise BusinessRuleViolationError(
                "password_reuse", "New password must be different from the current one."
            )

        account.set_password_hash(self.password_service.hash_password(request.new_password))
        self.user_account_repository.save(account)

        logger.info("password_changed", user_id=str(account.id))
