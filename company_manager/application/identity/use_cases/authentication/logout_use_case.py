"""Use case for logging out, which revokes every token of the account."""

import structlog

from company_manager.application.identity.protocols.token_service import TokenServiceProtocol
from company_manager.application.identity.protocols.user_account_repository import (
    UserAccountRepositoryProtocol,
)
from company_manager.domain.common.value_objects.ids import UserAccountId

logger = structlog.get_logger(__name__)


class LogoutUseCase:
    """Rotates the security stamp so previously issued tokens stop working."""

    def __init__(
        self,
        user_account_repository: UserAccountRepositoryProtocol,
        token_service: TokenServiceProtocol,
    ) -> None:
        self.user_account_repository = user_account_repository
        self.token_service = token_service

    def logout(self, refresh_token: str | None) -> None:
        """Log out the owner of a refresh token. Blank or unusable tokens are ignored."""
        if not refresh_token or not refresh_token.strip():
            logger.warning("logout_without_token")
            return

        claims = self.token_service.verify_refresh_token(refresh_token)
        if claims is None:
            logger.warning("logout_with_invalid_token")
            return

        account = self.user_account_repository.find_by_id(UserAccountId(claims.user_id))
        if account is None:
            logger.warning("logout_for_unknown_user", user_id=str(claims.user_id))
            return

        account.rotate_security_stamp()
        self.user_account_repository.save(account)

        logger.info("user_logged_out", user_id=str(account.id))
