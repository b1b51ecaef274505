"""Use case for refreshing access token using a refresh token."""

import structlog

from company_manager.application.identity.dtos import AuthResult
from company_manager.application.identity.protocols.role_repository import RoleRepositoryProtocol
from company_manager.application.identity.protocols.token_service import TokenServiceProtocol
from company_manager.application.identity.protocols.user_account_repository import (
    UserAccountRepositoryProtocol,
)
from company_manager.application.identity.use_cases.authentication.permissions import (
    resolve_permissions,
)
from company_manager.domain.common.value_objects.ids import UserAccountId
from company_manager.domain.identity.exceptions import AccountInactiveError, InvalidCredentialsError

logger = structlog.get_logger(__name__)


class RefreshTokenUseCase:
    """Use case for refreshing access token using a refresh token."""

    def __init__(
        self,
        user_account_repository: UserAccountRepositoryProtocol,
        role_repository: RoleRepositoryProtocol,
        token_service: TokenServiceProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_account_repository = user_account_repository
        self.role_repository = role_repository
        self.token_service = token_service

    def refresh_token(self, refresh_token: str) -> AuthResult:
        """
        Issue a new token pair from a refresh token.

        Tokens carry the security stamp they were issued with; once the
        account's stamp has rotated (password change, logout) they are refused.

        Raises:
            InvalidCredentialsError: If the token is invalid, the account is gone
                or the stamp no longer matches
            AccountInactiveError: If the account is deactivated
        """
        claims = self.token_service.verify_refresh_token(refresh_token)
        if claims is None:
            raise InvalidCredentialsError

        account = self.user_account_repository.find_by_id(UserAccountId(claims.user_id))
        if account is None:
            raise InvalidCredentialsError

        if not account.is_active:
            raise AccountInactiveError

        if claims.security_stamp != account.security_stamp:
            logger.info("refresh_token_revoked", user_id=str(account.id))
            raise InvalidCredentialsError

        permissions = resolve_permissions(account, self.role_repository)
        token_pair = self.token_service.create_token_pair(account, permissions)

        logger.info("access_token_refreshed", user_id=str(account.id))

        return AuthResult(
            access_token=token_pair.access_token,
            refresh_token=token_pair.refresh_token,
            expires_at=token_pair.expires_at,
            user_id=account.id.value,
            user_name=account.user_name,
        )
