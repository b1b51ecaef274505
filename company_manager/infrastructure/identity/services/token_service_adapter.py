from collections.abc import Iterable

from company_manager.domain.identity.entities.user_account import UserAccount
from company_manager.infrastructure.identity.services import token_service
from company_manager.infrastructure.identity.services.token_service import TokenClaims, TokenPair


class TokenServiceAdapter:
    """Adapter wrapping token service functions for DI."""

    def create_token_pair(self, account: UserAccount, permissions: Iterable[str]) -> TokenPair:
        return token_service.create_token_pair(account, permissions)

    def verify_access_token(self, token: str) -> TokenClaims | None:
        return token_service.verify_access_token(token)

    def verify_refresh_token(self, token: str) -> TokenClaims | None:
        return token_service.verify_refresh_token(token)
