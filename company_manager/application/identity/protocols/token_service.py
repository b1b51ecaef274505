from collections.abc import Iterable
from typing import Protocol

from company_manager.domain.identity.entities.user_account import UserAccount
from company_manager.infrastructure.identity.services.token_service import TokenClaims, TokenPair


class TokenServiceProtocol(Protocol):
    def create_token_pair(self, account: UserAccount, permissions: Iterable[str]) -> TokenPair: ...

    def verify_refresh_token(self, token: str) -> TokenClaims | None: ...
