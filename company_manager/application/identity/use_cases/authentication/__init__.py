from .authenticate_use_case import AuthenticateUseCase
from .logout_use_case import LogoutUseCase
from .refresh_token_use_case import RefreshTokenUseCase

__all__ = [
    "AuthenticateUseCase",
    "LogoutUseCase",
    "RefreshTokenUseCase",
]
