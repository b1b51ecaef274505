from .authentication import AuthenticateUseCase, LogoutUseCase, RefreshTokenUseCase
from .bootstrap_super_user_use_case import BootstrapSuperUserUseCase
from .change_password_use_case import ChangePasswordUseCase

__all__ = [
    "AuthenticateUseCase",
    "BootstrapSuperUserUseCase",
    "ChangePasswordUseCase",
    "LogoutUseCase",
    "RefreshTokenUseCase",
]
