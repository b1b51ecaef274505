"""Identity context schemas."""

from company_manager.infrastructure.identity.schemas.auth_schemas import (
    AuthenticateRequest,
    ChangePasswordRequest,
)

__all__ = [
    "AuthenticateRequest",
    "ChangePasswordRequest",
]
