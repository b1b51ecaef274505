"""DTOs for identity use cases."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful login or token refresh."""

    access_token: str
    refresh_token: str
    expires_at: datetime
    user_id: UUID
    user_name: str
