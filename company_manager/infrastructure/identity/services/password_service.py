"""Password hashing and verification service."""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError

from company_manager.config import get_settings

settings = get_settings()
PASSWORD_PEPPER = settings.PASSWORD_PEPPER

password_hash = PasswordHash.recommended()

# A real hash, so verifying against it costs the same as a real miss.
# An arbitrary string would make pwdlib raise UnknownHashError instead.
DUMMY_HASH = password_hash.hash("dummy_password_for_timing_attack_prevention")


def hash_password(plain_password: str) -> str:
    """Hash a plain password for storage with pepper."""
    peppered_password = plain_password + PASSWORD_PEPPER
    return password_hash.hash(peppered_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a peppered hash. Unknown hash formats never match."""
    try:
        peppered_password = plain_password + PASSWORD_PEPPER
        return password_hash.verify(peppered_password, hashed_password)
    except UnknownHashError:
        return False


def get_dummy_hash() -> str:
    """Get a dummy hash for timing attack prevention."""
    return DUMMY_HASH
