"""
Field checks shared by request schemas.

Each helper raises ValueError, which pydantic reports as a validation error
on the field being validated. Value-object failures keep their message.
"""

from company_manager.domain.common.exceptions import DomainError
from company_manager.domain.common.value_objects import DocumentNumber, Email, PhoneNumber

DEFAULT_PHONE_COUNTRY = "BR"
_SPECIAL_CHARACTERS = set("!@#$%^&*()_+-=[]{}|;:'\",.<>/?`~\\")


def check_email(value: str) -> str:
    """Return the normalized e-mail."""
    try:
        return Email(value).value
    except DomainError as err:
        raise ValueError(err.message) from err


def check_document_number(value: str) -> str:
    """Return the trimmed CPF, mask preserved."""
    try:
        return DocumentNumber(value).raw
    except DomainError as err:
        raise ValueError(err.message) from err


def check_phone(value: str) -> str:
    """Return the trimmed phone as typed."""
    try:
        return PhoneNumber(value, default_country=DEFAULT_PHONE_COUNTRY).raw
    except DomainError as err:
        raise ValueError(err.message) from err


def check_password_strength(value: str, min_length: int = 8, require_special: bool = False) -> str:
    if len(value) < min_length:
        raise ValueError(f"Password must be at least {min_length} characters long.")
    if not any(ch.islower() for ch in value):
        raise ValueError("Password must contain at least one lowercase letter.")
    if not any(ch.isupper() for ch in value):
        raise ValueError("Password must contain at least one uppercase letter.")
    if not any(ch.isdigit() for ch in value):
        raise ValueError("Password must contain at least one digit.")
    if require_special and not any(ch in _SPECIAL_CHARACTERS for ch in value):
        raise ValueError("Password must contain at least one special character.")
    return value
