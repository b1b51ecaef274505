from .validators import (
    check_document_number,
    check_email,
    check_password_strength,
    check_phone,
)

__all__ = [
    "check_document_number",
    "check_email",
    "check_password_strength",
    "check_phone",
]
