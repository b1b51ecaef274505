"""
Email value object.

Parses, validates and normalizes an e-mail address. The domain is checked
through its IDNA (ASCII-compatible) form, while `domain` keeps the Unicode
spelling. Everything is stored lowercased.
"""

import re
from dataclasses import dataclass, field

from ..exceptions import InvalidFormatError
from ..value_object import ValueObject

MAX_LOCAL_PART_LENGTH = 64
MAX_EMAIL_LENGTH = 254
MAX_LABEL_LENGTH = 63

_LOCAL_PART_PATTERN = re.compile(r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+$")
_LABEL_PATTERN = re.compile(r"^[a-z0-9-]+$")
_WHITESPACE_PATTERN = re.compile(r"\s")

_INVALID_FORMAT = "Invalid email format"


def _invalid(raw: str) -> InvalidFormatError:
    return InvalidFormatError(_INVALID_FORMAT, field="email", value=raw)


def _to_ascii_domain(domain: str, raw: str) -> str:
    try:
        return domain.encode("idna").decode("ascii")
    except UnicodeError as err:
        raise _invalid(raw) from err


def _validate_local_part(local: str, raw: str) -> None:
    if not 1 <= len(local) <= MAX_LOCAL_PART_LENGTH:
        raise _invalid(raw)
    if not _LOCAL_PART_PATTERN.match(local):
        raise _invalid(raw)
    if local.startswith(".") or local.endswith(".") or ".." in local:
        raise _invalid(raw)


def _validate_ascii_domain(domain_ascii: str, raw: str) -> None:
    if (
        not domain_ascii
        or domain_ascii.startswith(".")
        or domain_ascii.endswith(".")
        or ".." in domain_ascii
        or "." not in domain_ascii
    ):
        raise _invalid(raw)

    for label in domain_ascii.split("."):
        if not 1 <= len(label) <= MAX_LABEL_LENGTH:
            raise _invalid(raw)
        if label.startswith("-") or label.endswith("-"):
            raise _invalid(raw)
        if not _LABEL_PATTERN.match(label):
            raise _invalid(raw)


@dataclass(frozen=True, eq=False)
class Email(ValueObject):
    """
    A normalized e-mail address.

    Attributes:
        value: Canonical `local@domain` form, lowercased
        local_part: Part before the `@`
        domain: Unicode domain, lowercased
        domain_ascii: IDNA (punycode) domain, lowercased

    Raises:
        InvalidFormatError: "Email cannot be null or empty" for blank input,
            "Invalid email format" for anything else that fails to parse.
    """

    value: str
    local_part: str = field(init=False, repr=False)
    domain: str = field(init=False, repr=False)
    domain_ascii: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        raw = self.value
        if raw is None or not raw.strip():
            raise InvalidFormatError("Email cannot be null or empty", field="email", value=raw)

        trimmed = raw.strip()
        if _WHITESPACE_PATTERN.search(trimmed):
            raise _invalid(raw)

        at = trimmed.find("@")
        if at <= 0 or at != trimmed.rfind("@") or at == len(trimmed) - 1:
            raise _invalid(raw)

        local, domain = trimmed[:at], trimmed[at + 1 :]
        _validate_local_part(local, raw)
        if len(trimmed) > MAX_EMAIL_LENGTH:
            raise _invalid(raw)

        domain_ascii = _to_ascii_domain(domain, raw).lower()
        _validate_ascii_domain(domain_ascii, raw)

        local_lower = local.lower()
        domain_lower = domain.lower()
        object.__setattr__(self, "local_part", local_lower)
        object.__setattr__(self, "domain", domain_lower)
        object.__setattr__(self, "domain_ascii", domain_ascii)
        object.__setattr__(self, "value", f"{local_lower}@{domain_lower}")

    def canonical_key(self) -> object:
        return self.value

    def __str__(self) -> str:
        return self.value

    def to_primitive(self) -> str:
        return self.value
