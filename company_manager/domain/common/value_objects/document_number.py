"""
DocumentNumber value object (Brazilian CPF).

Accepts the plain 11-digit form or the `###.###.###-##` mask and validates
both check digits with the mod-11 algorithm.
"""

import re
from dataclasses import dataclass, field

from ..exceptions import InvalidFormatError
from ..value_object import ValueObject

CPF_LENGTH = 11

_PLAIN_PATTERN = re.compile(r"^\d{11}$", re.ASCII)
_MASKED_PATTERN = re.compile(r"^\d{3}\.\d{3}\.\d{3}-\d{2}$", re.ASCII)

_INVALID_FORMAT = "Invalid document number format"


def _check_digit(digits: str, start_weight: int) -> int:
    """Compute one CPF check digit over the leading digits with descending weights."""
    total = sum(int(d) * w for d, w in zip(digits, range(start_weight, 1, -1), strict=True))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def is_valid_cpf(digits: str) -> bool:
    """
    Check an 11-digit string against the CPF rules.

    Sequences of one repeated digit ("00000000000", "11111111111", ...) are
    rejected even though some of them satisfy the arithmetic.
    """
    if len(digits) != CPF_LENGTH or not digits.isdigit():
        return False
    if len(set(digits)) == 1:
        return False
    first = _check_digit(digits[:9], 10)
    second = _check_digit(digits[:10], 11)
    return digits[9] == str(first) and digits[10] == str(second)


@dataclass(frozen=True, eq=False)
class DocumentNumber(ValueObject):
    """
    A validated CPF.

    Attributes:
        raw: Trimmed input, mask preserved
        digits: The 11 digits

    Equality is by `digits`, so the masked and plain spellings of the same
    CPF are equal.
    """

    raw: str
    digits: str = field(init=False)

    def __post_init__(self) -> None:
        if self.raw is None or not self.raw.strip():
            raise InvalidFormatError(
                "Document number cannot be null or empty", field="document_number", value=self.raw
            )

        trimmed = self.raw.strip()
        if not (_PLAIN_PATTERN.fullmatch(trimmed) or _MASKED_PATTERN.fullmatch(trimmed)):
            raise InvalidFormatError(_INVALID_FORMAT, field="document_number", value=self.raw)

        digits = "".join(ch for ch in trimmed if ch.isdigit())
        if not is_valid_cpf(digits):
            raise InvalidFormatError(_INVALID_FORMAT, field="document_number", value=self.raw)

        object.__setattr__(self, "raw", trimmed)
        object.__setattr__(self, "digits", digits)

    @property
    def formatted(self) -> str:
        """CPF in `###.###.###-##` form."""
        d = self.digits
        return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"

    def canonical_key(self) -> object:
        return self.digits

    def __str__(self) -> str:
        return self.raw

    def to_primitive(self) -> str:
        return self.digits
