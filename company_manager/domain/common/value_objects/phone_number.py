"""
PhoneNumber value object.

Normalizes a phone number to E.164. Numbers written with a leading `+`
carry their own country code; numbers without one are only accepted when
the caller supplies `default_country="BR"` and they form a valid Brazilian
DDD + subscriber number.

Country code detection is deliberately simple: `55` (Brazil) and `1`
(NANP) are recognized explicitly, anything else is split after the third
digit.
"""

import re
from dataclasses import dataclass, field

from ..exceptions import InvalidFormatError
from ..value_object import ValueObject

BRAZIL_COUNTRY_CODE = "55"
NANP_COUNTRY_CODE = "1"
MIN_E164_DIGITS = 8
MAX_E164_DIGITS = 15
FALLBACK_COUNTRY_CODE_LENGTH = 3
BR_MOBILE_LENGTH = 11
BR_LANDLINE_LENGTH = 10

_EXTENSION_PATTERN = re.compile(r"\b(?:ext\.?|x|ramal)\s*(\d+)\b", re.IGNORECASE | re.ASCII)

_INVALID_FORMAT = "Invalid phone number format"


def _invalid(raw: str) -> InvalidFormatError:
    return InvalidFormatError(_INVALID_FORMAT, field="phone_number", value=raw)


def _split_extension(text: str) -> tuple[str, str | None]:
    """Remove every extension token, returning the rest and the first extension found."""
    extensions = _EXTENSION_PATTERN.findall(text)
    remainder = _EXTENSION_PATTERN.sub("", text).strip()
    return remainder, (extensions[0] if extensions else None)


def _split_international(digits: str, raw: str) -> tuple[str, str]:
    if not MIN_E164_DIGITS <= len(digits) <= MAX_E164_DIGITS:
        raise _invalid(raw)

    if digits.startswith(BRAZIL_COUNTRY_CODE):
        country_code = BRAZIL_COUNTRY_CODE
    elif digits.startswith(NANP_COUNTRY_CODE):
        country_code = NANP_COUNTRY_CODE
    else:
        country_code = digits[:FALLBACK_COUNTRY_CODE_LENGTH]

    national = digits[len(country_code) :]
    if not national:
        raise _invalid(raw)
    return country_code, national


def _validate_brazilian(digits: str, raw: str) -> None:
    if len(digits) not in (BR_LANDLINE_LENGTH, BR_MOBILE_LENGTH):
        raise _invalid(raw)

    area_code, subscriber = digits[:2], digits[2:]
    if area_code == "00":
        raise _invalid(raw)

    if len(digits) == BR_MOBILE_LENGTH:
        if subscriber[0] != "9":
            raise _invalid(raw)
    elif subscriber[0] in ("0", "9"):
        raise _invalid(raw)


@dataclass(frozen=True, eq=False)
class PhoneNumber(ValueObject):
    """
    A phone number in canonical E.164 form.

    Attributes:
        raw: Trimmed input
        default_country: Country assumed when the input has no `+` (only "BR" is supported)
        country_code: e.g. "55", "1"
        national_number: e.g. "11999999999"
        extension: Digits of an `ext` / `x` / `ramal` suffix, if any
    """

    raw: str
    default_country: str | None = None
    country_code: str = field(init=False)
    national_number: str = field(init=False)
    extension: str | None = field(init=False)

    def __post_init__(self) -> None:
        if self.raw is None or not self.raw.strip():
            raise InvalidFormatError(
                "Phone number cannot be null or empty", field="phone_number", value=self.raw
            )

        trimmed = self.raw.strip()
        base, extension = _split_extension(trimmed)

        plus_count = base.count("+")
        if plus_count > 1 or (plus_count == 1 and not base.startswith("+")):
            raise _invalid(self.raw)

        digits = "".join(ch for ch in base if ch.isascii() and ch.isdigit())

        if base.startswith("+"):
            country_code, national = _split_international(digits, self.raw)
        else:
            if (self.default_country or "").upper() != "BR":
                raise _invalid(self.raw)
            _validate_brazilian(digits, self.raw)
            country_code, national = BRAZIL_COUNTRY_CODE, digits

        object.__setattr__(self, "raw", trimmed)
        object.__setattr__(self, "country_code", country_code)
        object.__setattr__(self, "national_number", national)
        object.__setattr__(self, "extension", extension)

    @property
    def e164(self) -> str:
        """Canonical `+<cc><national>` form."""
        return f"+{self.country_code}{self.national_number}"

    @property
    def masked(self) -> str:
        """
        Display form hiding the middle of the number.

        Brazilian mobiles keep the DDD and the leading 9: `+55 11 9XXXX-1234`.
        Everything else shows only the country code and last four digits.
        """
        last4 = self.national_number[-4:]
        is_br_mobile = len(self.national_number) == BR_MOBILE_LENGTH
        if self.country_code == BRAZIL_COUNTRY_CODE and is_br_mobile:
            area_code = self.national_number[:2]
            first = self.national_number[2]
            return f"+55 {area_code} {first}XXXX-{last4}"
        return f"+{self.country_code} XXXX-{last4}"

    def canonical_key(self) -> object:
        return self.e164

    def __str__(self) -> str:
        return self.e164

    def to_primitive(self) -> str:
        return self.e164
