"""DateOfBirth value object."""

from dataclasses import dataclass
from datetime import date, datetime

from ..exceptions import OutOfRangeError
from ..value_object import ValueObject


@dataclass(frozen=True, eq=False)
class DateOfBirth(ValueObject):
    """
    A birth date that is not in the future.

    Only the calendar date matters: a `datetime` is reduced to its date and
    today itself is accepted.
    """

    value: date

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, datetime):
            value = value.date()
            object.__setattr__(self, "value", value)
        if value > date.today():
            raise OutOfRangeError(
                "Date of birth cannot be in the future.", field="date_of_birth", value=value
            )

    def age_in_years(self, reference: date | None = None) -> int:
        """
        Full years elapsed at `reference` (today by default).

        One year is subtracted while the birthday of the reference year
        is still ahead.
        """
        ref = reference or date.today()
        if isinstance(ref, datetime):
            ref = ref.date()
        age = ref.year - self.value.year
        if (ref.month, ref.day) < (self.value.month, self.value.day):
            age -= 1
        return age

    @classmethod
    def parse(cls, raw: str) -> "DateOfBirth":
        """Parse a `yyyy-mm-dd` string."""
        return cls(date.fromisoformat(raw.strip()))

    def canonical_key(self) -> object:
        return self.value

    def __str__(self) -> str:
        return self.value.isoformat()

    def to_primitive(self) -> str:
        return self.value.isoformat()
