"""EmployeePhone entity, owned by the Employee aggregate."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from company_manager.domain.common.entity import Entity, utc_now
from company_manager.domain.common.exceptions import ValidationError
from company_manager.domain.common.value_objects.ids import EmployeeId, EmployeePhoneId
from company_manager.domain.common.value_objects.phone_number import PhoneNumber


class PhoneType(StrEnum):
    MOBILE = "Mobile"
    WORK = "Work"
    HOME = "Home"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: "str | PhoneType") -> "PhoneType":
        """Case-insensitive lookup by display name."""
        if isinstance(value, PhoneType):
            return value
        cleaned = (value or "").strip().casefold()
        for member in cls:
            if member.value.casefold() == cleaned:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValidationError(
            f"Invalid phone type. Valid types: {valid}", field="type", value=value
        )


@dataclass(eq=False)
class EmployeePhone(Entity[EmployeePhoneId]):
    """
    One phone number of an employee.

    Business Rules:
    - Always belongs to an employee
    - Type is one of Mobile, Work, Home, Other
    - Changing to the current value is a no-op
    """

    id: EmployeePhoneId
    employee_id: EmployeeId
    phone_number: PhoneNumber
    type: PhoneType = PhoneType.MOBILE
    is_primary: bool = False
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.employee_id is None or self.employee_id.is_empty:
            raise ValidationError("Employee ID cannot be empty.", field="employee_id")
        self.type = PhoneType.parse(self.type)

    @property
    def e164(self) -> str:
        return self.phone_number.e164

    def change_type(self, phone_type: "str | PhoneType") -> None:
        new_type = PhoneType.parse(phone_type)
        if new_type == self.type:
            return
        self.type = new_type
        self._touch()

    def set_as_primary(self, is_primary: bool) -> None:
        if self.is_primary == is_primary:
            return
        self.is_primary = is_primary
        self._touch()

    def change_phone_number(self, phone_number: PhoneNumber) -> None:
        if phone_number == self.phone_number:
            return
        self.phone_number = phone_number
        self._touch()

    @classmethod
    def create(
        cls,
        employee_id: EmployeeId,
        phone_number: PhoneNumber,
        phone_type: "str | PhoneType" = PhoneType.MOBILE,
        is_primary: bool = False,
    ) -> "EmployeePhone":
        return cls(
            id=EmployeePhoneId.generate(),
            employee_id=employee_id,
            phone_number=phone_number,
            type=PhoneType.parse(phone_type),
            is_primary=is_primary,
        )

    @classmethod
    def create_with_id(
        cls,
        id: EmployeePhoneId,
        employee_id: EmployeeId,
        phone_number: PhoneNumber,
        phone_type: str,
        is_primary: bool,
        created_at: datetime,
        updated_at: datetime | None,
    ) -> "EmployeePhone":
        """Reconstitute a phone from persistence."""
        return cls(
            id=id,
            employee_id=employee_id,
            phone_number=phone_number,
            type=PhoneType.parse(phone_type),
            is_primary=is_primary,
            created_at=created_at,
            updated_at=updated_at,
        )
