"""Employee aggregate."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from company_manager.domain.common.entity import Entity, utc_now
from company_manager.domain.common.exceptions import InvariantViolationError, ValidationError
from company_manager.domain.common.value_objects.date_of_birth import DateOfBirth
from company_manager.domain.common.value_objects.document_number import DocumentNumber
from company_manager.domain.common.value_objects.email import Email
from company_manager.domain.common.value_objects.ids import (
    DepartmentId,
    EmployeeId,
    EmployeePhoneId,
    JobTitleId,
)
from company_manager.domain.common.value_objects.phone_number import PhoneNumber
from company_manager.domain.organization.entities.employee_phone import EmployeePhone, PhoneType

MIN_NAME_LENGTH = 2
DEFAULT_PHONE_COUNTRY = "BR"


def _validate_name(value: str, message: str, field_name: str) -> str:
    if not value or len(value.strip()) < MIN_NAME_LENGTH:
        raise ValidationError(message, field=field_name, value=value)
    return value.strip()


def _validate_job_title_id(job_title_id: JobTitleId) -> JobTitleId:
    if job_title_id is None or job_title_id.is_empty:
        raise ValidationError("Job title ID cannot be empty.", field="job_title_id")
    return job_title_id


def _validate_department_id(department_id: DepartmentId) -> DepartmentId:
    if department_id is None or department_id.is_empty:
        raise ValidationError("Invalid department id.", field="department_id")
    return department_id


def _parse_phone(number: str) -> PhoneNumber:
    return PhoneNumber(number, default_country=DEFAULT_PHONE_COUNTRY)


@dataclass(eq=False)
class Employee(Entity[EmployeeId]):
    """
    A person working for the company.

    Business Rules:
    - First and last name are trimmed and at least MIN_NAME_LENGTH characters
    - Email and document number are unique (enforced at repository level)
    - Always has at least one phone; no two phones share an E.164 number
    - Exactly one phone is primary; at creation it is the first one given
    - Belongs to one department and holds one job title
    - Change methods are no-ops when the value does not change
    """

    id: EmployeeId
    first_name: str
    last_name: str
    email: Email
    document_number: DocumentNumber
    date_of_birth: DateOfBirth
    job_title_id: JobTitleId
    department_id: DepartmentId
    _phones: list[EmployeePhone] = field(default_factory=list, repr=False)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.first_name = _validate_name(self.first_name, "Invalid first name.", "first_name")
        self.last_name = _validate_name(self.last_name, "Invalid last name.", "last_name")
        self.job_title_id = _validate_job_title_id(self.job_title_id)
        self.department_id = _validate_department_id(self.department_id)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def phones(self) -> tuple[EmployeePhone, ...]:
        return tuple(self._phones)

    @property
    def primary_phone(self) -> EmployeePhone | None:
        return next((p for p in self._phones if p.is_primary), None)

    def _find_phone(self, phone_id: EmployeePhoneId) -> EmployeePhone | None:
        return next((p for p in self._phones if p.id == phone_id), None)

    def _has_number(self, phone: PhoneNumber) -> bool:
        return any(p.phone_number == phone for p in self._phones)

    def _build_phones(self, numbers: Iterable[str]) -> list[EmployeePhone]:
        """Parse numbers into phones, first one primary. Rejects empty input and duplicates."""
        phones: list[EmployeePhone] = []
        for index, number in enumerate(numbers):
            phone = _parse_phone(number)
            if any(p.phone_number == phone for p in phones):
                raise InvariantViolationError("Employee", "Cannot add duplicate phone.")
            phones.append(
                EmployeePhone.create(self.id, phone, PhoneType.MOBILE, is_primary=index == 0)
            )
        if not phones:
            raise InvariantViolationError("Employee", "At least one phone is required.")
        return phones

    # Phones

    def add_phone(
        self,
        phone_number: str,
        phone_type: str | PhoneType = PhoneType.MOBILE,
        is_primary: bool = False,
    ) -> EmployeePhone:
        """
        Add a phone.

        A new primary phone takes the primary flag away from the others.

        Raises:
            InvalidFormatError: If the number is not a valid BR phone
            InvariantViolationError: If the number is already registered
        """
        phone = _parse_phone(phone_number)
        if self._has_number(phone):
            raise InvariantViolationError("Employee", "Cannot add duplicate phone number.")

        employee_phone = EmployeePhone.create(self.id, phone, phone_type, is_primary)
        if is_primary:
            for existing in self._phones:
                existing.set_as_primary(False)
        self._phones.append(employee_phone)
        self._touch()
        return employee_phone

    def remove_phone(self, phone_id: EmployeePhoneId) -> None:
        """
        Remove a phone by id. Unknown ids are ignored.

        If the primary phone goes away, the first remaining phone becomes primary.

        Raises:
            InvariantViolationError: If it is the last phone
        """
        phone = self._find_phone(phone_id)
        if phone is None:
            return
        if len(self._phones) <= 1:
            raise InvariantViolationError("Employee", "Employee must have at least one phone.")

        self._phones.remove(phone)
        if phone.is_primary:
            self._phones[0].set_as_primary(True)
        self._touch()

    def update_phones(self, phone_numbers: Iterable[str]) -> None:
        """
        Replace every phone. The first number becomes primary.

        Raises:
            InvariantViolationError: If no numbers are given or two are the same
        """
        self._phones = self._build_phones(phone_numbers)
        self._touch()

    def set_primary_phone(self, phone_id: EmployeePhoneId) -> None:
        """
        Make one phone the primary one.

        Raises:
            ValidationError: If the phone does not belong to this employee
        """
        target = self._find_phone(phone_id)
        if target is None:
            raise ValidationError("Phone not found.", field="phone_id", value=str(phone_id))
        for phone in self._phones:
            phone.set_as_primary(phone is target)
        self._touch()

    # Mutators

    def change_name(self, first_name: str, last_name: str) -> None:
        new_first = _validate_name(first_name, "Invalid first name.", "first_name")
        new_last = _validate_name(last_name, "Invalid last name.", "last_name")
        if new_first == self.first_name and new_last == self.last_name:
            return
        self.first_name = new_first
        self.last_name = new_last
        self._touch()

    def change_job_title(self, job_title_id: JobTitleId) -> None:
        new_id = _validate_job_title_id(job_title_id)
        if new_id == self.job_title_id:
            return
        self.job_title_id = new_id
        self._touch()

    def change_department(self, department_id: DepartmentId) -> None:
        new_id = _validate_department_id(department_id)
        if new_id == self.department_id:
            return
        self.department_id = new_id
        self._touch()

    def change_email(self, email: Email) -> None:
        if email == self.email:
            return
        self.email = email
        self._touch()

    def change_document(self, document_number: DocumentNumber) -> None:
        if document_number == self.document_number:
            return
        self.document_number = document_number
        self._touch()

    def change_date_of_birth(self, date_of_birth: DateOfBirth) -> None:
        if date_of_birth == self.date_of_birth:
            return
        self.date_of_birth = date_of_birth
        self._touch()

    @classmethod
    def create(
        cls,
        first_name: str,
        last_name: str,
        email: Email,
        document_number: DocumentNumber,
        date_of_birth: DateOfBirth,
        phone_numbers: Iterable[str],
        job_title_id: JobTitleId,
        department_id: DepartmentId,
    ) -> "Employee":
        """
        Create a new employee.

        Phone numbers are parsed as Brazilian numbers; the first is primary.
        Creation does not stamp `updated_at`.

        Raises:
            ValidationError: If a name or reference id is invalid
            InvalidFormatError: If a phone number does not parse
            InvariantViolationError: If no phone is given or two are the same
        """
        employee = cls(
            id=EmployeeId.generate(),
            first_name=first_name,
            last_name=last_name,
            email=email,
            document_number=document_number,
            date_of_birth=date_of_birth,
            job_title_id=job_title_id,
            department_id=department_id,
        )
        employee._phones = employee._build_phones(phone_numbers)
        return employee

    @classmethod
    def create_with_id(
        cls,
        id: EmployeeId,
        first_name: str,
        last_name: str,
        email: Email,
        document_number: DocumentNumber,
        date_of_birth: DateOfBirth,
        job_title_id: JobTitleId,
        department_id: DepartmentId,
        phones: list[EmployeePhone],
        created_at: datetime,
        updated_at: datetime | None,
    ) -> "Employee":
        """Reconstitute an employee from persistence."""
        return cls(
            id=id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            document_number=document_number,
            date_of_birth=date_of_birth,
            job_title_id=job_title_id,
            department_id=department_id,
            _phones=list(phones),
            created_at=created_at,
            updated_at=updated_at,
        )
