"""Tests for the Employee aggregate and its phones."""

from datetime import date

import pytest

from company_manager.domain.common.exceptions import (
    InvalidFormatError,
    InvariantViolationError,
    ValidationError,
)
from company_manager.domain.common.value_objects import (
    DateOfBirth,
    DocumentNumber,
    Email,
    PhoneNumber,
)
from company_manager.domain.common.value_objects.ids import (
    DepartmentId,
    EmployeePhoneId,
    JobTitleId,
)
from company_manager.domain.organization.entities.employee import Employee
from company_manager.domain.organization.entities.employee_phone import PhoneType


def _employee(phones: list[str] | None = None) -> Employee:
    return Employee.create(
        first_name=" Maria ",
        last_name="Silva",
        email=Email("maria@acme.com"),
        document_number=DocumentNumber("111.444.777-35"),
        date_of_birth=DateOfBirth(date(1990, 1, 1)),
        phone_numbers=phones if phones is not None else ["(11) 99999-9999"],
        job_title_id=JobTitleId.generate(),
        department_id=DepartmentId.generate(),
    )


class TestCreate:
    def test_names_are_trimmed(self) -> None:
        employee = _employee()

        assert employee.first_name == "Maria"
        assert employee.full_name == "Maria Silva"
        assert employee.updated_at is None

    def test_first_phone_is_primary(self) -> None:
        employee = _employee(["11999999999", "(21) 3456-7890"])

        assert len(employee.phones) == 2
        assert employee.primary_phone is not None
        assert employee.primary_phone.e164 == "+5511999999999"
        assert employee.phones[0].type is PhoneType.MOBILE

    def test_requires_a_phone(self) -> None:
        with pytest.raises(InvariantViolationError, match="At least one phone is required"):
            _employee([])

    def test_rejects_duplicate_phones(self) -> None:
        with pytest.raises(InvariantViolationError, match="duplicate phone"):
            _employee(["(11) 99999-9999", "+5511999999999"])

    def test_rejects_invalid_phone(self) -> None:
        with pytest.raises(InvalidFormatError):
            _employee(["123"])

    def test_rejects_short_name(self) -> None:
        with pytest.raises(ValidationError, match="Invalid first name"):
            Employee.create(
                first_name="M",
                last_name="Silva",
                email=Email("maria@acme.com"),
                document_number=DocumentNumber("11144477735"),
                date_of_birth=DateOfBirth(date(1990, 1, 1)),
                phone_numbers=["11999999999"],
                job_title_id=JobTitleId.generate(),
                department_id=DepartmentId.generate(),
            )

    def test_rejects_empty_department(self) -> None:
        with pytest.raises(ValidationError, match="Invalid department id"):
            Employee.create(
                first_name="Maria",
                last_name="Silva",
                email=Email("maria@acme.com"),
                document_number=DocumentNumber("11144477735"),
                date_of_birth=DateOfBirth(date(1990, 1, 1)),
                phone_numbers=["11999999999"],
                job_title_id=JobTitleId.generate(),
                department_id=DepartmentId.from_string("00000000-0000-0000-0000-000000000000"),
            )


class TestPhones:
    def test_add_phone(self) -> None:
        employee = _employee()

        phone = employee.add_phone("(21) 3456-7890", PhoneType.WORK)

        assert phone in employee.phones
        assert phone.type is PhoneType.WORK
        assert not phone.is_primary
        assert employee.updated_at is not None

    def test_add_primary_phone_demotes_the_others(self) -> None:
        employee = _employee()
        first = employee.phones[0]

        added = employee.add_phone("21987654321", is_primary=True)

        assert employee.primary_phone == added
        assert not first.is_primary

    def test_add_duplicate_phone(self) -> None:
        employee = _employee()

        with pytest.raises(InvariantViolationError, match="Cannot add duplicate phone number"):
            employee.add_phone("+55 11 99999-9999")

    def test_cannot_remove_last_phone(self) -> None:
        employee = _employee()

        with pytest.raises(InvariantViolationError, match="at least one phone"):
            employee.remove_phone(employee.phones[0].id)

        assert len(employee.phones) == 1

    def test_removing_primary_promotes_the_next(self) -> None:
        employee = _employee(["11999999999", "21987654321"])
        primary, other = employee.phones

        employee.remove_phone(primary.id)

        assert employee.phones == (other,)
        assert other.is_primary

    def test_removing_unknown_phone_is_ignored(self) -> None:
        employee = _employee()

        employee.remove_phone(EmployeePhoneId.generate())

        assert len(employee.phones) == 1
        assert employee.updated_at is None

    def test_set_primary_phone(self) -> None:
        employee = _employee(["11999999999", "21987654321"])
        first, second = employee.phones

        employee.set_primary_phone(second.id)

        assert second.is_primary
        assert not first.is_primary

    def test_set_primary_phone_unknown(self) -> None:
        employee = _employee()

        with pytest.raises(ValidationError, match="Phone not found"):
            employee.set_primary_phone(EmployeePhoneId.generate())

    def test_update_phones_replaces_all(self) -> None:
        employee = _employee()

        employee.update_phones(["21987654321", "+14155552671"])

        assert [p.e164 for p in employee.phones] == ["+5521987654321", "+14155552671"]
        assert employee.phones[0].is_primary

    def test_phone_type_parse_is_case_insensitive(self) -> None:
        assert PhoneType.parse("home") is PhoneType.HOME
        with pytest.raises(ValidationError, match="Invalid phone type"):
            PhoneType.parse("pager")


class TestMutators:
    def test_unchanged_values_do_not_touch(self) -> None:
        employee = _employee()

        employee.change_name("Maria", "Silva")
        employee.change_email(Email("MARIA@acme.com"))
        employee.change_document(DocumentNumber("11144477735"))

        assert employee.updated_at is None

    def test_change_email(self) -> None:
        employee = _employee()

        employee.change_email(Email("maria.silva@acme.com"))

        assert employee.email.value == "maria.silva@acme.com"
        assert employee.updated_at is not None

    def test_phone_value_objects_compare_by_e164(self) -> None:
        employee = _employee()

        assert employee.phones[0].phone_number == PhoneNumber("+5511999999999")
