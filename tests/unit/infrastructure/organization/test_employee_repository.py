"""Tests for EmployeeRepository against SQLite."""

from datetime import date

import pytest

from company_manager.application.common.filters import EmployeeFilter
from company_manager.application.common.pagination import PageRequest
from company_manager.domain.common.value_objects import (
    DateOfBirth,
    DocumentNumber,
    Email,
)
from company_manager.domain.common.value_objects.ids import EmployeeId
from company_manager.domain.organization.entities.department import Department
from company_manager.domain.organization.entities.employee import Employee
from company_manager.domain.organization.exceptions import (
    DocumentAlreadyInUseError,
    EmailAlreadyInUseError,
)

CPF_1 = "11144477735"
CPF_2 = "52998224725"
CPF_3 = "39053344705"


class TestEmployeeRepository:
    def test_round_trip_with_phones(self, make_employee, employee_repository) -> None:
        created = make_employee(phones=["(11) 99999-9999", "(11) 3333-4444"])

        loaded = employee_repository.find_by_id(created.id)

        assert loaded is not None
        assert loaded.full_name == "Maria Silva"
        assert loaded.email == Email("maria.silva@acme.com")
        assert loaded.document_number.digits == CPF_1
        assert loaded.date_of_birth == DateOfBirth(date(1990, 5, 17))
        assert {p.phone_number.raw for p in loaded.phones} == {"(11) 99999-9999", "(11) 3333-4444"}
        assert loaded.primary_phone is not None
        assert loaded.primary_phone.e164 == "+5511999999999"

    def test_removed_phone_is_deleted(self, make_employee, employee_repository) -> None:
        employee = make_employee(phones=["(11) 99999-9999", "(11) 3333-4444"])
        employee.remove_phone(employee.phones[0].id)

        employee_repository.save(employee)
        loaded = employee_repository.find_by_id(employee.id)

        assert loaded is not None
        assert [p.e164 for p in loaded.phones] == ["+551133334444"]
        assert loaded.phones[0].is_primary

    def test_find_by_email_and_document(self, make_employee, employee_repository) -> None:
        employee = make_employee()

        by_email = employee_repository.find_by_email(Email("MARIA.SILVA@acme.com"))
        by_document = employee_repository.find_by_document(DocumentNumber("111.444.777-35"))

        assert by_email is not None and by_email.id == employee.id
        assert by_document is not None and by_document.id == employee.id
        assert employee_repository.find_by_email(Email("nobody@acme.com")) is None

    def test_duplicate_email(self, make_employee) -> None:
        make_employee()

        with pytest.raises(EmailAlreadyInUseError):
            make_employee(document_number=CPF_2)

    def test_duplicate_document(self, make_employee) -> None:
        make_employee()

        with pytest.raises(DocumentAlreadyInUseError):
            make_employee(email="other@acme.com")

    def test_delete(self, make_employee, employee_repository) -> None:
        employee = make_employee()

        assert employee_repository.delete(employee.id) is True
        assert employee_repository.find_by_id(employee.id) is None
        assert employee_repository.delete(employee.id) is False

    def test_search_by_name_or_email(self, make_employee, employee_repository) -> None:
        make_employee()
        make_employee(
            first_name="Ana", last_name="Souza", email="ana@acme.com", document_number=CPF_2
        )
        make_employee(
            first_name="Bruno", last_name="Lima", email="b.silva@acme.com", document_number=CPF_3
        )

        items, total = employee_repository.search(
            EmployeeFilter(name_or_email="SILVA"), PageRequest(1, 10)
        )

        assert total == 2
        assert [e.first_name for e in items] == ["Bruno", "Maria"]

    def test_search_does_not_treat_percent_as_wildcard(
        self, make_employee, employee_repository
    ) -> None:
        make_employee()

        items, total = employee_repository.search(
            EmployeeFilter(name_or_email="%"), PageRequest(1, 10)
        )

        assert total == 0
        assert items == []

    def test_search_by_department_with_paging(
        self, make_employee, employee_repository, department_repository
    ) -> None:
        sales = department_repository.save(Department.create("Sales"))
        make_employee(in_department=sales)
        make_employee(
            first_name="Ana",
            last_name="Souza",
            email="ana@acme.com",
            document_number=CPF_2,
            in_department=sales,
        )
        make_employee(
            first_name="Bruno", last_name="Lima", email="bruno@acme.com", document_number=CPF_3
        )

        items, total = employee_repository.search(
            EmployeeFilter(department_id=sales.id.value), PageRequest(2, 1)
        )

        assert total == 2
        assert [e.first_name for e in items] == ["Maria"]

    def test_unknown_id(self, employee_repository) -> None:
        assert employee_repository.find_by_id(EmployeeId.generate()) is None

    def test_update_is_persisted(self, make_employee, employee_repository) -> None:
        employee: Employee = make_employee()
        employee.change_name("Mariana", "Souza")

        employee_repository.save(employee)
        loaded = employee_repository.find_by_id(employee.id)

        assert loaded is not None
        assert loaded.full_name == "Mariana Souza"
        assert loaded.updated_at is not None
        assert loaded.updated_at.tzinfo is not None
