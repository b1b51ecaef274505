"""Tests for department use cases."""

import pytest

from company_manager.application.organization.use_cases.departments import (
    CreateDepartmentUseCase,
    DeleteDepartmentUseCase,
    GetDepartmentByIdUseCase,
    ListDepartmentsUseCase,
    UpdateDepartmentUseCase,
)
from company_manager.domain.common.value_objects.ids import DepartmentId
from company_manager.domain.organization.exceptions import (
    DepartmentNameAlreadyInUseError,
    DepartmentNotFoundError,
)
from company_manager.infrastructure.organization.schemas import DepartmentRequest


def test_create(department_repository) -> None:
    dto = CreateDepartmentUseCase(department_repository).create_department(
        DepartmentRequest(name="  Finance ", description="Money matters")
    )

    assert dto.name == "Finance"
    assert dto.is_active
    assert department_repository.find_by_name("Finance") is not None


def test_create_duplicate_name(department_repository, department) -> None:
    with pytest.raises(
        DepartmentNameAlreadyInUseError, match="Department name 'Engineering' is already in use."
    ):
        CreateDepartmentUseCase(department_repository).create_department(
            DepartmentRequest(name="Engineering")
        )


def test_update(department_repository, department) -> None:
    dto = UpdateDepartmentUseCase(department_repository).update_department(
        department.id, DepartmentRequest(name="Platform", description=None)
    )

    assert dto.name == "Platform"
    assert dto.description is None
    assert dto.updated_at is not None


def test_update_keeps_own_name(department_repository, department) -> None:
    dto = UpdateDepartmentUseCase(department_repository).update_department(
        department.id, DepartmentRequest(name="Engineering", description="New text")
    )

    assert dto.description == "New text"


def test_update_to_taken_name(department_repository, department) -> None:
    other = CreateDepartmentUseCase(department_repository).create_department(
        DepartmentRequest(name="Finance")
    )

    with pytest.raises(DepartmentNameAlreadyInUseError):
        UpdateDepartmentUseCase(department_repository).update_department(
            DepartmentId(other.id), DepartmentRequest(name="Engineering")
        )


def test_update_missing(department_repository) -> None:
    with pytest.raises(DepartmentNotFoundError, match="Department not found."):
        UpdateDepartmentUseCase(department_repository).update_department(
            DepartmentId.generate(), DepartmentRequest(name="Whatever")
        )


def test_delete_is_idempotent(department_repository, department) -> None:
    delete = DeleteDepartmentUseCase(department_repository)

    delete.delete_department(department.id)
    delete.delete_department(department.id)

    assert GetDepartmentByIdUseCase(department_repository).get_department(department.id) is None


def test_get(department_repository, department) -> None:
    dto = GetDepartmentByIdUseCase(department_repository).get_department(department.id)

    assert dto is not None
    assert dto.id == department.id.value


def test_list_by_name_or_description(department_repository) -> None:
    create = CreateDepartmentUseCase(department_repository)
    create.create_department(DepartmentRequest(name="Recursos Humanos", description="Pessoas"))
    create.create_department(DepartmentRequest(name="Financeiro", description="Dinheiro"))
    create.create_department(DepartmentRequest(name="Tecnologia", description="Sistemas humanos"))
    list_departments = ListDepartmentsUseCase(department_repository)

    result = list_departments.list_departments(name_contains="humanos")

    assert [d.name for d in result.items] == ["Recursos Humanos", "Tecnologia"]
    assert list_departments.list_departments(name_contains=" ").total == 3
