"""Tests for employee use cases."""

from uuid import uuid4

import pytest

from company_manager.application.identity.services import (
    HierarchicalAuthorizationService,
    RoleManagementService,
)
from company_manager.application.organization.services import EmployeeValidationService
from company_manager.application.organization.use_cases.employees import (
    CreateEmployeeUseCase,
    DeleteEmployeeUseCase,
    GetEmployeeByIdUseCase,
    ListEmployeesUseCase,
    UpdateEmployeeUseCase,
)
from company_manager.domain.access_control.hierarchical_role import HierarchicalRole
from company_manager.domain.access_control.role import Role
from company_manager.domain.common.exceptions import AuthorizationError
from company_manager.domain.common.value_objects import Email
from company_manager.domain.common.value_objects.ids import EmployeeId
from company_manager.domain.identity.entities.user_account import UserAccount
from company_manager.domain.organization.entities.department import Department
from company_manager.domain.organization.entities.job_title import JobTitle
from company_manager.domain.organization.exceptions import (
    DepartmentNotFoundError,
    DocumentAlreadyInUseError,
    EmailAlreadyInUseError,
    EmployeeNotFoundError,
    JobTitleNotFoundError,
)
from company_manager.infrastructure.organization.schemas import (
    EmployeeCreateRequest,
    EmployeeUpdateRequest,
)

CPF_2 = "52998224725"
CPF_3 = "39053344705"


@pytest.fixture
def validation_service(employee_repository, department_repository, job_title_repository):
    return EmployeeValidationService(
        employee_repository, department_repository, job_title_repository
    )


@pytest.fixture
def role_management_service(role_repository) -> RoleManagementService:
    return RoleManagementService(role_repository)


@pytest.fixture
def acting_user(make_employee, job_title_repository, role_repository, user_account_repository):
    """Account performing the operations, with a configurable role level."""

    def _make(level: HierarchicalRole) -> UserAccount:
        employee = make_employee(first_name="Boss", email="boss@acme.com", document_number=CPF_3)
        role = role_repository.save(Role.create(level.description, level))
        return user_account_repository.save(
            UserAccount.create(
                employee.email.value, "hash", employee.id, role.id, employee.job_title_id
            )
        )

    return _make


@pytest.fixture
def create_use_case(
    employee_repository,
    user_account_repository,
    role_repository,
    validation_service,
    role_management_service,
    password_service,
) -> CreateEmployeeUseCase:
    return CreateEmployeeUseCase(
        employee_repository=employee_repository,
        user_account_repository=user_account_repository,
        validation_service=validation_service,
        authorization_service=HierarchicalAuthorizationService(
            user_account_repository, role_repository
        ),
        role_management_service=role_management_service,
        password_service=password_service,
    )


@pytest.fixture
def update_use_case(
    employee_repository, user_account_repository, validation_service, role_management_service
) -> UpdateEmployeeUseCase:
    return UpdateEmployeeUseCase(
        employee_repository, user_account_repository, validation_service, role_management_service
    )


def _create_request(
    department: Department, job_title: JobTitle, **overrides
) -> EmployeeCreateRequest:
    data = {
        "first_name": "Joao",
        "last_name": "Souza",
        "email": "Joao.Souza@acme.com",
        "document_number": "529.982.247-25",
        "phones": ["(11) 98765-4321"],
        "date_of_birth": "1992-03-04",
        "job_title_id": job_title.id.value,
        "department_id": department.id.value,
        "password": "Passw0rd",
    }
    data.update(overrides)
    return EmployeeCreateRequest(**data)


def _update_request(employee_dto, **overrides) -> EmployeeUpdateRequest:
    data = {
        "first_name": employee_dto.first_name,
        "last_name": employee_dto.last_name,
        "email": employee_dto.email,
        "document_number": employee_dto.document_number,
        "phones": [p.number for p in employee_dto.phones],
        "date_of_birth": employee_dto.date_of_birth.isoformat(),
        "job_title_id": employee_dto.job_title_id,
        "department_id": employee_dto.department_id,
    }
    data.update(overrides)
    return EmployeeUpdateRequest(**data)


class TestCreateEmployee:
    def test_creates_employee_and_account(
        self,
        create_use_case,
        acting_user,
        department,
        job_title,
        user_account_repository,
        role_repository,
        password_service,
    ) -> None:
        actor = acting_user(HierarchicalRole.SUPER_USER)

        dto = create_use_case.create_employee(_create_request(department, job_title), actor.id)

        assert dto.email == "joao.souza@acme.com"
        assert dto.document_number == "529.982.247-25"
        assert dto.phones[0].number == "+5511987654321"
        assert dto.phones[0].is_primary

        account = user_account_repository.find_by_user_name("joao.souza@acme.com")
        assert account is not None
        assert account.employee_id.value == dto.id
        assert password_service.verify_password("Passw0rd", account.password_hash)
        role = role_repository.find_by_id(account.role_id)
        assert role is not None
        # Job title level 4 maps to Pleno
        assert role.level is HierarchicalRole.PLENO

    def test_refuses_higher_level(
        self, create_use_case, acting_user, department, job_title_repository
    ) -> None:
        actor = acting_user(HierarchicalRole.PLENO)
        director = job_title_repository.save(JobTitle.create("Director", 1))

        with pytest.raises(
            AuthorizationError, match="You cannot create employees with role level 'Director'."
        ):
            create_use_case.create_employee(_create_request(department, director), actor.id)

    def test_duplicate_email(self, create_use_case, acting_user, department, job_title) -> None:
        actor = acting_user(HierarchicalRole.SUPER_USER)

        with pytest.raises(EmailAlreadyInUseError, match="Email 'boss@acme.com' is already"):
            create_use_case.create_employee(
                _create_request(department, job_title, email="BOSS@acme.com"), actor.id
            )

    def test_duplicate_document(self, create_use_case, acting_user, department, job_title) -> None:
        actor = acting_user(HierarchicalRole.SUPER_USER)

        with pytest.raises(DocumentAlreadyInUseError, match="is already in use"):
            create_use_case.create_employee(
                _create_request(department, job_title, document_number=CPF_3), actor.id
            )

    def test_unknown_department(self, create_use_case, acting_user, department, job_title) -> None:
        actor = acting_user(HierarchicalRole.SUPER_USER)
        missing = Department.create("Ghost")

        with pytest.raises(DepartmentNotFoundError, match="Department not found."):
            create_use_case.create_employee(_create_request(missing, job_title), actor.id)

    def test_unknown_job_title(self, create_use_case, acting_user, department) -> None:
        actor = acting_user(HierarchicalRole.SUPER_USER)

        with pytest.raises(JobTitleNotFoundError, match="Job title not found."):
            create_use_case.create_employee(
                _create_request(department, JobTitle.create("Ghost", 5)), actor.id
            )


class TestUpdateEmployee:
    def test_updates_fields_and_phones(
        self, create_use_case, update_use_case, acting_user, department, job_title
    ) -> None:
        actor = acting_user(HierarchicalRole.SUPER_USER)
        created = create_use_case.create_employee(_create_request(department, job_title), actor.id)

        updated = update_use_case.update_employee(
            EmployeeId(created.id),
            _update_request(
                created,
                first_name="Joana",
                phones=["(21) 3456-7890", "(11) 98765-4321"],
            ),
        )

        assert updated.first_name == "Joana"
        assert {p.number for p in updated.phones} == {"+552134567890", "+5511987654321"}
        assert updated.updated_at is not None

    def test_drops_phones_not_listed(
        self, create_use_case, update_use_case, acting_user, department, job_title
    ) -> None:
        actor = acting_user(HierarchicalRole.SUPER_USER)
        created = create_use_case.create_employee(_create_request(department, job_title), actor.id)

        updated = update_use_case.update_employee(
            EmployeeId(created.id), _update_request(created, phones=["(21) 3456-7890"])
        )

        assert [p.number for p in updated.phones] == ["+552134567890"]
        assert updated.phones[0].is_primary

    def test_email_change_follows_to_account(
        self,
        create_use_case,
        update_use_case,
        acting_user,
        department,
        job_title,
        user_account_repository,
    ) -> None:
        actor = acting_user(HierarchicalRole.SUPER_USER)
        created = create_use_case.create_employee(_create_request(department, job_title), actor.id)

        update_use_case.update_employee(
            EmployeeId(created.id), _update_request(created, email="joao@acme.com")
        )

        assert user_account_repository.find_by_user_name("joao@acme.com") is not None
        assert user_account_repository.find_by_user_name("joao.souza@acme.com") is None

    def test_job_title_change_updates_role(
        self,
        create_use_case,
        update_use_case,
        acting_user,
        department,
        job_title,
        job_title_repository,
        user_account_repository,
        role_repository,
    ) -> None:
        actor = acting_user(HierarchicalRole.SUPER_USER)
        created = create_use_case.create_employee(_create_request(department, job_title), actor.id)
        manager_title = job_title_repository.save(JobTitle.create("Engineering Manager", 2))

        update_use_case.update_employee(
            EmployeeId(created.id), _update_request(created, job_title_id=manager_title.id.value)
        )

        account = user_account_repository.find_by_user_name("joao.souza@acme.com")
        assert account is not None
        assert account.job_title_id == manager_title.id
        role = role_repository.find_by_id(account.role_id)
        assert role is not None
        assert role.level is HierarchicalRole.MANAGER

    def test_email_taken_by_someone_else(
        self, create_use_case, update_use_case, acting_user, department, job_title
    ) -> None:
        actor = acting_user(HierarchicalRole.SUPER_USER)
        created = create_use_case.create_employee(_create_request(department, job_title), actor.id)

        with pytest.raises(EmailAlreadyInUseError, match="Email already in use."):
            update_use_case.update_employee(
                EmployeeId(created.id), _update_request(created, email="boss@acme.com")
            )

    def test_document_taken_by_someone_else(
        self, create_use_case, update_use_case, acting_user, department, job_title
    ) -> None:
        actor = acting_user(HierarchicalRole.SUPER_USER)
        created = create_use_case.create_employee(_create_request(department, job_title), actor.id)

        with pytest.raises(DocumentAlreadyInUseError, match="Document number already in use."):
            update_use_case.update_employee(
                EmployeeId(created.id), _update_request(created, document_number=CPF_3)
            )

    def test_unknown_department(
        self, create_use_case, update_use_case, acting_user, department, job_title
    ) -> None:
        actor = acting_user(HierarchicalRole.SUPER_USER)
        created = create_use_case.create_employee(_create_request(department, job_title), actor.id)

        with pytest.raises(DepartmentNotFoundError, match="Department does not exist."):
            update_use_case.update_employee(
                EmployeeId(created.id), _update_request(created, department_id=uuid4())
            )

    def test_unknown_employee(self, update_use_case, make_employee) -> None:
        existing = make_employee()
        request = EmployeeUpdateRequest(
            first_name="Ana",
            last_name="Lima",
            email="ana@acme.com",
            document_number=CPF_2,
            phones=["11999999999"],
            date_of_birth="1990-01-01",
            job_title_id=existing.job_title_id.value,
            department_id=existing.department_id.value,
        )

        with pytest.raises(EmployeeNotFoundError, match="Employee not found."):
            update_use_case.update_employee(EmployeeId.generate(), request)


class TestDeleteGetList:
    def test_delete_removes_employee_and_account(
        self,
        create_use_case,
        acting_user,
        department,
        job_title,
        employee_repository,
        user_account_repository,
    ) -> None:
        actor = acting_user(HierarchicalRole.SUPER_USER)
        created = create_use_case.create_employee(_create_request(department, job_title), actor.id)
        delete = DeleteEmployeeUseCase(employee_repository, user_account_repository)

        delete.delete_employee(EmployeeId(created.id))

        assert employee_repository.find_by_id(EmployeeId(created.id)) is None
        assert user_account_repository.find_by_user_name("joao.souza@acme.com") is None

    def test_delete_missing_is_a_no_op(self, employee_repository, user_account_repository) -> None:
        delete = DeleteEmployeeUseCase(employee_repository, user_account_repository)

        delete.delete_employee(EmployeeId.generate())

    def test_get_by_id(self, make_employee, employee_repository) -> None:
        employee = make_employee()
        get = GetEmployeeByIdUseCase(employee_repository)

        dto = get.get_employee(employee.id)

        assert dto is not None
        assert dto.full_name == "Maria Silva"
        assert get.get_employee(EmployeeId.generate()) is None

    def test_list_filters_and_paginates(
        self, make_employee, employee_repository, department_repository, department
    ) -> None:
        sales = department_repository.save(Department.create("Sales"))
        make_employee(first_name="Ana", email="ana@acme.com", document_number="11144477735")
        make_employee(
            first_name="Bruno",
            email="bruno@acme.com",
            document_number=CPF_2,
            in_department=sales,
        )
        make_employee(first_name="Carla", email="carla@other.com", document_number=CPF_3)
        list_employees = ListEmployeesUseCase(employee_repository)

        by_name = list_employees.list_employees(name_or_email="ANA")
        assert [e.first_name for e in by_name.items] == ["Ana"]

        by_email = list_employees.list_employees(name_or_email="acme.com")
        assert by_email.total == 2

        by_department = list_employees.list_employees(department_id=sales.id.value)
        assert [e.first_name for e in by_department.items] == ["Bruno"]

        page = list_employees.list_employees(page=2, page_size=2, name_or_email="  ")
        assert page.total == 3
        assert [e.first_name for e in page.items] == ["Carla"]
        assert page.has_prev
        assert not page.has_next

    def test_list_clamps_page_size(self, make_employee, employee_repository) -> None:
        make_employee()
        result = ListEmployeesUseCase(employee_repository).list_employees(page=0, page_size=1000)

        assert result.page == 1
        assert result.page_size == 100

    def test_email_lookup_is_normalized(self, make_employee, employee_repository) -> None:
        make_employee(email="Maria.Silva@ACME.com")

        assert employee_repository.find_by_email(Email("maria.silva@acme.com")) is not None
