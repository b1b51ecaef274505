"""Pytest configuration and fixtures."""

import os

# Settings are read at import time by the security services
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-at-least-32-characters!")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from collections.abc import Callable, Generator  # noqa: E402
from datetime import date  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from company_manager import models  # noqa: E402, F401
from company_manager.database import Base  # noqa: E402
from company_manager.domain.common.value_objects import (  # noqa: E402
    DateOfBirth,
    DocumentNumber,
    Email,
)
from company_manager.domain.organization.entities.department import Department  # noqa: E402
from company_manager.domain.organization.entities.employee import Employee  # noqa: E402
from company_manager.domain.organization.entities.job_title import JobTitle  # noqa: E402
from company_manager.infrastructure.identity.repositories import (  # noqa: E402
    RoleRepository,
    UserAccountRepository,
)
from company_manager.infrastructure.organization.repositories import (  # noqa: E402
    DepartmentRepository,
    EmployeeRepository,
    JobTitleRepository,
)

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

# Valid CPFs for fixtures
CPF_1 = "11144477735"
CPF_2 = "52998224725"
CPF_3 = "39053344705"


class FakePasswordService:
    """Reversible stand-in for argon2 so tests stay fast."""

    PREFIX = "fake$"

    def hash_password(self, plain_password: str) -> str:
        return f"{self.PREFIX}{plain_password}"

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return hashed_password == f"{self.PREFIX}{plain_password}"

    def get_dummy_hash(self) -> str:
        return f"{self.PREFIX}dummy"


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def password_service() -> FakePasswordService:
    return FakePasswordService()


@pytest.fixture
def employee_repository(db_session: Session) -> EmployeeRepository:
    return EmployeeRepository(db_session)


@pytest.fixture
def department_repository(db_session: Session) -> DepartmentRepository:
    return DepartmentRepository(db_session)


@pytest.fixture
def job_title_repository(db_session: Session) -> JobTitleRepository:
    return JobTitleRepository(db_session)


@pytest.fixture
def user_account_repository(db_session: Session) -> UserAccountRepository:
    return UserAccountRepository(db_session)


@pytest.fixture
def role_repository(db_session: Session) -> RoleRepository:
    return RoleRepository(db_session)


@pytest.fixture
def department(department_repository: DepartmentRepository) -> Department:
    return department_repository.save(Department.create("Engineering", "Builds things"))


@pytest.fixture
def job_title(job_title_repository: JobTitleRepository) -> JobTitle:
    return job_title_repository.save(JobTitle.create("Software Engineer", 4))


@pytest.fixture
def make_employee(
    employee_repository: EmployeeRepository, department: Department, job_title: JobTitle
) -> Callable[..., Employee]:
    """Factory persisting an employee with sensible defaults."""

    def _make(
        first_name: str = "Maria",
        last_name: str = "Silva",
        email: str = "maria.silva@acme.com",
        document_number: str = CPF_1,
        phones: list[str] | None = None,
        in_department: Department | None = None,
        with_job_title: JobTitle | None = None,
    ) -> Employee:
        employee = Employee.create(
            first_name=first_name,
            last_name=last_name,
            email=Email(email),
            document_number=DocumentNumber(document_number),
            date_of_birth=DateOfBirth(date(1990, 5, 17)),
            phone_numbers=phones or ["(11) 99999-9999"],
            job_title_id=(with_job_title or job_title).id,
            department_id=(in_department or department).id,
        )
        return employee_repository.save(employee)

    return _make
