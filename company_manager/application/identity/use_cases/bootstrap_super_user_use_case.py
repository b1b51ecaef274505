"""First-run seeding of departments and the SuperUser account."""

from datetime import date

import structlog

from company_manager.application.identity.protocols.password_service import (
    PasswordServiceProtocol,
)
from company_manager.application.identity.protocols.user_account_repository import (
    UserAccountRepositoryProtocol,
)
from company_manager.application.identity.services.role_management_service import (
    RoleManagementService,
)
from company_manager.application.organization.protocols.department_repository import (
    DepartmentRepositoryProtocol,
)
from company_manager.application.organization.protocols.employee_repository import (
    EmployeeRepositoryProtocol,
)
from company_manager.application.organization.protocols.job_title_repository import (
    JobTitleRepositoryProtocol,
)
from company_manager.domain.access_control.hierarchical_role import SUPER_USER_JOB_TITLE_LEVEL
from company_manager.domain.common.value_objects import DateOfBirth, DocumentNumber, Email
from company_manager.domain.identity.entities.user_account import UserAccount
from company_manager.domain.organization.entities.department import Department
from company_manager.domain.organization.entities.employee import Employee
from company_manager.domain.organization.entities.job_title import JobTitle

logger = structlog.get_logger(__name__)

DEFAULT_DEPARTMENTS = (
    ("Recursos Humanos", "Departamento responsável pela gestão de pessoas"),
    ("Tecnologia da Informação", "Departamento responsável pela infraestrutura de TI"),
    ("Financeiro", "Departamento responsável pelas finanças da empresa"),
)
ADMIN_DEPARTMENT = "Tecnologia da Informação"
ADMIN_JOB_TITLE = "Administrador do Sistema"
ADMIN_FIRST_NAME = "Administrador"
ADMIN_LAST_NAME = "Sistema"
ADMIN_DOCUMENT_NUMBER = "52998224725"
ADMIN_PHONE = "+5511999999999"
ADMIN_DATE_OF_BIRTH = date(1990, 1, 1)


class BootstrapSuperUserUseCase:
    """Creates the first account of an empty system."""

    def __init__(
        self,
        user_account_repository: UserAccountRepositoryProtocol,
        employee_repository: EmployeeRepositoryProtocol,
        department_repository: DepartmentRepositoryProtocol,
        job_title_repository: JobTitleRepositoryProtocol,
        role_management_service: RoleManagementService,
        password_service: PasswordServiceProtocol,
    ) -> None:
        self.user_account_repository = user_account_repository
        self.employee_repository = employee_repository
        self.department_repository = department_repository
        self.job_title_repository = job_title_repository
        self.role_management_service = role_management_service
        self.password_service = password_service

    def bootstrap_super_user(self, admin_email: str, admin_password: str) -> UserAccount | None:
        """
        Seed the default departments and a SuperUser when no account exists yet.

        Existing departments, job titles and roles with the seeded names are
        reused. Nothing happens once any account exists.

        Args:
            admin_email: Login of the SuperUser
            admin_password: Initial password of the SuperUser

        Returns:
            The created account, or None when the system was already initialized

        Raises:
            InvalidFormatError: If the admin e-mail is not valid
            ValueError: If the admin password is blank
        """
        if self.user_account_repository.count() > 0:
            logger.debug("bootstrap_skipped")
            return None

        if not admin_password:
            msg = "ADMIN_PASSWORD must not be empty"
            raise ValueError(msg)

        email = Email(admin_email)
        departments = {
            name: self._ensure_department(name, description)
            for name, description in DEFAULT_DEPARTMENTS
        }
        job_title = self._ensure_super_user_job_title()
        role = self.role_management_service.get_or_create_role_for_level(job_title.hierarchy_level)

        employee = self.employee_repository.find_by_email(email)
        if employee is None:
            employee = self.employee_repository.save(
                Employee.create(
                    first_name=ADMIN_FIRST_NAME,
                    last_name=ADMIN_LAST_NAME,
                    email=email,
                    document_number=DocumentNumber(ADMIN_DOCUMENT_NUMBER),
                    date_of_birth=DateOfBirth(ADMIN_DATE_OF_BIRTH),
                    phone_numbers=[ADMIN_PHONE],
                    job_title_id=job_title.id,
                    department_id=departments[ADMIN_DEPARTMENT].id,
                )
            )

        account = self.user_account_repository.save(
            UserAccount.create(
                user_name=email.value,
                password_hash=self.password_service.hash_password(admin_password),
                employee_id=employee.id,
                role_id=role.id,
                job_title_id=job_title.id,
            )
        )

        logger.info("super_user_bootstrapped", user_id=str(account.id), email=account.user_name)
        return account

    def _ensure_department(self, name: str, description: str) -> Department:
        department = self.department_repository.find_by_name(name)
        if department is None:
            department = self.department_repository.save(Department.create(name, description))
        return department

    def _ensure_super_user_job_title(self) -> JobTitle:
        job_title = self.job_title_repository.find_by_name(ADMIN_JOB_TITLE)
        if job_title is None:
            job_title = self.job_title_repository.save(
                JobTitle.create(ADMIN_JOB_TITLE, SUPER_USER_JOB_TITLE_LEVEL, "Full system access")
            )
        return job_title
