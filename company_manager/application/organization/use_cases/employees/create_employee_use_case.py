"""Create employee use case."""

import structlog

from company_manager.application.identity.protocols.password_service import (
    PasswordServiceProtocol,
)
from company_manager.application.identity.protocols.user_account_repository import (
    UserAccountRepositoryProtocol,
)
from company_manager.application.identity.services.hierarchical_authorization_service import (
    HierarchicalAuthorizationService,
)
from company_manager.application.identity.services.role_management_service import (
    RoleManagementService,
)
from company_manager.application.organization.protocols.employee_repository import (
    EmployeeRepositoryProtocol,
)
from company_manager.application.organization.services.employee_validation_service import (
    EmployeeValidationService,
)
from company_manager.application.organization.use_cases.dtos import EmployeeDTO
from company_manager.domain.access_control.hierarchical_role import HierarchicalRole
from company_manager.domain.common.exceptions import AuthorizationError
from company_manager.domain.common.value_objects import DateOfBirth, DocumentNumber, Email
from company_manager.domain.common.value_objects.ids import (
    DepartmentId,
    JobTitleId,
    UserAccountId,
)
from company_manager.domain.identity.entities.user_account import UserAccount
from company_manager.domain.organization.entities.employee import Employee
from company_manager.infrastructure.organization.schemas import EmployeeCreateRequest

logger = structlog.get_logger(__name__)


class CreateEmployeeUseCase:
    """Use case for hiring an employee, which also opens their login account."""

    def __init__(
        self,
        employee_repository: EmployeeRepositoryProtocol,
        user_account_repository: UserAccountRepositoryProtocol,
        validation_service: EmployeeValidationService,
        authorization_service: HierarchicalAuthorizationService,
        role_management_service: RoleManagementService,
        password_service: PasswordServiceProtocol,
    ) -> None:
        self.employee_repository = employee_repository
        self.user_account_repository = user_account_repository
        self.validation_service = validation_service
        self.authorization_service = authorization_service
        self.role_management_service = role_management_service
        self.password_service = password_service

    def create_employee(
        self, request: EmployeeCreateRequest, current_user_id: UserAccountId
    ) -> EmployeeDTO:
        """
        Create an employee and their user account.

        The account's user name is the employee's e-mail and its role is the
        one matching the job title level.

        Args:
            request: Validated create request
            current_user_id: Account performing the operation

        Returns:
            The created employee

        Raises:
            JobTitleNotFoundError: If the job title does not exist
            AuthorizationError: If the current user may not create that level
            EmailAlreadyInUseError: If the e-mail is taken
            DocumentAlreadyInUseError: If the CPF is taken
            DepartmentNotFoundError: If the department does not exist
        """
        job_title_id = JobTitleId(request.job_title_id)
        department_id = DepartmentId(request.department_id)

        job_title = self.validation_service.get_job_title(job_title_id)
        if not self.authorization_service.can_create_employee_with_role(
            current_user_id, job_title.hierarchy_level
        ):
            target = HierarchicalRole.from_job_title_level(job_title.hierarchy_level)
            raise AuthorizationError(
                f"You cannot create employees with role level '{target.description}'."
            )

        email = Email(request.email)
        document_number = DocumentNumber(request.document_number)
        self.validation_service.validate_new_employee(
            email, document_number, department_id, job_title_id
        )

        employee = Employee.create(
            first_name=request.first_name,
            last_name=request.last_name,
            email=email,
            document_number=document_number,
            date_of_birth=DateOfBirth.parse(request.date_of_birth),
            phone_numbers=request.phones,
            job_title_id=job_title_id,
            department_id=department_id,
        )
        role = self.role_management_service.get_or_create_role_for_level(
            job_title.hierarchy_level
        )
        account = UserAccount.create(
            user_name=email.value,
            password_hash=self.password_service.hash_password(request.password),
            employee_id=employee.id,
            role_id=role.id,
            job_title_id=job_title.id,
        )

        employee = self.employee_repository.save(employee)
        self.user_account_repository.save(account)

        logger.info(
            "employee_created",
            employee_id=str(employee.id),
            created_by=str(current_user_id),
            role=role.name,
        )
        return EmployeeDTO.from_entity(employee)
