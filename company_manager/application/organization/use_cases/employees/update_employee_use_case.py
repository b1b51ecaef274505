"""Update employee use case."""

import structlog

from company_manager.application.identity.protocols.user_account_repository import (
    UserAccountRepositoryProtocol,
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
from company_manager.domain.common.value_objects import (
    DateOfBirth,
    DocumentNumber,
    Email,
    PhoneNumber,
)
from company_manager.domain.common.value_objects.ids import DepartmentId, EmployeeId, JobTitleId
from company_manager.domain.organization.entities.employee import DEFAULT_PHONE_COUNTRY, Employee
from company_manager.domain.organization.exceptions import EmployeeNotFoundError
from company_manager.infrastructure.organization.schemas import EmployeeUpdateRequest

logger = structlog.get_logger(__name__)


class UpdateEmployeeUseCase:
    """Use case for updating employee information."""

    def __init__(
        self,
        employee_repository: EmployeeRepositoryProtocol,
        user_account_repository: UserAccountRepositoryProtocol,
        validation_service: EmployeeValidationService,
        role_management_service: RoleManagementService,
    ) -> None:
        self.employee_repository = employee_repository
        self.user_account_repository = user_account_repository
        self.validation_service = validation_service
        self.role_management_service = role_management_service

    def update_employee(
        self, employee_id: EmployeeId, request: EmployeeUpdateRequest
    ) -> EmployeeDTO:
        """
        Update an employee.

        Uniqueness is only checked for values that change. The login account
        follows the employee: its user name tracks the e-mail and its role and
        job title track the job title.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
            DepartmentNotFoundError: If the department does not exist
            JobTitleNotFoundError: If the job title does not exist
            EmailAlreadyInUseError: If another employee has the new e-mail
            DocumentAlreadyInUseError: If another employee has the new CPF
        """
        employee = self.employee_repository.find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)

        department_id = DepartmentId(request.department_id)
        job_title_id = JobTitleId(request.job_title_id)
        self.validation_service.ensure_department_exists(
            department_id, "Department does not exist."
        )
        job_title = self.validation_service.get_job_title(job_title_id)

        email = Email(request.email)
        if email != employee.email:
            self.validation_service.ensure_email_available(
                email, exclude=employee.id, message="Email already in use."
            )
        document_number = DocumentNumber(request.document_number)
        if document_number != employee.document_number:
            self.validation_service.ensure_document_available(
                document_number, exclude=employee.id, message="Document number already in use."
            )

        job_title_changed = job_title_id != employee.job_title_id

        employee.change_name(request.first_name, request.last_name)
        employee.change_email(email)
        employee.change_document(document_number)
        employee.change_date_of_birth(DateOfBirth.parse(request.date_of_birth))
        employee.change_department(department_id)
        employee.change_job_title(job_title_id)
        self._sync_phones(employee, request.phones)

        employee = self.employee_repository.save(employee)

        account = self.user_account_repository.find_by_employee_id(employee.id)
        if account is not None:
            if account.user_name != email.value:
                account.set_user_name(email.value)
            if job_title_changed:
                role = self.role_management_service.get_or_create_role_for_level(
                    job_title.hierarchy_level
                )
                account.set_job_title(job_title.id)
                account.set_role(role.id)
            self.user_account_repository.save(account)

        logger.info("employee_updated", employee_id=str(employee.id))
        return EmployeeDTO.from_entity(employee)

    @staticmethod
    def _sync_phones(employee: Employee, numbers: list[str]) -> None:
        """Add the numbers the employee lacks, then drop the ones no longer listed."""
        wanted = [PhoneNumber(n, default_country=DEFAULT_PHONE_COUNTRY) for n in numbers]
        wanted_e164 = {phone.e164 for phone in wanted}
        current_e164 = {phone.e164 for phone in employee.phones}

        for phone in wanted:
            if phone.e164 not in current_e164:
                employee.add_phone(phone.raw)
                current_e164.add(phone.e164)

        for phone in employee.phones:
            if phone.e164 not in wanted_e164:
                employee.remove_phone(phone.id)
