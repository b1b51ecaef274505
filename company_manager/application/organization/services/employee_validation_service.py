"""Application service for cross-aggregate employee checks."""

from company_manager.application.organization.protocols.department_repository import (
    DepartmentRepositoryProtocol,
)
from company_manager.application.organization.protocols.employee_repository import (
    EmployeeRepositoryProtocol,
)
from company_manager.application.organization.protocols.job_title_repository import (
    JobTitleRepositoryProtocol,
)
from company_manager.domain.common.value_objects import DocumentNumber, Email
from company_manager.domain.common.value_objects.ids import DepartmentId, EmployeeId, JobTitleId
from company_manager.domain.organization.entities.job_title import JobTitle
from company_manager.domain.organization.exceptions import (
    DepartmentNotFoundError,
    DocumentAlreadyInUseError,
    EmailAlreadyInUseError,
    JobTitleNotFoundError,
)


class EmployeeValidationService:
    """
    Uniqueness and reference checks that need repositories.

    The unique indexes in the store remain the final guard; these checks
    give the caller a readable error before the write is attempted.
    """

    def __init__(
        self,
        employee_repository: EmployeeRepositoryProtocol,
        department_repository: DepartmentRepositoryProtocol,
        job_title_repository: JobTitleRepositoryProtocol,
    ) -> None:
        self.employee_repository = employee_repository
        self.department_repository = department_repository
        self.job_title_repository = job_title_repository

    def ensure_email_available(
        self, email: Email, exclude: EmployeeId | None = None, message: str | None = None
    ) -> None:
        owner = self.employee_repository.find_by_email(email)
        if owner is not None and owner.id != exclude:
            raise EmailAlreadyInUseError(email.value, message)

    def ensure_document_available(
        self,
        document_number: DocumentNumber,
        exclude: EmployeeId | None = None,
        message: str | None = None,
    ) -> None:
        owner = self.employee_repository.find_by_document(document_number)
        if owner is not None and owner.id != exclude:
            raise DocumentAlreadyInUseError(document_number.formatted, message)

    def ensure_department_exists(
        self, department_id: DepartmentId, message: str = "Department not found."
    ) -> None:
        if not self.department_repository.exists(department_id):
            raise DepartmentNotFoundError(department_id, message)

    def get_job_title(self, job_title_id: JobTitleId) -> JobTitle:
        job_title = self.job_title_repository.find_by_id(job_title_id)
        if job_title is None:
            raise JobTitleNotFoundError(job_title_id)
        return job_title

    def validate_new_employee(
        self,
        email: Email,
        document_number: DocumentNumber,
        department_id: DepartmentId,
        job_title_id: JobTitleId,
    ) -> None:
        """
        Run every check a new employee must pass.

        Raises:
            EmailAlreadyInUseError: If another employee has the e-mail
            DocumentAlreadyInUseError: If another employee has the CPF
            DepartmentNotFoundError: If the department does not exist
            JobTitleNotFoundError: If the job title does not exist
        """
        self.ensure_email_available(email)
        self.ensure_document_available(document_number)
        self.ensure_department_exists(department_id)
        self.get_job_title(job_title_id)
