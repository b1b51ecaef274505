"""Organization domain exceptions."""

from company_manager.domain.common.exceptions import BusinessRuleViolationError, EntityNotFoundError


class EmployeeNotFoundError(EntityNotFoundError):
    """Raised when an employee cannot be found."""

    def __init__(self, employee_id: object) -> None:
        super().__init__("Employee", employee_id, "Employee not found.")


class DepartmentNotFoundError(EntityNotFoundError):
    """Raised when a department cannot be found."""

    def __init__(self, department_id: object, message: str = "Department not found.") -> None:
        super().__init__("Department", department_id, message)


class JobTitleNotFoundError(EntityNotFoundError):
    """Raised when a job title cannot be found."""

    def __init__(self, job_title_id: object) -> None:
        super().__init__("JobTitle", job_title_id, "Job title not found.")


class EmailAlreadyInUseError(BusinessRuleViolationError):
    """Raised when another employee already uses the e-mail address."""

    def __init__(self, email: str, message: str | None = None) -> None:
        super().__init__("unique_employee_email", message or f"Email '{email}' is already in use.")
        self.email = email


class DocumentAlreadyInUseError(BusinessRuleViolationError):
    """Raised when another employee already uses the CPF."""

    def __init__(self, document: str, message: str | None = None) -> None:
        super().__init__(
            "unique_employee_document", message or f"Document '{document}' is already in use."
        )
        self.document = document


class DepartmentNameAlreadyInUseError(BusinessRuleViolationError):
    """Raised when another department already has the name."""

    def __init__(self, name: str) -> None:
        super().__init__("unique_department_name", f"Department name '{name}' is already in use.")
        self.name = name


class JobTitleNameAlreadyInUseError(BusinessRuleViolationError):
    """Raised when another job title already has the name."""

    def __init__(self, name: str) -> None:
        super().__init__("unique_job_title_name", f"Job title name '{name}' is already in use.")
        self.name = name
