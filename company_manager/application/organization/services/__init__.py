from .employee_validation_service import EmployeeValidationService

__all__ = ["EmployeeValidationService"]
