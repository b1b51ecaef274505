from .create_employee_use_case import CreateEmployeeUseCase
from .delete_employee_use_case import DeleteEmployeeUseCase
from .get_employee_use_case import GetEmployeeByIdUseCase
from .list_employees_use_case import ListEmployeesUseCase
from .update_employee_use_case import UpdateEmployeeUseCase

__all__ = [
    "CreateEmployeeUseCase",
    "DeleteEmployeeUseCase",
    "GetEmployeeByIdUseCase",
    "ListEmployeesUseCase",
    "UpdateEmployeeUseCase",
]
