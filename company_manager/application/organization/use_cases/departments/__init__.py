from .create_department_use_case import CreateDepartmentUseCase
from .delete_department_use_case import DeleteDepartmentUseCase
from .get_department_use_case import GetDepartmentByIdUseCase
from .list_departments_use_case import ListDepartmentsUseCase
from .update_department_use_case import UpdateDepartmentUseCase

__all__ = [
    "CreateDepartmentUseCase",
    "DeleteDepartmentUseCase",
    "GetDepartmentByIdUseCase",
    "ListDepartmentsUseCase",
    "UpdateDepartmentUseCase",
]
