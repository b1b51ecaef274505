from .filters import DepartmentFilter, EmployeeFilter, JobTitleFilter
from .pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, PageRequest, PageResult, clamp_page_size

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "DepartmentFilter",
    "EmployeeFilter",
    "JobTitleFilter",
    "PageRequest",
    "PageResult",
    "clamp_page_size",
]
