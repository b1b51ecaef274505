"""
Pagination types for queries.

`PageRequest` only guards against non-positive values. The upper bound on
page size is applied by the list use cases through `clamp_page_size`, so a
repository called directly can still be asked for larger pages.

Example:
    class ListDepartmentsUseCase:
        def list_departments(self, page: int, page_size: int) -> PageResult[DepartmentDTO]:
            request = PageRequest(max(page, 1), clamp_page_size(page_size))
            items, total = self.department_repository.search(DepartmentFilter(), request)
            return PageResult(
                items=[DepartmentDTO.from_entity(d) for d in items],
                total=total,
                page=request.page_safe,
                page_size=request.page_size_safe,
            )
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PAGE_SIZE = 20
MIN_PAGE_SIZE = 1
# Maximum page size accepted by list handlers
MAX_PAGE_SIZE = 100


def clamp_page_size(page_size: int) -> int:
    """Clamp a requested page size into [MIN_PAGE_SIZE, MAX_PAGE_SIZE]."""
    return max(MIN_PAGE_SIZE, min(page_size, MAX_PAGE_SIZE))


@dataclass(frozen=True)
class PageRequest:
    """
    Pagination parameters for list queries.

    Attributes:
        page: Requested page number (1-indexed)
        page_size: Requested number of items per page
    """

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def page_safe(self) -> int:
        """Page number, at least 1."""
        return max(self.page, 1)

    @property
    def page_size_safe(self) -> int:
        """Page size, DEFAULT_PAGE_SIZE when the request was below 1."""
        return DEFAULT_PAGE_SIZE if self.page_size < MIN_PAGE_SIZE else self.page_size

    @property
    def offset(self) -> int:
        """Calculate the offset for database queries."""
        return (self.page_safe - 1) * self.page_size_safe

    @property
    def limit(self) -> int:
        """Return the limit for database queries."""
        return self.page_size_safe


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """
    One page of results plus the total count.

    Attributes:
        items: Items of the current page
        total: Total number of items across all pages
        page: Page number
        page_size: Page size used
    """

    items: list[T]
    total: int
    page: int
    page_size: int

    @property
    def has_next(self) -> bool:
        """Check if there is a next page."""
        return self.page * self.page_size < self.total

    @property
    def has_prev(self) -> bool:
        """Check if there is a previous page."""
        return self.page > 1

    @property
    def total_pages(self) -> int:
        """Total number of pages."""
        if self.total == 0 or self.page_size < 1:
            return 0
        return (self.total + self.page_size - 1) // self.page_size

    def map(self, fn: Callable[[T], U]) -> "PageResult[U]":
        """Apply a function to every item, keeping the page metadata."""
        return PageResult(
            items=[fn(item) for item in self.items],
            total=self.total,
            page=self.page,
            page_size=self.page_size,
        )
