"""
Filter contracts for list queries.

Text criteria are matched case-insensitively as substrings; identifier
criteria are matched exactly. Blank text is normalized to None, meaning
"no filter", never "match the empty string".
"""

from dataclasses import dataclass
from uuid import UUID


def normalize_text(value: str | None) -> str | None:
    """Trim a filter value, returning None when nothing is left."""
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


def contains_ignore_case(haystack: str | None, needle: str) -> bool:
    """Case-insensitive substring test used by in-memory filtering."""
    return haystack is not None and needle.casefold() in haystack.casefold()


@dataclass(frozen=True)
class EmployeeFilter:
    """
    Employee search criteria.

    Attributes:
        department_id: Exact department match
        name_or_email: Substring of first name, last name or e-mail
        job_title_id: Exact job title match
    """

    department_id: UUID | None = None
    name_or_email: str | None = None
    job_title_id: UUID | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name_or_email", normalize_text(self.name_or_email))


@dataclass(frozen=True)
class DepartmentFilter:
    """
    Department search criteria.

    Attributes:
        name_contains: Substring of the name or the description
    """

    name_contains: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name_contains", normalize_text(self.name_contains))


@dataclass(frozen=True)
class JobTitleFilter:
    """
    Job title search criteria.

    Attributes:
        name_contains: Substring of the name
        hierarchy_level: Exact level match
        is_active: Only active (True) or inactive (False) titles
    """

    name_contains: str | None = None
    hierarchy_level: int | None = None
    is_active: bool | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name_contains", normalize_text(self.name_contains))
