from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True, eq=False)
class EmployeeId(EntityId):
    """Strongly-typed employee identifier."""


@dataclass(frozen=True, eq=False)
class EmployeePhoneId(EntityId):
    """Strongly-typed employee phone identifier."""


@dataclass(frozen=True, eq=False)
class DepartmentId(EntityId):
    """Strongly-typed department identifier."""


@dataclass(frozen=True, eq=False)
class JobTitleId(EntityId):
    """Strongly-typed job title identifier."""


@dataclass(frozen=True, eq=False)
class RoleId(EntityId):
    """Strongly-typed role identifier."""


@dataclass(frozen=True, eq=False)
class UserAccountId(EntityId):
    """Strongly-typed user account identifier."""
