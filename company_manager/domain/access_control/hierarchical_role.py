"""
Hierarchical role levels and their default permissions.

Levels are ranked: a higher number outranks a lower one, and SuperUser
outranks everything. The rank drives two decisions:
- which roles a user may hand out when creating employees
- which permissions a freshly created role receives
"""

from enum import IntEnum

# Permission names
EMPLOYEES_READ = "employees:read"
EMPLOYEES_WRITE = "employees:write"
PROFILE_READ = "profile:read"
PROFILE_UPDATE = "profile:update"
PROJECTS_READ = "projects:read"
PROJECTS_WRITE = "projects:write"
MENTORING_READ = "mentoring:read"
MENTORING_WRITE = "mentoring:write"
DEPARTMENTS_READ = "departments:read"
DEPARTMENTS_WRITE = "departments:write"
ROLES_READ = "roles:read"
ROLES_WRITE = "roles:write"
JOB_TITLES_READ = "jobtitles:read"
JOB_TITLES_WRITE = "jobtitles:write"
USERS_READ = "users:read"
USERS_WRITE = "users:write"
USERS_ADMIN = "users:admin"
SYSTEM_ADMIN = "system:admin"

_JUNIOR_PERMISSIONS = (EMPLOYEES_READ, PROFILE_READ, PROFILE_UPDATE)
_PLENO_PERMISSIONS = (*_JUNIOR_PERMISSIONS, PROJECTS_READ)
_SENIOR_PERMISSIONS = (*_PLENO_PERMISSIONS, PROJECTS_WRITE, MENTORING_READ)
_MANAGER_PERMISSIONS = (*_SENIOR_PERMISSIONS, EMPLOYEES_WRITE, MENTORING_WRITE, DEPARTMENTS_READ)
_DIRECTOR_PERMISSIONS = (*_MANAGER_PERMISSIONS, DEPARTMENTS_WRITE, ROLES_READ, ROLES_WRITE)
_SUPER_USER_PERMISSIONS = (
    *_DIRECTOR_PERMISSIONS,
    JOB_TITLES_READ,
    JOB_TITLES_WRITE,
    USERS_READ,
    USERS_WRITE,
    USERS_ADMIN,
    SYSTEM_ADMIN,
)

# Granted to any level missing from the table below
FALLBACK_PERMISSIONS = (PROFILE_READ,)

# Job title hierarchy levels count downwards (1 is the top), role levels upwards
SUPER_USER_JOB_TITLE_LEVEL = 999


class HierarchicalRole(IntEnum):
    """Ranked role levels."""

    JUNIOR = 1
    PLENO = 2
    SENIOR = 3
    MANAGER = 4
    DIRECTOR = 5
    SUPER_USER = 999

    @property
    def description(self) -> str:
        """Display name of the level."""
        return _DESCRIPTIONS[self]

    @property
    def is_super_user(self) -> bool:
        return self is HierarchicalRole.SUPER_USER

    @property
    def default_permissions(self) -> tuple[str, ...]:
        return get_default_permissions(self)

    def can_create_role(self, target: "HierarchicalRole") -> bool:
        """
        Whether a holder of this level may create someone at `target` level.

        SuperUser may create anything; everyone else may create their own
        level or below.
        """
        if self.is_super_user:
            return True
        return int(target) <= int(self)

    @classmethod
    def from_job_title_level(cls, hierarchy_level: int) -> "HierarchicalRole":
        """
        Map a job title hierarchy level onto a role level.

        Job titles rank 1 (top) to 5 (entry) and 999 for SuperUser;
        unknown levels map to Junior.
        """
        return _JOB_TITLE_LEVEL_TO_ROLE.get(hierarchy_level, cls.JUNIOR)


_DESCRIPTIONS = {
    HierarchicalRole.JUNIOR: "Junior",
    HierarchicalRole.PLENO: "Pleno",
    HierarchicalRole.SENIOR: "Senior",
    HierarchicalRole.MANAGER: "Manager",
    HierarchicalRole.DIRECTOR: "Director",
    HierarchicalRole.SUPER_USER: "SuperUser",
}

_DEFAULT_PERMISSIONS: dict[int, tuple[str, ...]] = {
    HierarchicalRole.JUNIOR: _JUNIOR_PERMISSIONS,
    HierarchicalRole.PLENO: _PLENO_PERMISSIONS,
    HierarchicalRole.SENIOR: _SENIOR_PERMISSIONS,
    HierarchicalRole.MANAGER: _MANAGER_PERMISSIONS,
    HierarchicalRole.DIRECTOR: _DIRECTOR_PERMISSIONS,
    HierarchicalRole.SUPER_USER: _SUPER_USER_PERMISSIONS,
}

_JOB_TITLE_LEVEL_TO_ROLE = {
    SUPER_USER_JOB_TITLE_LEVEL: HierarchicalRole.SUPER_USER,
    1: HierarchicalRole.DIRECTOR,
    2: HierarchicalRole.MANAGER,
    3: HierarchicalRole.SENIOR,
    4: HierarchicalRole.PLENO,
    5: HierarchicalRole.JUNIOR,
}


def get_default_permissions(level: int) -> tuple[str, ...]:
    """
    Default permission set of a level.

    Total over integers: values that are not a known level get
    `FALLBACK_PERMISSIONS`.
    """
    return _DEFAULT_PERMISSIONS.get(level, FALLBACK_PERMISSIONS)


def all_permissions() -> tuple[str, ...]:
    """Every permission known to the system."""
    return _SUPER_USER_PERMISSIONS
