"""Role entity for access control."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from company_manager.domain.access_control.hierarchical_role import HierarchicalRole
from company_manager.domain.common.entity import Entity, utc_now
from company_manager.domain.common.exceptions import ValidationError
from company_manager.domain.common.value_objects.ids import RoleId


@dataclass(eq=False)
class Role(Entity[RoleId]):
    """
    A named bundle of permissions tied to a hierarchical level.

    Business Rules:
    - Name is required and stored trimmed
    - Permissions are a case-insensitive set; the first spelling added is kept
    - Without explicit permissions a role gets its level's defaults
    - A SuperUser role has every permission, listed or not
    """

    id: RoleId
    name: str
    level: HierarchicalRole = HierarchicalRole.JUNIOR
    _permissions: dict[str, str] = field(default_factory=dict, repr=False)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.name = self._validate_name(self.name)

    @staticmethod
    def _validate_name(name: str) -> str:
        if not name or not name.strip():
            raise ValidationError("Invalid role name", field="name", value=name)
        return name.strip()

    @property
    def permissions(self) -> frozenset[str]:
        return frozenset(self._permissions.values())

    @property
    def is_super_user(self) -> bool:
        return self.level.is_super_user

    def add_permission(self, permission: str) -> None:
        """
        Grant a permission.

        Adding one that is already present leaves the set unchanged but still
        counts as a modification.

        Raises:
            ValidationError: If the permission is blank
        """
        if not permission or not permission.strip():
            raise ValidationError("Invalid permission", field="permission", value=permission)
        cleaned = permission.strip()
        self._permissions.setdefault(cleaned.casefold(), cleaned)
        self._touch()

    def remove_permission(self, permission: str) -> None:
        """Revoke a permission; a no-op (no timestamp) when it is not granted."""
        if not permission:
            return
        if self._permissions.pop(permission.strip().casefold(), None) is not None:
            self._touch()

    def set_level(self, level: HierarchicalRole) -> None:
        self.level = level
        self._touch()

    def can_create_role(self, target: HierarchicalRole) -> bool:
        return self.level.can_create_role(target)

    def has_permission(self, permission: str) -> bool:
        if self.is_super_user:
            return True
        if not permission:
            return False
        return permission.strip().casefold() in self._permissions

    @classmethod
    def create(
        cls,
        name: str,
        level: HierarchicalRole = HierarchicalRole.JUNIOR,
        permissions: Iterable[str] | None = None,
    ) -> "Role":
        """
        Create a new role.

        Args:
            name: Role name
            level: Hierarchical level
            permissions: Explicit permissions, or None for the level's defaults

        Returns:
            New Role instance

        Raises:
            ValidationError: If the name or any permission is blank
        """
        role = cls(id=RoleId.generate(), name=name, level=level)
        granted = level.default_permissions if permissions is None else permissions
        for permission in granted:
            if not permission or not permission.strip():
                raise ValidationError("Invalid permission", field="permission", value=permission)
            cleaned = permission.strip()
            role._permissions.setdefault(cleaned.casefold(), cleaned)
        return role

    @classmethod
    def create_with_id(
        cls,
        id: RoleId,
        name: str,
        level: HierarchicalRole,
        permissions: Iterable[str],
        created_at: datetime,
        updated_at: datetime | None,
    ) -> "Role":
        """Reconstitute a role from persistence."""
        return cls(
            id=id,
            name=name,
            level=level,
            _permissions={p.casefold(): p for p in permissions},
            created_at=created_at,
            updated_at=updated_at,
        )
