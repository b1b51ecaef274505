"""UserAccount entity for identity management."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import TYPE_CHECKING
from uuid import uuid4

from company_manager.domain.access_control.hierarchical_role import HierarchicalRole
from company_manager.domain.common.entity import Entity, utc_now
from company_manager.domain.common.exceptions import ValidationError
from company_manager.domain.common.value_objects.ids import (
    EmployeeId,
    JobTitleId,
    RoleId,
    UserAccountId,
)

if TYPE_CHECKING:
    from company_manager.domain.access_control.role import Role
    from company_manager.domain.organization.entities.department import Department
    from company_manager.domain.organization.entities.employee import Employee
    from company_manager.domain.organization.entities.job_title import JobTitle


def _new_security_stamp() -> str:
    return uuid4().hex


def _require_id(value: object, message: str, field_name: str) -> None:
    if value is None or getattr(value, "is_empty", False):
        raise ValidationError(message, field=field_name, value=value)


@dataclass(eq=False)
class UserAccount(Entity[UserAccountId]):
    """
    Login account of an employee.

    Business Rules:
    - User name is the normalized (trimmed, lowercased) e-mail and must be unique
      (enforced at repository level)
    - A password hash is always present; hashing is an infrastructure concern
    - Changing the password rotates the security stamp, which invalidates
      every token issued with the old stamp
    - Failed logins are counted; reaching the limit locks the account until
      `lockout_end_utc`
    - Every mutation stamps `updated_at`; activate/deactivate are idempotent

    States:
    - Active/Unlocked: `is_active` and not `is_locked_out`
    - Active/LockedOut: `is_active` and `lockout_end_utc` in the future
    - Inactive: `is_active` is False
    """

    id: UserAccountId
    user_name: str
    password_hash: str
    employee_id: EmployeeId
    role_id: RoleId
    job_title_id: JobTitleId
    security_stamp: str = field(default_factory=_new_security_stamp)
    password_changed_at: datetime = field(default_factory=utc_now)
    is_active: bool = True
    access_failed_count: int = 0
    lockout_end_utc: datetime | None = None
    two_factor_enabled: bool = False
    two_factor_secret: str | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.user_name = self._normalize_user_name(self.user_name)
        if not self.password_hash or not self.password_hash.strip():
            raise ValidationError("Hash required.", field="password_hash")
        _require_id(self.employee_id, "Invalid employee id", "employee_id")
        _require_id(self.role_id, "Invalid role id", "role_id")
        _require_id(self.job_title_id, "Invalid job title id", "job_title_id")

    @staticmethod
    def _normalize_user_name(user_name: str) -> str:
        if not user_name or not user_name.strip():
            raise ValidationError("Invalid username", field="user_name", value=user_name)
        return user_name.strip().lower()

    # Lockout

    @property
    def is_locked_out(self) -> bool:
        """True while a lockout end is set and still ahead."""
        return self.lockout_end_utc is not None and self.lockout_end_utc > utc_now()

    def record_failed_login_attempt(self, max_attempts: int, lockout_for: timedelta) -> None:
        """
        Count a failed login.

        Once the counter reaches `max_attempts` the account is locked until
        now + `lockout_for`. Further failures keep counting and push the
        lockout end forward.
        """
        self.access_failed_count += 1
        if self.access_failed_count >= max_attempts:
            self.lockout_end_utc = utc_now() + lockout_for
        self._touch()

    def reset_failures_after_successful_login(self) -> None:
        """Zero the failure counter. Activation state is left untouched."""
        self.access_failed_count = 0
        self._touch()

    def unlock_now(self) -> None:
        """Clear any lockout and the failure counter."""
        self.lockout_end_utc = None
        self.access_failed_count = 0
        self._touch()

    # Credentials

    def set_user_name(self, user_name: str) -> None:
        self.user_name = self._normalize_user_name(user_name)
        self._touch()

    def set_password_hash(self, password_hash: str) -> None:
        """
        Replace the password hash.

        Rotates the security stamp and refreshes `password_changed_at`.

        Raises:
            ValidationError: If the hash is blank
        """
        if not password_hash or not password_hash.strip():
            raise ValidationError("Hash required.", field="password_hash")
        self.password_hash = password_hash
        self.security_stamp = _new_security_stamp()
        self.password_changed_at = utc_now()
        self._touch()

    def rotate_security_stamp(self) -> None:
        """Invalidate every token issued so far without touching the password."""
        self.security_stamp = _new_security_stamp()
        self._touch()

    # Links

    def set_role(self, role_id: RoleId) -> None:
        _require_id(role_id, "Invalid role id", "role_id")
        self.role_id = role_id
        self._touch()

    def set_job_title(self, job_title_id: JobTitleId) -> None:
        _require_id(job_title_id, "Invalid job title id", "job_title_id")
        self.job_title_id = job_title_id
        self._touch()

    # Activation

    def activate(self) -> None:
        if self.is_active:
            return
        self.is_active = True
        self._touch()

    def deactivate(self) -> None:
        if not self.is_active:
            return
        self.is_active = False
        self._touch()

    # Two-factor

    def enable_two_factor(self, secret: str) -> None:
        """
        Turn on two-factor authentication with an (encrypted) secret.

        Raises:
            ValidationError: If the secret is blank
        """
        if not secret or not secret.strip():
            raise ValidationError("Invalid 2FA secret", field="two_factor_secret")
        self.two_factor_enabled = True
        self.two_factor_secret = secret
        self._touch()

    def disable_two_factor(self) -> None:
        self.two_factor_enabled = False
        self.two_factor_secret = None
        self._touch()

    # Permission checks against the account's role

    def can_create_role(self, role: Role | None, target: HierarchicalRole) -> bool:
        if role is None:
            return False
        return role.can_create_role(target)

    def is_super_user(self, role: Role | None) -> bool:
        return role is not None and role.is_super_user

    def get_role_level(self, role: Role | None) -> HierarchicalRole:
        return role.level if role is not None else HierarchicalRole.JUNIOR

    def has_permission(self, role: Role | None, permission: str) -> bool:
        if role is None:
            return False
        return role.has_permission(permission)

    def can_modify_user(
        self, role: Role | None, target: UserAccount | None, target_role: Role | None
    ) -> bool:
        """SuperUsers modify anyone; others only accounts of a strictly lower level."""
        if role is None or target is None or target_role is None:
            return False
        if role.is_super_user:
            return True
        return role.level > target_role.level

    def can_modify_department(self, role: Role | None, department: Department | None) -> bool:
        if role is None or department is None:
            return False
        return self._is_manager_or_above(role)

    def can_modify_job_title(self, role: Role | None, job_title: JobTitle | None) -> bool:
        if role is None or job_title is None:
            return False
        return self._is_manager_or_above(role)

    def can_modify_employee(
        self,
        role: Role | None,
        employee: Employee | None,
        employee_job_title: JobTitle | None,
    ) -> bool:
        if role is None or employee is None or employee_job_title is None:
            return False
        return self._is_manager_or_above(role)

    @staticmethod
    def _is_manager_or_above(role: Role) -> bool:
        return role.is_super_user or role.level >= HierarchicalRole.MANAGER

    @classmethod
    def create(
        cls,
        user_name: str,
        password_hash: str,
        employee_id: EmployeeId,
        role_id: RoleId,
        job_title_id: JobTitleId,
    ) -> UserAccount:
        """
        Create a new account.

        Args:
            user_name: Login name (the employee's e-mail); normalized to lowercase
            password_hash: Already hashed password
            employee_id: Owning employee
            role_id: Role granted to the account
            job_title_id: Job title the role was derived from

        Returns:
            New UserAccount instance

        Raises:
            ValidationError: If any argument is blank or empty
        """
        return cls(
            id=UserAccountId.generate(),
            user_name=user_name,
            password_hash=password_hash,
            employee_id=employee_id,
            role_id=role_id,
            job_title_id=job_title_id,
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserAccountId,
        user_name: str,
        password_hash: str,
        employee_id: EmployeeId,
        role_id: RoleId,
        job_title_id: JobTitleId,
        security_stamp: str,
        password_changed_at: datetime,
        is_active: bool,
        access_failed_count: int,
        lockout_end_utc: datetime | None,
        two_factor_enabled: bool,
        two_factor_secret: str | None,
        created_at: datetime,
        updated_at: datetime | None,
    ) -> UserAccount:
        """Reconstitute an account from persistence."""
        return cls(
            id=id,
            user_name=user_name,
            password_hash=password_hash,
            employee_id=employee_id,
            role_id=role_id,
            job_title_id=job_title_id,
            security_stamp=security_stamp,
            password_changed_at=password_changed_at,
            is_active=is_active,
            access_failed_count=access_failed_count,
            lockout_end_utc=lockout_end_utc,
            two_factor_enabled=two_factor_enabled,
            two_factor_secret=two_factor_secret,
            created_at=created_at,
            updated_at=updated_at,
        )
