"""Tests for the UserAccount lockout state machine."""

from datetime import timedelta

import pytest

from company_manager.domain.access_control.hierarchical_role import HierarchicalRole
from company_manager.domain.access_control.role import Role
from company_manager.domain.common.exceptions import ValidationError
from company_manager.domain.common.value_objects.ids import EmployeeId, JobTitleId, RoleId
from company_manager.domain.identity.entities.user_account import UserAccount

LOCKOUT = timedelta(minutes=15)


@pytest.fixture
def account() -> UserAccount:
    return UserAccount.create(
        user_name="  Maria.Silva@ACME.com ",
        password_hash="hash",
        employee_id=EmployeeId.generate(),
        role_id=RoleId.generate(),
        job_title_id=JobTitleId.generate(),
    )


class TestCreation:
    def test_user_name_is_normalized(self, account: UserAccount) -> None:
        assert account.user_name == "maria.silva@acme.com"
        assert account.is_active
        assert account.access_failed_count == 0
        assert account.updated_at is None

    def test_blank_hash_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Hash required"):
            UserAccount.create(
                "user@acme.com",
                " ",
                EmployeeId.generate(),
                RoleId.generate(),
                JobTitleId.generate(),
            )

    def test_empty_employee_id_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Invalid employee id"):
            UserAccount.create(
                "user@acme.com",
                "hash",
                EmployeeId.from_string("00000000-0000-0000-0000-000000000000"),
                RoleId.generate(),
                JobTitleId.generate(),
            )


class TestLockout:
    def test_locks_after_max_attempts_and_unlocks(self, account: UserAccount) -> None:
        for _ in range(5):
            account.record_failed_login_attempt(5, LOCKOUT)

        assert account.is_locked_out
        assert account.access_failed_count == 5

        account.unlock_now()

        assert not account.is_locked_out
        assert account.access_failed_count == 0
        assert account.lockout_end_utc is None

    def test_not_locked_below_threshold(self, account: UserAccount) -> None:
        for _ in range(4):
            account.record_failed_login_attempt(5, LOCKOUT)

        assert not account.is_locked_out
        assert account.lockout_end_utc is None

    def test_failures_past_threshold_extend_lockout(self, account: UserAccount) -> None:
        for _ in range(5):
            account.record_failed_login_attempt(5, LOCKOUT)
        first_end = account.lockout_end_utc

        account.record_failed_login_attempt(5, LOCKOUT)

        assert account.access_failed_count == 6
        assert account.lockout_end_utc is not None
        assert first_end is not None
        assert account.lockout_end_utc >= first_end

    def test_reset_after_success_keeps_activation(self, account: UserAccount) -> None:
        account.record_failed_login_attempt(5, LOCKOUT)
        account.deactivate()

        account.reset_failures_after_successful_login()

        assert account.access_failed_count == 0
        assert not account.is_active


class TestCredentials:
    def test_password_change_rotates_stamp(self, account: UserAccount) -> None:
        old_stamp = account.security_stamp
        old_changed_at = account.password_changed_at

        account.set_password_hash("new-hash")

        assert account.password_hash == "new-hash"
        assert account.security_stamp != old_stamp
        assert account.password_changed_at >= old_changed_at

    def test_rotate_security_stamp(self, account: UserAccount) -> None:
        old_stamp = account.security_stamp

        account.rotate_security_stamp()

        assert account.security_stamp != old_stamp
        assert account.password_hash == "hash"


class TestActivation:
    def test_deactivate_twice_does_not_restamp(self, account: UserAccount) -> None:
        account.deactivate()
        stamped = account.updated_at

        account.deactivate()

        assert stamped is not None
        assert account.updated_at == stamped

    def test_activate_when_active_is_a_no_op(self, account: UserAccount) -> None:
        account.activate()

        assert account.updated_at is None

    def test_activate_twice_does_not_restamp(self, account: UserAccount) -> None:
        account.deactivate()
        account.activate()
        stamped = account.updated_at

        account.activate()

        assert account.updated_at == stamped


class TestTwoFactor:
    def test_enable_and_disable(self, account: UserAccount) -> None:
        account.enable_two_factor("encrypted-secret")

        assert account.two_factor_enabled
        assert account.two_factor_secret == "encrypted-secret"

        account.disable_two_factor()

        assert not account.two_factor_enabled
        assert account.two_factor_secret is None

    def test_blank_secret_is_rejected(self, account: UserAccount) -> None:
        with pytest.raises(ValidationError):
            account.enable_two_factor("")


class TestPermissionChecks:
    def test_without_role_everything_is_denied(self, account: UserAccount) -> None:
        assert not account.has_permission(None, "employees:read")
        assert not account.can_create_role(None, HierarchicalRole.JUNIOR)
        assert account.get_role_level(None) is HierarchicalRole.JUNIOR

    def test_modify_user_needs_strictly_higher_level(self, account: UserAccount) -> None:
        manager = Role.create("Manager", HierarchicalRole.MANAGER)
        other_manager = Role.create("Other", HierarchicalRole.MANAGER)
        junior = Role.create("Junior", HierarchicalRole.JUNIOR)

        assert account.can_modify_user(manager, account, junior)
        assert not account.can_modify_user(manager, account, other_manager)
