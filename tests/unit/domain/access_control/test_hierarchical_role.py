"""Tests for hierarchical role levels and default permissions."""

import pytest

from company_manager.domain.access_control.hierarchical_role import (
    FALLBACK_PERMISSIONS,
    SYSTEM_ADMIN,
    HierarchicalRole,
    all_permissions,
    get_default_permissions,
)


class TestCanCreateRole:
    def test_manager_can_create_junior(self) -> None:
        assert HierarchicalRole.MANAGER.can_create_role(HierarchicalRole.JUNIOR)

    def test_junior_cannot_create_manager(self) -> None:
        assert not HierarchicalRole.JUNIOR.can_create_role(HierarchicalRole.MANAGER)

    def test_same_level_is_allowed(self) -> None:
        assert HierarchicalRole.SENIOR.can_create_role(HierarchicalRole.SENIOR)

    @pytest.mark.parametrize("target", list(HierarchicalRole))
    def test_super_user_can_create_anything(self, target: HierarchicalRole) -> None:
        assert HierarchicalRole.SUPER_USER.can_create_role(target)

    def test_director_cannot_create_super_user(self) -> None:
        assert not HierarchicalRole.DIRECTOR.can_create_role(HierarchicalRole.SUPER_USER)


class TestDefaultPermissions:
    def test_every_level_has_permissions(self) -> None:
        for level in HierarchicalRole:
            assert level.default_permissions

    def test_each_level_is_a_strict_superset_of_the_previous(self) -> None:
        levels = sorted(HierarchicalRole)
        for lower, higher in zip(levels, levels[1:], strict=False):
            assert set(lower.default_permissions) < set(higher.default_permissions)

    def test_super_user_has_system_permissions(self) -> None:
        assert SYSTEM_ADMIN in HierarchicalRole.SUPER_USER.default_permissions
        assert set(all_permissions()) == set(HierarchicalRole.SUPER_USER.default_permissions)

    def test_unknown_level_falls_back_to_read_only(self) -> None:
        assert get_default_permissions(42) == FALLBACK_PERMISSIONS


class TestJobTitleMapping:
    @pytest.mark.parametrize(
        ("job_title_level", "expected"),
        [
            (999, HierarchicalRole.SUPER_USER),
            (1, HierarchicalRole.DIRECTOR),
            (2, HierarchicalRole.MANAGER),
            (3, HierarchicalRole.SENIOR),
            (4, HierarchicalRole.PLENO),
            (5, HierarchicalRole.JUNIOR),
            (7, HierarchicalRole.JUNIOR),
        ],
    )
    def test_from_job_title_level(self, job_title_level: int, expected: HierarchicalRole) -> None:
        assert HierarchicalRole.from_job_title_level(job_title_level) is expected

    def test_description(self) -> None:
        assert HierarchicalRole.SUPER_USER.description == "SuperUser"
        assert HierarchicalRole.PLENO.description == "Pleno"
