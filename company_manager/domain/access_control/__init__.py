"""Access control domain: hierarchical role levels and the Role entity."""

from company_manager.domain.access_control.hierarchical_role import (
    HierarchicalRole,
    all_permissions,
    get_default_permissions,
)
from company_manager.domain.access_control.role import Role

__all__ = [
    "HierarchicalRole",
    "Role",
    "all_permissions",
    "get_default_permissions",
]
