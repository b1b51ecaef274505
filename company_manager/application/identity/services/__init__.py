from .hierarchical_authorization_service import HierarchicalAuthorizationService
from .role_management_service import RoleManagementService

__all__ = [
    "HierarchicalAuthorizationService",
    "RoleManagementService",
]
