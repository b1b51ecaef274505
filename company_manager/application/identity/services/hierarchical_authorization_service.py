"""Application service deciding who may create whom."""

import structlog

from company_manager.application.identity.protocols.role_repository import RoleRepositoryProtocol
from company_manager.application.identity.protocols.user_account_repository import (
    UserAccountRepositoryProtocol,
)
from company_manager.domain.access_control.hierarchical_role import HierarchicalRole
from company_manager.domain.common.value_objects.ids import UserAccountId
from company_manager.domain.identity.exceptions import RoleNotFoundError, UserAccountNotFoundError

logger = structlog.get_logger(__name__)


class HierarchicalAuthorizationService:
    """Checks a user's role level against the level of the employee being created."""

    def __init__(
        self,
        user_account_repository: UserAccountRepositoryProtocol,
        role_repository: RoleRepositoryProtocol,
    ) -> None:
        self.user_account_repository = user_account_repository
        self.role_repository = role_repository

    def can_create_employee_with_role(
        self, current_user_id: UserAccountId, job_title_level: int
    ) -> bool:
        """
        Whether the current user may create an employee at a job title level.

        The job title level is first mapped onto a role level; the decision is
        the current role's `can_create_role` for that level.

        Raises:
            UserAccountNotFoundError: If the current user does not exist
            RoleNotFoundError: If the current user's role does not exist
        """
        account = self.user_account_repository.find_by_id(current_user_id)
        if account is None:
            raise UserAccountNotFoundError(current_user_id, "Current user not found.")

        role = self.role_repository.find_by_id(account.role_id)
        if role is None:
            raise RoleNotFoundError(account.role_id, "Current user role not found.")

        target = HierarchicalRole.from_job_title_level(job_title_level)
        allowed = account.can_create_role(role, target)
        if not allowed:
            logger.warning(
                "role_creation_denied",
                user_id=str(current_user_id),
                role_level=role.level.description,
                target_level=target.description,
            )
        return allowed
