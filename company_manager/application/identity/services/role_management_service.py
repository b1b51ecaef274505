"""Application service resolving the Role that goes with a job title level."""

import structlog

from company_manager.application.identity.protocols.role_repository import RoleRepositoryProtocol
from company_manager.domain.access_control.hierarchical_role import HierarchicalRole
from company_manager.domain.access_control.role import Role

logger = structlog.get_logger(__name__)


class RoleManagementService:
    """One role per hierarchical level, named after the level and created on first use."""

    def __init__(self, role_repository: RoleRepositoryProtocol) -> None:
        self.role_repository = role_repository

    def get_or_create_role_for_level(self, job_title_level: int) -> Role:
        """
        Find the role for a job title level, creating it with default permissions if missing.

        Args:
            job_title_level: Job title hierarchy level (1 top, 5 entry, 999 SuperUser)

        Returns:
            The persisted Role
        """
        level = HierarchicalRole.from_job_title_level(job_title_level)
        role = self.role_repository.find_by_name(level.description)
        if role is not None:
            return role

        role = self.role_repository.save(Role.create(level.description, level))
        logger.info("role_created", role_id=str(role.id), name=role.name, level=int(level))
        return role
