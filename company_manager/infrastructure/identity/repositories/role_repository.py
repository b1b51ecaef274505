"""Repository for Role domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from company_manager.domain.access_control.role import Role
from company_manager.domain.common.exceptions import BusinessRuleViolationError
from company_manager.domain.common.value_objects.ids import RoleId
from company_manager.infrastructure.identity.mappers.role_mapper import RoleMapper
from company_manager.models import Role as RoleORM

logger = logging.getLogger(__name__)


class RoleRepository:
    """Repository for Role domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = RoleMapper()

    def find_by_id(self, role_id: RoleId) -> Role | None:
        orm_model = self.db.get(RoleORM, role_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_name(self, name: str) -> Role | None:
        stmt = select(RoleORM).where(RoleORM.name == name.strip())
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, role: Role) -> Role:
        """
        Insert or update a role together with its permissions.

        Raises:
            BusinessRuleViolationError: If another role has the name
        """
        orm_model = self.db.get(RoleORM, role.id.value)
        is_new = orm_model is None
        orm_model = self.mapper.to_orm(role, orm_model)
        if is_new:
            self.db.add(orm_model)

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise BusinessRuleViolationError(
                "unique_role_name", f"Role name '{role.name}' is already in use."
            ) from e

        self.db.refresh(orm_model)
        logger.info(f"{'Created' if is_new else 'Updated'} role {role.name}")
        return self.mapper.to_domain(orm_model)
