"""Mapper for Role ORM ↔ Domain conversion."""

from company_manager.domain.access_control.hierarchical_role import HierarchicalRole
from company_manager.domain.access_control.role import Role
from company_manager.domain.common.value_objects.ids import RoleId
from company_manager.infrastructure.common.timestamps import as_utc, as_utc_required
from company_manager.models import Role as RoleORM
from company_manager.models import RolePermission as RolePermissionORM


class RoleMapper:
    """Mapper for Role ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: RoleORM) -> Role:
        """Convert ORM model to domain entity."""
        return Role.create_with_id(
            id=RoleId(orm_model.id),
            name=orm_model.name,
            level=HierarchicalRole(orm_model.level),
            permissions=[p.permission for p in orm_model.permissions],
            created_at=as_utc_required(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: Role, orm_model: RoleORM | None = None) -> RoleORM:
        """Convert domain entity to ORM model. Permissions are replaced as a whole."""
        if orm_model is None:
            orm_model = RoleORM(id=domain_entity.id.value, created_at=domain_entity.created_at)

        orm_model.name = domain_entity.name
        orm_model.level = int(domain_entity.level)
        orm_model.updated_at = domain_entity.updated_at

        wanted = domain_entity.permissions
        orm_model.permissions = [p for p in orm_model.permissions if p.permission in wanted]
        present = {p.permission for p in orm_model.permissions}
        orm_model.permissions.extend(
            RolePermissionORM(permission=p) for p in sorted(wanted - present)
        )
        return orm_model
