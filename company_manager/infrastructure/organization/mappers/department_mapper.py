"""Mapper for Department ORM ↔ Domain conversion."""

from company_manager.domain.common.value_objects.ids import DepartmentId
from company_manager.domain.organization.entities.department import Department
from company_manager.infrastructure.common.timestamps import as_utc, as_utc_required
from company_manager.models import Department as DepartmentORM


class DepartmentMapper:
    """Mapper for Department ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: DepartmentORM) -> Department:
        return Department.create_with_id(
            id=DepartmentId(orm_model.id),
            name=orm_model.name,
            description=orm_model.description,
            is_active=orm_model.is_active,
            created_at=as_utc_required(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
        )

    def to_orm(
        self, domain_entity: Department, orm_model: DepartmentORM | None = None
    ) -> DepartmentORM:
        if orm_model is None:
            orm_model = DepartmentORM(
                id=domain_entity.id.value, created_at=domain_entity.created_at
            )
        orm_model.name = domain_entity.name
        orm_model.description = domain_entity.description
        orm_model.is_active = domain_entity.is_active
        orm_model.updated_at = domain_entity.updated_at
        return orm_model
