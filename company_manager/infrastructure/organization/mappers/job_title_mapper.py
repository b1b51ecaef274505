"""Mapper for JobTitle ORM ↔ Domain conversion."""

from company_manager.domain.common.value_objects.ids import JobTitleId
from company_manager.domain.organization.entities.job_title import JobTitle
from company_manager.infrastructure.common.timestamps import as_utc, as_utc_required
from company_manager.models import JobTitle as JobTitleORM


class JobTitleMapper:
    """Mapper for JobTitle ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: JobTitleORM) -> JobTitle:
        return JobTitle.create_with_id(
            id=JobTitleId(orm_model.id),
            name=orm_model.name,
            hierarchy_level=orm_model.hierarchy_level,
            description=orm_model.description,
            is_active=orm_model.is_active,
            created_at=as_utc_required(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: JobTitle, orm_model: JobTitleORM | None = None) -> JobTitleORM:
        if orm_model is None:
            orm_model = JobTitleORM(id=domain_entity.id.value, created_at=domain_entity.created_at)
        orm_model.name = domain_entity.name
        orm_model.hierarchy_level = domain_entity.hierarchy_level
        orm_model.description = domain_entity.description
        orm_model.is_active = domain_entity.is_active
        orm_model.updated_at = domain_entity.updated_at
        return orm_model
