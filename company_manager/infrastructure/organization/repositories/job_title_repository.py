"""Repository for JobTitle domain entities."""

import logging

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from company_manager.application.common.filters import JobTitleFilter
from company_manager.application.common.pagination import PageRequest
from company_manager.domain.common.value_objects.ids import JobTitleId
from company_manager.domain.organization.entities.job_title import JobTitle
from company_manager.domain.organization.exceptions import JobTitleNameAlreadyInUseError
from company_manager.infrastructure.organization.mappers.job_title_mapper import JobTitleMapper
from company_manager.models import JobTitle as JobTitleORM

logger = logging.getLogger(__name__)


class JobTitleRepository:
    """Repository for JobTitle domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = JobTitleMapper()

    def find_by_id(self, job_title_id: JobTitleId) -> JobTitle | None:
        orm_model = self.db.get(JobTitleORM, job_title_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_name(self, name: str) -> JobTitle | None:
        stmt = select(JobTitleORM).where(JobTitleORM.name == name.strip())
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def search(
        self, job_title_filter: JobTitleFilter, page: PageRequest
    ) -> tuple[list[JobTitle], int]:
        """
        Search job titles.

        Returns:
            Tuple of (job titles of the page ordered by level then name, total matching count)
        """
        conditions: list[ColumnElement[bool]] = []
        if job_title_filter.name_contains is not None:
            conditions.append(
                JobTitleORM.name.icontains(job_title_filter.name_contains, autoescape=True)
            )
        if job_title_filter.hierarchy_level is not None:
            conditions.append(JobTitleORM.hierarchy_level == job_title_filter.hierarchy_level)
        if job_title_filter.is_active is not None:
            conditions.append(JobTitleORM.is_active == job_title_filter.is_active)

        count_stmt = select(func.count()).select_from(JobTitleORM).where(*conditions)
        total = self.db.execute(count_stmt).scalar_one()

        stmt = (
            select(JobTitleORM)
            .where(*conditions)
            .order_by(JobTitleORM.hierarchy_level, JobTitleORM.name)
            .offset(page.offset)
            .limit(page.limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(m) for m in orm_models], total

    def save(self, job_title: JobTitle) -> JobTitle:
        """
        Insert or update a job title.

        Raises:
            JobTitleNameAlreadyInUseError: If another job title has the name
        """
        orm_model = self.db.get(JobTitleORM, job_title.id.value)
        is_new = orm_model is None
        orm_model = self.mapper.to_orm(job_title, orm_model)
        if is_new:
            self.db.add(orm_model)

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise JobTitleNameAlreadyInUseError(job_title.name) from e

        self.db.refresh(orm_model)
        logger.info(f"{'Created' if is_new else 'Updated'} job title {job_title.name}")
        return self.mapper.to_domain(orm_model)

    def delete(self, job_title_id: JobTitleId) -> bool:
        orm_model = self.db.get(JobTitleORM, job_title_id.value)
        if orm_model is None:
            return False
        self.db.delete(orm_model)
        self.db.commit()
        logger.info(f"Deleted job title {job_title_id}")
        return True
