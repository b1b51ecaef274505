"""Repository for Department domain entities."""

import logging

from sqlalchemy import ColumnElement, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from company_manager.application.common.filters import DepartmentFilter
from company_manager.application.common.pagination import PageRequest
from company_manager.domain.common.value_objects.ids import DepartmentId
from company_manager.domain.organization.entities.department import Department
from company_manager.domain.organization.exceptions import DepartmentNameAlreadyInUseError
from company_manager.infrastructure.organization.mappers.department_mapper import DepartmentMapper
from company_manager.models import Department as DepartmentORM

logger = logging.getLogger(__name__)


class DepartmentRepository:
    """Repository for Department domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = DepartmentMapper()

    def find_by_id(self, department_id: DepartmentId) -> Department | None:
        orm_model = self.db.get(DepartmentORM, department_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_name(self, name: str) -> Department | None:
        stmt = select(DepartmentORM).where(DepartmentORM.name == name.strip())
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def exists(self, department_id: DepartmentId) -> bool:
        stmt = select(DepartmentORM.id).where(DepartmentORM.id == department_id.value)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def search(
        self, department_filter: DepartmentFilter, page: PageRequest
    ) -> tuple[list[Department], int]:
        """
        Search departments by a name or description substring.

        Returns:
            Tuple of (departments of the page ordered by name, total matching count)
        """
        conditions: list[ColumnElement[bool]] = []
        if department_filter.name_contains is not None:
            term = department_filter.name_contains
            conditions.append(
                or_(
                    DepartmentORM.name.icontains(term, autoescape=True),
                    DepartmentORM.description.icontains(term, autoescape=True),
                )
            )

        count_stmt = select(func.count()).select_from(DepartmentORM).where(*conditions)
        total = self.db.execute(count_stmt).scalar_one()

        stmt = (
            select(DepartmentORM)
            .where(*conditions)
            .order_by(DepartmentORM.name)
            .offset(page.offset)
            .limit(page.limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(m) for m in orm_models], total

    def save(self, department: Department) -> Department:
        """
        Insert or update a department.

        Raises:
            DepartmentNameAlreadyInUseError: If another department has the name
        """
        orm_model = self.db.get(DepartmentORM, department.id.value)
        is_new = orm_model is None
        orm_model = self.mapper.to_orm(department, orm_model)
        if is_new:
            self.db.add(orm_model)

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DepartmentNameAlreadyInUseError(department.name) from e

        self.db.refresh(orm_model)
        logger.info(f"{'Created' if is_new else 'Updated'} department {department.name}")
        return self.mapper.to_domain(orm_model)

    def delete(self, department_id: DepartmentId) -> bool:
        orm_model = self.db.get(DepartmentORM, department_id.value)
        if orm_model is None:
            return False
        self.db.delete(orm_model)
        self.db.commit()
        logger.info(f"Deleted department {department_id}")
        return True
