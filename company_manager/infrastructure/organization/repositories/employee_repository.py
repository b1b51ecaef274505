"""Repository for Employee domain entities."""

import logging

from sqlalchemy import ColumnElement, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from company_manager.application.common.filters import EmployeeFilter
from company_manager.application.common.pagination import PageRequest
from company_manager.domain.common.value_objects import DocumentNumber, Email
from company_manager.domain.common.value_objects.ids import EmployeeId
from company_manager.domain.organization.entities.employee import Employee
from company_manager.domain.organization.exceptions import (
    DocumentAlreadyInUseError,
    EmailAlreadyInUseError,
)
from company_manager.infrastructure.organization.mappers.employee_mapper import EmployeeMapper
from company_manager.models import Employee as EmployeeORM

logger = logging.getLogger(__name__)


class EmployeeRepository:
    """Repository for Employee domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = EmployeeMapper()

    def find_by_id(self, employee_id: EmployeeId) -> Employee | None:
        orm_model = self.db.get(EmployeeORM, employee_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_email(self, email: Email) -> Employee | None:
        stmt = select(EmployeeORM).where(EmployeeORM.email == email.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_document(self, document_number: DocumentNumber) -> Employee | None:
        stmt = select(EmployeeORM).where(EmployeeORM.document_number == document_number.digits)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def search(
        self, employee_filter: EmployeeFilter, page: PageRequest
    ) -> tuple[list[Employee], int]:
        """
        Search employees with filters and pagination.

        Args:
            employee_filter: Exact id filters and a name/e-mail substring
            page: Offset and limit

        Returns:
            Tuple of (employees of the page ordered by name, total matching count)
        """
        conditions: list[ColumnElement[bool]] = []
        if employee_filter.department_id is not None:
            conditions.append(EmployeeORM.department_id == employee_filter.department_id)
        if employee_filter.job_title_id is not None:
            conditions.append(EmployeeORM.job_title_id == employee_filter.job_title_id)
        if employee_filter.name_or_email is not None:
            term = employee_filter.name_or_email
            conditions.append(
                or_(
                    EmployeeORM.first_name.icontains(term, autoescape=True),
                    EmployeeORM.last_name.icontains(term, autoescape=True),
                    EmployeeORM.email.icontains(term, autoescape=True),
                )
            )

        count_stmt = select(func.count()).select_from(EmployeeORM).where(*conditions)
        total = self.db.execute(count_stmt).scalar_one()

        stmt = (
            select(EmployeeORM)
            .options(selectinload(EmployeeORM.phones))
            .where(*conditions)
            .order_by(EmployeeORM.first_name, EmployeeORM.last_name, EmployeeORM.id)
            .offset(page.offset)
            .limit(page.limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(m) for m in orm_models], total

    def save(self, employee: Employee) -> Employee:
        """
        Insert or update an employee and its phones.

        Raises:
            EmailAlreadyInUseError: If another employee has the e-mail
            DocumentAlreadyInUseError: If another employee has the CPF
        """
        orm_model = self.db.get(EmployeeORM, employee.id.value)
        is_new = orm_model is None
        orm_model = self.mapper.to_orm(employee, orm_model)
        if is_new:
            self.db.add(orm_model)

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            message = str(e.orig)
            if "email" in message:
                raise EmailAlreadyInUseError(employee.email.value) from e
            if "document_number" in message:
                raise DocumentAlreadyInUseError(employee.document_number.formatted) from e
            raise

        self.db.refresh(orm_model)
        logger.info(f"{'Created' if is_new else 'Updated'} employee {employee.id}")
        return self.mapper.to_domain(orm_model)

    def delete(self, employee_id: EmployeeId) -> bool:
        """Delete an employee and its phones. Returns False when it did not exist."""
        orm_model = self.db.get(EmployeeORM, employee_id.value)
        if orm_model is None:
            return False
        self.db.delete(orm_model)
        self.db.commit()
        logger.info(f"Deleted employee {employee_id}")
        return True
