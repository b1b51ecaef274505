"""Mapper for Employee ORM ↔ Domain conversion, phones included."""

from company_manager.domain.common.value_objects import (
    DateOfBirth,
    DocumentNumber,
    Email,
    PhoneNumber,
)
from company_manager.domain.common.value_objects.ids import (
    DepartmentId,
    EmployeeId,
    EmployeePhoneId,
    JobTitleId,
)
from company_manager.domain.organization.entities.employee import DEFAULT_PHONE_COUNTRY, Employee
from company_manager.domain.organization.entities.employee_phone import EmployeePhone
from company_manager.infrastructure.common.timestamps import as_utc, as_utc_required
from company_manager.models import Employee as EmployeeORM
from company_manager.models import EmployeePhone as EmployeePhoneORM


class EmployeeMapper:
    """Mapper for Employee ORM ↔ Domain conversion."""

    def _phone_to_domain(self, orm_model: EmployeePhoneORM) -> EmployeePhone:
        return EmployeePhone.create_with_id(
            id=EmployeePhoneId(orm_model.id),
            employee_id=EmployeeId(orm_model.employee_id),
            phone_number=PhoneNumber(orm_model.number, default_country=DEFAULT_PHONE_COUNTRY),
            phone_type=orm_model.type,
            is_primary=orm_model.is_primary,
            created_at=as_utc_required(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
        )

    def to_domain(self, orm_model: EmployeeORM) -> Employee:
        """Convert ORM model to domain entity."""
        return Employee.create_with_id(
            id=EmployeeId(orm_model.id),
            first_name=orm_model.first_name,
            last_name=orm_model.last_name,
            email=Email(orm_model.email),
            document_number=DocumentNumber(orm_model.document_number),
            date_of_birth=DateOfBirth(orm_model.date_of_birth),
            job_title_id=JobTitleId(orm_model.job_title_id),
            department_id=DepartmentId(orm_model.department_id),
            phones=[self._phone_to_domain(p) for p in orm_model.phones],
            created_at=as_utc_required(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: Employee, orm_model: EmployeeORM | None = None) -> EmployeeORM:
        """Convert domain entity to ORM model. Phones not on the entity are dropped."""
        if orm_model is None:
            orm_model = EmployeeORM(id=domain_entity.id.value, created_at=domain_entity.created_at)

        orm_model.first_name = domain_entity.first_name
        orm_model.last_name = domain_entity.last_name
        orm_model.email = domain_entity.email.value
        orm_model.document_number = domain_entity.document_number.digits
        orm_model.date_of_birth = domain_entity.date_of_birth.value
        orm_model.job_title_id = domain_entity.job_title_id.value
        orm_model.department_id = domain_entity.department_id.value
        orm_model.updated_at = domain_entity.updated_at

        existing = {p.id: p for p in orm_model.phones}
        phones: list[EmployeePhoneORM] = []
        for phone in domain_entity.phones:
            phone_orm = existing.get(phone.id.value)
            if phone_orm is None:
                phone_orm = EmployeePhoneORM(id=phone.id.value, created_at=phone.created_at)
            phone_orm.number = phone.phone_number.raw
            phone_orm.e164 = phone.e164
            phone_orm.type = str(phone.type)
            phone_orm.is_primary = phone.is_primary
            phone_orm.updated_at = phone.updated_at
            phones.append(phone_orm)
        orm_model.phones = phones
        return orm_model
