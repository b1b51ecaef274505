"""DTOs for organization use cases."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from company_manager.domain.organization.entities.department import Department
from company_manager.domain.organization.entities.employee import Employee
from company_manager.domain.organization.entities.employee_phone import EmployeePhone
from company_manager.domain.organization.entities.job_title import JobTitle


@dataclass(frozen=True)
class EmployeePhoneDTO:
    id: UUID
    number: str
    type: str
    is_primary: bool

    @classmethod
    def from_entity(cls, phone: EmployeePhone) -> "EmployeePhoneDTO":
        return cls(
            id=phone.id.value,
            number=phone.e164,
            type=str(phone.type),
            is_primary=phone.is_primary,
        )


@dataclass(frozen=True)
class EmployeeDTO:
    """Employee as returned to callers; the CPF is shown masked."""

    id: UUID
    first_name: str
    last_name: str
    full_name: str
    email: str
    document_number: str
    date_of_birth: date
    phones: list[EmployeePhoneDTO]
    job_title_id: UUID
    department_id: UUID
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeDTO":
        return cls(
            id=employee.id.value,
            first_name=employee.first_name,
            last_name=employee.last_name,
            full_name=employee.full_name,
            email=employee.email.value,
            document_number=employee.document_number.formatted,
            date_of_birth=employee.date_of_birth.value,
            phones=[EmployeePhoneDTO.from_entity(p) for p in employee.phones],
            job_title_id=employee.job_title_id.value,
            department_id=employee.department_id.value,
            created_at=employee.created_at,
            updated_at=employee.updated_at,
        )


@dataclass(frozen=True)
class DepartmentDTO:
    id: UUID
    name: str
    description: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, department: Department) -> "DepartmentDTO":
        return cls(
            id=department.id.value,
            name=department.name,
            description=department.description,
            is_active=department.is_active,
            created_at=department.created_at,
            updated_at=department.updated_at,
        )


@dataclass(frozen=True)
class JobTitleDTO:
    id: UUID
    name: str
    hierarchy_level: int
    description: str
    is_active: bool
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, job_title: JobTitle) -> "JobTitleDTO":
        return cls(
            id=job_title.id.value,
            name=job_title.name,
            hierarchy_level=job_title.hierarchy_level,
            description=job_title.description,
            is_active=job_title.is_active,
            created_at=job_title.created_at,
            updated_at=job_title.updated_at,
        )
