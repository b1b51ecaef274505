"""Pydantic schemas for Employee requests."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from company_manager.domain.common.exceptions import DomainError
from company_manager.domain.common.value_objects import DateOfBirth
from company_manager.infrastructure.common.schemas import (
    check_document_number,
    check_email,
    check_password_strength,
    check_phone,
)

MIN_NAME_LENGTH = 2
MIN_EMPLOYEE_AGE = 18


class EmployeeBase(BaseModel):
    """Fields shared by create and update requests."""

    first_name: str = Field(..., description="Given name")
    last_name: str = Field(..., description="Family name")
    email: str = Field(..., description="Work e-mail, also the login")
    document_number: str = Field(..., description="CPF, plain or masked")
    phones: list[str] = Field(..., description="Phone numbers; the first one is primary")
    date_of_birth: str = Field(..., description="Birth date as yyyy-mm-dd")
    job_title_id: UUID
    department_id: UUID

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if len(value.strip()) < MIN_NAME_LENGTH:
            raise ValueError(f"Name must have at least {MIN_NAME_LENGTH} characters.")
        return value.strip()

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return check_email(value)

    @field_validator("document_number")
    @classmethod
    def validate_document_number(cls, value: str) -> str:
        return check_document_number(value)

    @field_validator("phones")
    @classmethod
    def validate_phones(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("At least one phone is required.")
        return [check_phone(phone) for phone in value]

    @field_validator("date_of_birth")
    @classmethod
    def validate_date_of_birth(cls, value: str) -> str:
        try:
            date_of_birth = DateOfBirth.parse(value)
        except ValueError as err:
            raise ValueError("Date of birth must be in the format yyyy-mm-dd.") from err
        except DomainError as err:
            raise ValueError(err.message) from err
        if date_of_birth.age_in_years(date.today()) < MIN_EMPLOYEE_AGE:
            raise ValueError(f"Employee must be at least {MIN_EMPLOYEE_AGE} years old.")
        return str(date_of_birth)

    @field_validator("job_title_id")
    @classmethod
    def validate_job_title_id(cls, value: UUID) -> UUID:
        if value.int == 0:
            raise ValueError("Job title ID is required.")
        return value

    @field_validator("department_id")
    @classmethod
    def validate_department_id(cls, value: UUID) -> UUID:
        if value.int == 0:
            raise ValueError("Department ID is required.")
        return value


class EmployeeCreateRequest(EmployeeBase):
    """Schema for creating an Employee together with its login account."""

    password: str = Field(..., description="Initial password of the account")

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return check_password_strength(value)


class EmployeeUpdateRequest(EmployeeBase):
    """Schema for updating an Employee."""
