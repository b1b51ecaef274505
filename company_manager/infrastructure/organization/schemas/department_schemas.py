"""Pydantic schemas for Department requests."""

from pydantic import BaseModel, Field, field_validator

MIN_NAME_LENGTH = 2


class DepartmentRequest(BaseModel):
    """Schema for creating or updating a Department."""

    name: str = Field(..., max_length=100, description="Department name")
    description: str | None = Field(None, max_length=500, description="Free text description")

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if len(value.strip()) < MIN_NAME_LENGTH:
            raise ValueError(f"Department name must have at least {MIN_NAME_LENGTH} characters.")
        return value.strip()
