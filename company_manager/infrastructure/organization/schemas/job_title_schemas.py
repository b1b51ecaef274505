"""Pydantic schemas for JobTitle requests."""

from pydantic import BaseModel, Field, field_validator

from company_manager.domain.access_control.hierarchical_role import SUPER_USER_JOB_TITLE_LEVEL

MIN_NAME_LENGTH = 2


class JobTitleRequest(BaseModel):
    """Schema for creating or updating a JobTitle."""

    name: str = Field(..., max_length=100, description="Job title name")
    hierarchy_level: int = Field(..., description="1 (top) to 5 (entry), or 999 for SuperUser")
    description: str | None = Field(None, max_length=500, description="Free text description")

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if len(value.strip()) < MIN_NAME_LENGTH:
            raise ValueError(f"Job title name must have at least {MIN_NAME_LENGTH} characters.")
        return value.strip()

    @field_validator("hierarchy_level")
    @classmethod
    def validate_hierarchy_level(cls, value: int) -> int:
        if not (1 <= value <= 5 or value == SUPER_USER_JOB_TITLE_LEVEL):  # noqa: PLR2004
            raise ValueError("Hierarchy level must be between 1 and 5, or 999 for SuperUser.")
        return value
