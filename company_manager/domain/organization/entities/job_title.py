"""JobTitle entity."""

from dataclasses import dataclass, field
from datetime import datetime

from company_manager.domain.access_control.hierarchical_role import SUPER_USER_JOB_TITLE_LEVEL
from company_manager.domain.common.entity import Entity, utc_now
from company_manager.domain.common.exceptions import ValidationError
from company_manager.domain.common.value_objects.ids import JobTitleId

MIN_NAME_LENGTH = 2
TOP_LEVEL = 1
LOWEST_LEVEL = 5
MANAGEMENT_LEVEL = 3


def _validate_name(name: str) -> str:
    if not name or not name.strip():
        raise ValidationError("Job title name cannot be empty.", field="name", value=name)
    cleaned = name.strip()
    if len(cleaned) < MIN_NAME_LENGTH:
        raise ValidationError(
            "Job title name must have at least 2 characters.", field="name", value=name
        )
    return cleaned


def _validate_level(level: int) -> int:
    if not (TOP_LEVEL <= level <= LOWEST_LEVEL or level == SUPER_USER_JOB_TITLE_LEVEL):
        raise ValidationError(
            "Hierarchy level must be between 1 and 5, or 999 for SuperUser.",
            field="hierarchy_level",
            value=level,
        )
    return level


@dataclass(eq=False)
class JobTitle(Entity[JobTitleId]):
    """
    A position in the company ladder.

    Business Rules:
    - Name is trimmed, at least MIN_NAME_LENGTH characters, unique (repository level)
    - Hierarchy level runs from 1 (top) to 5 (entry), plus 999 for SuperUser
    - A lower level number outranks a higher one
    - Description is trimmed and never None
    """

    id: JobTitleId
    name: str
    hierarchy_level: int
    description: str = ""
    is_active: bool = True
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.name = _validate_name(self.name)
        self.hierarchy_level = _validate_level(self.hierarchy_level)
        self.description = (self.description or "").strip()

    @property
    def is_top_level(self) -> bool:
        return self.hierarchy_level == TOP_LEVEL

    @property
    def is_management(self) -> bool:
        return self.hierarchy_level <= MANAGEMENT_LEVEL

    def can_manage(self, other: "JobTitle") -> bool:
        """True when this title ranks strictly above `other`."""
        return self.hierarchy_level < other.hierarchy_level

    def update(self, name: str, hierarchy_level: int, description: str | None) -> None:
        """
        Replace name, level and description.

        Raises:
            ValidationError: If the name or level is invalid
        """
        self.name = _validate_name(name)
        self.hierarchy_level = _validate_level(hierarchy_level)
        self.description = (description or "").strip()
        self._touch()

    def activate(self) -> None:
        if self.is_active:
            return
        self.is_active = True
        self._touch()

    def deactivate(self) -> None:
        if not self.is_active:
            return
        self.is_active = False
        self._touch()

    @classmethod
    def create(cls, name: str, hierarchy_level: int, description: str | None = None) -> "JobTitle":
        """
        Create a new, active job title.

        Raises:
            ValidationError: If the name or level is invalid
        """
        return cls(
            id=JobTitleId.generate(),
            name=name,
            hierarchy_level=hierarchy_level,
            description=description or "",
        )

    @classmethod
    def create_with_id(
        cls,
        id: JobTitleId,
        name: str,
        hierarchy_level: int,
        description: str,
        is_active: bool,
        created_at: datetime,
        updated_at: datetime | None,
    ) -> "JobTitle":
        """Reconstitute a job title from persistence."""
        return cls(
            id=id,
            name=name,
            hierarchy_level=hierarchy_level,
            description=description,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
        )
