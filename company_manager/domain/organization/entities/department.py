"""Department entity."""

from dataclasses import dataclass, field
from datetime import datetime

from company_manager.domain.common.entity import Entity, utc_now
from company_manager.domain.common.exceptions import ValidationError
from company_manager.domain.common.value_objects.ids import DepartmentId

MIN_NAME_LENGTH = 2


def _clean_description(description: str | None) -> str | None:
    return description.strip() if description is not None else None


@dataclass(eq=False)
class Department(Entity[DepartmentId]):
    """
    Organizational unit employees belong to.

    Business Rules:
    - Name is trimmed and at least MIN_NAME_LENGTH characters
    - Name must be unique (enforced at repository level)
    - Mutators are no-ops when nothing changes, so `updated_at` only moves
      on a real change
    """

    id: DepartmentId
    name: str
    description: str | None = None
    is_active: bool = True
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.name = self._validate_name(self.name)
        self.description = _clean_description(self.description)

    @staticmethod
    def _validate_name(name: str) -> str:
        if not name or len(name.strip()) < MIN_NAME_LENGTH:
            raise ValidationError("Invalid department name", field="name", value=name)
        return name.strip()

    def rename(self, name: str) -> None:
        new_name = self._validate_name(name)
        if new_name == self.name:
            return
        self.name = new_name
        self._touch()

    def update_description(self, description: str | None) -> None:
        new_description = _clean_description(description)
        if new_description == self.description:
            return
        self.description = new_description
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
    def create(cls, name: str, description: str | None = None) -> "Department":
        """
        Create a new, active department.

        Raises:
            ValidationError: If the name is shorter than MIN_NAME_LENGTH
        """
        return cls(id=DepartmentId.generate(), name=name, description=description)

    @classmethod
    def create_with_id(
        cls,
        id: DepartmentId,
        name: str,
        description: str | None,
        is_active: bool,
        created_at: datetime,
        updated_at: datetime | None,
    ) -> "Department":
        """Reconstitute a department from persistence."""
        return cls(
            id=id,
            name=name,
            description=description,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
        )
