"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Every entity carries `created_at` (set once, in UTC) and `updated_at`
(None until the first real mutation). Mutating methods call `_touch()`.

Example:
    @dataclass(eq=False)
    class Department(Entity[DepartmentId]):
        id: DepartmentId
        name: str
        created_at: datetime = field(default_factory=utc_now)
        updated_at: datetime | None = None

        def rename(self, name: str) -> None:
            self.name = name
            self._touch()
"""

from abc import ABC
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4

from .value_object import ValueObject


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


@dataclass(frozen=True, eq=False)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that wrap a UUID. They provide type
    safety to prevent mixing up IDs of different entities.

    Example:
        @dataclass(frozen=True, eq=False)
        class DepartmentId(EntityId):
            pass

        department_id = DepartmentId.generate()
    """

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise TypeError(f"{self.__class__.__name__} must wrap a UUID")

    def __str__(self) -> str:
        return str(self.value)

    @property
    def is_empty(self) -> bool:
        """True for the nil UUID, which never identifies a stored entity."""
        return self.value.int == 0

    @classmethod
    def generate(cls) -> Self:
        """Create a fresh random identifier."""
        return cls(uuid4())

    @classmethod
    def from_string(cls, raw: str) -> Self:
        """Parse an identifier from its canonical string form."""
        return cls(UUID(raw))

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Have lifecycle (created, modified, deleted)

    Subclasses must have `id`, `created_at` and `updated_at` attributes and
    be declared with `@dataclass(eq=False)` so identity equality is kept.
    """

    id: IdType
    created_at: datetime
    updated_at: datetime | None

    def _touch(self) -> None:
        """Stamp the modification time."""
        self.updated_at = utc_now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
