"""Base classes for domain layer.

Provides foundational abstractions for value objects, entities and
aggregate roots. Every catalog object is immutable once built, so all
bases are frozen dataclasses.
"""

from abc import ABC
from dataclasses import dataclass


# ============================================================================
# Value Object Base
# ============================================================================


@dataclass(frozen=True)
class ValueObject(ABC):
    """Base class for value objects.

    Value objects are immutable and compared by their attributes,
    not by identity. They have no lifecycle and are interchangeable
    when their values are equal.

    Example:
        @dataclass(frozen=True)
        class Money(ValueObject):
            amount: int
    """

    pass


# ============================================================================
# Entity Base
# ============================================================================


@dataclass(frozen=True, kw_only=True)
class Entity(ABC):
    """Base class for catalog entities.

    Entities carry an identifier assigned by the caller (rows are
    reconstituted from storage, new ids are generated by use cases).
    Instances are immutable and only built through a validating
    ``create`` classmethod.

    Attributes:
        id: Unique identifier for this entity.
    """

    id: str


# ============================================================================
# Aggregate Root Base
# ============================================================================


@dataclass(frozen=True)
class AggregateRoot(ABC):
    """Base class for aggregate roots.

    Aggregate roots are the entry point to a cluster of domain objects.
    They validate consistency across the cluster at construction time
    and are never mutated afterwards.
    """

    pass
