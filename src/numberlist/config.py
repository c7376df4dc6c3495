"""Process-wide configuration: numeral bases, binary operation and list topology."""

from dataclasses import dataclass
from typing import get_args

from numberlist.errors import ConfigurationError
from numberlist.types import Base, Operation, Topology

# Catalog indexed by C5 = record book number % 5
BASES: tuple[Base, ...] = get_args(Base)

# Catalog indexed by C7 = record book number % 7
OPERATIONS: tuple[Operation, ...] = get_args(Operation)

# C3 = record book number % 3 -> (circular, doubly)
_LIST_TYPES: tuple[tuple[bool, bool], ...] = (
    (False, True),
    (True, False),
    (True, True),
)

RECORD_BOOK_NUMBER = 3517


@dataclass(frozen=True)
class NumberConfig:
    """
    Immutable set of constants every NumberList is built against.

    The two topology flags are independent: ``circular`` decides how the
    chain closes, ``doubly`` whether nodes carry a ``prev`` link.
    """

    primary_base: Base = 10
    additional_base: Base = 16
    operation: Operation = "add"
    circular: bool = False
    doubly: bool = True

    def __post_init__(self) -> None:
        """Reject bases and operations outside the fixed catalogs."""
        for name in ("primary_base", "additional_base"):
            base = getattr(self, name)
            if base not in BASES:
                raise ConfigurationError(f"{name} must be one of {BASES}, got {base!r}")
        if self.operation not in OPERATIONS:
            raise ConfigurationError(
                f"operation must be one of {OPERATIONS}, got {self.operation!r}"
            )

    @classmethod
    def from_record_book(cls, number: int) -> "NumberConfig":
        """Derive the configuration from a record book number."""
        if number < 0:
            raise ConfigurationError(f"Record book number must be non-negative, got {number}")
        c5 = number % 5
        circular, doubly = _LIST_TYPES[number % 3]
        return cls(
            primary_base=BASES[c5],
            additional_base=BASES[(c5 + 1) % 5],
            operation=OPERATIONS[number % 7],
            circular=circular,
            doubly=doubly,
        )

    @property
    def topology(self) -> Topology:
        """Return the topology name for the two link flags."""
        closure = "circular" if self.circular else "linear"
        links = "doubly" if self.doubly else "singly"
        return f"{closure}-{links}"  # type: ignore[return-value]


DEFAULT_CONFIG = NumberConfig.from_record_book(RECORD_BOOK_NUMBER)
