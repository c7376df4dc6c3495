"""numberlist - Non-negative big integers stored as topology-configurable linked digit lists."""

from numberlist.config import BASES, DEFAULT_CONFIG, OPERATIONS, RECORD_BOOK_NUMBER, NumberConfig
from numberlist.core import NumberList
from numberlist.cursor import DigitCursor
from numberlist.errors import (
    ConfigurationError,
    CursorStateError,
    InvalidDigitError,
    MissingDigitError,
    NoSuchDigitError,
    NumberListError,
    TopologyError,
)
from numberlist.types import Base, Operation, Topology

__version__ = "0.0.1"

__all__ = [
    "NumberList",
    "NumberConfig",
    "DigitCursor",
    "DEFAULT_CONFIG",
    "RECORD_BOOK_NUMBER",
    "BASES",
    "OPERATIONS",
    "NumberListError",
    "ConfigurationError",
    "TopologyError",
    "MissingDigitError",
    "InvalidDigitError",
    "CursorStateError",
    "NoSuchDigitError",
    "Base",
    "Operation",
    "Topology",
]
