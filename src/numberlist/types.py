"""Type definitions for numberlist."""

from typing import Literal, TypeAlias

# Numeral bases a configuration may select
Base: TypeAlias = Literal[2, 3, 8, 10, 16]

# Binary operation applied by NumberList.additional_operation()
Operation: TypeAlias = Literal["add", "sub", "mul", "div", "mod", "and", "or"]

# Link direction and closure of the underlying chain
Topology: TypeAlias = Literal[
    "linear-singly", "circular-singly", "linear-doubly", "circular-doubly"
]
