"""Main NumberList implementation."""

import logging
import os
from collections.abc import Iterable, Iterator

from numberlist.config import BASES, DEFAULT_CONFIG, NumberConfig
from numberlist.conversion import (
    digits_from_value,
    format_digits,
    is_digit_value,
    parse_decimal,
    value_from_digits,
    value_from_foreign_digits,
)
from numberlist.cursor import DigitCursor
from numberlist.errors import ConfigurationError, InvalidDigitError, MissingDigitError
from numberlist.linkedlist import DigitChain
from numberlist.operations import (
    apply_operation,
    counting_sort,
    rotate_left,
    rotate_right,
    swap_values,
)
from numberlist.storage import read_decimal, write_decimal
from numberlist.types import Topology

logger = logging.getLogger(__name__)


class NumberList:
    """
    Non-negative integer stored as a linked list of digits.

    The most-significant digit sits at the head. Digits are expressed in
    ``base``, which is the configuration's primary base unless the list was
    produced by change_scale(). ``value`` is recomputed after every mutation,
    so it always matches the digits once a public call returns.

    Index-based operations are O(n). Out-of-range indices are reported with
    None, False or -1 rather than an exception; a digit outside
    ``[0, base)`` is always rejected with an exception.
    """

    def __init__(self, text: str | None = None, *, config: NumberConfig | None = None) -> None:
        """
        Initialize the list.

        Args:
            text: Non-negative decimal number, surrounding whitespace allowed.
                Invalid input (including negative numbers) leaves the list
                empty instead of raising.
            config: Bases, operation and topology to use. Defaults to the
                process-wide DEFAULT_CONFIG.
        """
        self._config = config if config is not None else DEFAULT_CONFIG
        self._base = self._config.primary_base
        self._chain = DigitChain(circular=self._config.circular, doubly=self._config.doubly)
        self._value = 0
        if text is not None:
            self._load_decimal(text)

    @classmethod
    def from_int(
        cls,
        value: int,
        *,
        base: int | None = None,
        config: NumberConfig | None = None,
    ) -> "NumberList":
        """
        Build a list holding value, expressed in base.

        Negative values are clamped to zero. base defaults to the
        configuration's primary base.
        """
        numbers = cls(config=config)
        if base is not None:
            if base not in BASES:
                raise ConfigurationError(f"base must be one of {BASES}, got {base!r}")
            numbers._base = base
        numbers._value = max(value, 0)
        numbers._rebuild_digits()
        return numbers

    @classmethod
    def from_file(
        cls, path: str | os.PathLike[str] | None, *, config: NumberConfig | None = None
    ) -> "NumberList":
        """Build a list from a file holding a decimal number; empty if unreadable or invalid."""
        return cls(read_decimal(path), config=config)

    def save(self, path: str | os.PathLike[str] | None) -> None:
        """Write the number in decimal notation, creating parent directories."""
        write_decimal(path, self.to_decimal_string())

    @property
    def config(self) -> NumberConfig:
        """Configuration this list was built against."""
        return self._config

    @property
    def base(self) -> int:
        """Numeral base the digits are expressed in."""
        return self._base

    @property
    def value(self) -> int:
        """Integer the digits currently encode."""
        return self._value

    @property
    def topology(self) -> Topology:
        """Topology name of the underlying chain."""
        return self._config.topology

    # Collection contract

    def __len__(self) -> int:
        """Return the number of digits."""
        return len(self._chain)

    def is_empty(self) -> bool:
        """Return True if the list holds no digits."""
        return len(self._chain) == 0

    def __contains__(self, digit: object) -> bool:
        """Return True if digit occurs in the list. Non-integers never do."""
        if not is_digit_value(digit):
            return False
        return any(value == digit for value in self._chain.values())

    def contains_all(self, digits: Iterable[object] | None) -> bool:
        """Return True if every digit occurs in the list. None counts as empty."""
        if digits is None:
            return True
        return all(digit in self for digit in digits)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the digits, most significant first."""
        return self._chain.values()

    def cursor(self, index: int = 0) -> DigitCursor:
        """Return a bidirectional cursor positioned before the digit at index."""
        return DigitCursor(self, index)

    def to_list(self) -> list[int]:
        """Return the digits as a plain list."""
        return list(self._chain.values())

    def get(self, index: int) -> int | None:
        """Return the digit at index, or None when out of range."""
        node = self._chain.node_at(index)
        return None if node is None else node.value

    def set(self, index: int, digit: int) -> int | None:
        """
        Replace the digit at index.

        Returns:
            The previous digit, or None when index is out of range

        Raises:
            MissingDigitError: If digit is None or not an integer
            InvalidDigitError: If digit is outside [0, base)
        """
        self._check_digit(digit)
        node = self._chain.node_at(index)
        if node is None:
            return None
        old = node.value
        node.value = digit
        self._recalculate()
        return old

    def append(self, digit: int) -> bool:
        """Append a digit as the new least-significant position."""
        self._check_digit(digit)
        self._chain.link_last(digit)
        self._recalculate()
        return True

    def insert(self, index: int, digit: int) -> None:
        """
        Insert a digit before the one currently at index.

        An index at or below zero inserts at the front, an index at or past
        the end appends. On a singly-linked chain the predecessor has to be
        found by scanning from the head.
        """
        self._check_digit(digit)
        self._insert_unchecked(index, digit)
        self._recalculate()

    def extend(self, digits: Iterable[int] | None) -> bool:
        """Append every digit. Returns True if anything was added."""
        return self.insert_all(len(self._chain), digits)

    def insert_all(self, index: int, digits: Iterable[int] | None) -> bool:
        """Insert every digit in order starting at index. Returns True if anything was added."""
        if digits is None:
            return False
        pending = list(digits)
        if not pending:
            return False
        for digit in pending:
            self._check_digit(digit)
        index = max(0, min(index, len(self._chain)))
        for offset, digit in enumerate(pending):
            self._insert_unchecked(index + offset, digit)
        self._recalculate()
        return True

    def remove(self, digit: object) -> bool:
        """Remove the first occurrence of digit. Returns False if it does not occur."""
        if not is_digit_value(digit):
            return False
        for node in self._chain.nodes():
            if node.value == digit:
                self._chain.unlink(node)
                self._recalculate()
                return True
        return False

    def remove_at(self, index: int) -> int | None:
        """Remove and return the digit at index, or None when out of range."""
        node = self._chain.node_at(index)
        if node is None:
            return None
        old = node.value
        self._chain.unlink(node)
        self._recalculate()
        return old

    def remove_all(self, digits: Iterable[object] | None) -> bool:
        """Remove every occurrence of each given digit."""
        if digits is None:
            return False
        changed = False
        for digit in list(digits):
            while self.remove(digit):
                changed = True
        return changed

    def retain_all(self, digits: Iterable[object] | None) -> bool:
        """Keep only digits that occur in digits. None clears the list."""
        if digits is None:
            if self.is_empty():
                return False
            self.clear()
            return True
        keep = [digit for digit in digits if is_digit_value(digit)]
        changed = False
        for node in self._chain.nodes():
            if node.value not in keep:
                self._chain.unlink(node)
                changed = True
        if changed:
            self._recalculate()
        return changed

    def clear(self) -> None:
        """Drop every digit; the value becomes 0."""
        self._chain.clear()
        self._value = 0

    def index_of(self, digit: object) -> int:
        """Return the index of the first occurrence of digit, or -1."""
        if is_digit_value(digit):
            for index, value in enumerate(self._chain.values()):
                if value == digit:
                    return index
        return -1

    def last_index_of(self, digit: object) -> int:
        """Return the index of the last occurrence of digit, or -1."""
        last = -1
        if is_digit_value(digit):
            for index, value in enumerate(self._chain.values()):
                if value == digit:
                    last = index
        return last

    def sublist(self, start: int, stop: int) -> "NumberList":
        """
        Return an independent copy of the digits in [start, stop).

        Bounds are clamped to the list. The copy keeps this list's base and
        configuration.
        """
        start = max(start, 0)
        stop = max(min(stop, len(self._chain)), start)
        sub = NumberList(config=self._config)
        sub._base = self._base
        node = self._chain.node_at(start)
        for _ in range(stop - start):
            sub._chain.link_last(node.value)  # type: ignore[union-attr]
            node = node.next  # type: ignore[union-attr]
        sub._recalculate()
        return sub

    # Structural operations

    def change_scale(self) -> "NumberList":
        """Return a new list with the same value expressed in the additional base."""
        return NumberList.from_int(
            self._value, base=self._config.additional_base, config=self._config
        )

    def additional_operation(self, other: "NumberList | Iterable[int] | None") -> "NumberList":
        """
        Apply the configured binary operation to this value and other.

        other may be another NumberList, None (treated as 0) or any iterable
        of digits in the primary base; an iterable with a digit that does not
        fit the primary base counts as 0. Neither operand is modified.

        Returns:
            A new list in the primary base
        """
        if isinstance(other, NumberList):
            operand = other.value
        elif other is None:
            operand = 0
        else:
            operand = value_from_foreign_digits(other, self._config.primary_base)
        result = apply_operation(self._config.operation, self._value, operand)
        return NumberList.from_int(result, config=self._config)

    def sort_ascending(self) -> None:
        """Sort digits smallest first with a counting sort over node payloads."""
        counting_sort(self._chain, self._base)
        self._recalculate()

    def sort_descending(self) -> None:
        """Sort digits largest first with a counting sort over node payloads."""
        counting_sort(self._chain, self._base, descending=True)
        self._recalculate()

    def shift_left(self) -> None:
        """Rotate digits one place left; the leading digit moves to the end."""
        rotate_left(self._chain)
        self._recalculate()

    def shift_right(self) -> None:
        """Rotate digits one place right; the trailing digit moves to the front."""
        rotate_right(self._chain)
        self._recalculate()

    def swap(self, index1: int, index2: int) -> bool:
        """Exchange the digits at two indices. Returns False if either is out of range."""
        if not swap_values(self._chain, index1, index2):
            return False
        self._recalculate()
        return True

    # Value contract

    def to_decimal_string(self) -> str:
        """Return the value in decimal notation."""
        return format_digits(digits_from_value(self._value, 10))

    def __str__(self) -> str:
        """Return the digits in this list's own base, most significant first."""
        return format_digits(self._chain.values())

    def __repr__(self) -> str:
        """Return a debugging representation with digits, base and topology."""
        return (
            f"NumberList(digits={str(self)!r}, base={self._base}, "
            f"value={self.to_decimal_string()}, topology={self.topology!r})"
        )

    def __eq__(self, other: object) -> bool:
        """Lists are equal when they encode the same value, whatever their base or topology."""
        if not isinstance(other, NumberList):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        """Hash consistent with value equality."""
        return hash(self._value)

    # Internals

    def _check_digit(self, digit: object) -> None:
        if not is_digit_value(digit):
            raise MissingDigitError(f"Digit must be an integer, got {digit!r}")
        if not 0 <= digit < self._base:
            raise InvalidDigitError(f"Digit out of range for base {self._base}: {digit}")

    def _insert_unchecked(self, index: int, digit: int) -> None:
        size = len(self._chain)
        if index <= 0:
            self._chain.link_first(digit)
        elif index >= size:
            self._chain.link_last(digit)
        elif self._chain.doubly:
            self._chain.link_before(self._chain.node_at(index), digit)  # type: ignore[arg-type]
        else:
            # Singly linked: locate the predecessor with a second scan
            self._chain.link_after(self._chain.node_at(index - 1), digit)  # type: ignore[arg-type]

    def _load_decimal(self, text: str) -> None:
        parsed = parse_decimal(text)
        if parsed is None:
            logger.debug("Rejected decimal input %r, list left empty", text)
            self.clear()
            return
        self._value = parsed
        self._rebuild_digits()

    def _rebuild_digits(self) -> None:
        self._chain.clear()
        for digit in digits_from_value(self._value, self._base):
            self._chain.link_last(digit)

    def _recalculate(self) -> None:
        self._value = value_from_digits(self._chain.values(), self._base)
