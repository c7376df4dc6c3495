"""Bidirectional position cursor over a NumberList."""

from typing import TYPE_CHECKING

from numberlist.errors import CursorStateError, NoSuchDigitError

if TYPE_CHECKING:
    from numberlist.core import NumberList


class DigitCursor:
    """
    Cursor sitting between two digits of a NumberList.

    Positions follow list indices: the cursor at ``i`` lies between the
    digits at ``i - 1`` and ``i``. remove() and set() act on the digit most
    recently returned by next() or previous(). External mutation of the
    list while a cursor is in use is not detected.
    """

    def __init__(self, numbers: "NumberList", index: int = 0) -> None:
        self._numbers = numbers
        self._cursor = max(0, min(index, len(numbers)))
        self._last_returned = -1

    def __iter__(self) -> "DigitCursor":
        return self

    def __next__(self) -> int:
        """Return the digit after the cursor and advance."""
        if not self.has_next():
            raise StopIteration
        self._last_returned = self._cursor
        self._cursor += 1
        return self._numbers.get(self._last_returned)  # type: ignore[return-value]

    def previous(self) -> int:
        """Return the digit before the cursor and step back."""
        if not self.has_previous():
            raise NoSuchDigitError("Cursor is already at the front of the list")
        self._cursor -= 1
        self._last_returned = self._cursor
        return self._numbers.get(self._cursor)  # type: ignore[return-value]

    def has_next(self) -> bool:
        """Return True if next() would return a digit."""
        return self._cursor < len(self._numbers)

    def has_previous(self) -> bool:
        """Return True if previous() would return a digit."""
        return self._cursor > 0

    def next_index(self) -> int:
        """Return the index next() would read."""
        return self._cursor

    def previous_index(self) -> int:
        """Return the index previous() would read, -1 at the front."""
        return self._cursor - 1

    def remove(self) -> None:
        """Remove the digit last returned by next() or previous()."""
        if self._last_returned < 0:
            raise CursorStateError("No digit to remove; call next() or previous() first")
        self._numbers.remove_at(self._last_returned)
        if self._last_returned < self._cursor:
            self._cursor -= 1
        self._last_returned = -1

    def set(self, digit: int) -> None:
        """Replace the digit last returned by next() or previous()."""
        if self._last_returned < 0:
            raise CursorStateError("No digit to replace; call next() or previous() first")
        self._numbers.set(self._last_returned, digit)

    def add(self, digit: int) -> None:
        """Insert a digit at the cursor; a following next() is unaffected."""
        self._numbers.insert(self._cursor, digit)
        self._cursor += 1
        self._last_returned = -1
