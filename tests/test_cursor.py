"""Tests for the bidirectional digit cursor."""

import pytest

from numberlist import (
    CursorStateError,
    DigitCursor,
    NoSuchDigitError,
    NumberConfig,
    NumberList,
)


def test_forward_iteration(config: NumberConfig) -> None:
    """Test the cursor is a plain iterator."""
    numbers = NumberList("4096", config=config)
    assert list(numbers.cursor()) == [4, 0, 9, 6]


def test_backward_traversal(config: NumberConfig) -> None:
    """Test walking from the end with previous()."""
    numbers = NumberList("4096", config=config)
    cursor = numbers.cursor(len(numbers))

    seen = []
    while cursor.has_previous():
        seen.append(cursor.previous())
    assert seen == [6, 9, 0, 4]


def test_indices(config: NumberConfig) -> None:
    """Test next_index and previous_index track the position."""
    cursor = NumberList("123", config=config).cursor(1)
    assert cursor.next_index() == 1
    assert cursor.previous_index() == 0

    assert next(cursor) == 2
    assert cursor.next_index() == 2
    assert cursor.previous() == 2
    assert cursor.next_index() == 1


def test_start_is_clamped(config: NumberConfig) -> None:
    """Test out-of-range start positions are clamped."""
    numbers = NumberList("123", config=config)
    assert numbers.cursor(-5).next_index() == 0
    assert numbers.cursor(99).next_index() == 3


def test_exhaustion(config: NumberConfig) -> None:
    """Test moving past either end."""
    cursor = NumberList("7", config=config).cursor()
    assert next(cursor) == 7
    assert not cursor.has_next()
    with pytest.raises(StopIteration):
        next(cursor)

    cursor = NumberList("7", config=config).cursor()
    with pytest.raises(NoSuchDigitError):
        cursor.previous()


def test_remove_after_next(config: NumberConfig) -> None:
    """Test removing the digit returned by next()."""
    numbers = NumberList("1234", config=config)
    cursor = numbers.cursor()

    next(cursor)
    assert next(cursor) == 2
    cursor.remove()
    assert numbers.to_list() == [1, 3, 4]
    assert numbers.value == 134
    assert cursor.next_index() == 1
    assert next(cursor) == 3


def test_remove_after_previous(config: NumberConfig) -> None:
    """Test removing the digit returned by previous()."""
    numbers = NumberList("1234", config=config)
    cursor = numbers.cursor(3)

    assert cursor.previous() == 3
    cursor.remove()
    assert numbers.to_list() == [1, 2, 4]
    assert cursor.next_index() == 2
    assert next(cursor) == 4


def test_remove_every_digit(config: NumberConfig) -> None:
    """Test draining a list through its cursor."""
    numbers = NumberList("5555", config=config)
    cursor = numbers.cursor()
    for _ in cursor:
        cursor.remove()
    assert numbers.is_empty()
    assert numbers.value == 0


def test_remove_requires_last_returned(config: NumberConfig) -> None:
    """Test remove() without a preceding move, and twice in a row."""
    numbers = NumberList("12", config=config)
    cursor = numbers.cursor()

    with pytest.raises(CursorStateError):
        cursor.remove()

    next(cursor)
    cursor.remove()
    with pytest.raises(CursorStateError):
        cursor.remove()
    assert numbers.to_list() == [2]


def test_set(config: NumberConfig) -> None:
    """Test replacing the last returned digit."""
    numbers = NumberList("123", config=config)
    cursor = numbers.cursor()

    with pytest.raises(CursorStateError):
        cursor.set(9)

    next(cursor)
    next(cursor)
    cursor.set(9)
    assert numbers.to_list() == [1, 9, 3]
    assert numbers.value == 193


def test_add(config: NumberConfig) -> None:
    """Test inserting at the cursor position."""
    numbers = NumberList("1234", config=config)
    cursor = numbers.cursor(1)

    cursor.add(9)
    assert numbers.to_list() == [1, 9, 2, 3, 4]
    assert cursor.next_index() == 2
    assert next(cursor) == 2

    cursor.add(8)
    with pytest.raises(CursorStateError):
        cursor.remove()
    assert numbers.to_list() == [1, 9, 2, 8, 3, 4]
    assert numbers.value == 192834


@pytest.mark.parametrize("owner", [NumberList, DigitCursor])
def test_public_api_is_documented(owner: type) -> None:
    """Test every public method and property carries a docstring."""
    for name, member in vars(owner).items():
        if name.startswith("_") or not (callable(member) or isinstance(member, property)):
            continue
        assert (member.__doc__ or "").strip(), f"{owner.__name__}.{name} has no docstring"
