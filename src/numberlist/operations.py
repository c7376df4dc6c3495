"""Structural operations over a digit chain and the configurable binary operation."""

from numberlist.linkedlist import DigitChain
from numberlist.types import Operation


def apply_operation(operation: Operation, a: int, b: int) -> int:
    """
    Apply the configured binary operation to two non-negative values.

    Negative operands are clamped to zero, subtraction never goes below zero,
    and division or modulo by zero yields zero.
    """
    a = max(a, 0)
    b = max(b, 0)
    if operation == "add":
        return a + b
    elif operation == "sub":
        return max(a - b, 0)
    elif operation == "mul":
        return a * b
    elif operation == "div":
        return a // b if b else 0
    elif operation == "mod":
        return a % b if b else 0
    elif operation == "and":
        return a & b
    elif operation == "or":
        return a | b
    return 0


def counting_sort(chain: DigitChain, base: int, *, descending: bool = False) -> None:
    """
    Sort digit payloads in place in O(n + base).

    Nodes keep their positions and links; only their values are rewritten.
    """
    if len(chain) < 2:
        return
    counts = [0] * base
    for digit in chain.values():
        counts[digit] += 1

    order = range(base - 1, -1, -1) if descending else range(base)
    nodes = chain.nodes()
    for digit in order:
        for _ in range(counts[digit]):
            next(nodes).value = digit


def rotate_left(chain: DigitChain) -> None:
    """Move the leading digit to the end, shifting the rest one place left."""
    if len(chain) < 2:
        return
    first = chain.head.value  # type: ignore[union-attr]
    node = chain.head
    for _ in range(len(chain) - 1):
        node.value = node.next.value  # type: ignore[union-attr]
        node = node.next  # type: ignore[union-attr]
    chain.tail.value = first  # type: ignore[union-attr]


def rotate_right(chain: DigitChain) -> None:
    """Move the trailing digit to the front, shifting the rest one place right."""
    if len(chain) < 2:
        return
    carried = chain.tail.value  # type: ignore[union-attr]
    for node in chain.nodes():
        node.value, carried = carried, node.value


def swap_values(chain: DigitChain, index1: int, index2: int) -> bool:
    """Exchange the digits at two indices. Returns False if either is out of range."""
    size = len(chain)
    if index1 < 0 or index2 < 0 or index1 >= size or index2 >= size:
        return False
    if index1 == index2:
        return True
    a = chain.node_at(index1)
    b = chain.node_at(index2)
    a.value, b.value = b.value, a.value  # type: ignore[union-attr]
    return True
