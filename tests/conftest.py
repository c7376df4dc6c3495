"""Shared fixtures: every topology, and a checker for the chain's link invariants."""

from collections.abc import Callable

import pytest

from numberlist import NumberConfig
from numberlist.linkedlist import DigitChain

TOPOLOGIES = {
    "linear-singly": (False, False),
    "circular-singly": (True, False),
    "linear-doubly": (False, True),
    "circular-doubly": (True, True),
}


def check_links(chain: DigitChain) -> None:
    """Assert head/tail/size agree and the closing links match the topology."""
    size = len(chain)
    if size == 0:
        assert chain.head is None
        assert chain.tail is None
        return

    nodes = []
    node = chain.head
    for _ in range(size):
        assert node is not None
        nodes.append(node)
        node = node.next

    assert nodes[-1] is chain.tail
    assert len({id(n) for n in nodes}) == size
    if chain.circular:
        assert chain.tail.next is chain.head
    else:
        assert chain.tail.next is None

    if chain.doubly:
        for before, after in zip(nodes, nodes[1:]):
            assert after.prev is before
        assert chain.head.prev is (chain.tail if chain.circular else None)
    else:
        assert all(n.prev is None for n in nodes)


@pytest.fixture(params=list(TOPOLOGIES.values()), ids=list(TOPOLOGIES))
def config(request: pytest.FixtureRequest) -> NumberConfig:
    """Base 10 primary, base 3 additional, clamped subtraction, one fixture per topology."""
    circular, doubly = request.param
    return NumberConfig(
        primary_base=10,
        additional_base=3,
        operation="sub",
        circular=circular,
        doubly=doubly,
    )


@pytest.fixture
def chain(config: NumberConfig) -> DigitChain:
    return DigitChain(circular=config.circular, doubly=config.doubly)


@pytest.fixture
def links() -> Callable[[DigitChain], None]:
    return check_links
