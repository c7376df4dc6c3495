"""Topology-configurable linked chain of digit nodes."""

from collections.abc import Iterator

from numberlist.errors import TopologyError


class Node:
    """A node in the chain holding one digit."""

    __slots__ = ("value", "next", "prev")

    def __init__(self, value: int) -> None:
        self.value = value
        self.next: Node | None = None
        self.prev: Node | None = None


class DigitChain:
    """
    Linked chain whose closure and link direction are fixed at construction.

    Structural methods splice nodes without caring about the ends and then
    call normalize(), which restores the closing links for the topology:
    a circular chain has ``tail.next is head`` (and ``head.prev is tail``
    when doubly linked), a linear chain has ``None`` in those slots.
    ``prev`` is never written on a singly-linked chain.
    """

    def __init__(self, *, circular: bool, doubly: bool) -> None:
        self.circular = circular
        self.doubly = doubly
        self.head: Node | None = None
        self.tail: Node | None = None
        self._size = 0

    def link_first(self, value: int) -> Node:
        """Attach a new node in front of head. O(1)."""
        node = Node(value)
        if self._size == 0:
            self.head = self.tail = node
        else:
            node.next = self.head
            if self.doubly:
                self.head.prev = node  # type: ignore[union-attr]
            self.head = node
        self._size += 1
        self.normalize()
        return node

    def link_last(self, value: int) -> Node:
        """Attach a new node after tail. O(1)."""
        node = Node(value)
        if self._size == 0:
            self.head = self.tail = node
        else:
            self.tail.next = node  # type: ignore[union-attr]
            if self.doubly:
                node.prev = self.tail
            self.tail = node
        self._size += 1
        self.normalize()
        return node

    def link_before(self, successor: Node, value: int) -> Node:
        """Insert a new node in front of successor using its prev link. O(1)."""
        if not self.doubly:
            raise TopologyError("link_before requires a doubly-linked chain")
        node = Node(value)
        pred = successor.prev
        node.next = successor
        node.prev = pred
        successor.prev = node
        if pred is not None:
            pred.next = node
        if successor is self.head:
            # In a circular chain pred is the tail, so head has to move explicitly
            self.head = node
        self._size += 1
        self.normalize()
        return node

    def link_after(self, predecessor: Node, value: int) -> Node:
        """Splice a new node directly after predecessor. O(1)."""
        node = Node(value)
        successor = predecessor.next
        node.next = successor
        predecessor.next = node
        if self.doubly:
            node.prev = predecessor
            if successor is not None:
                successor.prev = node
        if predecessor is self.tail:
            self.tail = node
        self._size += 1
        self.normalize()
        return node

    def unlink(self, node: Node) -> None:
        """
        Remove node from the chain.

        O(1) when doubly linked. A singly-linked chain has to scan from head
        to find the predecessor, which makes removal O(n).
        """
        if self._size == 0:
            return
        if self._size == 1:
            self.clear()
            node.next = node.prev = None
            return

        successor = node.next
        pred = node.prev if self.doubly else self.predecessor_of(node)

        if node is self.head:
            self.head = successor
        if node is self.tail:
            self.tail = pred

        if pred is not None:
            pred.next = successor
        if self.doubly and successor is not None:
            successor.prev = pred

        self._size -= 1
        self.normalize()
        node.next = node.prev = None

    def predecessor_of(self, target: Node) -> Node | None:
        """Return the node before target by walking from head. O(n)."""
        if self._size == 0 or target is self.head:
            return None
        prev = None
        current = self.head
        for _ in range(self._size):
            if current is target:
                return prev
            prev = current
            current = current.next  # type: ignore[union-attr]
        return None

    def normalize(self) -> None:
        """Re-establish the closing links for this chain's topology."""
        if self._size == 0:
            self.head = self.tail = None
            return
        assert self.head is not None and self.tail is not None
        if self.circular:
            self.tail.next = self.head
            if self.doubly:
                self.head.prev = self.tail
        else:
            self.tail.next = None
            if self.doubly:
                self.head.prev = None

    def node_at(self, index: int) -> Node | None:
        """Return the node at index, or None when out of range. O(n)."""
        if index < 0 or index >= self._size:
            return None
        node = self.head
        for _ in range(index):
            node = node.next  # type: ignore[union-attr]
        return node

    def nodes(self) -> Iterator[Node]:
        """Yield each node once, head to tail."""
        node = self.head
        for _ in range(self._size):
            assert node is not None
            following = node.next
            yield node
            node = following

    def values(self) -> Iterator[int]:
        """Yield each digit once, head to tail."""
        for node in self.nodes():
            yield node.value

    def clear(self) -> None:
        """Drop every node."""
        self.head = self.tail = None
        self._size = 0

    def __len__(self) -> int:
        """Return the number of nodes in the chain."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the chain is non-empty."""
        return self._size > 0
