"""Snailfish numbers: parsing, reduction, addition and magnitude."""

from __future__ import annotations

from typing import Optional, Sequence

_MISSING_VALUE = 2**31 - 1


class SnailNode:
    """A node of a snailfish number; leaves are linked in reading order."""

    def __init__(self, value: int = 0, level: int = 0) -> None:
        self.value = value
        self.level = level
        self.prev: Optional[SnailNode] = None
        self.next: Optional[SnailNode] = None
        self.left: Optional[SnailNode] = None
        self.right: Optional[SnailNode] = None

    def is_pair(self) -> bool:
        """Return True if this node has children."""
        return self.left is not None

    def magnitude(self) -> int:
        """Return the magnitude of the number rooted here."""
        if self.left is None or self.right is None:
            return self.value
        return 3 * self.left.magnitude() + 2 * self.right.magnitude()

    def reduce(self) -> bool:
        """Perform one reduction step; return False when nothing changed."""
        return _explode_one(self) or _split_one(self)

    def equals(self, other: Optional[SnailNode]) -> bool:
        """Compare structure, values, levels and leaf neighbours."""
        return _nodes_equal(self, other)

    def __str__(self) -> str:
        if not self.is_pair():
            return str(self.value)
        return f"[{self.left},{self.right}]"

    def __repr__(self) -> str:
        return f"SnailNode({self})"


def _value_of(node: Optional[SnailNode]) -> int:
    return _MISSING_VALUE if node is None else node.value


def _level_of(node: Optional[SnailNode]) -> int:
    return -1 if node is None else node.level


def _nodes_equal(a: Optional[SnailNode], b: Optional[SnailNode]) -> bool:
    if a is None or b is None:
        return a is None and b is None
    if a.level != b.level or a.value != b.value:
        return False
    if not _nodes_equal(a.left, b.left) or not _nodes_equal(a.right, b.right):
        return False
    return (
        _value_of(a.prev) == _value_of(b.prev)
        and _value_of(a.next) == _value_of(b.next)
        and _level_of(a.prev) == _level_of(b.prev)
        and _level_of(a.next) == _level_of(b.next)
    )


def _explode_one(node: Optional[SnailNode]) -> bool:
    if node is None:
        return False
    if _explode_one(node.left):
        return True
    if not node.is_pair() or node.level != 4:
        return _explode_one(node.right)
    left, right = node.left, node.right
    prev, nxt = left.prev, right.next
    if prev is not None:
        prev.value += left.value
        prev.next = node
    node.prev = prev
    if nxt is not None:
        nxt.value += right.value
        node.next = nxt
        nxt.prev = node
    node.left = None
    node.right = None
    return True


def _split_one(node: Optional[SnailNode]) -> bool:
    if node is None:
        return False
    if _split_one(node.left):
        return True
    if node.value < 10:
        return _split_one(node.right)
    prev, nxt = node.prev, node.next
    left = SnailNode(node.value // 2, node.level + 1)
    right = SnailNode(node.value // 2 + node.value % 2, node.level + 1)
    if prev is not None:
        prev.next = left
    left.prev = prev
    left.next = right
    right.prev = left
    right.next = nxt
    if nxt is not None:
        nxt.prev = right
    node.value = 0
    node.left = left
    node.right = right
    node.prev = None
    node.next = None
    return True


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.leaves: list[SnailNode] = []

    def _expect(self, ch: str) -> None:
        if self.pos >= len(self.text) or self.text[self.pos] != ch:
            raise ValueError(f"expected {ch!r} at position {self.pos} in {self.text!r}")
        self.pos += 1

    def parse_node(self, level: int) -> SnailNode:
        if self.pos >= len(self.text):
            raise ValueError(f"unexpected end of input in {self.text!r}")
        node = SnailNode(level=level)
        if self.text[self.pos].isdigit():
            start = self.pos
            while self.pos < len(self.text) and self.text[self.pos].isdigit():
                self.pos += 1
            node.value = int(self.text[start:self.pos])
            self.leaves.append(node)
            return node
        self._expect("[")
        node.left = self.parse_node(level + 1)
        self._expect(",")
        node.right = self.parse_node(level + 1)
        self._expect("]")
        return node


def parse(s: str) -> SnailNode:
    """Parse a snailfish number and link its leaves."""
    parser = _Parser(s.strip())
    root = parser.parse_node(0)
    if parser.pos != len(parser.text):
        raise ValueError(f"trailing characters in {s!r}")
    for before, after in zip(parser.leaves, parser.leaves[1:]):
        before.next = after
        after.prev = before
    return root


def _fully_reduced(node: SnailNode) -> SnailNode:
    while node.reduce():
        pass
    return node


def add(first: SnailNode | str, second: SnailNode | str) -> SnailNode:
    """Add two snailfish numbers and return the fully reduced sum."""
    return _fully_reduced(parse(f"[{first},{second}]"))


def part1(rows: Sequence[str]) -> int:
    """Return the magnitude of the sum of all numbers."""
    if not rows:
        raise ValueError("no snailfish numbers given")
    total = _fully_reduced(parse(rows[0]))
    for row in rows[1:]:
        total = add(total, _fully_reduced(parse(row)))
    return total.magnitude()


def part2(rows: Sequence[str]) -> int:
    """Return the largest magnitude of any sum of two different numbers."""
    best = 0
    for i, first in enumerate(rows):
        for second in rows[i + 1:]:
            best = max(best, add(first, second).magnitude(), add(second, first).magnitude())
    return best