"""Solve the MONAD model-number puzzle from paired digit constraints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

_BLOCK_SIZE = 18
_DIGITS = 14


@dataclass(frozen=True)
class PairCond:
    """Digit ``second`` must equal digit ``first`` plus ``delta``."""

    first: int
    second: int
    delta: int


def _operand(row: str) -> int:
    return int(row.split(" ")[2])


def parse_pair_conds(rows: Sequence[str]) -> list[PairCond]:
    """Derive the pairwise digit constraints from a MONAD program."""
    stack: list[tuple[int, int]] = []
    pairs: list[PairCond] = []
    for i in range(_DIGITS):
        base = i * _BLOCK_SIZE
        a = _operand(rows[base + 5])
        b = _operand(rows[base + 15])
        if rows[base + 4] == "div z 1":
            stack.append((i, b))
        else:
            if not stack:
                raise ValueError(f"block {i} pops from an empty stack")
            index, offset = stack.pop()
            pairs.append(PairCond(first=index, second=i, delta=offset + a))
    return pairs


def part1(rows: Sequence[str]) -> int:
    """Return the largest model number that satisfies every constraint."""
    digits = ["0"] * _DIGITS
    for pair in parse_pair_conds(rows):
        first, second, delta = pair.first, pair.second, pair.delta
        if delta > 0:
            first, second, delta = second, first, -delta
        digits[first] = "9"
        digits[second] = str(9 + delta)
    return int("".join(digits))


def part2(rows: Sequence[str]) -> int:
    """Return the smallest model number that satisfies every constraint."""
    digits = ["0"] * _DIGITS
    for pair in parse_pair_conds(rows):
        first, second, delta = pair.first, pair.second, pair.delta
        if delta < 0:
            first, second, delta = second, first, -delta
        digits[first] = "1"
        digits[second] = str(1 + delta)
    return int("".join(digits))