"""Find the least energy needed to sort amphipods into their rooms."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Iterator, Sequence

_HALLWAY_LENGTH = 11
_ROOM_KINDS = "ABCD"
_COSTS = {"A": 1, "B": 10, "C": 100, "D": 1000}
_EMPTY = "."


def move_cost(amphipod: str) -> int:
    """Return the energy one step costs for the given amphipod."""
    try:
        return _COSTS[amphipod]
    except KeyError:
        raise ValueError(f"unknown amphipod {amphipod!r}") from None


def _door(room: int) -> int:
    return 2 + 2 * room


def _with_char(text: str, index: int, ch: str) -> str:
    return text[:index] + ch + text[index + 1:]


@dataclass(frozen=True, order=True)
class Burrow:
    """Four rooms, listed top slot first, and an eleven-slot hallway."""

    rooms: tuple[str, ...]
    hallway: str = _EMPTY * _HALLWAY_LENGTH

    def __post_init__(self) -> None:
        object.__setattr__(self, "rooms", tuple(self.rooms))
        if len(self.rooms) != len(_ROOM_KINDS):
            raise ValueError("a burrow has exactly four rooms")
        if len(self.hallway) != _HALLWAY_LENGTH:
            raise ValueError("the hallway has exactly eleven slots")

    def is_solved(self) -> bool:
        """Return True if the hallway is empty and every room holds its own kind."""
        return set(self.hallway) <= {_EMPTY} and all(
            set(room) <= {kind} for room, kind in zip(self.rooms, _ROOM_KINDS)
        )

    def moves(self) -> Iterator[tuple[int, Burrow]]:
        """Yield (energy, next burrow) for every single legal move."""
        yield from self._moves_from_hallway()
        yield from self._moves_from_rooms()

    def _moves_from_hallway(self) -> Iterator[tuple[int, Burrow]]:
        hallway = self.hallway
        for pos, amphipod in enumerate(hallway):
            if amphipod == _EMPTY:
                continue
            cost = move_cost(amphipod)
            dest = _ROOM_KINDS.index(amphipod)
            door = _door(dest)
            low, high = sorted((door, pos))
            if any(hallway[i] != _EMPTY for i in range(low, high + 1) if i != pos):
                continue
            room = self.rooms[dest]
            if any(c not in (_EMPTY, amphipod) for c in room):
                continue
            slot = room.rfind(_EMPTY)
            if slot < 0:
                continue
            rooms = list(self.rooms)
            rooms[dest] = _with_char(room, slot, amphipod)
            energy = cost * (abs(pos - door) + slot + 1)
            yield energy, Burrow(tuple(rooms), _with_char(hallway, pos, _EMPTY))

    def _stops(self, door: int) -> Iterator[int]:
        hallway = self.hallway
        for pos in range(door - 1, -1, -1):
            if hallway[pos] != _EMPTY:
                break
            if pos < 2 or pos % 2 == 1:
                yield pos
        for pos in range(door + 1, len(hallway)):
            if hallway[pos] != _EMPTY:
                break
            if pos > len(hallway) - 3 or pos % 2 == 1:
                yield pos

    def _moves_from_rooms(self) -> Iterator[tuple[int, Burrow]]:
        for index, room in enumerate(self.rooms):
            slot = next((i for i, c in enumerate(room) if c != _EMPTY), None)
            if slot is None:
                continue
            amphipod = room[slot]
            cost = move_cost(amphipod)
            door = _door(index)
            rooms = list(self.rooms)
            rooms[index] = _with_char(room, slot, _EMPTY)
            new_rooms = tuple(rooms)
            for stop in self._stops(door):
                energy = cost * (abs(door - stop) + slot + 1)
                yield energy, Burrow(new_rooms, _with_char(self.hallway, stop, amphipod))


def parse_burrow(rows: Sequence[str], depth: int) -> Burrow:
    """Read the room contents from a burrow diagram with rooms ``depth`` deep."""
    try:
        rooms = tuple(
            "".join(rows[2 + level][3 + 2 * room] for level in range(depth))
            for room in range(len(_ROOM_KINDS))
        )
    except IndexError:
        raise ValueError("burrow diagram is too short") from None
    return Burrow(rooms)


def least_energy(start: Burrow) -> int:
    """Return the least total energy that sorts every amphipod."""
    best = {start: 0}
    heap: list[tuple[int, Burrow]] = [(0, start)]
    while heap:
        energy, burrow = heapq.heappop(heap)
        if energy > best.get(burrow, energy):
            continue
        if burrow.is_solved():
            return energy
        for cost, following in burrow.moves():
            total = energy + cost
            known = best.get(following)
            if known is None or total < known:
                best[following] = total
                heapq.heappush(heap, (total, following))
    raise ValueError("no sequence of moves sorts the amphipods")


def part1(rows: Sequence[str]) -> int:
    """Solve a burrow with rooms two deep."""
    return least_energy(parse_burrow(rows, 2))


def part2(rows: Sequence[str]) -> int:
    """Solve a burrow with rooms four deep."""
    return least_energy(parse_burrow(rows, 4))