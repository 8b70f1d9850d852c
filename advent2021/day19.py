"""Align beacon scanners by matching relative beacon positions."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Collection, Sequence

_ORIENTATION_COUNT = 48
_MIN_SHARED_VECTORS = 11
_HASH_OFFSET = 2500
_HASH_BASE = 5000


@dataclass(frozen=True, order=True)
class Point:
    """A point or vector in three dimensions."""

    x: int
    y: int
    z: int

    def vec_to(self, other: Point) -> Point:
        """Return the vector from this point to ``other``."""
        return Point(other.x - self.x, other.y - self.y, other.z - self.z)

    def orientations(self) -> tuple[Point, ...]:
        """Return the 48 axis permutations and sign flips of this point.

        The first entry is the point itself.
        """
        x, y, z = self.x, self.y, self.z
        permutations = ((x, y, z), (x, z, y), (y, x, z), (y, z, x), (z, x, y), (z, y, x))
        result: list[Point] = []
        for flip in range(8):
            sx = -1 if flip & 1 else 1
            sy = -1 if flip & 2 else 1
            sz = -1 if flip & 4 else 1
            result.extend(Point(sx * a, sy * b, sz * c) for a, b, c in permutations)
        return tuple(result)

    def _manhattan(self, other: Point) -> int:
        return abs(other.x - self.x) + abs(other.y - self.y) + abs(other.z - self.z)


def vector_hash(vector: Point) -> int:
    """Pack a vector with components in (-2500, 2500) into one integer."""
    return (
        (vector.x + _HASH_OFFSET)
        + _HASH_BASE * (vector.y + _HASH_OFFSET)
        + _HASH_BASE * _HASH_BASE * (vector.z + _HASH_OFFSET)
    )


def parse_points(rows: Sequence[str]) -> list[list[Point]]:
    """Parse scanner reports into one list of beacon points per scanner.

    Each report starts with a header line and ends at a blank line.
    """
    scanners: list[list[Point]] = []
    current: list[Point] | None = None
    for row in rows:
        row = row.strip()
        if not row:
            current = None
            continue
        if current is None:
            current = []
            scanners.append(current)
            continue
        parts = row.split(",")
        if len(parts) != 3:
            raise ValueError(f"expected three coordinates in {row!r}")
        x, y, z = (int(part) for part in parts)
        current.append(Point(x, y, z))
    return scanners


def shares_space(v1: Collection[int], v2: Collection[int]) -> bool:
    """Return True if two collections of distinct vector hashes share at least 11."""
    if min(len(v1), len(v2)) < _MIN_SHARED_VECTORS:
        return False
    return len(set(v1).intersection(v2)) >= _MIN_SHARED_VECTORS


def _vector_table(beacons: Sequence[Point]) -> list[list[frozenset[int]]]:
    """For each beacon and orientation, the hashes of vectors to all other beacons."""
    table: list[list[set[int]]] = [
        [set() for _ in range(_ORIENTATION_COUNT)] for _ in beacons
    ]
    for i, j in combinations(range(len(beacons)), 2):
        forward = beacons[i].vec_to(beacons[j]).orientations()
        for orient, vec in enumerate(forward):
            table[i][orient].add(vector_hash(vec))
            table[j][orient].add(vector_hash(Point(-vec.x, -vec.y, -vec.z)))
    return [[frozenset(hashes) for hashes in row] for row in table]


def _find_alignment(
    root_vectors: Sequence[frozenset[int]],
    root_points: Sequence[Point],
    other_table: Sequence[Sequence[frozenset[int]]],
    other_oriented: Sequence[Sequence[Point]],
) -> tuple[int, Point] | None:
    """Return the orientation and offset that map the other scanner onto the root."""
    for root_beacon, first in enumerate(root_vectors):
        for other_beacon, per_orientation in enumerate(other_table):
            for orient, candidate in enumerate(per_orientation):
                if shares_space(first, candidate):
                    p1 = root_points[root_beacon]
                    p2 = other_oriented[other_beacon][orient]
                    return orient, Point(p1.x - p2.x, p1.y - p2.y, p1.z - p2.z)
    return None


def align_scanners(rows: Sequence[str]) -> tuple[set[Point], list[Point]]:
    """Align every scanner to the first one.

    Returns the set of all beacons and the position of each scanner, both in
    the first scanner's frame.
    """
    scanners = parse_points(rows)
    if not scanners:
        raise ValueError("no scanner reports given")
    count = len(scanners)
    tables = [_vector_table(beacons) for beacons in scanners]
    oriented = [[beacon.orientations() for beacon in beacons] for beacons in scanners]

    aligned_vectors: dict[int, list[frozenset[int]]] = {0: [row[0] for row in tables[0]]}
    aligned_points: dict[int, list[Point]] = {0: list(scanners[0])}
    positions = [Point(0, 0, 0)] * count

    frontier = [0]
    while len(aligned_points) < count:
        if not frontier:
            raise ValueError("not every scanner overlaps with the others")
        next_frontier: list[int] = []
        for root in frontier:
            for other in range(count):
                if other in aligned_points:
                    continue
                alignment = _find_alignment(
                    aligned_vectors[root], aligned_points[root], tables[other], oriented[other]
                )
                if alignment is None:
                    continue
                orient, offset = alignment
                aligned_vectors[other] = [row[orient] for row in tables[other]]
                aligned_points[other] = [
                    Point(p[orient].x + offset.x, p[orient].y + offset.y, p[orient].z + offset.z)
                    for p in oriented[other]
                ]
                positions[other] = offset
                next_frontier.append(other)
        frontier = next_frontier

    beacons = {point for points in aligned_points.values() for point in points}
    return beacons, positions


def part1(rows: Sequence[str]) -> int:
    """Return the number of distinct beacons."""
    beacons, _ = align_scanners(rows)
    return len(beacons)


def part2(rows: Sequence[str]) -> int:
    """Return the largest Manhattan distance between two scanners."""
    _, positions = align_scanners(rows)
    return max((a._manhattan(b) for a, b in combinations(positions, 2)), default=0)