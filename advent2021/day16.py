"""Decoder for the BITS packet transmission format."""

from __future__ import annotations

from enum import IntEnum
from math import prod
from typing import Iterable


class PacketType(IntEnum):
    """Type identifiers carried in a packet header."""

    SUM = 0
    PRODUCT = 1
    MINIMUM = 2
    MAXIMUM = 3
    LITERAL = 4
    GREATER = 5
    LESS = 6
    EQUAL = 7


def hex_as_binary(hex_string: str) -> str:
    """Expand a hexadecimal string into a string of '0' and '1' characters."""
    return "".join(f"{byte:08b}" for byte in bytes.fromhex(hex_string))


def evaluate(type_id: int, values: Iterable[int]) -> int:
    """Apply the operator identified by ``type_id`` to the sub-packet values."""
    values = list(values)
    if not values:
        raise ValueError("operator packet has no sub-packets")
    if type_id == PacketType.SUM:
        return sum(values)
    if type_id == PacketType.PRODUCT:
        return prod(values)
    if type_id == PacketType.MINIMUM:
        return min(values)
    if type_id == PacketType.MAXIMUM:
        return max(values)
    if type_id in (PacketType.GREATER, PacketType.LESS, PacketType.EQUAL):
        if len(values) < 2:
            raise ValueError("comparison packet needs two sub-packets")
        first, second = values[0], values[1]
        if type_id == PacketType.GREATER:
            return int(first > second)
        if type_id == PacketType.LESS:
            return int(first < second)
        return int(first == second)
    return values[0]


class PacketParser:
    """Reads packets from a bit string, keeping a running sum of versions."""

    def __init__(self, bits: str) -> None:
        self.bits = bits
        self.pos = 0
        self.version_sum = 0

    def parse_packet(self) -> int:
        """Parse one packet at the current position and return its value."""
        _, type_id = self._parse_header()
        if type_id == PacketType.LITERAL:
            return self._parse_literal()
        return evaluate(type_id, self._parse_operator())

    def _read_int(self, width: int) -> int:
        end = self.pos + width
        if end > len(self.bits):
            raise ValueError("packet data is truncated")
        chunk = self.bits[self.pos:end]
        self.pos = end
        result = 0
        for ch in chunk:
            result = (result << 1) | (ord(ch) % 2)
        return result

    def _parse_header(self) -> tuple[int, int]:
        version = self._read_int(3)
        self.version_sum += version
        return version, self._read_int(3)

    def _parse_literal(self) -> int:
        result = 0
        while True:
            has_more = self._read_int(1) == 1
            result = (result << 4) + self._read_int(4)
            if not has_more:
                return result

    def _parse_operator(self) -> list[int]:
        values: list[int] = []
        if self._read_int(1) == 0:
            width = self._read_int(15)
            start = self.pos
            while self.pos - start < width:
                values.append(self.parse_packet())
        else:
            count = self._read_int(11)
            values.extend(self.parse_packet() for _ in range(count))
        return values


def part1(row: str) -> int:
    """Return the sum of all packet versions in the transmission."""
    parser = PacketParser(hex_as_binary(row))
    parser.parse_packet()
    return parser.version_sum


def part2(row: str) -> int:
    """Return the value of the outermost packet in the transmission."""
    return PacketParser(hex_as_binary(row)).parse_packet()