import pytest

from advent2021.day16 import PacketParser, evaluate, hex_as_binary, part1, part2


@pytest.mark.parametrize(
    "row, expected",
    [
        ("8A004A801A8002F478", 16),
        ("620080001611562C8802118E34", 12),
        ("C0015000016115A2E0802F182340", 23),
        ("A0016C880162017C3686B18A3D4780", 31),
    ],
)
def test_part1(row, expected):
    assert part1(row) == expected


@pytest.mark.parametrize(
    "row, expected",
    [
        ("C200B40A82", 3),
        ("04005AC33890", 54),
        ("880086C3E88112", 7),
        ("CE00C43D881120", 9),
        ("D8005AC2A8F0", 1),
        ("F600BC2D8F", 0),
        ("9C005AC2F8F0", 0),
        ("9C0141080250320F1802104A08", 1),
    ],
)
def test_part2(row, expected):
    assert part2(row) == expected


def test_hex_as_binary():
    assert hex_as_binary("D2FE28") == "110100101111111000101000"


def test_literal_packet():
    parser = PacketParser(hex_as_binary("D2FE28"))
    assert parser.parse_packet() == 2021
    assert parser.version_sum == 6
    assert parser.pos == 21


def test_invalid_hex_raises():
    with pytest.raises(ValueError):
        part1("XYZ")


def test_truncated_packet_raises():
    with pytest.raises(ValueError):
        PacketParser("110").parse_packet()


@pytest.mark.parametrize(
    "type_id, values, expected",
    [
        (0, [1, 2, 3], 6),
        (1, [2, 3, 4], 24),
        (2, [5, 1, 7], 1),
        (3, [5, 1, 7], 7),
        (5, [3, 2], 1),
        (6, [3, 2], 0),
        (7, [4, 4], 1),
    ],
)
def test_evaluate(type_id, values, expected):
    assert evaluate(type_id, values) == expected


def test_evaluate_empty_raises():
    with pytest.raises(ValueError):
        evaluate(0, [])