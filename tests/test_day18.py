import pytest

from advent2021.day18 import add, parse, part1, part2

HOMEWORK = [
    "[[[0,[5,8]],[[1,7],[9,6]]],[[4,[1,2]],[[1,4],2]]]",
    "[[[5,[2,8]],4],[5,[[9,9],0]]]",
    "[6,[[[6,2],[5,6]],[[7,6],[4,7]]]]",
    "[[[6,[0,7]],[0,9]],[4,[9,[9,0]]]]",
    "[[[7,[6,4]],[3,[1,3]]],[[[5,5],1],9]]",
    "[[6,[[7,3],[3,2]]],[[[3,8],[5,7]],4]]",
    "[[[[5,4],[7,7]],8],[[8,3],8]]",
    "[[9,3],[[9,9],[6,[4,9]]]]",
    "[[2,[[7,7],7]],[[5,8],[[9,3],[0,2]]]]",
    "[[[[5,2],5],[8,[3,7]]],[[5,[7,5]],[4,4]]]",
]


def test_part1():
    assert part1(HOMEWORK) == 4140


def test_part2():
    assert part2(HOMEWORK) == 3993


@pytest.mark.parametrize(
    "text, expected",
    [
        ("[[1,2],[[3,4],5]]", 143),
        ("[[[[0,7],4],[[7,8],[6,0]]],[8,1]]", 1384),
        ("[[[[1,1],[2,2]],[3,3]],[4,4]]", 445),
        ("[[[[3,0],[5,3]],[4,4]],[5,5]]", 791),
        ("[[[[5,0],[7,4]],[5,5]],[6,6]]", 1137),
        ("[[[[8,7],[7,7]],[[8,6],[7,7]]],[[[0,7],[6,6]],[8,7]]]", 3488),
    ],
)
def test_magnitude(text, expected):
    assert parse(text).magnitude() == expected


@pytest.mark.parametrize(
    "text",
    [
        "[1,2]",
        "[[1,2],3]",
        "[9,[8,7]]",
        "[[1,9],[8,5]]",
        "[[[[1,2],[3,4]],[[5,6],[7,8]]],9]",
        "[[[9,[3,8]],[[0,9],6]],[[[3,7],[4,9]],3]]",
        "[[[[1,3],[5,3]],[[1,3],[8,7]]],[[[4,9],[6,9]],[[8,2],[7,3]]]]",
    ],
)
def test_parse_round_trip(text):
    assert str(parse(text)) == text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("[10,1]", "[[5,5],1]"),
        ("[[[[[9,8],1],2],3],4]", "[[[[0,9],2],3],4]"),
        ("[7,[6,[5,[4,[3,2]]]]]", "[7,[6,[5,[7,0]]]]"),
        ("[[6,[5,[4,[3,2]]]],1]", "[[6,[5,[7,0]]],3]"),
        ("[[3,[2,[1,[7,3]]]],[6,[5,[4,[3,2]]]]]", "[[3,[2,[8,0]]],[9,[5,[4,[3,2]]]]]"),
        ("[[3,[2,[8,0]]],[9,[5,[4,[3,2]]]]]", "[[3,[2,[8,0]]],[9,[5,[7,0]]]]"),
    ],
)
def test_reduce_single_step(text, expected):
    node = parse(text)
    assert node.reduce() is True
    assert node.equals(parse(expected))
    assert str(node) == expected


def test_add_step_by_step():
    first = parse("[[[[4,3],4],4],[7,[[8,4],9]]]")
    second = parse("[1,1]")
    combined = parse(f"[{first},{second}]")
    steps = [
        "[[[[0,7],4],[7,[[8,4],9]]],[1,1]]",
        "[[[[0,7],4],[15,[0,13]]],[1,1]]",
        "[[[[0,7],4],[[7,8],[0,13]]],[1,1]]",
        "[[[[0,7],4],[[7,8],[0,[6,7]]]],[1,1]]",
        "[[[[0,7],4],[[7,8],[6,0]]],[8,1]]",
    ]
    for want in steps:
        assert combined.reduce() is True
        assert combined.equals(parse(want))
        assert str(combined) == want
    assert combined.reduce() is False


def test_add_fully_reduces():
    result = add(parse("[[[[4,3],4],4],[7,[[8,4],9]]]"), parse("[1,1]"))
    assert str(result) == "[[[[0,7],4],[[7,8],[6,0]]],[8,1]]"


def test_reduce_on_reduced_number_is_false():
    assert parse("[[1,2],3]").reduce() is False


def test_equals_detects_difference():
    assert parse("[1,2]").equals(parse("[1,2]")) is True
    assert parse("[1,2]").equals(parse("[2,1]")) is False


def test_is_pair():
    node = parse("[1,2]")
    assert node.is_pair() is True
    assert node.left.is_pair() is False


@pytest.mark.parametrize("text", ["[1,2", "[1;2]", "", "[1,2]x"])
def test_parse_malformed_raises(text):
    with pytest.raises(ValueError):
        parse(text)


def test_part1_empty_raises():
    with pytest.raises(ValueError):
        part1([])