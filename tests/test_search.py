import pytest

from mjhelper.notation import parse_tiles34
from mjhelper.search import (
    SearchNode14,
    calculate_shanten_and_waits13,
    search13,
    search14,
    search_shanten14,
)
from mjhelper.tiles import init_left_tiles34_with_tiles34, number_to_chinese_shanten


def _describe(hand):
    shanten, waits = calculate_shanten_and_waits13(parse_tiles34(hand), None)
    return f"{number_to_chinese_shanten(shanten)} {waits}"


@pytest.mark.parametrize(
    "hand, expected",
    [
        # closed
        ("1122334455667z", "听牌 3 进张 [7z]"),
        ("123456789m 1135s", "听牌 4 进张 [4s]"),
        ("123456789m 1134s", "听牌 8 进张 [25s]"),
        ("3456m 3456s 44456p", "一向听 61 进张 [12345678m 47p 12345678s]"),
        ("123456789m 1234z", "两向听 12 进张 [1234z]"),
        ("11357m 13579p 135s", "三向听 32 进张 [46m 2468p 24s]"),
        # open
        ("5p", "听牌 3 进张 [5p]"),
        ("1234p", "听牌 6 进张 [14p]"),
        ("5555m", "一向听 132 进张 [12346789m 123456789p 123456789s 1234567z]"),
        ("1234z", "两向听 12 进张 [1234z]"),
    ],
)
def test_calculate_shanten_and_waits13(hand, expected):
    assert _describe(hand) == expected


def test_waits_use_given_left_tiles():
    hand = parse_tiles34("123456789m 1134s")
    left = init_left_tiles34_with_tiles34(hand)
    left[19] = 0
    shanten, waits = calculate_shanten_and_waits13(hand, left)
    assert shanten == 0
    assert dict(waits) == {19: 0, 22: 4}


def test_search_shanten14_agari_is_empty():
    hand = parse_tiles34("123456789m 11345p")
    node = search_shanten14(-1, hand, init_left_tiles34_with_tiles34(hand), -1)
    assert node == SearchNode14(shanten=-1, children={})
    assert str(node) == "end\n"


def test_search14_tenpai_discards():
    hand = parse_tiles34("123456789m 11347p")
    left = init_left_tiles34_with_tiles34(hand)
    node = search14(0, hand, left, 0)
    assert list(node.children) == [15]
    assert dict(node.children[15].waits) == {10: 4, 13: 4}


def test_search_restores_hand_and_left_tiles():
    hand = parse_tiles34("55678m 3467p 2466s")
    left = init_left_tiles34_with_tiles34(hand)
    hand_before, left_before = list(hand), list(left)
    search_shanten14(1, hand, left, 0)
    assert hand == hand_before
    assert left == left_before


def test_search13_tenpai_format():
    hand = parse_tiles34("123456789m 1134p")
    left = init_left_tiles34_with_tiles34(hand)
    node = search13(0, hand, left, 0)
    assert str(node) == "摸 2p\n  end\n摸 5p\n  end\n"


def test_search13_builds_children_down_to_stop():
    hand = parse_tiles34("123456789m 1147p")
    left = init_left_tiles34_with_tiles34(hand)
    node = search13(1, hand, left, 0)
    assert node.shanten == 1
    for tile, child in node.children.items():
        assert tile in node.waits
        if child is not None:
            assert child.shanten == 0
            for grandchild in child.children.values():
                assert grandchild.shanten == 0
                assert grandchild.waits.all_count() >= 0
                assert all(c is None for c in grandchild.children.values())
    assert any(child is not None for child in node.children.values())