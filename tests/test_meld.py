import pytest

from mjhelper.meld import NO_MELD_SHANTEN, Meld, MeldType, calculate_meld_shanten
from mjhelper.notation import parse_tile, parse_tiles34
from mjhelper.shanten import calculate_shanten


def _self_tile_sets(melds):
    return sorted(tuple(m.self_tiles) for m in melds)


def test_pon_of_honor_completes_hand():
    hand = parse_tiles34("1122z")
    shanten, melds = calculate_meld_shanten(hand, parse_tile("1z"), False, True)
    assert shanten == -1
    assert len(melds) == 1
    assert melds[0].meld_type is MeldType.PON
    assert melds[0].tiles == [27, 27, 27]
    assert melds[0].self_tiles == [27, 27]
    assert melds[0].called_tile == 27


def test_no_chi_on_honor_tiles():
    hand = parse_tiles34("1z 2z 3z 4z")
    shanten, melds = calculate_meld_shanten(hand, parse_tile("2z"), False, True)
    assert melds == []
    assert shanten == NO_MELD_SHANTEN


def test_no_meld_possible():
    hand = parse_tiles34("19m 19p")
    shanten, melds = calculate_meld_shanten(hand, parse_tile("5s"), False, True)
    assert shanten == NO_MELD_SHANTEN
    assert melds == []


def test_chi_combinations_for_middle_tile():
    hand = parse_tiles34("1234m")
    _, melds = calculate_meld_shanten(hand, parse_tile("2m"), False, True)
    assert all(m.meld_type is MeldType.CHI for m in melds)
    assert _self_tile_sets(melds) == [(0, 2), (2, 3)]
    for meld in melds:
        assert meld.tiles == sorted(meld.tiles)
        assert 1 in meld.tiles
        assert meld.tiles[2] - meld.tiles[0] == 2


def test_chi_all_three_shapes():
    hand = parse_tiles34("3467m")
    _, melds = calculate_meld_shanten(hand, parse_tile("5m"), False, True)
    assert _self_tile_sets(melds) == [(2, 3), (3, 5), (5, 6)]


def test_chi_edges_of_suit():
    hand = parse_tiles34("23m 78p")
    _, melds_low = calculate_meld_shanten(hand, parse_tile("1m"), False, True)
    assert _self_tile_sets(melds_low) == [(1, 2)]
    _, melds_high = calculate_meld_shanten(hand, parse_tile("9p"), False, True)
    assert _self_tile_sets(melds_high) == [(15, 16)]


def test_chi_does_not_cross_suits():
    hand = parse_tiles34("89m 1p")
    _, melds = calculate_meld_shanten(hand, parse_tile("2p"), False, True)
    assert melds == []


def test_allow_chi_false_keeps_only_pon():
    hand = parse_tiles34("3455m")
    _, with_chi = calculate_meld_shanten(hand, parse_tile("5m"), False, True)
    _, without_chi = calculate_meld_shanten(hand, parse_tile("5m"), False, False)
    assert any(m.meld_type is MeldType.CHI for m in with_chi)
    assert [m.meld_type for m in without_chi] == [MeldType.PON]


def test_pon_listed_before_chi():
    hand = parse_tiles34("3455m")
    _, melds = calculate_meld_shanten(hand, parse_tile("5m"), False, True)
    assert melds[0].meld_type is MeldType.PON


def test_red_five_flag_propagates():
    hand = parse_tiles34("4556m")
    _, melds = calculate_meld_shanten(hand, parse_tile("5m"), True, True)
    assert melds
    assert all(m.red_five_from_others for m in melds)
    assert all(not m.contain_red_five for m in melds)


def test_shanten_is_minimum_over_melds():
    hand = parse_tiles34("3455m 78p 1z")
    shanten, melds = calculate_meld_shanten(hand, parse_tile("5m"), False, True)
    per_meld = []
    for meld in melds:
        rest = list(hand)
        for tile in meld.self_tiles:
            rest[tile] -= 1
        per_meld.append(calculate_shanten(rest))
    assert shanten == min(per_meld)


def test_hand_is_not_modified():
    hand = parse_tiles34("3455m 78p 1z")
    original = list(hand)
    calculate_meld_shanten(hand, parse_tile("5m"), False, True)
    assert hand == original


def test_invalid_called_tile():
    with pytest.raises(ValueError):
        calculate_meld_shanten(parse_tiles34("1m"), 34, False, True)


def test_meld_defaults():
    meld = Meld(meld_type=MeldType.ANKAN, tiles=[0, 0, 0, 0])
    assert meld.self_tiles == []
    assert meld.called_tile == -1
    assert meld.red_five_from_others is False