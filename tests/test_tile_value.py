import pytest

from mjhelper.notation import parse_tile, parse_tiles34
from mjhelper.tile_value import calculate_isolated_tile_value, calculate_tile_value
from mjhelper.tiles import init_left_tiles34_with_tiles34

EPS = 1e-3


def _value(tile, self_wind, round_wind, discarded, doras=()):
    left = init_left_tiles34_with_tiles34(parse_tiles34(discarded))
    return calculate_isolated_tile_value(parse_tile(tile), list(doras), self_wind, round_wind, left)


@pytest.mark.parametrize(
    "tile, self_wind, round_wind, discarded, expected",
    [
        ("9m", 27, 27, "2s", 100),
        ("1z", 27, 27, "2s", 130),
        ("1z", 27, 27, "2s11z", 117),
        ("2z", 27, 27, "2s", 97),
        ("3z", 27, 27, "2s", 98),
        ("4z", 27, 27, "2s", 99),
        ("5z", 27, 27, "2s", 114.9),
        ("6z", 27, 27, "2s", 114.8),
        ("7z", 27, 27, "2s", 115),
        ("7z", 27, 27, "2s77z", 103.5),
        ("7z", 27, 27, "2s777z", 23),
        ("1z", 29, 27, "2s", 114),
        ("1z", 29, 27, "2s11z", 102.6),
        ("2z", 29, 27, "2s", 99),
        ("3z", 29, 27, "2s", 116),
        ("4z", 29, 27, "2s", 97),
    ],
)
def test_isolated_tile_value(tile, self_wind, round_wind, discarded, expected):
    assert _value(tile, self_wind, round_wind, discarded) == pytest.approx(expected, abs=EPS)


def test_isolated_honour_with_no_copies_left_is_worthless():
    assert _value("7z", 27, 27, "2s7777z") == 0


def test_isolated_dora_terminal_gains_dora_value():
    assert _value("9m", 27, 27, "2s", doras=[parse_tile("9m")]) == pytest.approx(10100)


def test_isolated_double_dora_counts_twice():
    dora = parse_tile("9m")
    assert _value("9m", 27, 27, "2s", doras=[dora, dora]) == pytest.approx(20100)


def test_tile_value_of_dora_itself():
    assert calculate_tile_value(parse_tile("5p"), [parse_tile("5p")]) == 10000


def test_tile_value_first_neighbour():
    assert calculate_tile_value(parse_tile("2m"), [parse_tile("3m")]) == 1000


def test_tile_value_second_neighbour():
    assert calculate_tile_value(parse_tile("1m"), [parse_tile("3m")]) == 100


def test_tile_value_outside_same_group_of_three_is_zero():
    assert calculate_tile_value(parse_tile("4m"), [parse_tile("3m")]) == 0


def test_tile_value_next_to_honour_dora_is_zero():
    assert calculate_tile_value(parse_tile("2z"), [parse_tile("1z")]) == 0


def test_tile_value_without_dora_is_zero():
    assert calculate_tile_value(parse_tile("5s"), []) == 0


def test_tile_value_sums_over_doras():
    doras = [parse_tile("2m"), parse_tile("3m")]
    assert calculate_tile_value(parse_tile("2m"), doras) == 11000