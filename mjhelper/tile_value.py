"""Value of a discard candidate: dora closeness and the worth of lone terminals and honours."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "DORA_VALUE",
    "DORA_FIRST_NEIGHBOUR_VALUE",
    "DORA_SECOND_NEIGHBOUR_VALUE",
    "HONORED_VALUE",
    "calculate_isolated_tile_value",
    "calculate_tile_value",
]

DORA_VALUE = 10000.0
DORA_FIRST_NEIGHBOUR_VALUE = 1000.0
DORA_SECOND_NEIGHBOUR_VALUE = 100.0
HONORED_VALUE = 15.0

_BASE_ISOLATED_VALUE = 100.0
_WHITE_DRAGON = 31
_GREEN_DRAGON = 32
_NORTH_WIND = 30


def calculate_isolated_tile_value(
    tile: int,
    dora_tiles: Iterable[int],
    self_wind_tile: int,
    round_wind_tile: int,
    left_tiles34: Sequence[int],
) -> float:
    """Value of keeping a lone terminal or honour; lower values are discarded first."""
    value = _BASE_ISOLATED_VALUE
    value += DORA_VALUE * sum(1 for dora in dora_tiles if dora == tile)

    if tile < 27:
        return value

    if tile in (self_wind_tile, round_wind_tile) or tile >= _WHITE_DRAGON:
        value += HONORED_VALUE
        if self_wind_tile == round_wind_tile and tile == self_wind_tile:
            value += HONORED_VALUE  # double wind
        elif tile == self_wind_tile:
            value += 1
        elif tile == round_wind_tile:
            value -= 1
        if tile == _WHITE_DRAGON:
            value -= 0.1
        if tile == _GREEN_DRAGON:
            value -= 0.2
    else:
        # guest wind: the next player's wind is worth least
        for offset in (1, 2, 3):
            otakaze = self_wind_tile + offset
            if otakaze > _NORTH_WIND:
                otakaze -= 4
            if tile == otakaze:
                value -= 4 - offset
                break

    left = left_tiles34[tile]
    if left == 2:
        value *= 0.9
    elif left == 1:
        value *= 0.2
    elif left == 0:
        value = 0.0
    return value


def calculate_tile_value(tile: int, dora_tiles: Iterable[int]) -> float:
    """Value of a tile from being a dora or lying next to a number dora."""
    value = 0.0
    for dora in dora_tiles:
        if tile == dora:
            value += DORA_VALUE
        elif dora < 27:
            if tile // 3 != dora // 3:
                continue
            rank = tile % 9
            dora_rank = dora % 9
            if abs(rank - dora_rank) == 1:
                value += DORA_FIRST_NEIGHBOUR_VALUE
            elif abs(rank - dora_rank) == 2:
                value += DORA_SECOND_NEIGHBOUR_VALUE
    return value