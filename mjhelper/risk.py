"""Deal-in risk of each tile against a riichi player: suji, walls, honours and dora."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import IntEnum

from mjhelper.wall import calc_dnc_safe_tiles_with_discards, calc_nc_safe_tiles

__all__ = [
    "TileType",
    "RISK_RATE",
    "MAX_TURNS",
    "FIXED_DORA_RISK_RATE_MULTI",
    "TILE_TYPE_TABLE",
    "HONOR_TILE_TYPE",
    "RiskTiles34",
    "calc_tile_type27",
    "calculate_risk_tiles34",
    "calculate_left_no_suji_tiles",
]

_SUIT_BASES = (0, 9, 18)


class TileType(IntEnum):
    """Danger category of a tile; each value is a column of ``RISK_RATE``."""

    NO_SUJI5 = 0
    NO_SUJI46 = 1
    NO_SUJI37 = 2
    NO_SUJI28 = 3
    NO_SUJI19 = 4
    HALF_SUJI5 = 5
    HALF_SUJI46A = 6  # the genbutsu is the 1 or 9 side
    HALF_SUJI46B = 7  # the genbutsu is the 7 or 3 side
    SUJI37 = 8
    SUJI28 = 9
    SUJI19 = 10
    DOUBLE_SUJI5 = 11
    DOUBLE_SUJI46 = 12
    YAKUHAI_LEFT3 = 13
    YAKUHAI_LEFT2 = 14
    YAKUHAI_LEFT1 = 15
    OTAKAZE_LEFT3 = 16
    OTAKAZE_LEFT2 = 17
    OTAKAZE_LEFT1 = 18


# [turn][tile type] -> deal-in rate in percent
RISK_RATE: tuple[tuple[float, ...], ...] = (
    (),
    (5.7, 5.7, 5.8, 4.7, 3.4, 2.5, 2.5, 3.1, 5.6, 3.8, 1.8, 0.8, 2.6, 2.1, 1.2, 0.5, 2.4, 1.4, 1.2),
    (6.6, 6.9, 6.3, 5.2, 4.0, 3.5, 3.5, 4.1, 5.3, 3.5, 1.9, 0.8, 2.6, 2.3, 1.2, 0.5, 2.7, 1.3, 0.4),
    (7.7, 8.0, 6.7, 5.8, 4.6, 4.3, 4.1, 4.9, 5.2, 3.6, 1.8, 1.6, 2.0, 2.4, 1.2, 0.3, 2.6, 1.2, 0.3),
    (8.5, 8.9, 7.1, 6.2, 5.1, 4.8, 4.7, 5.6, 5.2, 3.8, 1.7, 1.6, 2.0, 2.6, 1.1, 0.2, 2.6, 1.2, 0.2),
    (9.4, 9.7, 7.5, 6.7, 5.5, 5.3, 5.1, 6.0, 5.3, 3.7, 1.7, 1.7, 2.0, 2.9, 1.2, 0.2, 2.8, 1.2, 0.2),
    (10.2, 10.5, 7.9, 7.1, 5.9, 5.8, 5.6, 6.4, 5.2, 3.7, 1.7, 1.8, 2.0, 3.2, 1.3, 0.2, 2.9, 1.3, 0.2),
    (11.0, 11.3, 8.4, 7.5, 6.3, 6.3, 6.1, 6.8, 5.3, 3.7, 1.7, 2.0, 2.1, 3.6, 1.4, 0.2, 3.2, 1.4, 0.2),
    (11.9, 12.2, 8.9, 8.0, 6.8, 6.9, 6.6, 7.4, 5.3, 3.8, 1.7, 2.1, 2.2, 4.0, 1.6, 0.2, 3.5, 1.6, 0.2),
    (12.8, 13.1, 9.5, 8.6, 7.4, 7.4, 7.2, 7.9, 5.5, 3.9, 1.8, 2.2, 2.3, 4.6, 1.9, 0.3, 4.0, 1.8, 0.2),
    (13.8, 14.1, 10.1, 9.2, 8.0, 8.0, 7.8, 8.5, 5.6, 4.0, 1.9, 2.4, 2.4, 5.3, 2.2, 0.3, 4.6, 2.1, 0.3),
    (14.9, 15.1, 10.8, 9.9, 8.7, 8.7, 8.5, 9.2, 5.7, 4.2, 2.0, 2.5, 2.6, 6.0, 2.6, 0.4, 5.1, 2.5, 0.3),
    (16.0, 16.3, 11.6, 10.6, 9.4, 9.4, 9.2, 9.9, 6.0, 4.4, 2.2, 2.7, 2.7, 6.8, 3.1, 0.4, 5.1, 2.5, 0.3),
    (17.2, 17.5, 12.4, 11.4, 10.2, 10.2, 10.0, 10.6, 6.2, 4.6, 2.4, 3.0, 3.0, 7.8, 3.7, 0.5, 6.6, 3.7, 0.5),
    (18.5, 18.8, 13.3, 12.3, 11.1, 11.0, 10.9, 11.4, 6.6, 4.9, 2.7, 3.2, 3.1, 8.8, 4.4, 0.7, 7.4, 4.4, 0.6),
    (19.9, 20.1, 14.3, 13.3, 12.0, 11.9, 11.8, 12.3, 7.0, 5.3, 3.0, 3.4, 3.4, 9.9, 5.2, 0.8, 8.4, 5.3, 0.8),
    (21.3, 21.7, 15.4, 14.3, 13.1, 12.9, 12.8, 13.3, 7.4, 5.7, 3.3, 3.7, 3.6, 11.2, 6.2, 1.0, 9.4, 6.5, 0.9),
    (22.9, 23.2, 16.6, 15.4, 14.2, 14.0, 13.8, 14.4, 8.0, 6.1, 3.6, 3.9, 3.9, 12.4, 7.3, 1.3, 10.5, 7.7, 1.2),
    (24.7, 24.9, 17.9, 16.7, 15.4, 15.2, 15.0, 15.6, 8.5, 6.6, 4.0, 4.3, 4.2, 13.9, 8.5, 1.7, 11.8, 9.4, 1.6),
    (27.5, 27.8, 20.4, 19.1, 17.8, 17.5, 17.5, 17.5, 9.8, 7.4, 5.0, 5.1, 5.1, 18.1, 12.1, 2.8, 14.7, 12.6, 2.1),
)
MAX_TURNS = len(RISK_RATE) - 1

# Combined effect of deal-in rate and points lost when the tile is a dora (turn 9 data).
FIXED_DORA_RISK_RATE_MULTI: tuple[float, ...] = (
    14.9 / 12.8 * 78 / 58,
    15.0 / 13.1 * 78 / 58,
    12.1 / 9.5 * 75 / 56,
    10.3 / 8.6 * 75 / 54,
    8.9 / 7.4 * 77 / 53,
    9.7 / 7.4 * 81 / 60,
    8.9 / 7.2 * 81 / 60,
    10.4 / 7.9 * 81 / 60,
    8.0 / 5.5 * 75 / 56,
    5.5 / 3.9 * 81 / 56,
    3.5 / 1.8 * 92 / 58,
    4.1 / 2.2 * 88 / 62,
    4.1 / 2.3 * 88 / 62,
    5.2 / 4.6 * 96 / 67,
    2.9 / 1.9 * 96 / 67,
    1.1 / 0.3 * 96 / 67,
    5.1 / 4.0 * 92 / 56,
    3.0 / 1.8 * 92 / 56,
    0.8 / 0.2 * 92 / 56,
)

# [rank 0-8][which suji genbutsu exist]
# 123789: none, present; 456: none, outer side only, inner side only, both
TILE_TYPE_TABLE: tuple[tuple[TileType, ...], ...] = (
    (TileType.NO_SUJI19, TileType.SUJI19),
    (TileType.NO_SUJI28, TileType.SUJI28),
    (TileType.NO_SUJI37, TileType.SUJI37),
    (TileType.NO_SUJI46, TileType.HALF_SUJI46B, TileType.HALF_SUJI46A, TileType.DOUBLE_SUJI46),
    (TileType.NO_SUJI5, TileType.HALF_SUJI5, TileType.HALF_SUJI5, TileType.DOUBLE_SUJI5),
    (TileType.NO_SUJI46, TileType.HALF_SUJI46A, TileType.HALF_SUJI46B, TileType.DOUBLE_SUJI46),
    (TileType.NO_SUJI37, TileType.SUJI37),
    (TileType.NO_SUJI28, TileType.SUJI28),
    (TileType.NO_SUJI19, TileType.SUJI19),
)

# [is yakuhai][copies left - 1]
HONOR_TILE_TYPE: tuple[tuple[TileType, ...], ...] = (
    (TileType.OTAKAZE_LEFT1, TileType.OTAKAZE_LEFT2, TileType.OTAKAZE_LEFT3, TileType.OTAKAZE_LEFT3),
    (TileType.YAKUHAI_LEFT1, TileType.YAKUHAI_LEFT2, TileType.YAKUHAI_LEFT3, TileType.YAKUHAI_LEFT3),
)


class RiskTiles34(list):
    """Deal-in rate (percent) of each of the 34 tile kinds."""

    def fix_with_early_outside(self, discard_tiles: Iterable[int]) -> RiskTiles34:
        """Scale tiles outside early discards by 0.4, in place."""
        for tile in discard_tiles:
            self[tile] *= 0.4
        return self

    def fix_with_global_multi(self, multi: float) -> RiskTiles34:
        """Scale every rate by ``multi``, in place."""
        self[:] = [risk * multi for risk in self]
        return self


def _calc_low_risk_tiles27(
    safe_tiles34: Sequence[bool], left_tiles34: Sequence[int]
) -> list[int]:
    """Number tiles that count as safe for suji purposes (genbutsu or behind a wall)."""
    low = [1 if safe else 0 for safe in safe_tiles34[:27]]
    for base in _SUIT_BASES:
        if left_tiles34[base + 1] == 0:  # 2 is gone: treat 1 as discarded
            low[base] = 1
        if left_tiles34[base + 2] == 0:  # 3 is gone: treat 12 as discarded
            low[base] = low[base + 1] = 1
        if left_tiles34[base + 3] == 0:  # 4 is gone: treat 23 as discarded
            low[base + 1] = low[base + 2] = 1
        if left_tiles34[base + 5] == 0:  # 6 is gone: treat 78 as discarded
            low[base + 6] = low[base + 7] = 1
        if left_tiles34[base + 6] == 0:  # 7 is gone: treat 89 as discarded
            low[base + 7] = low[base + 8] = 1
        if left_tiles34[base + 7] == 0:  # 8 is gone: treat 9 as discarded
            low[base + 8] = 1
    return low


def _suit_tile_types(marks: Sequence[int]) -> list[TileType]:
    """Tile type of each number tile given 0/1 safety marks over the 27 number tiles."""
    types: list[TileType] = []
    for base in _SUIT_BASES:
        for rank in range(9):
            idx = base + rank
            if rank < 3:
                column = marks[idx + 3]
            elif rank < 6:
                column = marks[idx - 3] << 1 | marks[idx + 3]
            else:
                column = marks[idx - 3]
            types.append(TILE_TYPE_TABLE[rank][column])
    return types


def calc_tile_type27(discard_tiles: Iterable[int]) -> list[TileType]:
    """Suji category of each number tile given the discarded tiles."""
    safe = [0] * 34
    for tile in discard_tiles:
        safe[tile] = 1
    return _suit_tile_types(safe)


def calculate_risk_tiles34(
    turns: int,
    safe_tiles34: Sequence[bool],
    left_tiles34: Sequence[int],
    dora_tiles: Iterable[int] | None,
    round_wind_tile: int,
    player_wind_tile: int,
) -> RiskTiles34:
    """Base deal-in rate of each tile against a riichi player.

    ``turns`` is the number of discards the riichi player has made;
    ``safe_tiles34`` marks genbutsu and tiles passed after the riichi;
    ``left_tiles34`` holds the copies of each kind not yet visible.
    """
    if not 1 <= turns <= MAX_TURNS:
        raise ValueError(f"turns must be between 1 and {MAX_TURNS}, got {turns}")
    rates = RISK_RATE[turns]
    doras = list(dora_tiles or ())

    def rate(tile: int, tile_type: TileType) -> float:
        multi = 1.0
        for dora in doras:
            if dora == tile:
                multi *= FIXED_DORA_RISK_RATE_MULTI[tile_type]
        return rates[tile_type] * multi

    risk = RiskTiles34([0.0] * 34)

    low = _calc_low_risk_tiles27(safe_tiles34, left_tiles34)
    for idx, tile_type in enumerate(_suit_tile_types(low)):
        risk[idx] = rate(idx, tile_type)
    for base in _SUIT_BASES:
        # 1 or 9: neither two-sided nor single/shanpon is possible
        if safe_tiles34[base + 3] and left_tiles34[base] == 0:
            risk[base] = 0.0
        if safe_tiles34[base + 5] and left_tiles34[base + 8] == 0:
            risk[base + 8] = 0.0
        # 5 is gone: 3 and 7 count as suji
        if left_tiles34[base + 4] == 0:
            risk[base + 2] = rate(base + 2, TileType.SUJI37)
            risk[base + 6] = rate(base + 6, TileType.SUJI37)

    for tile in range(27, 34):
        left = left_tiles34[tile]
        if left > 0:
            is_yakuhai = tile in (round_wind_tile, player_wind_tile) or tile >= 31
            risk[tile] = rate(tile, HONOR_TILE_TYPE[int(is_yakuhai)][left - 1])
        else:
            # no copies left: safe, ignoring thirteen orphans
            risk[tile] = 0.0

    for nc_tile in calc_nc_safe_tiles(left_tiles34):
        idx = nc_tile.tile34
        rank = idx % 9 + 1
        if rank in (1, 9):
            risk[idx] = rate(idx, TileType.SUJI19)
        elif rank in (2, 8):
            risk[idx] = rates[TileType.SUJI19] * 1.1 * rate(idx, TileType.SUJI19) / rates[TileType.SUJI19]
        elif rank in (3, 7):
            risk[idx] = rate(idx, TileType.SUJI28)
        elif rank in (4, 6):
            risk[idx] = rate(idx, TileType.DOUBLE_SUJI46)
        else:
            risk[idx] = rate(idx, TileType.DOUBLE_SUJI5)

    for dnc_tile in calc_dnc_safe_tiles_with_discards(left_tiles34, safe_tiles34):
        tile = dnc_tile.tile34
        if left_tiles34[tile] > 0:
            risk[tile] = rate(tile, TileType.SUJI19)
            # non-terminals can still lose to tanyao shapes
            if 0 < tile % 9 < 8:
                risk[tile] *= 1.1
        else:
            risk[tile] = 0.0

    for tile, is_safe in enumerate(safe_tiles34):
        if is_safe:
            risk[tile] = 0.0

    return risk


def calculate_left_no_suji_tiles(
    safe_tiles34: Sequence[bool], left_tiles34: Sequence[int]
) -> list[int]:
    """Number tiles among 123789 that still have no suji protection."""
    no_suji = [False] * 27
    for base in _SUIT_BASES:
        for idx in range(base + 3, base + 6):
            if not safe_tiles34[idx]:
                no_suji[idx - 3] = True
                no_suji[idx + 3] = True
        if left_tiles34[base + 4] == 0:
            no_suji[base + 2] = False
            no_suji[base + 6] = False

    for idx, count in enumerate(left_tiles34[:27]):
        if count == 0:
            no_suji[idx] = False

    for idx, is_low in enumerate(_calc_low_risk_tiles27(safe_tiles34, left_tiles34)):
        if is_low:
            no_suji[idx] = False

    return [idx for idx, flag in enumerate(no_suji) if flag]