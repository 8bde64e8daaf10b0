"""Calls on another player's discard: the melds that can be formed and the shanten after them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, auto

from mjhelper.shanten import calculate_shanten

__all__ = ["MeldType", "Meld", "NO_MELD_SHANTEN", "calculate_meld_shanten"]

# Shanten reported when no meld can be formed from the called tile.
NO_MELD_SHANTEN = 99


class MeldType(Enum):
    """Kind of an open or concealed meld."""

    CHI = auto()
    PON = auto()
    ANKAN = auto()
    MINKAN = auto()
    KAKAN = auto()


@dataclass
class Meld:
    """A meld: all its tiles, the tiles taken from the hand and the called tile."""

    meld_type: MeldType
    tiles: list[int] = field(default_factory=list)
    self_tiles: list[int] = field(default_factory=list)
    called_tile: int = -1
    red_five_from_others: bool = False
    contain_red_five: bool = False


def _possible_melds(
    tiles34: Sequence[int], called_tile: int, is_red_five: bool, allow_chi: bool
) -> list[Meld]:
    melds: list[Meld] = []
    if tiles34[called_tile] >= 2:
        melds.append(
            Meld(
                meld_type=MeldType.PON,
                tiles=[called_tile] * 3,
                self_tiles=[called_tile, called_tile],
                called_tile=called_tile,
                red_five_from_others=is_red_five,
            )
        )

    if allow_chi and called_tile < 27:
        rank = called_tile % 9
        pairs = []
        if rank >= 2:
            pairs.append((called_tile - 2, called_tile - 1))
        if 1 <= rank <= 7:
            pairs.append((called_tile - 1, called_tile + 1))
        if rank <= 6:
            pairs.append((called_tile + 1, called_tile + 2))
        for tile_a, tile_b in pairs:
            if tiles34[tile_a] > 0 and tiles34[tile_b] > 0:
                melds.append(
                    Meld(
                        meld_type=MeldType.CHI,
                        tiles=sorted((tile_a, tile_b, called_tile)),
                        self_tiles=[tile_a, tile_b],
                        called_tile=called_tile,
                        red_five_from_others=is_red_five,
                    )
                )
    return melds


def calculate_meld_shanten(
    tiles34: Sequence[int], called_tile: int, is_red_five: bool, allow_chi: bool
) -> tuple[int, list[Meld]]:
    """Melds that can be made with ``called_tile`` and the lowest shanten among them.

    The shanten is that of the hand once the two tiles of a meld are taken out;
    it is ``NO_MELD_SHANTEN`` when no meld is possible. The hand is not modified.
    """
    if not 0 <= called_tile < 34:
        raise ValueError(f"invalid tile index: {called_tile}")
    melds = _possible_melds(tiles34, called_tile, is_red_five, allow_chi)

    min_shanten = NO_MELD_SHANTEN
    for meld in melds:
        rest = list(tiles34)
        for tile in meld.self_tiles:
            rest[tile] -= 1
        min_shanten = min(min_shanten, calculate_shanten(rest))
    return min_shanten, melds