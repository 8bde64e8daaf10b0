"""Tiles made safer by walls: no chance, double no chance and one chance."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum

from mjhelper.notation import tiles_to_str

__all__ = [
    "WallSafeType",
    "WallSafeTile",
    "WallSafeTileList",
    "calc_dnc_safe_tiles",
    "calc_dnc_safe_tiles_with_discards",
    "calc_nc_safe_tiles",
    "calc_oc_safe_tiles",
    "calc_wall_tiles",
]

_SUIT_BASES = (0, 9, 18)


class WallSafeType(IntEnum):
    """How a wall protects a tile; lower values are safer."""

    DOUBLE_NO_CHANCE = 0  # loses only to single and shanpon waits
    NO_CHANCE = 1  # loses to single, shanpon, edge and closed waits
    DOUBLE_ONE_CHANCE = 2
    MIXED_ONE_CHANCE = 3  # for 456: one side double, the other not
    ONE_CHANCE = 4


@dataclass(frozen=True)
class WallSafeTile:
    """A tile together with the kind of wall protection it has."""

    tile34: int
    safe_type: WallSafeType


def _sort_key(safe_tile: WallSafeTile) -> tuple[bool, int, int]:
    rank = safe_tile.tile34 % 9
    if rank >= 5:
        rank = 8 - rank
    # 456 always after the others; then safer types first; then outer tiles first
    return rank > 2, int(safe_tile.safe_type), rank


class WallSafeTileList(list):
    """A list of wall-safe tiles, ordered by how safe they are."""

    def filter_with_hands(self, hands_tiles34: Sequence[int]) -> WallSafeTileList:
        """Keep only the tiles held in the hand, re-sorted."""
        return _sorted(t for t in self if hands_tiles34[t.tile34] > 0)

    def __str__(self) -> str:
        return tiles_to_str(t.tile34 for t in self)


def _sorted(safe_tiles: Iterable[WallSafeTile]) -> WallSafeTileList:
    return WallSafeTileList(sorted(safe_tiles, key=_sort_key))


def _predicates(
    test: Callable[[int], bool],
) -> tuple[Callable[..., bool], Callable[..., bool]]:
    def any_of(*indexes: int) -> bool:
        return any(test(i) for i in indexes)

    def all_of(*indexes: int) -> bool:
        return all(test(i) for i in indexes)

    return any_of, all_of


def calc_dnc_safe_tiles(left_tiles34: Sequence[int]) -> WallSafeTileList:
    """Tiles that, because of walls (zero copies left), lose only to single or shanpon waits."""
    any_nc, all_nc = _predicates(lambda i: left_tiles34[i] == 0)
    found: list[int] = []
    for base in _SUIT_BASES:
        if any_nc(base + 1, base + 2):
            found.append(base)
        if any_nc(base + 2) or all_nc(base, base + 3):
            found.append(base + 1)
        for idx in range(base + 2, base + 7):
            if all_nc(idx - 2, idx + 1) or all_nc(idx - 1, idx + 1) or all_nc(idx - 1, idx + 2):
                found.append(idx)
        if any_nc(base + 6) or all_nc(base + 5, base + 8):
            found.append(base + 7)
        if any_nc(base + 6, base + 7):
            found.append(base + 8)
    return _sorted(WallSafeTile(tile, WallSafeType.DOUBLE_NO_CHANCE) for tile in found)


def calc_dnc_safe_tiles_with_discards(
    left_tiles34: Sequence[int], safe_tiles34: Sequence[bool]
) -> WallSafeTileList:
    """Double-no-chance tiles, also using genbutsu on the suji across from a wall."""

    def nc(i: int) -> bool:
        return left_tiles34[i] == 0

    found = [t.tile34 for t in calc_dnc_safe_tiles(left_tiles34)]
    for base in _SUIT_BASES:
        for idx in (base + 1, base + 2):
            if nc(idx - 1) and safe_tiles34[idx + 3]:
                found.append(idx)
        for idx in range(base + 3, base + 6):
            if (nc(idx - 1) and safe_tiles34[idx + 3]) or (nc(idx + 1) and safe_tiles34[idx - 3]):
                found.append(idx)
        for idx in (base + 6, base + 7):
            if nc(idx + 1) and safe_tiles34[idx - 3]:
                found.append(idx)
    return _sorted(WallSafeTile(tile, WallSafeType.DOUBLE_NO_CHANCE) for tile in found)


def calc_nc_safe_tiles(left_tiles34: Sequence[int]) -> WallSafeTileList:
    """Tiles that, because of walls, cannot lose to a two-sided wait."""
    any_nc, _ = _predicates(lambda i: left_tiles34[i] == 0)
    found: list[int] = []
    for base in _SUIT_BASES:
        for idx in range(base, base + 3):
            if any_nc(idx + 1, idx + 2):
                found.append(idx)
        for idx in range(base + 3, base + 6):
            if any_nc(idx - 2, idx - 1) and any_nc(idx + 1, idx + 2):
                found.append(idx)
        for idx in range(base + 6, base + 9):
            if any_nc(idx - 2, idx - 1):
                found.append(idx)
    return _sorted(WallSafeTile(tile, WallSafeType.NO_CHANCE) for tile in found)


def calc_oc_safe_tiles(left_tiles34: Sequence[int]) -> WallSafeTileList:
    """Tiles behind thin walls (one copy left): early on, unlikely to lose to a two-sided wait."""
    any_oc, all_oc = _predicates(lambda i: left_tiles34[i] == 1)
    found: list[WallSafeTile] = []
    for base in _SUIT_BASES:
        for idx in range(base, base + 3):
            if all_oc(idx + 1, idx + 2):
                found.append(WallSafeTile(idx, WallSafeType.DOUBLE_ONE_CHANCE))
            elif any_oc(idx + 1, idx + 2):
                found.append(WallSafeTile(idx, WallSafeType.ONE_CHANCE))
        for idx in range(base + 3, base + 6):
            if any_oc(idx - 2, idx - 1) and any_oc(idx + 1, idx + 2):
                if all_oc(idx - 2, idx - 1, idx + 1, idx + 2):
                    safe_type = WallSafeType.DOUBLE_ONE_CHANCE
                elif all_oc(idx - 2, idx - 1) or all_oc(idx + 1, idx + 2):
                    safe_type = WallSafeType.MIXED_ONE_CHANCE
                else:
                    safe_type = WallSafeType.ONE_CHANCE
                found.append(WallSafeTile(idx, safe_type))
        for idx in range(base + 6, base + 9):
            if all_oc(idx - 2, idx - 1):
                found.append(WallSafeTile(idx, WallSafeType.DOUBLE_ONE_CHANCE))
            elif any_oc(idx - 2, idx - 1):
                found.append(WallSafeTile(idx, WallSafeType.ONE_CHANCE))
    return _sorted(found)


def calc_wall_tiles(left_tiles34: Sequence[int]) -> WallSafeTileList:
    """No-chance and one-chance tiles together, sorted by safety."""
    return _sorted([*calc_nc_safe_tiles(left_tiles34), *calc_oc_safe_tiles(left_tiles34)])