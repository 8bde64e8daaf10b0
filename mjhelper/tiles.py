"""Tile tables, wait sets and small helpers over 34-kind tile counts."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable, Sequence

from mjhelper.notation import tiles_to_str_with_bracket

MAHJONG = (
    "1m", "2m", "3m", "4m", "5m", "6m", "7m", "8m", "9m",
    "1p", "2p", "3p", "4p", "5p", "6p", "7p", "8p", "9p",
    "1s", "2s", "3s", "4s", "5s", "6s", "7s", "8s", "9s",
    "1z", "2z", "3z", "4z", "5z", "6z", "7z",
)

MAHJONG_U = (
    "1M", "2M", "3M", "4M", "5M", "6M", "7M", "8M", "9M",
    "1p", "2p", "3p", "4p", "5p", "6p", "7p", "8p", "9p",
    "1S", "2S", "3S", "4S", "5S", "6S", "7S", "8S", "9S",
    "1Z", "2Z", "3Z", "4Z", "5Z", "6Z", "7Z",
)

MAHJONG_ZH = (
    "1万", "2万", "3万", "4万", "5万", "6万", "7万", "8万", "9万",
    "1饼", "2饼", "3饼", "4饼", "5饼", "6饼", "7饼", "8饼", "9饼",
    "1索", "2索", "3索", "4索", "5索", "6索", "7索", "8索", "9索",
    "东", "南", "西", "北", "白", "发", "中",
)

YAOCHU_TILES = (0, 8, 9, 17, 18, 26, 27, 28, 29, 30, 31, 32, 33)

_CHINESE_SHANTEN = (
    "和了", "听牌", "一向听", "两向听", "三向听",
    "四向听", "五向听", "六向听", "七向听", "八向听",
)


class Waits(dict):
    """Mapping of waiting tile -> number of copies still available."""

    def all_count(self) -> int:
        """Total number of available copies over all waiting tiles."""
        return sum(self.values())

    def available_tiles(self) -> list[int]:
        """Sorted waiting tiles that still have copies left."""
        return sorted(tile for tile, left in self.items() if left > 0)

    def indexes(self) -> list[int]:
        """All waiting tiles, sorted."""
        return sorted(self)

    def parse_index(self) -> tuple[int, list[int]]:
        """Total available count and the sorted waiting tiles."""
        return self.all_count(), self.indexes()

    def tiles_zh(self) -> list[str]:
        """Chinese names of the waiting tiles, in index order."""
        return [MAHJONG_ZH[tile] for tile in self.indexes()]

    def equals(self, other: Waits) -> bool:
        """Whether both sets have the same tiles with copies left."""
        return self.available_tiles() == other.available_tiles()

    def __str__(self) -> str:
        return f"{self.all_count()} 进张 {tiles_to_str_with_bracket(self.indexes())}"


def tiles_to_mahjong_zh(tiles: Iterable[int]) -> list[str]:
    """Chinese names of the given tiles."""
    return [MAHJONG_ZH[tile] for tile in tiles]


def is_man(tile: int) -> bool:
    return tile < 9


def is_pin(tile: int) -> bool:
    return 9 <= tile < 18


def is_sou(tile: int) -> bool:
    return 18 <= tile < 27


def is_yaochupai(tile: int) -> bool:
    """Terminal or honour tile."""
    if tile >= 27:
        return True
    return tile % 9 in (0, 8)


def is_isolated_tile(tile: int, tiles34: Sequence[int]) -> bool:
    """Whether the tile would have no neighbour within two ranks in the hand."""
    if tile >= 27:
        return tiles34[tile] == 0
    rank = tile % 9
    base = tile - rank
    low = base + max(0, rank - 2)
    high = base + min(8, rank + 2)
    return not any(tiles34[low:high + 1])


def count_of_tiles34(tiles34: Sequence[int]) -> int:
    """Number of tiles in the hand."""
    return sum(tiles34)


def count_pairs_of_tiles34(tiles34: Sequence[int]) -> int:
    """Number of kinds held at least twice."""
    return sum(1 for count in tiles34 if count >= 2)


def init_left_tiles34() -> list[int]:
    """Four copies of every kind."""
    return [4] * 34


def init_left_tiles34_with_tiles34(tiles34: Sequence[int]) -> list[int]:
    """Copies left of each kind once the given tiles are removed."""
    return [4 - count for count in tiles34]


def outside_tiles(tile: int) -> list[int]:
    """Tiles on the outer side of a discarded number tile."""
    if tile >= 27:
        return []
    rank = tile % 9 + 1
    base = tile - tile % 9
    if rank in (1, 9):
        return []
    if rank in (2, 3, 4):
        return list(range(base, tile))
    if rank == 5:
        return [tile - 2, tile + 2]
    return list(range(base + 8, tile, -1))


def random_add_tile(tiles34: list[int], rng: random.Random | None = None) -> int:
    """Add one random tile whose kind is not yet at four copies; returns it."""
    if all(count >= 4 for count in tiles34[:34]):
        raise ValueError("every kind already holds four copies")
    chooser = rng if rng is not None else random
    while True:
        tile = chooser.randrange(34)
        if tiles34[tile] < 4:
            tiles34[tile] += 1
            return tile


def number_to_chinese_shanten(num: int) -> str:
    """Chinese name of a shanten number (-1 means a complete hand)."""
    if not -1 <= num < len(_CHINESE_SHANTEN) - 1:
        raise ValueError(f"shanten out of range: {num}")
    return _CHINESE_SHANTEN[num + 1]


def rate_above_one(x: float, y: float) -> float:
    """Ratio of the larger to the smaller value (1 if equal, max float if one is zero)."""
    if x == y:
        return 1.0
    if x == 0 or y == 0:
        return sys.float_info.max
    return x / y if x > y else y / x


def in_delta(a: float, b: float, delta: float) -> bool:
    return abs(a - b) < delta


def equal(a: float, b: float) -> bool:
    """Float equality within 1e-5."""
    return in_delta(a, b, 1e-5)