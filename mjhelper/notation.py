"""Conversion between tile indexes and the compact human notation (e.g. "123m 45p 7z")."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "TileParseError",
    "tiles34_to_tiles",
    "tiles_to_tiles34",
    "str_to_tile34",
    "str_to_tiles34",
    "str_to_tiles",
    "parse_tile",
    "parse_tiles34",
    "parse_tiles",
    "tiles34_to_str",
    "tiles_to_str",
    "tile34_to_str",
    "tiles_to_str_with_bracket",
    "tiles34_to_str_with_bracket",
]

_SUITS = "mpsz"
_SUIT_BOUNDS = ((0, 9, "m "), (9, 18, "p "), (18, 27, "s "), (27, 34, "z"))


class TileParseError(ValueError):
    """Raised when a tile or hand in human notation cannot be parsed."""


def tiles34_to_tiles(tiles34: Sequence[int]) -> list[int]:
    """Expand per-kind counts into a sorted list of tile indexes."""
    return [tile for tile, count in enumerate(tiles34) for _ in range(count)]


def tiles_to_tiles34(tiles: Iterable[int]) -> list[int]:
    """Count tiles per kind (34 kinds)."""
    tiles34 = [0] * 34
    for tile in tiles:
        tiles34[tile] += 1
    return tiles34


def str_to_tile34(human_tile: str) -> tuple[int, bool]:
    """Parse a single tile such as "3m" or "0p" (red five).

    Returns the tile index and whether it is a red five.
    """
    error = TileParseError(f"invalid tile: {human_tile!r}")
    text = human_tile.strip()
    if len(text) != 2:
        raise error
    rank, suit = text[0], text[1]
    if suit not in "mpszMPSZ":
        raise error
    suit_index = _SUITS.index(suit.lower())

    is_red_five = False
    if rank == "0":
        if suit_index == 3:
            raise error
        rank = "5"
        is_red_five = True
    if not ("1" <= rank <= "9"):
        raise error

    tile34 = 9 * suit_index + int(rank) - 1
    if tile34 >= 34:
        raise error
    return tile34, is_red_five


def str_to_tiles34(human_tiles: str) -> tuple[list[int], list[int]]:
    """Parse a hand such as "224m 24p" (spaces optional, "0" for red fives).

    Returns the per-kind counts and the number of red fives per suit (m, p, s).
    """
    spaced = human_tiles
    for suit in _SUITS:
        spaced = spaced.replace(suit, suit + " ")
    spaced = spaced.strip()
    if not spaced:
        raise TileParseError("the hand to parse must not be empty")

    tiles34 = [0] * 34
    num_red_fives = [0] * 3
    for part in spaced.split(" "):
        part = part.strip()
        if not part:
            continue
        if len(part) < 2:
            raise TileParseError(f"invalid hand: {human_tiles!r}")
        suit = part[-1]
        for rank in part[:-1]:
            tile34, is_red_five = str_to_tile34(rank + suit)
            tiles34[tile34] += 1
            if tiles34[tile34] > 4:
                raise TileParseError(
                    f"invalid hand: {human_tiles!r} has more than 4 identical tiles"
                )
            if is_red_five:
                num_red_fives[tile34 // 9] += 1
    return tiles34, num_red_fives


def str_to_tiles(human_tiles: str) -> tuple[list[int], list[int]]:
    """Parse a hand into a sorted list of tile indexes, plus red fives per suit."""
    tiles34, num_red_fives = str_to_tiles34(human_tiles)
    return tiles34_to_tiles(tiles34), num_red_fives


def parse_tile(human_tile: str) -> int:
    """Parse a single tile and return only its index."""
    return str_to_tile34(human_tile)[0]


def parse_tiles34(human_tiles: str) -> list[int]:
    """Parse a hand and return only its per-kind counts."""
    return str_to_tiles34(human_tiles)[0]


def parse_tiles(human_tiles: str) -> list[int]:
    """Parse a hand and return only its sorted tile indexes."""
    return str_to_tiles(human_tiles)[0]


def tiles34_to_str(tiles34: Sequence[int]) -> str:
    """Format per-kind counts, e.g. counts of 1m,3m,1p -> "13m 1p"."""
    parts = []
    for lower, upper, suffix in _SUIT_BOUNDS:
        digits = "".join(
            str(offset + 1) * count
            for offset, count in enumerate(tiles34[lower:upper])
        )
        if digits:
            parts.append(digits + suffix)
    return "".join(parts).strip()


def tiles_to_str(tiles: Iterable[int]) -> str:
    """Format tile indexes, e.g. [9, 11, 27] -> "13p 1z"."""
    return tiles34_to_str(tiles_to_tiles34(tiles))


def tile34_to_str(tile34: int) -> str:
    """Format one tile index, e.g. 2 -> "3m"."""
    return tiles_to_str([tile34])


def tiles_to_str_with_bracket(tiles: Iterable[int]) -> str:
    """Format tile indexes inside brackets, e.g. "[13p 1z]"."""
    return f"[{tiles_to_str(tiles)}]"


def tiles34_to_str_with_bracket(tiles34: Sequence[int]) -> str:
    """Format per-kind counts inside brackets."""
    return f"[{tiles34_to_str(tiles34)}]"