"""Search trees of draws that advance shanten and discards that keep it."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from mjhelper.shanten import SHANTEN_AGARI, SHANTEN_TENPAI, calculate_shanten
from mjhelper.tiles import MAHJONG, Waits, init_left_tiles34_with_tiles34

__all__ = [
    "SearchNode13",
    "SearchNode14",
    "search13",
    "search14",
    "search_shanten14",
    "calculate_shanten_and_waits13",
]


@dataclass
class SearchNode13:
    """A 3k+1 hand: its shanten, waits and the draws that advance it."""

    shanten: int
    waits: Waits = field(default_factory=Waits)
    children: dict[int, SearchNode14 | None] = field(default_factory=dict)

    def format(self, prefix: str = "") -> str:
        lines = []
        for draw_tile, node14 in self.children.items():
            lines.append(f"{prefix}摸 {MAHJONG[draw_tile]}\n")
            lines.append(_format14(node14, prefix + "  "))
        return "".join(lines)

    def __str__(self) -> str:
        return self.format()


@dataclass
class SearchNode14:
    """A 3k+2 hand: its target shanten and the discards that keep it."""

    shanten: int
    children: dict[int, SearchNode13] = field(default_factory=dict)

    def format(self, prefix: str = "") -> str:
        return _format14(self, prefix)

    def __str__(self) -> str:
        return self.format()


def _format14(node: SearchNode14 | None, prefix: str) -> str:
    if node is None or node.shanten == SHANTEN_AGARI:
        return prefix + "end\n"
    lines = []
    for discard_tile, node13 in node.children.items():
        lines.append(f"{prefix}舍 {MAHJONG[discard_tile]}\n")
        lines.append(node13.format(prefix + "  "))
    return "".join(lines)


def search13(
    current_shanten: int,
    hand_tiles34: list[int],
    left_tiles34: list[int],
    stop_at_shanten: int,
) -> SearchNode13:
    """Explore draws that advance a 3k+1 hand, down to ``stop_at_shanten``.

    The lists are modified during the search and restored before returning.
    """
    waits = Waits()
    children: dict[int, SearchNode14 | None] = {}
    is_tenpai = current_shanten == SHANTEN_TENPAI

    for tile in range(34):
        if hand_tiles34[tile] == 4:
            continue
        hand_tiles34[tile] += 1
        try:
            if is_tenpai:
                if calculate_shanten(hand_tiles34) == SHANTEN_AGARI:
                    waits[tile] = left_tiles34[tile]
                    children[tile] = None
            elif calculate_shanten(hand_tiles34) < current_shanten:
                # recorded even with zero copies left: the kind matters for furiten
                waits[tile] = left_tiles34[tile]
                if left_tiles34[tile] > 0 and current_shanten - 1 >= stop_at_shanten:
                    left_tiles34[tile] -= 1
                    try:
                        children[tile] = search14(
                            current_shanten - 1, hand_tiles34, left_tiles34, stop_at_shanten
                        )
                    finally:
                        left_tiles34[tile] += 1
                else:
                    children[tile] = None
        finally:
            hand_tiles34[tile] -= 1

    return SearchNode13(shanten=current_shanten, waits=waits, children=children)


def search14(
    target_shanten: int,
    hand_tiles34: list[int],
    left_tiles34: list[int],
    stop_at_shanten: int,
) -> SearchNode14:
    """Explore discards of a 3k+2 hand that leave it at ``target_shanten``.

    Passing the current shanten plus one explores discards that step back.
    """
    children: dict[int, SearchNode13] = {}
    for tile in range(34):
        if hand_tiles34[tile] == 0:
            continue
        hand_tiles34[tile] -= 1
        try:
            if calculate_shanten(hand_tiles34) == target_shanten:
                children[tile] = search13(
                    target_shanten, hand_tiles34, left_tiles34, stop_at_shanten
                )
        finally:
            hand_tiles34[tile] += 1
    return SearchNode14(shanten=target_shanten, children=children)


def search_shanten14(
    shanten: int,
    hand_tiles34: list[int],
    left_tiles34: list[int],
    stop_at_shanten: int,
) -> SearchNode14:
    """Search a 3k+2 hand; a complete hand yields an empty node."""
    if shanten == SHANTEN_AGARI:
        return SearchNode14(shanten=shanten)
    return search14(shanten, hand_tiles34, left_tiles34, stop_at_shanten)


def calculate_shanten_and_waits13(
    tiles34: Sequence[int], left_tiles34: Sequence[int] | None = None
) -> tuple[int, Waits]:
    """Shanten and waits of a 3k+1 hand, counting the copies left of each wait."""
    hand = list(tiles34)
    left = list(left_tiles34) if left_tiles34 else init_left_tiles34_with_tiles34(hand)
    shanten = calculate_shanten(hand)
    node13 = search13(shanten, hand, left, shanten)
    return shanten, node13.waits