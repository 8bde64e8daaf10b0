"""Shanten number (distance from a complete hand) for regular and seven-pairs shapes."""

from __future__ import annotations

from collections.abc import Sequence

from mjhelper.tiles import count_of_tiles34

__all__ = [
    "SHANTEN_AGARI",
    "SHANTEN_TENPAI",
    "calculate_shanten_of_chiitoi",
    "calculate_shanten_of_normal",
    "calculate_shanten",
]

SHANTEN_AGARI = -1
SHANTEN_TENPAI = 0

_HONOR_BIT = 1 << 27


def calculate_shanten_of_chiitoi(tiles34: Sequence[int]) -> int:
    """Seven-pairs shanten: 6 - pairs + max(0, 7 - kinds)."""
    held = [count for count in tiles34 if count > 0]
    pairs = sum(1 for count in held if count >= 2)
    return 6 - pairs + max(0, 7 - len(held))


class _ShantenState:
    """Mutable state of the recursive decomposition of a hand."""

    def __init__(self, tiles34: Sequence[int], count_of_tiles: int) -> None:
        self.tiles = list(tiles34)
        self.melds = (14 - count_of_tiles) // 3
        self.tatsu = 0
        self.pairs = 0
        # honour quads that must be broken up: shanten cannot go below this
        self.jidahai = 0
        # bit sets over 27 number kinds plus one bit for honours
        self.ankan = 0
        self.isolated = 0
        self.min_shanten = 8

    def scan_honors(self, count_of_tiles: int) -> None:
        ankan = 0
        isolated = 0
        for offset, count in enumerate(self.tiles[27:34]):
            if count == 1:
                isolated |= 1 << offset
            elif count == 2:
                self.pairs += 1
            elif count == 3:
                self.melds += 1
            elif count == 4:
                self.melds += 1
                self.jidahai += 1
                ankan |= 1 << offset
                isolated |= 1 << offset

        if self.jidahai > 0 and count_of_tiles % 3 == 2:
            self.jidahai -= 1

        if isolated:
            self.isolated |= _HONOR_BIT
            if ankan | isolated == ankan:
                # the lone honour is only a quad leftover, not a pair candidate
                self.ankan |= _HONOR_BIT

    def normal_shanten(self) -> int:
        shanten = 8 - 2 * self.melds - self.tatsu - self.pairs
        candidates = self.melds + self.tatsu
        if self.pairs > 0:
            candidates += self.pairs - 1
        elif self.ankan and self.isolated and self.ankan | self.isolated == self.ankan:
            # no pair and the only singles come from quads: not even a single wait
            shanten += 1
        if candidates > 4:
            shanten += candidates - 4
        if shanten != SHANTEN_AGARI and shanten < self.jidahai:
            return self.jidahai
        return shanten

    def _set(self, k: int, sign: int) -> None:
        self.tiles[k] -= 3 * sign
        self.melds += sign

    def _pair(self, k: int, sign: int) -> None:
        self.tiles[k] -= 2 * sign
        self.pairs += sign

    def _sequence(self, k: int, sign: int) -> None:
        self.tiles[k] -= sign
        self.tiles[k + 1] -= sign
        self.tiles[k + 2] -= sign
        self.melds += sign

    def _tatsu_adjacent(self, k: int, sign: int) -> None:
        self.tiles[k] -= sign
        self.tiles[k + 1] -= sign
        self.tatsu += sign

    def _tatsu_gap(self, k: int, sign: int) -> None:
        self.tiles[k] -= sign
        self.tiles[k + 2] -= sign
        self.tatsu += sign

    def _single(self, k: int, sign: int) -> None:
        self.tiles[k] -= sign
        if sign > 0:
            self.isolated |= 1 << k
        else:
            self.isolated &= ~(1 << k)

    def _try(self, take, k: int, next_depth: int) -> None:
        take(k, 1)
        self.run(next_depth)
        take(k, -1)

    def run(self, depth: int) -> None:
        if self.min_shanten == SHANTEN_AGARI:
            return
        tiles = self.tiles
        while depth < 27 and tiles[depth] == 0:
            depth += 1
        if depth >= 27:
            self.min_shanten = min(self.min_shanten, self.normal_shanten())
            return

        i = depth % 9
        count = tiles[depth]
        if count == 1:
            if i < 6 and tiles[depth + 1] == 1 and tiles[depth + 2] > 0 and tiles[depth + 3] < 4:
                self._try(self._sequence, depth, depth + 2)
            else:
                self._try(self._single, depth, depth + 1)
                if i < 7 and tiles[depth + 2] > 0:
                    if tiles[depth + 1] != 0:
                        self._try(self._sequence, depth, depth + 1)
                    self._try(self._tatsu_gap, depth, depth + 1)
                if i < 8 and tiles[depth + 1] > 0:
                    self._try(self._tatsu_adjacent, depth, depth + 1)
        elif count == 2:
            self._try(self._pair, depth, depth + 1)
            if i < 7 and tiles[depth + 1] > 0 and tiles[depth + 2] > 0:
                self._try(self._sequence, depth, depth)
        elif count == 3:
            self._try(self._set, depth, depth + 1)

            self._pair(depth, 1)
            if i < 7 and tiles[depth + 1] > 0 and tiles[depth + 2] > 0:
                self._try(self._sequence, depth, depth + 1)
            else:
                if i < 7 and tiles[depth + 2] > 0:
                    self._try(self._tatsu_gap, depth, depth + 1)
                if i < 8 and tiles[depth + 1] > 0:
                    self._try(self._tatsu_adjacent, depth, depth + 1)
            self._pair(depth, -1)

            if i < 7 and tiles[depth + 1] >= 2 and tiles[depth + 2] >= 2:
                self._sequence(depth, 1)
                self._sequence(depth, 1)
                self.run(depth)
                self._sequence(depth, -1)
                self._sequence(depth, -1)
        elif count == 4:
            self._set(depth, 1)
            if i < 7 and tiles[depth + 2] > 0:
                if tiles[depth + 1] > 0:
                    self._try(self._sequence, depth, depth + 1)
                self._try(self._tatsu_gap, depth, depth + 1)
            if i < 8 and tiles[depth + 1] > 0:
                self._try(self._tatsu_adjacent, depth, depth + 1)
            self._try(self._single, depth, depth + 1)
            self._set(depth, -1)

            self._pair(depth, 1)
            if i < 7 and tiles[depth + 2] > 0:
                if tiles[depth + 1] > 0:
                    self._try(self._sequence, depth, depth)
                self._try(self._tatsu_gap, depth, depth + 1)
            if i < 8 and tiles[depth + 1] > 0:
                self._try(self._tatsu_adjacent, depth, depth + 1)
            self._pair(depth, -1)


def calculate_shanten_of_normal(tiles34: Sequence[int], count_of_tiles: int) -> int:
    """Regular-shape shanten (ignoring seven pairs and thirteen orphans).

    Works for hands of 3k+1 and 3k+2 tiles.
    """
    state = _ShantenState(tiles34, count_of_tiles)
    state.scan_honors(count_of_tiles)
    for kind, count in enumerate(state.tiles[:27]):
        if count == 4:
            state.ankan |= 1 << kind
    state.run(0)
    return state.min_shanten


def calculate_shanten(tiles34: Sequence[int]) -> int:
    """Shanten of a hand of 3k+1 or 3k+2 tiles, seven pairs included (no thirteen orphans)."""
    count = count_of_tiles34(tiles34)
    if count > 14:
        raise ValueError(f"a hand holds at most 14 tiles, got {count}")
    shanten = calculate_shanten_of_normal(tiles34, count)
    if count >= 13:
        shanten = min(shanten, calculate_shanten_of_chiitoi(tiles34))
    return shanten