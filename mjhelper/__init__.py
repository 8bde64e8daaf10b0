"""Riichi mahjong hand analysis: notation, shanten, waits, wall reading, risk, yaku tables and calls."""

__version__ = "0.1.0"

__all__ = [
    "display",
    "meld",
    "notation",
    "risk",
    "search",
    "shanten",
    "tenpai",
    "tile_value",
    "tiles",
    "wall",
    "yaku",
]