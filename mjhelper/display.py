"""Colours used to highlight wait counts, dangerous discards and deal-in risk."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["Color", "waits_count_color", "other_discard_alert_color", "num_risk_color"]


class Color(IntEnum):
    """ANSI foreground colour codes."""

    RED = 31
    WHITE = 37
    HI_RED = 91
    HI_YELLOW = 93
    HI_CYAN = 96


def _grade_waits(fixed_waits_count: float) -> Color:
    if fixed_waits_count < 13:
        return Color.HI_CYAN
    if fixed_waits_count <= 18:
        return Color.HI_YELLOW
    return Color.HI_RED


def waits_count_color(shanten: int, waits_count: float) -> Color:
    """Colour grading how good a wait count is for the given shanten."""
    if shanten == 0:
        return _grade_waits(waits_count * 3)
    weight = 2 ** max(0, shanten - 1)
    return _grade_waits(waits_count / weight)


def other_discard_alert_color(index: int) -> Color:
    """Colour alerting to an opponent's discard of a middle tile."""
    if index < 0:
        raise ValueError(f"invalid tile index: {index}")
    if index >= 27:
        return Color.WHITE
    rank = index % 9 + 1
    if rank in (1, 2, 8, 9):
        return Color.WHITE
    if rank in (3, 7):
        return Color.HI_YELLOW
    return Color.HI_RED


def num_risk_color(risk: float) -> Color:
    """Colour for a deal-in rate in percent."""
    if risk < 5:
        return Color.HI_CYAN
    if risk < 10:
        return Color.HI_YELLOW
    if risk < 15:
        return Color.HI_RED
    return Color.RED