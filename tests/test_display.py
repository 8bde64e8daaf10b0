import pytest

from mjhelper.display import (
    Color,
    num_risk_color,
    other_discard_alert_color,
    waits_count_color,
)


@pytest.mark.parametrize(
    "shanten, waits, expected",
    [
        (0, 4, Color.HI_CYAN),
        (0, 5, Color.HI_YELLOW),
        (0, 6, Color.HI_YELLOW),
        (0, 7, Color.HI_RED),
        (1, 12, Color.HI_CYAN),
        (1, 13, Color.HI_YELLOW),
        (1, 18, Color.HI_YELLOW),
        (1, 19, Color.HI_RED),
        (2, 36, Color.HI_YELLOW),
        (2, 38, Color.HI_RED),
        (3, 50, Color.HI_CYAN),
    ],
)
def test_waits_count_color(shanten, waits, expected):
    assert waits_count_color(shanten, waits) == expected


def test_waits_count_color_higher_shanten_is_more_lenient():
    for waits in range(0, 80):
        order = [Color.HI_CYAN, Color.HI_YELLOW, Color.HI_RED]
        assert order.index(waits_count_color(2, waits)) <= order.index(
            waits_count_color(1, waits)
        )


@pytest.mark.parametrize(
    "index, expected",
    [
        (0, Color.WHITE),
        (1, Color.WHITE),
        (2, Color.HI_YELLOW),
        (3, Color.HI_RED),
        (4, Color.HI_RED),
        (5, Color.HI_RED),
        (6, Color.HI_YELLOW),
        (7, Color.WHITE),
        (8, Color.WHITE),
        (13, Color.HI_RED),
        (24, Color.HI_YELLOW),
        (27, Color.WHITE),
        (33, Color.WHITE),
    ],
)
def test_other_discard_alert_color(index, expected):
    assert other_discard_alert_color(index) == expected


def test_other_discard_alert_color_same_per_suit():
    for rank in range(9):
        assert (
            other_discard_alert_color(rank)
            == other_discard_alert_color(rank + 9)
            == other_discard_alert_color(rank + 18)
        )


def test_other_discard_alert_color_rejects_negative():
    with pytest.raises(ValueError):
        other_discard_alert_color(-1)


@pytest.mark.parametrize(
    "risk, expected",
    [
        (0.0, Color.HI_CYAN),
        (4.99, Color.HI_CYAN),
        (5, Color.HI_YELLOW),
        (9.9, Color.HI_YELLOW),
        (10, Color.HI_RED),
        (14.9, Color.HI_RED),
        (15, Color.RED),
        (40, Color.RED),
    ],
)
def test_num_risk_color(risk, expected):
    assert num_risk_color(risk) == expected