import pytest

from mjhelper.yaku import (
    NAKI_YAKU_HAN,
    NAKI_YAKUMAN_TIMES,
    OLD_NAKI_YAKU_HAN,
    OLD_YAKU_HAN,
    OLD_YAKUMAN_TIMES,
    YAKU_HAN,
    YAKUMAN_TIMES,
    Yaku,
    calc_yaku_han,
    calc_yakuman_times,
    yaku_types_to_str,
    yaku_types_with_dora_to_str,
)


def test_yaku_types_to_str_examples():
    assert yaku_types_to_str([]) == "[无役]"
    assert (
        yaku_types_to_str([Yaku.PINFU, Yaku.IIPEIKOU, Yaku.SANSHOKU_DOUJUN])
        == "[平和 一杯口 三色]"
    )
    assert (
        yaku_types_to_str([Yaku.CHIITOI, Yaku.HONROUTOU, Yaku.HONITSU])
        == "[七对 混老头 混一色]"
    )
    assert (
        yaku_types_to_str([Yaku.SAN_ANKOU, Yaku.YAKUHAI, Yaku.YAKUHAI, Yaku.SHOUSANGEN])
        == "[三暗刻 役牌 役牌 小三元]"
    )


def test_old_yaku_names_only_when_enabled():
    types = [Yaku.SAN_ANKOU, Yaku.SANRENKOU]
    assert yaku_types_to_str(types, consider_old_yaku=True) == "[三暗刻 三连刻]"
    assert yaku_types_to_str(types) == "[三暗刻]"
    assert yaku_types_to_str([Yaku.TSUUIISOU, Yaku.DAICHISEI], True) == "[字一色 大七星]"


def test_yaku_types_with_dora_sorted():
    text = yaku_types_with_dora_to_str({Yaku.PINFU, Yaku.RIICHI}, 0)
    assert text == yaku_types_to_str([Yaku.RIICHI, Yaku.PINFU])
    assert yaku_types_with_dora_to_str(set(), 3) == "[无役]"


def test_yaku_types_with_dora_appends_count():
    with_dora = yaku_types_with_dora_to_str({Yaku.TANYAO}, 2)
    without = yaku_types_with_dora_to_str({Yaku.TANYAO}, 0)
    assert with_dora.startswith(without[:-1])
    assert with_dora.endswith("宝牌2]")


@pytest.mark.parametrize("yaku", list(YAKU_HAN))
def test_single_closed_han(yaku):
    assert calc_yaku_han([yaku], is_naki=False) == YAKU_HAN[yaku]


@pytest.mark.parametrize("yaku", list(YAKU_HAN))
def test_single_open_han(yaku):
    assert calc_yaku_han([yaku], is_naki=True) == NAKI_YAKU_HAN.get(yaku, 0)
    assert calc_yaku_han([yaku], is_naki=True) <= calc_yaku_han([yaku], is_naki=False)


def test_han_is_additive():
    types = [Yaku.RIICHI, Yaku.PINFU, Yaku.TANYAO, Yaku.YAKUHAI, Yaku.YAKUHAI]
    assert calc_yaku_han(types, False) == sum(calc_yaku_han([t], False) for t in types)


def test_closed_only_yaku_worth_nothing_open():
    assert calc_yaku_han([Yaku.RIICHI, Yaku.PINFU, Yaku.TSUMO], True) == 0


def test_old_yaku_han_switch():
    assert calc_yaku_han([Yaku.ISSHOKUSANJUN], False) == 0
    assert calc_yaku_han([Yaku.ISSHOKUSANJUN], False, True) == OLD_YAKU_HAN[Yaku.ISSHOKUSANJUN]
    assert calc_yaku_han([Yaku.SHIIARURAOTAI], True, True) == OLD_NAKI_YAKU_HAN[
        Yaku.SHIIARURAOTAI
    ]
    assert calc_yaku_han([Yaku.SHIIARURAOTAI], False, True) == 0


def test_yakuman_times():
    for yaku, times in YAKUMAN_TIMES.items():
        assert calc_yakuman_times([yaku], False) == times
        assert calc_yakuman_times([yaku], True) == NAKI_YAKUMAN_TIMES.get(yaku, 0)
    combo = [Yaku.SUU_ANKOU_TANKI, Yaku.DAISUUSHII, Yaku.TSUUIISOU]
    assert calc_yakuman_times(combo, False) == sum(YAKUMAN_TIMES[y] for y in combo)


def test_old_yakuman_only_closed_and_enabled():
    assert calc_yakuman_times([Yaku.DAISUURIN], False) == 0
    assert calc_yakuman_times([Yaku.DAISUURIN], False, True) == OLD_YAKUMAN_TIMES[
        Yaku.DAISUURIN
    ]
    assert calc_yakuman_times([Yaku.DAISUURIN], True, True) == 0


def test_normal_yaku_are_not_yakuman():
    assert calc_yakuman_times(list(YAKU_HAN), False) == 0