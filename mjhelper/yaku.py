"""Yaku identifiers, their names, han values and yakuman multipliers."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

__all__ = [
    "Yaku",
    "YAKU_NAMES",
    "OLD_YAKU_NAMES",
    "YAKU_HAN",
    "NAKI_YAKU_HAN",
    "OLD_YAKU_HAN",
    "OLD_NAKI_YAKU_HAN",
    "YAKUMAN_TIMES",
    "NAKI_YAKUMAN_TIMES",
    "OLD_YAKUMAN_TIMES",
    "yaku_types_to_str",
    "yaku_types_with_dora_to_str",
    "calc_yaku_han",
    "calc_yakuman_times",
]


class Yaku(IntEnum):
    # special criteria
    RIICHI = 0
    CHIITOI = 1
    # luck
    TSUMO = 2
    DABURII = 3
    # sequences
    PINFU = 4
    RYANPEIKOU = 5
    IIPEIKOU = 6
    SANSHOKU_DOUJUN = 7
    ITTSUU = 8
    # triplets and quads
    TOITOI = 9
    SAN_ANKOU = 10
    SANSHOKU_DOUKOU = 11
    SAN_KANTSU = 12
    # terminals and honours
    TANYAO = 13
    YAKUHAI = 14
    CHANTA = 15
    JUNCHAN = 16
    HONROUTOU = 17
    SHOUSANGEN = 18
    # suits
    HONITSU = 19
    CHINITSU = 20
    # yakuman
    SUU_ANKOU = 21
    SUU_ANKOU_TANKI = 22
    DAISANGEN = 23
    SHOUSUUSHII = 24
    DAISUUSHII = 25
    TSUUIISOU = 26
    CHINROUTOU = 27
    RYUUIISOU = 28
    CHUUREN = 29
    CHUUREN9 = 30
    SUU_KANTSU = 31
    # old yaku
    SHIIARURAOTAI = 32
    UUMENSAI = 33
    SANRENKOU = 34
    ISSHOKUSANJUN = 35
    # old yakuman
    DAISUURIN = 36
    DAISHARIN = 37
    DAICHIKURIN = 38
    DAICHISEI = 39


YAKU_NAMES: dict[int, str] = {
    Yaku.RIICHI: "立直",
    Yaku.CHIITOI: "七对",
    Yaku.TSUMO: "自摸",
    Yaku.DABURII: "w立",
    Yaku.PINFU: "平和",
    Yaku.RYANPEIKOU: "两杯口",
    Yaku.IIPEIKOU: "一杯口",
    Yaku.SANSHOKU_DOUJUN: "三色",
    Yaku.ITTSUU: "一通",
    Yaku.TOITOI: "对对",
    Yaku.SAN_ANKOU: "三暗刻",
    Yaku.SANSHOKU_DOUKOU: "三色同刻",
    Yaku.SAN_KANTSU: "三杠子",
    Yaku.TANYAO: "断幺",
    Yaku.YAKUHAI: "役牌",
    Yaku.CHANTA: "混全",
    Yaku.JUNCHAN: "纯全",
    Yaku.HONROUTOU: "混老头",
    Yaku.SHOUSANGEN: "小三元",
    Yaku.HONITSU: "混一色",
    Yaku.CHINITSU: "清一色",
    Yaku.SUU_ANKOU: "四暗刻",
    Yaku.SUU_ANKOU_TANKI: "四暗刻单骑",
    Yaku.DAISANGEN: "大三元",
    Yaku.SHOUSUUSHII: "小四喜",
    Yaku.DAISUUSHII: "大四喜",
    Yaku.TSUUIISOU: "字一色",
    Yaku.CHINROUTOU: "清老头",
    Yaku.RYUUIISOU: "绿一色",
    Yaku.CHUUREN: "九莲",
    Yaku.CHUUREN9: "纯正九莲",
    Yaku.SUU_KANTSU: "四杠子",
}

OLD_YAKU_NAMES: dict[int, str] = {
    Yaku.SHIIARURAOTAI: "十二落抬",
    Yaku.UUMENSAI: "五门齐",
    Yaku.SANRENKOU: "三连刻",
    Yaku.ISSHOKUSANJUN: "一色三顺",
    Yaku.DAISUURIN: "大数邻",
    Yaku.DAISHARIN: "大车轮",
    Yaku.DAICHIKURIN: "大竹林",
    Yaku.DAICHISEI: "大七星",
}

YAKU_HAN: dict[int, int] = {
    Yaku.RIICHI: 1,
    Yaku.CHIITOI: 2,
    Yaku.TSUMO: 1,
    Yaku.DABURII: 2,
    Yaku.PINFU: 1,
    Yaku.RYANPEIKOU: 3,
    Yaku.IIPEIKOU: 1,
    Yaku.SANSHOKU_DOUJUN: 2,
    Yaku.ITTSUU: 2,
    Yaku.TOITOI: 2,
    Yaku.SAN_ANKOU: 2,
    Yaku.SANSHOKU_DOUKOU: 2,
    Yaku.SAN_KANTSU: 2,
    Yaku.TANYAO: 1,
    Yaku.YAKUHAI: 1,
    Yaku.CHANTA: 2,
    Yaku.JUNCHAN: 3,
    Yaku.HONROUTOU: 2,
    Yaku.SHOUSANGEN: 2,
    Yaku.HONITSU: 3,
    Yaku.CHINITSU: 6,
}

NAKI_YAKU_HAN: dict[int, int] = {
    Yaku.SANSHOKU_DOUJUN: 1,
    Yaku.ITTSUU: 1,
    Yaku.TOITOI: 2,
    Yaku.SAN_ANKOU: 2,
    Yaku.SANSHOKU_DOUKOU: 2,
    Yaku.SAN_KANTSU: 2,
    Yaku.TANYAO: 1,
    Yaku.YAKUHAI: 1,
    Yaku.CHANTA: 1,
    Yaku.JUNCHAN: 2,
    Yaku.HONROUTOU: 2,
    Yaku.SHOUSANGEN: 2,
    Yaku.HONITSU: 2,
    Yaku.CHINITSU: 5,
}

OLD_YAKU_HAN: dict[int, int] = {
    Yaku.UUMENSAI: 2,
    Yaku.SANRENKOU: 2,
    Yaku.ISSHOKUSANJUN: 3,
}

OLD_NAKI_YAKU_HAN: dict[int, int] = {
    Yaku.SHIIARURAOTAI: 1,
    Yaku.UUMENSAI: 2,
    Yaku.SANRENKOU: 2,
    Yaku.ISSHOKUSANJUN: 2,
}

YAKUMAN_TIMES: dict[int, int] = {
    Yaku.SUU_ANKOU: 1,
    Yaku.SUU_ANKOU_TANKI: 2,
    Yaku.DAISANGEN: 1,
    Yaku.SHOUSUUSHII: 1,
    Yaku.DAISUUSHII: 2,
    Yaku.TSUUIISOU: 1,
    Yaku.CHINROUTOU: 1,
    Yaku.RYUUIISOU: 1,
    Yaku.CHUUREN: 1,
    Yaku.CHUUREN9: 2,
    Yaku.SUU_KANTSU: 1,
}

NAKI_YAKUMAN_TIMES: dict[int, int] = {
    Yaku.DAISANGEN: 1,
    Yaku.SHOUSUUSHII: 1,
    Yaku.DAISUUSHII: 2,
    Yaku.TSUUIISOU: 1,
    Yaku.CHINROUTOU: 1,
    Yaku.RYUUIISOU: 1,
    Yaku.SUU_KANTSU: 1,
}

OLD_YAKUMAN_TIMES: dict[int, int] = {
    Yaku.DAISUURIN: 1,
    Yaku.DAISHARIN: 1,
    Yaku.DAICHIKURIN: 1,
    Yaku.DAICHISEI: 1,  # combined with tsuuiisou it is in fact a double yakuman
}

_NO_YAKU = "[无役]"


def _bracketed(names: Iterable[str]) -> str:
    return "[" + " ".join(names) + "]"


def yaku_types_to_str(yaku_types: Iterable[int], consider_old_yaku: bool = False) -> str:
    """Names of the given yaku in order, old yaku appended when enabled."""
    types = list(yaku_types)
    if not types:
        return _NO_YAKU
    names = [YAKU_NAMES[t] for t in types if t in YAKU_NAMES]
    if consider_old_yaku:
        names.extend(OLD_YAKU_NAMES[t] for t in types if t in OLD_YAKU_NAMES)
    return _bracketed(names)


def yaku_types_with_dora_to_str(yaku_types: Iterable[int], num_dora: int) -> str:
    """Sorted yaku names followed by the dora count, if any."""
    types = sorted(set(yaku_types))
    if not types:
        return _NO_YAKU
    names = [YAKU_NAMES.get(t, "") for t in types]
    if num_dora > 0:
        names.append(f"宝牌{num_dora}")
    return _bracketed(names)


def calc_yaku_han(
    yaku_types: Iterable[int], is_naki: bool, consider_old_yaku: bool = False
) -> int:
    """Total han of the given (non-yakuman) yaku."""
    types = list(yaku_types)
    table = NAKI_YAKU_HAN if is_naki else YAKU_HAN
    han = sum(table.get(t, 0) for t in types)
    if consider_old_yaku:
        old_table = OLD_NAKI_YAKU_HAN if is_naki else OLD_YAKU_HAN
        han += sum(old_table.get(t, 0) for t in types)
    return han


def calc_yakuman_times(
    yaku_types: Iterable[int], is_naki: bool, consider_old_yaku: bool = False
) -> int:
    """Total yakuman multiplier of the given yaku."""
    types = list(yaku_types)
    table = NAKI_YAKUMAN_TIMES if is_naki else YAKUMAN_TIMES
    times = sum(table.get(t, 0) for t in types)
    if consider_old_yaku and not is_naki:
        times += sum(OLD_YAKUMAN_TIMES.get(t, 0) for t in types)
    return times