# mjhelper

Building blocks for analysing Riichi mahjong hands, in plain Python with no
dependencies outside the standard library.

Tiles are numbered 0–33: 0–8 are 1m–9m, 9–17 are 1p–9p, 18–26 are 1s–9s and
27–33 are the honours 1z–7z (east, south, west, north, white, green, red).
Most functions take a hand as a list of 34 counts ("tiles34").

## Modules

- **`mjhelper.notation`**: convert between strings such as `"123m 456p 77z"`
  and count lists or tile index lists. Red fives are written as `0` (`"0p"`).
  `parse_tile`, `parse_tiles34` and `parse_tiles` return just the tiles;
  `str_to_tile34`, `str_to_tiles34` and `str_to_tiles` also report red fives.
  `tiles34_to_str`, `tiles_to_str`, `tile34_to_str` and the `..._with_bracket`
  variants format tiles back. Bad input raises `TileParseError` (a
  `ValueError`).
- **`mjhelper.tiles`**: the `Waits` mapping (tile → copies left) with
  `all_count`, `available_tiles`, `indexes`, `parse_index`, `tiles_zh` and
  `equals`; tile tables (`MAHJONG`, `MAHJONG_ZH`, `YAOCHU_TILES`); helpers such
  as `is_yaochupai`, `is_isolated_tile`, `count_of_tiles34`,
  `init_left_tiles34_with_tiles34`, `outside_tiles`, `random_add_tile` and
  `number_to_chinese_shanten`.
- **`mjhelper.shanten`**: `calculate_shanten`, `calculate_shanten_of_normal`
  and `calculate_shanten_of_chiitoi` for hands of 3k+1 or 3k+2 tiles
  (−1 is a complete hand, 0 is tenpai; thirteen orphans is not considered).
  More than 14 tiles raises `ValueError`.
- **`mjhelper.search`**: `calculate_shanten_and_waits13` returns the shanten
  of a 3k+1 hand and its waits, counted against the tiles still unseen.
  `search13`, `search14` and `search_shanten14` build the tree of draws that
  advance the hand and discards that keep its shanten (`SearchNode13`,
  `SearchNode14`).
- **`mjhelper.tenpai`**: `calc_tenpai_rate` estimates how likely an opponent
  without riichi is to be tenpai from their melds and hand-cut discards;
  `get_tenpai_rate3` adapts a rate to three-player games.
- **`mjhelper.wall`**: no-chance, double-no-chance and one-chance tiles from
  the copies left (`calc_nc_safe_tiles`, `calc_dnc_safe_tiles`,
  `calc_dnc_safe_tiles_with_discards`, `calc_oc_safe_tiles`,
  `calc_wall_tiles`), returned as a sorted `WallSafeTileList`.
- **`mjhelper.risk`**: `calculate_risk_tiles34` gives the deal-in rate of each
  tile against a riichi player from the turn, genbutsu, walls, suji and dora,
  as a `RiskTiles34` that can be scaled with `fix_with_early_outside` and
  `fix_with_global_multi`. Also `calc_tile_type27` and
  `calculate_left_no_suji_tiles`.
- **`mjhelper.yaku`**: the `Yaku` enumeration with names, han and yakuman
  tables; `yaku_types_to_str`, `yaku_types_with_dora_to_str`,
  `calc_yaku_han` and `calc_yakuman_times`.
- **`mjhelper.tile_value`**: `calculate_isolated_tile_value` and
  `calculate_tile_value`, the value of a discard candidate from dora and
  wind/dragon status.
- **`mjhelper.meld`**: `calculate_meld_shanten` lists the pon and chi that can
  be made with another player's discard (`Meld`, `MeldType`) and the lowest
  shanten after them.
- **`mjhelper.display`**: `Color` choices for wait counts, discard alerts and
  risk levels.

## Example

```python
from mjhelper.notation import parse_tiles34
from mjhelper.shanten import calculate_shanten
from mjhelper.search import calculate_shanten_and_waits13
from mjhelper.tiles import number_to_chinese_shanten

hand = parse_tiles34("123456789m 1134s")
print(calculate_shanten(hand))                   # 0

shanten, waits = calculate_shanten_and_waits13(hand, None)
print(number_to_chinese_shanten(shanten), waits) # 听牌 8 进张 [25s]
```

## What it does not do

- It has no command and does not connect to any game client; it is a library
  to be called from your own code.
- It does not rank discards for you: there is no combined discard
  recommendation with improvement tiles, win rates or expected points.
- It does not detect the yaku of a finished hand or compute its score; the
  `mjhelper.yaku` module only holds the yaku tables and sums han and yakuman
  multiples for yaku you give it.

## Running the tests

```
pip install -e ".[test]"
pytest
```