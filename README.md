# candycrisis

Rules and state for a two-player falling-candy puzzle game, in plain Python
with no dependencies beyond the standard library. Candy pairs fall onto a
6 × 13 grid per player; same-coloured neighbours link up, bombs blow up
colours or areas, magic candies change colour, and gray junk sits in the way.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `candycrisis.layout`: `Point` and `Rect` (with `offset`, `contains`,
  `union`, `width`, `height`), `center_rect_on_screen` for placing a
  rectangle on the 640 × 480 screen, `quick_resource_name` and
  `find_resource_dir` (raising `ResourceError`) for locating resource files,
  and `window_scale` for choosing a window size that covers at most 75% of a
  display.
- `candycrisis.rng`: `PieceRandom`, a seeded linear congruential generator
  with a separate stream per player. `start` shuffles the colour map,
  `get_piece`, `get_magic` and `get_grenade` decide each player's pieces,
  `add_extra_piece` lets one more colour appear, and `random_before` gives
  numbers below a bound.
- `candycrisis.board`: `Board` (per-cell grid, suction, charring and glow),
  the `Cell`, `Suction` and `Rotation` enumerations, `is_blob`, and
  `FallingPiece` with moving, half-cell falling and clockwise rotation that
  kicks off walls and reports when the piece must lock down.
- `candycrisis.placement`: `place_piece` fixes a landed pair into the grid,
  `place_grenade` explodes a bomb and returns a `GrenadeResult` (points,
  destroyed cells, charred cells), `settle_step` drops floating cells one row
  and advances landing jiggles, `resolve_suction` links same-coloured
  neighbours, `fade_charred` lightens scorch marks, and `handle_magic` cycles
  a magic candy's colour.
- `candycrisis.score`: `ScoreBoard` with a displayed score that rolls towards
  the real one (`advance_displayed_score`), `character_index` for the number
  font, and `score_window_rects`.
- `candycrisis.next`: `NextPreview`, the timing of the next-piece window's
  idle jiggles and its pull towards the board, with `jiggle_frame`,
  `pull_offsets` and `next_window_rects`.
- `candycrisis.dialog_text`: colours for dialog text (`TextStyle`,
  `rainbow_colors`), the continue dialog's `continue_countdown` and
  `credits_line`, the dark rounded border of a dialog box over an image held
  as rows of 32-bit pixels (`get_edges`, `curve_edges`, `halfbright`), and
  `edit_name` for typing a high-score name.
- `candycrisis.prefs`: the binary preferences file of named length-prefixed
  records: `encode_records`, `read_records`, `prefs_path`, `load_prefs` and
  `save_prefs`.

## Example

```python
from candycrisis.board import Board, FallingPiece
from candycrisis.placement import place_piece, resolve_suction
from candycrisis.rng import PieceRandom

rng = PieceRandom()
rng.start(num_pieces=4, seed=12345)

board = Board()
piece = FallingPiece(color_a=rng.get_piece(0), color_b=rng.get_piece(0))
if piece.can_go_left(board):
    piece.go_left()
piece.rotate(board)
while piece.can_fall(board):
    piece.fall()
place_piece(board, piece)
resolve_suction(board)
```

Preferences are stored as a series of named binary records:

```python
from pathlib import Path
from candycrisis.prefs import prefs_path, save_prefs, load_prefs

path = prefs_path(Path("settings"))
save_prefs(path, {"MusicOn": b"\x01", "SoundOn": b"\x01"})
settings = load_prefs(path, {"MusicOn": 1, "SoundOn": 1})
```

## What the package does not do

It is game logic only. There is no command to start a game and no main loop
tying the pieces together; it draws nothing, plays no sound or music and
reads no keyboard or mouse. It has no computer opponent, no per-player role
state machine, no cluster clearing or scoring of chains, and no layout or
click handling for the pause, controls, video or continue dialogs beyond the
text, countdown, border and name-entry helpers listed above.