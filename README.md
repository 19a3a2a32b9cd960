# frogger

The pieces of a Frogger-style arcade game built on pygame: the window and
event loop, sprite-sheet drawing of the road, river and their objects, a
sprite font, the main menu, the pause screen, the top-ten table and the
game-over screen where the player types three initials. It also holds a
letter, digit and heart set for a 16x16 dot-matrix display.

## Modules

- `frogger.config` – board geometry and timing constants: lane count, sprite
  sizes, `TOTAL_WIDTH`/`TOTAL_HEIGHT`, the 2.75 drawing scale (`resize`) and
  the screen y of a board row (`row`).
- `frogger.assets` – the source rectangle (`Sprite`) of every sprite on the
  sheet: `frog_assets`, `death_assets`, `car_assets`, `life_assets`,
  `snake_assets`, `crocodile_assets`, `turtle_assets`, `log_assets`,
  `otter_assets`, `char_assets(color)` (colours `"w"`, `"y"`, `"r"`, `"v"`,
  `"b"`; any other raises `ValueError`), `frog_char_assets`, `wall_assets`
  and `special_assets`; the `IntEnum`s that index them (`FrogSprite`,
  `CarSprite`, `LogSprite`, ...); and `draw_sprite`, which blits a sprite
  scaled, optionally flipped, onto a surface.
- `frogger.text` – sprite-font text. `char_index` maps a digit or letter
  (either case) to its glyph; other characters are left blank.
  `glyph_placements` and `sprite_to_text` lay out and draw a string.
  `Text.create` builds a label (centred labels are shifted left by half
  their width), `Text.draw` draws it, `Text.contains` hit-tests a point and
  `Text.update` changes its string. `twinkle` blinks the selected label
  between two fonts and resets the others. `format_score` turns 0–999 into a
  three-digit string and raises `ValueError` outside that range.
- `frogger.glyphs` – `Display`, an in-memory 16x16 on/off buffer
  (`write`, `clear`, `is_on`, `lit`, and `update`, which copies the buffer
  to `shown`; writes outside the grid raise `IndexError`), with
  `vertical_line`, `horizontal_line`, `horizontal_line_off`,
  `draw_letter`, `draw_digit`, `empty_heart` and `full_heart`.
- `frogger.engine` – `init_game(asset_dir)` opens the window, loads the
  sprite sheet and sounds, starts a 30-per-second tick event and loops the
  music. It returns a `GameContext` with `wait_event`, `pending_events`,
  `flip`, `close` and `play_step`, `play_level`, `play_time`,
  `play_lose_life`, `play_music`. `WindowClosed` is the exception raised
  when the player closes the window.
- `frogger.controls` – `action_for_key` maps arrow keys and WASD to an
  `Action` and space to `Action.PAUSE`; `read_input` takes queued events up
  to the first mapped key press (closing the window closes the context and
  raises `WindowClosed`); `flush_input` discards the queue.
- `frogger.drawing` – cars (`draw_car_v1`, `draw_car_v2`), `draw_bus`,
  `draw_log`, `draw_snake`, `draw_turtle_squad`, `draw_frog`,
  `draw_final_frog`, `draw_dead_animation`, `draw_lifes`, the grass strip
  (`draw_full_line`), the top wall (`draw_finish_line`), `draw_timer_bar`,
  `draw_score` and the `animation_level` wipe with "NEXT LEVEL".
- `frogger.menu` – `menu(context)` shows the title and background and
  returns a `MenuChoice` (`START`, `TOP`, `END`); closing the window returns
  `END`.
- `frogger.pause` – `pause(context)` returns a `PauseChoice` (`CONTINUE`,
  `RESTART`, `QUIT`).
- `frogger.highscore` – `top_ten(context, players)` shows up to ten
  `(name, score)` string pairs, stopping at the first name that is `None`,
  each cut to three characters, and returns when the player presses Enter or
  clicks "BACK TO MENU".
- `frogger.once_dead` – `InitialsEntry` edits three letters A–Z;
  `once_dead(context, score_text, points, save)` shows the score, lets the
  player enter initials, calls `save(initials, points)` if given and returns
  the initials.

`pause`, `top_ten` and `once_dead` close the context and raise
`WindowClosed` when the window is closed.

## Assets

`init_game(asset_dir)` needs the sprite sheet `assets.png` in `asset_dir`
and raises `FileNotFoundError` without it. Sounds are read from
`audio/src/` under `asset_dir` (`step.wav`, `looseLife.wav`,
`runningOutOfTime.wav`, `nextLevel.wav`, `music.wav`); any that are missing
or cannot be loaded are simply not played.

## Using it

```python
from frogger.engine import init_game, WindowClosed
from frogger.menu import menu, MenuChoice
from frogger.highscore import top_ten

context = init_game("path/to/assets")
try:
    while True:
        choice = menu(context)
        if choice is MenuChoice.TOP:
            top_ten(context, [("ABC", "120"), ("XYZ", "080")])
        elif choice is MenuChoice.END:
            break
        else:
            ...  # run a level with your own game logic
except WindowClosed:
    pass
finally:
    context.close()
```

The menu and pause screen take the mouse or the up/down arrows and Enter.
On the initials screen, up and down step the selected letter through A–Z
(wrapping), left and right move between the three letters and Enter
finishes.

## What it does not do

- There is no game logic: no lanes, moving objects, collisions, lives or
  level progression. The drawing functions draw what they are given.
- There is no command to start a game; you assemble the screens yourself.
- High scores are not stored. `top_ten` shows the pairs it is passed and
  `once_dead` hands the initials to your `save` callable.
- `glyphs.Display` is only an in-memory buffer; nothing drives a real LED
  matrix or joystick.