# sotile

A small tile-based puzzle game. You walk a character around a walled map,
pick up every collectible, keep clear of the enemies and then step onto the
exit. The window is drawn with pygame, and sprites are read from XPM image
files.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Playing

```
sotile path/to/level.ber
```

The command takes exactly one argument, a map file whose name ends in
`.ber`. Sprites are read from an `assets/` directory under the current
working directory, which must hold `wall.xpm`, `floor.xpm`,
`collectibles.xpm`, `exit.xpm`, `player_up.xpm`, `player_down.xpm`,
`player_left.xpm`, `player_right.xpm` and `enemy.xpm`. Tiles are 64 by 64
pixels, and the window is sized to fit the map.

Controls:

| Key   | Action     |
|-------|------------|
| W     | move up    |
| A     | move left  |
| S     | move down  |
| D     | move right |
| Esc   | quit       |

Closing the window quits as well. Each move is counted; the count is shown
at the top left of the window and each key press and move is also printed
to standard output. Reaching the exit prints the total number of moves;
walking into an enemy prints a game-over message. Either ends the game and
closes the window.

The command exits with status 1 and prints a message when:

- the number of arguments is wrong (`ERROR: Invalid arguments`);
- the file name does not end in `.ber` (`ERROR: Invalid map file`);
- the map breaks a rule below (the reason, then `ERROR: Invalid map`);
- the sprites cannot be read or the window cannot be opened
  (`ERROR: Game init failed`).

Otherwise it exits with status 0.

## Map format

A map is a text file of equal-length lines made of these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `E`  | exit         |
| `C`  | collectible  |
| `X`  | enemy        |

A map is accepted only when, checked in this order:

- it contains no other characters (`Invalid characters`);
- it is rectangular (`Map not rectangular`);
- its border is all wall (`Missing walls`);
- it has exactly one `P`, exactly one `E` and at least one `C`
  (`Invalid P/E/C count`);
- every collectible and the exit can be reached from the start without
  crossing walls or enemies (`Unreachable elements`).

Example:

```
1111111
1P0C0E1
1000X01
1111111
```

The exit stays closed until every collectible has been picked up. Enemies
do not move; walking into one ends the game.

## Using the modules

- `sotile.gamemap`: `parse_map(lines)` and `read_map(path)` build a checked
  `GameMap` and raise `MapError` for a bad map. A `GameMap` has `grid`,
  `player`, `collectibles`, `enemies`, `width`, `height`, `tile(x, y)`,
  `count(tile)` and `is_path_valid()`.
- `sotile.game`: `Game(game_map, echo=print)` holds the state of a run
  (`moves`, `collected`, `facing`, `outcome`, `over`). `Game.move(dx, dy)`
  and `Game.key_press(key)` return an `Outcome` (`IGNORED`, `BLOCKED`,
  `MOVED`, `CAUGHT`, `WON`, `QUIT`). `Key` lists the key symbols the game
  reacts to and `Facing` the player sprite directions. Pass `echo=None` to
  silence the printed messages.
- `sotile.xpm`: `read_xpm_file(path)` and `parse_xpm(lines)` decode XPM
  images into an `XpmImage` (`width`, `height`, `pixels`, `to_bytes()`) and
  raise `XpmError` when the data is malformed. Transparent pixels hold
  `TRANSPARENT`. `strip_comments`, `quoted_lines` and `split_words` are the
  text helpers the reader uses.
- `sotile.colors`: `lookup_color(name, suffix)` resolves `#RRGGBB` values and
  named X11 colours; unknown names give 0 and `none` gives -1.
- `sotile.visual`: `rgb_shifts(red_mask, green_mask, blue_mask)` and
  `good_color(color, depth, shifts)` convert 0xRRGGBB colours into pixel
  values for a visual with the given channel masks and depth.
- `sotile.render`: `load_sprites(directory)`, `image_to_surface(image)`,
  `tile_sprite(sprites, tile)` and `draw(game, sprites, surface, font)` turn
  game state into a pygame surface.
- `sotile.app`: `run(path, assets)` plays one map in a window and returns the
  `Outcome`; `main(argv)` is the entry point that `sotile` runs.

## What it does not do

- No sprite images are shipped; you supply the XPM files in `assets/`.
- There is one map per run, given on the command line; there are no level
  lists, saved games or scores kept between runs.
- Enemies stand still, and win or loss is reported only on standard output.