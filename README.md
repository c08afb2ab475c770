# brickbreak

A small brick-breaking arcade game built on pygame. You move a paddle near
the bottom of the screen and bounce a ball into a wall of blocks, 10 columns
by 8 rows. Each block you break scores a point. About one block in five is a
red "super" block: breaking it also scores a point and makes the ball 15%
faster. The game moves to the end screen when the ball reaches the bottom of
the screen.

## Installing

```
pip install .
```

## Playing

```
brickbreak --textures path/to/textures
```

Options:

- `--textures DIR`: the directory holding the textures (default `Textures`).
- `--width N`, `--height N`: the window's client size (default 1024 by 768).

The texture directory must hold `starfield.dds`, `sphere-04.png`,
`paddle.png` and `block_purple.png`. Only uncompressed 24- or 32-bit DDS
files can be read. If the window or a texture cannot be set up, the command
prints the error and exits with status 1.

Controls:

- Left click on the main menu to start. Clicking during a game ends it.
  Clicking on the end screen returns to the main menu.
- Hold `A` to move the paddle left and `D` to move it right.
- Keys `1` to `4` cap the frame rate at 60 divided by that number; `0`
  removes the cap.

The frame rate is shown in the top-left corner and the score below it.

## What the game does not do

There are no lives, levels, sound or win condition: breaking every block does
not end the game. Returning to the main menu does not reset the score, the
ball or the blocks.

## Using the pieces

The collision helpers in `brickbreak.collision` work without a display:

```python
from brickbreak.collision import Box2D, Circle, box_circle_check, reflect_circle_box

box = Box2D((100.0, 100.0), (20.0, 10.0))
ball = Circle((100.0, 80.0), 5.0)
hit = box_circle_check(box, ball)
position, velocity = reflect_circle_box(ball, (0.0, 200.0), 0.1, box)
```

`box_box_check`, `circle_circle_check` and `line_line_check` are there too;
`line_line_check` returns a `LineIntersection` or `None` for parallel lines.

The other modules:

- `brickbreak.sprite`: `Sprite` and `Pivot`, for positioned, scaled, rotated,
  tinted and frame-animated texture regions.
- `brickbreak.entities`: `Ball`, `Block`, `SuperBlock` and `Paddle`.
- `brickbreak.texture`: `Texture` loading and clipped blitting, raising
  `TextureError` when a file cannot be loaded.
- `brickbreak.timer`: a frame `Timer` giving `delta_time` and
  `frames_per_second`.
- `brickbreak.font`: a `Font` for drawing and measuring text.
- `brickbreak.app`: `GameWindow`, the frame loop; subclass it and override
  `update` and `render`.
- `brickbreak.game`: `BreakoutGame`, `GameState` and the `main` command.

## Running the tests

```
pip install .[test]
pytest
```