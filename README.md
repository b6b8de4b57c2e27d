# gamedemos

A handful of small game demos built on pygame. Each demo keeps its rules
in plain Python classes and functions, so they can be driven and inspected
without opening a window, and each has a command that opens a window and
plays it.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The demos

### Snake

```
gamedemos-snake
```

A 30 by 20 grid that wraps around at the edges. Steer with the arrow keys;
a second turn pressed before the snake has moved is queued for the move
after, so quick turns are not lost, and turning straight back is refused.
Eating food grows the snake by one segment and moves the food to a random
cell; running into its own body ends the game and the snake stops. The
game advances eight times a second.

In `gamedemos.snake`: `GridPosition` (with `random`, `moved` and
`to_rect`), `Direction` (with `inverse` and `from_key` for pygame key
codes), `Ate`, `Food`, `Snake` (with `eats`, `eats_self` and `update`) and
`GameState`, whose `tick()` advances one step and whose `key_down(key)`
feeds in a key press.

### Astroblasto

```
gamedemos-astroblasto
```

An asteroids-style shooter in a 640 by 480 window. Left and right rotate
the ship, up thrusts, space fires (at most one shot every half second), P
saves the window to `screenshot.png` and Escape quits. Shots hitting rocks
score a point each. Clearing every rock starts the next level with one
more rock than the last. When a rock touches the ship, "Game over!" is
printed and the window closes.

`gamedemos.astroblasto` provides the actor helpers (`create_player`,
`create_rock`, `create_shot`, `create_rocks`), the physics helpers
(`player_handle_input`, `player_thrust`, `update_actor_position`,
`wrap_actor_position`, `handle_timed_life`, `vec_from_angle`,
`random_vec`, `world_to_screen_coords`), `InputState`, and `GameWorld`,
whose `step(dt)` runs one fixed update. `GameWorld` takes optional
`on_shot` and `on_hit` callbacks that are called when a shot is fired and
when a rock is hit.

### Animation

```
gamedemos-animation [--sheet IMAGE]
```

A ball tweened up and down between two points, reversing at each end, and
a looping frame-by-frame sprite animation driven by the same easing
curves.

- Up / Down: change the easing function
- Left / Right: change the sprite animation
- W / S: lengthen or shorten the duration by 0.2 s (never below 0.1 s)

`--sheet` names a sprite sheet of 14 columns by 19 rows. Without it a
numbered placeholder box shows which frame is current.

`gamedemos.animation` holds `EasingKind`, `AnimationType`,
`easing_function`, `ease`, `Keyframe`, `AnimationSequence` (with
`advance_and_maybe_reverse`, `advance_and_maybe_wrap` and `now`),
`TweenableRect`, `AnimationFloor` (which turns any easing curve into a
stepped one), `ball_sequence`, `player_sequence`, `src_y`, `src_x_end`,
`frame_count` and `new_enum_after_key`.

### BunnyMark

```
gamedemos-bunnymark [--texture IMAGE]
```

A sprite benchmark: a thousand bunnies fall and bounce around an 800 by
600 window. A left click adds another thousand (at most once every ten
frames); space switches between batched and one-by-one drawing. The title
bar shows the bunny count, the frame rate and the drawing mode.
`--texture` names the bunny image; without it a plain 26 by 37 box is
drawn.

In `gamedemos.bunnymark`: `Bunny` (with `spawn`) and `BunnyMark`, with
`update`, `click` and `toggle_batched`.

### Simple demos

```
gamedemos-simple [super_simple | hello_world | eventloop] [--font FONT]
```

- `super_simple` (the default): a circle sliding right across the screen
  and wrapping around.
- `hello_world`: "Hello, world!" drifting diagonally, with the frame rate
  printed every hundred frames. `--font` names a font file; without it
  pygame's default font is used.
- `eventloop`: a sliding circle in a hand-written event loop that prints
  every other event it receives; Escape quits.

`gamedemos.simple` holds `SuperSimple` and `HelloWorld`.

### Logging

```
gamedemos-logdemo [--log-file PATH]
```

Logs to the console and to a file (`out.log` by default) at the same
time. Key presses are logged; the file copy is written by `FileLogger`
from a queue on each update. Escape quits. `setup_logging(channel)`
installs the console handler and a handler that puts each formatted line
on the queue.

## What it does not do

There is no sound: the shooter offers callbacks for shots and hits but
plays nothing. The shooter draws its ship, rocks and shots as plain
shapes rather than images, and no demo keeps scores or settings between
runs.