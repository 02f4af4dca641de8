# barrelclimb

The rules and frame loop of a single-screen arcade game: climb the girders,
jump the barrels that keep appearing at the top, grab a hammer to smash them,
and reach the top platform. Everything runs on pygame.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
barrelclimb
```

Options:

| Option          | Effect                                              |
|-----------------|-----------------------------------------------------|
| `--headless`    | draw into an off-screen buffer instead of a window  |
| `--frames N`    | stop after `N` frames have been run                 |

For example, `barrelclimb --headless --frames 300` runs five seconds of game
time at 60 frames per second without opening a window. Closing the window
ends the game.

The game begins on the start screen; press **Return** to switch to play.

| Key       | Action                                   |
|-----------|------------------------------------------|
| A / D     | Walk left / right                        |
| W / S     | Climb up / down while on a ladder        |
| Space     | Jump                                     |

Rules, as `barrelclimb.playfield.PlayScreen` and `barrelclimb.player.Player`
apply them:

- a new barrel appears every 2 seconds;
- jumping over a barrel scores 100 points;
- touching a barrel while holding a hammer (and standing on the ground)
  smashes it for 300 points;
- a hammer lasts 10 seconds, and ladders cannot be climbed while holding it;
- touching a barrel without a hammer costs a life and starts the level again,
  as does reaching the top of the screen;
- a barrel that reaches the oil drum at the bottom left sets it alight.

## What it does not do

The package has the game's rules, physics and loop, but no artwork and no
sound:

- no image files are loaded, so the sprites have sizes and positions but
  nothing is drawn; the window stays black while the game runs;
- the start screen is an empty entity that only waits for Return;
- barrels are plain colliders that stay where they appear; they do not roll
  down the girders;
- no music or sound effects are played when the game is started with the
  `barrelclimb` command.

## Using the pieces

The modules can be used on their own:

- `barrelclimb.vector` – the immutable `Vector2` (with `magnitude`,
  `magnitude_sqr`, `normalized`, `+`, `-`, scalar `*`), `lerp`,
  `rotate_vector` (degrees) and `BezierCurve.point_at`, which rounds the
  point it returns.
- `barrelclimb.entity` – `GameEntity`, a position/rotation/scale node with
  `reparent`, `translate`, `rotate` and `world_position` / `world_rotation` /
  `world_scale`; `Space` chooses local or world movement.
- `barrelclimb.timer` – `Timer`, measuring time since the last `reset` from a
  millisecond clock you may supply.
- `barrelclimb.rng` – `Random`, a seedable source with `random_int`,
  `random_float` and `random_range`.
- `barrelclimb.physics` – `CircleCollider`, `circle_vs_circle`, `PhysEntity`
  and `PhysicsManager`, with `CollisionLayer` and `CollisionFlag` choosing
  which layers collide.
- `barrelclimb.input` – `InputManager`, reporting keys and `MouseButton`s as
  down, pressed or released between frames.
- `barrelclimb.graphics` – `Graphics`, a window or off-screen buffer with
  `load_texture`, `create_text_texture`, `draw_texture` and `draw_line`;
  failures raise `GraphicsError`.
- `barrelclimb.texture` – `Texture` and `Rect`, an image entity drawn centred
  on its position.
- `barrelclimb.pickups` – `Item` (the hammer) and `Ladder`.
- `barrelclimb.player` – `Player`.
- `barrelclimb.scoreboard` – `Scoreboard` and `score_digits`.
- `barrelclimb.playfield` – `PlayScreen` and the rectangle test
  `check_collision`.
- `barrelclimb.screens` – `ScreenManager` and `Screen`.
- `barrelclimb.game` – `GameManager` runs the fixed-rate frame loop;
  `configure_physics` sets up which layers collide; `main` is the command.

A few examples:

```python
from barrelclimb.vector import Vector2, lerp, rotate_vector
from barrelclimb.timer import Timer
from barrelclimb.physics import CollisionFlag, CollisionLayer, PhysEntity, PhysicsManager

halfway = lerp(Vector2(0.0, 0.0), Vector2(10.0, 0.0), 0.5)   # Vector2(5.0, 0.0)
turned = rotate_vector(Vector2(1.0, 0.0), 90.0)              # about Vector2(0.0, 1.0)

ticks = iter([0, 250])
timer = Timer(clock=lambda: next(ticks))
timer.update()
timer.delta_time                                             # 0.25

physics = PhysicsManager()
physics.set_layer_collision_mask(CollisionLayer.FRIENDLY, CollisionFlag.HOSTILE)
a, b = PhysEntity(10.0), PhysEntity(10.0)
physics.register_entity(a, CollisionLayer.FRIENDLY)
physics.register_entity(b, CollisionLayer.HOSTILE)
physics.update()                                             # calls a.hit(b) and b.hit(a)
```