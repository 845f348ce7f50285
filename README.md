# ballphysics

A small two-dimensional physics sandbox. Balls move, bounce off each other,
off the edges of the screen and off rectangles, which may be rotated. Gravity
can pull balls downwards, and balls can also attract one another.

## Installing

    pip install .

The window is drawn with pygame, which is installed as a dependency.

## Running the demo

    ballphysics

This opens a 1240×720 window titled "Simulation" with three elastic balls and
two rectangles, one of them rotated. Keys, read whenever the window receives
an event:

- `X` / `Z` — zoom out / zoom in
- arrow keys — move the view

Close the window to quit. The command takes no options besides `--help`.

## Using the library

The engine itself does not need a window. You build shapes, add them to a
`Physics` engine and advance it with `step`:

```python
from ballphysics.engine import Physics
from ballphysics.shapes import Circle, Rectangle
from ballphysics.vector import Vec2

engine = Physics(gravity=1000, width=1240, height=720, boundary_collisions=True)

ball = Circle(Vec2(100, 100), radius=40, mass=50, elastic=0.9)
ball.velocity = Vec2(100, 40)
ball.collision_enabled = True
ball.gravity_enabled = True
engine.add_circle(ball)

wall = Rectangle(Vec2(700, 300), Vec2(200, 200), mass=100)
wall.rotate(3.1415 / 3)
wall.collision_enabled = True
engine.add_rect(wall)

for _ in range(60):
    engine.step(1 / 60)
```

`add_circle` and `add_rect` store a copy of the shape and return that copy;
change the returned object, or `engine.circles` / `engine.rects`, to affect
the simulation afterwards.

Each `step(dt)` resolves collisions, applies gravity, moves the balls and then
applies mutual attraction between balls that have `gravity_force_enabled`
switched on. The stages are also available on their own:
`apply_collisions()`, `apply_gravity(dt)` and `apply_forces()`. Wall bounces
happen only when `boundary_collisions` is true, against a box of the engine's
`width` and `height`.

`generate_balls(count, rng=None)` scatters randomly sized, mutually attracting
balls across the screen; pass a `random.Random` to make the result
reproducible.

`ballphysics.app.build_demo()` returns the engine used by the demo, and
`ballphysics.app.run(engine)` opens a window for any engine you have built.
`ballphysics.app.View` maps world coordinates to screen pixels.

### Building blocks

- `ballphysics.vector` — `Vec2`, `dot`, `length`
- `ballphysics.matrix` — `Matrix2D`
- `ballphysics.geometry` — `Line`, `rotate`, `check_intersect_sections`,
  `nearest_point`, `distance_from_point_to_line`
- `ballphysics.shapes` — `Circle`, `Rectangle`, `Bounds`
- `ballphysics.collisions` — tests and responses for ball/ball, ball/wall,
  ball/rectangle and rectangle/rectangle contact
- `ballphysics.forces` — `calc_gravity_force`, the pairwise attraction between
  two balls

Rectangles are obstacles: `Physics.step` moves only balls, and rectangles do
not collide with each other during a step (`check_rect_collision` only
reports whether their bounding boxes overlap).

## Running the tests

    pip install .[test]
    pytest