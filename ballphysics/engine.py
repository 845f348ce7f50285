"""The simulation world: holds the bodies and advances them in time."""

from __future__ import annotations

import copy
import random
from dataclasses import dataclass, field
from typing import Optional

from ballphysics.collisions import (
    boundary_collision,
    check_balls_collision,
    circle_hit_rect,
    hit_balls,
    separate_balls,
)
from ballphysics.forces import calc_gravity_force
from ballphysics.shapes import Circle, Rectangle
from ballphysics.vector import Vec2

SCREEN_WIDTH = 1240
SCREEN_HEIGHT = 720


@dataclass
class Physics:
    """A world of circles and rectangles under uniform downward gravity."""

    gravity: float
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    boundary_collisions: bool = False
    circles: list[Circle] = field(default_factory=list)
    rects: list[Rectangle] = field(default_factory=list)

    def add_circle(self, circle: Circle) -> Circle:
        """Add a copy of ``circle`` to the world and return the stored copy."""
        stored = copy.copy(circle)
        self.circles.append(stored)
        return stored

    def add_rect(self, rect: Rectangle) -> Rectangle:
        """Add a copy of ``rect`` to the world and return the stored copy."""
        stored = copy.copy(rect)
        self.rects.append(stored)
        return stored

    def generate_balls(
        self, count: int, rng: Optional[random.Random] = None
    ) -> None:
        """Scatter ``count`` randomly placed, mutually attracting balls."""
        rng = rng if rng is not None else random.Random()
        for _ in range(count):
            x = rng.randrange(self.width - 20) + 10
            y = rng.randrange(self.height - 20) + 10
            vx = rng.randrange(30) + 10
            vy = rng.randrange(30) + 10
            radius = rng.randrange(5) + 10
            mass = rng.randrange(10) + 25
            tint = rng.randrange(2)

            self.add_circle(
                Circle(
                    Vec2(float(x), float(y)),
                    float(radius),
                    float(mass),
                    velocity=Vec2(float(vx), float(vy)),
                    gravity_force_enabled=True,
                    color=((1 - tint) * 255, 0, tint * 255),
                )
            )

    def apply_collisions(self) -> None:
        """Resolve ball-ball, wall and ball-rectangle collisions."""
        for i, first in enumerate(self.circles):
            for second in self.circles[i + 1:]:
                if (
                    first.collision_enabled
                    and second.collision_enabled
                    and check_balls_collision(first, second)
                ):
                    hit_balls(first, second)
                    separate_balls(first, second)

        if self.boundary_collisions:
            for circle in self.circles:
                boundary_collision(circle, self.width, self.height)

        for circle in self.circles:
            for rect in self.rects:
                if circle.collision_enabled and rect.collision_enabled:
                    circle_hit_rect(circle, rect)

    def apply_gravity(self, dt: float) -> None:
        """Accelerate every gravity-enabled circle downwards for ``dt`` seconds."""
        for circle in self.circles:
            if circle.gravity_enabled:
                circle.velocity = Vec2(
                    circle.velocity.x, circle.velocity.y + self.gravity * dt
                )

    def apply_forces(self) -> None:
        """Apply mutual attraction between every pair of attracting circles."""
        for i, first in enumerate(self.circles):
            for second in self.circles[i + 1:]:
                if first.gravity_force_enabled and second.gravity_force_enabled:
                    calc_gravity_force(first, second)

    def step(self, dt: float) -> None:
        """Advance the world by ``dt`` seconds."""
        self.apply_collisions()
        self.apply_gravity(dt)
        for circle in self.circles:
            circle.update(dt)
        self.apply_forces()