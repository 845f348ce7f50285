"""Interactive window that shows the demo scene."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Optional, Sequence

import pygame

from ballphysics.engine import SCREEN_HEIGHT, SCREEN_WIDTH, Physics
from ballphysics.shapes import Circle, Rectangle
from ballphysics.vector import Vec2

ZOOM_RATE = 5.0
PAN_SPEED = 20000.0


@dataclass
class View:
    """The region of the world that is shown on screen."""

    center: Vec2 = field(
        default_factory=lambda: Vec2(SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2)
    )
    size: Vec2 = field(
        default_factory=lambda: Vec2(float(SCREEN_WIDTH), float(SCREEN_HEIGHT))
    )

    def zoom(self, factor: float) -> None:
        """Scale the visible region by ``factor`` around its centre."""
        self.size = self.size * factor

    def move(self, dx: float, dy: float) -> None:
        """Shift the visible region by ``(dx, dy)`` world units."""
        self.center = self.center + Vec2(dx, dy)

    def to_screen(self, point: Vec2, screen_size: Vec2) -> Vec2:
        """Map a world point to pixel coordinates on a screen of ``screen_size``."""
        top_left = self.center - self.size / 2
        relative = point - top_left
        return Vec2(
            relative.x * screen_size.x / self.size.x,
            relative.y * screen_size.y / self.size.y,
        )

    def scale(self, screen_size: Vec2) -> float:
        """Return how many pixels one world unit spans horizontally."""
        return screen_size.x / self.size.x


def build_demo() -> Physics:
    """Create the demo scene: three bouncing balls and two rectangles."""
    engine = Physics(1000, boundary_collisions=True)

    balls = [
        Circle(Vec2(100, 100), 40, 50, 0.9, velocity=Vec2(100, 40)),
        Circle(Vec2(200, 200), 20, 10, 0.9, velocity=Vec2(200, 300)),
        Circle(Vec2(500, 300), 30, 40, 0.9, velocity=Vec2(150, 0)),
    ]
    for ball in balls:
        ball.collision_enabled = True

    r1 = Rectangle(Vec2(700, 300), Vec2(200, 200), 100)
    r2 = Rectangle(Vec2(200, 300), Vec2(200, 100), 100)
    r1.rotate(3.1415 / 3)
    r1.collision_enabled = True
    r2.collision_enabled = True

    engine.add_rect(r1)
    engine.add_rect(r2)
    for ball in balls:
        engine.add_circle(ball)
    return engine


def _control_view(view: View, dt: float) -> None:
    keys = pygame.key.get_pressed()
    if keys[pygame.K_x]:
        view.zoom(1 + ZOOM_RATE * dt)
    if keys[pygame.K_z]:
        view.zoom(1 - ZOOM_RATE * dt)
    if keys[pygame.K_UP]:
        view.move(0, -PAN_SPEED * dt)
    if keys[pygame.K_DOWN]:
        view.move(0, PAN_SPEED * dt)
    if keys[pygame.K_LEFT]:
        view.move(-PAN_SPEED * dt, 0)
    if keys[pygame.K_RIGHT]:
        view.move(PAN_SPEED * dt, 0)


def _render(surface: "pygame.Surface", engine: Physics, view: View) -> None:
    screen_size = Vec2(*map(float, surface.get_size()))
    scale = view.scale(screen_size)
    for circle in engine.circles:
        centre = view.to_screen(circle.position, screen_size)
        pygame.draw.circle(
            surface, circle.color, (centre.x, centre.y), circle.radius * scale
        )
    for rect in engine.rects:
        points = [tuple(view.to_screen(p, screen_size)) for p in rect.corners()]
        pygame.draw.polygon(surface, rect.color, points)


def run(engine: Physics) -> None:
    """Open a window and simulate ``engine`` until the window is closed."""
    pygame.init()
    try:
        surface = pygame.display.set_mode((engine.width, engine.height))
        pygame.display.set_caption("Simulation")
        view = View(
            Vec2(engine.width / 2, engine.height / 2),
            Vec2(float(engine.width), float(engine.height)),
        )
        clock = pygame.time.Clock()
        clock.tick()
        running = True
        while running:
            dt = clock.tick() / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                _control_view(view, dt)
            if not running:
                break

            engine.step(dt)

            surface.fill((0, 0, 0))
            _render(surface, engine, view)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demo scene in a window."""
    parser = argparse.ArgumentParser(
        prog="ballphysics",
        description="Simulate bouncing balls, gravity and rectangle collisions.",
    )
    parser.parse_args(argv)
    run(build_demo())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())