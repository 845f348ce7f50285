"""Simulated bodies: circles and rectangles, plus axis-aligned bounds."""

from __future__ import annotations

from dataclasses import dataclass, field

from ballphysics.geometry import rotate as rotation_matrix
from ballphysics.vector import Vec2

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)


@dataclass(frozen=True)
class Bounds:
    """An axis-aligned bounding box."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersects(self, other: Bounds) -> bool:
        """Tell whether the two boxes overlap with a non-empty area."""
        left = max(min(self.left, self.right), min(other.left, other.right))
        right = min(max(self.left, self.right), max(other.left, other.right))
        top = max(min(self.top, self.bottom), min(other.top, other.bottom))
        bottom = min(max(self.top, self.bottom), max(other.top, other.bottom))
        return left < right and top < bottom


@dataclass
class Circle:
    """A ball with a position, velocity, mass and elasticity."""

    position: Vec2
    radius: float
    mass: float
    elastic: float = 0.0
    velocity: Vec2 = field(default_factory=Vec2)
    gravity_enabled: bool = False
    collision_enabled: bool = False
    gravity_force_enabled: bool = False
    color: Color = WHITE

    def bounds(self) -> Bounds:
        """Return the box enclosing the circle."""
        return Bounds(
            self.position.x - self.radius,
            self.position.y - self.radius,
            2 * self.radius,
            2 * self.radius,
        )

    def update(self, dt: float) -> None:
        """Advance the position by the velocity over ``dt`` seconds."""
        self.position = self.position + self.velocity * dt


@dataclass
class Rectangle:
    """A rectangle centred on its position, with its own local axes."""

    position: Vec2
    size: Vec2
    mass: float = 0.0
    velocity: Vec2 = field(default_factory=Vec2)
    angle: float = 0.0
    gravity_enabled: bool = False
    collision_enabled: bool = False
    local_x: Vec2 = field(default_factory=lambda: Vec2(1.0, 0.0))
    local_y: Vec2 = field(default_factory=lambda: Vec2(0.0, 1.0))
    color: Color = WHITE

    def corners(self) -> tuple[Vec2, Vec2, Vec2, Vec2]:
        """Return the corners in the order (+x,+y), (+x,-y), (-x,-y), (-x,+y)."""
        half_w = self.size.x / 2
        half_h = self.size.y / 2
        ex, ey = self.local_x, self.local_y
        return (
            self.position + ex * half_w + ey * half_h,
            self.position + ex * half_w + ey * (-half_h),
            self.position + ex * (-half_w) + ey * (-half_h),
            self.position + ex * (-half_w) + ey * half_h,
        )

    def bounds(self) -> Bounds:
        """Return the axis-aligned box enclosing the (possibly rotated) rectangle."""
        points = self.corners()
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return Bounds(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def update(self, dt: float) -> None:
        """Advance the position by the velocity over ``dt`` seconds."""
        self.position = self.position + self.velocity * dt

    def rotate(self, angle: float) -> None:
        """Turn the local axes by ``angle`` radians and record the angle."""
        self.angle = angle
        matrix = rotation_matrix(angle)
        self.local_x = matrix * self.local_x
        self.local_y = matrix * self.local_y