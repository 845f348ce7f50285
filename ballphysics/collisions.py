"""Collision detection and response between circles, rectangles and walls."""

from __future__ import annotations

import math
from typing import Optional

from ballphysics.shapes import Circle, Rectangle
from ballphysics.vector import Vec2, dot, length


def check_rect_collision(rect1: Rectangle, rect2: Rectangle) -> bool:
    """Tell whether the bounding boxes of two rectangles overlap."""
    return rect1.bounds().intersects(rect2.bounds())


def separate_walls(circle: Circle, normal: Vec2, diff: float) -> None:
    """Push a circle ``diff`` along ``normal`` out of a wall."""
    circle.position = circle.position + normal * diff


def separate_balls(c1: Circle, c2: Circle) -> None:
    """Push two overlapping circles apart so that they just touch."""
    delta = c1.position - c2.position
    angle = math.atan2(delta.y, delta.x)
    overlap = (c1.radius + c2.radius - length(delta)) * 0.5
    direction = Vec2(math.cos(angle), math.sin(angle))
    c1.position = c1.position + direction * overlap
    c2.position = c2.position + direction * (-overlap)


def hit_balls(circle1: Circle, circle2: Circle) -> None:
    """Set the velocities of two colliding circles after the impact.

    Raises ZeroDivisionError if the centres coincide.
    """
    x1, x2 = circle1.position, circle2.position
    v1, v2 = circle1.velocity, circle2.velocity
    m1, m2 = circle1.mass, circle2.mass

    d12 = x1 - x2
    d21 = x2 - x1
    v1_new = v1 - d12 * (
        2 * m2 / (m1 + m2) * dot(v1 - v2, d12) / (length(d12) * length(d12))
    )
    v2_new = v2 - d21 * (
        2 * m1 / (m1 + m2) * dot(v2 - v1, d21) / (length(d21) * length(d21))
    )

    circle1.velocity = v1_new * circle1.elastic
    circle2.velocity = v2_new * circle2.elastic


def check_balls_collision(c1: Circle, c2: Circle) -> bool:
    """Tell whether two circles overlap."""
    return length(c1.position - c2.position) < c1.radius + c2.radius


def boundary_collision(circle: Circle, width: float, height: float) -> None:
    """Bounce a circle off the edges of a ``width`` by ``height`` box."""
    r = circle.radius

    if circle.position.x + r > width:
        separate_walls(circle, Vec2(-1, 0), circle.position.x + r - width)
        circle.velocity = Vec2(-circle.velocity.x, circle.velocity.y)

    if circle.position.x - r < 0:
        separate_walls(circle, Vec2(1, 0), -(circle.position.x - r))
        circle.velocity = Vec2(-circle.velocity.x, circle.velocity.y)

    if circle.position.y + r > height:
        separate_walls(circle, Vec2(0, -1), circle.position.y + r - height)
        circle.velocity = Vec2(
            circle.velocity.x, -circle.velocity.y * circle.elastic
        )

    if circle.position.y - r < 0:
        separate_walls(circle, Vec2(0, 1), -(circle.position.y - r))
        circle.velocity = Vec2(circle.velocity.x, -circle.velocity.y)


def check_rect_ball_collision(circle: Circle, rect: Rectangle) -> Optional[Vec2]:
    """Return the contact normal if the circle touches the rectangle, else None.

    The normal is the zero vector when the circle meets a corner region.
    """
    e1, e2 = rect.local_x, rect.local_y
    w, h = rect.size.x, rect.size.y
    r = circle.radius

    pr_x = dot(circle.position, e1)
    pr_y = dot(circle.position, e2)
    pr_rx = dot(rect.position, e1)
    pr_ry = dot(rect.position, e2)

    if not (abs(pr_rx - pr_x) < w / 2 + r and abs(pr_ry - pr_y) < h / 2 + r):
        return None

    a, _, c, d = rect.corners()
    pr_ax = dot(a, e1)
    pr_dx = dot(d, e1)
    pr_cy = dot(c, e2)
    pr_dy = dot(d, e2)

    normal = Vec2()
    if pr_dx < pr_x < pr_ax:
        if pr_y < pr_dy:
            normal = -e2
        if pr_y > pr_cy:
            normal = e2

    if pr_cy < pr_y < pr_dy:
        if pr_x < pr_dx:
            normal = -e1
        if pr_x > pr_ax:
            normal = e1

    return normal


def circle_hit_rect(circle: Circle, rect: Rectangle) -> None:
    """Reflect a circle's velocity off a rectangle it touches."""
    normal = check_rect_ball_collision(circle, rect)
    if normal is None:
        return

    v = circle.velocity
    if length(normal):
        circle.velocity = v + normal * 2 * dot(-v, normal)
    else:
        circle.velocity = -v