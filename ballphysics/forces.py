"""Mutual gravitational attraction between circles."""

from __future__ import annotations

from ballphysics.shapes import Circle
from ballphysics.vector import length

GRAVITY_CONSTANT = 1000.0
FORCE_SCALE = 1.0 / 100.0


def calc_gravity_force(c1: Circle, c2: Circle) -> None:
    """Change the velocities of two circles by their mutual attraction.

    Raises ZeroDivisionError if the centres coincide.
    """
    m1, m2 = c1.mass, c2.mass
    direction = c1.position - c2.position
    d = length(direction)

    force = direction * (GRAVITY_CONSTANT * m1 * m2 / (d * d)) / length(direction)

    c1.velocity = (force * (-FORCE_SCALE) + c1.velocity * m1) / m1
    c2.velocity = (force * FORCE_SCALE + c2.velocity * m2) / m2