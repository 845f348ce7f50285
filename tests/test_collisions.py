import pytest

from ballphysics.collisions import (
    boundary_collision,
    check_balls_collision,
    check_rect_ball_collision,
    check_rect_collision,
    circle_hit_rect,
    hit_balls,
    separate_balls,
    separate_walls,
)
from ballphysics.shapes import Circle, Rectangle
from ballphysics.vector import Vec2, dot, length


def _momentum(*circles):
    return Vec2(
        sum(c.mass * c.velocity.x for c in circles),
        sum(c.mass * c.velocity.y for c in circles),
    )


def _energy(*circles):
    return sum(0.5 * c.mass * dot(c.velocity, c.velocity) for c in circles)


def test_check_rect_collision_overlapping():
    r1 = Rectangle(Vec2(0, 0), Vec2(10, 10))
    r2 = Rectangle(Vec2(6, 6), Vec2(10, 10))
    assert check_rect_collision(r1, r2)


def test_check_rect_collision_apart():
    r1 = Rectangle(Vec2(0, 0), Vec2(10, 10))
    r2 = Rectangle(Vec2(50, 0), Vec2(10, 10))
    assert not check_rect_collision(r1, r2)


def test_separate_walls_moves_along_normal():
    c = Circle(Vec2(10, 10), 2, 1)
    separate_walls(c, Vec2(0, -1), 3)
    assert c.position == Vec2(10, 10 - 3)


def test_check_balls_collision():
    a = Circle(Vec2(0, 0), 5, 1)
    b = Circle(Vec2(8, 0), 5, 1)
    far = Circle(Vec2(10, 0), 5, 1)
    assert check_balls_collision(a, b)
    assert not check_balls_collision(a, far)


def test_separate_balls_leaves_them_touching():
    a = Circle(Vec2(0, 0), 5, 1)
    b = Circle(Vec2(3, 4), 4, 1)
    separate_balls(a, b)
    assert length(a.position - b.position) == pytest.approx(a.radius + b.radius)
    assert not check_balls_collision(a, b)


def test_separate_balls_keeps_midpoint():
    a = Circle(Vec2(1, 2), 5, 1)
    b = Circle(Vec2(4, 6), 5, 1)
    separate_balls(a, b)
    assert (a.position.x + b.position.x) / 2 == pytest.approx(2.5)
    assert (a.position.y + b.position.y) / 2 == pytest.approx(4)


def test_hit_balls_elastic_conserves_momentum_and_energy():
    a = Circle(Vec2(0, 0), 3, 2, elastic=1, velocity=Vec2(1, 2))
    b = Circle(Vec2(3, 4), 3, 5, elastic=1, velocity=Vec2(-2, 0.5))
    p_before = _momentum(a, b)
    e_before = _energy(a, b)
    hit_balls(a, b)
    p_after = _momentum(a, b)
    assert p_after.x == pytest.approx(p_before.x)
    assert p_after.y == pytest.approx(p_before.y)
    assert _energy(a, b) == pytest.approx(e_before)


def test_hit_balls_preserves_tangential_velocity():
    a = Circle(Vec2(0, 0), 3, 2, elastic=1, velocity=Vec2(1, 2))
    b = Circle(Vec2(4, 0), 3, 3, elastic=1, velocity=Vec2(-1, -1))
    hit_balls(a, b)
    assert a.velocity.y == pytest.approx(2)
    assert b.velocity.y == pytest.approx(-1)


def test_hit_balls_scales_by_elasticity():
    a = Circle(Vec2(0, 0), 3, 1, elastic=0, velocity=Vec2(1, 0))
    b = Circle(Vec2(4, 0), 3, 1, elastic=0, velocity=Vec2(-1, 0))
    hit_balls(a, b)
    assert a.velocity == Vec2(0, 0)
    assert b.velocity == Vec2(0, 0)


def test_hit_balls_same_centre_raises():
    a = Circle(Vec2(1, 1), 3, 1, elastic=1)
    b = Circle(Vec2(1, 1), 3, 1, elastic=1)
    with pytest.raises(ZeroDivisionError):
        hit_balls(a, b)


def test_boundary_collision_left_wall():
    c = Circle(Vec2(5, 50), 10, 1, velocity=Vec2(-3, 2))
    boundary_collision(c, 100, 100)
    assert c.position == Vec2(c.radius, 50)
    assert c.velocity == Vec2(3, 2)


def test_boundary_collision_right_wall():
    c = Circle(Vec2(95, 50), 10, 1, velocity=Vec2(3, 2))
    boundary_collision(c, 100, 100)
    assert c.position == Vec2(100 - c.radius, 50)
    assert c.velocity == Vec2(-3, 2)


def test_boundary_collision_floor_uses_elasticity():
    c = Circle(Vec2(50, 95), 10, 1, elastic=0.5, velocity=Vec2(1, 4))
    boundary_collision(c, 100, 100)
    assert c.position == Vec2(50, 100 - c.radius)
    assert c.velocity == Vec2(1, -4 * 0.5)


def test_boundary_collision_ceiling():
    c = Circle(Vec2(50, 2), 10, 1, elastic=0.5, velocity=Vec2(1, -4))
    boundary_collision(c, 100, 100)
    assert c.position == Vec2(50, c.radius)
    assert c.velocity == Vec2(1, 4)


def test_boundary_collision_inside_untouched():
    c = Circle(Vec2(50, 50), 10, 1, velocity=Vec2(1, 4))
    boundary_collision(c, 100, 100)
    assert c.position == Vec2(50, 50)
    assert c.velocity == Vec2(1, 4)


def test_rect_ball_no_collision():
    rect = Rectangle(Vec2(100, 100), Vec2(50, 50))
    c = Circle(Vec2(300, 300), 10, 1)
    assert check_rect_ball_collision(c, rect) is None


def test_rect_ball_normal_from_top_side():
    rect = Rectangle(Vec2(100, 100), Vec2(50, 50))
    c = Circle(Vec2(100, 70), 10, 1)
    assert check_rect_ball_collision(c, rect) == -rect.local_y


def test_rect_ball_normal_from_left_side():
    rect = Rectangle(Vec2(100, 100), Vec2(50, 50))
    c = Circle(Vec2(70, 100), 10, 1)
    assert check_rect_ball_collision(c, rect) == -rect.local_x


def test_rect_ball_corner_gives_zero_normal():
    rect = Rectangle(Vec2(100, 100), Vec2(50, 50))
    c = Circle(Vec2(70, 70), 10, 1)
    assert check_rect_ball_collision(c, rect) == Vec2(0, 0)


def test_circle_hit_rect_reflects_off_side():
    rect = Rectangle(Vec2(100, 100), Vec2(50, 50))
    c = Circle(Vec2(100, 70), 10, 1, velocity=Vec2(2, 5))
    circle_hit_rect(c, rect)
    assert c.velocity == Vec2(2, -5)


def test_circle_hit_rect_corner_reverses():
    rect = Rectangle(Vec2(100, 100), Vec2(50, 50))
    c = Circle(Vec2(70, 70), 10, 1, velocity=Vec2(3, 5))
    circle_hit_rect(c, rect)
    assert c.velocity == Vec2(-3, -5)


def test_circle_hit_rect_far_unchanged():
    rect = Rectangle(Vec2(100, 100), Vec2(50, 50))
    c = Circle(Vec2(300, 70), 10, 1, velocity=Vec2(3, 5))
    circle_hit_rect(c, rect)
    assert c.velocity == Vec2(3, 5)


def test_circle_hit_rotated_rect_keeps_speed():
    rect = Rectangle(Vec2(100, 100), Vec2(60, 40))
    rect.rotate(0.5)
    c = Circle(rect.position + rect.local_y * 25, 10, 1, velocity=Vec2(3, 4))
    speed = length(c.velocity)
    circle_hit_rect(c, rect)
    assert length(c.velocity) == pytest.approx(speed)