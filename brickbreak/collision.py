"""Collision tests between simple 2D shapes: boxes, circles and line segments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Tuple

from pygame.math import Vector2

_PARALLEL_EPSILON = 0.0001


def _zero() -> Vector2:
    return Vector2(0.0, 0.0)


@dataclass
class Box2D:
    """An axis-aligned box given by its center and half-size."""

    center: Vector2 = field(default_factory=_zero)
    extents: Vector2 = field(default_factory=_zero)

    def __post_init__(self) -> None:
        self.center = Vector2(self.center)
        self.extents = Vector2(self.extents)


@dataclass
class Circle:
    """A circle given by its center and radius."""

    center: Vector2 = field(default_factory=_zero)
    radius: float = 0.0

    def __post_init__(self) -> None:
        self.center = Vector2(self.center)


@dataclass
class Line2D:
    """A line segment from start to end."""

    start: Vector2 = field(default_factory=_zero)
    end: Vector2 = field(default_factory=_zero)

    def __post_init__(self) -> None:
        self.start = Vector2(self.start)
        self.end = Vector2(self.end)


class LineIntersection(NamedTuple):
    """Where two lines cross, with each line's parameter at that point."""

    t_a: float
    t_b: float
    point: Vector2


def box_box_check(box_a: Box2D, box_b: Box2D) -> bool:
    """Return True if the two boxes overlap (touching edges do not count)."""
    delta = box_a.center - box_b.center
    return (
        abs(delta.x) < box_a.extents.x + box_b.extents.x
        and abs(delta.y) < box_a.extents.y + box_b.extents.y
    )


def box_circle_check(box: Box2D, circle: Circle) -> bool:
    """Return True if the circle touches the box."""
    distance = circle.center - box.center
    if abs(distance.x) > box.extents.x + circle.radius:
        return False
    if abs(distance.y) > box.extents.y + circle.radius:
        return False
    if distance.length() > box.extents.length() + circle.radius:
        return False
    return True


def circle_circle_check(circle_a: Circle, circle_b: Circle) -> bool:
    """Return True if the two circles touch or overlap."""
    distance = circle_a.center.distance_to(circle_b.center)
    return distance <= circle_a.radius + circle_b.radius


def line_line_check(a: Line2D, b: Line2D) -> Optional[LineIntersection]:
    """Intersect the infinite lines through two segments.

    Returns None when the lines are parallel; otherwise the crossing point and
    the parameter of that point along each segment (0 at start, 1 at end).
    """
    x1, y1 = a.start
    x2, y2 = a.end
    x3, y3 = b.start
    x4, y4 = b.end

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(denom) < _PARALLEL_EPSILON:
        return None

    cross_a = x1 * y2 - y1 * x2
    cross_b = x3 * y4 - y3 * x4
    point = Vector2(
        cross_a * (x3 - x4) - (x1 - x2) * cross_b,
        cross_a * (y3 - y4) - (y1 - y2) * cross_b,
    ) * (1.0 / denom)

    if abs(x2 - x1) > abs(y2 - y1):
        t_a = (point.x - x1) / (x2 - x1)
    else:
        t_a = (point.y - y1) / (y2 - y1)

    if abs(x4 - x3) > abs(y4 - y3):
        t_b = (point.x - x3) / (x4 - x3)
    else:
        t_b = (point.y - y3) / (y4 - y3)

    return LineIntersection(t_a, t_b, point)


def _in_unit_range(t: float) -> bool:
    return 0.0 <= t <= 1.0


def _reflect(velocity: Vector2, normal: Vector2) -> Vector2:
    return velocity - 2.0 * velocity.dot(normal) * normal


def reflect_circle_box(
    circle: Circle, velocity: Vector2, delta_time: float, box: Box2D
) -> Tuple[Vector2, Vector2]:
    """Move a circle for one step, bouncing it off a box.

    Returns the circle's new center and its velocity after any bounce.
    """
    velocity = Vector2(velocity)
    extra = circle.radius
    center, ext = box.center, box.extents

    top = Line2D(center + Vector2(-ext.x - extra, -ext.y), center + Vector2(ext.x + extra, -ext.y))
    left = Line2D(center + Vector2(-ext.x, -ext.y - extra), center + Vector2(-ext.x, ext.y + extra))
    right = Line2D(center + Vector2(ext.x, -ext.y - extra), center + Vector2(ext.x, ext.y + extra))
    bottom = Line2D(center + Vector2(-ext.x - extra, ext.y), center + Vector2(ext.x + extra, ext.y))

    step = velocity * delta_time

    def cast(offset: Vector2, edge: Line2D) -> Optional[LineIntersection]:
        start = circle.center + offset
        return line_line_check(Line2D(start, start + step), edge)

    normal = Vector2(0.0, 0.0)
    t = -10000.0
    tx = 10000.0
    ty = 10000.0

    hit = None
    normal_y = 0.0
    if velocity.y > 0:
        hit = cast(Vector2(0.0, circle.radius), top)
        normal_y = -1.0
    elif velocity.y < 0:
        hit = cast(Vector2(0.0, -circle.radius), bottom)
        normal_y = 1.0
    if hit is not None:
        if _in_unit_range(hit.t_a) and _in_unit_range(hit.t_b):
            t = hit.t_a
            normal = Vector2(0.0, normal_y)
        elif _in_unit_range(-hit.t_a) and _in_unit_range(hit.t_b):
            ty = hit.t_a
            normal.y = normal_y

    hit = None
    normal_x = 0.0
    if velocity.x > 0:
        hit = cast(Vector2(circle.radius, 0.0), left)
        normal_x = -1.0
    elif velocity.x < 0:
        hit = cast(Vector2(-circle.radius, 0.0), right)
        normal_x = 1.0
    if hit is not None:
        if _in_unit_range(hit.t_a) and _in_unit_range(hit.t_b):
            if t < 0 or hit.t_a < t:
                t = hit.t_a
                normal = Vector2(normal_x, 0.0)
        elif _in_unit_range(-hit.t_a) and _in_unit_range(hit.t_b):
            tx = hit.t_a
            normal.x = normal_x

    # Already penetrating across a corner: bounce immediately along the combined normal.
    if t < 0 and (tx < 0 or ty < 0):
        t = 0.0
        normal = normal.normalize()

    if t >= 0:
        new_velocity = _reflect(velocity, normal)
        final_position = (
            circle.center
            + velocity * (t * delta_time)
            + new_velocity * ((1.0 - t) * delta_time)
        )
        return final_position, new_velocity

    return circle.center + velocity * delta_time, velocity