"""Basic 2D geometry: vectors, rectangles and a 2D camera."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class Vector2:
    """A mutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)


@dataclass
class Rect:
    """An axis-aligned rectangle with float coordinates."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def collides(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


@dataclass
class Camera2D:
    """A 2D camera: world point ``target`` is shown at screen point ``offset``."""

    target: Vector2 = field(default_factory=Vector2)
    offset: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    zoom: float = 1.0

    def world_to_screen(self, point: Vector2) -> Vector2:
        """Map a world-space point to screen space."""
        dx = point.x - self.target.x
        dy = point.y - self.target.y
        angle = math.radians(self.rotation)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        rx = dx * cos_a - dy * sin_a
        ry = dx * sin_a + dy * cos_a
        return Vector2(rx * self.zoom + self.offset.x, ry * self.zoom + self.offset.y)


def check_collision_recs(a: Rect, b: Rect) -> bool:
    """Return True if rectangles ``a`` and ``b`` overlap."""
    return a.collides(b)


def move_towards(start: float, end: float, amount: float) -> float:
    """Move ``start`` towards ``end`` by ``amount`` without overshooting."""
    if start < end:
        return min(start + amount, end)
    if start > end:
        return max(start - amount, end)
    return end