"""Moving entities with tile collision, and textured sprites."""

from __future__ import annotations

import math

import pygame

from .basic import Basic, Group
from .geometry import Rect, Vector2, check_collision_recs
from .geometry import move_towards as _move_towards

GREEN = (0, 228, 48)
RED = (230, 41, 55)
WHITE = (255, 255, 255, 255)

_DIRECTIONS = ("right", "left", "down", "up")


class Entity(Basic):
    """An object with position, velocity, drag, gravity and a hitbox.

    When ``solid`` and attached to a state, the entity is pushed out of the
    state's collision tiles one axis at a time; ``collisions`` records which
    sides touched something during the last update.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, width: float = 16.0, height: float = 16.0) -> None:
        super().__init__()
        self.position = Vector2(x, y)
        self.velocity = Vector2(0.0, 0.0)
        self.acceleration = Vector2(0.0, 0.0)
        self.drag = Vector2(0.0, 0.0)
        self.offset = Vector2(0.0, 0.0)
        self.gravity = 0.0
        self.hitbox = Rect(x, y, width, height)
        self.rotation = 0.0
        self.solid = True
        self.collisions: dict[str, bool] = dict.fromkeys(_DIRECTIONS, False)

    def _nearby_rects(self) -> list[Rect]:
        if not self.solid or self.parent_state is None:
            return []
        return self.parent_state.physics_rects_around(self.position)

    def update(self, dt: float) -> None:
        for direction in _DIRECTIONS:
            self.collisions[direction] = False

        self.apply_drag(dt)

        self.velocity.x += self.acceleration.x * dt
        self.position.x += self.velocity.x * dt
        self.hitbox.x = self.position.x + self.offset.x
        for rect in self._nearby_rects():
            if check_collision_recs(self.hitbox, rect):
                if self.velocity.x > 0:
                    self.hitbox.x = rect.x - self.hitbox.width
                    self.collisions["right"] = True
                if self.velocity.x < 0:
                    self.hitbox.x = rect.x + rect.width
                    self.collisions["left"] = True
                self.position.x = self.hitbox.x - self.offset.x
        if self.collisions["right"] or self.collisions["left"]:
            self.velocity.x = 0.0

        self.acceleration.y = self.gravity
        self.velocity.y += self.acceleration.y * dt
        self.position.y += self.velocity.y * dt
        self.hitbox.y = self.position.y + self.offset.y
        for rect in self._nearby_rects():
            if check_collision_recs(self.hitbox, rect):
                if self.velocity.y > 0:
                    self.hitbox.y = rect.y - self.hitbox.height
                    self.collisions["down"] = True
                if self.velocity.y < 0:
                    self.hitbox.y = rect.y + rect.height
                    self.collisions["up"] = True
                self.position.y = self.hitbox.y - self.offset.y
        if self.collisions["down"] or self.collisions["up"]:
            self.velocity.y = 0.0

    def _to_screen(self, point: Vector2) -> Vector2:
        if self.camera is None:
            return Vector2(point.x, point.y)
        return self.camera.world_to_screen(point)

    def _zoom(self) -> float:
        return self.camera.zoom if self.camera is not None else 1.0

    def _key_pressed(self, key: int) -> bool:
        state = self.parent_state
        return state is not None and state.input.is_key_pressed(key)

    def draw(self, surface) -> None:
        """Mark the centre of the hitbox with a small green dot."""
        centre = Vector2(
            int(self.hitbox.x) + int(self.hitbox.width) // 2,
            int(self.hitbox.y) + int(self.hitbox.height) // 2,
        )
        p = self._to_screen(centre)
        pygame.draw.circle(surface, GREEN, (round(p.x), round(p.y)), max(1, round(3 * self._zoom())))

    def apply_drag(self, dt: float) -> None:
        """Slow the velocity towards zero by ``drag * dt`` on each axis."""
        if self.drag.x != 0:
            self.velocity.x = _move_towards(self.velocity.x, 0.0, self.drag.x * dt)
        if self.drag.y != 0:
            self.velocity.y = _move_towards(self.velocity.y, 0.0, self.drag.y * dt)

    def set_offset(self, x: float, y: float) -> None:
        """Set the hitbox offset relative to the position."""
        self.offset = Vector2(x, y)

    def move_towards(self, start: float, end: float, amount: float) -> float:
        return _move_towards(start, end, amount)

    def set_hitbox_size(self, width: float, height: float) -> None:
        self.hitbox.width = width
        self.hitbox.height = height


class Sprite(Entity):
    """An entity drawn with a texture; T toggles a hitbox overlay."""

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x, y)
        self.texture: pygame.Surface | None = None
        self.scale = Vector2(1.0, 1.0)
        self.tint = WHITE
        self.has_texture = False
        self.debug_mode = False

    def load_texture(self, texture_path) -> None:
        """Load an image and size the hitbox to match it."""
        self.texture = pygame.image.load(str(texture_path))
        self.hitbox.width = float(self.texture.get_width())
        self.hitbox.height = float(self.texture.get_height())
        self.has_texture = True

    def set_scale(self, x: float, y: float) -> None:
        self.scale = Vector2(x, y)

    def _draw_texture(self, surface) -> None:
        zoom = self._zoom()
        w = self.texture.get_width() * self.scale.x * zoom
        h = self.texture.get_height() * self.scale.y * zoom
        size = (round(abs(w)), round(abs(h)))
        if size[0] == 0 or size[1] == 0:
            return
        image = pygame.transform.scale(self.texture, size)
        if w < 0 or h < 0:
            image = pygame.transform.flip(image, w < 0, h < 0)
        if tuple(self.tint) != WHITE:
            image = image.convert_alpha() if pygame.display.get_surface() else image.copy()
            image.fill(self.tint, special_flags=pygame.BLEND_RGBA_MULT)
        dest = self._to_screen(self.position)
        if self.rotation:
            # Rotate about the top-left corner, clockwise on screen.
            angle = math.radians(self.rotation)
            cx, cy = size[0] / 2, size[1] / 2
            centre = (
                dest.x + cx * math.cos(angle) - cy * math.sin(angle),
                dest.y + cx * math.sin(angle) + cy * math.cos(angle),
            )
            image = pygame.transform.rotate(image, -self.rotation)
            surface.blit(image, image.get_rect(center=(round(centre[0]), round(centre[1]))))
        else:
            surface.blit(image, (round(dest.x), round(dest.y)))

    def draw(self, surface) -> None:
        if self.has_texture and self.texture is not None:
            self._draw_texture(surface)

        if self._key_pressed(pygame.K_t):
            self.debug_mode = not self.debug_mode

        if self.debug_mode:
            zoom = self._zoom()
            top_left = self._to_screen(Vector2(self.hitbox.x, self.hitbox.y))
            box = pygame.Rect(
                round(top_left.x),
                round(top_left.y),
                round(self.hitbox.width * zoom),
                round(self.hitbox.height * zoom),
            )
            pygame.draw.rect(surface, RED, box, 1)
            p = self._to_screen(self.position)
            pygame.draw.circle(surface, GREEN, (round(p.x), round(p.y)), max(1, round(2 * zoom)))
            super().draw(surface)


def overlap(entity_a: Entity, entity_b: Entity) -> bool:
    """Return True if the two entities' hitboxes overlap."""
    return check_collision_recs(entity_a.hitbox, entity_b.hitbox)


def overlap_group(entity: Entity, group: Group) -> bool:
    """Return True if ``entity`` overlaps any active entity in ``group``."""
    if not entity.active:
        return False
    return any(
        isinstance(member, Entity)
        and member.active
        and check_collision_recs(entity.hitbox, member.hitbox)
        for member in group.members
    )