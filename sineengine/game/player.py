"""The player character of the example game."""

from __future__ import annotations

import pygame

from ..entity import Sprite
from ..settings import GAME_SIZE


class Player(Sprite):
    """A sprite steered with A/D, jumping with Space, falling faster than it rises."""

    def __init__(
        self,
        x: float,
        y: float,
        acc: float,
        jump_force: float,
        gravity_force: float = 640.0,
        fall_multiplier: float = 1.5,
    ) -> None:
        super().__init__(x, y)
        self.acc = acc
        self.jump_force = jump_force
        self.gravity_force = gravity_force
        self.fall_multiplier = fall_multiplier

    def _key_down(self, key: int) -> bool:
        state = self.parent_state
        return state is not None and state.input.is_key_down(key)

    def _apply_fall_gravity(self) -> None:
        self.set_gravity(self.gravity_force)
        if self.velocity.y > 0:
            self.set_gravity(self.gravity_force * self.fall_multiplier)

    def update(self, dt: float) -> None:
        super().update(dt)

        if self.collisions["down"]:
            self.set_gravity(0.0)
        else:
            self._apply_fall_gravity()

        if self._key_pressed(pygame.K_z) and self.camera is not None:
            self.camera.zoom = 1.2

        if self._key_down(pygame.K_d):
            self.acceleration.x = self.acc
        elif self._key_down(pygame.K_a):
            self.acceleration.x = -self.acc
        else:
            self.acceleration.x = 0.0

        if self._key_pressed(pygame.K_SPACE):
            self.velocity.y = self.jump_force

    def draw(self, surface) -> None:
        super().draw(surface)

    def set_player_bounds(self) -> None:
        """Bounce the player off the edges of the game area."""
        width, height = GAME_SIZE.width, GAME_SIZE.height

        if self.position.y + self.hitbox.height >= height:
            self.acceleration.y = 0.0
            self.velocity.y *= -1
            self.position.y = height - self.hitbox.height
        elif self.position.y <= 0:
            self.acceleration.y = 0.0
            self.velocity.y *= -1
            self.position.y = 0.0
        else:
            self._apply_fall_gravity()

        if self.position.x + self.hitbox.width >= width:
            self.acceleration.x = 0.0
            self.velocity.x *= -1
            self.position.x = width - self.hitbox.width
        if self.position.x <= 0:
            self.acceleration.x = 0.0
            self.velocity.x *= -1
            self.position.x = 0.0

    def set_gravity(self, g: float) -> None:
        self.gravity = g