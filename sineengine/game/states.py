"""The two states of the example game."""

from __future__ import annotations

import os
from pathlib import Path

import pygame

from ..entity import Sprite
from ..geometry import Vector2
from ..state import State
from .player import Player

DEFAULT_RESOURCES_PATH = Path(os.environ.get("SINE_RESOURCES_PATH", "assets"))

PURPLE = (200, 122, 255)
BLUE = (0, 121, 241, 255)
LEFT_MOUSE_BUTTON = 1


class TemplateState(State):
    """A sprite on screen; clicking leaves purple dots, P goes to state 2."""

    resources_path: Path = DEFAULT_RESOURCES_PATH

    def __init__(self) -> None:
        super().__init__()
        self.player: Sprite | None = None
        self.balls_positions: list[Vector2] = []

    def start(self) -> None:
        super().start()
        self.player = Sprite(100, 100)
        self.player.load_texture(Path(self.resources_path) / "button.png")
        self.add(self.player)

    def update(self, dt: float) -> None:
        super().update(dt)

        if self.input.is_key_pressed(pygame.K_p):
            self.manager.switch_state(2)

        if self.input.is_mouse_button_pressed(LEFT_MOUSE_BUTTON):
            mouse = self.virtual_mouse_position
            self.balls_positions.append(Vector2(mouse.x, mouse.y))

    def draw(self, surface) -> None:
        super().draw(surface)
        radius = max(1, round(5 * self.camera.zoom))
        for ball in self.balls_positions:
            p = self.camera.world_to_screen(ball)
            pygame.draw.circle(surface, PURPLE, (round(p.x), round(p.y)), radius)


class SecondState(State):
    """An LDtk map with a controllable player; P goes back to state 1."""

    resources_path: Path = DEFAULT_RESOURCES_PATH

    def __init__(self) -> None:
        super().__init__()
        self.player: Player | None = None

    def start(self) -> None:
        super().start()
        root = Path(self.resources_path)
        self.load_ldtk_map(root / "tilemaps" / "map_0.ldtk", 16, ["Ground", "Snow"])

        spawn = self.get_ldtk_entity("Player")
        self.player = Player(spawn.x, spawn.y, 1200, -400)
        self.player.load_texture(root / "circle.png")
        self.player.tint = BLUE
        self.player.drag = Vector2(500, 200)
        self.player.solid = True
        self.add(self.player)

        self.camera.target = Vector2(self.player.position.x, self.player.position.y)

    def update(self, dt: float) -> None:
        super().update(dt)
        self.camera_follow(self.player.position)

        if self.input.is_key_pressed(pygame.K_c):
            self.camera.zoom -= 0.4
        if self.input.is_key_pressed(pygame.K_x):
            self.camera.zoom += 0.4

        if self.input.is_key_pressed(pygame.K_p):
            self.manager.switch_state(1)

    def draw(self, surface) -> None:
        super().draw(surface)
        self.draw_ldtk_map(surface)
        self.draw_ldtk_collision_layers(surface)