"""Game states: groups with a camera, virtual mouse and LDtk map support."""

from __future__ import annotations

import logging
import math
import os

import pygame

from .basic import Basic, Group
from .geometry import Camera2D, Rect, Vector2
from .input import InputState
from .ldtk import LayerType, LdtkLayer, LdtkProject, load_project
from .settings import GAME_SIZE

log = logging.getLogger(__name__)

NEIGHBOUR_OFFSETS = (
    (-1, 1), (0, 1), (1, 1),
    (-1, 0), (0, 0), (1, 0),
    (-1, -1), (0, -1), (1, -1),
)


def _round_half_away(value: float) -> float:
    return float(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


class State(Group):
    """A screen of the game holding objects, a camera and optionally a map."""

    def __init__(self) -> None:
        super().__init__()
        self.manager = None
        self.state_index = 0
        self.input = InputState()
        self.screen_size = (GAME_SIZE.width, GAME_SIZE.height)
        self.virtual_mouse_position = Vector2(0, 0)
        self.scale = 0.0
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.camera = Camera2D()
        self.ldtk_project: LdtkProject | None = None
        self.tile_size = 0.0
        self.collisions_layer: set[tuple[float, float]] = set()
        self.entities: dict[str, Rect] = {}
        self.tilesets: dict[str, pygame.Surface] = {}
        self.ldtk_debug = False

    def add(self, obj: Basic) -> None:
        obj.camera = self.camera
        obj.parent_state = self
        super().add(obj)

    def start(self) -> None:
        """Reset the camera to the centre of the game area."""
        centre = (GAME_SIZE.width / 2, GAME_SIZE.height / 2)
        self.camera.target = Vector2(*centre)
        self.camera.offset = Vector2(*centre)
        self.camera.rotation = 0.0
        self.camera.zoom = 1.0

    def update(self, dt: float) -> None:
        sw, sh = self.screen_size
        gw, gh = GAME_SIZE.width, GAME_SIZE.height
        self.scale = min(sw / gw, sh / gh)
        self.offset_x = (sw - gw * self.scale) * 0.5
        self.offset_y = (sh - gh * self.scale) * 0.5
        mouse = self.input.mouse_position
        self.virtual_mouse_position = Vector2(
            (mouse.x - self.offset_x) / self.scale,
            (mouse.y - self.offset_y) / self.scale,
        )
        super().update(dt)

    def draw(self, surface) -> None:
        super().draw(surface)

    def camera_follow(self, pos: Vector2) -> None:
        self.camera.target = Vector2(_round_half_away(pos.x), _round_half_away(pos.y))

    def load_ldtk_map(self, tilemap_path, fixed_tile_size, collision_layer_names) -> None:
        """Load an LDtk map, its tilesets, collision tiles and named entities.

        Tileset paths are resolved relative to the map file. Entities are keyed
        by their custom field ``Name``.
        """
        project = load_project(tilemap_path)
        self.ldtk_project = project
        self.tile_size = float(fixed_tile_size)

        if collision_layer_names:
            for level in project.levels:
                for name in collision_layer_names:
                    for tile in level.get_layer(name).tiles:
                        self.collisions_layer.add((
                            tile.grid_position.x + level.position.x / self.tile_size,
                            tile.grid_position.y + level.position.y / self.tile_size,
                        ))

        base = os.path.dirname(str(tilemap_path))
        for level in project.levels:
            for layer in level.layers:
                if layer.type is not LayerType.ENTITIES:
                    if layer.tileset_name is None or layer.tileset_name in self.tilesets:
                        continue
                    path = os.path.join(base, layer.tileset_path)
                    self.tilesets[layer.tileset_name] = pygame.image.load(path)
                    log.info("tileset path: %s", path)
                else:
                    for ent in layer.entities:
                        self.entities.setdefault(
                            ent.fields["Name"],
                            Rect(
                                ent.position.x + level.position.x,
                                ent.position.y + level.position.y,
                                ent.size.x,
                                ent.size.y,
                            ),
                        )

    def get_ldtk_entity(self, name: str) -> Rect:
        """Return the entity's rectangle, or an empty one if it is unknown."""
        rect = self.entities.get(name)
        if rect is None or rect.width == 0:
            return Rect(0, 0, 0, 0)
        return Rect(rect.x, rect.y, rect.width, rect.height)

    def _blit_world(self, surface, texture, src: Rect, pos: Vector2) -> None:
        area = pygame.Rect(int(src.x), int(src.y), int(src.width), int(src.height))
        image = texture.subsurface(area.clip(texture.get_rect()))
        zoom = self.camera.zoom
        if zoom != 1:
            w, h = image.get_size()
            image = pygame.transform.scale(image, (max(0, round(w * zoom)), max(0, round(h * zoom))))
        dest = self.camera.world_to_screen(pos)
        surface.blit(image, (round(dest.x), round(dest.y)))

    def _draw_layer(self, surface, layer: LdtkLayer, origin: Vector2) -> None:
        if layer.type is LayerType.ENTITIES or not layer.visible:
            return
        texture = self.tilesets.get(layer.tileset_name)
        if texture is None:
            return
        for tile in layer.tiles:
            self._blit_world(surface, texture, tile.texture_rect, tile.position + origin)

    def _project(self) -> LdtkProject:
        if self.ldtk_project is None:
            raise RuntimeError("no LDtk map loaded")
        return self.ldtk_project

    def draw_ldtk_map(self, surface) -> None:
        for level in self._project().levels:
            for layer in reversed(level.layers):
                self._draw_layer(surface, layer, level.position)

    def draw_ldtk_level(self, surface, level_name: str) -> None:
        level = self._project().get_level(level_name)
        for layer in reversed(level.layers):
            self._draw_layer(surface, layer, Vector2(0, 0))

    def draw_ldtk_layer(self, surface, layer_name: str) -> None:
        for level in self._project().levels:
            self._draw_layer(surface, level.get_layer(layer_name), level.position)

    def draw_ldtk_collision_layers(self, surface) -> None:
        """Outline collision tiles; F6 toggles the overlay."""
        if self.input.is_key_pressed(pygame.K_F6):
            self.ldtk_debug = not self.ldtk_debug
        if not self.ldtk_debug:
            return
        zoom = self.camera.zoom
        size = self.tile_size * zoom
        for x, y in self.collisions_layer:
            p = self.camera.world_to_screen(Vector2(x * self.tile_size, y * self.tile_size))
            pygame.draw.rect(surface, (255, 0, 0), pygame.Rect(round(p.x), round(p.y), round(size), round(size)), 2)

    def tiles_around(self, pos: Vector2, tile_size: float, collisions_layer) -> list[Vector2]:
        """Return the solid tile cells in the 3x3 block around ``pos``."""
        tx = math.floor(pos.x / tile_size)
        ty = math.floor(pos.y / tile_size)
        cells = ((tx + dx, ty + dy) for dx, dy in NEIGHBOUR_OFFSETS)
        return [Vector2(x, y) for x, y in cells if (x, y) in collisions_layer]

    def physics_rects_around(self, pos: Vector2) -> list[Rect]:
        size = self.tile_size
        return [
            Rect(t.x * size, t.y * size, size, size)
            for t in self.tiles_around(pos, size, self.collisions_layer)
        ]