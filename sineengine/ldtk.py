"""Loading of LDtk project files."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from .geometry import Rect, Vector2


class LayerType(Enum):
    INT_GRID = "IntGrid"
    ENTITIES = "Entities"
    TILES = "Tiles"
    AUTO_LAYER = "AutoLayer"


@dataclass
class LdtkTile:
    """One placed tile: pixel position, grid cell and tileset source rect."""

    position: Vector2
    grid_position: Vector2
    texture_rect: Rect


@dataclass
class LdtkEntity:
    identifier: str
    position: Vector2
    size: Vector2
    fields: dict[str, Any] = field(default_factory=dict)


@dataclass
class LdtkLayer:
    name: str
    type: LayerType
    visible: bool = True
    grid_size: int = 16
    tileset_name: str | None = None
    tileset_path: str | None = None
    tiles: list[LdtkTile] = field(default_factory=list)
    entities: list[LdtkEntity] = field(default_factory=list)


@dataclass
class LdtkLevel:
    name: str
    position: Vector2
    layers: list[LdtkLayer] = field(default_factory=list)

    def get_layer(self, name: str) -> LdtkLayer:
        """Return the layer called ``name``; raise KeyError if missing."""
        for layer in self.layers:
            if layer.name == name:
                return layer
        raise KeyError(f"level {self.name!r} has no layer {name!r}")


@dataclass
class LdtkProject:
    levels: list[LdtkLevel] = field(default_factory=list)

    def get_level(self, name: str) -> LdtkLevel:
        """Return the level called ``name``; raise KeyError if missing."""
        for level in self.levels:
            if level.name == name:
                return level
        raise KeyError(f"project has no level {name!r}")


def _parse_layer(data: dict, tilesets: dict[int, dict]) -> LdtkLayer:
    layer_type = LayerType(data["__type"])
    grid = int(data.get("__gridSize", 16))
    tileset = tilesets.get(data.get("__tilesetDefUid"))
    tileset_name = tileset.get("identifier") if tileset else None
    tileset_path = data.get("__tilesetRelPath") or (tileset.get("relPath") if tileset else None)
    tile_size = int(tileset.get("tileGridSize", grid)) if tileset else grid

    tiles = [
        LdtkTile(
            position=Vector2(t["px"][0], t["px"][1]),
            grid_position=Vector2(t["px"][0] // grid, t["px"][1] // grid),
            texture_rect=Rect(t["src"][0], t["src"][1], tile_size, tile_size),
        )
        for t in (*data.get("gridTiles", ()), *data.get("autoLayerTiles", ()))
    ]
    entities = [
        LdtkEntity(
            identifier=e.get("__identifier", ""),
            position=Vector2(e["px"][0], e["px"][1]),
            size=Vector2(e.get("width", 0), e.get("height", 0)),
            fields={f["__identifier"]: f.get("__value") for f in e.get("fieldInstances", ())},
        )
        for e in data.get("entityInstances", ())
    ]
    return LdtkLayer(
        name=data["__identifier"],
        type=layer_type,
        visible=bool(data.get("visible", True)),
        grid_size=grid,
        tileset_name=tileset_name,
        tileset_path=tileset_path,
        tiles=tiles,
        entities=entities,
    )


def _parse_project(data: dict) -> LdtkProject:
    tilesets = {t["uid"]: t for t in data.get("defs", {}).get("tilesets", ())}
    levels = [
        LdtkLevel(
            name=lv["identifier"],
            position=Vector2(lv.get("worldX", 0), lv.get("worldY", 0)),
            layers=[_parse_layer(ly, tilesets) for ly in lv.get("layerInstances") or ()],
        )
        for lv in data.get("levels", ())
    ]
    return LdtkProject(levels)


def load_project(path) -> LdtkProject:
    """Read an ``.ldtk`` JSON file."""
    with Path(path).open(encoding="utf-8") as fh:
        return _parse_project(json.load(fh))