import json

import pygame
import pytest

from sineengine.game.player import Player
from sineengine.game.states import PURPLE, SecondState, TemplateState
from sineengine.geometry import Vector2
from sineengine.manager import StateManager
from sineengine.settings import GAME_SIZE

TILE_COLOUR = (10, 200, 10)


def _save(path, size, colour):
    image = pygame.Surface(size)
    image.fill(colour)
    pygame.image.save(image, str(path))


def _state_classes(root):
    class Template(TemplateState):
        resources_path = root

    class Second(SecondState):
        resources_path = root

    return Template, Second


@pytest.fixture
def assets(tmp_path):
    GAME_SIZE.resize(640, 360)
    (tmp_path / "tilemaps").mkdir()
    _save(tmp_path / "tilemaps" / "tiles.png", (32, 32), TILE_COLOUR)
    _save(tmp_path / "circle.png", (8, 8), (255, 255, 255))
    _save(tmp_path / "button.png", (20, 10), (255, 255, 255))
    data = {
        "defs": {
            "tilesets": [
                {"uid": 1, "identifier": "Terrain", "relPath": "tiles.png", "tileGridSize": 16}
            ]
        },
        "levels": [
            {
                "identifier": "Level_0",
                "worldX": 0,
                "worldY": 0,
                "layerInstances": [
                    {
                        "__identifier": "Entities",
                        "__type": "Entities",
                        "__gridSize": 16,
                        "entityInstances": [
                            {
                                "__identifier": "Spawn",
                                "px": [32, 16],
                                "width": 16,
                                "height": 16,
                                "fieldInstances": [{"__identifier": "Name", "__value": "Player"}],
                            }
                        ],
                    },
                    {
                        "__identifier": "Snow",
                        "__type": "Tiles",
                        "__gridSize": 16,
                        "__tilesetDefUid": 1,
                        "gridTiles": [{"px": [48, 64], "src": [16, 0]}],
                    },
                    {
                        "__identifier": "Ground",
                        "__type": "Tiles",
                        "__gridSize": 16,
                        "__tilesetDefUid": 1,
                        "gridTiles": [
                            {"px": [0, 64], "src": [0, 0]},
                            {"px": [16, 64], "src": [0, 0]},
                            {"px": [32, 64], "src": [0, 0]},
                        ],
                    },
                ],
            }
        ],
    }
    (tmp_path / "tilemaps" / "map_0.ldtk").write_text(json.dumps(data), encoding="utf-8")
    return _state_classes(tmp_path)


def _press(state, key):
    state.input.handle_event(pygame.event.Event(pygame.KEYDOWN, key=key))


def test_template_start_adds_sprite(assets):
    template_cls, _ = assets
    manager = StateManager()
    manager.add(template_cls())
    state = manager.current
    assert state.player in state.members
    assert state.player.position == Vector2(100, 100)
    assert (state.player.hitbox.width, state.player.hitbox.height) == (20, 10)


def test_template_click_records_virtual_mouse(assets):
    template_cls, _ = assets
    state = template_cls()
    state.start()
    state.input.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(50, 60)))
    state.update(0.0)
    assert state.balls_positions == [Vector2(50, 60)]


def test_template_right_click_ignored(assets):
    template_cls, _ = assets
    manager = StateManager()
    manager.add(template_cls())
    state = manager.current
    state.input.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(50, 60)))
    manager.update(0.0)
    assert state.balls_positions == []


def test_template_draws_balls(assets):
    template_cls, _ = assets
    state = template_cls()
    state.start()
    state.balls_positions.append(Vector2(50, 60))
    surface = pygame.Surface((GAME_SIZE.width, GAME_SIZE.height))
    state.draw(surface)
    assert surface.get_at((50, 60))[:3] == PURPLE


def test_template_p_switches_to_second(assets):
    template_cls, second_cls = assets
    manager = StateManager()
    manager.add(template_cls())
    manager.add(second_cls())
    _press(manager.current, pygame.K_p)
    manager.update(0.0)
    assert isinstance(manager.current, SecondState)
    assert manager.current.player in manager.current.members


def test_second_start_loads_map_and_player(assets):
    _, second_cls = assets
    state = second_cls()
    state.start()
    assert state.collisions_layer == {(0, 4), (1, 4), (2, 4), (3, 4)}
    assert isinstance(state.player, Player)
    assert (state.player.position.x, state.player.position.y) == (32, 16)
    assert state.player.tint == (0, 121, 241, 255)
    assert (state.player.drag.x, state.player.drag.y) == (500, 200)
    assert state.camera.target == Vector2(32, 16)
    assert set(state.tilesets) == {"Terrain"}


def test_second_player_lands_and_camera_follows(assets):
    _, second_cls = assets
    state = second_cls()
    state.start()
    for _ in range(120):
        state.update(1 / 60)
    player = state.player
    assert player.position.y == pytest.approx(64 - player.hitbox.height)
    assert player.velocity.y == 0
    assert state.camera.target == Vector2(round(player.position.x), round(player.position.y))


def test_second_zoom_keys(assets):
    _, second_cls = assets
    manager = StateManager()
    manager.add(second_cls())
    state = manager.current
    before = state.camera.zoom
    _press(state, pygame.K_c)
    manager.update(0.0)
    assert state.camera.zoom == pytest.approx(before - 0.4)
    state.input.begin_frame()
    state.input.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_x))
    manager.update(0.0)
    assert state.camera.zoom == pytest.approx(before)


def test_second_p_switches_back(assets):
    template_cls, second_cls = assets
    manager = StateManager()
    manager.add(template_cls())
    manager.add(second_cls())
    manager.switch_state(2)
    assert isinstance(manager.current, SecondState)
    _press(manager.current, pygame.K_p)
    manager.update(0.0)
    current = manager.current
    assert isinstance(current, TemplateState)
    assert current.player in current.members
    assert (current.player.position.x, current.player.position.y) == (100, 100)
    assert current.balls_positions == []


def test_second_draws_map_tiles(assets):
    _, second_cls = assets
    state = second_cls()
    state.start()
    surface = pygame.Surface((GAME_SIZE.width, GAME_SIZE.height))
    surface.fill((0, 0, 0))
    state.draw(surface)
    tile = state.camera.world_to_screen(Vector2(0, 64))
    assert surface.get_at((round(tile.x) + 2, round(tile.y) + 2))[:3] == TILE_COLOUR


def test_second_missing_map_raises(tmp_path):
    _, second_cls = _state_classes(tmp_path)
    manager = StateManager()
    with pytest.raises(FileNotFoundError):
        manager.add(second_cls())