# sineengine

A small 2D game framework built on pygame. It provides:

- `sineengine.basic`: `Basic` objects (with `active`, `visible`, `update`,
  `draw`, `destroy`) and `Group`, which updates its active members and draws
  its active, visible ones in the order they were added.
- `sineengine.state`: `State`, a group with a `Camera2D`, an `InputState`, a
  virtual mouse position that accounts for letterboxing, and LDtk map support:
  `load_ldtk_map`, `get_ldtk_entity`, `draw_ldtk_map`, `draw_ldtk_level`,
  `draw_ldtk_layer`, `draw_ldtk_collision_layers` (F6 toggles the overlay),
  `tiles_around` and `physics_rects_around`.
- `sineengine.entity`: `Entity`, with position, velocity, acceleration, drag,
  gravity, a hitbox with an offset, and collision against the state's collision
  tiles resolved one axis at a time (`collisions` records the sides that were
  touched); `Sprite`, an entity drawn from an image (T toggles a hitbox
  overlay); and the helpers `overlap` and `overlap_group`.
- `sineengine.manager`: `StateManager`, which runs one state at a time. States
  are numbered from 1 in the order they are added; the first one added is
  started at once. `switch_state(index)` replaces the current state with a
  fresh instance of its class and starts the state with that number.
- `sineengine.ldtk`: `load_project` reads an `.ldtk` JSON file into
  `LdtkProject`, `LdtkLevel`, `LdtkLayer`, `LdtkTile` and `LdtkEntity`.
- `sineengine.window`: `init_window`, `letterbox_scale`, `letterbox_rect` and
  `draw_letterbox`, for drawing a fixed-size game surface centred and scaled
  into a resizable window.
- `sineengine.geometry`: `Vector2`, `Rect`, `Camera2D`, `check_collision_recs`
  and `move_towards`; `sineengine.settings.GAME_SIZE` holds the virtual
  resolution (640×360 by default).

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the example game

```
sineengine-game --assets path/to/assets
```

The assets directory must contain `button.png`, `circle.png` and
`tilemaps/map_0.ldtk` (with its tilesets, whose paths are taken relative to the
map file). Without `--assets`, the directory named by the `SINE_RESOURCES_PATH`
environment variable is used, or `assets` in the current directory.

Other options: `--width`, `--height` (window size, 1280×720), `--game-width`,
`--game-height` (virtual resolution, 640×360), `--title`, `--fps` (60) and
`--max-frames` (stop after that many frames; 0 runs until the window is closed).
Escape or closing the window quits.

The example has two states. In the first, a sprite is shown; clicking drops
purple markers and `P` switches to the second. The second loads the LDtk map,
where collision tiles come from the layers `Ground` and `Snow`, and places a
`Player` at the entity whose custom field `Name` is `Player`: `A`/`D` move,
`Space` jumps, `C`/`X` zoom out and in, `Z` sets the zoom to 1.2, `F6` shows the
collision tiles, `T` shows sprite hitboxes, and `P` goes back to the first state.

## Writing your own state

```python
from sineengine.state import State
from sineengine.entity import Sprite


class MyState(State):
    def start(self):
        super().start()
        self.hero = Sprite(100, 100)
        self.add(self.hero)

    def update(self, dt):
        super().update(dt)
        self.camera_follow(self.hero.position)
```

State classes must be constructible without arguments, since `StateManager`
rebuilds them when switching. If you write your own main loop, call
`state.input.begin_frame()` once per frame, pass each pygame event to
`state.input.handle_event(event)`, and set `state.screen_size` to the window
size so the virtual mouse position is right; `sineengine.game.main` shows a
complete loop.

## What it does not do

The package ships no images or maps, so the example game needs an assets
directory supplied as above. There is no sound, no saving or loading of game
progress, and LDtk support covers only what is listed above: levels, tile and
entity layers, tilesets and entity fields.