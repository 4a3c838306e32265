"""Entry point of the example game."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from ..manager import StateManager
from ..settings import GAME_SIZE
from ..window import draw_letterbox, init_window, letterbox_scale
from .states import DEFAULT_RESOURCES_PATH, SecondState, TemplateState

RAYWHITE = (245, 245, 245)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sine-game", description="Run the example game.")
    parser.add_argument("--width", type=int, default=1280, help="window width")
    parser.add_argument("--height", type=int, default=720, help="window height")
    parser.add_argument("--game-width", type=int, default=640, help="virtual game width")
    parser.add_argument("--game-height", type=int, default=360, help="virtual game height")
    parser.add_argument("--title", default="game", help="window title")
    parser.add_argument("--fps", type=int, default=60, help="frame rate cap")
    parser.add_argument("--assets", type=Path, default=DEFAULT_RESOURCES_PATH, help="assets directory")
    parser.add_argument(
        "--max-frames", type=int, default=0, help="stop after this many frames (0 runs until closed)"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    for state_class in (TemplateState, SecondState):
        state_class.resources_path = args.assets

    try:
        screen, clock = init_window(
            args.width, args.height, args.game_width, args.game_height, args.title, True, args.fps
        )
        target = pygame.Surface((GAME_SIZE.width, GAME_SIZE.height))

        manager = StateManager()
        manager.add(TemplateState())
        manager.add(SecondState())
        manager.start()

        frames = 0
        running = True
        while running:
            state = manager.current
            state.input.begin_frame()
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
                state.input.handle_event(event)
            if not running:
                break

            screen = pygame.display.get_surface() or screen
            screen_w, screen_h = screen.get_size()
            state.screen_size = (screen_w, screen_h)
            scale = letterbox_scale(screen_w, screen_h, GAME_SIZE.width, GAME_SIZE.height)
            manager.update(clock.tick(args.fps) / 1000)

            target.fill(RAYWHITE)
            manager.draw(target)
            draw_letterbox(screen, target, scale, GAME_SIZE.width, GAME_SIZE.height)

            frames += 1
            if args.max_frames and frames >= args.max_frames:
                running = False
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())