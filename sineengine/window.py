"""Window creation and letterboxed presentation of the game surface."""

from __future__ import annotations

import pygame

from .geometry import Rect
from .settings import GAME_SIZE

BLACK = (0, 0, 0)


def init_window(
    screen_width: int,
    screen_height: int,
    game_width: int,
    game_height: int,
    title: str,
    resizable: bool = True,
    fps: int = 60,
):
    """Open the window and set the virtual game resolution.

    Returns the display surface and a clock; tick the clock with ``fps``
    once per frame to cap the frame rate.
    """
    pygame.init()
    flags = pygame.RESIZABLE if resizable else 0
    screen = pygame.display.set_mode((screen_width, screen_height), flags)
    pygame.display.set_caption(title)
    GAME_SIZE.resize(game_width, game_height)
    clock = pygame.time.Clock()
    clock.tick(fps)
    return screen, clock


def letterbox_scale(screen_width: float, screen_height: float, game_width: float, game_height: float) -> float:
    """Largest factor at which the game area still fits the screen."""
    return min(screen_width / game_width, screen_height / game_height)


def letterbox_rect(
    screen_width: float, screen_height: float, scale: float, game_width: float, game_height: float
) -> Rect:
    """Screen rectangle the scaled game area occupies, centred."""
    w = game_width * scale
    h = game_height * scale
    return Rect((screen_width - w) * 0.5, (screen_height - h) * 0.5, w, h)


def draw_letterbox(screen, target, scale: float, game_width: float, game_height: float) -> None:
    """Clear ``screen`` to black and draw ``target`` scaled and centred on it."""
    screen.fill(BLACK)
    sw, sh = screen.get_size()
    rect = letterbox_rect(sw, sh, scale, game_width, game_height)
    size = (max(0, round(rect.width)), max(0, round(rect.height)))
    scaled = pygame.transform.scale(target, size)
    screen.blit(scaled, (round(rect.x), round(rect.y)))
    if pygame.display.get_init() and pygame.display.get_surface() is screen:
        pygame.display.flip()