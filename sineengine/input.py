"""Per-frame keyboard and mouse state built from pygame events."""

from __future__ import annotations

import pygame

from .geometry import Vector2


class InputState:
    """Tracks which keys are held and which were pressed this frame.

    Mouse buttons use pygame numbering (1 is the left button).
    """

    def __init__(self) -> None:
        self._down: set[int] = set()
        self._pressed: set[int] = set()
        self._mouse_pressed: set[int] = set()
        self.mouse_position = Vector2(0, 0)

    def begin_frame(self) -> None:
        """Forget presses from the previous frame."""
        self._pressed.clear()
        self._mouse_pressed.clear()

    def handle_event(self, event) -> None:
        """Update the state from one pygame event."""
        if event.type == pygame.KEYDOWN:
            if event.key not in self._down:
                self._pressed.add(event.key)
            self._down.add(event.key)
        elif event.type == pygame.KEYUP:
            self._down.discard(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._mouse_pressed.add(event.button)
            self.mouse_position = Vector2(*event.pos)
        elif event.type == pygame.MOUSEMOTION:
            self.mouse_position = Vector2(*event.pos)

    def is_key_pressed(self, key: int) -> bool:
        return key in self._pressed

    def is_key_down(self, key: int) -> bool:
        return key in self._down

    def is_mouse_button_pressed(self, button: int) -> bool:
        return button in self._mouse_pressed