import pygame

from sineengine.input import InputState


def _key(kind, key):
    return pygame.event.Event(kind, key=key)


def test_key_down_and_pressed():
    state = InputState()
    state.handle_event(_key(pygame.KEYDOWN, pygame.K_a))
    assert state.is_key_pressed(pygame.K_a)
    assert state.is_key_down(pygame.K_a)


def test_pressed_cleared_next_frame_but_still_down():
    state = InputState()
    state.handle_event(_key(pygame.KEYDOWN, pygame.K_a))
    state.begin_frame()
    assert not state.is_key_pressed(pygame.K_a)
    assert state.is_key_down(pygame.K_a)


def test_key_up_releases():
    state = InputState()
    state.handle_event(_key(pygame.KEYDOWN, pygame.K_d))
    state.handle_event(_key(pygame.KEYUP, pygame.K_d))
    assert not state.is_key_down(pygame.K_d)


def test_mouse_button_and_position():
    state = InputState()
    state.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(7, 9)))
    assert state.is_mouse_button_pressed(1)
    assert (state.mouse_position.x, state.mouse_position.y) == (7, 9)
    state.begin_frame()
    assert not state.is_mouse_button_pressed(1)


def test_mouse_motion_updates_position():
    state = InputState()
    state.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(3, 4), rel=(0, 0), buttons=(0, 0, 0)))
    assert list(state.mouse_position) == [3, 4]