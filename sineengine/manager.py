"""Switching between game states."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .state import State


@dataclass
class _StoredState:
    instance: State
    recreate: Callable[[], State]
    state_index: int


class StateManager:
    """Holds the game's states and runs the current one.

    States are numbered from 1 in the order they are added. Switching away
    from a state replaces it with a fresh instance of its class, so state
    classes must be constructible without arguments.
    """

    def __init__(self) -> None:
        self._states: list[_StoredState] = []
        self.num_of_states = 0

    @property
    def current(self) -> State:
        """The state being run."""
        if not self._states:
            raise LookupError("no states have been added")
        return self._states[0].instance

    def add(self, state: State) -> None:
        """Register a state; the first one added is started at once."""
        if not isinstance(state, State):
            raise TypeError("state must inherit from State")
        self.num_of_states += 1
        state.manager = self
        state.state_index = self.num_of_states
        self._states.append(_StoredState(state, type(state), self.num_of_states))
        if self.num_of_states == 1:
            state.start()

    def start(self) -> None:
        self.current.start()

    def update(self, dt: float) -> None:
        self.current.update(dt)

    def draw(self, surface) -> None:
        self.current.draw(surface)

    def switch_state(self, state_index: int) -> None:
        """Reset the current state and start the one numbered ``state_index``.

        If no state has that number, the current state is restarted fresh.
        """
        if not self._states:
            return
        head = self._states[0]
        head.instance = head.recreate()
        head.instance.manager = self
        head.instance.state_index = head.state_index

        for i, stored in enumerate(self._states):
            if stored.state_index == state_index:
                self._states[0], self._states[i] = self._states[i], self._states[0]
                break

        self._states[0].instance.start()