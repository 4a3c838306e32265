"""Base game objects and groups of them."""

from __future__ import annotations


class Basic:
    """An object that can be updated and drawn."""

    def __init__(self) -> None:
        self.active = True
        self.visible = True
        self.camera = None
        self.parent_state = None

    def update(self, dt: float) -> None:
        """Advance the object by ``dt`` seconds."""

    def draw(self, surface) -> None:
        """Draw the object onto ``surface``."""

    def destroy(self) -> None:
        """Deactivate the object."""
        self.active = False


class Group(Basic):
    """A collection of objects updated and drawn in insertion order."""

    def __init__(self) -> None:
        super().__init__()
        self.members: list[Basic] = []

    def add(self, obj: Basic) -> None:
        self.members.append(obj)

    def remove(self, obj: Basic) -> None:
        """Remove ``obj`` if present; absent objects are ignored."""
        if obj in self.members:
            self.members.remove(obj)

    def update(self, dt: float) -> None:
        for obj in self.members:
            if obj is not None and obj.active:
                obj.update(dt)

    def draw(self, surface) -> None:
        for obj in self.members:
            if obj is not None and obj.active and obj.visible:
                obj.draw(surface)