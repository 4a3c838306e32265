"""Virtual game resolution shared by the engine."""

from dataclasses import dataclass


@dataclass
class GameSize:
    """The virtual resolution the game is rendered at."""

    width: int = 640
    height: int = 360

    def resize(self, width: int, height: int) -> None:
        """Change the virtual resolution."""
        self.width = width
        self.height = height


GAME_SIZE = GameSize()