"""
errors.py

PURPOSE: Exceptions raised while authoring or running a game.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
Only programming and authoring mistakes raise. Anything a player can type
is answered with a reply string instead, so none of these should escape
from Game.process_command for a correctly built world.
"""


class AdventureError(Exception):
    """Base class for all engine errors."""


class DuplicateKeyError(AdventureError, KeyError):
    """A key is already registered with a different value."""

    def __str__(self) -> str:
        # KeyError quotes its argument; we want the plain message.
        return str(self.args[0]) if self.args else ""


class ExitAlreadyExistsError(AdventureError, ValueError):
    """A location already has an exit in the requested direction."""


class GameNotStartedError(AdventureError, RuntimeError):
    """Input was processed before the game had a current location."""
