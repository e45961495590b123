"""
exits.py

PURPOSE: Directed, optionally locked connections between locations.
DEPENDENCIES: command model (Direction), errors

ARCHITECTURE NOTES:
Every location owns one ExitTable. A table holds at most one exit per
direction; asking for a second one is an authoring bug and raises rather
than overwriting. Exits unlock once and stay unlocked.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from adventure_engine.errors import ExitAlreadyExistsError
from adventure_engine.models.command import Direction

if TYPE_CHECKING:
    from adventure_engine.engine.location import Location

DEFAULT_LOCK_MESSAGE = "The door is locked."
DEFAULT_UNLOCK_MESSAGE = "You turn the key in the lock and you hear a THUNK of the door unlocking."


@dataclass
class Exit:
    """
    An exit from a location.

    Attributes:
        destination: Where the exit leads
        locked: Whether the exit currently blocks movement
        unlock_object: Canonical noun of the item that unlocks it
        lock_message: Reply when the player walks into the locked exit
        unlock_message: Reply when the player unlocks it
    """

    destination: "Location"
    locked: bool = False
    unlock_object: str | None = None
    lock_message: str = DEFAULT_LOCK_MESSAGE
    unlock_message: str = DEFAULT_UNLOCK_MESSAGE

    def unlock(self) -> None:
        self.locked = False

    def can_be_unlocked_with(self, noun: str) -> bool:
        """True if this exit is locked and `noun` is its key."""
        return self.locked and self.unlock_object is not None and self.unlock_object == noun


def coerce_direction(direction: Direction | str) -> Direction:
    """Accept a Direction or any of its surface forms ("n", "North")."""
    if isinstance(direction, Direction):
        return direction
    resolved = Direction.from_word(direction)
    if resolved is None:
        raise ValueError(f"Unknown direction: {direction!r}")
    return resolved


class ExitTable:
    """Direction -> Exit mapping for a single location."""

    def __init__(self) -> None:
        self._exits: dict[Direction, Exit] = {}

    def add(self, direction: Direction | str, exit_: Exit) -> Exit:
        """
        Register an exit.

        Raises:
            ExitAlreadyExistsError: If the direction is already mapped
        """
        direction = coerce_direction(direction)
        if direction in self._exits:
            raise ExitAlreadyExistsError(
                f"An exit already exists for the direction <{direction.value}>."
            )
        self._exits[direction] = exit_
        return exit_

    def get(self, direction: Direction | str | None) -> Exit | None:
        """The exit in a direction, or None."""
        if direction is None:
            return None
        if not isinstance(direction, Direction):
            direction = Direction.from_word(direction)
            if direction is None:
                return None
        return self._exits.get(direction)

    def destination(self, direction: Direction | str) -> "Location | None":
        exit_ = self.get(direction)
        return exit_.destination if exit_ else None

    def locked_exits(self) -> list[tuple[Direction, Exit]]:
        """All currently locked exits, in the order they were added."""
        return [(direction, exit_) for direction, exit_ in self._exits.items() if exit_.locked]

    def items(self) -> list[tuple[Direction, Exit]]:
        return list(self._exits.items())

    def __contains__(self, direction: object) -> bool:
        if isinstance(direction, (Direction, str)):
            return self.get(direction) is not None
        return False

    def __len__(self) -> int:
        return len(self._exits)

    def __iter__(self) -> Iterator[Direction]:
        return iter(self._exits)
