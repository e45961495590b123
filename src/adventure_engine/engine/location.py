"""
location.py

PURPOSE: A place in the game world and its command-handling contract.
DEPENDENCIES: exits, inventory, actions, command model

ARCHITECTURE NOTES:
A location's behaviour is "intercept, else delegate":

1. Intercepts registered with add_intercept() run in order. Each one may
   return a reply (handled) or None (not mine).
2. Anything left over goes to default_command(), which runs the generic
   verb handlers in actions.py (movement, take/drop, unlocking...).

Subclasses get the same effect by overriding process_command() and calling
super() for whatever they don't handle themselves. Either way, the generic
behaviour is never a closed switch that special locations have to copy.

The behaviourally relevant state is small: lights_on plus the locked flag
of each exit. `flags` is free-form scratch space for intercepts.
"""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from adventure_engine.engine.actions import execute_action
from adventure_engine.engine.exits import (
    DEFAULT_LOCK_MESSAGE,
    DEFAULT_UNLOCK_MESSAGE,
    Exit,
    ExitTable,
    coerce_direction,
)
from adventure_engine.engine.inventory import Item
from adventure_engine.errors import ExitAlreadyExistsError
from adventure_engine.models.command import Command, Direction

if TYPE_CHECKING:
    from adventure_engine.engine.game import Game

logger = logging.getLogger(__name__)

# (location, command) -> reply, or None to let the next handler try
CommandHandler = Callable[["Location", Command], "str | None"]


class Location:
    """
    A location (room) in the game world.

    Usage:
        hallway = Location(game, "Hallway", "A long hallway.",
                           lights_on=False,
                           lights_off_description="It is very dark.")
        outside.add_exit(Direction.NORTH, hallway, locked=True,
                         unlock_object="key")
    """

    def __init__(
        self,
        game: "Game",
        name: str,
        description: str,
        *,
        lights_on: bool = True,
        lights_off_description: str = "",
        intercept: CommandHandler | None = None,
    ):
        """
        Create a location and register it with its game.

        Args:
            game: The owning game
            name: Display name, also registered as a noun
            description: Text shown when the lights are on
            lights_on: Initial light state
            lights_off_description: Text shown when the lights are off
            intercept: Optional first handler for the intercept chain

        Raises:
            ValueError: If game is None or name/description are empty
        """
        if game is None:
            raise ValueError("A location must belong to a game.")
        if not name or not name.strip():
            raise ValueError("The location name can not be empty.")
        if not description or not description.strip():
            raise ValueError("The location description can not be empty.")

        self.game = game
        self.name = name
        self._description = description
        self.lights_on = lights_on
        self.lights_off_description = lights_off_description
        self.exits = ExitTable()
        self.items: dict[str, Item] = {}
        self.flags: dict[str, Any] = {}
        self._intercepts: list[CommandHandler] = []

        if intercept is not None:
            self.add_intercept(intercept)

        game.add_location(self)

    def __repr__(self) -> str:
        return f"Location({self.name!r})"

    @property
    def noun(self) -> str:
        """Canonical noun token for this location."""
        return self.name.strip().lower()

    @property
    def description(self) -> str:
        """What the player sees here, taking the lights into account."""
        if not self.lights_on and self.lights_off_description:
            return self.lights_off_description
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        if not value or not value.strip():
            raise ValueError("The location description can not be empty.")
        self._description = value

    @property
    def lit_description(self) -> str:
        """The description with the lights on, regardless of their state."""
        return self._description

    def toggle_lights(self) -> bool:
        """Flip the lights and return the new state."""
        self.lights_on = not self.lights_on
        logger.debug(f"{self.name}: lights {'on' if self.lights_on else 'off'}")
        return self.lights_on

    def add_exit(
        self,
        direction: Direction | str,
        destination: "Location",
        locked: bool = False,
        unlock_object: str | None = None,
        *,
        lock_message: str = DEFAULT_LOCK_MESSAGE,
        unlock_message: str = DEFAULT_UNLOCK_MESSAGE,
        two_way: bool = False,
    ) -> Exit:
        """
        Connect this location to another.

        Args:
            direction: Direction of travel from here
            destination: Where the exit leads
            locked: Whether the exit starts locked
            unlock_object: Canonical noun of the item that unlocks it
            lock_message: Reply when walking into the locked exit
            unlock_message: Reply when the exit is unlocked
            two_way: Also add an unlocked exit back from the destination

        Returns:
            The new Exit

        Raises:
            ValueError: If destination is None
            ExitAlreadyExistsError: If the direction is already used here
                (or, with two_way, the opposite direction at the destination)
        """
        if destination is None:
            raise ValueError("An exit needs a destination.")

        direction = coerce_direction(direction)
        if two_way and direction.opposite in destination.exits:
            raise ExitAlreadyExistsError(
                f"{destination.name} already has an exit for the direction "
                f"<{direction.opposite.value}>."
            )

        exit_ = self.exits.add(
            direction,
            Exit(
                destination=destination,
                locked=locked,
                unlock_object=unlock_object,
                lock_message=lock_message,
                unlock_message=unlock_message,
            ),
        )

        if two_way:
            destination.add_exit(direction.opposite, self)

        return exit_

    def add_item(self, item: Item) -> Item:
        """Place an item here and teach the parser its noun and name."""
        self.items[item.noun] = item
        self.game.register_noun(item.noun)
        self.game.register_noun(item.name, item.noun)
        return item

    def add_intercept(self, handler: CommandHandler) -> None:
        """Append a handler to the intercept chain."""
        self._intercepts.append(handler)

    def process_command(self, command: Command) -> str:
        """
        Handle a command: intercepts first, then the default handlers.

        Args:
            command: The parsed command

        Returns:
            Reply text for the player
        """
        for handler in self._intercepts:
            reply = handler(self, command)
            if reply is not None:
                logger.debug(
                    f"{self.name}: {command.verb.name} handled by "
                    f"{getattr(handler, '__name__', repr(handler))}"
                )
                return reply

        return self.default_command(command)

    def default_command(self, command: Command) -> str:
        """The generic behaviour shared by every location."""
        return execute_action(self, command)
