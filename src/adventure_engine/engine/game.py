"""
game.py

PURPOSE: The game orchestrator - turns one line of input into one reply.
DEPENDENCIES: parser, location, macros, command_queue, content, inventory

ARCHITECTURE NOTES:
process_command() is the only entry point during play:

1. Empty input -> PLAYING with an empty reply. Nothing is parsed or logged.
2. Global phrases (quit, score, help...) are matched against the whole
   lowercased input and win outright, whatever the current location might
   have made of the same words.
3. Everything else is parsed, appended to the command queue, handed to the
   current location, and the reply is passed through macro substitution.

The Game owns every piece of session state (synonyms, macros, command log,
inventory, score). Nothing is module-global, so independent sessions are
just independent Game instances.
"""

import logging
from collections.abc import Iterable
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, NamedTuple

from adventure_engine.content import ContentStore
from adventure_engine.engine.command_queue import CommandQueue
from adventure_engine.engine.inventory import Inventory
from adventure_engine.engine.macros import DEFAULT_MAX_DEPTH, MacroTable
from adventure_engine.errors import DuplicateKeyError, GameNotStartedError
from adventure_engine.models.command import Command
from adventure_engine.models.state import GameSnapshot
from adventure_engine.parser.parser import Parser
from adventure_engine.parser.synonyms import SynonymTable

if TYPE_CHECKING:
    from adventure_engine.engine.location import Location

logger = logging.getLogger(__name__)


class ReplyState(Enum):
    """What the caller should do with a reply."""

    PLAYING = auto()  # Show the reply text
    CLEAR_SCREEN = auto()
    EXIT = auto()
    SCORE = auto()
    INVENTORY = auto()
    HELP = auto()
    VISITED = auto()


class Difficulty(Enum):
    """Difficulty level. The value is the score multiplier."""

    EASY = 1
    MEDIUM = 2
    HARD = 3


HINT_COSTS: dict[Difficulty, int] = {
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 3,
    Difficulty.HARD: 10,
}


class GameReply(NamedTuple):
    """Result of processing one line of input."""

    state: ReplyState
    reply: str


# Whole-input phrases that bypass the parser
GLOBAL_OVERRIDES: dict[str, ReplyState] = {
    "clear": ReplyState.CLEAR_SCREEN,
    "cls": ReplyState.CLEAR_SCREEN,
    "clearscreen": ReplyState.CLEAR_SCREEN,
    "clear screen": ReplyState.CLEAR_SCREEN,
    "quit": ReplyState.EXIT,
    "exit": ReplyState.EXIT,
    "run away": ReplyState.EXIT,
    "kill yourself": ReplyState.EXIT,
    "kill your self": ReplyState.EXIT,
    "show score": ReplyState.SCORE,
    "score": ReplyState.SCORE,
    "view score": ReplyState.SCORE,
    "see score": ReplyState.SCORE,
    "what is my score": ReplyState.SCORE,
    "inventory": ReplyState.INVENTORY,
    "view inventory": ReplyState.INVENTORY,
    "help": ReplyState.HELP,
    "help me": ReplyState.HELP,
    "instructions": ReplyState.HELP,
    "read manual": ReplyState.HELP,
    "read the manual": ReplyState.HELP,
    "manual": ReplyState.HELP,
    "man": ReplyState.HELP,
    "locations": ReplyState.VISITED,
    "visited": ReplyState.VISITED,
    "visited locations": ReplyState.VISITED,
}


class Game:
    """
    A single game session.

    Usage:
        game = Game("Welcome to the house.")
        outside = Location(game, "Outside", "You are on the driveway.")
        hallway = Location(game, "Hallway", "A worn hallway.")
        outside.add_exit(Direction.NORTH, hallway)
        game.start_location = outside

        game.process_command("go north")
        # GameReply(state=ReplyState.PLAYING, reply="A worn hallway.")
    """

    def __init__(
        self,
        prologue: str | None = None,
        *,
        help_text: str = "",
        difficulty: Difficulty = Difficulty.EASY,
        max_macro_depth: int = DEFAULT_MAX_DEPTH,
        compress_content: bool = False,
    ):
        """
        Args:
            prologue: Introductory text. Optional, but not blank if given.
            help_text: Shown by the CLI when the player asks for help
            difficulty: Sets the score multiplier and hint cost
            max_macro_depth: Cap on nested macro expansion
            compress_content: Store content items compressed

        Raises:
            ValueError: If prologue is given but blank
        """
        if prologue is not None and not prologue.strip():
            raise ValueError("The prologue can not be empty.")

        self.prologue = prologue or ""
        self.help_text = help_text
        self.difficulty = difficulty

        self.parser = Parser()
        self.macros = MacroTable(max_depth=max_macro_depth)
        self.content = ContentStore(compressed=compress_content)
        self.inventory = Inventory()
        self.flags: dict[str, Any] = {}

        self.score = 0
        self.moves = 0

        self.locations: dict[str, "Location"] = {}
        self.current_location: "Location | None" = None
        self._start_location: "Location | None" = None
        self._visited: list["Location"] = []
        self._command_queue = CommandQueue()

    @property
    def nouns(self) -> SynonymTable:
        """The noun synonym table shared with the parser."""
        return self.parser.nouns

    def register_noun(self, surface_form: str, canonical: str | None = None) -> None:
        """Teach the parser a noun unless that word already means something."""
        if not surface_form or self.nouns.resolve(surface_form) is not None:
            return
        self.nouns.add(surface_form, canonical or surface_form.strip().lower())

    # Locations

    def add_location(self, location: "Location") -> None:
        """
        Register a location. Called by Location.__init__.

        Raises:
            DuplicateKeyError: If another location already has the name
        """
        existing = self.locations.get(location.name)
        if existing is not None and existing is not location:
            raise DuplicateKeyError(f"A location named '{location.name}' already exists.")
        self.locations[location.name] = location
        self.register_noun(location.noun)

    def get_location(self, name: str) -> "Location | None":
        return self.locations.get(name)

    @property
    def start_location(self) -> "Location | None":
        return self._start_location

    @start_location.setter
    def start_location(self, location: "Location") -> None:
        if location is None:
            raise ValueError("The start location can not be None.")
        if location.game is not self:
            raise ValueError(f"{location.name} belongs to a different game.")

        self._start_location = location
        if self.current_location is None:
            self.current_location = location
        self._mark_visited(location)

    def move_to(self, location: "Location") -> None:
        """Make location current, counting the move and the visit."""
        self.current_location = location
        self.moves += 1
        self._mark_visited(location)
        logger.debug(f"Moved to {location.name}")

    @property
    def visited_locations(self) -> list[str]:
        """Names of visited locations in first-visit order."""
        return [location.name for location in self._visited]

    def _mark_visited(self, location: "Location") -> None:
        if location not in self._visited:
            self._visited.append(location)

    # Score

    def increase_score(self, increase_by: int) -> None:
        """Add to the score, scaled by the difficulty multiplier."""
        self.score += increase_by * self.difficulty.value

    def decrease_score(self, decrease_by: int) -> None:
        self.score -= decrease_by

    @property
    def hint_cost(self) -> int:
        """Score cost of a hint at the current difficulty."""
        return HINT_COSTS[self.difficulty]

    # Play

    def process_command(self, raw_input: str | None) -> GameReply:
        """
        Process a line of player input.

        This is the main entry point for the game loop.

        Args:
            raw_input: Raw text from the player

        Returns:
            GameReply(state, reply)

        Raises:
            GameNotStartedError: If there is no current location yet
        """
        if not raw_input or not raw_input.strip():
            return GameReply(ReplyState.PLAYING, "")

        lowered = raw_input.strip().lower()
        override = GLOBAL_OVERRIDES.get(lowered)
        if override is not None:
            return GameReply(override, lowered)

        if self.current_location is None:
            raise GameNotStartedError("The game has no current location.")

        command = self.parser.parse(raw_input)
        self._command_queue.add_command(command)

        location = self.current_location
        reply = location.process_command(command)
        logger.debug(f"{location.name}: {raw_input!r} -> {reply!r}")

        return GameReply(ReplyState.PLAYING, self.macros.substitute(reply))

    @property
    def commands(self) -> tuple[Command, ...]:
        """Every parsed command so far, in order."""
        return self._command_queue.commands

    def save(self) -> list[str]:
        """The raw input of every command so far, ready to be persisted."""
        return self._command_queue.raw_inputs()

    def load(self, commands: Iterable[str | Command]) -> None:
        """
        Replay saved commands through process_command.

        Load into a freshly built world: replay starts from whatever state
        the game is in now.
        """
        self._command_queue.clear()

        count = 0
        for entry in commands:
            text = entry.full_text_command if isinstance(entry, Command) else entry
            self.process_command(text)
            count += 1

        logger.info(f"Replayed {count} commands")

    def snapshot(self) -> GameSnapshot:
        """Copy the player-changeable state into a comparable model."""
        return GameSnapshot(
            current_location=self.current_location.name if self.current_location else None,
            inventory=self.inventory.nouns(),
            locked_exits={
                name: [direction.value for direction, _ in location.exits.locked_exits()]
                for name, location in self.locations.items()
            },
            lights={name: location.lights_on for name, location in self.locations.items()},
            items={name: list(location.items) for name, location in self.locations.items()},
            location_flags={
                name: dict(location.flags) for name, location in self.locations.items()
            },
            visited=self.visited_locations,
            score=self.score,
            moves=self.moves,
            flags=dict(self.flags),
        )
