"""
conftest.py

Shared pytest fixtures for adventure_engine tests.
"""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from adventure_engine.engine.game import Game
from adventure_engine.engine.inventory import Item
from adventure_engine.engine.location import Location
from adventure_engine.models.command import Command, Direction, Verb
from adventure_engine.models.world import WorldDefinition

FIXTURES_DIR = Path(__file__).parent / "fixtures"

PROLOGUE = "Welcome to test adventure. You will be bedazzled with awesomeness."

OUTSIDE_DESCRIPTION = (
    "You are standing on a driveway outside of a house. It is nighttime and very cold. "
    "There is frost on the ground. There is a door to the north with a plant pot next "
    "to the door mat."
)
HALLWAY_DESCRIPTION = (
    "You are standing in a hallway that is modern, yet worn. There is a door to the "
    "west. To the south the front door leads back to the driveway."
)
HALLWAY_LIGHTS_OFF = (
    "You are standing in a very dimly lit hallway. Your eyes struggle to adjust to the "
    "low light. You notice there is a switch on the wall to your left."
)
LOUNGE_DESCRIPTION = (
    "You are standing in the lounge. There is a sofa and a TV inside. There is a door "
    "back to the hallway to the east."
)
LIGHTS_ON_REPLY = (
    "You flip the lightswitch and the lights flicker for a few seconds until they "
    "illuminate the hallway. You hear a faint buzzing sound coming from the lights."
)


class Outside(Location):
    """The driveway: the key is hidden under the plant pot until looked for."""

    key = Item("key", "key", "It is a small brass key.", "You pick up the key.")

    def process_command(self, command: Command) -> str:
        game = self.game

        if command.verb == Verb.LOOK and command.noun == "plantpot":
            self.flags["looked_at_plant_pot"] = True
            if game.inventory.exists("key"):
                return "It's a plant pot. Quite unremarkable."
            game.moves += 1
            return "You move the plant pot and find a key sitting under it."

        if command.verb == Verb.LOOK and command.noun == "doormat":
            return (
                "It's a doormat where people wipe their feet. On it is written "
                "'There is no place like 10.0.0.1'."
            )

        if command.verb == Verb.TAKE and command.noun == "key":
            if not self.flags.get("looked_at_plant_pot"):
                return "What key?"
            if game.inventory.exists("key"):
                return "You already have the key."
            game.inventory.add(self.key)
            game.increase_score(1)
            game.moves += 1
            return self.key.pick_up_message

        return super().process_command(command)


def hallway_lightswitch(location: Location, command: Command) -> str | None:
    """Intercept for the hallway: the lightswitch toggles the lights."""
    if command.verb != Verb.USE or command.noun != "lightswitch":
        return None

    location.game.moves += 1
    if location.toggle_lights():
        location.game.increase_score(1)
        return f"{LIGHTS_ON_REPLY} {location.description}"
    return location.description


def build_three_rooms() -> Game:
    """Driveway, dark hallway behind a locked front door, and a lounge."""
    game = Game(PROLOGUE)

    for surface_form, canonical in [
        ("light", "lightswitch"),
        ("lights", "lightswitch"),
        ("lightswitch", "lightswitch"),
        ("switch", "lightswitch"),
        ("plantpot", "plantpot"),
        ("plant", "plantpot"),
        ("pot", "plantpot"),
        ("key", "key"),
        ("keys", "key"),
        ("doormat", "doormat"),
        ("mat", "doormat"),
        ("door", "door"),
        ("frontdoor", "door"),
    ]:
        game.nouns.add(surface_form, canonical)

    outside = Outside(game, "Outside", OUTSIDE_DESCRIPTION)
    hallway = Location(
        game,
        "Hallway",
        HALLWAY_DESCRIPTION,
        lights_on=False,
        lights_off_description=HALLWAY_LIGHTS_OFF,
        intercept=hallway_lightswitch,
    )
    lounge = Location(game, "Lounge", LOUNGE_DESCRIPTION)

    outside.add_exit(Direction.NORTH, hallway, locked=True, unlock_object="key", two_way=True)
    hallway.add_exit(Direction.WEST, lounge, two_way=True)

    game.start_location = outside
    return game


@pytest.fixture
def three_rooms_factory() -> Callable[[], Game]:
    """Builds a fresh copy of the three-room world on every call."""
    return build_three_rooms


@pytest.fixture
def three_rooms_text() -> dict[str, str]:
    """The fixed texts of the three-room world, by name."""
    return {
        "prologue": PROLOGUE,
        "outside": OUTSIDE_DESCRIPTION,
        "hallway": HALLWAY_DESCRIPTION,
        "hallway_dark": HALLWAY_LIGHTS_OFF,
        "lounge": LOUNGE_DESCRIPTION,
        "lights_on": LIGHTS_ON_REPLY,
    }


@pytest.fixture
def three_rooms() -> Game:
    """The three-room world, ready to play from the driveway."""
    return build_three_rooms()


@pytest.fixture
def game() -> Game:
    """An empty game with no locations."""
    return Game("A test game.")


@pytest.fixture
def two_rooms(game: Game) -> tuple[Game, Location, Location]:
    """Two rooms joined north/south, started in the first."""
    first = Location(game, "First Room", "You are in the first room.")
    second = Location(game, "Second Room", "You are in the second room.")
    first.add_exit(Direction.NORTH, second, two_way=True)
    game.start_location = first
    return game, first, second


@pytest.fixture
def sample_world_path() -> Path:
    """Path to the sample world JSON file."""
    return FIXTURES_DIR / "sample_world.json"


@pytest.fixture
def sample_world_dict(sample_world_path: Path) -> dict:
    """Load the sample world as a dictionary."""
    with open(sample_world_path) as f:
        return json.load(f)


@pytest.fixture
def sample_world(sample_world_dict: dict) -> WorldDefinition:
    """Load and validate the sample world."""
    return WorldDefinition.model_validate(sample_world_dict)


@pytest.fixture
def minimal_world_dict() -> dict:
    """A minimal valid world for testing."""
    return {
        "metadata": {
            "title": "Minimal Test World",
        },
        "locations": [
            {
                "id": "start",
                "name": "Starting Room",
                "description": "A simple room.",
            }
        ],
        "start_location": "start",
    }
