"""
loader.py

PURPOSE: Turn world definition files into playable Game objects.
DEPENDENCIES: pydantic (via models), config, engine

ARCHITECTURE NOTES:
Loading is two steps so each can be used on its own:

1. load_world(path)  -> WorldDefinition  (JSON + schema validation)
2. build_game(world) -> Game             (live locations, exits, items)

build_game() is deterministic: the same definition always produces a game in
the same starting state. Save files rely on this, since restoring a game is
building it again and replaying the command log.
"""

import json
import logging
from pathlib import Path

from adventure_engine.config import Settings, get_settings
from adventure_engine.engine.game import Difficulty, Game
from adventure_engine.engine.inventory import Item
from adventure_engine.engine.location import Location
from adventure_engine.models.world import ItemDefinition, WorldDefinition

logger = logging.getLogger(__name__)


def load_world(path: Path | str) -> WorldDefinition:
    """
    Load and validate a world JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file isn't valid JSON
        pydantic.ValidationError: If the JSON doesn't describe a valid world
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"The world file {path} does not exist.")

    with open(path) as f:
        data = json.load(f)

    world = WorldDefinition.model_validate(data)
    logger.info(
        f"Loaded world '{world.metadata.title}' from {path}: "
        f"{len(world.locations)} locations, {len(world.items)} items"
    )
    return world


def build_game(world: WorldDefinition, settings: Settings | None = None) -> Game:
    """
    Build a ready-to-play Game from a world definition.

    Args:
        world: A validated world definition
        settings: Engine settings (default: from the environment)

    Returns:
        A Game positioned at the world's start location
    """
    settings = settings or get_settings()

    game = Game(
        world.prologue,
        help_text=world.help_text,
        difficulty=Difficulty[world.difficulty.upper()],
        max_macro_depth=settings.max_macro_depth,
        compress_content=settings.compress_content,
    )

    for identifier, text in world.content.items():
        game.content.add(identifier, text)

    for name, replacement in world.macros.items():
        game.macros.add_macro(name, replacement)

    # Before any location or item names, which never override a known word
    for surface_form, canonical in world.synonyms.items():
        game.nouns.add(surface_form, canonical)

    locations: dict[str, Location] = {}
    for definition in world.locations:
        locations[definition.id] = Location(
            game,
            definition.name,
            definition.description,
            lights_on=definition.lights_on,
            lights_off_description=definition.lights_off_description,
        )

    items = {definition.id: definition for definition in world.items}

    for definition in world.locations:
        location = locations[definition.id]

        for direction, exit_ in definition.exits.items():
            if isinstance(exit_, str):
                location.add_exit(direction, locations[exit_])
                continue

            messages = {}
            if exit_.lock_message:
                messages["lock_message"] = exit_.lock_message
            if exit_.unlock_message:
                messages["unlock_message"] = exit_.unlock_message
            location.add_exit(
                direction,
                locations[exit_.target],
                locked=exit_.locked,
                unlock_object=exit_.unlock_object,
                **messages,
            )

        for item_id in definition.items:
            location.add_item(_make_item(game, items[item_id]))

    for item_id in world.inventory:
        game.inventory.add(_make_item(game, items[item_id]))

    game.start_location = locations[world.start_location]

    logger.info(f"Built '{world.metadata.title}' starting at {game.start_location.name}")
    return game


def _make_item(game: Game, definition: ItemDefinition) -> Item:
    """Create an Item and teach the parser every word for it."""
    game.register_noun(definition.id)
    game.register_noun(definition.name, definition.id)
    for synonym in definition.synonyms:
        game.nouns.add(synonym, definition.id)

    return Item(
        noun=definition.id,
        name=definition.name,
        description=definition.description,
        pick_up_message=definition.pick_up_message,
    )
