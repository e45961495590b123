"""
actions.py

PURPOSE: Default handlers for the verbs every location understands.
DEPENDENCIES: command model, exits, inventory

ARCHITECTURE NOTES:
Each verb has a handler that:
- Checks the action is possible from the current location
- Updates location/game state
- Returns narrative text

Handlers never raise for anything the player typed. A locked door or a
missing key is a reply, not an error.

Locations run their own intercepts first and only fall through to
execute_action for commands they chose not to special-case.
"""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from adventure_engine.engine.exits import Exit
from adventure_engine.models.command import Command, Direction, Verb

if TYPE_CHECKING:
    from adventure_engine.engine.location import Location

logger = logging.getLogger(__name__)

# Content identifier a game can set to customise the reply to rude input
RUDE_CONTENT_ID = "NoNeedToBeRude"
DEFAULT_RUDE_REPLY = "There is no need to be rude."

NOT_UNDERSTOOD = "I don't understand that."
CANT_DO_THAT = "You can't do that here."
CANT_GO_THAT_WAY = "You can't go that way."
CANT_SEE_THAT = "You can't see that here."
NOTHING_TO_UNLOCK = "That doesn't seem to unlock anything here."

ActionHandler = Callable[["Location", Command], str]


def execute_action(location: "Location", command: Command) -> str:
    """
    Run the default behaviour for a command at a location.

    This is the main dispatch function that routes to specific handlers.

    Args:
        location: The location the player is in
        command: The parsed command

    Returns:
        Reply text for the player
    """
    if command.profanity_detected:
        return handle_profanity(location, command)

    handlers: dict[Verb, ActionHandler] = {
        Verb.GO: handle_go,
        Verb.LOOK: handle_look,
        Verb.TAKE: handle_take,
        Verb.DROP: handle_drop,
        Verb.USE: handle_use,
        Verb.UNLOCK: handle_use,
        Verb.INVENTORY: handle_inventory,
        Verb.WAIT: handle_wait,
    }

    handler = handlers.get(command.verb)
    if handler:
        return handler(location, command)

    if command.verb == Verb.UNKNOWN:
        return NOT_UNDERSTOOD

    return CANT_DO_THAT


def handle_profanity(location: "Location", _command: Command) -> str:
    """Reply to rude input with the game's own text if it has one."""
    return location.game.content.retrieve(RUDE_CONTENT_ID) or DEFAULT_RUDE_REPLY


def handle_go(location: "Location", command: Command) -> str:
    """Handle GO <direction> (and GO <adjacent location name>)."""
    if not command.noun and not command.noun_text:
        return "Go where?"

    exit_ = _find_exit(location, command)
    if exit_ is None:
        return CANT_GO_THAT_WAY

    if exit_.locked:
        logger.debug(f"{location.name}: exit to {exit_.destination.name} is locked")
        return exit_.lock_message

    destination = exit_.destination
    location.game.move_to(destination)
    return destination.description


def _find_exit(location: "Location", command: Command) -> Exit | None:
    direction = command.direction
    if direction is not None:
        return location.exits.get(direction)

    # "go hallway" works when the hallway is next door
    if command.noun:
        for _, exit_ in location.exits.items():
            if exit_.destination.noun == command.noun:
                return exit_

    return None


def handle_look(location: "Location", command: Command) -> str:
    """Handle LOOK (describe the location) and LOOK AT <noun>."""
    if not command.noun and not command.noun_text:
        return location.description

    if not command.noun:
        return CANT_SEE_THAT

    game = location.game
    item = location.items.get(command.noun) or game.inventory.get(command.noun)
    if item:
        return item.description or f"It's a {item.name}."

    if command.noun == location.noun:
        return location.description

    direction = command.direction
    if direction is not None:
        return _describe_exit(location, direction)

    return "You see nothing special."


def _describe_exit(location: "Location", direction: Direction) -> str:
    exit_ = location.exits.get(direction)
    if exit_ is None:
        return f"There is nothing of interest to the {direction.value}."
    if exit_.locked:
        return f"The way {direction.value} is locked."
    return f"The way {direction.value} leads to the {exit_.destination.name}."


def handle_take(location: "Location", command: Command) -> str:
    """Handle TAKE/GET commands."""
    if not command.noun and not command.noun_text:
        return "Take what?"

    game = location.game

    held = game.inventory.get(command.noun)
    if held:
        return f"You already have the {held.name}."

    item = location.items.pop(command.noun, None) if command.noun else None
    if item is None:
        return CANT_SEE_THAT

    game.inventory.add(item)
    game.moves += 1
    logger.debug(f"{location.name}: took {item.noun}")
    return item.pick_up_message


def handle_drop(location: "Location", command: Command) -> str:
    """Handle DROP commands."""
    if not command.noun and not command.noun_text:
        return "Drop what?"

    item = location.game.inventory.remove(command.noun) if command.noun else None
    if item is None:
        return "You're not carrying that."

    location.items[item.noun] = item
    location.game.moves += 1
    return "Dropped."


def handle_use(location: "Location", command: Command) -> str:
    """
    Handle USE <item> [ON <target>] and UNLOCK <target> [WITH <item>].

    Unlocks the first locked exit here whose key is the item. A direction
    as the target narrows the search to that exit.
    """
    game = location.game

    if command.verb == Verb.UNLOCK:
        target, target_text = command.noun, command.noun_text
        tool, tool_text = command.noun2, command.noun2_text
        if not tool and not tool_text:
            # "unlock door": try everything the player carries
            for noun in game.inventory.nouns():
                reply = _unlock_with(location, noun, target)
                if reply is not None:
                    return reply
            return "You have nothing to unlock it with." if not game.inventory else NOTHING_TO_UNLOCK
    else:
        tool, tool_text = command.noun, command.noun_text
        target, target_text = command.noun2, command.noun2_text

    if not tool and not tool_text:
        return "Use what?"

    if not tool or not game.inventory.exists(tool):
        return f"You do not have a {tool_text or tool}."

    reply = _unlock_with(location, tool, target)
    if reply is not None:
        return reply

    if target or target_text or command.verb == Verb.UNLOCK:
        return NOTHING_TO_UNLOCK
    return "Nothing happens."


def _unlock_with(location: "Location", tool: str, target: str) -> str | None:
    """Unlock the matching exit and return its message, or None if none fit."""
    target_direction = Direction.from_word(target) if target else None

    for direction, exit_ in location.exits.locked_exits():
        if target_direction is not None and direction != target_direction:
            continue
        if exit_.can_be_unlocked_with(tool):
            exit_.unlock()
            location.game.moves += 1
            logger.info(f"{location.name}: exit {direction.value} unlocked with {tool}")
            return exit_.unlock_message

    return None


def handle_inventory(location: "Location", _command: Command) -> str:
    """Describe the player's inventory."""
    inventory = location.game.inventory
    if not inventory:
        return "You are empty-handed."

    lines = ["You are carrying:"]
    for name in inventory.names():
        lines.append(f"  - {name}")
    return "\n".join(lines)


def handle_wait(_location: "Location", _command: Command) -> str:
    return "Time passes."
