"""Game engine module."""

from adventure_engine.engine.actions import execute_action
from adventure_engine.engine.command_queue import CommandQueue
from adventure_engine.engine.exits import Exit, ExitTable
from adventure_engine.engine.game import Difficulty, Game, GameReply, ReplyState
from adventure_engine.engine.inventory import Inventory, Item
from adventure_engine.engine.location import CommandHandler, Location
from adventure_engine.engine.macros import MacroTable

__all__ = [
    "CommandHandler",
    "CommandQueue",
    "Difficulty",
    "Exit",
    "ExitTable",
    "Game",
    "GameReply",
    "Inventory",
    "Item",
    "Location",
    "MacroTable",
    "ReplyState",
    "execute_action",
]
