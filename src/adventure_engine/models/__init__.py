"""Domain models for the adventure engine."""

from adventure_engine.models.command import Command, Direction, Preposition, Verb
from adventure_engine.models.save import SaveFile
from adventure_engine.models.state import GameSnapshot
from adventure_engine.models.world import (
    ExitDefinition,
    ItemDefinition,
    LocationDefinition,
    WorldDefinition,
    WorldMetadata,
)

__all__ = [
    "Command",
    "Direction",
    "ExitDefinition",
    "GameSnapshot",
    "ItemDefinition",
    "LocationDefinition",
    "Preposition",
    "SaveFile",
    "Verb",
    "WorldDefinition",
    "WorldMetadata",
]
