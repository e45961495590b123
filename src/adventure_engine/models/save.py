"""
save.py

PURPOSE: On-disk format for saved games.
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
A save is just the command log: the raw text of every command the player
typed, in order. Restoring builds the world fresh and replays it through
Game.load(), so there is no game state to serialize and nothing to keep in
sync when the engine changes.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from adventure_engine.engine.game import Game

logger = logging.getLogger(__name__)

SAVE_FORMAT_VERSION = 1


class SaveFile(BaseModel):
    """A saved command log."""

    version: int = Field(default=SAVE_FORMAT_VERSION, ge=1)
    world_title: str = Field(..., min_length=1)
    commands: list[str] = Field(default_factory=list)


def write_save(path: Path | str, game: "Game", title: str) -> SaveFile:
    """
    Write a game's command log to a JSON save file.

    Returns:
        The SaveFile that was written
    """
    save = SaveFile(world_title=title, commands=game.save())

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(save.model_dump_json(indent=2))

    logger.info(f"Saved {len(save.commands)} commands to {path}")
    return save


def read_save(path: Path | str) -> SaveFile:
    """
    Read a save file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        pydantic.ValidationError: If the file isn't a valid save
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"The save file {path} does not exist.")

    save = SaveFile.model_validate_json(path.read_text())
    if save.version > SAVE_FORMAT_VERSION:
        logger.warning(f"{path} was written by a newer version (format {save.version})")
    return save
