"""
state.py

PURPOSE: Serializable snapshot of a game's mutable state.
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
The live state is spread over the Game and its Locations (current location,
inventory, lights, exit locks, items lying around, intercept flags).
GameSnapshot gathers it into one plain model so two sessions can be
compared, e.g. a played session against the same commands replayed into a
freshly built world.
"""

from typing import Any

from pydantic import BaseModel, Field


class GameSnapshot(BaseModel):
    """Point-in-time copy of everything the player can change."""

    current_location: str | None = Field(
        default=None, description="Name of the location the player is in"
    )
    inventory: list[str] = Field(
        default_factory=list,
        description="Nouns of carried items, in pick-up order",
    )
    locked_exits: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Location name -> directions that are still locked",
    )
    lights: dict[str, bool] = Field(
        default_factory=dict,
        description="Location name -> lights on",
    )
    items: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Location name -> nouns of the items lying there",
    )
    location_flags: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        description="Location name -> that location's intercept flags",
    )
    visited: list[str] = Field(default_factory=list)
    score: int = Field(default=0)
    moves: int = Field(default=0)
    flags: dict[str, Any] = Field(default_factory=dict)
