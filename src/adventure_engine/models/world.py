"""
world.py

PURPOSE: Pydantic models for world definition files (locations, exits, items).
DEPENDENCIES: pydantic, command model

ARCHITECTURE NOTES:
These models define the STATIC world - what exists before the player types
anything. They are separate from the live engine objects (Game, Location),
which loader.build_game() creates from them.

World JSON files are validated against these models when loaded. Hard
reference errors (an exit to a location that doesn't exist) fail here;
softer authoring problems are reported by validator.validate_world().
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from adventure_engine.models.command import DIRECTION_WORDS

INVENTORY = "inventory"


class WorldMetadata(BaseModel):
    """Metadata about the world itself."""

    title: str = Field(..., min_length=1, max_length=100)
    author: str = Field(default="Unknown")
    version: str = Field(default="1.0")
    description: str = Field(default="")


class ExitDefinition(BaseModel):
    """
    An exit from a location.

    Simple exits are written as just the target location id.
    Locked exits need the full form.
    """

    target: str = Field(..., description="ID of the destination location")
    locked: bool = Field(default=False)
    unlock_object: str | None = Field(
        default=None,
        description="Item ID that unlocks this exit",
    )
    lock_message: str | None = Field(
        default=None,
        description="Message shown when trying to use the locked exit",
    )
    unlock_message: str | None = Field(
        default=None,
        description="Message shown when the exit is unlocked",
    )


class LocationDefinition(BaseModel):
    """A location in the world, with its exits and the items lying there."""

    id: str = Field(..., min_length=1, pattern=r"^[a-z][a-z0-9_]*$")
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    lights_on: bool = Field(default=True)
    lights_off_description: str = Field(
        default="",
        description="Description shown while the lights are off",
    )
    exits: dict[str, ExitDefinition | str] = Field(
        default_factory=dict,
        description="Map of direction -> ExitDefinition or location id",
    )
    items: list[str] = Field(
        default_factory=list,
        description="IDs of items initially lying here",
    )

    @field_validator("exits", mode="before")
    @classmethod
    def normalize_exits(cls, v: dict[str, Any]) -> dict[str, Any]:
        """Key exits by canonical direction ("n" -> "north")."""
        result: dict[str, Any] = {}
        for word, target in v.items():
            direction = DIRECTION_WORDS.get(str(word).strip().lower())
            if direction is None:
                raise ValueError(f"Unknown exit direction '{word}'")
            if direction.value in result:
                raise ValueError(f"More than one exit for direction '{direction.value}'")
            result[direction.value] = target
        return result

    def exit_targets(self) -> dict[str, str]:
        """Direction -> destination id for every exit."""
        return {
            direction: exit_ if isinstance(exit_, str) else exit_.target
            for direction, exit_ in self.exits.items()
        }


class ItemDefinition(BaseModel):
    """
    A portable item.

    The id doubles as the item's canonical noun, so it is what the parser
    resolves "take the brass key" to and what exits name as unlock_object.
    """

    id: str = Field(..., min_length=1, pattern=r"^[a-z][a-z0-9_]*$")
    name: str = Field(..., min_length=1, max_length=50)
    description: str = Field(default="")
    pick_up_message: str = Field(default="Taken.")
    synonyms: list[str] = Field(
        default_factory=list,
        description="Other words the player may use for this item",
    )


class WorldDefinition(BaseModel):
    """
    A complete world definition.

    This is the root model that contains everything needed to build a game.
    It is loaded from JSON and validated against this schema.
    """

    metadata: WorldMetadata
    prologue: str | None = Field(default=None)
    help_text: str = Field(default="")
    difficulty: Literal["easy", "medium", "hard"] = Field(default="easy")
    locations: list[LocationDefinition] = Field(..., min_length=1)
    items: list[ItemDefinition] = Field(default_factory=list)
    start_location: str
    inventory: list[str] = Field(
        default_factory=list,
        description="Item IDs the player starts with",
    )
    synonyms: dict[str, str] = Field(
        default_factory=dict,
        description="Surface form -> canonical noun",
    )
    macros: dict[str, str] = Field(
        default_factory=dict,
        description="Macro name or $(token) -> replacement text",
    )
    content: dict[str, str] = Field(
        default_factory=dict,
        description="Content identifier -> text",
    )

    @model_validator(mode="after")
    def validate_references(self) -> "WorldDefinition":
        """Ensure all ID references are valid."""
        location_ids = [location.id for location in self.locations]
        item_ids = [item.id for item in self.items]

        duplicates = {i for i in location_ids if location_ids.count(i) > 1}
        if duplicates:
            raise ValueError(f"Duplicate location ids: {', '.join(sorted(duplicates))}")
        duplicates = {i for i in item_ids if item_ids.count(i) > 1}
        if duplicates:
            raise ValueError(f"Duplicate item ids: {', '.join(sorted(duplicates))}")

        names = [location.name for location in self.locations]
        duplicates = {n for n in names if names.count(n) > 1}
        if duplicates:
            raise ValueError(f"Duplicate location names: {', '.join(sorted(duplicates))}")

        if self.start_location not in location_ids:
            raise ValueError(f"Start location '{self.start_location}' not found")

        known_items = set(item_ids)
        placed: dict[str, str] = {}

        for item_id in self.inventory:
            if item_id not in known_items:
                raise ValueError(f"Inventory item '{item_id}' not found")
            placed[item_id] = INVENTORY

        for location in self.locations:
            for direction, exit_ in location.exits.items():
                target = exit_ if isinstance(exit_, str) else exit_.target
                if target not in location_ids:
                    raise ValueError(
                        f"Location '{location.id}' has exit '{direction}' "
                        f"to unknown location '{target}'"
                    )
                if isinstance(exit_, ExitDefinition) and exit_.unlock_object:
                    if exit_.unlock_object not in known_items:
                        raise ValueError(
                            f"Location '{location.id}' exit '{direction}' is unlocked "
                            f"by unknown item '{exit_.unlock_object}'"
                        )

            for item_id in location.items:
                if item_id not in known_items:
                    raise ValueError(f"Location '{location.id}' references unknown item '{item_id}'")
                if item_id in placed:
                    raise ValueError(
                        f"Item '{item_id}' is placed in both '{placed[item_id]}' "
                        f"and '{location.id}'"
                    )
                placed[item_id] = location.id

        if self.prologue is not None and not self.prologue.strip():
            raise ValueError("The prologue can not be empty")

        return self

    def get_location(self, location_id: str) -> LocationDefinition | None:
        """Get a location by ID."""
        for location in self.locations:
            if location.id == location_id:
                return location
        return None

    def get_item(self, item_id: str) -> ItemDefinition | None:
        """Get an item by ID."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None
