"""
TEST DOC: Core Models

WHAT: Tests for Command, WorldDefinition, SaveFile and GameSnapshot models.
WHY: Ensure Pydantic validation works correctly and models behave as expected.
HOW: Test valid/invalid data, edge cases, and model methods.

CASES:
- Command defaults and immutability
- Valid world JSON validates successfully
- Invalid references are rejected
- Exit directions are normalized

EDGE CASES:
- Simple string exits
- Items placed twice
- Blank prologue
"""

import dataclasses

import pytest
from pydantic import ValidationError

from adventure_engine.models.command import (
    DIRECTION_WORDS,
    MULTI_WORD_VERBS,
    VERB_ALIASES,
    Command,
    Direction,
    Preposition,
    Verb,
)
from adventure_engine.models.save import SaveFile
from adventure_engine.models.state import GameSnapshot
from adventure_engine.models.world import ExitDefinition, WorldDefinition


class TestCommand:
    """Tests for the Command model."""

    def test_defaults(self):
        """An empty command is UNKNOWN with empty nouns."""
        cmd = Command()
        assert cmd.verb == Verb.UNKNOWN
        assert cmd.noun == ""
        assert cmd.noun2 == ""
        assert cmd.preposition is None
        assert cmd.full_text_command == ""
        assert not cmd.profanity_detected

    def test_command_with_all_parts(self):
        """A full command with preposition and second noun is valid."""
        cmd = Command(
            verb=Verb.USE,
            noun="key",
            preposition=Preposition.ON,
            noun2="door",
            full_text_command="use key on door",
        )
        assert cmd.noun == "key"
        assert cmd.noun2 == "door"
        assert cmd.preposition == Preposition.ON

    def test_immutable(self):
        """Commands can't be changed after parsing."""
        cmd = Command(verb=Verb.LOOK)
        with pytest.raises(dataclasses.FrozenInstanceError):
            cmd.noun = "key"

    def test_none_rejected(self):
        """None is not a valid verb or noun."""
        with pytest.raises(ValueError):
            Command(verb=None)
        with pytest.raises(ValueError):
            Command(verb=Verb.TAKE, noun=None)

    def test_direction_property(self):
        """direction reads the noun as a direction."""
        assert Command(verb=Verb.GO, noun="north").direction == Direction.NORTH
        assert Command(verb=Verb.GO, noun="key").direction is None


class TestVocabulary:
    """Sanity checks on the word tables."""

    def test_all_direction_values_are_words(self):
        """Every canonical direction token is itself a direction word."""
        for direction in Direction:
            assert DIRECTION_WORDS[direction.value] == direction

    def test_phrase_verbs_start_with_known_words(self):
        """Most phrase verbs extend a single-word alias."""
        known = [first for first, _ in MULTI_WORD_VERBS if first in VERB_ALIASES]
        assert "pick" in known
        assert "look" in known

    @pytest.mark.parametrize("word", ["n", "North", " UP "])
    def test_direction_from_word(self, word: str):
        """Direction.from_word is case and space insensitive."""
        assert Direction.from_word(word) is not None

    def test_direction_from_unknown_word(self):
        assert Direction.from_word("sideways") is None
        assert Direction.from_word("") is None


class TestWorldDefinition:
    """Tests for the world file model."""

    def test_minimal_world(self, minimal_world_dict: dict):
        """A world with one location is valid."""
        world = WorldDefinition.model_validate(minimal_world_dict)
        assert world.metadata.title == "Minimal Test World"
        assert world.prologue is None
        assert world.difficulty == "easy"
        assert world.items == []

    def test_sample_world(self, sample_world: WorldDefinition):
        """The sample world loads with typed exits."""
        driveway = sample_world.get_location("driveway")
        assert driveway is not None
        north = driveway.exits["north"]
        assert isinstance(north, ExitDefinition)
        assert north.locked
        assert north.unlock_object == "key"
        assert sample_world.get_item("key").name == "brass key"
        assert sample_world.get_location("attic") is None

    def test_exit_directions_normalized(self, sample_world: WorldDefinition):
        """Short direction words become canonical keys."""
        hallway = sample_world.get_location("hallway")
        assert set(hallway.exits) == {"south", "west"}
        assert hallway.exit_targets() == {"south": "driveway", "west": "lounge"}

    def test_unknown_direction(self, minimal_world_dict: dict):
        """Exits need real directions."""
        minimal_world_dict["locations"][0]["exits"] = {"sideways": "start"}
        with pytest.raises(ValidationError, match="Unknown exit direction"):
            WorldDefinition.model_validate(minimal_world_dict)

    def test_duplicate_direction(self, minimal_world_dict: dict):
        """Two spellings of one direction are a duplicate exit."""
        minimal_world_dict["locations"][0]["exits"] = {"n": "start", "north": "start"}
        with pytest.raises(ValidationError, match="More than one exit"):
            WorldDefinition.model_validate(minimal_world_dict)

    def test_unknown_start(self, minimal_world_dict: dict):
        """The start location must exist."""
        minimal_world_dict["start_location"] = "nowhere"
        with pytest.raises(ValidationError, match="Start location"):
            WorldDefinition.model_validate(minimal_world_dict)

    def test_unknown_exit_target(self, minimal_world_dict: dict):
        """Exits must lead to known locations."""
        minimal_world_dict["locations"][0]["exits"] = {"north": "attic"}
        with pytest.raises(ValidationError, match="unknown location 'attic'"):
            WorldDefinition.model_validate(minimal_world_dict)

    def test_unknown_unlock_object(self, minimal_world_dict: dict):
        """Unlock objects must be known items."""
        minimal_world_dict["locations"][0]["exits"] = {
            "north": {"target": "start", "locked": True, "unlock_object": "key"}
        }
        with pytest.raises(ValidationError, match="unknown item 'key'"):
            WorldDefinition.model_validate(minimal_world_dict)

    def test_unknown_location_item(self, minimal_world_dict: dict):
        """Locations can only hold known items."""
        minimal_world_dict["locations"][0]["items"] = ["lamp"]
        with pytest.raises(ValidationError, match="unknown item 'lamp'"):
            WorldDefinition.model_validate(minimal_world_dict)

    def test_item_placed_twice(self, minimal_world_dict: dict):
        """An item can only start in one place."""
        minimal_world_dict["items"] = [{"id": "lamp", "name": "lamp"}]
        minimal_world_dict["locations"][0]["items"] = ["lamp"]
        minimal_world_dict["inventory"] = ["lamp"]
        with pytest.raises(ValidationError, match="placed in both"):
            WorldDefinition.model_validate(minimal_world_dict)

    def test_duplicate_location_ids(self, minimal_world_dict: dict):
        """Location ids are unique."""
        minimal_world_dict["locations"].append(
            {"id": "start", "name": "Other", "description": "Another room."}
        )
        with pytest.raises(ValidationError, match="Duplicate location ids"):
            WorldDefinition.model_validate(minimal_world_dict)

    def test_duplicate_location_names(self, minimal_world_dict: dict):
        """Location names are unique, since they are parser nouns."""
        minimal_world_dict["locations"].append(
            {"id": "other", "name": "Starting Room", "description": "Another room."}
        )
        with pytest.raises(ValidationError, match="Duplicate location names"):
            WorldDefinition.model_validate(minimal_world_dict)

    def test_blank_prologue(self, minimal_world_dict: dict):
        """A prologue, if given, can't be blank."""
        minimal_world_dict["prologue"] = "   "
        with pytest.raises(ValidationError, match="prologue"):
            WorldDefinition.model_validate(minimal_world_dict)

    @pytest.mark.parametrize("location_id", ["Start", "1room", "has-dash", ""])
    def test_invalid_ids(self, minimal_world_dict: dict, location_id: str):
        """Ids are lowercase identifiers."""
        minimal_world_dict["locations"][0]["id"] = location_id
        minimal_world_dict["start_location"] = location_id
        with pytest.raises(ValidationError):
            WorldDefinition.model_validate(minimal_world_dict)

    def test_no_locations(self, minimal_world_dict: dict):
        """A world needs at least one location."""
        minimal_world_dict["locations"] = []
        with pytest.raises(ValidationError):
            WorldDefinition.model_validate(minimal_world_dict)


class TestSaveFile:
    """Tests for the save file model."""

    def test_defaults(self):
        save = SaveFile(world_title="World")
        assert save.version == 1
        assert save.commands == []

    def test_title_required(self):
        with pytest.raises(ValidationError):
            SaveFile(world_title="")


class TestGameSnapshot:
    """Tests for the snapshot model."""

    def test_equality(self):
        """Snapshots with the same state compare equal."""
        a = GameSnapshot(current_location="Hall", inventory=["key"], lights={"Hall": True})
        b = GameSnapshot(current_location="Hall", inventory=["key"], lights={"Hall": True})
        assert a == b
        assert a != b.model_copy(update={"moves": 1})
