"""
TEST DOC: Content Store

WHAT: Tests for identifier -> text lookup
WHY: Games keep their prose out of code and fetch it by identifier
HOW: Add, retrieve and load content, compressed and not

CASES:
- Add and retrieve
- Compressed storage
- Loading from YAML

EDGE CASES:
- Missing identifiers give ""
- Empty and duplicate identifiers are rejected
- Missing and malformed YAML files
"""

from pathlib import Path

import pytest

from adventure_engine.content import ContentStore
from adventure_engine.errors import DuplicateKeyError


class TestAddRetrieve:
    """Tests for adding and retrieving content."""

    @pytest.mark.parametrize("compressed", [False, True])
    def test_round_trip(self, compressed: bool):
        """Stored text comes back unchanged."""
        content = ContentStore(compressed=compressed)
        content.add("LoungeDescription", "You are standing in the lounge. Ünïcödé too.")
        assert content.retrieve("LoungeDescription") == "You are standing in the lounge. Ünïcödé too."
        assert content.exists("LoungeDescription")
        assert content.count == 1
        assert len(content) == 1

    def test_compressed_storage(self):
        """Compressed stores keep bytes internally."""
        content = ContentStore(compressed=True)
        content.add("Long", "word " * 200)
        assert isinstance(content._content["Long"], bytes)
        assert len(content._content["Long"]) < len("word " * 200)

    @pytest.mark.parametrize("identifier", ["Missing", "", None])
    def test_missing(self, identifier):
        """Unknown identifiers give an empty string, not an error."""
        content = ContentStore()
        assert content.retrieve(identifier) == ""
        assert not content.exists(identifier)

    def test_duplicate(self):
        """Identifiers can only be used once."""
        content = ContentStore()
        content.add("Key", "text")
        with pytest.raises(DuplicateKeyError):
            content.add("Key", "other text")

    @pytest.mark.parametrize("identifier,text", [("", "text"), ("Key", "")])
    def test_empty_arguments(self, identifier: str, text: str):
        """Identifier and text are required."""
        with pytest.raises(ValueError):
            ContentStore().add(identifier, text)


class TestYaml:
    """Tests for loading content from YAML."""

    def test_load(self, tmp_path: Path):
        """A flat mapping is loaded item by item."""
        path = tmp_path / "content.yaml"
        path.write_text(
            "NoNeedToBeRude: Mind your language.\n"
            "Hallway: |\n"
            "  A long hallway.\n"
            "  It is dark.\n"
        )
        content = ContentStore()
        assert content.add_from_yaml(path) == 2
        assert content.retrieve("NoNeedToBeRude") == "Mind your language."
        assert content.retrieve("Hallway") == "A long hallway.\nIt is dark.\n"

    def test_empty_file(self, tmp_path: Path):
        """An empty file adds nothing."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert ContentStore().add_from_yaml(path) == 0

    def test_missing_file(self, tmp_path: Path):
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            ContentStore().add_from_yaml(tmp_path / "nope.yaml")

    def test_not_a_mapping(self, tmp_path: Path):
        """Lists are not content files."""
        path = tmp_path / "list.yaml"
        path.write_text("- one\n- two\n")
        with pytest.raises(ValueError):
            ContentStore().add_from_yaml(path)
