"""
content.py

PURPOSE: Key -> text store that keeps game prose out of game logic.
DEPENDENCIES: pyyaml, errors

ARCHITECTURE NOTES:
Locations and handlers ask for text by identifier. A missing identifier is
not an error; it comes back as "" so callers can fall back with `or`.

Content can be added one item at a time or loaded from a flat YAML mapping.
With compressed=True every item is stored zlib-compressed, which is worth
it for games with a lot of prose.
"""

import logging
import zlib
from pathlib import Path

import yaml

from adventure_engine.errors import DuplicateKeyError

logger = logging.getLogger(__name__)


class ContentStore:
    """
    Identifier -> text lookup.

    Usage:
        content = ContentStore()
        content.add("LoungeName", "Lounge")
        content.retrieve("LoungeName")  # "Lounge"
        content.retrieve("Nope")        # ""
    """

    def __init__(self, compressed: bool = False):
        self.compressed = compressed
        self._content: dict[str, str | bytes] = {}

    def add(self, identifier: str, text: str) -> None:
        """
        Add a content item.

        Raises:
            ValueError: If identifier or text is empty
            DuplicateKeyError: If the identifier is already in use
        """
        if not identifier:
            raise ValueError("The content identifier can not be empty.")
        if not text:
            raise ValueError(f"The content for '{identifier}' can not be empty.")
        if identifier in self._content:
            raise DuplicateKeyError(f"Content '{identifier}' already exists.")

        self._content[identifier] = self._encode(text)

    def add_from_yaml(self, path: Path | str) -> int:
        """
        Load content items from a YAML file of identifier: text pairs.

        Returns:
            Number of items added

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file isn't a mapping
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"The file {path} does not exist.")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a mapping of identifiers to text.")

        for identifier, text in data.items():
            self.add(str(identifier), str(text))

        logger.info(f"Loaded {len(data)} content items from {path}")
        return len(data)

    def retrieve(self, identifier: str | None) -> str:
        """The text for an identifier, or "" if there is none."""
        if not identifier:
            return ""
        stored = self._content.get(identifier)
        if stored is None:
            return ""
        return self._decode(stored)

    def exists(self, identifier: str | None) -> bool:
        return bool(identifier) and identifier in self._content

    @property
    def count(self) -> int:
        return len(self._content)

    def __len__(self) -> int:
        return len(self._content)

    def _encode(self, text: str) -> str | bytes:
        if self.compressed:
            return zlib.compress(text.encode("utf-8"))
        return text

    def _decode(self, stored: str | bytes) -> str:
        if isinstance(stored, bytes):
            return zlib.decompress(stored).decode("utf-8")
        return stored
