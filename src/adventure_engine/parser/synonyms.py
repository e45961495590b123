"""
synonyms.py

PURPOSE: Map the words a player might type onto canonical noun tokens.
DEPENDENCIES: errors

ARCHITECTURE NOTES:
A SynonymTable is owned by one game session and grows while the world is
built (and occasionally during play). It never shrinks. Surface forms are
lowercased on the way in and on lookup, so "Pot", "POT" and "pot" are the
same key. Canonical tokens are stored exactly as given.
"""

import logging
from collections.abc import Iterator

from adventure_engine.errors import DuplicateKeyError

logger = logging.getLogger(__name__)


class SynonymTable:
    """
    Case-insensitive surface form -> canonical token lookup.

    Usage:
        nouns = SynonymTable()
        nouns.add("pot", "plantpot")
        nouns.resolve("POT")  # "plantpot"
    """

    def __init__(self) -> None:
        self._synonyms: dict[str, str] = {}

    def add(self, surface_form: str, canonical: str) -> None:
        """
        Register a surface form for a canonical token.

        Re-registering the same pair is a no-op.

        Raises:
            ValueError: If either argument is empty
            DuplicateKeyError: If the surface form maps to a different token
        """
        if not surface_form or not surface_form.strip():
            raise ValueError("The surface form can not be empty.")
        if not canonical or not canonical.strip():
            raise ValueError("The canonical token can not be empty.")

        key = surface_form.strip().lower()
        canonical = canonical.strip()

        existing = self._synonyms.get(key)
        if existing is not None:
            if existing == canonical:
                return
            raise DuplicateKeyError(
                f"'{key}' is already a synonym for '{existing}', not '{canonical}'."
            )

        self._synonyms[key] = canonical
        logger.debug(f"Synonym registered: {key} -> {canonical}")

    def resolve(self, surface_form: str | None) -> str | None:
        """Return the canonical token for a surface form, or None if unknown."""
        if not surface_form:
            return None
        return self._synonyms.get(surface_form.strip().lower())

    def __contains__(self, surface_form: object) -> bool:
        return isinstance(surface_form, str) and self.resolve(surface_form) is not None

    def __len__(self) -> int:
        return len(self._synonyms)

    def __iter__(self) -> Iterator[str]:
        return iter(self._synonyms)

    def items(self) -> list[tuple[str, str]]:
        """All (surface form, canonical) pairs in registration order."""
        return list(self._synonyms.items())

    def canonical_tokens(self) -> set[str]:
        """The distinct canonical tokens known to the table."""
        return set(self._synonyms.values())
