"""
macros.py

PURPOSE: Expand $(name) tokens in narrative text.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
Replacement text may contain further tokens, so expansion recurses. Each
recursive call carries the set of tokens already being expanded above it;
meeting one of them again means a cycle, and that occurrence is left in the
text verbatim. Depth is therefore bounded by the number of macros, and
max_depth caps it further for very large tables.

Unknown tokens are also left verbatim. Substitution never raises.
"""

import logging
import re
from collections.abc import Iterator

logger = logging.getLogger(__name__)

# $(name): anything but whitespace and parentheses between the brackets
MACRO_PATTERN = re.compile(r"\$\([^()\s]+\)")

DEFAULT_MAX_DEPTH = 32


def macro_token(name: str) -> str:
    """Normalize "first" or "$(first)" to the token form "$(first)"."""
    name = name.strip()
    if name.startswith("$(") and name.endswith(")"):
        return name
    return f"$({name})"


class MacroTable:
    """
    Token -> replacement text, with recursive, cycle-safe substitution.

    Usage:
        macros = MacroTable()
        macros.add_macro("$(second)", "hello world.")
        macros.add_macro("$(first)", "$(second)")
        macros.substitute("say $(first)")  # "say hello world."
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.max_depth = max_depth
        self._macros: dict[str, str] = {}

    def add_macro(self, name: str, replacement: str) -> None:
        """
        Register a macro, replacing any previous value for the same name.

        Raises:
            ValueError: If the name is empty or holds whitespace or parentheses
        """
        if not name or not name.strip():
            raise ValueError("The macro name can not be empty.")
        token = macro_token(name)
        if not MACRO_PATTERN.fullmatch(token):
            raise ValueError(
                f"Invalid macro name {name!r}: names can not contain whitespace or parentheses."
            )
        self._macros[token] = replacement if replacement is not None else ""

    def get(self, name: str) -> str | None:
        return self._macros.get(macro_token(name))

    @property
    def count(self) -> int:
        """Number of registered macros."""
        return len(self._macros)

    def substitute(self, text: str | None) -> str:
        """
        Expand every macro token in text.

        Args:
            text: Text that may contain $(name) tokens

        Returns:
            The expanded text. Cyclic and unknown tokens stay as written.
        """
        if not text:
            return ""
        if not self._macros:
            return text
        return self._expand(text, frozenset(), 0)

    def referenced_tokens(self, text: str) -> set[str]:
        """All macro tokens that appear in text."""
        return set(MACRO_PATTERN.findall(text or ""))

    def _expand(self, text: str, active: frozenset[str], depth: int) -> str:
        def replace(match: re.Match[str]) -> str:
            token = match.group(0)
            replacement = self._macros.get(token)
            if replacement is None:
                return token
            if token in active:
                logger.debug(f"Macro cycle at {token}, leaving it unexpanded")
                return token
            if depth >= self.max_depth:
                logger.warning(f"Macro expansion deeper than {self.max_depth} at {token}")
                return token
            return self._expand(replacement, active | {token}, depth + 1)

        return MACRO_PATTERN.sub(replace, text)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and macro_token(name) in self._macros

    def __len__(self) -> int:
        return len(self._macros)

    def __iter__(self) -> Iterator[str]:
        return iter(self._macros)
