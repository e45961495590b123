"""
lexer.py

PURPOSE: Break a line of player input into word tokens.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
Players type things like "Pick up the KEY!" or "look at the pot, then the
mat". Everything the parser needs is in the words themselves, so the lexer:
- keeps each lowercased word next to the text as typed
- drops articles and punctuation
- expands a few contractions
- keeps commas as separators so two phrases never run into one noun
"""

import re
from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    WORD = auto()
    COMMA = auto()


@dataclass(frozen=True)
class Token:
    """A single token from lexer output."""

    type: TokenType
    value: str  # Lowercased, contraction expanded
    original: str  # As the player typed it


ARTICLES = frozenset({"a", "an", "the"})

CONTRACTIONS = {
    "don't": "do not",
    "can't": "cannot",
    "won't": "will not",
    "i'm": "i am",
    "it's": "it is",
    "what's": "what is",
    "where's": "where is",
}

# Runs of word characters (apostrophes allowed), or a lone comma
_TOKEN_PATTERN = re.compile(r"[\w']+|,")


def tokenize(text: str | None) -> list[Token]:
    """
    Convert input text into a list of tokens.

    Args:
        text: Raw player input

    Returns:
        List of Token objects, empty for blank or None input
    """
    tokens: list[Token] = []
    if not text:
        return tokens

    for match in _TOKEN_PATTERN.finditer(text):
        original = match.group()
        if original == ",":
            tokens.append(Token(TokenType.COMMA, ",", original))
            continue

        word = original.lower().strip("'")
        for part in CONTRACTIONS.get(word, word).split():
            if part not in ARTICLES:
                tokens.append(Token(TokenType.WORD, part, original))

    return tokens


def tokens_to_words(tokens: list[Token]) -> list[str]:
    """The values of the WORD tokens, in order."""
    return [token.value for token in tokens if token.type == TokenType.WORD]
