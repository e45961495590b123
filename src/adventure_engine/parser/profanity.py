"""
profanity.py

PURPOSE: Spot rude words in player input.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
Detection never affects parsing. The parser just sets a flag on the Command
and each location decides how to respond. Embedded matches are caught by
scanning inside each word, so the blocklist favours words that rarely occur
inside innocent ones.
"""

import re

# Fixed blocklist, all lowercase
BLOCKLIST: frozenset[str] = frozenset(
    {
        "arsehole",
        "arseholes",
        "asshole",
        "assholes",
        "bastard",
        "bastards",
        "bitch",
        "bitches",
        "bollocks",
        "bugger",
        "bullshit",
        "cunt",
        "cunts",
        "dickhead",
        "fuck",
        "fucked",
        "fucker",
        "fuckers",
        "fucking",
        "motherfucker",
        "shit",
        "shite",
        "shitty",
        "twat",
        "wanker",
        "whore",
    }
)

_WORD_SPLIT = re.compile(r"[^a-z]+")


class ProfanityFilter:
    """Checks words and sentences against the blocklist."""

    def __init__(self, blocklist: frozenset[str] = BLOCKLIST):
        self._blocklist = frozenset(word.lower() for word in blocklist)
        # Longest first, so "motherfucker" is reported rather than "fuck"
        self._by_length = tuple(sorted(self._blocklist, key=lambda w: (-len(w), w)))

    def is_profanity(self, word: str | None) -> bool:
        """Exact, case-insensitive blocklist match. Empty input is never rude."""
        if not word:
            return False
        return word.strip().lower() in self._blocklist

    def first_profanity_in(self, text: str | None) -> str:
        """
        Return the first blocked word found in text, or "".

        Words are checked left to right. A word that is not itself on the
        blocklist is scanned for embedded blocked words from its first
        letter onwards; the earliest match wins, the longest at that letter.
        """
        if not text:
            return ""

        for word in _WORD_SPLIT.split(text.lower()):
            if not word:
                continue
            if word in self._blocklist:
                return word
            for start in range(len(word)):
                for blocked in self._by_length:
                    if word.startswith(blocked, start):
                        return blocked

        return ""

    def contains_profanity(self, text: str | None) -> bool:
        return bool(self.first_profanity_in(text))
