"""
parser.py

PURPOSE: Parse raw player input into Command objects.
DEPENDENCIES: lexer, synonyms, profanity, command model

ARCHITECTURE NOTES:
The parser implements a small Infocom-style grammar:
    COMMAND := VERB [NOUN_PHRASE] [PREPOSITION NOUN_PHRASE]
             | DIRECTION

It never fails. Input it can't make sense of becomes Command(verb=UNKNOWN)
with whatever nouns could be salvaged, and the location decides what to
say about it.

Special cases:
- Bare directions (NORTH, N) become Command(verb=GO, noun="north")
- Two-word verbs (PICK UP, LOOK AT, TURN ON) beat their first word alone
- Noun phrases resolve through the session's SynonymTable:
  "plant pot" -> "plant pot", then "plantpot", then "pot", then "plant"
"""

import logging

from adventure_engine.models.command import (
    DIRECTION_WORDS,
    MULTI_WORD_VERBS,
    PREPOSITION_WORDS,
    VERB_ALIASES,
    Command,
    Preposition,
    Verb,
)
from adventure_engine.parser.lexer import tokenize, tokens_to_words
from adventure_engine.parser.profanity import ProfanityFilter
from adventure_engine.parser.synonyms import SynonymTable

logger = logging.getLogger(__name__)


class Parser:
    """
    Turns a line of player input into a Command.

    Usage:
        parser = Parser()
        parser.nouns.add("pot", "plantpot")
        parser.parse("look at the plant pot")
        # Command(verb=LOOK, noun="plantpot", ...)
    """

    def __init__(
        self,
        nouns: SynonymTable | None = None,
        profanity: ProfanityFilter | None = None,
    ):
        """
        Args:
            nouns: Noun synonym table shared with the rest of the session
            profanity: Filter used to flag rude input
        """
        self.nouns = nouns if nouns is not None else SynonymTable()
        self.profanity = profanity if profanity is not None else ProfanityFilter()

    def parse(self, text: str | None) -> Command:
        """
        Parse player input.

        Args:
            text: Raw player input string

        Returns:
            A Command. Unrecognized input yields verb=UNKNOWN.
        """
        full_text = text or ""
        profanity_detected = self.profanity.contains_profanity(full_text)

        words = tokens_to_words(tokenize(full_text))
        if not words:
            return Command(
                verb=Verb.UNKNOWN,
                full_text_command=full_text,
                profanity_detected=profanity_detected,
            )

        verb, remaining = self._match_verb(words)

        if verb == Verb.GO:
            command = self._parse_movement(remaining, full_text, profanity_detected)
        else:
            command = self._parse_objects(verb, remaining, full_text, profanity_detected)

        logger.debug(
            f"Parsed {full_text!r} -> verb={command.verb.name} noun={command.noun!r} "
            f"noun2={command.noun2!r} profanity={command.profanity_detected}"
        )
        return command

    def resolve_noun(self, words: list[str]) -> str:
        """
        Resolve a noun phrase to a canonical token.

        Tries the whole phrase, the phrase run together, each single word
        from the head noun backwards, and finally direction words.

        Returns:
            The canonical token, or "" if nothing matched
        """
        if not words:
            return ""

        candidates = [" ".join(words), "".join(words), *reversed(words)]
        for candidate in candidates:
            token = self.nouns.resolve(candidate)
            if token:
                return token

        for word in reversed(words):
            direction = DIRECTION_WORDS.get(word)
            if direction is not None:
                return direction.value

        return ""

    def _match_verb(self, words: list[str]) -> tuple[Verb, list[str]]:
        """Find the verb at the start of the input, longest phrase first."""
        first_word = words[0]
        remaining = words[1:]

        if remaining and (first_word, remaining[0]) in MULTI_WORD_VERBS:
            return MULTI_WORD_VERBS[(first_word, remaining[0])], remaining[1:]

        if first_word in VERB_ALIASES:
            return VERB_ALIASES[first_word], remaining

        if first_word in DIRECTION_WORDS:
            # Bare direction, keep the word so GO can resolve it
            return Verb.GO, words

        return Verb.UNKNOWN, remaining

    def _parse_movement(
        self,
        words: list[str],
        full_text: str,
        profanity_detected: bool,
    ) -> Command:
        """Handle GO: a direction, or a noun such as a location name."""
        if not words:
            return Command(
                verb=Verb.GO,
                full_text_command=full_text,
                profanity_detected=profanity_detected,
            )

        direction = DIRECTION_WORDS.get(words[0])
        if direction is not None:
            return Command(
                verb=Verb.GO,
                noun=direction.value,
                full_text_command=full_text,
                profanity_detected=profanity_detected,
                noun_text=words[0],
            )

        return self._parse_objects(Verb.GO, words, full_text, profanity_detected)

    def _parse_objects(
        self,
        verb: Verb,
        words: list[str],
        full_text: str,
        profanity_detected: bool,
    ) -> Command:
        """Split the words after the verb into noun [preposition noun2]."""
        # A leading preposition belongs to the verb ("give to", "look into")
        while words and words[0] in PREPOSITION_WORDS:
            words = words[1:]

        first_words, preposition, second_words = _split_on_preposition(words)

        return Command(
            verb=verb,
            noun=self.resolve_noun(first_words),
            noun2=self.resolve_noun(second_words),
            preposition=preposition,
            full_text_command=full_text,
            profanity_detected=profanity_detected,
            noun_text=" ".join(first_words),
            noun2_text=" ".join(second_words),
        )


def _split_on_preposition(
    words: list[str],
) -> tuple[list[str], Preposition | None, list[str]]:
    """Split at the first preposition that has words on both sides."""
    for index, word in enumerate(words):
        if word in PREPOSITION_WORDS and 0 < index < len(words) - 1:
            return words[:index], PREPOSITION_WORDS[word], words[index + 1 :]
    return words, None, []
