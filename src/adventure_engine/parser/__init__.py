"""Parser module for player commands."""

from adventure_engine.parser.lexer import Token, TokenType, tokenize, tokens_to_words
from adventure_engine.parser.parser import Parser
from adventure_engine.parser.profanity import BLOCKLIST, ProfanityFilter
from adventure_engine.parser.synonyms import SynonymTable

__all__ = [
    "BLOCKLIST",
    "Parser",
    "ProfanityFilter",
    "SynonymTable",
    "Token",
    "TokenType",
    "tokenize",
    "tokens_to_words",
]
