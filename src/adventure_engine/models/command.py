"""
command.py

PURPOSE: Define the Command model and the Verb/Direction/Preposition enums.
DEPENDENCIES: None (pure Python + enum)

ARCHITECTURE NOTES:
Commands are the boundary between the parser and the locations. The parser
always produces one, even for gibberish (verb=UNKNOWN), and locations only
ever compare canonical tokens, never the words the player actually typed.

Movement is a single GO verb with the canonical direction token in `noun`,
so a location can intercept "go north" the same way it intercepts
"take key".
"""

from dataclasses import dataclass
from enum import Enum, auto


class Verb(Enum):
    """
    All verbs understood by the parser.

    UNKNOWN is the fallback for any input whose first word is not a verb.
    """

    # Movement
    GO = auto()  # aliases: WALK, RUN, MOVE, bare directions

    # Examination
    LOOK = auto()  # aliases: L, EXAMINE, X, LOOK AT
    READ = auto()

    # Object manipulation
    TAKE = auto()  # aliases: GET, GRAB, PICK UP
    DROP = auto()  # aliases: PUT DOWN, DISCARD
    GIVE = auto()  # GIVE X TO Y
    USE = auto()  # USE X ON Y, TURN ON X
    OPEN = auto()
    CLOSE = auto()
    UNLOCK = auto()  # UNLOCK X WITH Y
    LOCK = auto()
    PUSH = auto()
    PULL = auto()
    EAT = auto()
    DRINK = auto()
    ATTACK = auto()

    # Interaction
    TALK = auto()  # TALK TO X

    # Inventory
    INVENTORY = auto()  # aliases: I, INV

    # Time
    WAIT = auto()  # aliases: Z

    UNKNOWN = auto()


class Direction(Enum):
    """Compass and vertical directions. Values are the canonical tokens."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    NORTHEAST = "northeast"
    NORTHWEST = "northwest"
    SOUTHEAST = "southeast"
    SOUTHWEST = "southwest"
    UP = "up"
    DOWN = "down"
    IN = "in"
    OUT = "out"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def from_word(cls, word: str) -> "Direction | None":
        """Look up a direction from any of its surface forms ("n", "North")."""
        if not word:
            return None
        return DIRECTION_WORDS.get(word.lower().strip())


_OPPOSITES: dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
    Direction.NORTHEAST: Direction.SOUTHWEST,
    Direction.SOUTHWEST: Direction.NORTHEAST,
    Direction.NORTHWEST: Direction.SOUTHEAST,
    Direction.SOUTHEAST: Direction.NORTHWEST,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.IN: Direction.OUT,
    Direction.OUT: Direction.IN,
}


class Preposition(Enum):
    """Prepositions that connect the first and second noun phrases."""

    IN = auto()  # PUT key IN box
    ON = auto()  # USE key ON door
    WITH = auto()  # UNLOCK door WITH key
    TO = auto()  # GIVE coin TO merchant
    FROM = auto()  # TAKE apple FROM basket
    AT = auto()  # THROW stone AT window
    UNDER = auto()  # HIDE key UNDER mat


@dataclass(frozen=True)
class Command:
    """
    A parsed player command.

    Examples:
        - LOOK -> Command(verb=LOOK)
        - GO NORTH -> Command(verb=GO, noun="north")
        - TAKE KEY -> Command(verb=TAKE, noun="key")
        - USE KEY ON DOOR -> Command(verb=USE, noun="key",
                                    preposition=ON, noun2="door")
        - DANCE -> Command(verb=UNKNOWN)

    Attributes:
        verb: The action to perform (UNKNOWN when not recognized)
        noun: Canonical token of the first object, or ""
        noun2: Canonical token of the second object, or ""
        preposition: Connects noun and noun2 (optional)
        full_text_command: The original player input, kept for replay
        profanity_detected: True if the input contained a blocked word
        noun_text: The first noun phrase as typed (lowercased)
        noun2_text: The second noun phrase as typed (lowercased)
    """

    verb: Verb = Verb.UNKNOWN
    noun: str = ""
    noun2: str = ""
    preposition: Preposition | None = None
    full_text_command: str = ""
    profanity_detected: bool = False
    noun_text: str = ""
    noun2_text: str = ""

    def __post_init__(self) -> None:
        """Validate command structure."""
        if self.verb is None:
            raise ValueError("Command verb can not be None")
        if self.noun is None or self.noun2 is None:
            raise ValueError("Command nouns must be strings, use '' for none")

    @property
    def direction(self) -> Direction | None:
        """The direction named by the noun, if any."""
        return Direction.from_word(self.noun)


# Verb aliases for the parser
VERB_ALIASES: dict[str, Verb] = {
    # Movement
    "go": Verb.GO,
    "walk": Verb.GO,
    "run": Verb.GO,
    "move": Verb.GO,
    "head": Verb.GO,
    "climb": Verb.GO,
    # Examination
    "look": Verb.LOOK,
    "l": Verb.LOOK,
    "examine": Verb.LOOK,
    "x": Verb.LOOK,
    "inspect": Verb.LOOK,
    "search": Verb.LOOK,
    "read": Verb.READ,
    # Object manipulation
    "take": Verb.TAKE,
    "get": Verb.TAKE,
    "grab": Verb.TAKE,
    "pick": Verb.TAKE,  # "pick up" handled as a phrase
    "collect": Verb.TAKE,
    "drop": Verb.DROP,
    "discard": Verb.DROP,
    "put": Verb.DROP,
    "place": Verb.DROP,
    "give": Verb.GIVE,
    "offer": Verb.GIVE,
    "use": Verb.USE,
    "flip": Verb.USE,
    "switch": Verb.USE,
    "open": Verb.OPEN,
    "close": Verb.CLOSE,
    "shut": Verb.CLOSE,
    "unlock": Verb.UNLOCK,
    "lock": Verb.LOCK,
    "push": Verb.PUSH,
    "press": Verb.PUSH,
    "pull": Verb.PULL,
    "eat": Verb.EAT,
    "drink": Verb.DRINK,
    "attack": Verb.ATTACK,
    "hit": Verb.ATTACK,
    "kick": Verb.ATTACK,
    # Interaction
    "talk": Verb.TALK,
    "speak": Verb.TALK,
    "ask": Verb.TALK,
    # Inventory
    "inventory": Verb.INVENTORY,
    "i": Verb.INVENTORY,
    "inv": Verb.INVENTORY,
    # Time
    "wait": Verb.WAIT,
    "z": Verb.WAIT,
}

# Multi-word verb phrases, (first_word, second_word) -> verb.
# A phrase always beats the single-word alias of its first word.
MULTI_WORD_VERBS: dict[tuple[str, str], Verb] = {
    ("pick", "up"): Verb.TAKE,
    ("put", "down"): Verb.DROP,
    ("look", "at"): Verb.LOOK,
    ("look", "in"): Verb.LOOK,
    ("look", "under"): Verb.LOOK,
    ("turn", "on"): Verb.USE,
    ("turn", "off"): Verb.USE,
    ("switch", "on"): Verb.USE,
    ("switch", "off"): Verb.USE,
    ("talk", "to"): Verb.TALK,
    ("speak", "to"): Verb.TALK,
    ("go", "to"): Verb.GO,
    ("walk", "to"): Verb.GO,
}

# Direction surface forms
DIRECTION_WORDS: dict[str, Direction] = {
    "north": Direction.NORTH,
    "n": Direction.NORTH,
    "south": Direction.SOUTH,
    "s": Direction.SOUTH,
    "east": Direction.EAST,
    "e": Direction.EAST,
    "west": Direction.WEST,
    "w": Direction.WEST,
    "northeast": Direction.NORTHEAST,
    "ne": Direction.NORTHEAST,
    "northwest": Direction.NORTHWEST,
    "nw": Direction.NORTHWEST,
    "southeast": Direction.SOUTHEAST,
    "se": Direction.SOUTHEAST,
    "southwest": Direction.SOUTHWEST,
    "sw": Direction.SOUTHWEST,
    "up": Direction.UP,
    "u": Direction.UP,
    "upstairs": Direction.UP,
    "down": Direction.DOWN,
    "d": Direction.DOWN,
    "downstairs": Direction.DOWN,
    "in": Direction.IN,
    "inside": Direction.IN,
    "enter": Direction.IN,
    "out": Direction.OUT,
    "outside": Direction.OUT,
    "leave": Direction.OUT,
}

# Preposition mappings
PREPOSITION_WORDS: dict[str, Preposition] = {
    "in": Preposition.IN,
    "into": Preposition.IN,
    "inside": Preposition.IN,
    "on": Preposition.ON,
    "onto": Preposition.ON,
    "upon": Preposition.ON,
    "with": Preposition.WITH,
    "using": Preposition.WITH,
    "to": Preposition.TO,
    "from": Preposition.FROM,
    "at": Preposition.AT,
    "under": Preposition.UNDER,
    "beneath": Preposition.UNDER,
    "below": Preposition.UNDER,
}
