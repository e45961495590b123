"""
validator.py

PURPOSE: Check world definitions for authoring problems.
DEPENDENCIES: models, macros

ARCHITECTURE NOTES:
WorldDefinition already rejects broken references (unknown exit targets,
unknown items). The validator looks for problems that load fine but play
badly:
- Locations the player can never reach
- Locked exits that can never be unlocked
- Macro tokens in text with no macro defined for them
- Lights-off locations with nothing to show in the dark

Running validation before play catches these issues early.
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum, auto

from adventure_engine.engine.macros import MACRO_PATTERN, macro_token
from adventure_engine.models.world import ExitDefinition, WorldDefinition


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = auto()  # The world can't be finished as written
    WARNING = auto()  # May cause unexpected behavior
    INFO = auto()  # Suggestion for improvement


@dataclass
class ValidationIssue:
    """A single validation issue found in a world."""

    severity: ValidationSeverity
    message: str
    location: str  # e.g., "item:key", "location:hallway/exit:north"

    def __str__(self) -> str:
        return f"[{self.severity.name}] {self.location}: {self.message}"


class WorldValidator:
    """
    Validates world definitions for common issues.

    Usage:
        validator = WorldValidator(world)
        issues = validator.validate()
        for issue in issues:
            print(issue)
    """

    def __init__(self, world: WorldDefinition):
        self.world = world
        self.issues: list[ValidationIssue] = []

        self.macro_tokens = {macro_token(name) for name in world.macros}
        self.placed_items = set(world.inventory) | {
            item_id for location in world.locations for item_id in location.items
        }

    def validate(self) -> list[ValidationIssue]:
        """
        Run all validation checks.

        Returns:
            List of ValidationIssue objects, sorted by severity.
        """
        self.issues = []

        self._validate_reachability()
        self._validate_locations()
        self._validate_items()
        self._validate_macros()

        # Sort by severity (errors first)
        self.issues.sort(key=lambda i: i.severity.value)
        return self.issues

    def _add(self, severity: ValidationSeverity, message: str, location: str) -> None:
        self.issues.append(ValidationIssue(severity=severity, message=message, location=location))

    def _validate_reachability(self) -> None:
        """Walk the exit graph from the start location, ignoring locks."""
        reachable = {self.world.start_location}
        frontier = deque([self.world.start_location])

        while frontier:
            current = self.world.get_location(frontier.popleft())
            if current is None:
                continue
            for target in current.exit_targets().values():
                if target not in reachable:
                    reachable.add(target)
                    frontier.append(target)

        for location in self.world.locations:
            if location.id not in reachable:
                self._add(
                    ValidationSeverity.WARNING,
                    "Location can not be reached from the start location.",
                    f"location:{location.id}",
                )

    def _validate_locations(self) -> None:
        """Validate exits and lighting of every location."""
        for location in self.world.locations:
            where = f"location:{location.id}"

            if not location.exits:
                self._add(ValidationSeverity.INFO, "Location has no exits.", where)

            if not location.lights_on and not location.lights_off_description:
                self._add(
                    ValidationSeverity.INFO,
                    "Lights start off but there is no lights_off_description; "
                    "the normal description will be shown in the dark.",
                    where,
                )

            for direction, exit_ in location.exits.items():
                if isinstance(exit_, ExitDefinition):
                    self._validate_exit(exit_, f"{where}/exit:{direction}")

    def _validate_exit(self, exit_: ExitDefinition, where: str) -> None:
        if exit_.unlock_object and not exit_.locked:
            self._add(
                ValidationSeverity.INFO,
                f"Exit is not locked, so unlock_object '{exit_.unlock_object}' is never used.",
                where,
            )

        if not exit_.locked:
            return

        if not exit_.unlock_object:
            self._add(
                ValidationSeverity.WARNING,
                "Exit is locked with no unlock_object; only custom location code can open it.",
                where,
            )
        elif exit_.unlock_object not in self.placed_items:
            self._add(
                ValidationSeverity.ERROR,
                f"Exit is unlocked by '{exit_.unlock_object}', which is not placed anywhere.",
                where,
            )

    def _validate_items(self) -> None:
        for item in self.world.items:
            if item.id not in self.placed_items:
                self._add(
                    ValidationSeverity.INFO,
                    "Item is not placed in any location or the starting inventory.",
                    f"item:{item.id}",
                )

    def _validate_macros(self) -> None:
        """Find macro tokens with no definition, and definitions never used."""
        used: set[str] = set()

        for where, text in self._texts():
            for token in MACRO_PATTERN.findall(text):
                used.add(token)
                if token not in self.macro_tokens:
                    self._add(
                        ValidationSeverity.WARNING,
                        f"Macro {token} is not defined and will be shown as written.",
                        where,
                    )

        for token in sorted(self.macro_tokens - used):
            self._add(ValidationSeverity.INFO, "Macro is never referenced.", f"macro:{token}")

    def _texts(self) -> list[tuple[str, str]]:
        """Every piece of player-visible text, with where it came from."""
        world = self.world
        texts: list[tuple[str, str]] = []

        if world.prologue:
            texts.append(("prologue", world.prologue))
        if world.help_text:
            texts.append(("help_text", world.help_text))

        for location in world.locations:
            where = f"location:{location.id}"
            texts.append((where, location.description))
            texts.append((where, location.lights_off_description))
            for direction, exit_ in location.exits.items():
                if isinstance(exit_, ExitDefinition):
                    texts.append((f"{where}/exit:{direction}", exit_.lock_message or ""))
                    texts.append((f"{where}/exit:{direction}", exit_.unlock_message or ""))

        for item in world.items:
            texts.append((f"item:{item.id}", item.description))
            texts.append((f"item:{item.id}", item.pick_up_message))

        for name, replacement in world.macros.items():
            texts.append((f"macro:{macro_token(name)}", replacement))

        for identifier, text in world.content.items():
            texts.append((f"content:{identifier}", text))

        return [(where, text) for where, text in texts if text]


def validate_world(world: WorldDefinition) -> list[ValidationIssue]:
    """
    Convenience function to validate a world.

    Args:
        world: The world to validate.

    Returns:
        List of validation issues (empty if the world is clean).
    """
    validator = WorldValidator(world)
    return validator.validate()
