"""
command_queue.py

PURPOSE: Ordered log of every command the player has issued.
DEPENDENCIES: command model

ARCHITECTURE NOTES:
The queue is a dumb ledger. It never validates, reorders or deduplicates:
walking north and south ten times is ten pairs of entries. Saving a game is
just reading the queue back, and loading one is replaying it.
"""

from collections.abc import Iterator

from adventure_engine.models.command import Command


class CommandQueue:
    """Append-only list of parsed commands."""

    def __init__(self) -> None:
        self._commands: list[Command] = []

    def add_command(self, command: Command) -> None:
        """Append a command to the end of the log."""
        self._commands.append(command)

    @property
    def commands(self) -> tuple[Command, ...]:
        """Read-only snapshot in insertion order."""
        return tuple(self._commands)

    def clear(self) -> None:
        """Forget every command (used before replaying a save)."""
        self._commands.clear()

    def raw_inputs(self) -> list[str]:
        """The original text of each command, in order."""
        return [command.full_text_command for command in self._commands]

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)
