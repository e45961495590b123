"""
plain.py

PURPOSE: Console output for the play and validate commands.
DEPENDENCIES: rich

ARCHITECTURE NOTES:
Everything the CLI shows goes through the module-level console. World text
is wrapped in rich Text before printing, so square brackets in a world file
are shown as written rather than read as console markup. Only the fixed
strings in this module use markup.
"""

import json

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

console = Console()


def _say(text: str, style: str = "") -> None:
    console.print(Text(text, style=style))


def print_location(text: str) -> None:
    """Print the description of where the player is."""
    _say(text, "bold")


def print_message(text: str) -> None:
    _say(text)


def print_error(text: str) -> None:
    _say(text, "red")


def print_warning(text: str) -> None:
    _say(text, "yellow")


def print_success(text: str) -> None:
    _say(text, "green")


def print_prompt() -> str:
    """Show the prompt and read one line. Raises EOFError at end of input."""
    return console.input("[bold cyan]>[/bold cyan] ")


def print_title(title: str) -> None:
    console.print(Panel(Text(title, justify="center", style="bold"), border_style="blue"))


def print_help(text: str) -> None:
    """Help text is markdown, so worlds can use lists and emphasis."""
    console.print(Markdown(text))


def print_score(score: int, moves: int) -> None:
    _say(f"Score: {score}   Moves: {moves}", "bold")


def print_inventory(names: list[str]) -> None:
    if not names:
        _say("You are empty-handed.")
        return
    _say("You are carrying:")
    for name in names:
        _say(f"  - {name}")


def print_visited(names: list[str]) -> None:
    """Visited locations as a numbered table, in the order they were found."""
    table = Table(title="Visited locations", show_header=False, box=None)
    table.add_column(justify="right", style="dim")
    table.add_column()
    for number, name in enumerate(names, start=1):
        table.add_row(str(number), Text(name))
    console.print(table)


def print_debug(data: dict[str, object] | str) -> None:
    """Dump per-turn state under the prompt."""
    body = json.dumps(data, indent=2, default=str) if isinstance(data, dict) else data
    console.print(Panel(Text(body), title="DEBUG", border_style="dim"))


def clear_screen() -> None:
    console.clear()
