"""
cli.py

PURPOSE: Command-line interface for the adventure engine.
DEPENDENCIES: typer, rich

ARCHITECTURE NOTES:
The CLI provides commands for:
- play: Play a world file interactively (optionally restoring/saving)
- validate: Check a world file for errors and authoring problems
- config: Show the current configuration

The play loop is the thin collaborator around Game.process_command(): read
a line, process it, then act on the reply state (print, clear, show score,
quit). The engine never prints anything itself.
"""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adventure_engine import __version__
from adventure_engine.config import get_settings
from adventure_engine.engine.game import Game, ReplyState
from adventure_engine.errors import AdventureError
from adventure_engine.loader import build_game, load_world
from adventure_engine.models.save import read_save, write_save
from adventure_engine.models.world import WorldDefinition
from adventure_engine.ui import plain
from adventure_engine.validator import ValidationSeverity, validate_world

app = typer.Typer(
    name="adventure-engine",
    help="Play and check text adventure worlds.",
    add_completion=False,
)

console = Console()

DEFAULT_HELP = """\
Type what you want to do in plain English, for example:

- `look`, `look at the lamp`
- `go north`, `n`, `up`
- `take key`, `drop key`, `use key on door`
- `inventory`, `score`, `visited`, `clear`, `quit`
"""


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"adventure-engine version {__version__}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.callback()
def main(
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Adventure Engine - Play and check text adventure worlds."""
    pass


def _load_or_exit(world_file: Path) -> WorldDefinition:
    try:
        return load_world(world_file)
    except json.JSONDecodeError as e:
        plain.print_error(f"Invalid JSON at line {e.lineno}: {e.msg}")
        raise typer.Exit(1) from None
    except ValidationError as e:
        plain.print_error("Validation errors:")
        for error in e.errors():
            loc = " -> ".join(str(x) for x in error["loc"])
            plain.print_error(f"  {loc}: {error['msg']}" if loc else f"  {error['msg']}")
        raise typer.Exit(1) from None


@app.command()
def play(
    world_file: Annotated[
        Path,
        typer.Argument(
            help="Path to the world JSON file",
            exists=True,
            readable=True,
        ),
    ],
    restore: Annotated[
        Path | None,
        typer.Option(
            "--restore",
            "-r",
            help="Replay a save file before play starts",
            exists=True,
            readable=True,
        ),
    ] = None,
    save: Annotated[
        Path | None,
        typer.Option(
            "--save",
            "-s",
            help="Write the command log to this file when play ends",
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            help="Show debug information after each turn",
        ),
    ] = False,
) -> None:
    """Play a world interactively."""
    settings = get_settings()
    debug = debug or settings.debug
    configure_logging("DEBUG" if debug else settings.log_level)

    world = _load_or_exit(world_file)
    title = world.metadata.title

    try:
        game = build_game(world, settings)
    except (AdventureError, ValueError) as e:
        plain.print_error(f"Could not build the world: {e}")
        raise typer.Exit(1) from None

    plain.print_title(title)
    console.print()

    if restore is not None:
        try:
            save_file = read_save(restore)
        except ValidationError:
            plain.print_error(f"{restore} is not a valid save file.")
            raise typer.Exit(1) from None
        if save_file.world_title != title:
            plain.print_warning(
                f"{restore} was saved from '{save_file.world_title}', not '{title}'."
            )
        game.load(save_file.commands)
        plain.print_success(f"Restored {len(save_file.commands)} commands from {restore}")
        console.print()
    elif game.prologue:
        plain.print_message(game.macros.substitute(game.prologue))
        console.print()

    plain.print_location(game.macros.substitute(game.current_location.description))
    console.print()

    # Main game loop
    while True:
        try:
            user_input = plain.print_prompt()
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        result = game.process_command(user_input)

        if result.state == ReplyState.EXIT:
            break

        _show_reply(game, result.state, result.reply)
        console.print()

        if debug:
            plain.print_debug(game.snapshot().model_dump())
            console.print()

    plain.print_message("Thanks for playing!")

    if save is not None:
        write_save(save, game, title)
        plain.print_success(f"Game saved to {save}")


def _show_reply(game: Game, state: ReplyState, reply: str) -> None:
    """Act on the reply state of one processed command."""
    match state:
        case ReplyState.CLEAR_SCREEN:
            plain.clear_screen()
            plain.print_location(game.macros.substitute(game.current_location.description))
        case ReplyState.SCORE:
            plain.print_score(game.score, game.moves)
        case ReplyState.INVENTORY:
            plain.print_inventory(game.inventory.names())
        case ReplyState.HELP:
            plain.print_help(game.help_text or DEFAULT_HELP)
        case ReplyState.VISITED:
            plain.print_visited(game.visited_locations)
        case _:
            if reply:
                plain.print_message(reply)


@app.command()
def validate(
    world_file: Annotated[
        Path,
        typer.Argument(
            help="Path to the world JSON file",
            exists=True,
            readable=True,
        ),
    ],
) -> None:
    """Validate a world JSON file."""
    world = _load_or_exit(world_file)

    issues = validate_world(world)
    for issue in issues:
        match issue.severity:
            case ValidationSeverity.ERROR:
                plain.print_error(str(issue))
            case ValidationSeverity.WARNING:
                plain.print_warning(str(issue))
            case _:
                plain.print_message(str(issue))

    if any(issue.severity == ValidationSeverity.ERROR for issue in issues):
        raise typer.Exit(1)

    # Show validation success and stats
    plain.print_success(f"Valid world: {world.metadata.title}")
    console.print(f"  Locations: {len(world.locations)}")
    console.print(f"  Items: {len(world.items)}")
    console.print(f"  Macros: {len(world.macros)}")
    console.print(f"  Start: {world.start_location}")


@app.command("config")
def config_cmd() -> None:
    """Show the current configuration."""
    settings = get_settings()
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"  Data directory: {settings.data_dir}")
    console.print(f"  Log level: {settings.log_level}")
    console.print(f"  Debug: {settings.debug}")
    console.print(f"  Max macro depth: {settings.max_macro_depth}")
    console.print(f"  Compress content: {settings.compress_content}")


if __name__ == "__main__":
    app()
