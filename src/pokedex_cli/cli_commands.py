"""Interactive command table."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class CommandSpec:
    """Declarative command definition."""

    name: str
    description: str
    usage: str


class CliCommand(Enum):
    """Enum of REPL commands (single source of truth)."""

    HELP = CommandSpec("help", "Displays a help message", "help")
    EXIT = CommandSpec("exit", "Exit the Pokedex", "exit")
    MAP = CommandSpec("map", "Show the next 20 location areas", "map")
    MAPB = CommandSpec("mapb", "Show the previous 20 location areas", "mapb")
    EXPLORE = CommandSpec(
        "explore", "List Pokemon found in an area", "explore canalave-city-area"
    )
    CATCH = CommandSpec("catch", "Try to catch a Pokemon", "catch pikachu")
    INSPECT = CommandSpec(
        "inspect", "Show details of a caught Pokemon", "inspect pikachu"
    )
    POKEDEX = CommandSpec("pokedex", "List your caught Pokemon", "pokedex")

    @classmethod
    def lookup(cls, name: str) -> "CliCommand | None":
        """Return the command with the given name, if any."""
        for entry in cls:
            if entry.value.name == name:
                return entry
        return None


def help_lines() -> list[str]:
    """Return one usage line per command."""
    return [f"{entry.value.name}: {entry.value.description}" for entry in CliCommand]
