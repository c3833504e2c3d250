"""Command handlers for the interactive Pokedex."""

from dataclasses import dataclass, field

from pokedex_cli.cli_commands import CliCommand, help_lines
from pokedex_cli.domain.catalog import LocationAreaPage
from pokedex_cli.domain.errors import CommandError
from pokedex_cli.services.catalog import CatalogService
from pokedex_cli.services.pokedex import PokedexService


@dataclass(frozen=True)
class CommandResult:
    """Output lines of a command and whether the loop should stop."""

    lines: list[str] = field(default_factory=list)
    should_exit: bool = False


@dataclass
class CommandDispatcher:
    """Route tokenized input to the matching command handler."""

    catalog_service: CatalogService
    pokedex_service: PokedexService

    def dispatch(self, tokens: list[str]) -> CommandResult:
        """Run the command named by the first token.

        Catalog failures propagate as ``CatalogError``; missing arguments
        raise ``CommandError``.
        """
        if not tokens:
            return CommandResult()
        name, params = tokens[0], tokens[1:]
        command = CliCommand.lookup(name)
        if command is None:
            return CommandResult([f"unknown command '{name}'"])
        handlers = {
            CliCommand.HELP: self._help,
            CliCommand.EXIT: self._exit,
            CliCommand.MAP: self._map,
            CliCommand.MAPB: self._mapb,
            CliCommand.EXPLORE: self._explore,
            CliCommand.CATCH: self._catch,
            CliCommand.INSPECT: self._inspect,
            CliCommand.POKEDEX: self._pokedex,
        }
        return handlers[command](params)

    def _help(self, params: list[str]) -> CommandResult:
        return CommandResult(["Welcome to the Pokedex!", "Usage:", "", *help_lines()])

    def _exit(self, params: list[str]) -> CommandResult:
        return CommandResult(["Closing the Pokedex... Goodbye!"], should_exit=True)

    def _map(self, params: list[str]) -> CommandResult:
        return _page_result(self.catalog_service.next_location_areas())

    def _mapb(self, params: list[str]) -> CommandResult:
        return _page_result(self.catalog_service.previous_location_areas())

    def _explore(self, params: list[str]) -> CommandResult:
        area_name = _require_argument(CliCommand.EXPLORE, params)
        pokemon_names = self.catalog_service.explore_area(area_name)
        lines = [f"Exploring {area_name}..."]
        if not pokemon_names:
            lines.append("No pokemon found!")
            return CommandResult(lines)
        lines.append("Found pokemon:")
        lines.extend(f" - {name}" for name in pokemon_names)
        return CommandResult(lines)

    def _catch(self, params: list[str]) -> CommandResult:
        pokemon_name = _require_argument(CliCommand.CATCH, params)
        pokemon = self.catalog_service.get_pokemon(pokemon_name)
        lines = [f"Throwing a Pokeball at {pokemon.name}..."]
        if self.pokedex_service.catch(pokemon):
            lines.append(f"{pokemon.name} was caught!")
            lines.append("You may now inspect it with the inspect command.")
        else:
            lines.append(f"{pokemon.name} escaped!")
        return CommandResult(lines)

    def _inspect(self, params: list[str]) -> CommandResult:
        pokemon_name = _require_argument(CliCommand.INSPECT, params)
        pokemon = self.pokedex_service.get(pokemon_name)
        if pokemon is None:
            return CommandResult(["you have not caught that pokemon"])
        lines = [
            f"Name: {pokemon.name}",
            f"Height: {pokemon.height}",
            f"Weight: {pokemon.weight}",
            "Stats:",
        ]
        lines.extend(f"  -{stat.name}: {stat.base_stat}" for stat in pokemon.stats)
        lines.append("Types:")
        lines.extend(f"  - {type_name}" for type_name in pokemon.types)
        return CommandResult(lines)

    def _pokedex(self, params: list[str]) -> CommandResult:
        names = self.pokedex_service.list_names()
        if not names:
            return CommandResult(["Your Pokedex:", " Nothing yet!"])
        return CommandResult(["Your Pokedex:", *(f" - {name}" for name in names)])


def _require_argument(command: CliCommand, params: list[str]) -> str:
    """Return the first argument or raise with the command's usage."""
    if not params:
        definition = command.value
        raise CommandError(
            f"'{definition.name}' command requires an argument, "
            f"e.g. '{definition.usage}'"
        )
    return params[0]


def _page_result(page: LocationAreaPage) -> CommandResult:
    return CommandResult(list(page.names))
