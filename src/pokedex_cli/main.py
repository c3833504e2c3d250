"""Interactive Pokedex command loop."""

import logging
import sys
from typing import TextIO

from pokedex_cli.app_logging import configure_logging
from pokedex_cli.config import Settings
from pokedex_cli.containers import AppContainer, build_container
from pokedex_cli.domain.errors import CatalogError, CommandError

PROMPT = "pokedex > "

_logger = logging.getLogger(__name__)


def tokenize(line: str) -> list[str]:
    """Split an input line into lowercase whitespace-separated tokens."""
    return line.lower().split()


def run_repl(container: AppContainer, stdin: TextIO, stdout: TextIO) -> None:
    """Read commands until ``exit`` or end of input."""
    dispatcher = container.command_dispatcher
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            return
        tokens = tokenize(line)
        if not tokens:
            continue
        try:
            result = dispatcher.dispatch(tokens)
        except (CatalogError, CommandError) as exc:
            stdout.write(f"Error trying command: {exc}\n")
            continue
        except Exception:
            _logger.exception("Command %s failed", tokens[0])
            stdout.write("Error trying command: unexpected failure\n")
            continue
        for output_line in result.lines:
            stdout.write(f"{output_line}\n")
        if result.should_exit:
            return


def main() -> None:
    """Run the Pokedex REPL on stdin/stdout."""
    settings = Settings()
    configure_logging(settings.log_level)
    container = build_container(settings)
    try:
        run_repl(container, sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
    finally:
        container.close_resources()


if __name__ == "__main__":
    main()
