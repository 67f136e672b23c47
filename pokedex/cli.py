"""Interactive Pokédex prompt."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .api import LOCATION_AREA_API, Config, LocationArea, PokeAPIError, get_locations
from .cache import Cache
from .repl import clean_input

CACHE_INTERVAL = 5.0


@dataclass(frozen=True)
class Command:
    name: str
    description: str
    callback: Callable[[Config], None]


def command_exit(config: Config) -> None:
    """Say goodbye, flush pending output and leave the program with status 0."""
    print("Closing the Pokedex... Goodbye!")
    sys.stdout.flush()
    sys.exit(0)


def command_help(config: Config) -> None:
    """List the available commands."""
    print("Welcome to the Pokedex!")
    print("Usage:")
    print("")
    for name, command in COMMANDS.items():
        print(f"{name}: {command.description}")


def _show_locations(config: Config, url: str) -> None:
    try:
        locations: list[LocationArea] = get_locations(config, url)
    except PokeAPIError as err:
        raise PokeAPIError(f"error getting locations: {err}") from err
    for location in locations:
        print(location.name)


def command_map(config: Config) -> None:
    """Show the next page of location areas."""
    _show_locations(config, config.next or LOCATION_AREA_API)


def command_mapb(config: Config) -> None:
    """Show the previous page of location areas."""
    if not config.prev:
        print("you're on the first page")
        return
    _show_locations(config, config.prev)


COMMANDS: dict[str, Command] = {
    "exit": Command("exit", "Exit the Pokedex", command_exit),
    "help": Command("help", "Displays a help message", command_help),
    "map": Command("map", "Displays the next 20 locations", command_map),
    "mapb": Command("mapb", "Displays the previous 20 locations", command_mapb),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the prompt until end of input or the exit command."""
    with Cache(CACHE_INTERVAL) as cache:
        config = Config(cache=cache)
        while True:
            print("Pokedex > ", end="", flush=True)
            line = sys.stdin.readline()
            if not line:
                print()
                return 0
            words = clean_input(line.rstrip("\n"))
            if not words:
                continue
            command = COMMANDS.get(words[0])
            if command is None:
                print("Unknown command")
                continue
            try:
                command.callback(config)
            except PokeAPIError as err:
                print(f"error: {err}")


if __name__ == "__main__":
    sys.exit(main())