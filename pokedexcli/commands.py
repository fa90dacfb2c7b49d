"""The commands understood by the Pokedex prompt."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Callable, TextIO

from .types import Pokemon


class CommandError(Exception):
    """A command could not be carried out; the message is shown to the user."""


@dataclass
class Config:
    """State shared between commands during a session."""

    client: Any
    next_locations_url: str | None = None
    prev_locations_url: str | None = None
    pokedex: dict[str, Pokemon] = field(default_factory=dict)
    out: TextIO | None = None
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class Command:
    """A named command with its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[..., None]


def _echo(cfg: Config, text: object = "", end: str = "\n") -> None:
    print(text, end=end, file=cfg.out)


def get_commands() -> dict[str, Command]:
    """Return the commands keyed by the word that starts them."""
    return {
        "help": Command("help", "Displays a help message", command_help),
        "map": Command("map", "Get the next page of locations", command_map),
        "mapb": Command("mapb", "Get the previous page of locations", command_mapb),
        "exit": Command("exit", "Exit the Pokedex", command_exit),
        "explore": Command(
            "explore <location_name>", "Explore a location", command_explore
        ),
        "catch": Command(
            "catch <pokemon_name>", "Attempt to catch a pokemon", command_catch
        ),
        "inspect": Command("inspect <pokemon_name>", "inspect pokemon", command_inspect),
        "pokedex": Command("pokedex", "inspect pokedex", command_pokedex),
    }


def command_help(cfg: Config, *args: str) -> None:
    """Print the list of commands."""
    _echo(cfg)
    _echo(cfg, "Welcome to the Pokedex!")
    _echo(cfg, "Usage: ")
    _echo(cfg)
    for command in get_commands().values():
        _echo(cfg, f"{command.name}: {command.description}")
    _echo(cfg)


def _show_page(cfg: Config, page_url: str | None) -> None:
    page = cfg.client.list_locations(page_url)
    cfg.next_locations_url = page.next
    cfg.prev_locations_url = page.previous
    for location in page.results:
        _echo(cfg, location.name)


def command_map(cfg: Config, *args: str) -> None:
    """Show the next page of location areas."""
    _show_page(cfg, cfg.next_locations_url)


def command_mapb(cfg: Config, *args: str) -> None:
    """Show the previous page of location areas."""
    if cfg.prev_locations_url is None:
        raise CommandError("you're on the first page")
    _show_page(cfg, cfg.prev_locations_url)


def command_exit(cfg: Config, *args: str) -> None:
    """Say goodbye and leave the program."""
    _echo(cfg, "Closing the Pokedex... Goodbye!", end="")
    raise SystemExit(0)


def command_explore(cfg: Config, *args: str) -> None:
    """List the pokemon found in a location area."""
    if len(args) != 1:
        raise CommandError("you must provide a location name")
    area = cfg.client.get_location_area(args[0])
    _echo(cfg, f"Exploring {area.name}...")
    _echo(cfg, "Found Pokemon:")
    for encounter in area.pokemon_encounters:
        _echo(cfg, f" - {encounter.pokemon.name}")


def command_catch(cfg: Config, *args: str) -> None:
    """Throw a pokeball; harder for pokemon with more base experience."""
    if len(args) != 1:
        raise CommandError("you must provide a pokemon name")
    pokemon = cfg.client.get_pokemon(args[0])
    _echo(cfg, f"Throwing a Pokeball at {pokemon.name}...")
    if cfg.rng.randrange(255) >= pokemon.base_experience:
        _echo(cfg, f"{pokemon.name} was caught!")
        cfg.pokedex.setdefault(pokemon.name, pokemon)
    else:
        _echo(cfg, f"{pokemon.name} escaped!")


def command_inspect(cfg: Config, *args: str) -> None:
    """Show the details of a caught pokemon."""
    if not args:
        raise CommandError("you must provide a pokemon name")
    pokemon = cfg.pokedex.get(args[0])
    if pokemon is None:
        raise CommandError("you have not caught that pokemon")
    _echo(cfg, f"Name: {pokemon.name}")
    _echo(cfg, f"Height: {pokemon.height}")
    _echo(cfg, f"Weight: {pokemon.weight}")
    _echo(cfg, "Stats:")
    for stat in pokemon.stats:
        _echo(cfg, f"  -{stat.name}: {stat.base_stat}")
    _echo(cfg, "Types:")
    for ptype in pokemon.types:
        _echo(cfg, f"  - {ptype.name}")


def command_pokedex(cfg: Config, *args: str) -> None:
    """List the caught pokemon."""
    if not cfg.pokedex:
        raise CommandError("Your Pokedex is empty!")
    _echo(cfg, "Your Pokedex:")
    for pokemon in cfg.pokedex.values():
        _echo(cfg, f" - {pokemon.name}")