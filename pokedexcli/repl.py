"""The interactive prompt and the program's entry point."""

from __future__ import annotations

import sys
from typing import TextIO

from .client import PokeAPIClient
from .commands import CommandError, Config, get_commands

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words."""
    return text.lower().split()


def start_repl(cfg: Config, stream: TextIO | None = None) -> None:
    """Read commands from ``stream`` (stdin by default) until it ends."""
    stream = sys.stdin if stream is None else stream
    commands = get_commands()
    while True:
        print(PROMPT, end="", file=cfg.out, flush=True)
        line = stream.readline()
        if not line:
            print(file=cfg.out)
            return
        words = clean_input(line)
        if not words:
            continue
        name, *args = words
        command = commands.get(name)
        if command is None:
            print("Unknown command", file=cfg.out)
            continue
        try:
            command.callback(cfg, *args)
        except (CommandError, OSError, ValueError) as err:
            print(err, file=cfg.out)


def main(argv: list[str] | None = None) -> int:
    """Run the Pokedex prompt on standard input."""
    with PokeAPIClient(timeout=5.0, cache_interval=300.0) as client:
        start_repl(Config(client=client))
    return 0


if __name__ == "__main__":
    sys.exit(main())