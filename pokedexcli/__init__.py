"""Interactive command-line Pokedex backed by the PokeAPI, with a cached HTTP client."""

__version__ = "0.1.0"
__all__ = ["cache", "client", "commands", "repl", "types"]