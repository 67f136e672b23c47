"""Command-line Pokedex that pages through PokeAPI location areas, with a short-lived response cache."""

__version__ = "0.1.0"
__all__ = ["api", "cache", "cli", "repl"]