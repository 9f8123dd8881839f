"""Sous-package CLI commands - re-exporte les commandes publiques."""

from cinetrend.adapters.cli.commands.catalog_commands import (
    movie,
    popular,
    search,
)
from cinetrend.adapters.cli.commands.interactive_command import interactive
from cinetrend.adapters.cli.commands.trending_commands import trending

__all__ = [
    "interactive",
    "movie",
    "popular",
    "search",
    "trending",
]
