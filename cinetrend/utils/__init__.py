"""
Utilitaires et constantes pour CineTrend.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from cinetrend.utils.constants import (
    CAST_LIMIT,
    DEFAULT_DEBOUNCE_SECONDS,
    DEFAULT_TRENDING_LIMIT,
    PLACEHOLDER_POSTER,
    TMDB_IMAGE_BASE_URL,
)

__all__ = [
    "CAST_LIMIT",
    "DEFAULT_DEBOUNCE_SECONDS",
    "DEFAULT_TRENDING_LIMIT",
    "PLACEHOLDER_POSTER",
    "TMDB_IMAGE_BASE_URL",
]
