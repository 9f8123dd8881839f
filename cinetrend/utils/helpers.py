"""
Fonctions utilitaires partagees dans le projet CineTrend.

Ce module centralise les fonctions reutilisees a travers le codebase :
- strip_invisible_chars / clean_title : nettoyage des titres recus de l'API
- normalize_query : normalisation de la saisie de recherche
- image_url : construction des URLs d'images avec repli local
"""

import unicodedata
from typing import Optional

from cinetrend.utils.constants import PLACEHOLDER_POSTER, TMDB_IMAGE_BASE_URL


def strip_invisible_chars(text: str) -> str:
    """
    Retire les caractères Unicode invisibles d'une chaîne.

    Supprime les caractères de contrôle et les marques directionnelles
    qui peuvent provenir des APIs (LRM, RLM, BOM, etc.).
    """
    return "".join(
        char for char in text if unicodedata.category(char) not in ("Cf", "Cc")
    )


def clean_title(title: str) -> str:
    """Nettoie un titre : retire les caractères invisibles et les espaces superflus."""
    if not title:
        return title
    return strip_invisible_chars(title).strip()


def normalize_query(raw: str) -> str:
    """
    Normalise une saisie de recherche.

    Retire les espaces en debut et fin et fusionne les espaces multiples.
    Une saisie composee uniquement d'espaces devient la chaine vide.
    """
    return " ".join(raw.split())


def image_url(
    path: Optional[str],
    base_url: str = TMDB_IMAGE_BASE_URL,
    placeholder: str = PLACEHOLDER_POSTER,
) -> str:
    """
    Construit l'URL complete d'une image du catalogue.

    Args:
        path: Chemin relatif TMDB (ex: "/abc.jpg"), ou None
        base_url: URL de base du CDN d'images
        placeholder: Reference locale renvoyee si path est absent

    Returns:
        URL absolue, chemin deja absolu inchange, ou placeholder
    """
    if not path:
        return placeholder
    if path.startswith("http"):
        return path
    return f"{base_url}{path}"
