"""
Constantes globales pour CineTrend.

Ce module contient les constantes utilisees dans l'application:
- URLs du catalogue TMDB (API et images)
- Image de remplacement quand un film n'a pas d'affiche
- Valeurs par defaut du debounce et du classement des tendances
"""

# API TMDB v3
TMDB_BASE_URL = "https://api.themoviedb.org/3"

# CDN des images TMDB (largeur 500px)
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"

# Reference locale utilisee a la place d'une affiche absente
PLACEHOLDER_POSTER = "/no-movie.png"

# Delai de silence avant qu'une saisie soit consideree comme stable (secondes)
DEFAULT_DEBOUNCE_SECONDS = 1.0

# Taille du classement des films tendance
DEFAULT_TRENDING_LIMIT = 5

# Nombre d'acteurs conserves dans le detail d'un film
CAST_LIMIT = 12

# Extras TMDB demandes via append_to_response
TMDB_EXTRA_MAPPING = {
    "cast": "credits",
    "media": "videos",
}
