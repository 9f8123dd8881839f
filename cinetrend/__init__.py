"""
CineTrend - Recherche de films TMDB et classement des films tendance.

Ce package fournit la recherche debouncee dans le catalogue TMDB et
l'agregation des recherches de tous les utilisateurs en un top des films
les plus recherches.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, erreurs)
- services/ : Couche application (debounce, orchestration, tendances)
- adapters/ : Couche infrastructure (CLI, clients API)
- infrastructure/ : Persistance SQLModel du compteur de recherches
- web/ : API HTTP FastAPI
"""

__version__ = "0.1.0"
