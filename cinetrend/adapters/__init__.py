"""
Adaptateurs (couche infrastructure) de CineTrend.

- api/ : Clients HTTP (TMDB, backend de tendances distant)
- cli/ : Commandes typer et affichage rich
"""
