"""
Interfaces ports pour les repositories.

Interface abstraite (port) définissant le contrat de persistance des compteurs
de recherche. L'implémentation (adaptateur) utilise SQLModel.
"""

from abc import ABC, abstractmethod

from cinetrend.core.entities.trending import TrendingEntry


class ISearchCountStore(ABC):
    """
    Interface du compteur persistant de recherches par film.

    Seul le service de tendances écrit dans ce stockage.
    """

    @abstractmethod
    def increment(self, item_id: int, term: str, poster_url: str) -> int:
        """
        Incrémente atomiquement le compteur d'un film.

        Crée l'entrée au premier appel (compteur à 1), sinon incrémente le
        compteur et rafraîchit le terme et l'affiche.

        Retourne :
            Le nouveau compteur du film

        Lève :
            StoreUnavailable : si le stockage est inaccessible
        """
        ...

    @abstractmethod
    def top_n(self, n: int) -> list[TrendingEntry]:
        """
        Liste les n films les plus recherchés.

        Tri par compteur décroissant, puis par mise à jour la plus récente.
        """
        ...
