"""
Erreurs du domaine CineTrend.

Taxonomie :
- UpstreamUnavailable : echec reseau ou HTTP du catalogue externe
- UpstreamMalformed : reponse du catalogue de forme inattendue
- NotFound : requete valide mais identifiant inexistant
- StoreUnavailable : persistance des tendances indisponible

Les erreurs du catalogue remontent jusqu'a l'utilisateur (etat d'erreur),
les erreurs de tendance sont journalisees puis ignorees.
"""

from typing import Optional


class CineTrendError(Exception):
    """Classe de base de toutes les erreurs CineTrend."""


class UpstreamUnavailable(CineTrendError):
    """
    Le catalogue externe n'a pas pu repondre.

    Couvre les erreurs de transport, les timeouts, les statuts HTTP non 2xx
    et les reponses 200 portant un marqueur d'echec.

    Attributes:
        status_code: Statut HTTP si une reponse a ete recue, None sinon
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class UpstreamMalformed(CineTrendError):
    """La reponse du catalogue n'a pas la structure attendue."""


class NotFound(CineTrendError):
    """
    L'element demande n'existe pas dans le catalogue.

    Attributes:
        item_id: Identifiant demande
    """

    def __init__(self, item_id: int) -> None:
        self.item_id = item_id
        super().__init__(f"Film introuvable: {item_id}")


class StoreUnavailable(CineTrendError):
    """Le stockage des compteurs de recherche est indisponible."""
