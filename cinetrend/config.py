"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CINETREND_,
et peut optionnellement être fournie via un fichier .env.

La clé API TMDB est optionnelle : les commandes de catalogue sont désactivées si non fournie.
Le client TMDB ne lit jamais ces paramètres directement, il reçoit un
CatalogClientConfig construit par catalog_config().
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cinetrend.core.ports.api_clients import CatalogClientConfig
from cinetrend.utils.constants import (
    DEFAULT_DEBOUNCE_SECONDS,
    DEFAULT_TRENDING_LIMIT,
    TMDB_BASE_URL,
    TMDB_IMAGE_BASE_URL,
)

# Trouver le fichier .env à la racine du projet (parent de cinetrend/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINETREND_.
    Exemple : CINETREND_TRENDING_LIMIT=10
    """

    model_config = SettingsConfigDict(
        env_prefix="CINETREND_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Catalogue TMDB (clé OPTIONNELLE)
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_base_url: str = Field(default=TMDB_BASE_URL)
    tmdb_image_base_url: str = Field(default=TMDB_IMAGE_BASE_URL)
    tmdb_language: str = Field(default="en-US")
    http_timeout_seconds: float = Field(default=30.0, gt=0)

    # Base de données des compteurs de recherche
    database_url: str = Field(default="sqlite:///data/cinetrend.db")

    # Tendances : local (base partagée) ou backend distant si l'URL est définie
    trending_limit: int = Field(default=DEFAULT_TRENDING_LIMIT, ge=1, le=50)
    trending_api_url: Optional[str] = Field(default=None)

    # Recherche
    debounce_seconds: float = Field(default=DEFAULT_DEBOUNCE_SECONDS, gt=0)

    # API web : origines autorisées pour le client (format JSON dans l'environnement)
    cors_origins: list[str] = Field(
        default=["http://localhost", "http://localhost:5173"]
    )

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinetrend.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("tmdb_api_key", "trending_api_url", mode="before")
    @classmethod
    def empty_as_none(cls, v: Optional[str]) -> Optional[str]:
        """Une variable définie mais vide équivaut à une variable absente."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return self.tmdb_api_key is not None

    @property
    def remote_trending(self) -> bool:
        """Vérifie si les tendances passent par un backend distant."""
        return self.trending_api_url is not None

    def catalog_config(self) -> CatalogClientConfig:
        """Construit la configuration explicite du client de catalogue."""
        return CatalogClientConfig(
            api_key=self.tmdb_api_key or "",
            base_url=self.tmdb_base_url,
            image_base_url=self.tmdb_image_base_url,
            language=self.tmdb_language,
            timeout=self.http_timeout_seconds,
        )
