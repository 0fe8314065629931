"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe VIDCATALOG_,
et peut optionnellement être fournie via un fichier .env.

La clé API YouTube est optionnelle au chargement - les appels au fournisseur
échouent en erreur interne si elle n'est pas fournie.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de vidcatalog/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe VIDCATALOG_.
    Exemple : VIDCATALOG_YOUTUBE_API_KEY=xxx
    """

    model_config = SettingsConfigDict(
        env_prefix="VIDCATALOG_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Store des identifiants
    database_url: str = Field(default="sqlite:///vidcatalog.db")

    # Fournisseur de métadonnées
    youtube_api_key: Optional[str] = Field(default=None)
    youtube_base_url: str = Field(default="https://www.googleapis.com/youtube/v3")
    provider_timeout: Optional[float] = Field(default=None, gt=0)
    # Limite d'identifiants par appel (50 pour YouTube), None pour désactiver
    max_batch_size: Optional[int] = Field(default=50, ge=1)

    # Serveur web
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=4000, ge=1, le=65535)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/vidcatalog.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def youtube_enabled(self) -> bool:
        """Vérifie si l'API YouTube est configurée."""
        return bool(self.youtube_api_key)
