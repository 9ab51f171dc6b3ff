"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe MEDIASORT_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mediasort.utils.constants import (
    ARIA2C_MAX_CONNECTIONS,
    IMDB_DATASET_NAMES,
    IMDB_DATASETS_BASE_URL,
    MEDIA_EXTENSIONS,
)

# Trouver le fichier .env à la racine du projet (parent de mediasort/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MEDIASORT_.
    Exemple : MEDIASORT_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIASORT_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Datasets IMDb
    datasets_dir: Path = Field(default=Path("datasets"))
    datasets_base_url: str = Field(default=IMDB_DATASETS_BASE_URL)
    dataset_names: tuple[str, ...] = Field(default=IMDB_DATASET_NAMES)

    # Outils externes
    downloader: Literal["aria2c", "http"] = Field(default="aria2c")
    aria2c_path: str = Field(default="aria2c")
    aria2c_connections: int = Field(default=ARIA2C_MAX_CONNECTIONS, ge=1, le=ARIA2C_MAX_CONNECTIONS)
    pigz_path: str = Field(default="pigz")
    sort_path: str = Field(default="sort")
    sort_buffer_size: Optional[str] = Field(default=None)
    http_timeout: float = Field(default=60.0, gt=0)

    # Arrêt au premier échec d'un outil externe
    strict: bool = Field(default=True)

    # Renommage (signature vérifiée : seuls les vrais conteneurs MKV/MP4 sont renommés)
    media_extensions: tuple[str, ...] = Field(default=MEDIA_EXTENSIONS)
    verify_signature: bool = Field(default=True)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/mediasort.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("datasets_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("media_extensions", mode="after")
    @classmethod
    def lowercase_extensions(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Normalise les extensions en minuscules, sans point initial."""
        return tuple(ext.lower().lstrip(".") for ext in v)
