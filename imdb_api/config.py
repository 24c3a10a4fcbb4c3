"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe IMDBAPI_,
et peut optionnellement etre fournie via un fichier .env.

La cle API OMDb est optionnelle au chargement : le Client refuse de se construire sans elle.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from imdb_api.core.value_objects import MovieOptions

# Trouver le fichier .env a la racine du projet (parent de imdb_api/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe IMDBAPI_.
    Exemple : IMDBAPI_API_KEY=xxxxxx IMDBAPI_TIMEOUT=30
    """

    model_config = SettingsConfigDict(
        env_prefix="IMDBAPI_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API OMDb
    api_key: Optional[str] = Field(default=None)
    timeout: Optional[float] = Field(default=None, gt=0)
    base_url: str = Field(default="https://www.omdbapi.com")

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/imdb-api.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Etend ~ vers le repertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def api_enabled(self) -> bool:
        """Verifie si la cle API OMDb est configuree."""
        return bool(self.api_key)

    def to_options(self) -> MovieOptions:
        """Options de base pour le Client."""
        return MovieOptions(api_key=self.api_key, timeout=self.timeout)
