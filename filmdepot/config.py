"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe FILMDEPOT_,
et peut optionnellement être fournie via un fichier .env.

La clé API TMDB est optionnelle : le linking et la récupération des détails
sont indisponibles si elle n'est pas fournie.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de filmdepot/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe FILMDEPOT_.
    Exemple : FILMDEPOT_MOVIE_WAREHOUSE_DIR=/mnt/nas/movies

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="FILMDEPOT_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
    )

    # Entrepot et fichiers de contenu des visites (avec expansion ~)
    movie_warehouse_dir: Path = Field(default=Path("~/Movies"))
    warehouse_contents_dir: Path = Field(default=Path("~/.filmdepot/contents"))
    manual_external_ids_file: Path = Field(
        default=Path("~/.filmdepot/manual_external_ids.json")
    )

    # Base de données
    database_url: str = Field(default="sqlite:///filmdepot.db")

    # API TMDB (OPTIONNELLE)
    tmdb_api_key: Optional[str] = Field(default=None)
    api_cache_dir: Path = Field(default=Path(".cache/api"))
    linker_max_concurrency: int = Field(default=5, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/filmdepot.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator(
        "movie_warehouse_dir",
        "warehouse_contents_dir",
        "manual_external_ids_file",
        "api_cache_dir",
        "log_file",
        mode="before",
    )
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return bool(self.tmdb_api_key)
