"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe OSSERVICE_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from osservice.utils.constants import ORDER_NUMBER_START

# Trouver le fichier .env à la racine du projet (parent de osservice/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe OSSERVICE_.
    Exemple : OSSERVICE_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="OSSERVICE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données
    database_url: str = Field(default="sqlite:///data/osservice.db")
    database_timeout: float = Field(default=15.0, gt=0)

    # Stockage des pièces jointes
    uploads_dir: Path = Field(default=Path("data/uploads"))

    # Premier numéro attribué aux ordres de service
    order_number_start: int = Field(default=ORDER_NUMBER_START, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/osservice.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)
    log_json: bool = Field(default=False)

    @field_validator("uploads_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalise le niveau de log en majuscules."""
        return v.upper()

    @property
    def is_sqlite(self) -> bool:
        """Vérifie si la base configurée est SQLite."""
        return self.database_url.startswith("sqlite")
