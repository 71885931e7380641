"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe SHORTCAT_,
et peut optionnellement être fournie via un fichier .env.

Le secret JWT est optionnel - un secret de développement est utilisé s'il n'est pas fourni
(un avertissement est alors journalisé au démarrage).
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

# Secret de repli, uniquement pour le développement local
DEV_JWT_SECRET = "shortcat-dev-secret"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe SHORTCAT_.
    Exemple : SHORTCAT_UPLOAD_DIR=/srv/shortcat/uploads

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="SHORTCAT_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Stockage des fichiers envoyés
    upload_dir: Path = Field(default=Path("uploads"))

    # Base de données
    database_url: str = Field(default="sqlite:///shortcat.db")

    # Authentification
    jwt_secret: Optional[str] = Field(default=None)
    jwt_algorithm: str = Field(default="HS256")
    token_expire_minutes: int = Field(default=60, ge=1)

    # Politique d'upload
    max_files_per_field: int = Field(default=5, ge=1)
    accepted_image_types: list[str] = Field(default=["image/jpeg", "image/png"])
    accepted_video_types: list[str] = Field(default=["video/mp4"])
    evict_assets_on_delete: bool = Field(default=False)

    # Serveur HTTP
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=4563, ge=1, le=65535)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/shortcat.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("upload_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("accepted_image_types", "accepted_video_types")
    @classmethod
    def normalize_mime_types(cls, v: list[str]) -> list[str]:
        """Normalise les types MIME en minuscules."""
        return [mime.strip().lower() for mime in v]

    @property
    def jwt_secret_configured(self) -> bool:
        """Vérifie si un secret JWT a été fourni."""
        return bool(self.jwt_secret)

    @property
    def effective_jwt_secret(self) -> str:
        """Retourne le secret JWT configuré, ou le secret de développement."""
        return self.jwt_secret or DEV_JWT_SECRET
