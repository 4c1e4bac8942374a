"""
Application configuration.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Values are captured when this module is first
imported, so a ``.env`` file must be loaded (see ``run.py``) before the
application package is imported.  The signing secret and the database
credentials have no usable defaults; ``Settings.validate`` is called
during application startup and refuses to continue without them.
"""

import os
from dataclasses import dataclass, field
from typing import List
from urllib.parse import quote_plus


DEFAULT_CORS_ORIGINS = (
    "https://clean-co-56f4d.web.app,"
    "https://clean-co-56f4d.firebaseapp.com"
)


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing at startup."""


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Clean Co API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # Shared HMAC secret used to sign and verify access tokens.
    secret_key: str = os.getenv("ACCESS_TOKEN_SECRET", "")
    # Tokens are always issued for one hour.
    access_token_expire_seconds: int = 60 * 60
    token_cookie_name: str = "token"

    # A full connection string wins over the Atlas credentials below.
    mongodb_uri: str = os.getenv("MONGODB_URI", "")
    db_user: str = os.getenv("DB_USER", "")
    db_pass: str = os.getenv("DB_PASS", "")
    db_host: str = os.getenv("DB_HOST", "cluster0.xzggogk.mongodb.net")
    database_name: str = os.getenv("DB_NAME", "CleanCoDB")
    services_collection: str = "services"
    bookings_collection: str = "bookings"

    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS))
    )

    @property
    def database_uri(self) -> str:
        """Connection string for the document store."""
        if self.mongodb_uri:
            return self.mongodb_uri
        return (
            f"mongodb+srv://{quote_plus(self.db_user)}:{quote_plus(self.db_pass)}"
            f"@{self.db_host}/?retryWrites=true&w=majority"
        )

    def validate(self) -> None:
        """Ensure secrets and database credentials are present.

        Raises
        ------
        ConfigurationError
            If ``ACCESS_TOKEN_SECRET`` is empty, or if neither
            ``MONGODB_URI`` nor both ``DB_USER`` and ``DB_PASS`` are set.
        """
        missing = []
        if not self.secret_key:
            missing.append("ACCESS_TOKEN_SECRET")
        if not self.mongodb_uri:
            if not self.db_user:
                missing.append("DB_USER")
            if not self.db_pass:
                missing.append("DB_PASS")
        if missing:
            raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
