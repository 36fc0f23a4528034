"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for every field so the application can
start against a local MongoDB without any setup; in a deployment the
connection string and secret key should always be overridden.
"""

import os
from dataclasses import dataclass
from pathlib import Path


_DEFAULT_SEED_DIR = str(Path(__file__).resolve().parent.parent.parent / "data")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Personal Finance API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # MongoDB connection string.  The lower-case ``connection_string``
    # variable is accepted as well since existing deployments export it
    # under that name.
    connection_string: str = os.getenv(
        "CONNECTION_STRING",
        os.getenv("connection_string", "mongodb://localhost:27017"),
    )
    database_name: str = os.getenv("DATABASE_NAME", "PersonalFinance")

    # Directory holding Accounts.json, Goals.json, ... used by the seeder.
    seed_data_dir: str = os.getenv("SEED_DATA_DIR", _DEFAULT_SEED_DIR)
    seed_on_startup: bool = _env_flag("SEED_ON_STARTUP", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
