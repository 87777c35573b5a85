"""Configuration settings for musclemap-core."""
import os
from pathlib import Path
from typing import Literal


EnvironmentType = Literal["development", "staging", "production"]

PACKAGE_DIR = Path(__file__).parent
DEFAULT_CATALOG_PATH = PACKAGE_DIR / "data" / "exercises.json"


class Settings:
    """Library settings, read from the environment once."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"

    # Logging level suggested to the host application
    LOG_LEVEL: str = "INFO"

    # Storage / reference data
    DB_PATH: Path = Path(".data") / "musclemap.sqlite3"
    CATALOG_PATH: Path = DEFAULT_CATALOG_PATH

    # Import behaviour
    SKIP_DUPLICATES: bool = True

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        self.LOG_LEVEL = os.getenv("MUSCLEMAP_LOG_LEVEL", "INFO").upper()

        db_path = os.getenv("MUSCLEMAP_DB_PATH")
        self.DB_PATH = Path(db_path) if db_path else Path(".data") / "musclemap.sqlite3"

        catalog_path = os.getenv("MUSCLEMAP_CATALOG_PATH")
        self.CATALOG_PATH = Path(catalog_path) if catalog_path else DEFAULT_CATALOG_PATH

        self.SKIP_DUPLICATES = os.getenv("MUSCLEMAP_SKIP_DUPLICATES", "true").lower() == "true"


settings = Settings()
