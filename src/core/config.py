"""Settings read from the environment"""

import os
from dataclasses import dataclass

DEFAULT_DATABASE_URL = "sqlite:///./dots.db"


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    database_echo: bool = False


def load_settings() -> Settings:
    """DOTS_DATABASE_URL: any SQLAlchemy URL. DOTS_DATABASE_ECHO: 'true' / '1' to log the SQL statements."""
    return Settings(
        database_url=os.environ.get("DOTS_DATABASE_URL", DEFAULT_DATABASE_URL),
        database_echo=os.environ.get("DOTS_DATABASE_ECHO", "false").lower()
        in {"1", "true", "yes"},
    )
