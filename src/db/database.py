"""Generate database session"""

from functools import lru_cache
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import load_settings
from src.db.schema import Base


@lru_cache
def get_engine() -> Engine:
    """Built on first use, so importing this module does not touch the database."""
    settings = load_settings()
    engine = create_engine(settings.database_url, echo=settings.database_echo)

    # Ensure all tables are created
    Base.metadata.create_all(bind=engine)
    return engine


def get_db() -> Generator[Session, None, None]:
    db = sessionmaker(bind=get_engine())()
    try:
        yield db
    finally:
        db.close()
