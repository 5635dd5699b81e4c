import logging
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from tts_bench.core.config import get_settings
from tts_bench.db.base import Base


logger = logging.getLogger(__name__)
settings = get_settings()


def _connect_args(database_url: str) -> dict[str, object]:
    # FastAPI runs sync dependencies in a threadpool
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.database_url,
    echo=settings.database_echo,
    future=True,
    connect_args=_connect_args(settings.database_url),
)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def init_db(bind: Engine | None = None) -> None:
    """Create missing tables and indexes; safe to call on every startup."""
    # Register models on the metadata before creating tables
    from tts_bench import models  # noqa: F401

    target = bind or engine
    Base.metadata.create_all(bind=target)
    logger.info("Database schema verified at %s", target.url.render_as_string(hide_password=True))


def get_db() -> Generator:
    """Provide a SQLAlchemy session scoped to the request lifecycle."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
