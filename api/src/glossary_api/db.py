from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from glossary_api.config import get_settings


def _build_engine(database_url: str):
    if database_url.startswith("sqlite"):
        # In-memory SQLite must share one connection across threads
        return create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, echo=False)


DATABASE_URL = get_settings().database_url
engine = _build_engine(DATABASE_URL)


def get_session() -> Session:
    with Session(engine) as session:
        yield session
