"""Common pytest fixtures for API tests.

Tests run against an in-memory SQLite database. The translation API client is
replaced by an in-process fake through FastAPI dependency overrides.
"""

import os
from collections.abc import Iterator
from datetime import datetime, timezone
from typing import List, Optional

# Configure the app BEFORE importing it
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_JSON", "false")
os.environ["GLOSSARY_SORT_BY_LANGUAGE"] = "EN"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import delete
from sqlmodel import Session, SQLModel

from glossary_api.db import engine
from glossary_api.errors import TranslationApiError
from glossary_api.main import app
from glossary_api.routers.glossary.deps import get_translation_client
from glossary_api.store import GlossaryStore
from glossary_models import GlossaryEntry, LanguagePair, RemoteGlossaryDescriptor

SQLModel.metadata.create_all(engine)


class FakeTranslationClient:
    """Stands in for DeepLClient; records nothing, only serves fixed data."""

    def __init__(
        self,
        language_pairs: Optional[List[LanguagePair]] = None,
        glossaries: Optional[List[RemoteGlossaryDescriptor]] = None,
        error: Optional[TranslationApiError] = None,
    ) -> None:
        self.language_pairs = language_pairs or []
        self.glossaries = glossaries or []
        self.error = error

    @staticmethod
    def internal_glossary_key(source_lang: str, target_lang: str) -> str:
        return f"{source_lang.upper()}-{target_lang.upper()}"

    def get_language_pairs(self) -> List[LanguagePair]:
        if self.error is not None:
            raise self.error
        return self.language_pairs

    def get_glossaries(self) -> List[RemoteGlossaryDescriptor]:
        if self.error is not None:
            raise self.error
        return self.glossaries


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def client() -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def translation_client() -> Iterator[FakeTranslationClient]:
    fake = FakeTranslationClient(
        language_pairs=[
            LanguagePair(source="en", target="de"),
            LanguagePair(source="en", target="fr"),
            LanguagePair(source="de", target="fr"),
        ],
    )
    app.dependency_overrides[get_translation_client] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_translation_client, None)


@pytest.fixture()
def session() -> Iterator[Session]:
    with Session(engine) as s:
        yield s


@pytest.fixture()
def store(session: Session) -> GlossaryStore:
    return GlossaryStore(session)


@pytest.fixture(autouse=True)
def _clean_db() -> Iterator[None]:
    # Ensure a clean state before each test to avoid cross-test interference
    with Session(engine) as s:
        s.exec(delete(GlossaryEntry))
        s.commit()
    yield
