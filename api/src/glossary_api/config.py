import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional

from glossary_models import LanguagePair


def _build_database_url() -> str:
    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit

    db_user = os.environ["POSTGRES_USER"]
    db_password = os.environ["POSTGRES_PASSWORD"]
    db_name = os.environ["POSTGRES_DB"]
    db_host = os.environ["POSTGRES_HOST"]
    db_port = os.environ["POSTGRES_PORT"]

    return f"postgresql+psycopg://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"


def parse_language_pairs(raw: Optional[str]) -> List[LanguagePair]:
    """Parse ``"EN:DE,EN:FR"`` into language pairs. Malformed items are skipped."""
    pairs: List[LanguagePair] = []
    if not raw:
        return pairs
    for item in raw.split(","):
        source, sep, target = item.strip().partition(":")
        if not sep or not source.strip() or not target.strip():
            continue
        pairs.append(LanguagePair(source=source, target=target))
    return pairs


def _optional(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass(frozen=True)
class Settings:
    database_url: str
    sort_by_language: Optional[str] = None
    deepl_api_key: Optional[str] = None
    deepl_base_url: Optional[str] = None
    deepl_timeout_seconds: float = 10.0
    language_pairs: List[LanguagePair] = field(default_factory=list)


def load_settings() -> Settings:
    sort_by = _optional("GLOSSARY_SORT_BY_LANGUAGE")
    return Settings(
        database_url=_build_database_url(),
        sort_by_language=sort_by.upper() if sort_by else None,
        deepl_api_key=_optional("DEEPL_API_KEY"),
        deepl_base_url=_optional("DEEPL_BASE_URL"),
        deepl_timeout_seconds=float(os.getenv("DEEPL_TIMEOUT_SECONDS", "10")),
        language_pairs=parse_language_pairs(os.getenv("GLOSSARY_LANGUAGE_PAIRS")),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
