from typing import Iterator, List

from fastapi import Depends
from sqlmodel import Session

from glossary_api.clients import DeepLClient
from glossary_api.config import Settings, get_settings
from glossary_api.db import get_session
from glossary_api.store import GlossaryStore
from glossary_api.utils.aggregates import extract_languages


def get_store(session: Session = Depends(get_session)) -> GlossaryStore:  # noqa: B008
    return GlossaryStore(session)


def get_translation_client(settings: Settings = Depends(get_settings)) -> Iterator[DeepLClient]:  # noqa: B008
    client = DeepLClient(
        api_key=settings.deepl_api_key,
        base_url=settings.deepl_base_url,
        timeout=settings.deepl_timeout_seconds,
        language_pairs=settings.language_pairs,
    )
    try:
        yield client
    finally:
        client.close()


def configured_languages(client: DeepLClient) -> List[str]:
    return extract_languages(client.get_language_pairs())


def resolve_sort_language(settings: Settings, client: DeepLClient) -> str | None:
    if settings.sort_by_language:
        return settings.sort_by_language
    languages = configured_languages(client)
    return languages[0] if languages else None
