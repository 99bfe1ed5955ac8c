from typing import Any, Dict

from fastapi import Depends

from glossary_api.clients import DeepLClient
from glossary_api.config import Settings, get_settings
from glossary_api.routers.glossary import logger, router
from glossary_api.staleness import StalenessEvaluator
from glossary_api.store import GlossaryStore
from glossary_api.utils.aggregates import GlossaryAggregate, build_aggregates

from .deps import configured_languages, get_store, get_translation_client, resolve_sort_language


def _glossary_status(store: GlossaryStore, client: DeepLClient) -> Dict[str, Dict[str, Any]]:
    evaluator = StalenessEvaluator(store.last_modified_per_language(), client.internal_glossary_key)
    statuses = evaluator.evaluate(client.get_glossaries())
    return {key: status.model_dump(by_alias=True) for key, status in statuses.items()}


@router.get("")
def glossary_index(
    store: GlossaryStore = Depends(get_store),  # noqa: B008
    client: DeepLClient = Depends(get_translation_client),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> Dict[str, Any]:
    languages = configured_languages(client)
    entries = build_aggregates(store.list_all(), resolve_sort_language(settings, client))
    status = _glossary_status(store, client)
    logger.info(
        "Glossary index fetched",
        extra={"aggregates": len(entries), "languages": languages, "remote_glossaries": len(status)},
    )
    return {"entries": entries, "languages": languages, "glossaryStatus": status}


@router.get("/entries", response_model=Dict[str, GlossaryAggregate])
def list_glossary_entries(
    store: GlossaryStore = Depends(get_store),  # noqa: B008
    client: DeepLClient = Depends(get_translation_client),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> Dict[str, GlossaryAggregate]:
    entries = build_aggregates(store.list_all(), resolve_sort_language(settings, client))
    logger.info("Glossary entries listed", extra={"count": len(entries)})
    return entries


@router.get("/status")
def glossary_status(
    store: GlossaryStore = Depends(get_store),  # noqa: B008
    client: DeepLClient = Depends(get_translation_client),  # noqa: B008
) -> Dict[str, Dict[str, Any]]:
    status = _glossary_status(store, client)
    logger.info("Glossary status fetched", extra={"count": len(status)})
    return status
