from typing import Any, Dict

from fastapi import Depends, status

from glossary_api.clients import DeepLClient
from glossary_api.config import Settings, get_settings
from glossary_api.errors import GlossaryValidationError
from glossary_api.glossary import create_aggregate, delete_aggregate, update_aggregate
from glossary_api.routers.glossary import logger, router
from glossary_api.store import GlossaryStore
from glossary_api.utils.aggregates import build_aggregates

from .deps import configured_languages, get_store, get_translation_client, resolve_sort_language
from .schemas import GlossaryCreateRequest, GlossaryUpdateRequest


def _mutation_response(
    store: GlossaryStore,
    aggregate_identifier: str,
    sort_by: str | None,
) -> Dict[str, Any]:
    return {
        "success": True,
        "aggregateIdentifier": aggregate_identifier,
        "entries": build_aggregates(store.list_all(), sort_by),
    }


@router.post("", status_code=status.HTTP_201_CREATED)
def create_glossary_aggregate(
    payload: GlossaryCreateRequest,
    store: GlossaryStore = Depends(get_store),  # noqa: B008
    client: DeepLClient = Depends(get_translation_client),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> Dict[str, Any]:
    aggregate_identifier = create_aggregate(store, payload.texts, configured_languages(client))
    return _mutation_response(store, aggregate_identifier, resolve_sort_language(settings, client))


@router.put("/{aggregate_identifier}")
def update_glossary_aggregate(
    aggregate_identifier: str,
    payload: GlossaryUpdateRequest,
    store: GlossaryStore = Depends(get_store),  # noqa: B008
    client: DeepLClient = Depends(get_translation_client),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> Dict[str, Any]:
    if payload.aggregate_identifier is not None and payload.aggregate_identifier != aggregate_identifier:
        logger.warning(
            "Glossary update identifier mismatch",
            extra={"path_identifier": aggregate_identifier, "body_identifier": payload.aggregate_identifier},
        )
        raise GlossaryValidationError("aggregateIdentifier in body does not match the URL")
    update_aggregate(store, aggregate_identifier, payload.texts)
    return _mutation_response(store, aggregate_identifier, resolve_sort_language(settings, client))


@router.delete("/{aggregate_identifier}")
def delete_glossary_aggregate(
    aggregate_identifier: str,
    store: GlossaryStore = Depends(get_store),  # noqa: B008
    client: DeepLClient = Depends(get_translation_client),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> Dict[str, Any]:
    delete_aggregate(store, aggregate_identifier)
    return _mutation_response(store, aggregate_identifier, resolve_sort_language(settings, client))
