"""Create, update and delete flows for glossary aggregates.

Each function stages its changes on the store and commits them once, so a
failing request leaves nothing behind.
"""

import logging
import uuid
from datetime import datetime
from typing import Dict, List, Mapping, Optional, Sequence

from glossary_api.errors import AggregateNotFoundError, GlossaryValidationError
from glossary_api.store import GlossaryStore
from glossary_models import GlossaryEntry
from glossary_models.base import utcnow

logger = logging.getLogger(__name__)


def new_aggregate_identifier() -> str:
    return str(uuid.uuid4())


def create_aggregate(
    store: GlossaryStore,
    texts: Mapping[str, str],
    languages: Sequence[str],
    now: Optional[datetime] = None,
) -> str:
    if not languages:
        raise GlossaryValidationError("No glossary languages are configured")

    missing = [language for language in languages if not (texts.get(language) or "").strip()]
    if missing:
        raise GlossaryValidationError(f"There is no text for language(s) {', '.join(missing)}")

    ignored = sorted(set(texts) - set(languages))
    if ignored:
        logger.warning("Ignoring texts for unconfigured languages", extra={"languages": ignored})

    now = now or utcnow()
    aggregate_identifier = new_aggregate_identifier()
    for language in languages:
        store.add(
            GlossaryEntry(
                aggregate_identifier=aggregate_identifier,
                glossary_language=language,
                text=texts[language],
                creation_date_time=now,
                last_modification_date_time=now,
            )
        )
    store.persist_all()
    logger.info(
        "Glossary aggregate created",
        extra={"aggregate_identifier": aggregate_identifier, "languages": list(languages)},
    )
    return aggregate_identifier


def update_aggregate(
    store: GlossaryStore,
    aggregate_identifier: str,
    texts: Mapping[str, str],
    now: Optional[datetime] = None,
) -> List[str]:
    """Upsert ``texts`` per language. Returns the languages that changed.

    Languages missing from ``texts`` keep their entries untouched.
    """
    entries = store.find_by_aggregate(aggregate_identifier)
    if not entries:
        raise AggregateNotFoundError(aggregate_identifier)

    now = now or utcnow()
    pending: Dict[str, str] = dict(texts)
    changed: List[str] = []

    for entry in entries:
        language = entry.glossary_language
        if language not in pending:
            continue
        text = pending.pop(language)
        if text != entry.text:
            entry.text = text
            entry.last_modification_date_time = now
            store.update(entry)
            changed.append(language)

    for language, text in pending.items():
        store.add(
            GlossaryEntry(
                aggregate_identifier=aggregate_identifier,
                glossary_language=language,
                text=text,
                creation_date_time=now,
                last_modification_date_time=now,
            )
        )
        changed.append(language)

    store.persist_all()
    logger.info(
        "Glossary aggregate updated",
        extra={"aggregate_identifier": aggregate_identifier, "changed_languages": changed},
    )
    return changed


def delete_aggregate(store: GlossaryStore, aggregate_identifier: str) -> int:
    entries = store.find_by_aggregate(aggregate_identifier)
    if not entries:
        raise AggregateNotFoundError(aggregate_identifier)
    for entry in entries:
        store.remove(entry)
    store.persist_all()
    logger.info(
        "Glossary aggregate deleted",
        extra={"aggregate_identifier": aggregate_identifier, "count": len(entries)},
    )
    return len(entries)
