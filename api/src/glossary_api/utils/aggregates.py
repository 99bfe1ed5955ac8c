import logging
from typing import Dict, Iterable, List, Optional, Tuple

from glossary_models import GlossaryEntry, LanguagePair

logger = logging.getLogger(__name__)

GlossaryAggregate = Dict[str, str]


def group_entries(entries: Iterable[GlossaryEntry]) -> Dict[str, GlossaryAggregate]:
    aggregates: Dict[str, GlossaryAggregate] = {}
    for entry in entries:
        aggregates.setdefault(entry.aggregate_identifier, {})[entry.glossary_language] = entry.text
    return aggregates


def sort_aggregates(
    aggregates: Dict[str, GlossaryAggregate],
    sort_by_language: Optional[str],
) -> Dict[str, GlossaryAggregate]:
    """Order aggregates by their text in ``sort_by_language``.

    Aggregates without that language go last, ordered by identifier.
    Without a sort language the identifier order is used.
    """
    missing: List[str] = []

    def _key(item: Tuple[str, GlossaryAggregate]) -> Tuple[int, str, str]:
        identifier, texts = item
        if sort_by_language is None:
            return (0, "", identifier)
        text = texts.get(sort_by_language)
        if text is None:
            missing.append(identifier)
            return (1, "", identifier)
        return (0, text, identifier)

    ordered = dict(sorted(aggregates.items(), key=_key))
    if missing:
        logger.warning(
            "Glossary aggregates lack the sort language",
            extra={"sort_by_language": sort_by_language, "aggregate_identifiers": missing},
        )
    return ordered


def build_aggregates(
    entries: Iterable[GlossaryEntry],
    sort_by_language: Optional[str],
) -> Dict[str, GlossaryAggregate]:
    return sort_aggregates(group_entries(entries), sort_by_language)


def extract_languages(pairs: Iterable[LanguagePair]) -> List[str]:
    """Distinct languages: every source in first-seen order, then new targets."""
    pairs = list(pairs)
    languages: List[str] = []
    for attr in ("source", "target"):
        for pair in pairs:
            language = getattr(pair, attr)
            if language and language not in languages:
                languages.append(language)
    return languages
