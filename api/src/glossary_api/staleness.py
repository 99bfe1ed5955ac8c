import logging
from datetime import datetime
from typing import Callable, Dict, Iterable, Mapping, Optional

from glossary_api.store import as_utc
from glossary_models import GlossaryStatus, RemoteGlossaryDescriptor

logger = logging.getLogger(__name__)

CREATION_DATE_FORMAT = "%d.%m.%Y %H:%M:%S"


def _default_key(source_lang: str, target_lang: str) -> str:
    return f"{source_lang}-{target_lang}"


class StalenessEvaluator:
    """Decides whether remote glossaries predate local edits.

    A glossary is outdated when it was created before the latest local
    modification of its source or its target language. A language without
    local entries counts as never modified.
    """

    def __init__(
        self,
        last_modified: Mapping[str, datetime],
        glossary_key: Callable[[str, str], str] = _default_key,
    ) -> None:
        self.last_modified = {language.upper(): as_utc(ts) for language, ts in last_modified.items()}
        self.glossary_key = glossary_key

    def last_modified_at(self, language: str) -> Optional[datetime]:
        return self.last_modified.get(language.upper())

    def is_outdated(self, descriptor: RemoteGlossaryDescriptor) -> bool:
        created = as_utc(descriptor.creation_time)
        for language in (descriptor.source_lang, descriptor.target_lang):
            modified = self.last_modified_at(language)
            if modified is not None and created < modified:
                return True
        return False

    def evaluate(self, descriptors: Iterable[RemoteGlossaryDescriptor]) -> Dict[str, GlossaryStatus]:
        statuses: Dict[str, GlossaryStatus] = {}
        for descriptor in descriptors:
            source = descriptor.source_lang.upper()
            target = descriptor.target_lang.upper()
            for language in (source, target):
                if language not in self.last_modified:
                    logger.info("No local glossary entries for language", extra={"lang": language})
            statuses[self.glossary_key(source, target)] = GlossaryStatus(
                source_lang=source,
                target_lang=target,
                creation_date=as_utc(descriptor.creation_time).strftime(CREATION_DATE_FORMAT),
                is_outdated=self.is_outdated(descriptor),
                can_be_used=descriptor.ready,
            )
        return dict(sorted(statuses.items()))
