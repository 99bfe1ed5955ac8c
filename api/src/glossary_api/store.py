import logging
from datetime import datetime, timezone
from typing import Dict, List

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from glossary_api.errors import GlossaryConflictError
from glossary_models import GlossaryEntry

logger = logging.getLogger(__name__)


def as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo on the way back; stored values are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class GlossaryStore:
    """Repository over ``GlossaryEntry`` rows bound to one session.

    Mutations are staged on the session and written by ``persist_all``.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_all(self) -> List[GlossaryEntry]:
        return list(self.session.exec(select(GlossaryEntry)).all())

    def find_by_aggregate(self, aggregate_identifier: str) -> List[GlossaryEntry]:
        return list(
            self.session.exec(
                select(GlossaryEntry).where(GlossaryEntry.aggregate_identifier == aggregate_identifier)
            ).all()
        )

    def add(self, entry: GlossaryEntry) -> None:
        self.session.add(entry)

    def update(self, entry: GlossaryEntry) -> None:
        self.session.add(entry)

    def remove(self, entry: GlossaryEntry) -> None:
        self.session.delete(entry)

    def last_modified_per_language(self) -> Dict[str, datetime]:
        rows = self.session.exec(
            select(
                GlossaryEntry.glossary_language,
                func.max(GlossaryEntry.last_modification_date_time),
            ).group_by(GlossaryEntry.glossary_language)
        ).all()
        return {language: as_utc(modified) for language, modified in rows if modified is not None}

    def persist_all(self) -> None:
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning("Glossary commit rejected", extra={"error": str(exc.orig)})
            raise GlossaryConflictError("Glossary entry already exists for this language") from exc
