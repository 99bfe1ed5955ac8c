from typing import Optional

from sqlalchemy import Text, UniqueConstraint
from sqlmodel import Field

from .base import BaseModel


class GlossaryEntry(BaseModel, table=True):
    """One language variant of a glossary term.

    All variants of a term share ``aggregate_identifier``.
    """

    __tablename__ = "glossary_entries"
    __table_args__ = (
        UniqueConstraint(
            "aggregate_identifier",
            "glossary_language",
            name="uq_glossary_entry_aggregate_lang",
        ),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    aggregate_identifier: str = Field(index=True, max_length=36)
    glossary_language: str = Field(index=True, max_length=16)
    text: str = Field(sa_type=Text)
