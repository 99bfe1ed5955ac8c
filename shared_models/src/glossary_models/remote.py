from datetime import datetime, timezone
from typing import Any, Optional

from dateutil import parser as date_parser
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _normalize_language(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip().upper()


class LanguagePair(BaseModel):
    """A source -> target language pair supported for glossaries."""

    source: str
    target: str

    @field_validator("source", "target", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> str:
        return _normalize_language(value)


class RemoteGlossaryDescriptor(BaseModel):
    """Metadata of a glossary hosted by the translation API."""

    model_config = ConfigDict(extra="ignore")

    glossary_id: Optional[str] = None
    name: Optional[str] = None
    source_lang: str
    target_lang: str
    creation_time: datetime
    ready: bool = False
    entry_count: Optional[int] = None

    @field_validator("source_lang", "target_lang", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> str:
        return _normalize_language(value)

    @field_validator("creation_time", mode="before")
    @classmethod
    def _parse_creation_time(cls, value: Any) -> datetime:
        if isinstance(value, str):
            value = date_parser.isoparse(value)
        if isinstance(value, datetime) and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class GlossaryStatus(BaseModel):
    """Staleness verdict for one remote glossary."""

    model_config = ConfigDict(populate_by_name=True)

    source_lang: str = Field(alias="sourceLang")
    target_lang: str = Field(alias="targetLang")
    creation_date: str = Field(alias="creationDate")
    is_outdated: bool = Field(alias="isOutdated")
    can_be_used: bool = Field(alias="canBeUsed")
