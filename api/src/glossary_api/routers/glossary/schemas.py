from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _normalize_texts(texts: Dict[str, str]) -> Dict[str, str]:
    normalized: Dict[str, str] = {}
    for language, text in texts.items():
        code = language.strip().upper()
        if not code:
            raise ValueError("Language codes must not be empty")
        normalized[code] = text
    return normalized


class GlossaryCreateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    aggregate_identifier: Optional[str] = Field(default=None, alias="aggregateIdentifier")
    texts: Dict[str, str]

    @field_validator("aggregate_identifier")
    @classmethod
    def _reject_identifier(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            raise ValueError("Create action must not have an aggregateIdentifier set")
        return value

    @field_validator("texts")
    @classmethod
    def _texts(cls, value: Dict[str, str]) -> Dict[str, str]:
        return _normalize_texts(value)


class GlossaryUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    # Optional echo of the path identifier; must match when given
    aggregate_identifier: Optional[str] = Field(default=None, alias="aggregateIdentifier")
    texts: Dict[str, str]

    @field_validator("texts")
    @classmethod
    def _texts(cls, value: Dict[str, str]) -> Dict[str, str]:
        return _normalize_texts(value)
