"""Shared glossary models package.

SQLModel tables and the pydantic shapes exchanged with the translation API.
"""

from .base import BaseModel
from .glossary_entry import GlossaryEntry
from .remote import GlossaryStatus, LanguagePair, RemoteGlossaryDescriptor

__all__ = [
    "BaseModel",
    "GlossaryEntry",
    "GlossaryStatus",
    "LanguagePair",
    "RemoteGlossaryDescriptor",
]
