"""Exceptions raised by the glossary service."""


class GlossaryError(Exception):
    """Base exception for all glossary service errors."""


class GlossaryValidationError(GlossaryError):
    """Raised when a request is well-formed but semantically invalid."""


class AggregateNotFoundError(GlossaryError):
    """Raised when no entries exist for an aggregate identifier."""

    def __init__(self, aggregate_identifier: str) -> None:
        super().__init__(f"Glossary aggregate {aggregate_identifier} not found")
        self.aggregate_identifier = aggregate_identifier


class GlossaryConflictError(GlossaryError):
    """Raised when persisting would violate a uniqueness constraint."""


class TranslationApiError(GlossaryError):
    """Raised when the translation API cannot be reached or answers badly."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
