from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(SQLModel, table=False):
    """Abstract base for ORM models with audit timestamps."""

    # Use per-model columns via sa_type + sa_column_kwargs to avoid reusing
    # the same SQLAlchemy Column instance across multiple tables.
    # Both values are set by the application, not the database, so that the
    # modification time only moves when the text actually changes.
    creation_date_time: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"nullable": False},
    )
    last_modification_date_time: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"nullable": False},
    )
