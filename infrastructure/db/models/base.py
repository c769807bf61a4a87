"""
Shared base for all database models.
All models should import Base from here to ensure they're in the same registry.
"""
from datetime import timezone
from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import registry

# Create a single shared registry and base for all models
mapper_registry = registry()
Base = mapper_registry.generate_base()

# Document-shaped columns: JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONDocument = JSON().with_variant(JSONB(), "postgresql")


def as_utc(value):
    """Re-attach UTC to datetimes read back from backends that drop tzinfo (SQLite)."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
