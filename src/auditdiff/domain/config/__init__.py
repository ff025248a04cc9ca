"""
Configuration domain models.

Pydantic models validated at the infrastructure boundary.
"""

from .auditor_config import (
    DEFAULT_BUCKET_CAPACITY,
    DEFAULT_IDENTIFIER_FIELDS,
    AuditorConfig,
    DiffSettings,
    IgnoreCollectionOrder,
)

__all__ = [
    "AuditorConfig",
    "DiffSettings",
    "IgnoreCollectionOrder",
    "DEFAULT_BUCKET_CAPACITY",
    "DEFAULT_IDENTIFIER_FIELDS",
]
