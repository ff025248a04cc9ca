"""
Auditor configuration domain model.

This module defines the settings that control how snapshots are
flattened and diffed: bucket capacity, order-independent collection
matching and parallel bucket processing.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_IDENTIFIER_FIELDS = ["id"]
DEFAULT_BUCKET_CAPACITY = 1000


class IgnoreCollectionOrder(BaseModel):
    """
    Order-independent collection matching.

    When enabled, collection members are matched by identifier fields
    (or by value, when no identifier is present) instead of by position.
    """

    model_config = ConfigDict(populate_by_name=True)

    enabled: bool = Field(default=False, description="Whether collection order is ignored")
    fields: List[str] = Field(
        default_factory=lambda: list(DEFAULT_IDENTIFIER_FIELDS),
        description="Identifier field names used to match collection members",
    )

    @field_validator("fields", mode="before")
    @classmethod
    def default_fields(cls, v: Any) -> Any:
        """Missing identifier list falls back to ['id']."""
        if v is None:
            return list(DEFAULT_IDENTIFIER_FIELDS)
        return v

    @field_validator("fields")
    @classmethod
    def validate_fields(cls, v: List[str]) -> List[str]:
        """Identifier field names must be non-blank."""
        cleaned = [name.strip() for name in v]
        if any(not name for name in cleaned):
            raise ValueError("Identifier field names must not be blank")
        return cleaned


class DiffSettings(BaseModel):
    """
    Performance settings for the diff engine.

    Buckets are independent, so they may be processed by a bounded
    worker pool once both snapshots are flattened.
    """

    enable_parallel_processing: bool = Field(
        default=False,
        description="Whether to flatten both snapshots and process buckets concurrently",
    )

    max_parallel_buckets: int = Field(
        default=4,
        description="Maximum number of worker threads processing buckets",
        ge=1,
        le=32,
    )

    parallel_bucket_threshold: int = Field(
        default=64,
        description="Minimum number of buckets before the worker pool is used",
        ge=1,
    )


class AuditorConfig(BaseModel):
    """
    Domain model for auditor configuration.

    Accepts both snake_case and the camelCase keys of the event config
    (``maxElements``, ``ignoreCollectionOrder``).
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    application_name: Optional[str] = Field(
        None, alias="applicationName", description="Application name stamped on audit events"
    )

    max_elements: Optional[int] = Field(
        None,
        alias="maxElements",
        description="Expected maximum elements per path; bucket capacity is twice this",
        ge=1,
    )

    ignore_collection_order: IgnoreCollectionOrder = Field(
        default_factory=IgnoreCollectionOrder,
        alias="ignoreCollectionOrder",
        description="Order-independent collection matching",
    )

    diff_settings: DiffSettings = Field(
        default_factory=DiffSettings,
        alias="diffSettings",
        description="Concurrency settings for the diff engine",
    )

    @field_validator("ignore_collection_order", mode="before")
    @classmethod
    def default_ignore_collection_order(cls, v: Any) -> Any:
        if v is None:
            return IgnoreCollectionOrder()
        return v

    @property
    def bucket_capacity(self) -> int:
        """Maximum elements buffered for one path."""
        if self.max_elements is None:
            return DEFAULT_BUCKET_CAPACITY
        return self.max_elements * 2

    @property
    def identifier_fields(self) -> List[str]:
        return self.ignore_collection_order.fields

    @property
    def is_order_ignored(self) -> bool:
        return self.ignore_collection_order.enabled
