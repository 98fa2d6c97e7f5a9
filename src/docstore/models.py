"""Value types held by the document store: authors, documents, and search filters"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC so every timestamp in the store is comparable."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    id:   Optional[str] = None
    name: Optional[str] = None


class Document(BaseModel):
    """A stored record. Every field is optional; `id` is absent until first save."""
    model_config = ConfigDict(validate_assignment=True)

    id:      Optional[str] = None
    title:   Optional[str] = None
    content: Optional[str] = None
    author:  Optional[Author] = None
    created: Optional[datetime] = None     # set once at first insertion, never changed by updates

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class SearchRequest(BaseModel):
    """Filter over stored documents.

    AND across fields, OR within a list field. A None or empty list places
    no constraint on that field. Date bounds are inclusive.
    """
    model_config = ConfigDict(validate_assignment=True)

    title_prefixes:    Optional[list[str]] = Field(default=None, description="Title must start with one of these")
    contains_contents: Optional[list[str]] = Field(default=None, description="Content must contain one of these")
    author_ids:        Optional[list[str]] = Field(default=None, description="Author id must be one of these")
    created_from:      Optional[datetime] = Field(default=None, description="Inclusive lower bound on created")
    created_to:        Optional[datetime] = Field(default=None, description="Inclusive upper bound on created")

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)
