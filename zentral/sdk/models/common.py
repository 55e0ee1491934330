"""Payloads shared by several Zentral resources."""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field

from ..timestamp import Timestamp
from .base import OMIT_EMPTY, ZentralModel


class HTTPHeader(ZentralModel):
    name: str = ""
    value: str = ""


class EventFilter(ZentralModel):
    tags: Annotated[list[str], OMIT_EMPTY] = Field(default_factory=list)
    event_type: Annotated[list[str], OMIT_EMPTY] = Field(default_factory=list)
    routing_key: Annotated[list[str], OMIT_EMPTY] = Field(default_factory=list)


class EventFilterSet(ZentralModel):
    excluded_event_filters: Annotated[list[EventFilter], OMIT_EMPTY] = Field(
        default_factory=list
    )
    included_event_filters: Annotated[list[EventFilter], OMIT_EMPTY] = Field(
        default_factory=list
    )


class TagShard(ZentralModel):
    tag: int = 0
    shard: int = 0


class EnrollmentSecret(ZentralModel):
    """Secret used by machines to enroll, as returned by the API."""

    id: int = 0
    secret: str = ""
    meta_business_unit: int = 0
    tags: list[int] = Field(default_factory=list)
    serial_numbers: list[str] = Field(default_factory=list)
    udids: list[str] = Field(default_factory=list)
    quota: Optional[int] = None
    request_count: int = 0


class EnrollmentSecretRequest(ZentralModel):
    meta_business_unit: int
    tags: list[int] = Field(default_factory=list)
    serial_numbers: list[str] = Field(default_factory=list)
    udids: list[str] = Field(default_factory=list)
    quota: Optional[int] = None


class TimestampedModel(ZentralModel):
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None
