"""Google Workspace payloads."""

from __future__ import annotations

from pydantic import Field

from .base import ZentralModel
from .common import TimestampedModel


class GWSConnection(TimestampedModel):
    id: str = ""
    name: str = ""
    healthy: bool = False


class GWSGroupTagMapping(TimestampedModel):
    id: str = ""
    group_email: str = ""
    connection: str = ""
    tags: list[int] = Field(default_factory=list)


class GWSGroupTagMappingRequest(ZentralModel):
    group_email: str
    connection: str
    tags: list[int] = Field(default_factory=list)
