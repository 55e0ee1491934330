"""Probe and probe action payloads."""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field

from .base import BackendKwargsModel, ZentralModel
from .common import HTTPHeader, TimestampedModel


class InventoryFilter(ZentralModel):
    meta_business_unit_ids: list[int] = Field(default_factory=list)
    tag_ids: list[int] = Field(default_factory=list)
    platforms: list[str] = Field(default_factory=list)
    types: list[str] = Field(default_factory=list)


class MetadataFilter(ZentralModel):
    event_types: list[str] = Field(default_factory=list)
    event_tags: list[str] = Field(default_factory=list)
    event_routing_keys: list[str] = Field(default_factory=list)


class PayloadFilterItem(ZentralModel):
    attribute: str = ""
    operator: str = ""
    values: list[str] = Field(default_factory=list)


class Probe(TimestampedModel):
    """A probe matches events using filters and triggers actions.

    ``payload_filters`` is a list of filters, each filter being a list of
    items that must all match.
    """

    id: int = 0
    name: str = ""
    slug: str = ""
    description: str = ""
    inventory_filters: list[InventoryFilter] = Field(default_factory=list)
    metadata_filters: list[MetadataFilter] = Field(default_factory=list)
    payload_filters: list[list[PayloadFilterItem]] = Field(default_factory=list)
    incident_severity: Optional[int] = None
    actions: list[str] = Field(default_factory=list)
    active: bool = False


class ProbeRequest(ZentralModel):
    name: str
    description: str = ""
    inventory_filters: list[InventoryFilter] = Field(default_factory=list)
    metadata_filters: list[MetadataFilter] = Field(default_factory=list)
    payload_filters: list[list[PayloadFilterItem]] = Field(default_factory=list)
    incident_severity: Optional[int] = None
    actions: list[str] = Field(default_factory=list)
    active: bool = False


class ProbeActionHTTPPost(ZentralModel):
    url: str = ""
    username: Optional[str] = None
    password: Optional[str] = None
    headers: list[HTTPHeader] = Field(default_factory=list)


class ProbeActionSlackIncomingWebhook(ZentralModel):
    url: str = ""


class ProbeActionBackendMixin(BackendKwargsModel):
    backend_kwargs: ClassVar[dict[str, str]] = {
        "HTTP_POST": "http_post_kwargs",
        "SLACK_INCOMING_WEBHOOK": "slack_incoming_webhook_kwargs",
    }

    http_post_kwargs: Optional[ProbeActionHTTPPost] = None
    slack_incoming_webhook_kwargs: Optional[ProbeActionSlackIncomingWebhook] = None


class ProbeAction(ProbeActionBackendMixin, TimestampedModel):
    id: str = ""
    name: str = ""
    description: str = ""
    backend: str = ""


class ProbeActionRequest(ProbeActionBackendMixin):
    name: str
    description: str = ""
    backend: str
