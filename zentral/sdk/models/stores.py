"""Event store payloads."""

from __future__ import annotations

from typing import Annotated, ClassVar, Optional

from pydantic import Field

from .base import OMIT_EMPTY, BackendKwargsModel, ZentralModel
from .common import EventFilterSet, HTTPHeader, TimestampedModel


class StoreHTTP(ZentralModel):
    endpoint_url: str = ""
    verify_tls: bool = False
    username: Optional[str] = None
    password: Optional[str] = None
    headers: list[HTTPHeader] = Field(default_factory=list)
    concurrency: int = 0
    request_timeout: int = 0
    max_retries: int = 0


class StoreKinesis(ZentralModel):
    stream: str = ""
    region_name: str = ""
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    assume_role_arn: Optional[str] = None
    batch_size: int = 0
    serialization_format: str = ""


class StorePanther(ZentralModel):
    endpoint_url: str = ""
    bearer_token: str = ""
    batch_size: int = 0


class StoreSplunk(ZentralModel):
    # HEC
    hec_url: str = ""
    hec_token: str = ""
    hec_extra_headers: list[HTTPHeader] = Field(default_factory=list)
    hec_request_timeout: int = 0
    hec_index: Optional[str] = None
    hec_source: Optional[str] = None
    computer_name_as_host_sources: list[str] = Field(default_factory=list)
    custom_host_field: Optional[str] = None
    serial_number_field: str = ""
    batch_size: int = 0
    # Event URLs
    search_app_url: Optional[str] = None
    # Event search
    search_url: Optional[str] = None
    search_token: Optional[str] = None
    search_extra_headers: list[HTTPHeader] = Field(default_factory=list)
    search_request_timeout: int = 0
    search_index: Optional[str] = None
    search_source: Optional[str] = None
    # Common
    verify_tls: bool = False


class StoreBackendMixin(BackendKwargsModel):
    backend_kwargs: ClassVar[dict[str, str]] = {
        "HTTP": "http_kwargs",
        "KINESIS": "kinesis_kwargs",
        "PANTHER": "panther_kwargs",
        "SPLUNK": "splunk_kwargs",
    }

    http_kwargs: Optional[StoreHTTP] = None
    kinesis_kwargs: Optional[StoreKinesis] = None
    panther_kwargs: Optional[StorePanther] = None
    splunk_kwargs: Optional[StoreSplunk] = None


class Store(StoreBackendMixin, TimestampedModel):
    id: str = ""
    provisioning_uid: Optional[str] = None
    name: str = ""
    description: str = ""
    admin_console: bool = False
    events_url_authorized_roles: list[int] = Field(default_factory=list)
    event_filters: Optional[EventFilterSet] = None
    backend: str = ""


class StoreRequest(StoreBackendMixin):
    name: str
    description: str = ""
    admin_console: bool = False
    events_url_authorized_roles: list[int] = Field(default_factory=list)
    event_filters: Annotated[Optional[EventFilterSet], OMIT_EMPTY] = None
    backend: str
