"""Osquery payloads."""

from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import Field

from .base import OMIT_EMPTY, ZentralModel
from .common import EnrollmentSecret, EnrollmentSecretRequest, TimestampedModel


class OsqueryATC(TimestampedModel):
    """Automatic table construction."""

    id: int = 0
    name: str = ""
    description: str = ""
    table_name: str = ""
    query: str = ""
    path: str = ""
    columns: list[str] = Field(default_factory=list)
    platforms: list[str] = Field(default_factory=list)


class OsqueryATCRequest(ZentralModel):
    name: str
    description: str = ""
    table_name: str
    query: str
    path: str
    columns: list[str] = Field(default_factory=list)
    platforms: list[str] = Field(default_factory=list)


class OsqueryConfiguration(TimestampedModel):
    id: int = 0
    name: str = ""
    description: str = ""
    inventory: bool = False
    inventory_apps: bool = False
    inventory_ec2: bool = False
    inventory_interval: int = 0
    options: dict[str, Any] = Field(default_factory=dict)
    automatic_table_constructions: list[int] = Field(default_factory=list)
    file_categories: list[int] = Field(default_factory=list)


class OsqueryConfigurationRequest(ZentralModel):
    name: str
    description: str = ""
    inventory: bool = False
    inventory_apps: bool = False
    inventory_ec2: bool = False
    inventory_interval: int = 0
    options: dict[str, Any] = Field(default_factory=dict)
    automatic_table_constructions: list[int] = Field(default_factory=list)
    file_categories: list[int] = Field(default_factory=list)


class OsqueryConfigurationPack(ZentralModel):
    id: int = 0
    configuration: int = 0
    pack: int = 0
    tags: list[int] = Field(default_factory=list)


class OsqueryConfigurationPackRequest(ZentralModel):
    configuration: int
    pack: int
    tags: list[int] = Field(default_factory=list)


class OsqueryEnrollment(TimestampedModel):
    id: int = 0
    configuration: int = 0
    osquery_release: str = ""
    enrolled_machines_count: int = 0
    secret: EnrollmentSecret = Field(default_factory=EnrollmentSecret)
    package_download_url: str = ""
    script_download_url: str = ""
    powershell_script_download_url: str = ""
    version: int = 0


class OsqueryEnrollmentRequest(ZentralModel):
    configuration: int
    osquery_release: str = ""
    secret: EnrollmentSecretRequest


class OsqueryFileCategory(TimestampedModel):
    id: int = 0
    name: str = ""
    slug: str = ""
    description: str = ""
    file_paths: list[str] = Field(default_factory=list)
    exclude_paths: list[str] = Field(default_factory=list)
    file_paths_queries: list[str] = Field(default_factory=list)
    access_monitoring: bool = False


class OsqueryFileCategoryRequest(ZentralModel):
    name: str
    description: str = ""
    file_paths: list[str] = Field(default_factory=list)
    exclude_paths: list[str] = Field(default_factory=list)
    file_paths_queries: list[str] = Field(default_factory=list)
    access_monitoring: bool = False


class OsqueryPack(TimestampedModel):
    id: int = 0
    name: str = ""
    slug: str = ""
    description: str = ""
    discovery_queries: list[str] = Field(default_factory=list)
    shard: Annotated[Optional[int], OMIT_EMPTY] = None
    event_routing_key: str = ""


class OsqueryPackRequest(ZentralModel):
    name: str
    description: str = ""
    discovery_queries: list[str] = Field(default_factory=list)
    shard: Annotated[Optional[int], OMIT_EMPTY] = None
    event_routing_key: str = ""


class OsqueryPackQuery(TimestampedModel):
    id: int = 0
    pack: int = 0
    query: int = 0
    slug: str = ""
    interval: int = 0
    log_removed_actions: bool = False
    snapshot_mode: bool = False
    shard: Optional[int] = None
    can_be_denylisted: bool = False


class OsqueryPackQueryRequest(ZentralModel):
    pack: int
    query: int
    interval: int
    log_removed_actions: bool = False
    snapshot_mode: bool = False
    shard: Optional[int] = None
    can_be_denylisted: bool = False


class OsqueryQueryScheduling(ZentralModel):
    """Schedule of a query in a pack, managed together with the query."""

    pack: int = 0
    interval: int = 0
    log_removed_actions: bool = False
    snapshot_mode: bool = False
    shard: Optional[int] = None
    can_be_denylisted: bool = False


class OsqueryQuery(TimestampedModel):
    id: int = 0
    name: str = ""
    sql: str = ""
    platforms: list[str] = Field(default_factory=list)
    minimum_osquery_version: Optional[str] = None
    description: str = ""
    value: str = ""
    version: int = 0
    compliance_check_enabled: bool = False
    tag: Optional[int] = None
    scheduling: Optional[OsqueryQueryScheduling] = None


class OsqueryQueryRequest(ZentralModel):
    name: str
    sql: str
    platforms: list[str] = Field(default_factory=list)
    minimum_osquery_version: Optional[str] = None
    description: str = ""
    value: str = ""
    compliance_check_enabled: bool = False
    scheduling: Optional[OsqueryQueryScheduling] = None
