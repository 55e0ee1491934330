"""Santa payloads."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import ZentralModel
from .common import EnrollmentSecret, EnrollmentSecretRequest, TimestampedModel


class SantaConfiguration(TimestampedModel):
    id: int = 0
    name: str = ""
    client_mode: int = 0
    client_certificate_auth: bool = False
    batch_size: int = 0
    full_sync_interval: int = 0
    enable_bundles: bool = False
    enable_transitive_rules: bool = False
    allowed_path_regex: str = ""
    blocked_path_regex: str = ""
    block_usb_mount: bool = False
    remount_usb_mode: list[str] = Field(default_factory=list)
    allow_unknown_shard: int = 0
    enable_all_event_upload_shard: int = 0
    sync_incident_severity: int = 0


class SantaConfigurationRequest(ZentralModel):
    name: str
    client_mode: int = 0
    client_certificate_auth: bool = False
    batch_size: int = 0
    full_sync_interval: int = 0
    enable_bundles: bool = False
    enable_transitive_rules: bool = False
    allowed_path_regex: str = ""
    blocked_path_regex: str = ""
    block_usb_mount: bool = False
    remount_usb_mode: list[str] = Field(default_factory=list)
    allow_unknown_shard: int = 0
    enable_all_event_upload_shard: int = 0
    sync_incident_severity: int = 0


class SantaEnrollment(TimestampedModel):
    id: int = 0
    configuration: int = 0
    enrolled_machines_count: int = 0
    secret: EnrollmentSecret = Field(default_factory=EnrollmentSecret)
    configuration_profile_download_url: str = ""
    plist_download_url: str = ""
    version: int = 0


class SantaEnrollmentRequest(ZentralModel):
    configuration: int
    secret: EnrollmentSecretRequest


class SantaRule(TimestampedModel):
    id: int = 0
    configuration: int = 0
    policy: int = 0
    cel_expr: str = ""
    target_type: str = ""
    target_identifier: str = ""
    description: str = ""
    custom_msg: str = ""
    ruleset: Optional[int] = None
    primary_users: list[str] = Field(default_factory=list)
    excluded_primary_users: list[str] = Field(default_factory=list)
    serial_numbers: list[str] = Field(default_factory=list)
    excluded_serial_numbers: list[str] = Field(default_factory=list)
    tags: list[int] = Field(default_factory=list)
    excluded_tags: list[int] = Field(default_factory=list)
    version: int = 0


class SantaRuleRequest(ZentralModel):
    configuration: int
    policy: int
    cel_expr: str = ""
    target_type: str
    target_identifier: str
    description: str = ""
    custom_msg: str = ""
    primary_users: list[str] = Field(default_factory=list)
    excluded_primary_users: list[str] = Field(default_factory=list)
    serial_numbers: list[str] = Field(default_factory=list)
    excluded_serial_numbers: list[str] = Field(default_factory=list)
    tags: list[int] = Field(default_factory=list)
    excluded_tags: list[int] = Field(default_factory=list)
