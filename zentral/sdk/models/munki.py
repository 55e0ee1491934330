"""Munki payloads."""

from __future__ import annotations

from pydantic import Field

from .base import ZentralModel
from .common import EnrollmentSecret, EnrollmentSecretRequest, TimestampedModel


class MunkiConfiguration(TimestampedModel):
    id: int = 0
    name: str = ""
    description: str = ""
    inventory_apps_full_info_shard: int = 0
    principal_user_detection_sources: list[str] = Field(default_factory=list)
    principal_user_detection_domains: list[str] = Field(default_factory=list)
    collected_condition_keys: list[str] = Field(default_factory=list)
    managed_installs_sync_interval_days: int = 0
    script_checks_run_interval_seconds: int = 0
    auto_reinstall_incidents: bool = False
    auto_failed_install_incidents: bool = False
    version: int = 0


class MunkiConfigurationRequest(ZentralModel):
    name: str
    description: str = ""
    inventory_apps_full_info_shard: int = 0
    principal_user_detection_sources: list[str] = Field(default_factory=list)
    principal_user_detection_domains: list[str] = Field(default_factory=list)
    collected_condition_keys: list[str] = Field(default_factory=list)
    managed_installs_sync_interval_days: int = 0
    script_checks_run_interval_seconds: int = 0
    auto_reinstall_incidents: bool = False
    auto_failed_install_incidents: bool = False


class MunkiEnrollment(TimestampedModel):
    id: int = 0
    configuration: int = 0
    enrolled_machines_count: int = 0
    secret: EnrollmentSecret = Field(default_factory=EnrollmentSecret)
    package_download_url: str = ""
    version: int = 0


class MunkiEnrollmentRequest(ZentralModel):
    configuration: int
    secret: EnrollmentSecretRequest


class MunkiScriptCheck(TimestampedModel):
    id: int = 0
    name: str = ""
    description: str = ""
    type: str = ""
    source: str = ""
    expected_result: str = ""
    arch_amd64: bool = False
    arch_arm64: bool = False
    min_os_version: str = ""
    max_os_version: str = ""
    tags: list[int] = Field(default_factory=list)
    excluded_tags: list[int] = Field(default_factory=list)
    version: int = 0


class MunkiScriptCheckRequest(ZentralModel):
    name: str
    description: str = ""
    type: str
    source: str
    expected_result: str = ""
    arch_amd64: bool = False
    arch_arm64: bool = False
    min_os_version: str = ""
    max_os_version: str = ""
    tags: list[int] = Field(default_factory=list)
    excluded_tags: list[int] = Field(default_factory=list)
