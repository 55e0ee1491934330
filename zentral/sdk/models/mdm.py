"""MDM payloads.

Artifacts are versioned. Every artifact version (cert asset, data asset,
declaration, enterprise app, profile and store app) shares the same
targeting block: the artifact it belongs to, the platforms it applies to,
with optional min/max OS versions, and its shard configuration.
Blueprint artifacts use the same block to scope an artifact in a
blueprint.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import Field

from ..timestamp import Timestamp
from .base import BackendKwargsModel, ZentralModel
from .common import EnrollmentSecret, EnrollmentSecretRequest, TagShard, TimestampedModel

# Certificate issuer backends


class Digicert(ZentralModel):
    api_base_url: str = ""
    api_token: str = ""
    profile_guid: str = ""
    business_unit_guid: str = ""
    seat_type: str = ""
    seat_id_mapping: str = ""
    default_seat_email: str = ""


class IDent(ZentralModel):
    url: str = ""
    bearer_token: str = ""
    request_timeout: int = 0
    max_retries: int = 0


class MicrosoftCA(ZentralModel):
    """Microsoft CA or Okta CA dynamic challenge configuration."""

    url: str = ""
    username: str = ""
    password: str = ""


class StaticChallenge(ZentralModel):
    challenge: str = ""


class CertIssuerBackendMixin(BackendKwargsModel):
    """Backend selection shared by the ACME and SCEP certificate issuers.

    The backend configuration is only returned when the issuer is not
    provisioned.
    """

    backend_kwargs: ClassVar[dict[str, str]] = {
        "DIGICERT": "digicert_kwargs",
        "IDENT": "ident_kwargs",
        "MICROSOFT_CA": "microsoft_ca_kwargs",
        "OKTA_CA": "okta_ca_kwargs",
        "STATIC_CHALLENGE": "static_challenge_kwargs",
    }

    digicert_kwargs: Optional[Digicert] = None
    ident_kwargs: Optional[IDent] = None
    microsoft_ca_kwargs: Optional[MicrosoftCA] = None
    okta_ca_kwargs: Optional[MicrosoftCA] = None
    static_challenge_kwargs: Optional[StaticChallenge] = None


class ACMEIssuer(CertIssuerBackendMixin, TimestampedModel):
    id: str = ""
    provisioning_uid: Optional[str] = None
    name: str = ""
    description: str = ""
    directory_url: str = ""
    key_size: int = 0
    key_type: str = ""
    usage_flags: int = 0
    extended_key_usage: list[str] = Field(default_factory=list)
    hardware_bound: bool = False
    attest: bool = False
    backend: Optional[str] = None
    version: int = 0


class ACMEIssuerRequest(CertIssuerBackendMixin):
    name: str
    description: str = ""
    directory_url: str = ""
    key_size: int = 0
    key_type: str = ""
    usage_flags: int = 0
    extended_key_usage: list[str] = Field(default_factory=list)
    hardware_bound: bool = False
    attest: bool = False
    backend: str


class SCEPIssuer(CertIssuerBackendMixin, TimestampedModel):
    id: str = ""
    provisioning_uid: Optional[str] = None
    name: str = ""
    description: str = ""
    url: str = ""
    key_size: int = 0
    key_usage: int = 0
    backend: Optional[str] = None
    version: int = 0


class SCEPIssuerRequest(CertIssuerBackendMixin):
    name: str
    description: str = ""
    url: str = ""
    key_size: int = 0
    key_usage: int = 0
    backend: str


class SCEPConfig(BackendKwargsModel, TimestampedModel):
    """Legacy SCEP configuration. The challenge is only returned when not provisioned."""

    discriminator_field: ClassVar[str] = "challenge_type"
    backend_kwargs: ClassVar[dict[str, str]] = {
        "MICROSOFT_CA": "microsoft_ca_challenge_kwargs",
        "OKTA_CA": "okta_ca_challenge_kwargs",
        "STATIC": "static_challenge_kwargs",
    }

    id: int = 0
    provisioning_uid: Optional[str] = None
    name: str = ""
    url: str = ""
    key_usage: int = 0
    key_is_extractable: bool = False
    key_size: int = 0
    allow_all_apps_access: bool = False
    challenge_type: Optional[str] = None
    microsoft_ca_challenge_kwargs: Optional[MicrosoftCA] = None
    okta_ca_challenge_kwargs: Optional[MicrosoftCA] = None
    static_challenge_kwargs: Optional[StaticChallenge] = None


# Artifacts


class Artifact(TimestampedModel):
    id: str = ""
    name: str = ""
    type: str = ""
    channel: str = ""
    platforms: list[str] = Field(default_factory=list)
    install_during_setup_assistant: bool = False
    auto_update: bool = False
    reinstall_interval: int = 0
    reinstall_on_os_update: str = ""
    requires: list[str] = Field(default_factory=list)


class ArtifactRequest(ZentralModel):
    name: str
    type: str
    channel: str
    platforms: list[str] = Field(default_factory=list)
    install_during_setup_assistant: bool = False
    auto_update: bool = False
    reinstall_interval: int = 0
    reinstall_on_os_update: str = ""
    requires: list[str] = Field(default_factory=list)


class ArtifactScope(ZentralModel):
    artifact: str = ""
    ios: bool = False
    ios_max_version: str = ""
    ios_min_version: str = ""
    ipados: bool = False
    ipados_max_version: str = ""
    ipados_min_version: str = ""
    macos: bool = False
    macos_max_version: str = ""
    macos_min_version: str = ""
    tvos: bool = False
    tvos_max_version: str = ""
    tvos_min_version: str = ""
    default_shard: int = 0
    shard_modulo: int = 0
    excluded_tags: list[int] = Field(default_factory=list)
    tag_shards: list[TagShard] = Field(default_factory=list)


class ArtifactVersion(ArtifactScope, TimestampedModel):
    version: int = 0


class ArtifactVersionRequest(ArtifactScope):
    artifact: str
    version: int = 0


class BlueprintArtifact(ArtifactScope, TimestampedModel):
    id: int = 0
    blueprint: int = 0


class BlueprintArtifactRequest(ArtifactScope):
    blueprint: int
    artifact: str


class CertAssetRDN(ZentralModel):
    type: str = ""
    value: str = ""


class CertAssetSubjectAltName(ZentralModel):
    dns_name: Optional[str] = Field(default=None, alias="dNSName")
    nt_principal_name: Optional[str] = Field(default=None, alias="ntPrincipalName")
    rfc822_name: Optional[str] = Field(default=None, alias="rfc822Name")
    uniform_resource_identifier: Optional[str] = Field(
        default=None, alias="uniformResourceIdentifier"
    )


class CertAsset(ArtifactVersion):
    id: str = ""
    acme_issuer: Optional[str] = None
    scep_issuer: Optional[str] = None
    accessible: str = ""
    subject: list[CertAssetRDN] = Field(default_factory=list)
    subject_alt_name: CertAssetSubjectAltName = Field(default_factory=CertAssetSubjectAltName)


class CertAssetRequest(ArtifactVersionRequest):
    acme_issuer: Optional[str] = None
    scep_issuer: Optional[str] = None
    accessible: str = ""
    subject: list[CertAssetRDN] = Field(default_factory=list)
    subject_alt_name: CertAssetSubjectAltName = Field(default_factory=CertAssetSubjectAltName)


class DataAsset(ArtifactVersion):
    id: str = ""
    type: str = ""
    file_uri: str = ""
    file_sha256: str = ""
    file_size: int = 0
    filename: str = ""


class DataAssetRequest(ArtifactVersionRequest):
    type: str
    file_uri: str
    file_sha256: str = ""


class DeclarationSource(ZentralModel):
    type: str = Field(default="", alias="Type")
    identifier: str = Field(default="", alias="Identifier")
    payload: dict[str, Any] = Field(default_factory=dict, alias="Payload")
    server_token: str = Field(default="", alias="ServerToken")


class Declaration(ArtifactVersion):
    id: str = ""
    source: DeclarationSource = Field(default_factory=DeclarationSource)


class DeclarationRequest(ArtifactVersionRequest):
    source: DeclarationSource


class EnterpriseApp(ArtifactVersion):
    id: str = ""
    filename: str = ""
    product_id: str = ""
    product_version: str = ""
    ios_app: bool = False
    configuration: Optional[str] = None
    install_as_managed: bool = False
    remove_on_unenroll: bool = False


class EnterpriseAppRequest(ArtifactVersionRequest):
    source_uri: str
    source_sha256: str = ""
    ios_app: bool = False
    configuration: Optional[str] = None
    # The API expects this key on writes, and returns install_as_managed
    installed_as_managed: bool = False
    remove_on_unenroll: bool = False


class Profile(ArtifactVersion):
    id: str = ""
    source: str = ""


class ProfileRequest(ArtifactVersionRequest):
    source: str


class StoreApp(ArtifactVersion):
    id: str = ""
    location_asset: int = 0
    associated_domains: list[str] = Field(default_factory=list)
    associated_domains_enable_direct_downloads: bool = False
    configuration: Optional[str] = None
    content_filter_uuid: Optional[str] = None
    dns_proxy_uuid: Optional[str] = None
    vpn_uuid: Optional[str] = None
    prevent_backup: bool = False
    removable: bool = False
    remove_on_unenroll: bool = False


class StoreAppRequest(ArtifactVersionRequest):
    location_asset: int
    associated_domains: list[str] = Field(default_factory=list)
    associated_domains_enable_direct_downloads: bool = False
    configuration: Optional[str] = None
    content_filter_uuid: Optional[str] = None
    dns_proxy_uuid: Optional[str] = None
    vpn_uuid: Optional[str] = None
    prevent_backup: bool = False
    removable: bool = False
    remove_on_unenroll: bool = False


# Blueprints and their configurations


class Blueprint(TimestampedModel):
    id: int = 0
    name: str = ""
    inventory_interval: int = 0
    collect_apps: int = 0
    collect_certificates: int = 0
    collect_profiles: int = 0
    legacy_profiles_via_ddm: bool = False
    default_location: Optional[int] = None
    filevault_config: Optional[int] = None
    recovery_password_config: Optional[int] = None
    software_update_enforcements: list[int] = Field(default_factory=list)


class BlueprintRequest(ZentralModel):
    name: str
    inventory_interval: int = 0
    collect_apps: int = 0
    collect_certificates: int = 0
    collect_profiles: int = 0
    legacy_profiles_via_ddm: bool = False
    default_location: Optional[int] = None
    filevault_config: Optional[int] = None
    recovery_password_config: Optional[int] = None
    software_update_enforcements: list[int] = Field(default_factory=list)


class FileVaultConfig(TimestampedModel):
    id: int = 0
    name: str = ""
    escrow_location_display_name: str = ""
    at_login_only: bool = False
    bypass_attempts: int = 0
    show_recovery_key: bool = False
    destroy_key_on_standby: bool = False
    prk_rotation_interval_days: int = 0


class FileVaultConfigRequest(ZentralModel):
    name: str
    escrow_location_display_name: str = ""
    at_login_only: bool = False
    bypass_attempts: int = 0
    show_recovery_key: bool = False
    destroy_key_on_standby: bool = False
    prk_rotation_interval_days: int = 0


class RecoveryPasswordConfig(TimestampedModel):
    id: int = 0
    name: str = ""
    dynamic_password: bool = False
    static_password: Optional[str] = None
    rotation_interval_days: int = 0
    rotate_firmware_password: bool = False


class RecoveryPasswordConfigRequest(ZentralModel):
    name: str
    dynamic_password: bool = False
    static_password: Optional[str] = None
    rotation_interval_days: int = 0
    rotate_firmware_password: bool = False


class SoftwareUpdateEnforcement(TimestampedModel):
    id: int = 0
    name: str = ""
    details_url: str = ""
    platforms: list[str] = Field(default_factory=list)
    tags: list[int] = Field(default_factory=list)
    os_version: str = ""
    build_version: str = ""
    local_datetime: Optional[str] = None
    max_os_version: str = ""
    delay_days: Optional[int] = None
    local_time: Optional[str] = None


class SoftwareUpdateEnforcementRequest(ZentralModel):
    name: str
    details_url: str = ""
    platforms: list[str] = Field(default_factory=list)
    tags: list[int] = Field(default_factory=list)
    os_version: str = ""
    build_version: str = ""
    local_datetime: Optional[str] = None
    max_os_version: str = ""
    delay_days: Optional[int] = None
    local_time: Optional[str] = None


# Enrollments


class OTAEnrollment(TimestampedModel):
    id: int = 0
    name: str = ""
    display_name: str = ""
    blueprint: Optional[int] = None
    push_certificate: int = 0
    realm: Optional[str] = None
    acme_issuer: Optional[str] = None
    scep_issuer: str = ""
    enrollment_secret: EnrollmentSecret = Field(default_factory=EnrollmentSecret)


class OTAEnrollmentRequest(ZentralModel):
    name: str
    display_name: Optional[str] = None
    blueprint: Optional[int] = None
    push_certificate: int
    realm: Optional[str] = None
    acme_issuer: Optional[str] = None
    scep_issuer: str
    enrollment_secret: EnrollmentSecretRequest


# Apps and Books locations


class Location(TimestampedModel):
    id: int = 0
    organization_name: str = ""
    name: str = ""
    country_code: str = ""
    library_uid: str = ""
    mdm_info_id: str = ""
    platform: str = ""
    website_url: str = ""
    server_token_expiration_date: Optional[Timestamp] = None


class LocationAsset(TimestampedModel):
    id: int = 0
    location: int = 0
    asset: int = 0
    adam_id: str = ""
    pricing_param: str = ""
    assigned_count: int = 0
    available_count: int = 0
    retired_count: int = 0
    total_count: int = 0


class PushCertificate(TimestampedModel):
    id: int = 0
    provisioning_uid: Optional[str] = None
    name: str = ""
    topic: Optional[str] = None
    not_before: Optional[Timestamp] = None
    not_after: Optional[Timestamp] = None
    certificate: Optional[str] = None
