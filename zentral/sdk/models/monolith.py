"""Monolith (Munki repository proxy) payloads."""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field

from ..timestamp import Timestamp
from .base import BackendKwargsModel, ZentralModel
from .common import EnrollmentSecret, EnrollmentSecretRequest, TagShard, TimestampedModel


class MonolithCatalog(TimestampedModel):
    id: int = 0
    repository: int = 0
    name: str = ""
    archived_at: Optional[Timestamp] = None


class MonolithCatalogRequest(ZentralModel):
    repository: int
    name: str


class MonolithCondition(TimestampedModel):
    id: int = 0
    name: str = ""
    predicate: str = ""


class MonolithConditionRequest(ZentralModel):
    name: str
    predicate: str


class MonolithEnrollment(TimestampedModel):
    id: int = 0
    manifest: int = 0
    enrolled_machines_count: int = 0
    secret: EnrollmentSecret = Field(default_factory=EnrollmentSecret)
    version: int = 0
    configuration_profile_download_url: str = ""
    plist_download_url: str = ""


class MonolithEnrollmentRequest(ZentralModel):
    manifest: int
    secret: EnrollmentSecretRequest


class MonolithManifest(TimestampedModel):
    id: int = 0
    name: str = ""
    meta_business_unit: int = 0
    version: int = 0


class MonolithManifestRequest(ZentralModel):
    name: str
    meta_business_unit: int


class MonolithManifestCatalog(ZentralModel):
    id: int = 0
    manifest: int = 0
    catalog: int = 0
    tags: list[int] = Field(default_factory=list)


class MonolithManifestCatalogRequest(ZentralModel):
    manifest: int
    catalog: int
    tags: list[int] = Field(default_factory=list)


class MonolithManifestEnrollmentPackage(TimestampedModel):
    id: int = 0
    manifest: int = 0
    builder: str = ""
    enrollment_pk: int = 0
    version: int = 0
    tags: list[int] = Field(default_factory=list)


class MonolithManifestEnrollmentPackageRequest(ZentralModel):
    manifest: int
    builder: str
    enrollment_pk: int
    tags: list[int] = Field(default_factory=list)


class MonolithManifestSubManifest(ZentralModel):
    id: int = 0
    manifest: int = 0
    sub_manifest: int = 0
    tags: list[int] = Field(default_factory=list)


class MonolithManifestSubManifestRequest(ZentralModel):
    manifest: int
    sub_manifest: int
    tags: list[int] = Field(default_factory=list)


class MonolithS3Backend(ZentralModel):
    bucket: str = ""
    region_name: str = ""
    prefix: str = ""
    access_key_id: str = ""
    secret_access_key: str = ""
    assume_role_arn: str = ""
    signature_version: str = ""
    endpoint_url: str = ""
    cloudfront_domain: str = ""
    cloudfront_key_id: str = ""
    cloudfront_privkey_pem: str = ""


class MonolithAzureBackend(ZentralModel):
    storage_account: str = ""
    container: str = ""
    prefix: str = ""
    client_id: str = ""
    tenant_id: str = ""
    client_secret: str = ""


class MonolithRepositoryBackendMixin(BackendKwargsModel):
    """Repository storage backend. The ``VIRTUAL`` backend has no configuration."""

    backend_kwargs: ClassVar[dict[str, str]] = {
        "AZURE": "azure_kwargs",
        "S3": "s3_kwargs",
    }

    azure_kwargs: Optional[MonolithAzureBackend] = None
    s3_kwargs: Optional[MonolithS3Backend] = None


class MonolithRepository(MonolithRepositoryBackendMixin, TimestampedModel):
    id: int = 0
    name: str = ""
    meta_business_unit: Optional[int] = None
    backend: str = ""


class MonolithRepositoryRequest(MonolithRepositoryBackendMixin):
    name: str
    meta_business_unit: Optional[int] = None
    backend: str


class MonolithSubManifest(TimestampedModel):
    id: int = 0
    name: str = ""
    description: str = ""
    meta_business_unit: Optional[int] = None


class MonolithSubManifestRequest(ZentralModel):
    name: str
    description: str = ""
    meta_business_unit: Optional[int] = None


class MonolithSubManifestPkgInfo(TimestampedModel):
    id: int = 0
    sub_manifest: int = 0
    key: str = ""
    pkg_info_name: str = ""
    featured_item: bool = False
    condition: Optional[int] = None
    shard_modulo: int = 0
    default_shard: int = 0
    excluded_tags: list[int] = Field(default_factory=list)
    tag_shards: list[TagShard] = Field(default_factory=list)


class MonolithSubManifestPkgInfoRequest(ZentralModel):
    sub_manifest: int
    key: str
    pkg_info_name: str
    featured_item: bool = False
    condition: Optional[int] = None
    shard_modulo: int = 0
    default_shard: int = 0
    excluded_tags: list[int] = Field(default_factory=list)
    tag_shards: list[TagShard] = Field(default_factory=list)
