"""Monolith services."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..models.monolith import (
    MonolithCatalog,
    MonolithCondition,
    MonolithEnrollment,
    MonolithManifest,
    MonolithManifestCatalog,
    MonolithManifestEnrollmentPackage,
    MonolithManifestSubManifest,
    MonolithRepository,
    MonolithSubManifest,
    MonolithSubManifestPkgInfo,
)
from ..query import QueryOptions
from .base import CRUDService, NamedCRUDService, check_int_argument


class ManifestFilter(QueryOptions):
    manifest_id: Optional[int] = Field(default=None)


class ManifestCatalogFilter(QueryOptions):
    catalog_id: Optional[int] = Field(default=None)
    manifest_id: Optional[int] = Field(default=None)


class ManifestSubManifestFilter(QueryOptions):
    sub_manifest_id: Optional[int] = Field(default=None)
    manifest_id: Optional[int] = Field(default=None)


class SubManifestFilter(QueryOptions):
    sub_manifest_id: Optional[int] = Field(default=None)


class MonolithCatalogsService(NamedCRUDService):
    base_path = "monolith/catalogs/"
    model = MonolithCatalog
    id_argument = "catalog_id"


class MonolithConditionsService(NamedCRUDService):
    base_path = "monolith/conditions/"
    model = MonolithCondition
    id_argument = "condition_id"


class MonolithEnrollmentsService(CRUDService):
    base_path = "monolith/enrollments/"
    model = MonolithEnrollment
    id_argument = "enrollment_id"

    async def get_by_manifest_id(self, manifest_id: int) -> list[MonolithEnrollment]:
        """List the enrollments of a manifest."""
        check_int_argument("manifest_id", manifest_id)
        return await self._list(filters=ManifestFilter(manifest_id=manifest_id))


class MonolithManifestsService(NamedCRUDService):
    base_path = "monolith/manifests/"
    model = MonolithManifest
    id_argument = "manifest_id"


class MonolithManifestCatalogsService(CRUDService):
    base_path = "monolith/manifest_catalogs/"
    model = MonolithManifestCatalog
    id_argument = "manifest_catalog_id"

    async def get_by_catalog_id(self, catalog_id: int) -> list[MonolithManifestCatalog]:
        """List the manifest catalogs of a catalog."""
        check_int_argument("catalog_id", catalog_id)
        return await self._list(filters=ManifestCatalogFilter(catalog_id=catalog_id))

    async def get_by_manifest_id(self, manifest_id: int) -> list[MonolithManifestCatalog]:
        """List the catalogs of a manifest."""
        check_int_argument("manifest_id", manifest_id)
        return await self._list(filters=ManifestCatalogFilter(manifest_id=manifest_id))


class MonolithManifestEnrollmentPackagesService(CRUDService):
    base_path = "monolith/manifest_enrollment_packages/"
    model = MonolithManifestEnrollmentPackage
    id_argument = "manifest_enrollment_package_id"

    async def get_by_manifest_id(
        self, manifest_id: int
    ) -> list[MonolithManifestEnrollmentPackage]:
        """List the enrollment packages of a manifest."""
        check_int_argument("manifest_id", manifest_id)
        return await self._list(filters=ManifestFilter(manifest_id=manifest_id))


class MonolithManifestSubManifestsService(CRUDService):
    base_path = "monolith/manifest_sub_manifests/"
    model = MonolithManifestSubManifest
    id_argument = "manifest_sub_manifest_id"

    async def get_by_sub_manifest_id(
        self, sub_manifest_id: int
    ) -> list[MonolithManifestSubManifest]:
        """List the manifests including a sub manifest."""
        check_int_argument("sub_manifest_id", sub_manifest_id)
        return await self._list(
            filters=ManifestSubManifestFilter(sub_manifest_id=sub_manifest_id)
        )

    async def get_by_manifest_id(self, manifest_id: int) -> list[MonolithManifestSubManifest]:
        """List the sub manifests of a manifest."""
        check_int_argument("manifest_id", manifest_id)
        return await self._list(filters=ManifestSubManifestFilter(manifest_id=manifest_id))


class MonolithRepositoriesService(NamedCRUDService):
    base_path = "monolith/repositories/"
    model = MonolithRepository
    id_argument = "repository_id"


class MonolithSubManifestsService(NamedCRUDService):
    base_path = "monolith/sub_manifests/"
    model = MonolithSubManifest
    id_argument = "sub_manifest_id"


class MonolithSubManifestPkgInfosService(CRUDService):
    base_path = "monolith/sub_manifest_pkg_infos/"
    model = MonolithSubManifestPkgInfo
    id_argument = "sub_manifest_pkg_info_id"

    async def get_by_sub_manifest_id(
        self, sub_manifest_id: int
    ) -> list[MonolithSubManifestPkgInfo]:
        """List the pkg infos of a sub manifest."""
        check_int_argument("sub_manifest_id", sub_manifest_id)
        return await self._list(filters=SubManifestFilter(sub_manifest_id=sub_manifest_id))
