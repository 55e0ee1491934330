"""Osquery services."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..models.osquery import (
    OsqueryATC,
    OsqueryConfiguration,
    OsqueryConfigurationPack,
    OsqueryEnrollment,
    OsqueryFileCategory,
    OsqueryPack,
    OsqueryPackQuery,
    OsqueryQuery,
)
from ..query import QueryOptions
from .base import ConfigurationFilter, CRUDService, NamedCRUDService, check_int_argument


class ConfigurationPackFilter(QueryOptions):
    configuration_id: Optional[int] = Field(default=None)
    pack_id: Optional[int] = Field(default=None)


class PackFilter(QueryOptions):
    pack_id: Optional[int] = Field(default=None)


class OsqueryATCsService(NamedCRUDService):
    base_path = "osquery/atcs/"
    model = OsqueryATC
    id_argument = "atc_id"


class OsqueryConfigurationsService(NamedCRUDService):
    base_path = "osquery/configurations/"
    model = OsqueryConfiguration
    id_argument = "configuration_id"


class OsqueryConfigurationPacksService(CRUDService):
    base_path = "osquery/configuration_packs/"
    model = OsqueryConfigurationPack
    id_argument = "configuration_pack_id"

    async def get_by_configuration_id(
        self, configuration_id: int
    ) -> list[OsqueryConfigurationPack]:
        """List the packs of a configuration."""
        check_int_argument("configuration_id", configuration_id)
        return await self._list(
            filters=ConfigurationPackFilter(configuration_id=configuration_id)
        )

    async def get_by_pack_id(self, pack_id: int) -> list[OsqueryConfigurationPack]:
        """List the configurations including a pack."""
        check_int_argument("pack_id", pack_id)
        return await self._list(filters=ConfigurationPackFilter(pack_id=pack_id))


class OsqueryEnrollmentsService(CRUDService):
    base_path = "osquery/enrollments/"
    model = OsqueryEnrollment
    id_argument = "enrollment_id"

    async def get_by_configuration_id(self, configuration_id: int) -> list[OsqueryEnrollment]:
        """List the enrollments of a configuration."""
        check_int_argument("configuration_id", configuration_id)
        return await self._list(filters=ConfigurationFilter(configuration_id=configuration_id))


class OsqueryFileCategoriesService(NamedCRUDService):
    base_path = "osquery/file_categories/"
    model = OsqueryFileCategory
    id_argument = "file_category_id"


class OsqueryPacksService(NamedCRUDService):
    base_path = "osquery/packs/"
    model = OsqueryPack
    id_argument = "pack_id"


class OsqueryPackQueriesService(CRUDService):
    base_path = "osquery/pack_queries/"
    model = OsqueryPackQuery
    id_argument = "pack_query_id"

    async def get_by_pack_id(self, pack_id: int) -> list[OsqueryPackQuery]:
        """List the queries of a pack."""
        check_int_argument("pack_id", pack_id)
        return await self._list(filters=PackFilter(pack_id=pack_id))


class OsqueryQueriesService(NamedCRUDService):
    base_path = "osquery/queries/"
    model = OsqueryQuery
    id_argument = "query_id"
