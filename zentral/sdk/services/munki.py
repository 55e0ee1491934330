"""Munki services."""

from __future__ import annotations

from ..models.munki import MunkiConfiguration, MunkiEnrollment, MunkiScriptCheck
from .base import ConfigurationFilter, CRUDService, NamedCRUDService, check_int_argument


class MunkiConfigurationsService(NamedCRUDService):
    base_path = "munki/configurations/"
    model = MunkiConfiguration
    id_argument = "configuration_id"


class MunkiEnrollmentsService(CRUDService):
    base_path = "munki/enrollments/"
    model = MunkiEnrollment
    id_argument = "enrollment_id"

    async def get_by_configuration_id(self, configuration_id: int) -> list[MunkiEnrollment]:
        """List the enrollments of a configuration."""
        check_int_argument("configuration_id", configuration_id)
        return await self._list(filters=ConfigurationFilter(configuration_id=configuration_id))


class MunkiScriptChecksService(NamedCRUDService):
    base_path = "munki/script_checks/"
    model = MunkiScriptCheck
    id_argument = "script_check_id"
