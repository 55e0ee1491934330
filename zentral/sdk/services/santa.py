"""Santa services."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..models.santa import SantaConfiguration, SantaEnrollment, SantaRule
from ..query import QueryOptions
from .base import (
    ConfigurationFilter,
    CRUDService,
    NamedCRUDService,
    check_int_argument,
    check_str_argument,
)


class SantaRuleFilter(QueryOptions):
    configuration_id: Optional[int] = Field(default=None)
    target_type: Optional[str] = Field(default=None)
    target_identifier: Optional[str] = Field(default=None)


class SantaConfigurationsService(NamedCRUDService):
    base_path = "santa/configurations/"
    model = SantaConfiguration
    id_argument = "configuration_id"


class SantaEnrollmentsService(CRUDService):
    base_path = "santa/enrollments/"
    model = SantaEnrollment
    id_argument = "enrollment_id"

    async def get_by_configuration_id(self, configuration_id: int) -> Optional[SantaEnrollment]:
        """Retrieve the first enrollment of a configuration, or None if there is none."""
        check_int_argument("configuration_id", configuration_id)
        return await self._first(ConfigurationFilter(configuration_id=configuration_id))


class SantaRulesService(CRUDService):
    base_path = "santa/rules/"
    model = SantaRule
    id_argument = "rule_id"

    async def get_by_configuration_id(self, configuration_id: int) -> list[SantaRule]:
        """List the rules of a configuration."""
        check_int_argument("configuration_id", configuration_id)
        return await self._list(filters=SantaRuleFilter(configuration_id=configuration_id))

    async def get_by_target_identifier(self, target_identifier: str) -> list[SantaRule]:
        """List the rules for a target identifier, e.g. a binary SHA256."""
        check_str_argument("target_identifier", target_identifier)
        return await self._list(filters=SantaRuleFilter(target_identifier=target_identifier))

    async def get_by_target_type(self, target_type: str) -> list[SantaRule]:
        """List the rules for a target type, e.g. ``BINARY`` or ``TEAMID``."""
        check_str_argument("target_type", target_type)
        return await self._list(filters=SantaRuleFilter(target_type=target_type))
