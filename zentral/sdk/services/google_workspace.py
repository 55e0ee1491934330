"""Google Workspace services."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..models.google_workspace import GWSConnection, GWSGroupTagMapping
from ..query import QueryOptions
from .base import CRUDService, NamedReadOnlyService, check_str_argument


class GWSGroupTagMappingFilter(QueryOptions):
    group_email: Optional[str] = Field(default=None)
    connection_id: Optional[str] = Field(default=None)


class GWSConnectionsService(NamedReadOnlyService):
    base_path = "google_workspace/connections/"
    model = GWSConnection
    id_argument = "connection_id"
    id_type = str


class GWSGroupTagMappingsService(CRUDService):
    base_path = "google_workspace/group_tag_mappings/"
    model = GWSGroupTagMapping
    id_argument = "mapping_id"
    id_type = str

    async def get_by_connection_id(self, connection_id: str) -> list[GWSGroupTagMapping]:
        """List the group tag mappings of a connection."""
        check_str_argument("connection_id", connection_id)
        return await self._list(filters=GWSGroupTagMappingFilter(connection_id=connection_id))

    async def get_by_group_email(self, group_email: str) -> list[GWSGroupTagMapping]:
        """List the tag mappings of a group."""
        check_str_argument("group_email", group_email)
        return await self._list(filters=GWSGroupTagMappingFilter(group_email=group_email))
