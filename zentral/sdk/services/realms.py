"""Identity realm services."""

from __future__ import annotations

from ..models.realms import Realm
from .base import GetByNameMixin, ListMixin, ResourceService


class RealmsService(ListMixin, GetByNameMixin, ResourceService):
    base_path = "realms/realms/"
    model = Realm
    id_argument = "realm_uuid"
    id_type = str

    async def get_by_uuid(self, uuid: str) -> Realm:
        """Retrieve a realm by UUID.

        Raises
        ------
        ArgumentError
            If the UUID is blank. No request is made.
        HTTPError
            If the realm does not exist, or the request fails
        """
        return await self._send("GET", self._item_path(uuid))
