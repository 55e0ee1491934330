"""Shared implementation of the Zentral resource services.

Every resource is exposed as a collection path, e.g. ``inventory/tags/``,
with one path per instance below it, e.g. ``inventory/tags/1/``. A service
class only declares its paths and payload types and picks the operations it
supports among the mixins below.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar, Optional

from pydantic import Field

from ..exceptions import ArgumentError
from ..models.base import ZentralModel
from ..query import ListOptions, QueryOptions, add_options

if TYPE_CHECKING:
    from ..client import Response, ZentralClient

logger = logging.getLogger(__name__)


class NameFilter(QueryOptions):
    name: Optional[str] = Field(default=None)


class ConfigurationFilter(QueryOptions):
    configuration_id: Optional[int] = Field(default=None)


def check_int_argument(argument: str, value: Any) -> None:
    """Raise ArgumentError unless ``value`` is an integer >= 1."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ArgumentError(argument, "must be an integer")
    if value < 1:
        raise ArgumentError(argument, "cannot be less than 1")


def check_str_argument(argument: str, value: Any) -> None:
    """Raise ArgumentError unless ``value`` is a non-blank string."""
    if not isinstance(value, str):
        raise ArgumentError(argument, "must be a string")
    if not value.strip():
        raise ArgumentError(argument, "cannot be blank")


def check_request_argument(argument: str, value: Any) -> None:
    if value is None:
        raise ArgumentError(argument, "cannot be None")


class ResourceService:
    """Base class of the resource services.

    Attributes
    ----------
    base_path : str
        Collection path, relative to the API base URL, with a trailing slash
    model : type
        Payload type returned by the API
    id_argument : str
        Name of the identifier in argument errors
    id_type : type
        ``int`` or ``str``, the type of the resource identifiers
    """

    base_path: ClassVar[str]
    model: ClassVar[type[ZentralModel]]
    id_argument: ClassVar[str] = "id"
    id_type: ClassVar[type] = int

    def __init__(self, client: ZentralClient):
        self._client = client

    def _check_id(self, value: Any) -> None:
        if self.id_type is int:
            check_int_argument(self.id_argument, value)
        else:
            check_str_argument(self.id_argument, value)

    def _item_path(self, value: Any) -> str:
        self._check_id(value)
        return f"{self.base_path}{value}/"

    async def _list(
        self,
        options: Optional[ListOptions] = None,
        filters: Optional[QueryOptions] = None,
    ) -> list[Any]:
        path = add_options(self.base_path, options, filters)
        request = self._client.new_request("GET", path)
        response = await self._client.do(request, list[self.model])
        return response.data

    async def _first(self, filters: QueryOptions) -> Optional[Any]:
        """Return the first item matching the filters, or None if nothing matches."""
        items = await self._list(filters=filters)
        if not items:
            logger.debug("No %s found for %s", self.model.__name__, filters.query_params())
            return None
        return items[0]

    async def _send(self, method: str, path: str, body: Any = None) -> Any:
        request = self._client.new_request(method, path, body)
        response = await self._client.do(request, self.model)
        return response.data


class ListMixin:
    async def list(self, options: Optional[ListOptions] = None) -> list[Any]:
        """List the resources.

        Parameters
        ----------
        options : ListOptions, optional
            Pagination options

        Returns
        -------
        list
            The resources, possibly empty
        """
        return await self._list(options)


class GetByIDMixin:
    async def get_by_id(self, id: Any) -> Any:
        """Retrieve a resource by its identifier.

        Raises
        ------
        ArgumentError
            If the identifier is not valid. No request is made.
        HTTPError
            If the resource does not exist, or the request fails
        """
        return await self._send("GET", self._item_path(id))


class GetByNameMixin:
    name_filter: ClassVar[type[QueryOptions]] = NameFilter

    async def get_by_name(self, name: str) -> Optional[Any]:
        """Retrieve a resource by name.

        Returns
        -------
        The first resource with this name, or None if there is none
        """
        check_str_argument("name", name)
        return await self._first(self.name_filter(name=name))


class CreateMixin:
    async def create(self, request: ZentralModel) -> Any:
        """Create a resource and return it."""
        check_request_argument("request", request)
        return await self._send("POST", self.base_path, request)


class UpdateMixin:
    async def update(self, id: Any, request: ZentralModel) -> Any:
        """Update a resource and return it."""
        path = self._item_path(id)
        check_request_argument("request", request)
        return await self._send("PUT", path, request)


class DeleteMixin:
    async def delete(self, id: Any) -> Response:
        """Delete a resource.

        Returns
        -------
        Response
            The API response, usually with a 204 status code and no body
        """
        request = self._client.new_request("DELETE", self._item_path(id))
        return await self._client.do(request)


class ReadOnlyService(ListMixin, GetByIDMixin, ResourceService):
    pass


class NamedReadOnlyService(GetByNameMixin, ReadOnlyService):
    pass


class CRUDService(
    ListMixin, GetByIDMixin, CreateMixin, UpdateMixin, DeleteMixin, ResourceService
):
    pass


class NamedCRUDService(GetByNameMixin, CRUDService):
    pass
