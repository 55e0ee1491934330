"""Event store services."""

from __future__ import annotations

from ..models.stores import Store
from .base import NamedCRUDService


class StoresService(NamedCRUDService):
    base_path = "stores/stores/"
    model = Store
    id_argument = "store_id"
    id_type = str
