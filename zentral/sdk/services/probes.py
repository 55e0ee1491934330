"""Probe services."""

from __future__ import annotations

from ..models.probes import Probe, ProbeAction
from .base import NamedCRUDService


class ProbesService(NamedCRUDService):
    base_path = "probes/probes/"
    model = Probe
    id_argument = "probe_id"


class ProbeActionsService(NamedCRUDService):
    base_path = "probes/actions/"
    model = ProbeAction
    id_argument = "action_id"
    id_type = str
