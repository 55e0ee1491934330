"""Inventory services."""

from __future__ import annotations

from ..models.inventory import JMESPathCheck, MetaBusinessUnit, Tag, Taxonomy
from .base import NamedCRUDService


class MetaBusinessUnitsService(NamedCRUDService):
    base_path = "inventory/meta_business_units/"
    model = MetaBusinessUnit
    id_argument = "meta_business_unit_id"


class TagsService(NamedCRUDService):
    base_path = "inventory/tags/"
    model = Tag
    id_argument = "tag_id"


class TaxonomiesService(NamedCRUDService):
    base_path = "inventory/taxonomies/"
    model = Taxonomy
    id_argument = "taxonomy_id"


class JMESPathChecksService(NamedCRUDService):
    base_path = "inventory/jmespath_checks/"
    model = JMESPathCheck
    id_argument = "jmespath_check_id"
