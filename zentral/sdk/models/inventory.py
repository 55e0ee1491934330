"""Inventory payloads: meta business units, tags, taxonomies and JMESPath checks."""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field

from .base import OMIT_EMPTY, ZentralModel
from .common import TimestampedModel


class MetaBusinessUnit(TimestampedModel):
    id: int = 0
    name: str = ""
    api_enrollment_enabled: bool = False


class MetaBusinessUnitRequest(ZentralModel):
    name: str
    # Once enabled, API enrollments cannot be disabled
    api_enrollment_enabled: bool = False


class Tag(ZentralModel):
    id: int = 0
    taxonomy: Optional[int] = None
    meta_business_unit: Optional[int] = None
    name: str = ""
    slug: str = ""
    color: str = ""


class TagRequest(ZentralModel):
    name: str
    taxonomy: Optional[int] = None
    meta_business_unit: Optional[int] = None
    color: Annotated[str, OMIT_EMPTY] = ""


class Taxonomy(TimestampedModel):
    id: int = 0
    meta_business_unit: Optional[int] = None
    name: str = ""


class TaxonomyRequest(ZentralModel):
    name: str
    meta_business_unit: Optional[int] = None


class JMESPathCheck(TimestampedModel):
    id: int = 0
    name: str = ""
    description: str = ""
    source_name: str = ""
    platforms: list[str] = Field(default_factory=list)
    tags: list[int] = Field(default_factory=list)
    jmespath_expression: str = ""
    version: int = 0


class JMESPathCheckRequest(ZentralModel):
    name: str
    description: str = ""
    source_name: str = ""
    platforms: list[str] = Field(default_factory=list)
    tags: list[int] = Field(default_factory=list)
    jmespath_expression: str = ""
