"""Base classes shared by every Zentral payload model."""

from __future__ import annotations

import types
import typing
from functools import cache
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_serializer, model_validator

from ..query import is_empty

# Marker for fields that are left out of the encoded JSON when empty.
# Usage: ``color: Annotated[str, OMIT_EMPTY] = ""``
OMIT_EMPTY = object()


@cache
def _nullable_keys(cls: type[BaseModel]) -> frozenset[str]:
    keys = set()
    for name, field in cls.model_fields.items():
        annotation = field.annotation
        if annotation is None or (
            typing.get_origin(annotation) in (typing.Union, types.UnionType)
            and type(None) in typing.get_args(annotation)
        ):
            keys.add(name)
            if field.alias:
                keys.add(field.alias)
    return frozenset(keys)


@cache
def _omit_empty_fields(cls: type[BaseModel]) -> tuple[str, ...]:
    return tuple(
        name
        for name, field in cls.model_fields.items()
        if any(m is OMIT_EMPTY for m in field.metadata)
    )


class ZentralModel(BaseModel):
    """Base model for Zentral API payloads.

    Unknown keys sent by the server are ignored. A ``null`` value for a
    field that does not accept ``None`` is treated as absent, so the field
    keeps its default (an empty string, zero, ``False`` or an empty list).
    Models are always serialized using the wire names.
    """

    model_config = ConfigDict(
        extra="ignore",
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            nullable = _nullable_keys(cls)
            return {k: v for k, v in data.items() if v is not None or k in nullable}
        return data

    def _before_serialize(self) -> None:
        pass

    def _omitted_fields(self) -> set[str]:
        return {
            name
            for name in _omit_empty_fields(type(self))
            if is_empty(getattr(self, name))
        }

    @model_serializer(mode="wrap")
    def _serialize(self, handler, info) -> dict[str, Any]:
        self._before_serialize()
        data = handler(self)
        fields = type(self).model_fields
        for name in self._omitted_fields():
            data.pop(fields[name].alias or name, None)
            data.pop(name, None)
        return data


def check_backend_kwargs(model: BackendKwargsModel) -> None:
    """Check the kwargs fields of a discriminated payload.

    At most one ``*_kwargs`` field may be set, and when one is set it must
    be the field selected by the discriminator value.

    Raises
    ------
    ValueError
        If the populated kwargs fields do not match the discriminator
    """
    discriminator = getattr(model, model.discriminator_field)
    populated = sorted(
        {
            field
            for field in model.backend_kwargs.values()
            if getattr(model, field) is not None
        }
    )
    if len(populated) > 1:
        raise ValueError(
            f"only one of {', '.join(populated)} can be set, "
            f"{model.discriminator_field} is {discriminator!r}"
        )
    if populated and model.backend_kwargs.get(discriminator) != populated[0]:
        raise ValueError(
            f"{populated[0]} cannot be set when "
            f"{model.discriminator_field} is {discriminator!r}"
        )


class BackendKwargsModel(ZentralModel):
    """Payload carrying one configuration object selected by a discriminator.

    Subclasses declare which value of the discriminator field selects which
    ``*_kwargs`` field. Only the selected field may be populated, and the
    fields that are not selected are left out of the encoded JSON.
    """

    discriminator_field: ClassVar[str] = "backend"
    backend_kwargs: ClassVar[dict[str, str]] = {}

    @model_validator(mode="after")
    def _validate_backend_kwargs(self) -> BackendKwargsModel:
        check_backend_kwargs(self)
        return self

    def selected_kwargs(self) -> Any:
        """Return the configuration object selected by the discriminator."""
        field = self.backend_kwargs.get(getattr(self, self.discriminator_field))
        if field is None:
            return None
        return getattr(self, field)

    def _before_serialize(self) -> None:
        check_backend_kwargs(self)

    def _omitted_fields(self) -> set[str]:
        omitted = super()._omitted_fields()
        selected = self.backend_kwargs.get(getattr(self, self.discriminator_field))
        for field in set(self.backend_kwargs.values()):
            if field != selected and getattr(self, field) is None:
                omitted.add(field)
        return omitted
