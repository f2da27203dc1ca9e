"""Primitive values and the common base class of every document model.

OpenAPI allows arbitrary JSON literals in a handful of places (``example``,
``default``, ``const``, extension properties, ...). Those positions are typed
as pydantic's :data:`~pydantic.JsonValue`, the recursive union of
``None | bool | int | float | str | list | dict``.

:data:`Number` and :data:`Count` are the numeric keyword types. They are
strict: a string or a boolean in their place is a decode error rather than
something to coerce, and boolean keywords are typed
:data:`~pydantic.StrictBool` for the same reason.

:class:`SpecModel` configures the conventions shared by every OpenAPI object:

* wire names are camelCase (``operationId``), Python attributes snake_case
  (``operation_id``); only the wire names are read on input, so an
  ``operation_id`` key is an unknown key like any other. Build objects in
  Python with the wire names too (``Info(termsOfService=...)``);
* unknown keys are kept in ``model_extra`` (exposed as :attr:`extensions`)
  instead of being rejected, so ``x-*`` extensions and keywords from later
  OpenAPI / JSON Schema revisions survive a decode/encode cycle;
* instances are frozen -- the tree is built once by the codec and only read
  afterwards.
"""

from __future__ import annotations

from typing import Annotated, Any, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    StrictFloat,
    StrictInt,
    model_serializer,
)
from pydantic.alias_generators import to_camel

__all__ = ["Count", "JsonValue", "Number", "SpecModel"]

Number = Union[StrictInt, StrictFloat]
"""A JSON number. Booleans and numeric strings are rejected."""

Count = Annotated[StrictInt, Field(ge=0)]
"""A non-negative JSON integer (``minLength``, ``maxItems``, ...)."""


class SpecModel(BaseModel):
    """Base class for all OpenAPI document objects."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="allow",
        frozen=True,
    )

    @property
    def extensions(self) -> dict[str, Any]:
        """Keys of the raw object that are not fields of this model."""
        return dict(self.model_extra or {})

    @model_serializer(mode="wrap")
    def _serialize_with_extensions(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data = handler(self)
        # Extension keys are always emitted, even with ``exclude_unset``.
        for key, value in (self.model_extra or {}).items():
            data.setdefault(key, value)
        return data
