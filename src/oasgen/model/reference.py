"""``Reference[T]`` -- either a pointer to a component or an inlined ``T``.

Most OpenAPI positions accept a *Reference Object* in place of the real
object::

    responses:
      "404": {"$ref": "#/components/responses/NotFound"}   # Pointer
      "200": {"description": "OK"}                         # inline Response

Both variants are flattened into the same JSON object, so the variant is
decided *structurally*: the decoder peeks for the ``$ref`` marker key before
any field-level decoding happens. Presence selects :class:`Pointer`, absence
selects ``T``. Trying ``T`` first and falling back to a pointer would
misclassify objects that legitimately carry a ``$ref``-like field.

``Reference`` is a generic type alias, parametrised like a container::

    responses: dict[str, Reference[Response]]

Resolution (pointer to target) is not performed here; see
:mod:`oasgen.parser.resolver`.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Annotated, Any, Optional, TypeVar, Union
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator

__all__ = ["Pointer", "Reference", "REF_KEY", "is_pointer"]

T = TypeVar("T")

REF_KEY = "$ref"
"""The marker key whose presence turns an object into a :class:`Pointer`."""

_POINTER_TAG = "pointer"
_INLINE_TAG = "inline"

# Characters that may never appear unescaped in a URI (or IRI) reference.
_FORBIDDEN_URI_CHARS = re.compile(r"[\x00-\x20\x7f<>\"{}|\\^`]")
_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class Pointer(BaseModel):
    """A *Reference Object*: an indirect handle to a component.

    ``summary`` and ``description`` override those of the referenced
    component. Any other key next to ``$ref`` is ignored, as OpenAPI
    requires.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    ref: str = Field(alias=REF_KEY)
    summary: Optional[str] = None
    description: Optional[str] = None

    @field_validator("ref")
    @classmethod
    def _check_uri_reference(cls, value: str) -> str:
        if _FORBIDDEN_URI_CHARS.search(value):
            raise ValueError(f"not a valid URI reference: {value!r}")
        if _BAD_PERCENT_ESCAPE.search(value):
            raise ValueError(f"invalid percent-encoding in URI reference: {value!r}")
        try:
            urlsplit(value)
        except ValueError as exc:
            raise ValueError(f"not a valid URI reference: {value!r} ({exc})") from exc
        return value

    @property
    def is_local(self) -> bool:
        """Whether the pointer targets the current document (``#/...``)."""
        return self.ref.startswith("#")


def _reference_variant(value: Any) -> str:
    """Pick the variant by peeking for the ``$ref`` marker key.

    Called by pydantic with the raw mapping during validation and with the
    model instance during serialisation.
    """
    if isinstance(value, Mapping):
        return _POINTER_TAG if REF_KEY in value else _INLINE_TAG
    return _POINTER_TAG if isinstance(value, Pointer) else _INLINE_TAG


Reference = Annotated[
    Union[
        Annotated[Pointer, Tag(_POINTER_TAG)],
        Annotated[T, Tag(_INLINE_TAG)],
    ],
    Discriminator(_reference_variant),
]


def is_pointer(value: object) -> bool:
    """Return ``True`` if *value* is the pointer variant of a reference."""
    return isinstance(value, Pointer)
