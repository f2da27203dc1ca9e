"""The JSON Schema (2020-12) node used by OpenAPI 3.1.

:class:`Schema` is a faithful structural model of a schema object; it does
not evaluate instances. Its keywords fall into six families, grouped below
in the same order as the JSON Schema Core and Validation specifications:

* identity (``$schema``, ``$id``, ``$ref``, ``$comment``, anchors, ``$defs``),
* logical composition (``allOf``, ``anyOf``, ``oneOf``, ``not``),
* conditional composition (``if``/``then``/``else``, ``dependentSchemas``),
* structural applicators (``prefixItems``, ``items``, ``properties``, ...),
* assertions (``type``, ``enum``, bounds, ``format``, ...),
* annotations (``title``, ``examples``, OpenAPI's ``discriminator``, ...).

Every child position holds a :data:`SubSchema`: either a nested
:class:`Schema` or a boolean schema (``additionalProperties: false``). The
tree has no sharing; the in-band ``$ref`` keyword is the only reuse
mechanism and it is never resolved by this module.

Two keywords have a normalised in-memory form:

``type``
    Always a list of :class:`SchemaType`. The wire form may be a bare string
    or a non-empty array; a one-element list is written back as the bare
    string so ``type: string`` survives a round trip unchanged. Order and
    duplicates are preserved.

``format``
    A :class:`Format` member when the value is a known format name or one of
    its historical aliases (:data:`FORMAT_ALIASES`), the raw string
    otherwise.
"""

from __future__ import annotations

import enum
from typing import Any, Optional, Union

from pydantic import Field, StrictBool, field_serializer, field_validator

from oasgen.model.info import ExternalDocument
from oasgen.model.values import Count, JsonValue, Number, SpecModel

__all__ = [
    "Discriminator",
    "FORMAT_ALIASES",
    "Format",
    "Schema",
    "SchemaType",
    "SubSchema",
    "Xml",
]


class SchemaType(str, enum.Enum):
    """The primitive types a ``type`` keyword can name."""

    NULL = "null"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    NUMBER = "number"
    STRING = "string"
    INTEGER = "integer"


class Format(str, enum.Enum):
    """Well-known values of the ``format`` keyword."""

    # Dates, times and duration
    DATE_TIME = "date-time"
    DATE = "date"
    TIME = "time"
    DURATION = "duration"

    # Email addresses and hostnames
    EMAIL = "email"
    IDN_EMAIL = "idn-email"
    HOSTNAME = "hostname"
    IDN_HOSTNAME = "idn-hostname"

    # IP addresses
    IPV4 = "ipv4"
    IPV6 = "ipv6"

    # Resource identifiers
    URI = "uri"
    URI_REFERENCE = "uri-reference"
    IRI = "iri"
    IRI_REFERENCE = "iri-reference"
    UUID = "uuid"
    URI_TEMPLATE = "uri-template"

    # JSON pointers and regular expressions
    JSON_POINTER = "json-pointer"
    RELATIVE_JSON_POINTER = "relative-json-pointer"
    REGEX = "regex"

    # Commonly seen in the wild
    BINARY = "binary"
    IP = "ip"

    # OpenAPI data type formats
    INT32 = "int32"
    INT64 = "int64"
    FLOAT = "float"
    DOUBLE = "double"
    PASSWORD = "password"


FORMAT_ALIASES: dict[str, Format] = {
    "full-date": Format.DATE,
    "full-time": Format.TIME,
    "partial-time": Format.TIME,
    "url": Format.URI,
}
"""Historical spellings decoded into a canonical :class:`Format` member."""

SubSchema = Union["Schema", StrictBool]
"""A child schema position: a nested :class:`Schema` or a boolean schema."""


class Discriminator(SpecModel):
    """OpenAPI hint telling which ``oneOf``/``anyOf`` branch applies."""

    property_name: str
    mapping: dict[str, str] = Field(default_factory=dict)


class Xml(SpecModel):
    """XML representation metadata for a property."""

    name: Optional[str] = None
    namespace: Optional[str] = None
    prefix: Optional[str] = None
    attribute: StrictBool = False
    wrapped: StrictBool = False


class Schema(SpecModel):
    """A JSON Schema node.

    Field names are the snake_case spelling of the keyword; keywords that
    clash with Python syntax carry a trailing underscore (``not_``, ``if_``,
    ``else_``) and the ``$``-prefixed core keywords drop the dollar sign
    (``ref`` is ``$ref``, ``dialect`` is ``$schema``). Keys that are not
    keywords are kept in :attr:`extensions`.
    """

    # Core vocabulary
    dialect: Optional[str] = Field(default=None, alias="$schema")
    id: Optional[str] = Field(default=None, alias="$id")
    ref: Optional[str] = Field(default=None, alias="$ref")
    comment: Optional[str] = Field(default=None, alias="$comment")
    anchor: Optional[str] = Field(default=None, alias="$anchor")
    dynamic_ref: Optional[str] = Field(default=None, alias="$dynamicRef")
    dynamic_anchor: Optional[str] = Field(default=None, alias="$dynamicAnchor")
    defs: dict[str, SubSchema] = Field(default_factory=dict, alias="$defs")

    # Applying subschemas with logic
    all_of: list[SubSchema] = Field(default_factory=list)
    any_of: list[SubSchema] = Field(default_factory=list)
    one_of: list[SubSchema] = Field(default_factory=list)
    not_: Optional[SubSchema] = Field(default=None, alias="not")

    # Applying subschemas conditionally
    if_: Optional[SubSchema] = Field(default=None, alias="if")
    then: Optional[SubSchema] = None
    else_: Optional[SubSchema] = Field(default=None, alias="else")
    dependent_schemas: dict[str, SubSchema] = Field(default_factory=dict)

    # Applying subschemas to arrays
    prefix_items: list[SubSchema] = Field(default_factory=list)
    items: Optional[SubSchema] = None
    contains: Optional[SubSchema] = None

    # Applying subschemas to objects
    properties: dict[str, SubSchema] = Field(default_factory=dict)
    pattern_properties: dict[str, SubSchema] = Field(default_factory=dict)
    additional_properties: Optional[SubSchema] = None
    property_names: Optional[SubSchema] = None

    # Unevaluated locations, applied after every other applicator
    unevaluated_items: Optional[SubSchema] = None
    unevaluated_properties: Optional[SubSchema] = None

    # Validation for any instance type
    type: Optional[list[SchemaType]] = None
    enum: Optional[list[JsonValue]] = None
    const: JsonValue = None

    # Numeric instances
    multiple_of: Optional[Number] = None
    maximum: Optional[Number] = None
    exclusive_maximum: Optional[Number] = None
    minimum: Optional[Number] = None
    exclusive_minimum: Optional[Number] = None

    # Strings
    max_length: Optional[Count] = None
    min_length: Optional[Count] = None
    pattern: Optional[str] = None

    # Arrays
    max_items: Optional[Count] = None
    min_items: Optional[Count] = None
    unique_items: StrictBool = False
    max_contains: Optional[Count] = None
    min_contains: Optional[Count] = None

    # Objects
    max_properties: Optional[Count] = None
    min_properties: Optional[Count] = None
    required: list[str] = Field(default_factory=list)
    dependent_required: dict[str, list[str]] = Field(default_factory=dict)

    # Semantic content
    format: Optional[Union[Format, str]] = Field(default=None, union_mode="left_to_right")

    # String-encoded data
    content_encoding: Optional[str] = None
    content_media_type: Optional[str] = None
    content_schema: Optional[SubSchema] = None

    # Meta-data annotations
    title: Optional[str] = None
    description: Optional[str] = None
    default: JsonValue = None
    deprecated: StrictBool = False
    read_only: StrictBool = False
    write_only: StrictBool = False
    examples: list[JsonValue] = Field(default_factory=list)

    # OpenAPI vocabulary
    discriminator: Optional[Discriminator] = None
    xml: Optional[Xml] = None
    external_docs: Optional[ExternalDocument] = None
    example: JsonValue = None

    @field_validator("type", mode="before")
    @classmethod
    def _one_or_many_types(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        if isinstance(value, list) and not value:
            raise ValueError("type must name at least one type")
        return value

    @field_serializer("type")
    def _collapse_single_type(self, types: Optional[list[SchemaType]]) -> Any:
        if types is None:
            return None
        if len(types) == 1:
            return types[0].value
        return [t.value for t in types]

    @field_validator("format", mode="before")
    @classmethod
    def _canonical_format(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, Format):
            return FORMAT_ALIASES.get(value, value)
        return value

    @property
    def types(self) -> list[SchemaType]:
        """The ``type`` keyword as a list, empty when the keyword is absent."""
        return list(self.type or [])

    def is_reference(self) -> bool:
        """Whether this schema is (or starts with) an in-band ``$ref``."""
        return self.ref is not None


Schema.model_rebuild()
