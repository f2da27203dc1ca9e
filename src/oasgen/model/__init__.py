"""Typed in-memory model of an OpenAPI 3.1 document.

Every class is a frozen Pydantic v2 model; decoding and encoding go through
:mod:`oasgen.parser.codec`, which maps pydantic validation failures to
:class:`~oasgen.exceptions.DecodeError`.

Sub-modules:

* :mod:`~oasgen.model.values` -- ``JsonValue`` and the :class:`SpecModel` base.
* :mod:`~oasgen.model.reference` -- ``Reference[T]`` = :class:`Pointer` or ``T``.
* :mod:`~oasgen.model.schema` -- the recursive JSON Schema node.
* :mod:`~oasgen.model.info` -- Info, Contact, License, ExternalDocument.
* :mod:`~oasgen.model.document` -- :class:`Spec` and everything it owns.
"""

from oasgen.model.document import (
    Callback,
    Components,
    Encoding,
    Example,
    Header,
    HeaderStyle,
    HTTPMethod,
    Link,
    MediaType,
    OAuthFlow,
    OAuthFlows,
    Operation,
    Parameter,
    ParameterLocation,
    ParameterStyle,
    PathItem,
    RequestBody,
    Response,
    Responses,
    SecurityRequirement,
    SecurityScheme,
    SecuritySchemeIn,
    SecuritySchemeType,
    Server,
    ServerVariable,
    Spec,
    Tag,
)
from oasgen.model.info import Contact, ExternalDocument, Info, License
from oasgen.model.reference import Pointer, Reference, is_pointer
from oasgen.model.schema import Discriminator, Format, Schema, SchemaType, SubSchema, Xml
from oasgen.model.values import JsonValue, SpecModel

__all__ = [
    "Callback",
    "Components",
    "Contact",
    "Discriminator",
    "Encoding",
    "Example",
    "ExternalDocument",
    "Format",
    "HTTPMethod",
    "Header",
    "HeaderStyle",
    "Info",
    "JsonValue",
    "License",
    "Link",
    "MediaType",
    "OAuthFlow",
    "OAuthFlows",
    "Operation",
    "Parameter",
    "ParameterLocation",
    "ParameterStyle",
    "PathItem",
    "Pointer",
    "Reference",
    "RequestBody",
    "Response",
    "Responses",
    "Schema",
    "SchemaType",
    "SecurityRequirement",
    "SecurityScheme",
    "SecuritySchemeIn",
    "SecuritySchemeType",
    "Server",
    "ServerVariable",
    "Spec",
    "SpecModel",
    "SubSchema",
    "Tag",
    "Xml",
    "is_pointer",
]
