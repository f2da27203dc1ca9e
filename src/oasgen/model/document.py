"""The OpenAPI 3.1 document aggregate, rooted at :class:`Spec`.

Ownership follows the document layout::

    Spec
    +-- Info, [Server], [Tag], ExternalDocument
    +-- paths / webhooks: {name: PathItem}
    |   +-- PathItem: up to eight Operations + shared parameters
    |       +-- Operation: parameters, requestBody, responses, callbacks
    |           +-- Parameter / RequestBody / Response -> MediaType -> Schema
    +-- Components: named pools of Reference[T], raw Schemas and PathItems

Positions where OpenAPI allows a *Reference Object* are typed
``Reference[T]`` (see :mod:`oasgen.model.reference`). ``PathItem`` is never
wrapped: it carries its own ``$ref`` field, as OpenAPI defines it.

Mutually exclusive fields (``value``/``externalValue`` on :class:`Example`,
``example``/``examples`` on :class:`Parameter`, ``schema``/``content``) are
all accepted together; precedence is left to consumers.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Iterator
from typing import Optional

from pydantic import Field, StrictBool, field_validator

from oasgen.model.info import ExternalDocument, Info
from oasgen.model.reference import Reference
from oasgen.model.schema import Schema
from oasgen.model.values import JsonValue, SpecModel

__all__ = [
    "Callback",
    "Components",
    "Encoding",
    "Example",
    "HTTPMethod",
    "Header",
    "HeaderStyle",
    "Link",
    "MediaType",
    "OAuthFlow",
    "OAuthFlows",
    "Operation",
    "Parameter",
    "ParameterLocation",
    "ParameterStyle",
    "PathItem",
    "RequestBody",
    "Response",
    "Responses",
    "SecurityRequirement",
    "SecurityScheme",
    "SecuritySchemeIn",
    "SecuritySchemeType",
    "Server",
    "ServerVariable",
    "Spec",
    "SUPPORTED_OPENAPI_VERSION",
    "Tag",
]

SUPPORTED_OPENAPI_VERSION = re.compile(r"^3\.1\.\d+(-[0-9A-Za-z.-]+)?$")
"""Accepted values of the root ``openapi`` field (any 3.1.x release)."""

SecurityRequirement = dict[str, list[str]]
"""Security scheme name mapped to the scopes required for execution."""


# --- Enumerations ---


class HTTPMethod(str, enum.Enum):
    """HTTP methods that can carry an operation on a :class:`PathItem`.

    Declaration order matches the order of the fields on ``PathItem``.
    """

    GET = "get"
    PUT = "put"
    POST = "post"
    DELETE = "delete"
    OPTIONS = "options"
    HEAD = "head"
    PATCH = "patch"
    TRACE = "trace"


class ParameterLocation(str, enum.Enum):
    """Locations where a parameter can appear, per the ``in`` field."""

    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    COOKIE = "cookie"


class ParameterStyle(str, enum.Enum):
    """How a parameter value is serialised."""

    MATRIX = "matrix"
    LABEL = "label"
    FORM = "form"
    SIMPLE = "simple"
    SPACE_DELIMITED = "spaceDelimited"
    PIPE_DELIMITED = "pipeDelimited"
    DEEP_OBJECT = "deepObject"


class HeaderStyle(str, enum.Enum):
    """Headers only support the ``simple`` style."""

    SIMPLE = "simple"


class SecuritySchemeType(str, enum.Enum):
    """The ``type`` of a :class:`SecurityScheme`."""

    API_KEY = "apiKey"
    HTTP = "http"
    MUTUAL_TLS = "mutualTLS"
    OAUTH2 = "oauth2"
    OPEN_ID_CONNECT = "openIdConnect"


class SecuritySchemeIn(str, enum.Enum):
    """Where an ``apiKey`` security scheme sends its key."""

    QUERY = "query"
    HEADER = "header"
    COOKIE = "cookie"


# --- Servers ---


class ServerVariable(SpecModel):
    """A variable for server URL template substitution."""

    enum: Optional[list[str]] = None
    default: str
    description: Optional[str] = None


class Server(SpecModel):
    """A server hosting the API; ``url`` may contain ``{variable}`` templates."""

    url: str
    description: Optional[str] = None
    variables: dict[str, ServerVariable] = Field(default_factory=dict)


# --- Examples, links, headers ---


class Example(SpecModel):
    """An example value, embedded (``value``) or external (``externalValue``)."""

    summary: Optional[str] = None
    description: Optional[str] = None
    value: JsonValue = None
    external_value: Optional[str] = None


class Link(SpecModel):
    """A design-time link from a response to another operation.

    ``parameters`` and ``request_body`` hold either literal values or runtime
    expressions (``$request.path.id``); both are plain JSON values here.
    """

    operation_ref: Optional[str] = None
    operation_id: Optional[str] = None
    parameters: dict[str, JsonValue] = Field(default_factory=dict)
    request_body: JsonValue = None
    description: Optional[str] = None
    server: Optional[Server] = None


class Encoding(SpecModel):
    """Serialisation of a single property of a multipart/form request body."""

    content_type: Optional[str] = None
    headers: dict[str, Reference[Header]] = Field(default_factory=dict)
    style: Optional[ParameterStyle] = None
    explode: Optional[StrictBool] = None
    allow_reserved: StrictBool = False


class MediaType(SpecModel):
    """Schema and examples for one media type of a body or parameter."""

    schema_: Optional[Schema] = Field(default=None, alias="schema")
    example: JsonValue = None
    examples: dict[str, Reference[Example]] = Field(default_factory=dict)
    encoding: dict[str, Encoding] = Field(default_factory=dict)


class Header(SpecModel):
    """A response or encoding header; a :class:`Parameter` without ``name``/``in``."""

    description: Optional[str] = None
    required: StrictBool = False
    deprecated: StrictBool = False
    style: Optional[HeaderStyle] = None
    explode: Optional[StrictBool] = None
    schema_: Optional[Schema] = Field(default=None, alias="schema")
    example: JsonValue = None
    examples: dict[str, Reference[Example]] = Field(default_factory=dict)
    content: dict[str, MediaType] = Field(default_factory=dict)


# --- Operations ---


class Parameter(SpecModel):
    """A single operation parameter, unique by ``(name, in)``."""

    name: str
    in_: ParameterLocation = Field(alias="in")
    description: Optional[str] = None
    required: StrictBool = False
    deprecated: StrictBool = False
    allow_empty_value: StrictBool = False
    style: Optional[ParameterStyle] = None
    explode: Optional[StrictBool] = None
    allow_reserved: StrictBool = False
    schema_: Optional[Schema] = Field(default=None, alias="schema")
    example: JsonValue = None
    examples: dict[str, Reference[Example]] = Field(default_factory=dict)
    content: dict[str, MediaType] = Field(default_factory=dict)


class RequestBody(SpecModel):
    """A request body, keyed by media type range (``application/json``, ``image/*``)."""

    description: Optional[str] = None
    content: dict[str, MediaType]
    required: StrictBool = False


class Response(SpecModel):
    """A single response from an API operation."""

    description: str
    headers: dict[str, Reference[Header]] = Field(default_factory=dict)
    content: dict[str, MediaType] = Field(default_factory=dict)
    links: dict[str, Reference[Link]] = Field(default_factory=dict)


Responses = dict[str, Reference[Response]]
"""Status code (``"200"``), status class (``"2XX"``) or ``"default"`` to response."""


class Operation(SpecModel):
    """A single API operation on a path.

    ``security`` is ``None`` when the operation inherits the root
    requirements; an empty list explicitly removes them.
    """

    tags: list[str] = Field(default_factory=list)
    summary: Optional[str] = None
    description: Optional[str] = None
    external_docs: Optional[ExternalDocument] = None
    operation_id: Optional[str] = None
    parameters: list[Reference[Parameter]] = Field(default_factory=list)
    request_body: Optional[Reference[RequestBody]] = None
    responses: Responses = Field(default_factory=dict)
    callbacks: dict[str, Reference[Callback]] = Field(default_factory=dict)
    deprecated: StrictBool = False
    security: Optional[list[SecurityRequirement]] = None
    servers: list[Server] = Field(default_factory=list)


class PathItem(SpecModel):
    """The operations available on a single path.

    ``ref`` (``$ref``) points to another path item; OpenAPI leaves the
    behaviour for conflicting sibling fields undefined, so both are kept.
    """

    ref: Optional[str] = Field(default=None, alias="$ref")
    summary: Optional[str] = None
    description: Optional[str] = None
    get: Optional[Operation] = None
    put: Optional[Operation] = None
    post: Optional[Operation] = None
    delete: Optional[Operation] = None
    options: Optional[Operation] = None
    head: Optional[Operation] = None
    patch: Optional[Operation] = None
    trace: Optional[Operation] = None
    servers: list[Server] = Field(default_factory=list)
    parameters: list[Reference[Parameter]] = Field(default_factory=list)

    def operations(self) -> Iterator[tuple[HTTPMethod, Operation]]:
        """Yield ``(method, operation)`` for every method defined on this path."""
        for method in HTTPMethod:
            operation = getattr(self, method.value)
            if operation is not None:
                yield method, operation


Callback = dict[str, PathItem]
"""Runtime expression (``{$request.body#/url}``) to the path item it calls."""


# --- Security ---


class OAuthFlow(SpecModel):
    """Configuration of a single OAuth 2 flow.

    Which URLs are required depends on the flow (``implicit`` has no
    ``tokenUrl``), so all of them are optional here.
    """

    authorization_url: Optional[str] = None
    token_url: Optional[str] = None
    refresh_url: Optional[str] = None
    scopes: dict[str, str]


class OAuthFlows(SpecModel):
    """The OAuth 2 flows supported by a security scheme."""

    implicit: Optional[OAuthFlow] = None
    password: Optional[OAuthFlow] = None
    client_credentials: Optional[OAuthFlow] = None
    authorization_code: Optional[OAuthFlow] = None


class SecurityScheme(SpecModel):
    """A security scheme usable by operations.

    Only the fields relevant to :attr:`type` are expected to be set.
    """

    type: SecuritySchemeType
    description: Optional[str] = None
    name: Optional[str] = None
    in_: Optional[SecuritySchemeIn] = Field(default=None, alias="in")
    scheme: Optional[str] = None
    bearer_format: Optional[str] = None
    flows: Optional[OAuthFlows] = None
    open_id_connect_url: Optional[str] = None


# --- Root ---


class Tag(SpecModel):
    """Metadata for a tag used by operations."""

    name: str
    description: Optional[str] = None
    external_docs: Optional[ExternalDocument] = None


class Components(SpecModel):
    """Named, reusable objects referenced from elsewhere in the document."""

    schemas: dict[str, Schema] = Field(default_factory=dict)
    responses: dict[str, Reference[Response]] = Field(default_factory=dict)
    parameters: dict[str, Reference[Parameter]] = Field(default_factory=dict)
    examples: dict[str, Reference[Example]] = Field(default_factory=dict)
    request_bodies: dict[str, Reference[RequestBody]] = Field(default_factory=dict)
    headers: dict[str, Reference[Header]] = Field(default_factory=dict)
    security_schemes: dict[str, Reference[SecurityScheme]] = Field(default_factory=dict)
    links: dict[str, Reference[Link]] = Field(default_factory=dict)
    callbacks: dict[str, Reference[Callback]] = Field(default_factory=dict)
    path_items: dict[str, PathItem] = Field(default_factory=dict)


class Spec(SpecModel):
    """The root object of an OpenAPI 3.1 document."""

    openapi: str
    info: Info
    json_schema_dialect: Optional[str] = None
    servers: list[Server] = Field(default_factory=list)
    paths: dict[str, PathItem] = Field(default_factory=dict)
    webhooks: dict[str, PathItem] = Field(default_factory=dict)
    components: Components = Field(default_factory=Components)
    security: list[SecurityRequirement] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
    external_docs: Optional[ExternalDocument] = None

    @field_validator("openapi")
    @classmethod
    def _check_version(cls, value: str) -> str:
        if not SUPPORTED_OPENAPI_VERSION.match(value):
            raise ValueError(
                f"unsupported OpenAPI version {value!r}, only 3.1.x is supported"
            )
        return value

    def operations(self) -> Iterator[tuple[str, HTTPMethod, Operation]]:
        """Yield ``(path, method, operation)`` for every operation under ``paths``."""
        for path, item in self.paths.items():
            for method, operation in item.operations():
                yield path, method, operation


Encoding.model_rebuild()
Operation.model_rebuild()
PathItem.model_rebuild()
Components.model_rebuild()
Spec.model_rebuild()
