"""Convert between raw JSON/YAML trees and the typed document model.

Decoding is pydantic validation; encoding is pydantic serialisation with
three fixed settings:

* ``by_alias=True`` -- emit wire names (``operationId``, ``$ref``);
* ``exclude_unset=True`` -- emit only what the input contained (or what the
  caller passed explicitly), so defaults such as ``deprecated: false`` do
  not appear out of nowhere;
* ``mode="json"`` -- enums become their string values.

Together they make ``encode(decode(raw))`` reproduce *raw* up to the two
normalisations the model defines: ``format`` aliases are written in their
canonical spelling, and a one-element ``type`` list is written as a bare
string.

Typical usage::

    from oasgen.parser.codec import read_spec, dumps

    spec = read_spec("petstore.yaml")
    print(dumps(spec, "json"))
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, TypeAdapter, ValidationError

from oasgen.exceptions import DecodeError, InvalidUsageError
from oasgen.model.document import SUPPORTED_OPENAPI_VERSION, Spec
from oasgen.parser.loader import load_document

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "yaml")


def decode(target: Any, raw: Any) -> Any:
    """Decode *raw* into an instance of *target*.

    *target* may be a model class (``Schema``), or any type pydantic
    understands, such as ``Reference[Response]`` or ``dict[str, PathItem]``.

    Raises:
        DecodeError: If *raw* does not match the shape of *target*.
    """
    adapter: TypeAdapter[Any] = TypeAdapter(target)
    try:
        return adapter.validate_python(raw)
    except ValidationError as exc:
        raise DecodeError.from_validation_error(_type_name(target), exc) from exc


def encode(value: Any) -> Any:
    """Encode a model value (or a container of them) back into a raw tree."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if isinstance(value, dict):
        return {key: encode(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [encode(item) for item in value]
    return value


def validate_openapi_version(raw: dict[str, Any]) -> str:
    """Validate and return the ``openapi`` version string of a raw document.

    Only OpenAPI 3.1.x is supported. Checked before full decoding so that
    Swagger 2.0 and OpenAPI 3.0 documents fail with a clear message instead
    of a list of structural mismatches.

    Raises:
        DecodeError: If the version is missing, unsupported, or indicates
            Swagger 2.x.
    """
    if "swagger" in raw:
        raise DecodeError(
            f"Swagger {raw['swagger']} is not supported. "
            "Only OpenAPI 3.1.x documents are supported."
        )

    version = raw.get("openapi")
    if version is None:
        raise DecodeError("Missing 'openapi' field. Is this an OpenAPI 3.1 document?")

    version_str = str(version)
    if not SUPPORTED_OPENAPI_VERSION.match(version_str):
        raise DecodeError(
            f"Unsupported OpenAPI version: {version_str}. "
            "Only OpenAPI 3.1.x is supported."
        )
    return version_str


def decode_spec(raw: dict[str, Any]) -> Spec:
    """Decode a raw document into a :class:`~oasgen.model.Spec`.

    Raises:
        DecodeError: If the version is unsupported or the document does not
            match the model.
    """
    version = validate_openapi_version(raw)
    spec = decode(Spec, raw)
    logger.debug(
        "Decoded OpenAPI %s document '%s' (%d paths, %d schemas)",
        version,
        spec.info.title,
        len(spec.paths),
        len(spec.components.schemas),
    )
    return spec


def read_spec(source: Union[str, Path], fmt: Optional[str] = None) -> Spec:
    """Load and decode a document from a file path (or ``'-'`` for stdin).

    Raises:
        SpecReadError: If the file cannot be read or has an unsupported extension.
        SpecParseError: If the content is not valid JSON/YAML.
        DecodeError: If the document does not match the model.
    """
    return decode_spec(load_document(source, fmt))


def dumps(value: Any, fmt: str = "json") -> str:
    """Encode *value* and serialise it as JSON or YAML text.

    The result always ends with a newline.

    Raises:
        InvalidUsageError: If *fmt* is not ``"json"`` or ``"yaml"``.
    """
    data = encode(value)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    raise InvalidUsageError(
        f"Unknown output format '{fmt}'. Expected one of: {', '.join(OUTPUT_FORMATS)}"
    )


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", None) or str(target)
