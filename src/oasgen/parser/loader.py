"""Load raw OpenAPI documents from a local file or stdin.

This module is the byte-level half of the document codec: it reads text and
turns it into plain Python containers (``dict``/``list``/scalars). Turning
those containers into the typed model is the job of
:mod:`oasgen.parser.codec`.

The format is selected by file extension:

* ``.json`` -- parsed with :mod:`json`;
* ``.yaml`` / ``.yml`` -- parsed with PyYAML's safe loader;
* anything else -- rejected with :class:`~oasgen.exceptions.SpecReadError`.

Both formats must produce the *same* tree for the same logical document. Two
YAML conveniences would break that, so the YAML loader undoes them:

* unquoted timestamps (``example: 2024-01-01``) stay strings instead of
  becoming :class:`datetime.date` objects;
* non-string mapping keys (``200:`` under ``responses``) are converted to
  strings, as they would be written in JSON.

The public functions are :func:`load_document` and :func:`parse_content`.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from oasgen.exceptions import SpecParseError, SpecReadError

logger = logging.getLogger(__name__)

FORMATS_BY_SUFFIX = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}
"""File extensions recognised by :func:`load_document` and their formats."""


class _SpecLoader(yaml.SafeLoader):
    """Safe loader that keeps timestamps as plain strings."""


_SpecLoader.yaml_implicit_resolvers = {
    first_char: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag != "tag:yaml.org,2002:timestamp"
    ]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def format_for_path(path: Union[str, Path]) -> str:
    """Return the document format (``"json"`` or ``"yaml"``) for *path*.

    Raises:
        SpecReadError: If the extension is not one of :data:`FORMATS_BY_SUFFIX`.
    """
    suffix = Path(path).suffix.lower()
    try:
        return FORMATS_BY_SUFFIX[suffix]
    except KeyError:
        raise SpecReadError(
            f"Unsupported file format '{suffix or Path(path).name}'. "
            "Expected one of: .json, .yaml, .yml"
        ) from None


def load_document(source: Union[str, Path], fmt: Optional[str] = None) -> dict[str, Any]:
    """Load a raw document from a file path, or from stdin when *source* is ``'-'``.

    Args:
        source: A file path or ``'-'`` for stdin.
        fmt: Explicit format (``"json"`` or ``"yaml"``). Required to skip
            detection on stdin; for files it overrides the extension.

    Returns:
        The parsed document as a dictionary.

    Raises:
        SpecReadError: If the file is missing, unreadable, empty, or has an
            unsupported extension.
        SpecParseError: If the content is not valid JSON/YAML or is not an
            object at the top level.
    """
    if str(source) == "-":
        return _load_from_stdin(fmt)
    return _load_from_file(Path(source), fmt)


def _load_from_stdin(fmt: Optional[str]) -> dict[str, Any]:
    """Read a document from stdin.

    Without an explicit *fmt* the content is tried as JSON, then YAML.
    """
    try:
        content = sys.stdin.read()
    except OSError as exc:
        raise SpecReadError(f"Failed to read from stdin: {exc}") from exc

    if not content.strip():
        raise SpecReadError("No input received from stdin")

    return parse_content(content, hint=fmt or "")


def _load_from_file(path: Path, fmt: Optional[str]) -> dict[str, Any]:
    """Load a document from a local file, selecting the format by extension."""
    hint = fmt or format_for_path(path)

    if not path.is_file():
        raise SpecReadError(f"Spec file not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecReadError(f"Failed to read spec file {path}: {exc}") from exc

    if not content.strip():
        raise SpecReadError(f"Spec file is empty: {path}")

    logger.debug("Loaded %d characters from %s as %s", len(content), path, hint)
    return parse_content(content, hint=hint)


def parse_content(content: str, hint: str = "") -> dict[str, Any]:
    """Parse content as JSON or YAML.

    With ``hint="json"`` or ``hint="yaml"`` only that format is tried.
    Without a hint JSON is tried first, then YAML; valid JSON is also valid
    YAML, but JSON parsing is stricter and faster.

    Args:
        content: The raw string content.
        hint: Optional format hint (``'json'`` or ``'yaml'``).

    Returns:
        The parsed dictionary.

    Raises:
        SpecParseError: If the content cannot be parsed, or does not hold an
            object at the top level.
    """
    json_error: Exception | None = None

    if hint != "yaml":
        try:
            return _require_object(json.loads(content))
        except json.JSONDecodeError as exc:
            if hint == "json":
                raise SpecParseError(f"Invalid JSON: {exc}") from exc
            json_error = exc

    try:
        result = yaml.load(content, Loader=_SpecLoader)  # noqa: S506
    except yaml.YAMLError as exc:
        if hint == "yaml":
            raise SpecParseError(f"Invalid YAML: {exc}") from exc
        msg = "Failed to parse spec as JSON or YAML"
        msg += f"\n  JSON error: {json_error}"
        msg += f"\n  YAML error: {exc}"
        raise SpecParseError(msg) from exc

    return _require_object(_stringify_keys(result))


def _require_object(result: Any) -> dict[str, Any]:
    """Return *result* if it is a mapping, raise :class:`SpecParseError` otherwise."""
    if not isinstance(result, dict):
        found = type(result).__name__ if result is not None else "empty document"
        raise SpecParseError(f"Spec must be a JSON/YAML object (got {found})")
    return result


def _stringify_keys(node: Any) -> Any:
    """Recursively convert mapping keys to strings, as JSON would spell them."""
    if isinstance(node, dict):
        return {_key_to_str(key): _stringify_keys(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_stringify_keys(item) for item in node]
    return node


def _key_to_str(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)
