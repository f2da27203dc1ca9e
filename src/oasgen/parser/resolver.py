"""Resolve ``Reference[T]`` values against the document that contains them.

The model keeps references as written: a :class:`~oasgen.model.Pointer`
stays a pointer. Consumers that need the target call :func:`resolve`, which
navigates the *encoded* document (the same tree the codec would write) and
decodes whatever it finds there as the requested type::

    from oasgen.parser.resolver import Resolver

    resolver = Resolver(spec)
    for status, response in operation.responses.items():
        response = resolver.resolve(response, Response)

Only in-document references (``#/...``) are supported. Their fragment is an
RFC 6901 JSON Pointer: it is percent-decoded first, then ``~1`` and ``~0``
are unescaped in each segment.

A component may itself be a Reference Object pointing elsewhere; such chains
are followed until a non-pointer is found. Cycles are detected by
remembering the pointers visited along the chain; they raise
:class:`~oasgen.exceptions.ReferenceError_`, as do external references and
pointers to locations that do not exist.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional
from urllib.parse import unquote

from pydantic import BaseModel

from oasgen.exceptions import DecodeError, ReferenceError_
from oasgen.model.document import Spec
from oasgen.model.reference import REF_KEY, Pointer
from oasgen.model.schema import Schema
from oasgen.parser.codec import decode, encode

logger = logging.getLogger(__name__)

__all__ = ["Resolver", "resolve", "resolve_pointer"]

_OVERRIDABLE = ("summary", "description")


class Resolver:
    """Resolves pointers against a single :class:`~oasgen.model.Spec`.

    The document is encoded once, on first use, and reused for every
    lookup.
    """

    def __init__(self, spec: Spec):
        self._spec = spec
        self._document: Optional[dict[str, Any]] = None

    @property
    def document(self) -> dict[str, Any]:
        """The encoded document that pointers are resolved against."""
        if self._document is None:
            self._document = encode(self._spec)
        return self._document

    def resolve(self, reference: Any, target: Any) -> Any:
        """Return the value *reference* stands for, decoded as *target*.

        Inline values are returned unchanged. For a pointer, ``summary`` and
        ``description`` given on the pointer replace those of the target
        when the target type has such fields; along a chain, the outermost
        pointer that sets one wins.

        Args:
            reference: A ``Reference[T]`` value (a ``Pointer`` or a ``T``).
            target: The type to decode the referenced value as.

        Raises:
            ReferenceError_: If the pointer is external, dangling, cyclic,
                or the target does not decode as *target*.
        """
        if not isinstance(reference, Pointer):
            return reference

        overrides: dict[str, str] = {}
        chain: list[str] = []
        pointer = reference
        while True:
            _collect_overrides(pointer, overrides)
            if pointer.ref in chain:
                path = " -> ".join([*chain, pointer.ref])
                raise ReferenceError_(f"Circular $ref detected: {path}")
            chain.append(pointer.ref)

            raw = resolve_pointer(self.document, pointer.ref)
            # A Schema's own $ref is a keyword of the schema, not a Reference Object.
            if target is Schema or not (isinstance(raw, Mapping) and REF_KEY in raw):
                break
            logger.debug("Following $ref chain %s -> %s", pointer.ref, raw[REF_KEY])
            try:
                pointer = decode(Pointer, raw)
            except DecodeError as exc:
                raise ReferenceError_(f"Invalid $ref chain at '{pointer.ref}':\n{exc}") from exc

        try:
            value = decode(target, raw)
        except DecodeError as exc:
            raise ReferenceError_(
                f"Target of $ref '{reference.ref}' is not a valid {_type_name(target)}:\n{exc}"
            ) from exc
        return _apply_overrides(value, overrides)


def resolve(spec: Spec, reference: Any, target: Any) -> Any:
    """Resolve *reference* against *spec* and decode it as *target*.

    Convenience wrapper around :class:`Resolver` for one-off lookups; use a
    :class:`Resolver` directly to resolve many references against the same
    document.
    """
    return Resolver(spec).resolve(reference, target)


def resolve_pointer(document: Any, ref: str) -> Any:
    """Navigate *document* to the location named by the in-document *ref*.

    Args:
        document: A raw JSON-like tree (the encoded document).
        ref: A URI reference of the form ``#`` or ``#/a/b/0``.

    Returns:
        The raw value found at that location.

    Raises:
        ReferenceError_: If *ref* is external, malformed, or names a
            location that does not exist.
    """
    if not ref.startswith("#"):
        raise ReferenceError_(
            f"External $ref not supported: {ref}. "
            "Only internal references (#/...) are handled."
        )

    fragment = unquote(ref[1:])
    if fragment == "":
        return document
    if not fragment.startswith("/"):
        raise ReferenceError_(f"Cannot resolve $ref '{ref}': not a JSON Pointer")

    current: Any = document
    for segment in fragment[1:].split("/"):
        segment = segment.replace("~1", "/").replace("~0", "~")

        if isinstance(current, Mapping):
            if segment not in current:
                raise ReferenceError_(
                    f"Cannot resolve $ref '{ref}': key '{segment}' not found at path"
                )
            current = current[segment]
        elif isinstance(current, list):
            if not segment.isdigit() or (len(segment) > 1 and segment.startswith("0")):
                raise ReferenceError_(
                    f"Cannot resolve $ref '{ref}': invalid array index '{segment}'"
                )
            index = int(segment)
            if index >= len(current):
                raise ReferenceError_(
                    f"Cannot resolve $ref '{ref}': array index {index} out of range"
                )
            current = current[index]
        else:
            raise ReferenceError_(
                f"Cannot resolve $ref '{ref}': "
                f"cannot navigate into {type(current).__name__}"
            )

    return current


def _collect_overrides(pointer: Pointer, overrides: dict[str, str]) -> None:
    for name in _OVERRIDABLE:
        value = getattr(pointer, name)
        if value is not None:
            overrides.setdefault(name, value)


def _apply_overrides(value: Any, overrides: dict[str, str]) -> Any:
    if not overrides or not isinstance(value, BaseModel):
        return value
    update = {
        name: text for name, text in overrides.items() if name in type(value).model_fields
    }
    if not update:
        return value
    return value.model_copy(update=update)


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", None) or str(target)
