"""Exception hierarchy for oasgen.

All exceptions inherit from :class:`OasgenError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`oasgen.exit_codes`.
The top-level error handler in :func:`oasgen.app.main` catches
``OasgenError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

Subclass hierarchy::

    OasgenError (exit 1)
    +-- InvalidUsageError   (exit 2)
    +-- SpecReadError       (exit 7)
    +-- SpecParseError      (exit 7)
    +-- DecodeError         (exit 8)
    +-- ReferenceError_     (exit 9)
    +-- BackendError        (exit 10)
    +-- ConfigError         (exit 1)

Unsupported-feature warnings produced while generating documentation are
*not* exceptions; they are returned as plain strings by
:meth:`~oasgen.code.generator.Generator.write_to`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from oasgen.exit_codes import (
    EXIT_BACKEND_ERROR,
    EXIT_DECODE_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_REFERENCE_ERROR,
    EXIT_SPEC_PARSE_ERROR,
)

if TYPE_CHECKING:
    from pydantic import ValidationError


class OasgenError(Exception):
    """Base exception for all oasgen errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`oasgen.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(OasgenError):
    """Raised for invalid CLI arguments or an unknown backend name."""

    exit_code = EXIT_INVALID_USAGE


class SpecReadError(OasgenError):
    """Raised when the input file is missing, unreadable, empty, or has an unsupported extension."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class SpecParseError(OasgenError):
    """Raised when the input is not syntactically valid JSON or YAML."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class DecodeError(OasgenError):
    """Raised when a raw value does not match the shape of the target model.

    Wraps a pydantic :class:`~pydantic.ValidationError` so that callers
    only deal with oasgen's own hierarchy. The individual failures are kept
    in :attr:`errors` as ``(location, message)`` pairs, where *location* is
    a dotted path into the raw document (``paths./pets.get.responses``).
    """

    exit_code = EXIT_DECODE_ERROR

    def __init__(self, message: str, errors: list[tuple[str, str]] | None = None):
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def from_validation_error(cls, what: str, exc: ValidationError) -> DecodeError:
        """Build a :class:`DecodeError` from a pydantic validation failure.

        Args:
            what: Name of the entity being decoded (used in the message).
            exc: The validation error raised by pydantic.

        Returns:
            A :class:`DecodeError` whose message lists every failing location.
        """
        errors = [
            (".".join(str(part) for part in err["loc"]) or "$root", err["msg"])
            for err in exc.errors()
        ]
        lines = [f"Invalid {what}: {len(errors)} error(s)"]
        lines.extend(f"  {loc}: {msg}" for loc, msg in errors)
        return cls("\n".join(lines), errors)


class ReferenceError_(OasgenError):
    """Raised when a ``$ref`` pointer cannot be resolved.

    Named with a trailing underscore to avoid shadowing the built-in
    ``ReferenceError``.
    """

    exit_code = EXIT_REFERENCE_ERROR


class BackendError(OasgenError):
    """Raised when a code backend fails to load or is registered twice."""

    exit_code = EXIT_BACKEND_ERROR


class ConfigError(OasgenError):
    """Raised for configuration problems (invalid JSON, failed validation)."""

    exit_code = EXIT_GENERIC_FAILURE
