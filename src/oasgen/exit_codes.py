"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~oasgen.exceptions.OasgenError` subclass.
External tooling (CI scripts, shell wrappers) can inspect the exit code to
determine the failure class without parsing stderr.

Example::

    $ oasgen generate broken.yaml
    $ echo $?
    7   # EXIT_SPEC_PARSE_ERROR -- the YAML could not be parsed
"""

EXIT_SUCCESS = 0
"""The command completed successfully (warnings do not change this)."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or an unknown backend."""

EXIT_SPEC_PARSE_ERROR = 7
"""The document could not be read or is not valid JSON/YAML."""

EXIT_DECODE_ERROR = 8
"""The document does not match the OpenAPI 3.1 document model."""

EXIT_REFERENCE_ERROR = 9
"""A ``$ref`` pointer could not be resolved."""

EXIT_BACKEND_ERROR = 10
"""A backend failed to load or render."""
