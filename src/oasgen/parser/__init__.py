"""Document codec -- load JSON/YAML, decode into the model, encode back.

Typical usage::

    from oasgen.parser import read_spec, dumps

    spec = read_spec("petstore.yaml")
    print(dumps(spec, "yaml"))

Sub-modules:

* :mod:`~oasgen.parser.loader` -- file/stdin I/O and JSON/YAML parsing into
  plain containers, selected by file extension.
* :mod:`~oasgen.parser.codec` -- decoding raw trees into the typed model
  (and encoding back), plus OpenAPI version validation.
* :mod:`~oasgen.parser.resolver` -- following in-document ``$ref`` pointers
  with cycle detection.
"""

from oasgen.parser.codec import decode, decode_spec, dumps, encode, read_spec
from oasgen.parser.loader import load_document, parse_content
from oasgen.parser.resolver import Resolver, resolve

__all__ = [
    "Resolver",
    "decode",
    "decode_spec",
    "dumps",
    "encode",
    "load_document",
    "parse_content",
    "read_spec",
    "resolve",
]
