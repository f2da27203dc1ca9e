"""Documentation-header synthesis and the code generator driver.

The header is assembled from ``info`` and the root ``externalDocs``::

    ${info.title}

    ${info.description || info.summary}.

    ${externalDocs.description || "More documentation at"}: <${externalDocs.url}>.

    Version: ${info.version}
    Contact: ${contact.name} <${contact.email}>
    License: ${license.name} (${license.identifier}) ${license.url}
    Terms of Service: ${info.termsOfService}

Optional parts are left out when the document does not provide them. The
text may contain CommonMark (the external-docs URL is written as an
autolink); the backend decides how to embed it in the target language.

While synthesizing, root-level features that generation does not handle
are collected as warnings. Warnings never stop generation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, TextIO

from oasgen.code.backend import Backend
from oasgen.model.document import Spec
from oasgen.model.info import Contact, ExternalDocument, Info, License

logger = logging.getLogger(__name__)

__all__ = [
    "Generator",
    "ModuleDocs",
    "render_module_docs",
    "synthesize_module_docs",
    "unsupported_features",
]

DEFAULT_EXTERNAL_DOCS_LABEL = "More documentation at"


@dataclass(frozen=True)
class ModuleDocs:
    """The synthesized module documentation and the warnings raised on the way."""

    text: str
    warnings: list[str] = field(default_factory=list)


def render_module_docs(info: Info, external_docs: Optional[ExternalDocument] = None) -> str:
    """Build the documentation header text.

    Args:
        info: The document's Info object.
        external_docs: The root-level external documentation, if any.

    Returns:
        The header text, without a trailing newline.
    """
    parts = [info.title]

    text = info.description if info.description is not None else info.summary
    if text is not None:
        parts.append("\n\n")
        parts.append(text if text.endswith(".") else text + ".")

    if external_docs is not None:
        parts.append("\n\n")
        parts.append(_external_docs_line(external_docs))

    parts.append("\n\nVersion: ")
    parts.append(info.version)

    if info.contact is not None:
        parts.append(_contact_line(info.contact))
    if info.license is not None:
        parts.append(_license_line(info.license))
    if info.terms_of_service is not None:
        parts.append("\nTerms of Service: ")
        parts.append(info.terms_of_service)

    return "".join(parts)


def _external_docs_line(docs: ExternalDocument) -> str:
    if docs.description is None:
        label = DEFAULT_EXTERNAL_DOCS_LABEL
    else:
        label = docs.description[:-1] if docs.description.endswith(".") else docs.description
    return f"{label}: <{docs.url}>."


def _contact_line(contact: Contact) -> str:
    if contact.name is not None and contact.email is not None:
        return f"\nContact: {contact.name} <{contact.email}>"
    if contact.name is not None:
        return f"\nContact: {contact.name}"
    if contact.email is not None:
        return f"\nContact: {contact.email}"
    return ""


def _license_line(license: License) -> str:
    line = f"\nLicense: {license.name}"
    if license.identifier is not None:
        line += f" ({license.identifier})"
    if license.url is not None:
        line += f" {license.url}"
    return line


def unsupported_features(spec: Spec) -> list[str]:
    """Return a warning for each root-level feature that generation ignores.

    The checks are independent; the order of the result is fixed:
    ``jsonSchemaDialect``, ``webhooks``, ``security``.
    """
    warnings: list[str] = []
    if spec.json_schema_dialect is not None:
        warnings.append("$root.jsonSchemaDialect not supported")
    if spec.webhooks:
        warnings.append("$root.webhooks not supported")
    if spec.security:
        warnings.append("$root.security not supported")
    return warnings


def synthesize_module_docs(spec: Spec) -> ModuleDocs:
    """Synthesize the header text of *spec* together with its warnings."""
    return ModuleDocs(
        text=render_module_docs(spec.info, spec.external_docs),
        warnings=unsupported_features(spec),
    )


class Generator:
    """Drives a :class:`~oasgen.code.backend.Backend` over a document.

    Example::

        generator = Generator(get_backend("rust"))
        warnings = generator.write_to(spec, sys.stdout)
    """

    def __init__(self, backend: Backend):
        self.backend = backend

    def write_to(self, spec: Spec, out: TextIO) -> list[str]:
        """Write the generated code for *spec* to *out*.

        Writes are not buffered; wrap *out* if that matters.

        Returns:
            The warnings collected along the way, possibly empty.
        """
        docs = synthesize_module_docs(spec)
        logger.debug(
            "Writing module docs for '%s' with backend '%s'",
            spec.info.title,
            self.backend.name,
        )
        self.backend.module_docs(docs.text, out)
        out.flush()
        return list(docs.warnings)
