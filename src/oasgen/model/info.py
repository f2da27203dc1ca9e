"""Descriptive metadata objects: Info, Contact, License, ExternalDocument.

These are the only parts of a document read by the documentation-header
synthesizer (:mod:`oasgen.code.generator`); they carry no references and no
schemas.
"""

from __future__ import annotations

from typing import Optional

from oasgen.model.values import SpecModel

__all__ = ["Contact", "ExternalDocument", "Info", "License"]


class Contact(SpecModel):
    """Contact information for the exposed API."""

    name: Optional[str] = None
    url: Optional[str] = None
    email: Optional[str] = None


class License(SpecModel):
    """License information for the exposed API.

    OpenAPI declares ``identifier`` (an SPDX expression) and ``url`` mutually
    exclusive. Both are accepted here; consumers decide which one wins.
    """

    name: str
    identifier: Optional[str] = None
    url: Optional[str] = None


class Info(SpecModel):
    """Metadata about the API (the *Info Object*).

    ``version`` is the version of the described API, not of OpenAPI.
    """

    title: str
    summary: Optional[str] = None
    description: Optional[str] = None
    terms_of_service: Optional[str] = None
    contact: Optional[Contact] = None
    license: Optional[License] = None
    version: str


class ExternalDocument(SpecModel):
    """A link to additional external documentation."""

    description: Optional[str] = None
    url: str
