"""Tests for oasgen.code.generator -- header synthesis and warnings."""

from __future__ import annotations

import io
from typing import Any

import pytest

from oasgen.code import (
    Generator,
    NullBackend,
    RustBackend,
    render_module_docs,
    synthesize_module_docs,
    unsupported_features,
)
from oasgen.model import Contact, ExternalDocument, Info, License, PathItem, Spec
from oasgen.parser.codec import decode_spec


def _info(**fields: Any) -> Info:
    fields.setdefault("title", "Pet Store")
    fields.setdefault("version", "1.0.0")
    return Info(**fields)


def _spec(**fields: Any) -> Spec:
    fields.setdefault("info", _info())
    return Spec(openapi="3.1.0", **fields)


# ---------------------------------------------------------------------------
# Header text
# ---------------------------------------------------------------------------


class TestRenderModuleDocs:
    """The header text, part by part."""

    def test_minimal(self) -> None:
        assert render_module_docs(_info()) == "Pet Store\n\nVersion: 1.0.0"

    def test_summary_is_used_without_description(self) -> None:
        docs = render_module_docs(_info(summary="Sells pets"))

        assert docs.startswith("Pet Store\n\nSells pets.\n\nVersion: 1.0.0")

    def test_description_wins_over_summary(self) -> None:
        docs = render_module_docs(_info(summary="Short", description="Long text"))

        assert docs == "Pet Store\n\nLong text.\n\nVersion: 1.0.0"

    def test_trailing_period_is_not_doubled(self) -> None:
        docs = render_module_docs(_info(description="Sells pets."))

        assert "Sells pets.\n" in docs
        assert ".." not in docs

    def test_multi_line_description_is_kept(self) -> None:
        docs = render_module_docs(_info(description="Line one\nLine two"))

        assert docs.startswith("Pet Store\n\nLine one\nLine two.\n\n")

    def test_external_docs_with_description(self) -> None:
        docs = render_module_docs(
            _info(),
            ExternalDocument(description="Find more info here.", url="https://example.com"),
        )

        assert docs == (
            "Pet Store\n\nFind more info here: <https://example.com>.\n\nVersion: 1.0.0"
        )

    def test_external_docs_without_description(self) -> None:
        docs = render_module_docs(_info(), ExternalDocument(url="https://example.com"))

        assert "\n\nMore documentation at: <https://example.com>.\n\n" in docs

    def test_only_one_trailing_period_is_stripped(self) -> None:
        docs = render_module_docs(
            _info(), ExternalDocument(description="Wait..", url="https://example.com")
        )

        assert "Wait.: <https://example.com>." in docs

    def test_license_name_only(self) -> None:
        docs = render_module_docs(_info(license=License(name="MIT")))

        assert docs.endswith("\nLicense: MIT")

    def test_license_with_identifier_and_url(self) -> None:
        license = License(name="MIT", identifier="MIT", url="https://opensource.org/licenses/MIT")

        docs = render_module_docs(_info(license=license))

        assert docs.endswith("\nLicense: MIT (MIT) https://opensource.org/licenses/MIT")

    def test_terms_of_service(self) -> None:
        docs = render_module_docs(_info(termsOfService="https://example.com/tos"))

        assert docs.endswith("\nVersion: 1.0.0\nTerms of Service: https://example.com/tos")

    def test_full_header(self, petstore_spec: Spec) -> None:
        docs = render_module_docs(petstore_spec.info, petstore_spec.external_docs)

        assert docs == (
            "Pet Store\n"
            "\n"
            "A sample API that uses a pet store as an example.\n"
            "\n"
            "Find more info here: <https://example.com/docs>.\n"
            "\n"
            "Version: 1.0.0\n"
            "Contact: API Support <support@example.com>\n"
            "License: Apache 2.0 (Apache-2.0)\n"
            "Terms of Service: https://example.com/terms"
        )

    def test_is_deterministic(self, petstore_spec: Spec) -> None:
        first = synthesize_module_docs(petstore_spec)
        second = synthesize_module_docs(petstore_spec)

        assert first == second


class TestContactLine:
    """Exactly one contact line, built from name and email."""

    def test_name_and_email(self) -> None:
        docs = render_module_docs(_info(contact=Contact(name="Ana", email="a@x.com")))

        assert docs.endswith("\nContact: Ana <a@x.com>")
        assert docs.count("Contact:") == 1

    def test_email_only(self) -> None:
        docs = render_module_docs(_info(contact=Contact(email="a@x.com")))

        assert docs.endswith("\nContact: a@x.com")
        assert "<" not in docs

    def test_name_only(self) -> None:
        docs = render_module_docs(_info(contact=Contact(name="Ana")))

        assert docs.endswith("\nContact: Ana")

    def test_empty_contact(self) -> None:
        docs = render_module_docs(_info(contact=Contact(url="https://example.com")))

        assert docs == "Pet Store\n\nVersion: 1.0.0"


# ---------------------------------------------------------------------------
# Warnings
# ---------------------------------------------------------------------------


class TestUnsupportedFeatures:
    """Root-level features that generation ignores."""

    def test_none(self, petstore_spec: Spec) -> None:
        assert unsupported_features(petstore_spec) == []

    def test_webhooks_and_security(self) -> None:
        spec = _spec(webhooks={"newPet": PathItem()}, security=[{"api_key": []}])

        assert unsupported_features(spec) == [
            "$root.webhooks not supported",
            "$root.security not supported",
        ]

    def test_all_three_in_order(self) -> None:
        spec = _spec(
            jsonSchemaDialect="https://spec.openapis.org/oas/3.1/dialect/base",
            webhooks={"newPet": PathItem()},
            security=[{"api_key": []}],
        )

        assert unsupported_features(spec) == [
            "$root.jsonSchemaDialect not supported",
            "$root.webhooks not supported",
            "$root.security not supported",
        ]

    @pytest.mark.parametrize(
        "fields",
        [{"webhooks": {}}, {"security": []}],
    )
    def test_empty_collections_do_not_warn(self, fields: dict[str, Any]) -> None:
        assert unsupported_features(_spec(**fields)) == []

    def test_empty_security_requirement_still_warns(self) -> None:
        # [{}] makes security optional; it is still a root requirement.
        assert unsupported_features(_spec(security=[{}])) == ["$root.security not supported"]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class TestGenerator:
    """The driver renders through the backend and returns the warnings."""

    def test_write_to(self, petstore_spec: Spec) -> None:
        out = io.StringIO()

        warnings = Generator(RustBackend()).write_to(petstore_spec, out)

        assert warnings == []
        assert out.getvalue().startswith("//! Pet Store\n//! \n//! A sample API")
        assert out.getvalue().endswith("//! Terms of Service: https://example.com/terms\n")

    def test_warnings_do_not_stop_generation(self, minimal_raw: dict[str, Any]) -> None:
        spec = decode_spec(dict(minimal_raw, security=[{"api_key": []}]))
        out = io.StringIO()

        warnings = Generator(RustBackend()).write_to(spec, out)

        assert warnings == ["$root.security not supported"]
        assert out.getvalue() == "//! Minimal\n//! \n//! Version: 0.1.0\n"

    def test_null_backend_still_reports_warnings(self, minimal_raw: dict[str, Any]) -> None:
        spec = decode_spec(dict(minimal_raw, webhooks={"ping": {}}))
        out = io.StringIO()

        warnings = Generator(NullBackend()).write_to(spec, out)

        assert warnings == ["$root.webhooks not supported"]
        assert out.getvalue() == ""
