# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for ContentSecurityPolicy and its directives."""

from __future__ import annotations

import pytest

from pyhelmet.headers.csp import ContentSecurityPolicy, CSPDirective, Directive

DEFAULT_POLICY = (
    "default-src 'self'; base-uri 'self'; font-src 'self' https: data:; "
    "form-action 'self'; frame-ancestors 'self'; img-src 'self' data:; "
    "object-src 'none'; script-src 'self'; script-src-attr 'none'; "
    "style-src 'self' https: 'unsafe-inline'; upgrade-insecure-requests"
)


class TestCSPDirective:
    def test_keyword_and_values(self) -> None:
        directive = CSPDirective(Directive.SCRIPT_SRC, ("'self'", "https://cdn.example.com"))
        assert directive.render() == "script-src 'self' https://cdn.example.com"

    def test_accepts_plain_keyword(self) -> None:
        assert CSPDirective("img-src", ["data:"]).render() == "img-src data:"

    def test_unknown_keyword(self) -> None:
        with pytest.raises(ValueError):
            CSPDirective("script-source", ("'self'",))

    def test_upgrade_insecure_requests_is_bare(self) -> None:
        assert CSPDirective(Directive.UPGRADE_INSECURE_REQUESTS).render() == "upgrade-insecure-requests"

    def test_upgrade_insecure_requests_rejects_values(self) -> None:
        with pytest.raises(ValueError):
            CSPDirective(Directive.UPGRADE_INSECURE_REQUESTS, ("'self'",))

    def test_report_to_duplicates_into_report_uri(self) -> None:
        directive = CSPDirective(Directive.REPORT_TO, ("a", "b"))
        assert directive.render() == "report-to a b; report-uri a b"

    def test_values_are_not_deduplicated(self) -> None:
        directive = CSPDirective(Directive.DEFAULT_SRC, ("'self'", "'self'"))
        assert directive.render() == "default-src 'self' 'self'"

    def test_report_to_without_values_keeps_report_uri(self) -> None:
        assert CSPDirective(Directive.REPORT_TO).render() == "report-to; report-uri"

    def test_bare_string_values_rejected(self) -> None:
        with pytest.raises(TypeError):
            CSPDirective("sandbox", "allow-forms")

    def test_empty_value_list_renders_keyword_only(self) -> None:
        assert CSPDirective(Directive.SANDBOX).render() == "sandbox"


class TestContentSecurityPolicyBuilder:
    @pytest.mark.parametrize(
        ("method", "keyword"),
        [
            ("child_src", "child-src"),
            ("connect_src", "connect-src"),
            ("default_src", "default-src"),
            ("font_src", "font-src"),
            ("frame_src", "frame-src"),
            ("img_src", "img-src"),
            ("manifest_src", "manifest-src"),
            ("media_src", "media-src"),
            ("object_src", "object-src"),
            ("prefetch_src", "prefetch-src"),
            ("script_src", "script-src"),
            ("script_src_elem", "script-src-elem"),
            ("script_src_attr", "script-src-attr"),
            ("style_src", "style-src"),
            ("style_src_elem", "style-src-elem"),
            ("style_src_attr", "style-src-attr"),
            ("worker_src", "worker-src"),
            ("base_uri", "base-uri"),
            ("sandbox", "sandbox"),
            ("form_action", "form-action"),
            ("frame_ancestors", "frame-ancestors"),
            ("require_trusted_types_for", "require-trusted-types-for"),
            ("trusted_types", "trusted-types"),
        ],
    )
    def test_directive_methods(self, method: str, keyword: str) -> None:
        csp = getattr(ContentSecurityPolicy(), method)("'self'", "https://youtube.com")
        assert csp.value() == f"{keyword} 'self' https://youtube.com"

    def test_report_to(self) -> None:
        csp = ContentSecurityPolicy().report_to("a", "b")
        assert csp.value() == "report-to a b; report-uri a b"

    def test_report_to_without_endpoints(self) -> None:
        csp = ContentSecurityPolicy().default_src("'self'").report_to()
        assert csp.value() == "default-src 'self'; report-to; report-uri"

    def test_upgrade_insecure_requests(self) -> None:
        assert ContentSecurityPolicy().upgrade_insecure_requests().value() == "upgrade-insecure-requests"

    def test_insertion_order_is_preserved(self) -> None:
        csp = ContentSecurityPolicy().child_src("'self'").connect_src("'none'")
        assert csp.value() == "child-src 'self'; connect-src 'none'"

        reversed_csp = ContentSecurityPolicy().connect_src("'none'").child_src("'self'")
        assert reversed_csp.value() == "connect-src 'none'; child-src 'self'"

    def test_duplicate_directives_are_all_rendered(self) -> None:
        csp = ContentSecurityPolicy().script_src("'self'").script_src("https://a.example")
        assert csp.value() == "script-src 'self'; script-src https://a.example"

    def test_generic_directive(self) -> None:
        csp = ContentSecurityPolicy().directive(CSPDirective(Directive.MEDIA_SRC, ("media.example",)))
        assert csp.value() == "media-src media.example"

    def test_report_to_in_the_middle(self) -> None:
        csp = (
            ContentSecurityPolicy()
            .default_src("'self'")
            .report_to("https://example.com/report")
            .img_src("data:")
        )
        assert csp.value() == (
            "default-src 'self'; report-to https://example.com/report; "
            "report-uri https://example.com/report; img-src data:"
        )

    def test_builder_returns_new_instance(self) -> None:
        base = ContentSecurityPolicy().default_src("'self'")
        extended = base.img_src("data:")
        assert base.value() == "default-src 'self'"
        assert extended.value() == "default-src 'self'; img-src data:"

    def test_empty_policy(self) -> None:
        assert ContentSecurityPolicy().value() == ""


class TestContentSecurityPolicyDefault:
    def test_default_value(self) -> None:
        assert ContentSecurityPolicy.default().value() == DEFAULT_POLICY

    def test_default_name(self) -> None:
        assert ContentSecurityPolicy.default().name() == "Content-Security-Policy"

    def test_rendering_is_idempotent(self) -> None:
        csp = ContentSecurityPolicy.default()
        assert csp.value() == csp.value()
        assert ContentSecurityPolicy.default() == csp


class TestReportOnly:
    def test_report_only_switches_name(self) -> None:
        csp = ContentSecurityPolicy().child_src("'self'").report_to("https://example.com/report").report_only()
        assert csp.name() == "Content-Security-Policy-Report-Only"

    def test_report_only_keeps_value(self) -> None:
        csp = ContentSecurityPolicy.default()
        assert csp.report_only().value() == csp.value()

    def test_directives_after_report_only_keep_mode(self) -> None:
        csp = ContentSecurityPolicy().report_only().default_src("'self'")
        assert csp.name() == "Content-Security-Policy-Report-Only"
        assert csp.value() == "default-src 'self'"
