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
"""Content-Security-Policy header and its directive assembler.

A policy is an ordered list of directives. Each directive renders as its
keyword followed by its source values, space separated; the policy value joins
every directive with ``; `` in insertion order. Source values are emitted
verbatim, so quoting keywords such as ``'self'`` is up to the caller::

    csp = (
        ContentSecurityPolicy()
        .default_src("'self'")
        .script_src("'self'", "https://cdn.example.com")
        .report_to("https://example.com/csp")
        .report_only()
    )
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum


class Directive(StrEnum):
    """Directive keywords understood by :class:`ContentSecurityPolicy`."""

    CHILD_SRC = "child-src"
    CONNECT_SRC = "connect-src"
    DEFAULT_SRC = "default-src"
    FONT_SRC = "font-src"
    FRAME_SRC = "frame-src"
    IMG_SRC = "img-src"
    MANIFEST_SRC = "manifest-src"
    MEDIA_SRC = "media-src"
    OBJECT_SRC = "object-src"
    PREFETCH_SRC = "prefetch-src"
    SCRIPT_SRC = "script-src"
    SCRIPT_SRC_ELEM = "script-src-elem"
    SCRIPT_SRC_ATTR = "script-src-attr"
    STYLE_SRC = "style-src"
    STYLE_SRC_ELEM = "style-src-elem"
    STYLE_SRC_ATTR = "style-src-attr"
    WORKER_SRC = "worker-src"
    BASE_URI = "base-uri"
    SANDBOX = "sandbox"
    FORM_ACTION = "form-action"
    FRAME_ANCESTORS = "frame-ancestors"
    REPORT_TO = "report-to"
    REQUIRE_TRUSTED_TYPES_FOR = "require-trusted-types-for"
    TRUSTED_TYPES = "trusted-types"
    UPGRADE_INSECURE_REQUESTS = "upgrade-insecure-requests"


@dataclass(frozen=True)
class CSPDirective:
    """A single policy clause: a keyword and its ordered source values."""

    keyword: Directive
    values: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "keyword", Directive(self.keyword))
        if isinstance(self.values, str):
            raise TypeError(f"{self.keyword} values must be a sequence of strings, not a single str")
        object.__setattr__(self, "values", tuple(self.values))
        if self.keyword is Directive.UPGRADE_INSECURE_REQUESTS and self.values:
            raise ValueError("upgrade-insecure-requests does not take values")

    def render(self) -> str:
        joined = " ".join(self.values)
        # report-uri fallback for user agents without Reporting API support
        if self.keyword is Directive.REPORT_TO:
            if not joined:
                return "report-to; report-uri"
            return f"report-to {joined}; report-uri {joined}"
        if not joined:
            return str(self.keyword)
        return f"{self.keyword} {joined}"


@dataclass(frozen=True)
class ContentSecurityPolicy:
    """Controls which resources the user agent may load for the page.

    With ``report_only`` set, the policy is sent as
    ``Content-Security-Policy-Report-Only``: violations are reported to the
    ``report-to`` endpoint but not blocked. The value is the same either way.
    """

    directives: tuple[CSPDirective, ...] = ()
    reporting_only: bool = False

    @classmethod
    def default(cls) -> ContentSecurityPolicy:
        """Baseline policy.

        ``default-src 'self'; base-uri 'self'; font-src 'self' https: data:;
        form-action 'self'; frame-ancestors 'self'; img-src 'self' data:;
        object-src 'none'; script-src 'self'; script-src-attr 'none';
        style-src 'self' https: 'unsafe-inline'; upgrade-insecure-requests``
        """
        return (
            cls()
            .default_src("'self'")
            .base_uri("'self'")
            .font_src("'self'", "https:", "data:")
            .form_action("'self'")
            .frame_ancestors("'self'")
            .img_src("'self'", "data:")
            .object_src("'none'")
            .script_src("'self'")
            .script_src_attr("'none'")
            .style_src("'self'", "https:", "'unsafe-inline'")
            .upgrade_insecure_requests()
        )

    def directive(self, directive: CSPDirective) -> ContentSecurityPolicy:
        """Return a copy with *directive* appended."""
        return replace(self, directives=(*self.directives, directive))

    def _add(self, keyword: Directive, values: tuple[str, ...]) -> ContentSecurityPolicy:
        return self.directive(CSPDirective(keyword, values))

    # -- fetch directives --

    def child_src(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.CHILD_SRC, values)

    def connect_src(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.CONNECT_SRC, values)

    def default_src(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.DEFAULT_SRC, values)

    def font_src(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.FONT_SRC, values)

    def frame_src(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.FRAME_SRC, values)

    def img_src(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.IMG_SRC, values)

    def manifest_src(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.MANIFEST_SRC, values)

    def media_src(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.MEDIA_SRC, values)

    def object_src(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.OBJECT_SRC, values)

    def prefetch_src(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.PREFETCH_SRC, values)

    def script_src(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.SCRIPT_SRC, values)

    def script_src_elem(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.SCRIPT_SRC_ELEM, values)

    def script_src_attr(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.SCRIPT_SRC_ATTR, values)

    def style_src(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.STYLE_SRC, values)

    def style_src_elem(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.STYLE_SRC_ELEM, values)

    def style_src_attr(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.STYLE_SRC_ATTR, values)

    def worker_src(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.WORKER_SRC, values)

    # -- document directives --

    def base_uri(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.BASE_URI, values)

    def sandbox(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.SANDBOX, values)

    # -- navigation directives --

    def form_action(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.FORM_ACTION, values)

    def frame_ancestors(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.FRAME_ANCESTORS, values)

    # -- reporting --

    def report_to(self, *values: str) -> ContentSecurityPolicy:
        """Report violations to *values*, also emitted as ``report-uri``."""
        return self._add(Directive.REPORT_TO, values)

    # -- trusted types --

    def require_trusted_types_for(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.REQUIRE_TRUSTED_TYPES_FOR, values)

    def trusted_types(self, *values: str) -> ContentSecurityPolicy:
        return self._add(Directive.TRUSTED_TYPES, values)

    def upgrade_insecure_requests(self) -> ContentSecurityPolicy:
        return self._add(Directive.UPGRADE_INSECURE_REQUESTS, ())

    def report_only(self) -> ContentSecurityPolicy:
        """Return a copy sent as ``Content-Security-Policy-Report-Only``."""
        return replace(self, reporting_only=True)

    def name(self) -> str:
        if self.reporting_only:
            return "Content-Security-Policy-Report-Only"
        return "Content-Security-Policy"

    def value(self) -> str:
        return "; ".join(d.render() for d in self.directives)
