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
"""Legacy ``X-*`` hardening headers.

Most of these predate modern equivalents (CSP ``frame-ancestors``,
``Cross-Origin-*`` policies) but are still honoured by older user agents.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum


class DNSPrefetch(StrEnum):
    OFF = "off"
    ON = "on"


class FrameOption(StrEnum):
    DENY = "deny"
    SAME_ORIGIN = "same-origin"
    ALLOW_FROM = "allow-from"


class CrossDomainPolicy(StrEnum):
    NONE = "none"
    MASTER_ONLY = "master-only"
    BY_CONTENT_TYPE = "by-content-type"
    BY_FTP_FILENAME = "by-ftp-filename"
    ALL = "all"


@dataclass(frozen=True)
class XContentTypeOptions:
    """Opts out of MIME type sniffing. ``nosniff`` is the only defined value."""

    @classmethod
    def nosniff(cls) -> XContentTypeOptions:
        return cls()

    def name(self) -> str:
        return "X-Content-Type-Options"

    def value(self) -> str:
        return "nosniff"


@dataclass(frozen=True)
class XDNSPrefetchControl:
    """Controls browser DNS prefetching of links on the page."""

    mode: DNSPrefetch

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", DNSPrefetch(self.mode))

    @classmethod
    def off(cls) -> XDNSPrefetchControl:
        return cls(DNSPrefetch.OFF)

    @classmethod
    def on(cls) -> XDNSPrefetchControl:
        return cls(DNSPrefetch.ON)

    def name(self) -> str:
        return "X-DNS-Prefetch-Control"

    def value(self) -> str:
        return str(self.mode)


@dataclass(frozen=True)
class XDownloadOptions:
    """Stops Internet Explorer from opening downloads in the site's context."""

    @classmethod
    def noopen(cls) -> XDownloadOptions:
        return cls()

    def name(self) -> str:
        return "X-Download-Options"

    def value(self) -> str:
        return "noopen"


@dataclass(frozen=True)
class XFrameOptions:
    """Controls whether the page may be rendered inside a frame.

    Values are emitted upper-case (``DENY``, ``SAMEORIGIN``, ``ALLOW-FROM <uri>``).
    ``allow-from`` is deprecated and ignored by modern browsers; prefer the CSP
    ``frame-ancestors`` directive.
    """

    option: FrameOption
    uri: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "option", FrameOption(self.option))
        if self.option is FrameOption.ALLOW_FROM and self.uri is None:
            raise ValueError("allow-from requires a uri")

    @classmethod
    def deny(cls) -> XFrameOptions:
        return cls(FrameOption.DENY)

    @classmethod
    def same_origin(cls) -> XFrameOptions:
        return cls(FrameOption.SAME_ORIGIN)

    @classmethod
    def allow_from(cls, uri: str) -> XFrameOptions:
        return cls(FrameOption.ALLOW_FROM, uri)

    def name(self) -> str:
        return "X-Frame-Options"

    def value(self) -> str:
        if self.option is FrameOption.ALLOW_FROM:
            return f"ALLOW-FROM {self.uri}"
        if self.option is FrameOption.SAME_ORIGIN:
            return "SAMEORIGIN"
        return "DENY"


@dataclass(frozen=True)
class XPermittedCrossDomainPolicies:
    """Restricts Adobe Flash / Acrobat cross-domain policy file loading."""

    policy: CrossDomainPolicy

    def __post_init__(self) -> None:
        object.__setattr__(self, "policy", CrossDomainPolicy(self.policy))

    @classmethod
    def none(cls) -> XPermittedCrossDomainPolicies:
        return cls(CrossDomainPolicy.NONE)

    @classmethod
    def master_only(cls) -> XPermittedCrossDomainPolicies:
        return cls(CrossDomainPolicy.MASTER_ONLY)

    @classmethod
    def by_content_type(cls) -> XPermittedCrossDomainPolicies:
        return cls(CrossDomainPolicy.BY_CONTENT_TYPE)

    @classmethod
    def by_ftp_filename(cls) -> XPermittedCrossDomainPolicies:
        return cls(CrossDomainPolicy.BY_FTP_FILENAME)

    @classmethod
    def all(cls) -> XPermittedCrossDomainPolicies:
        return cls(CrossDomainPolicy.ALL)

    def name(self) -> str:
        return "X-Permitted-Cross-Domain-Policies"

    def value(self) -> str:
        return str(self.policy)


@dataclass(frozen=True)
class XXSSProtection:
    """Controls the legacy browser XSS auditor.

    Modern guidance is to disable it (``0``) and rely on CSP instead::

        XXSSProtection.off()
        XXSSProtection.on().mode_block().report("https://example.com/xss")

    ``block`` and ``report_uri`` are only rendered when ``enabled`` is true.
    """

    enabled: bool = False
    block: bool = False
    report_uri: str | None = None

    @classmethod
    def off(cls) -> XXSSProtection:
        return cls(enabled=False)

    @classmethod
    def on(cls) -> XXSSProtection:
        return cls(enabled=True)

    def mode_block(self) -> XXSSProtection:
        return replace(self, block=True)

    def report(self, uri: str) -> XXSSProtection:
        return replace(self, report_uri=uri)

    def name(self) -> str:
        return "X-XSS-Protection"

    def value(self) -> str:
        if not self.enabled:
            return "0"
        parts = ["1"]
        if self.block:
            parts.append("mode=block")
        if self.report_uri is not None:
            parts.append(f"report={self.report_uri}")
        return "; ".join(parts)


@dataclass(frozen=True)
class XPoweredBy:
    """Sets ``X-Powered-By`` to an arbitrary string, e.g. to mislead fingerprinting."""

    comment: str

    def name(self) -> str:
        return "X-Powered-By"

    def value(self) -> str:
        return self.comment
