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
"""Helmet — the ordered policy set of response headers.

Usage::

    helmet = Helmet.default()

    helmet = (
        Helmet()
        .add(StrictTransportSecurity().max_age(31536000).include_sub_domains())
        .add(XFrameOptions.deny())
    )

Headers are emitted in the order they were added. Nothing is de-duplicated:
adding the same family twice produces two header lines.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

import structlog

from pyhelmet.headers import (
    ContentSecurityPolicy,
    CrossOriginOpenerPolicy,
    CrossOriginResourcePolicy,
    Header,
    OriginAgentCluster,
    ReferrerPolicy,
    StrictTransportSecurity,
    XContentTypeOptions,
    XDNSPrefetchControl,
    XDownloadOptions,
    XFrameOptions,
    XPermittedCrossDomainPolicies,
    XXSSProtection,
)
from pyhelmet.kernel.exceptions import InvalidHeaderException

if TYPE_CHECKING:
    from pyhelmet.core.config import Config

logger = structlog.get_logger("pyhelmet.helmet")

# RFC 9110 section 5.1 (token) and 5.5 (field-value, obs-text allowed)
_TOKEN_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
_FIELD_VALUE_RE = re.compile(r"(?:[\x21-\x7e\x80-\xff](?:[\t\x20-\x7e\x80-\xff]*[\x21-\x7e\x80-\xff])?)?")

RenderedHeaders = tuple[tuple[str, str], ...]


class Helmet:
    """Immutable, ordered collection of :class:`Header` instances."""

    def __init__(self, headers: Iterable[Header] = ()) -> None:
        self._headers: tuple[Header, ...] = tuple(_require_header(h) for h in headers)

    @classmethod
    def default(cls) -> Helmet:
        """Baseline policy set.

        ::

            Content-Security-Policy: <ContentSecurityPolicy.default()>
            Cross-Origin-Opener-Policy: same-origin
            Cross-Origin-Resource-Policy: same-origin
            Origin-Agent-Cluster: ?1
            Referrer-Policy: no-referrer
            Strict-Transport-Security: max-age=15552000; includeSubDomains
            X-Content-Type-Options: nosniff
            X-DNS-Prefetch-Control: off
            X-Download-Options: noopen
            X-Frame-Options: SAMEORIGIN
            X-Permitted-Cross-Domain-Policies: none
            X-XSS-Protection: 0
        """
        return cls(
            [
                ContentSecurityPolicy.default(),
                CrossOriginOpenerPolicy.same_origin(),
                CrossOriginResourcePolicy.same_origin(),
                OriginAgentCluster(True),
                ReferrerPolicy.no_referrer(),
                StrictTransportSecurity().max_age(15552000).include_sub_domains(),
                XContentTypeOptions.nosniff(),
                XDNSPrefetchControl.off(),
                XDownloadOptions.noopen(),
                XFrameOptions.same_origin(),
                XPermittedCrossDomainPolicies.none(),
                XXSSProtection.off(),
            ]
        )

    @classmethod
    def from_config(cls, config: Config) -> Helmet:
        """Build a policy set from the ``pyhelmet.helmet`` configuration section.

        When ``pyhelmet.logging.enabled`` is true, pyhelmet's logging is
        configured from ``pyhelmet.logging`` first.
        """
        from pyhelmet.config.factory import helmet_from_config

        return helmet_from_config(config)

    @property
    def headers(self) -> tuple[Header, ...]:
        return self._headers

    def add(self, header: Header) -> Helmet:
        """Return a new set with *header* appended."""
        return Helmet((*self._headers, header))

    def render(self) -> RenderedHeaders:
        """Render every header into a validated ``(name, value)`` pair.

        Raises:
            InvalidHeaderException: If a name is not an HTTP token or a value
                contains characters not allowed in a header field.
        """
        rendered: list[tuple[str, str]] = []
        for header in self._headers:
            name, value = header.name(), header.value()
            if not _TOKEN_RE.fullmatch(name):
                logger.error("invalid_header_name", header=name)
                raise InvalidHeaderException(f"Invalid header name: {name!r}", name, value)
            if not _FIELD_VALUE_RE.fullmatch(value):
                logger.error("invalid_header_value", header=name, value=value)
                raise InvalidHeaderException(f"Invalid value for header {name}: {value!r}", name, value)
            rendered.append((name, value))
        return tuple(rendered)

    def __iter__(self) -> Iterator[Header]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __add__(self, other: object) -> Helmet:
        if not isinstance(other, Helmet):
            return NotImplemented
        return Helmet((*self._headers, *other._headers))

    def __repr__(self) -> str:
        names = ", ".join(h.name() for h in self._headers)
        return f"Helmet([{names}])"


def _require_header(header: object) -> Header:
    if not isinstance(header, Header):
        raise TypeError(f"{type(header).__name__} does not implement name() and value()")
    return header
