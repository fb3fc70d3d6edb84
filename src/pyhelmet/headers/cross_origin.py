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
"""Cross-origin isolation headers.

Covers ``Cross-Origin-Embedder-Policy``, ``Cross-Origin-Opener-Policy``,
``Cross-Origin-Resource-Policy`` and ``Origin-Agent-Cluster``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class EmbedderPolicy(StrEnum):
    """Tokens accepted by ``Cross-Origin-Embedder-Policy``."""

    UNSAFE_NONE = "unsafe-none"
    REQUIRE_CORP = "require-corp"
    CREDENTIALLESS = "credentialless"


class OpenerPolicy(StrEnum):
    """Tokens accepted by ``Cross-Origin-Opener-Policy``."""

    SAME_ORIGIN = "same-origin"
    SAME_ORIGIN_ALLOW_POPUPS = "same-origin-allow-popups"
    UNSAFE_NONE = "unsafe-none"


class ResourcePolicy(StrEnum):
    """Tokens accepted by ``Cross-Origin-Resource-Policy``."""

    SAME_ORIGIN = "same-origin"
    SAME_SITE = "same-site"
    CROSS_ORIGIN = "cross-origin"


@dataclass(frozen=True)
class CrossOriginEmbedderPolicy:
    """Prevents a document from loading cross-origin resources that do not
    explicitly grant it permission (via CORP or CORS).

    Usage::

        CrossOriginEmbedderPolicy.require_corp()
        CrossOriginEmbedderPolicy("credentialless")
    """

    policy: EmbedderPolicy

    def __post_init__(self) -> None:
        object.__setattr__(self, "policy", EmbedderPolicy(self.policy))

    @classmethod
    def unsafe_none(cls) -> CrossOriginEmbedderPolicy:
        return cls(EmbedderPolicy.UNSAFE_NONE)

    @classmethod
    def require_corp(cls) -> CrossOriginEmbedderPolicy:
        return cls(EmbedderPolicy.REQUIRE_CORP)

    @classmethod
    def credentialless(cls) -> CrossOriginEmbedderPolicy:
        """Like ``require-corp`` but no-cors requests are sent without credentials."""
        return cls(EmbedderPolicy.CREDENTIALLESS)

    def name(self) -> str:
        return "Cross-Origin-Embedder-Policy"

    def value(self) -> str:
        return str(self.policy)


@dataclass(frozen=True)
class CrossOriginOpenerPolicy:
    """Isolates the browsing context from cross-origin documents opened by or
    opening this one."""

    policy: OpenerPolicy

    def __post_init__(self) -> None:
        object.__setattr__(self, "policy", OpenerPolicy(self.policy))

    @classmethod
    def same_origin(cls) -> CrossOriginOpenerPolicy:
        return cls(OpenerPolicy.SAME_ORIGIN)

    @classmethod
    def same_origin_allow_popups(cls) -> CrossOriginOpenerPolicy:
        return cls(OpenerPolicy.SAME_ORIGIN_ALLOW_POPUPS)

    @classmethod
    def unsafe_none(cls) -> CrossOriginOpenerPolicy:
        return cls(OpenerPolicy.UNSAFE_NONE)

    def name(self) -> str:
        return "Cross-Origin-Opener-Policy"

    def value(self) -> str:
        return str(self.policy)


@dataclass(frozen=True)
class CrossOriginResourcePolicy:
    """Asks the browser to block no-cors cross-origin/cross-site reads of the resource."""

    policy: ResourcePolicy

    def __post_init__(self) -> None:
        object.__setattr__(self, "policy", ResourcePolicy(self.policy))

    @classmethod
    def same_origin(cls) -> CrossOriginResourcePolicy:
        return cls(ResourcePolicy.SAME_ORIGIN)

    @classmethod
    def same_site(cls) -> CrossOriginResourcePolicy:
        return cls(ResourcePolicy.SAME_SITE)

    @classmethod
    def cross_origin(cls) -> CrossOriginResourcePolicy:
        return cls(ResourcePolicy.CROSS_ORIGIN)

    def name(self) -> str:
        return "Cross-Origin-Resource-Policy"

    def value(self) -> str:
        return str(self.policy)


@dataclass(frozen=True)
class OriginAgentCluster:
    """Requests that the document be placed in an origin-keyed agent cluster.

    Rendered as a structured-field boolean: ``?1`` when enabled, ``?0`` otherwise.
    """

    enabled: bool = True

    def name(self) -> str:
        return "Origin-Agent-Cluster"

    def value(self) -> str:
        return "?1" if self.enabled else "?0"
