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
"""Strict-Transport-Security header."""

from __future__ import annotations

from dataclasses import dataclass, replace

MAX_AGE_LIMIT = 2**32 - 1


@dataclass(frozen=True)
class StrictTransportSecurity:
    """Tells browsers to only reach the host over HTTPS.

    Builder methods return a new instance::

        StrictTransportSecurity().max_age(15552000).include_sub_domains().preload()

    Attributes:
        max_age_seconds: Lifetime of the HSTS pin, an unsigned 32-bit integer.
        sub_domains: Whether the rule also covers every subdomain.
        preloaded: Whether the host consents to browser preload lists.
    """

    max_age_seconds: int = 31536000
    sub_domains: bool = False
    preloaded: bool = False

    def __post_init__(self) -> None:
        if type(self.max_age_seconds) is not int:
            raise TypeError(f"max-age must be an int, got {type(self.max_age_seconds).__name__}")
        if not 0 <= self.max_age_seconds <= MAX_AGE_LIMIT:
            raise ValueError(f"max-age must be between 0 and {MAX_AGE_LIMIT}, got {self.max_age_seconds}")

    def max_age(self, seconds: int) -> StrictTransportSecurity:
        return replace(self, max_age_seconds=seconds)

    def include_sub_domains(self) -> StrictTransportSecurity:
        return replace(self, sub_domains=True)

    def preload(self) -> StrictTransportSecurity:
        return replace(self, preloaded=True)

    def name(self) -> str:
        return "Strict-Transport-Security"

    def value(self) -> str:
        parts = [f"max-age={self.max_age_seconds}"]
        if self.sub_domains:
            parts.append("includeSubDomains")
        if self.preloaded:
            parts.append("preload")
        return "; ".join(parts)
