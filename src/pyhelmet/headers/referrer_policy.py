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
"""Referrer-Policy header."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Referrer(StrEnum):
    """Tokens accepted by ``Referrer-Policy``."""

    NO_REFERRER = "no-referrer"
    NO_REFERRER_WHEN_DOWNGRADE = "no-referrer-when-downgrade"
    ORIGIN = "origin"
    ORIGIN_WHEN_CROSS_ORIGIN = "origin-when-cross-origin"
    SAME_ORIGIN = "same-origin"
    STRICT_ORIGIN = "strict-origin"
    STRICT_ORIGIN_WHEN_CROSS_ORIGIN = "strict-origin-when-cross-origin"
    UNSAFE_URL = "unsafe-url"


@dataclass(frozen=True)
class ReferrerPolicy:
    """Controls how much referrer information is sent with requests."""

    policy: Referrer

    def __post_init__(self) -> None:
        object.__setattr__(self, "policy", Referrer(self.policy))

    @classmethod
    def no_referrer(cls) -> ReferrerPolicy:
        return cls(Referrer.NO_REFERRER)

    @classmethod
    def no_referrer_when_downgrade(cls) -> ReferrerPolicy:
        return cls(Referrer.NO_REFERRER_WHEN_DOWNGRADE)

    @classmethod
    def origin(cls) -> ReferrerPolicy:
        return cls(Referrer.ORIGIN)

    @classmethod
    def origin_when_cross_origin(cls) -> ReferrerPolicy:
        return cls(Referrer.ORIGIN_WHEN_CROSS_ORIGIN)

    @classmethod
    def same_origin(cls) -> ReferrerPolicy:
        return cls(Referrer.SAME_ORIGIN)

    @classmethod
    def strict_origin(cls) -> ReferrerPolicy:
        return cls(Referrer.STRICT_ORIGIN)

    @classmethod
    def strict_origin_when_cross_origin(cls) -> ReferrerPolicy:
        return cls(Referrer.STRICT_ORIGIN_WHEN_CROSS_ORIGIN)

    @classmethod
    def unsafe_url(cls) -> ReferrerPolicy:
        return cls(Referrer.UNSAFE_URL)

    def name(self) -> str:
        return "Referrer-Policy"

    def value(self) -> str:
        return str(self.policy)
