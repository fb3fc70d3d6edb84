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
"""Header protocol — the capability every response header family implements.

Any object exposing ``name()`` and ``value()`` can be registered in a
:class:`~pyhelmet.helmet.Helmet`, so applications can define their own
header families without touching the built-ins::

    class ServerTiming:
        def name(self) -> str:
            return "Server-Timing"

        def value(self) -> str:
            return "miss"
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Header(Protocol):
    """Port defining a single response header."""

    def name(self) -> str:
        """Return the canonical header field name."""
        ...

    def value(self) -> str:
        """Return the header field value rendered from the instance state."""
        ...
