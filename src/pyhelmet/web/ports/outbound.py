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
"""Outbound ports: what the host web framework must provide to the injector.

Uses generic ``Any`` types for Request/Response so that vendor-specific
types (e.g. Starlette) remain confined to the adapter layer.
"""

from __future__ import annotations

from collections.abc import Callable, Coroutine
from typing import Any, Protocol, runtime_checkable

# Type alias for a downstream request handler.
# Concrete type: Callable[[Request], Coroutine[Any, Any, Response]]
Handler = Callable[..., Coroutine[Any, Any, Any]]


@runtime_checkable
class HeaderSink(Protocol):
    """A response header collection that keeps insertion order and duplicates.

    Starlette's ``MutableHeaders`` satisfies this protocol.
    """

    def append(self, key: str, value: str) -> None:
        """Add a header line without replacing existing ones of the same name."""
        ...
