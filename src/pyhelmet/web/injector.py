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
"""HeaderInjector — appends a pre-rendered policy set to outgoing responses."""

from __future__ import annotations

import functools
from typing import Any

import structlog

from pyhelmet.helmet import Helmet, RenderedHeaders
from pyhelmet.web.ports.outbound import Handler, HeaderSink

logger = structlog.get_logger("pyhelmet.web")


class HeaderInjector:
    """Renders a :class:`Helmet` once and applies it to every response.

    Rendering and validation happen in the constructor, so an invalid policy
    fails at application setup rather than on the first request. The rendered
    pairs are an immutable tuple and are shared by all concurrent requests.

    Usage::

        injector = HeaderInjector(Helmet.default())

        @injector.wrap
        async def homepage(request):
            return PlainTextResponse("hello")

    Raises:
        InvalidHeaderException: If any header in *helmet* renders to an invalid
            name or value.
    """

    def __init__(self, helmet: Helmet | None = None) -> None:
        self._helmet = helmet if helmet is not None else Helmet.default()
        self._headers: RenderedHeaders = self._helmet.render()
        logger.debug(
            "headers_rendered",
            count=len(self._headers),
            names=[name for name, _ in self._headers],
        )

    @property
    def helmet(self) -> Helmet:
        return self._helmet

    @property
    def headers(self) -> RenderedHeaders:
        """The pre-rendered ``(name, value)`` pairs, in policy-set order."""
        return self._headers

    def apply(self, headers: HeaderSink) -> None:
        """Append every pair to *headers*, keeping any existing lines."""
        for name, value in self._headers:
            headers.append(name, value)

    def wrap(self, handler: Handler) -> Handler:
        """Decorate an async handler so its responses carry the policy set.

        Headers are only added once *handler* returns; if it raises, the
        exception propagates untouched.
        """

        @functools.wraps(handler)
        async def _wrapped(*args: Any, **kwargs: Any) -> Any:
            response = await handler(*args, **kwargs)
            self.apply(response.headers)
            return response

        return _wrapped
