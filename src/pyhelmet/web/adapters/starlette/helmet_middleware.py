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
"""Helmet middleware for Starlette — pure ASGI."""

from __future__ import annotations

from typing import Any

from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Receive, Scope, Send

from pyhelmet.helmet import Helmet
from pyhelmet.web.injector import HeaderInjector


class HelmetMiddleware:
    """Adds the policy set's headers to every HTTP response.

    Uses raw ASGI protocol instead of ``BaseHTTPMiddleware`` so streaming
    responses and background tasks are not buffered. Headers are appended to
    the ``http.response.start`` message, so lines set by the application are
    kept alongside the injected ones. If the application raises before
    starting a response, nothing is added and the error propagates.

    Starlette instantiates middleware lazily, on the first ASGI call, so a
    *helmet* passed here is only validated then. Pass a pre-built
    :class:`HeaderInjector` to fail while the application is being defined::

        app = Starlette(
            routes=routes,
            middleware=[Middleware(HelmetMiddleware, injector=HeaderInjector(helmet))],
        )

    Raises:
        ValueError: If both *helmet* and *injector* are given.
    """

    def __init__(
        self,
        app: ASGIApp,
        helmet: Helmet | None = None,
        *,
        injector: HeaderInjector | None = None,
    ) -> None:
        if injector is not None and helmet is not None:
            raise ValueError("Pass either helmet or injector, not both")
        self.app = app
        self._injector = injector if injector is not None else HeaderInjector(helmet)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        injector = self._injector

        async def send_with_headers(message: Any) -> None:
            if message["type"] == "http.response.start":
                injector.apply(MutableHeaders(scope=message))
            await send(message)

        await self.app(scope, receive, send_with_headers)
