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
"""Tests for HelmetMiddleware."""

from __future__ import annotations

from typing import Any

import pytest
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, StreamingResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from pyhelmet.headers import ContentSecurityPolicy, StrictTransportSecurity, XFrameOptions
from pyhelmet.helmet import Helmet
from pyhelmet.kernel.exceptions import InvalidHeaderException
from pyhelmet.web.adapters.starlette.helmet_middleware import HelmetMiddleware
from pyhelmet.web.injector import HeaderInjector

DEFAULT_CSP = (
    "default-src 'self'; base-uri 'self'; font-src 'self' https: data:; "
    "form-action 'self'; frame-ancestors 'self'; img-src 'self' data:; "
    "object-src 'none'; script-src 'self'; script-src-attr 'none'; "
    "style-src 'self' https: 'unsafe-inline'; upgrade-insecure-requests"
)


async def _hello(request: Request) -> JSONResponse:
    return JSONResponse({"msg": "ok"})


async def _framed(request: Request) -> PlainTextResponse:
    return PlainTextResponse("framed", headers={"X-Frame-Options": "DENY"})


async def _stream(request: Request) -> StreamingResponse:
    async def chunks():
        yield b"a"
        yield b"b"

    return StreamingResponse(chunks(), media_type="text/plain")


async def _boom(request: Request) -> PlainTextResponse:
    raise RuntimeError("boom")


def _make_client(helmet: Helmet | None = None, **kwargs: Any) -> TestClient:
    if helmet is not None:
        middleware = [Middleware(HelmetMiddleware, helmet=helmet)]
    else:
        middleware = [Middleware(HelmetMiddleware)]
    app = Starlette(
        routes=[
            Route("/hello", _hello),
            Route("/framed", _framed),
            Route("/stream", _stream),
            Route("/boom", _boom),
        ],
        middleware=middleware,
    )
    return TestClient(app, **kwargs)


class TestHelmetMiddlewareDefaults:
    def test_default_headers_applied(self) -> None:
        resp = _make_client().get("/hello")

        assert resp.status_code == 200
        assert resp.json() == {"msg": "ok"}
        assert resp.headers["Content-Security-Policy"] == DEFAULT_CSP
        assert resp.headers["Cross-Origin-Opener-Policy"] == "same-origin"
        assert resp.headers["Cross-Origin-Resource-Policy"] == "same-origin"
        assert resp.headers["Origin-Agent-Cluster"] == "?1"
        assert resp.headers["Referrer-Policy"] == "no-referrer"
        assert resp.headers["Strict-Transport-Security"] == "max-age=15552000; includeSubDomains"
        assert resp.headers["X-Content-Type-Options"] == "nosniff"
        assert resp.headers["X-DNS-Prefetch-Control"] == "off"
        assert resp.headers["X-Download-Options"] == "noopen"
        assert resp.headers["X-Frame-Options"] == "SAMEORIGIN"
        assert resp.headers["X-Permitted-Cross-Domain-Policies"] == "none"
        assert resp.headers["X-XSS-Protection"] == "0"

    def test_no_other_headers_added(self) -> None:
        resp = _make_client().get("/hello")

        injected = {name.lower() for name, _ in Helmet.default().render()}
        assert set(resp.headers.keys()) == injected | {"content-length", "content-type"}

    def test_headers_keep_policy_set_order(self) -> None:
        resp = _make_client().get("/hello")

        names = [name for name in resp.headers.keys() if name not in ("content-length", "content-type")]
        assert names == [name.lower() for name, _ in Helmet.default().render()]


class TestHelmetMiddlewareCustom:
    def test_custom_helmet(self) -> None:
        helmet = Helmet().add(XFrameOptions.deny()).add(StrictTransportSecurity().preload())
        resp = _make_client(helmet).get("/hello")

        assert resp.headers["X-Frame-Options"] == "DENY"
        assert resp.headers["Strict-Transport-Security"] == "max-age=31536000; preload"
        assert "Content-Security-Policy" not in resp.headers

    def test_report_only_policy(self) -> None:
        csp = ContentSecurityPolicy().default_src("'self'").report_to("https://example.com/csp").report_only()
        resp = _make_client(Helmet().add(csp)).get("/hello")

        assert resp.headers["Content-Security-Policy-Report-Only"] == (
            "default-src 'self'; report-to https://example.com/csp; report-uri https://example.com/csp"
        )
        assert "Content-Security-Policy" not in resp.headers

    def test_same_family_twice_yields_two_lines(self) -> None:
        helmet = Helmet().add(XFrameOptions.deny()).add(XFrameOptions.same_origin())
        resp = _make_client(helmet).get("/hello")

        assert resp.headers.get_list("X-Frame-Options") == ["DENY", "SAMEORIGIN"]

    def test_existing_header_is_preserved(self) -> None:
        resp = _make_client(Helmet().add(XFrameOptions.same_origin())).get("/framed")

        assert resp.headers.get_list("X-Frame-Options") == ["DENY", "SAMEORIGIN"]

    def test_streaming_response(self) -> None:
        resp = _make_client(Helmet().add(XFrameOptions.deny())).get("/stream")

        assert resp.text == "ab"
        assert resp.headers["X-Frame-Options"] == "DENY"

    def test_empty_helmet_adds_nothing(self) -> None:
        resp = _make_client(Helmet()).get("/hello")

        assert set(resp.headers.keys()) == {"content-length", "content-type"}

    def test_prebuilt_injector(self) -> None:
        injector = HeaderInjector(Helmet().add(XFrameOptions.deny()))
        app = Starlette(
            routes=[Route("/hello", _hello)],
            middleware=[Middleware(HelmetMiddleware, injector=injector)],
        )
        resp = TestClient(app).get("/hello")

        assert resp.headers.get_list("X-Frame-Options") == ["DENY"]


class TestHelmetMiddlewareErrors:
    def test_invalid_policy_fails_at_setup(self) -> None:
        async def app(scope, receive, send):  # noqa: ANN001
            pass

        with pytest.raises(InvalidHeaderException):
            HelmetMiddleware(app, helmet=Helmet().add(XFrameOptions.allow_from("bad\r\nuri")))

    def test_invalid_policy_fails_when_app_is_defined(self) -> None:
        bad = Helmet().add(XFrameOptions.allow_from("bad\r\nuri"))

        with pytest.raises(InvalidHeaderException):
            Starlette(
                routes=[Route("/hello", _hello)],
                middleware=[Middleware(HelmetMiddleware, injector=HeaderInjector(bad))],
            )

    def test_helmet_and_injector_are_exclusive(self) -> None:
        async def app(scope, receive, send):  # noqa: ANN001
            pass

        with pytest.raises(ValueError, match="either helmet or injector"):
            HelmetMiddleware(app, helmet=Helmet(), injector=HeaderInjector(Helmet()))

    def test_handler_error_propagates(self) -> None:
        client = _make_client()
        with pytest.raises(RuntimeError, match="boom"):
            client.get("/boom")

    def test_no_headers_on_error_response(self) -> None:
        resp = _make_client(raise_server_exceptions=False).get("/boom")

        assert resp.status_code == 500
        assert "X-Frame-Options" not in resp.headers
        assert "Content-Security-Policy" not in resp.headers


class TestHelmetMiddlewareScopes:
    @pytest.mark.asyncio
    async def test_non_http_scope_passes_through(self) -> None:
        sent: list[dict] = []

        async def app(scope, receive, send):  # noqa: ANN001
            await send({"type": "lifespan.startup.complete"})

        async def send(message: dict) -> None:
            sent.append(message)

        async def receive() -> dict:
            return {"type": "lifespan.startup"}

        middleware = HelmetMiddleware(app)
        await middleware({"type": "lifespan"}, receive, send)

        assert sent == [{"type": "lifespan.startup.complete"}]

    @pytest.mark.asyncio
    async def test_appends_to_raw_start_message(self) -> None:
        sent: list[dict] = []

        async def app(scope, receive, send):  # noqa: ANN001
            await send({"type": "http.response.start", "status": 204, "headers": [(b"x-frame-options", b"DENY")]})
            await send({"type": "http.response.body", "body": b""})

        async def send(message: dict) -> None:
            sent.append(message)

        async def receive() -> dict:
            return {"type": "http.request", "body": b""}

        middleware = HelmetMiddleware(app, helmet=Helmet().add(XFrameOptions.same_origin()))
        await middleware({"type": "http"}, receive, send)

        assert sent[0]["headers"] == [(b"x-frame-options", b"DENY"), (b"x-frame-options", b"SAMEORIGIN")]
        assert sent[1] == {"type": "http.response.body", "body": b""}
