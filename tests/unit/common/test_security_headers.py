import asyncio
from typing import Any
import pytest
from fastapi import FastAPI, Response
from fastapi.testclient import TestClient

from src.common.security_headers import SecurityHeadersMiddleware


@pytest.fixture
def headers_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(
        SecurityHeadersMiddleware,
        x_content_type_options="nosniff",
        x_frame_options="SAMEORIGIN",
        referrer_policy="no-referrer",
        x_dns_prefetch_control="off",
    )

    @app.get("/tasks")
    def tasks() -> list[str]:
        return []

    @app.get("/framed")
    def framed(response: Response) -> dict[str, bool]:
        response.headers["X-Frame-Options"] = "DENY"
        return {"ok": True}

    return app


def test_adds_all_configured_headers(headers_app: FastAPI) -> None:
    response = TestClient(headers_app).get("/tasks")

    assert response.status_code == 200
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "SAMEORIGIN"
    assert response.headers["referrer-policy"] == "no-referrer"
    assert response.headers["x-dns-prefetch-control"] == "off"


def test_route_value_wins_over_configured_value(headers_app: FastAPI) -> None:
    response = TestClient(headers_app).get("/framed")

    assert response.headers["x-frame-options"] == "DENY"
    assert response.headers["referrer-policy"] == "no-referrer"


def test_headers_are_added_to_not_found_responses(headers_app: FastAPI) -> None:
    response = TestClient(headers_app).get("/missing")

    assert response.status_code == 404
    assert response.headers["x-content-type-options"] == "nosniff"


def test_only_non_blank_values_are_kept() -> None:
    middleware = SecurityHeadersMiddleware(
        FastAPI(), x_frame_options="SAMEORIGIN", referrer_policy="   "
    )

    assert middleware.headers == {"x-frame-options": "SAMEORIGIN"}


def test_non_http_scope_is_passed_through_untouched() -> None:
    seen: list[tuple[str, Any]] = []

    async def lifespan_app(scope, receive, send):  # type: ignore[no-untyped-def]
        seen.append((scope["type"], send))

    async def send(message):  # type: ignore[no-untyped-def]
        pass

    middleware = SecurityHeadersMiddleware(lifespan_app, x_frame_options="SAMEORIGIN")
    asyncio.run(middleware({"type": "lifespan"}, None, send))  # type: ignore[arg-type]

    assert seen == [("lifespan", send)]


def test_all_blank_values_skip_send_wrapping() -> None:
    seen: list[Any] = []
    sent: list[dict[str, Any]] = []

    async def app(scope, receive, send):  # type: ignore[no-untyped-def]
        seen.append(send)
        await send({"type": "http.response.start", "status": 204, "headers": []})

    async def send(message):  # type: ignore[no-untyped-def]
        sent.append(message)

    middleware = SecurityHeadersMiddleware(app, x_content_type_options="", x_frame_options=" ")
    asyncio.run(
        middleware({"type": "http", "method": "GET", "path": "/", "headers": []}, None, send)  # type: ignore[arg-type]
    )

    assert middleware.headers == {}
    assert seen == [send]
    assert sent == [{"type": "http.response.start", "status": 204, "headers": []}]
