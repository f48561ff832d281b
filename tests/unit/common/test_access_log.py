import logging
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.common.access_log import log_request, respond_to_unexpected_errors
from src.common.security_headers import SecurityHeadersMiddleware


def build_app(error_middleware) -> FastAPI:  # type: ignore[no-untyped-def]
    app = FastAPI()
    app.middleware("http")(error_middleware)
    app.add_middleware(SecurityHeadersMiddleware, x_content_type_options="nosniff")

    @app.get("/ok")
    def ok() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/fail")
    def fail() -> None:
        raise ValueError("unexpected")

    return app


@pytest.mark.parametrize("error_middleware", [log_request, respond_to_unexpected_errors])
def test_unhandled_error_becomes_500_inside_outer_middleware(error_middleware) -> None:  # type: ignore[no-untyped-def]
    client = TestClient(build_app(error_middleware))

    response = client.get("/fail")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert response.headers["x-content-type-options"] == "nosniff"


def test_respond_to_unexpected_errors_passes_responses_through() -> None:
    client = TestClient(build_app(respond_to_unexpected_errors))

    response = client.get("/ok")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_log_request_logs_status_and_duration(caplog: pytest.LogCaptureFixture) -> None:
    client = TestClient(build_app(log_request))

    with caplog.at_level(logging.INFO, logger="src.access"):
        client.get("/ok")
        client.get("/fail")

    messages = [r.getMessage() for r in caplog.records if r.name == "src.access"]
    assert [message.rsplit(" ", 1)[0] for message in messages] == [
        "GET /ok 200",
        "GET /fail 500",
    ]
    assert all(message.endswith("ms") for message in messages)


def test_unhandled_error_is_logged_with_traceback(
    caplog: pytest.LogCaptureFixture,
) -> None:
    client = TestClient(build_app(respond_to_unexpected_errors))

    with caplog.at_level(logging.ERROR, logger="src.common.exceptions"):
        client.get("/fail")

    error_records = [r for r in caplog.records if r.name == "src.common.exceptions"]
    assert len(error_records) == 1
    assert error_records[0].exc_info is not None
    assert "GET /fail" in error_records[0].getMessage()
