import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.common.access_log import log_request, respond_to_unexpected_errors
from src.common.exceptions import (
    ResourceNotFoundException,
    TaskValidationException,
    http_exception_handler,
    internal_error_response,
    resource_not_found_handler,
    task_validation_exception_handler,
    unexpected_exception_handler,
    validation_error_response,
    validation_exception_handler,
)
from src.common.opentelemetry import setup_opentelemetry
from src.common.security_headers import SecurityHeadersMiddleware
from src.config import get_settings
from src.healthcheck.router import router as health_router
from src.tasks.router import router as tasks_router
from src.tasks.seed import SAMPLE_TASKS
from src.tasks.store import TaskStore

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    task_store = TaskStore()
    if settings.SEED_SAMPLE_TASKS:
        seeded = task_store.seed(SAMPLE_TASKS)
        logger.info("Loaded %d sample tasks", seeded)
    app.state.task_store = task_store
    yield


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    lifespan=lifespan,
    responses={
        **internal_error_response,
        **validation_error_response,
    },
    version=settings.APP_VERSION,
)

if settings.OTEL_ENABLED:
    setup_opentelemetry(settings.OTEL_SERVICE_NAME, app)

# Registered first so it sits innermost, under CORS and security headers
if settings.ACCESS_LOG_ENABLED:
    app.middleware("http")(log_request)
else:
    app.middleware("http")(respond_to_unexpected_errors)

if settings.CORS_ENABLED:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

if settings.SECURITY_HEADERS_ENABLED:
    app.add_middleware(
        SecurityHeadersMiddleware,
        x_content_type_options="nosniff",
        x_frame_options="SAMEORIGIN",
        referrer_policy="no-referrer",
        x_dns_prefetch_control="off",
    )

app.exception_handler(RequestValidationError)(validation_exception_handler)
app.exception_handler(TaskValidationException)(task_validation_exception_handler)
app.exception_handler(ResourceNotFoundException)(resource_not_found_handler)
app.exception_handler(StarletteHTTPException)(http_exception_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(tasks_router, prefix=settings.API_PREFIX)
