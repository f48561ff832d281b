import time
from fastapi import APIRouter, Depends, status

from src.config import Settings, get_settings

router = APIRouter(tags=["Healthcheck"])

_started_at = time.monotonic()


def get_uptime_seconds() -> float:
    return time.monotonic() - _started_at


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Service is alive",
            "content": {
                "application/json": {
                    "example": {
                        "status": "healthy",
                        "version": "v1",
                        "uptime": "12.34s",
                        "env": "development",
                    }
                }
            },
        },
    },
)
def healthcheck(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "uptime": f"{get_uptime_seconds():.2f}s",
        "env": settings.ENVIRONMENT,
    }


@router.get("/", include_in_schema=False)
def root(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    prefix = f"{settings.API_PREFIX}/tasks"
    return {
        "name": settings.API_NAME,
        "version": settings.APP_VERSION,
        "docs": (
            f"GET {prefix} | POST {prefix} | "
            f"PUT {prefix}/:id | DELETE {prefix}/:id"
        ),
    }
