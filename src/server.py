import logging
import uvicorn

from src.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)
    logger.info(
        "%s running on port %d (version %s, env %s)",
        settings.API_NAME,
        settings.PORT,
        settings.APP_VERSION,
        settings.ENVIRONMENT,
    )
    uvicorn.run(
        "src.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
