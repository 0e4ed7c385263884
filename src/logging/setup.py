import sys
import logging
from typing import Any

from loguru import logger

from src.config.settings import settings

MASK = "********"


def mask_secret(value: str) -> str:
    """Masks a secret, keeping a short prefix/suffix for long values."""
    if len(value) > 8:
        return value[:4] + "****" + value[-4:]
    return MASK


def sensitive_data_filter(record: dict[str, Any]) -> bool:
    """Filter function to mask sensitive data in log records."""
    sensitive_keys = ["key", "token", "password", "secret", "authorization"]

    extra = record.get("extra")
    if isinstance(extra, dict):
        for extra_key, value in list(extra.items()):
            if any(sk in extra_key.lower() for sk in sensitive_keys):
                extra[extra_key] = mask_secret(value) if isinstance(value, str) else MASK

    # The API key must never reach a sink, even when interpolated into a message
    api_key = settings.groq_api_key
    if api_key and api_key in record["message"]:
        record["message"] = record["message"].replace(api_key, MASK)

    return True


class InterceptHandler(logging.Handler):
    """Routes standard logging records (Flask, werkzeug, httpx) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging() -> None:
    """Configures Loguru logger based on application settings."""
    logger.remove()  # Remove default handler

    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=True,
        diagnose=False,  # locals may hold the API key
        filter=sensitive_data_filter,
    )

    logger.info(f"Logging initialized with level: {settings.log_level}")

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    # httpx logs every request at INFO; keep it to warnings
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logger.debug("Standard logging intercepted.")
