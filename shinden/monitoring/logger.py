"""Centralized logging configuration using Loguru."""

import sys
from typing import Any

from loguru import logger

from shinden.core.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure Loguru logging for the client.

    Args:
        settings: Client settings
    """
    # Remove default handler
    logger.remove()

    console_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    file_format = (
        "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
        "{level: <8} | "
        "{name}:{function}:{line} | "
        "{message} | "
        "{extra}"
    )

    logger.add(
        sys.stderr,
        format=console_format,
        level=settings.log_level,
        colorize=True,
        backtrace=True,
        diagnose=settings.debug,
    )

    if settings.log_to_file:
        logs_dir = settings.logs_dir
        logger.add(
            logs_dir / "shinden_{time:YYYY-MM-DD}.log",
            format=file_format,
            level="DEBUG",
            rotation="00:00",
            retention="30 days",
            compression="gz",
            backtrace=True,
            diagnose=settings.debug,
        )

        # Page structure breaks end up here, one file per day
        logger.add(
            logs_dir / "errors_{time:YYYY-MM-DD}.log",
            format=file_format,
            level="ERROR",
            rotation="00:00",
            retention="90 days",
            compression="gz",
            backtrace=True,
            diagnose=settings.debug,
        )

        logger.add(
            logs_dir / "shinden_{time:YYYY-MM-DD}.json",
            format="{message}",
            level="INFO",
            rotation="00:00",
            retention="14 days",
            compression="gz",
            serialize=True,
        )

    logger.info(
        f"Logging initialized | level={settings.log_level} | env={settings.app_env.value}"
    )


def get_logger(name: str) -> Any:
    """Get a logger instance with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logger.bind(name=name)


def log_fetch_event(
    url: str, status_code: int, duration: float, success: bool = True, **extra: Any
) -> None:
    """Log a single HTTP round-trip.

    Args:
        url: Requested URL
        status_code: Response (or best-effort) status code
        duration: Round-trip duration in seconds
        success: Whether a document was obtained
        **extra: Additional context
    """
    status = "SUCCESS" if success else "FAILED"
    # Bound, not passed as format kwargs: URLs and reasons may contain braces
    bound = logger.bind(url=url, status_code=status_code, duration=duration, success=success, **extra)
    log_func = bound.debug if success else bound.warning

    log_func(f"Fetch | url={url} | http={status_code} | status={status} | duration={duration:.2f}s")


def log_mapping_event(mapper_code: str, items_count: int, **extra: Any) -> None:
    """Log a mapped page.

    Args:
        mapper_code: Code of the mapper that produced the records
        items_count: Number of records mapped
        **extra: Additional context
    """
    logger.bind(mapper_code=mapper_code, items_count=items_count, **extra).info(
        f"Mapping | mapper={mapper_code} | items={items_count}"
    )
