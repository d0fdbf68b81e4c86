import inspect
import logging
import os
import sys
from datetime import datetime
from typing import Any

from loguru import logger
from loguru._logger import Logger

from sharecircle.core.config import settings


def dynamic_formatter(record: Any) -> str:
    base = "[{time:HH:mm:ss}] [{level}] {name}:{function}:{line} - {message}"

    extras = record.get("extra", {})
    if extras:
        base += " ("
        for key, value in extras.items():
            base += f"{key}={value}, "
        base += ")\n"
    else:
        base += "\n"

    if record["exception"]:
        base += "{exception}"

    return base


def dynamic_console_formatter(record: Any) -> str:
    base = "[<green>{time:HH:mm:ss}</green>] <level>[{level}]</level> {name}:{function}:<blue>{line}</blue> - {message}\n"

    if record["exception"]:
        base += "{exception}"

    return base


class InterceptHandler(logging.Handler):
    """
    Forward records from the standard `logging` module to loguru, so that
    module level `getLogger(__name__)` loggers and uvicorn end up in the
    same sinks.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _add_file_sinks(name: str, log_dir: str) -> None:
    today = datetime.now().strftime("%Y-%m-%d")
    log_path = os.path.join(log_dir, today, name)
    os.makedirs(log_path, exist_ok=True)

    if settings.DEBUG:
        logger.add(
            os.path.join(log_path, "debug.log"),
            format=dynamic_formatter,
            level="DEBUG",
            rotation="00:00",  # Rotate daily at midnight
            compression="zip",
            enqueue=True,
            backtrace=True,
            diagnose=True,
            retention="7 days",
        )

    logger.add(
        os.path.join(log_path, "error.log"),
        format=dynamic_formatter,
        level="ERROR",
        rotation="00:00",
        compression="zip",
        enqueue=True,
        backtrace=True,
        diagnose=True,
        retention="30 days",
    )

    logger.add(
        os.path.join(log_path, "info.log"),
        format=dynamic_formatter,
        level="INFO",
        rotation="00:00",
        compression="zip",
        enqueue=True,
        backtrace=True,
        # Request payloads must not leak into persisted logs
        diagnose=False,
    )


def setup_logger(name: str, log_dir: str | None = None) -> Logger:
    logger.remove()  # Remove default handler

    level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    logger.add(
        sys.stderr,
        format=dynamic_console_formatter,
        level=level,
        backtrace=True,
        diagnose=settings.DEBUG,
        colorize=True,
    )

    if settings.LOG_TO_FILE:
        _add_file_sinks(name, log_dir or settings.LOG_DIR)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for uvicorn_logger in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(uvicorn_logger).handlers = [InterceptHandler()]

    return logger  # type: ignore
