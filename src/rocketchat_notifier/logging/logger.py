"""Simple console logger writing to stderr."""

import logging as std_logging
from typing import Any

ROOT_LOGGER = "rocketchat_notifier"


class SimpleLogger:
    """Thin wrapper over a stdlib logger that appends keyword extras."""

    def __init__(self, name: str = ROOT_LOGGER) -> None:
        self.name = name
        self.logger = std_logging.getLogger(name)

    def info(self, message: str, **extra: Any) -> None:
        self._log(std_logging.INFO, message, extra)

    def warning(self, message: str, **extra: Any) -> None:
        self._log(std_logging.WARNING, message, extra)

    def error(self, message: str, exc_info: bool = False, **extra: Any) -> None:
        self._log(std_logging.ERROR, message, extra, exc_info=exc_info)

    def debug(self, message: str, **extra: Any) -> None:
        self._log(std_logging.DEBUG, message, extra)

    def _log(
        self,
        level: int,
        message: str,
        extra: dict[str, Any],
        exc_info: bool = False,
    ) -> None:
        if extra:
            extra_str = " | ".join(f"{k}={v}" for k, v in extra.items())
            message = f"{message} | {extra_str}"
        self.logger.log(level, message, exc_info=exc_info)


def configure(level: str | int = std_logging.WARNING) -> None:
    """Attach a stderr handler to the package logger.

    Args:
        level: level name (``"INFO"``) or number; unknown names fall back to WARNING
    """
    if isinstance(level, str):
        level = std_logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = std_logging.WARNING

    root = std_logging.getLogger(ROOT_LOGGER)
    root.setLevel(level)
    root.handlers.clear()

    # bound to the current sys.stderr
    handler = std_logging.StreamHandler()
    handler.setFormatter(
        std_logging.Formatter(
            "[%(asctime)s] %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    root.addHandler(handler)


def get_logger(name: str = ROOT_LOGGER) -> SimpleLogger:
    return SimpleLogger(name=name)
