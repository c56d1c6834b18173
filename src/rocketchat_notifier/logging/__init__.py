"""Console logging for the notifier (stderr)."""

from rocketchat_notifier.logging.logger import SimpleLogger, configure, get_logger

__all__ = ["SimpleLogger", "configure", "get_logger"]
