"""Logging setup"""
import logging
import os
from logging.handlers import RotatingFileHandler

from article_insight.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """Configure console and rotating file handlers on the root logger."""
    root = logging.getLogger()
    if root.handlers:
        return

    settings = get_settings()
    log_dir = settings.log_dir
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    # 10MB * 5 backups
    file_handler = RotatingFileHandler(
        os.path.join(log_dir, "app.log"),
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        handlers=[console_handler, file_handler],
    )


def get_logger(name: str) -> logging.Logger:
    """Return a module logger at the configured level."""
    settings = get_settings()

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, settings.log_level.upper()))
    return logger
