# trivia_proxy/utils/logger.py
import logging
import sys
from typing import Optional

from trivia_proxy.utils.config import settings

def configure_logger(name: str = "trivia_proxy", level: str = settings.log_level,
                     fmt: str = settings.log_format, log_file: Optional[str] = settings.log_file) -> logging.Logger:
    """
    Sets up the named service logger: stdout always, plus `log_file` when given.
    Safe to call again (hot reload, tests); previous handlers are replaced.
    """
    service_logger = logging.getLogger(name)
    service_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if service_logger.hasHandlers():
        service_logger.handlers.clear()

    formatter = logging.Formatter(fmt)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        service_logger.addHandler(handler)

    # Upstream fallbacks are reported here only, not through the root logger.
    service_logger.propagate = False
    return service_logger

logger = configure_logger()
