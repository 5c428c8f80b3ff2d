import logging
from typing import Optional

SERVICE_LOGGER_NAME = "inference"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def get_logger(name: str, level: int = logging.INFO, handler: Optional[logging.Handler] = None) -> logging.Logger:
    """Configure and return a logger."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level)
        stream_handler = handler or logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
        logger.addHandler(stream_handler)
    return logger


def get_component_logger(component: str) -> logging.Logger:
    """Return a child of the service logger.

    Components never attach handlers themselves; records propagate to the
    service logger configured once by the app factory.
    """
    return logging.getLogger(f"{SERVICE_LOGGER_NAME}.{component}")
