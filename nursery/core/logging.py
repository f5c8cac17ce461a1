"""
Logging setup
Every module logs through logging.getLogger(__name__); this configures the root handler once
Reference: https://docs.python.org/3/library/logging.html
"""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging from a level name such as "DEBUG" or "info"."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("nursery").setLevel(level.upper())
