"""
Logging setup.

Modules log through ``logging.getLogger(__name__)``; this configures the
root handler once when the application starts.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO", debug: bool = False) -> None:
    """Configure root logging. Debug mode forces DEBUG level."""
    resolved = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
