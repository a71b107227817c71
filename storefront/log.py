import logging
import sys

from storefront.config import LOG_LEVEL, LOG_FORMAT


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Send application logs to stdout at the configured level."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
