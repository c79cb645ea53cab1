from __future__ import annotations

import logging

from easywine.shared.config.settings import settings

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_NOISY = ("httpx", "httpcore", "urllib3")


def setup_logging(level: str | None = None) -> None:
    """
    Configure root logging once for the API process and the terminal client.
    """
    lvl = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(level=lvl, format=_FORMAT)
    # Reduce verbosity of noisy loggers
    for noisy in _NOISY:
        logging.getLogger(noisy).setLevel(logging.WARNING)
