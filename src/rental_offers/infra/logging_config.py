from __future__ import annotations

import logging
import logging.config

from rental_offers.infra.config import log_level

_configured = False


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging once per process.

    Later calls are no-ops so building several apps (tests) does not stack
    handlers.
    """
    global _configured
    if _configured:
        return

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {
                "level": level or log_level(),
                "handlers": ["console"],
            },
        }
    )
    _configured = True
    logging.getLogger(__name__).debug("Logging configured")
