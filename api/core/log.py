"""
Process-wide logging setup.

Modules log through `logging.getLogger(__name__)` using
`event_name key=value` messages; this only wires handlers and level once.
"""

from __future__ import annotations

import logging

from . import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_configured = False


def configure_logging(level: str | None = None) -> None:
    global _configured
    if _configured:
        return None

    logging.basicConfig(level=(level or settings.log_level()), format=LOG_FORMAT)
    # uvicorn's access log duplicates the request middleware line.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    _configured = True
