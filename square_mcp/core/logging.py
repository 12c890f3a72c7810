"""JSON log output for the gateway process.

Every record goes to stdout as one JSON object carrying ``timestamp``,
``level``, ``logger``, ``message`` and the ``service`` name.  uvicorn's
own loggers are re-routed through the same handler so server and
application lines share one format.
"""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

# Loggers installed by uvicorn with their own plain-text handlers
_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# Per-request chatter kept out of the log unless it is a warning
_QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def setup_logging(level: str = "INFO", *, service: str | None = None) -> None:
    """Install the JSON handler on the root logger at ``level``."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
            static_fields={"service": service} if service else None,
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(level.upper())

    for name in _UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
