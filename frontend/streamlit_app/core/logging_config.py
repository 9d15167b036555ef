# frontend/streamlit_app/core/logging_config.py
# SPDX-License-Identifier: Apache-2.0
"""Centralized logging configuration for the admin console.

`setup_logging` configures the root logger idempotently: Streamlit re-runs
the entry script on every interaction, so repeated calls must not stack
handlers. The level comes from `settings.CONSOLE_DEBUG` unless given.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_CONSOLE_LOGGERS = ("core", "services", "ui", "pages")


class ConsoleHandler(logging.StreamHandler):
    """Marker subclass so repeated setup can find the handler it added."""


def setup_logging(level: int | None = None) -> int:
    """Install (once) a stream handler on the root logger and set levels.

    Returns:
      The effective level.
    """
    if level is None:
        # Imported lazily so tests can call this without a `.env` load.
        from core.config import settings

        level = logging.DEBUG if settings.CONSOLE_DEBUG else logging.INFO

    root = logging.getLogger()
    handler = next((h for h in root.handlers if isinstance(h, ConsoleHandler)), None)
    if handler is None:
        handler = ConsoleHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    handler.setLevel(level)

    for name in _CONSOLE_LOGGERS:
        logging.getLogger(name).setLevel(level)

    # urllib3 is chatty at DEBUG and would echo request URLs.
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))
    return level
