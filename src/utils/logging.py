"""Logger factory shared by the loader, engines and dashboard."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = 'REPAYMENT_DASHBOARD_LOG_LEVEL'
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def get_logger(name: str) -> logging.Logger:
    """Return a named logger, configuring the package root handler once."""
    root = logging.getLogger('src')
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(os.environ.get(LOG_LEVEL_ENV, 'INFO').upper())
    return logging.getLogger(name)
