"""Logging configuration for the overtime tracker."""
from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure application logging once at startup."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(name)s] %(levelname)s: %(message)s"))
    root.handlers = [handler]

    # Suppress noisy loggers
    for name in ["werkzeug", "mysql.connector"]:
        logging.getLogger(name).setLevel(logging.WARNING)
