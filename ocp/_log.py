"""
Logowanie — jeden handler rich na root loggerze, poziom z OCP_LOG_LEVEL.

Moduły biblioteczne (catalog, specification) logują przez
logging.getLogger(__name__); konfigurację robi tylko CLI.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from ocp._config import log_level

_initialized = False


def _init_logging() -> None:
    global _initialized
    if _initialized:
        return
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root = logging.getLogger()
    root.setLevel(log_level())
    root.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """Zwraca nazwany logger; przy pierwszym wywołaniu konfiguruje root logger."""
    _init_logging()
    return logging.getLogger(name)
