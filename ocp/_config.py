"""
Konfiguracja CLI — zmienne środowiskowe, opcjonalnie z pliku .env.

Zmienne:
  OCP_CATALOG        ścieżka katalogu produktów (domyślnie: przykładowy katalog)
  OCP_LOG_LEVEL      poziom logowania (domyślnie: WARNING)
  OCP_CONSOLE_WIDTH  szerokość konsoli rich (domyślnie: 160)

Niepoprawne wartości OCP_LOG_LEVEL i OCP_CONSOLE_WIDTH są zastępowane
wartościami domyślnymi.

Wartości są czytane przy każdym wywołaniu, więc zmiana środowiska
(np. w testach) działa bez przeładowania modułu.
"""

from __future__ import annotations

import logging
import os
import pathlib

from dotenv import load_dotenv

from catalog import DEFAULT_CATALOG

load_dotenv(pathlib.Path.cwd() / ".env")


DEFAULT_LOG_LEVEL     = "WARNING"
DEFAULT_CONSOLE_WIDTH = 160


def catalog_path() -> pathlib.Path:
    return pathlib.Path(os.getenv("OCP_CATALOG", str(DEFAULT_CATALOG)))


def log_level() -> str:
    """Nazwa poziomu logowania; nieznana nazwa → DEFAULT_LOG_LEVEL."""
    level = os.getenv("OCP_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in logging.getLevelNamesMapping():
        return DEFAULT_LOG_LEVEL
    return level


def console_width() -> int:
    """Szerokość konsoli; wartość nieliczbowa lub niedodatnia → DEFAULT_CONSOLE_WIDTH."""
    try:
        width = int(os.getenv("OCP_CONSOLE_WIDTH", str(DEFAULT_CONSOLE_WIDTH)))
    except ValueError:
        return DEFAULT_CONSOLE_WIDTH
    return width if width > 0 else DEFAULT_CONSOLE_WIDTH
