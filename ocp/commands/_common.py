"""Wspólne funkcje komend: wczytanie katalogu z obsługą błędów, tabela błędów."""

from __future__ import annotations

import pathlib

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from catalog import Product, load_products_json
from ocp._config import catalog_path
from specification import ValidationError


def load_catalog_or_exit(console: Console, path: str | None) -> tuple[str, list[Product]]:
    """Wczytuje katalog (z --catalog lub OCP_CATALOG); przy błędzie kończy z kodem 1."""
    catalog = pathlib.Path(path) if path else catalog_path()
    if not catalog.exists():
        console.print(f"[red]Brak pliku katalogu:[/red] {catalog}")
        raise SystemExit(1)

    try:
        return load_products_json(catalog)
    except (OSError, ValueError) as e:
        console.print(f"[red]Błąd wczytywania katalogu:[/red] {e}")
        raise SystemExit(1)


def error_table(errors: list[ValidationError]) -> Table:
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Kod",      style="yellow", no_wrap=True)
    table.add_column("Ścieżka", style="cyan",   no_wrap=True)
    table.add_column("Komunikat")
    for e in errors:
        table.add_row(e.code, e.path, escape(e.message))
    return table
