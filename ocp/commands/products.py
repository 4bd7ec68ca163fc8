"""Komenda: ocp products — listowanie produktów z katalogu."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ocp._config import console_width
from ocp.commands._common import load_catalog_or_exit

console = Console(width=console_width())

# Kolory per color
COLOR_STYLE: dict[str, str] = {
    "red":   "red",
    "green": "green",
    "blue":  "blue",
}


def product_table(products: list) -> Table:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",     justify="right", style="dim", no_wrap=True)
    table.add_column("NAME",  style="bold", no_wrap=True)
    table.add_column("COLOR", no_wrap=True)
    table.add_column("SIZE",  no_wrap=True)

    for i, p in enumerate(products):
        table.add_row(
            str(i),
            p.name,
            Text(p.color, style=COLOR_STYLE.get(p.color, "")),
            p.size,
        )
    return table


def run(args: argparse.Namespace) -> None:
    catalog_id, products = load_catalog_or_exit(console, args.catalog)

    if not products:
        console.print("[yellow]Katalog jest pusty.[/yellow]")
        return

    console.print(f"Katalog: [cyan]{catalog_id or '—'}[/cyan]")
    console.print(product_table(products))
    console.print(f"  [dim]{len(products)} produktów[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "products",
        help="Listuje produkty z katalogu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Listuje produkty z katalogu JSON w kolejności z pliku.

Kolumny:
  #      – pozycja w katalogu
  NAME   – nazwa produktu
  COLOR  – kolor (red/green/blue)
  SIZE   – rozmiar (small/medium/large)
        """,
    )
    p.add_argument(
        "--catalog", "-c",
        metavar="PLIK",
        help="Plik JSON z katalogiem (domyślnie: OCP_CATALOG lub katalog przykładowy).",
    )
    p.set_defaults(func=run)
