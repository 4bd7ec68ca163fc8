"""Komenda: ocp filter — filtruje katalog specyfikacją."""

from __future__ import annotations

import argparse
import pathlib

from rich.console import Console

from ocp._config import console_width
from ocp.commands._common import error_table, load_catalog_or_exit
from ocp.commands.products import product_table
from specification import (
    BetterFilter,
    SpecificationError,
    load_spec_json,
    parse_expression,
)

console = Console(width=console_width())


def _build_spec(args: argparse.Namespace):
    if args.where is not None:
        return parse_expression(args.where)

    spec_path = pathlib.Path(args.spec_file)
    if not spec_path.exists():
        console.print(f"[red]Brak pliku specyfikacji:[/red] {spec_path}")
        raise SystemExit(1)
    return load_spec_json(spec_path)


def run(args: argparse.Namespace) -> None:
    _, products = load_catalog_or_exit(console, args.catalog)

    try:
        spec = _build_spec(args)
    except SpecificationError as e:
        console.print(f"[red]Niepoprawna specyfikacja[/red] — {len(e.errors)} błąd(ów).")
        console.print(error_table(e.errors))
        raise SystemExit(1)

    result = BetterFilter().filter(products, spec)

    if args.names_only:
        for item in result:
            print(item.name)
        return

    console.print(f"Specyfikacja: [bold cyan]{spec}[/bold cyan]")
    if not result:
        console.print("  [yellow]Brak pasujących produktów.[/yellow]")
        return

    console.print(product_table(result))
    console.print(f"  [dim]{len(result)} z {len(products)} produktów[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "filter",
        help="Filtruje katalog specyfikacją (wyrażenie lub plik JSON).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Filtruje produkty z katalogu i wypisuje pasujące w kolejności z katalogu.

Wyrażenie (--where): klauzule atrybut=wartość oddzielone przecinkami (AND).
Atrybuty: name, color (red/green/blue), size (small/medium/large).
Wartość z przecinkiem trzeba ująć w cudzysłów: name="Apple, Inc".

Format pliku specyfikacji JSON (--spec-file):
  {"and": [{"attr": "color", "eq": "green"}, {"attr": "size", "eq": "large"}]}

Przykłady:
  ocp filter --where "color=green"
  ocp filter --where "color=green, size=large"
  ocp filter --spec-file zielone-duze.json --catalog katalog.json
  ocp filter --where "size=large" --names-only
        """,
    )
    source = p.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--where", "-w",
        metavar="WYRAŻENIE",
        help="Wyrażenie, np. 'color=green, size=large'.",
    )
    source.add_argument(
        "--spec-file", "-s",
        metavar="PLIK",
        dest="spec_file",
        help="Plik JSON z definicją specyfikacji.",
    )
    p.add_argument(
        "--catalog", "-c",
        metavar="PLIK",
        help="Plik JSON z katalogiem (domyślnie: OCP_CATALOG lub katalog przykładowy).",
    )
    p.add_argument(
        "--names-only",
        action="store_true",
        dest="names_only",
        help="Wypisz same nazwy pasujących produktów, po jednej w linii.",
    )
    p.set_defaults(func=run)
