"""Komenda: ocp check — waliduje plik JSON z definicją specyfikacji."""

from __future__ import annotations

import argparse
import dataclasses
import json
import pathlib
import sys

from rich.console import Console

from ocp._config import console_width
from ocp.commands._common import error_table
from specification import spec_from_json, validate_spec_json

console = Console(width=console_width())


def run(args: argparse.Namespace) -> None:
    # --- Wczytaj definicję -----------------------------------------------
    spec_path = pathlib.Path(args.spec)
    if not spec_path.exists():
        console.print(f"[red]Brak pliku specyfikacji:[/red] {spec_path}")
        raise SystemExit(1)

    try:
        data = json.loads(spec_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        console.print(f"[red]Błąd parsowania JSON:[/red] {exc}")
        raise SystemExit(1)
    except OSError as exc:
        console.print(f"[red]Nie można odczytać pliku:[/red] {exc}")
        raise SystemExit(1)

    # --- Walidacja -------------------------------------------------------
    errors = validate_spec_json(data)

    if args.json_output:
        out = {
            "is_valid": not errors,
            "errors": [dataclasses.asdict(e) for e in errors],
        }
        sys.stdout.write(json.dumps(out, ensure_ascii=False, indent=2) + "\n")
    elif errors:
        console.print(
            f"[red]BŁĄD[/red]  Specyfikacja [bold]{spec_path.name}[/bold] — "
            f"{len(errors)} błąd(ów)."
        )
        console.print(error_table(errors))
    else:
        spec = spec_from_json(data)
        console.print(
            f"[green]OK[/green]  Specyfikacja [bold]{spec_path.name}[/bold] jest poprawna: "
            f"[cyan]{spec}[/cyan]"
        )

    if errors:
        raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "check",
        help="Waliduje plik JSON z definicją specyfikacji.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Waliduje definicję specyfikacji (etap A: JSON Schema, etap B: atrybuty
i wartości). Kod wyjścia 1 gdy definicja zawiera błędy.

Przykłady:
  ocp check zielone-duze.json
  ocp check zielone-duze.json --json
        """,
    )
    p.add_argument(
        "spec",
        metavar="PLIK",
        help="Plik JSON z definicją specyfikacji.",
    )
    p.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Wypisz wynik walidacji jako JSON (is_valid, errors).",
    )
    p.set_defaults(func=run)
