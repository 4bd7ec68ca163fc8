"""
ocp — narzędzie CLI do filtrowania katalogu produktów.

Użycie:
  ocp <komenda> [opcje]

Komendy:
  products  Listuje produkty z katalogu.
  filter    Filtruje katalog specyfikacją (wyrażenie lub plik JSON).
  check     Waliduje plik JSON z definicją specyfikacji.
"""

from __future__ import annotations

import argparse

from ocp import __version__
from ocp._log import get_logger
from ocp.commands import check as cmd_check
from ocp.commands import filter as cmd_filter
from ocp.commands import products as cmd_products

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ocp",
        description="ocp — filtrowanie produktów składanymi specyfikacjami.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"ocp {__version__}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_products.add_parser(subparsers)
    cmd_filter.add_parser(subparsers)
    cmd_check.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger.debug("Komenda: %s", args.command)
    args.func(args)


if __name__ == "__main__":
    main()
