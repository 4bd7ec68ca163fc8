"""
catalog/loader.py — wczytywanie katalogu produktów z JSON.

Publiczne API:
  load_products_json(path) -> (catalog_id, list[Product])
  DEFAULT_CATALOG          przykładowy katalog dołączony do pakietu
"""

from __future__ import annotations

import json
import logging
import pathlib

from .products import Color, Product, Size

logger = logging.getLogger(__name__)

DEFAULT_CATALOG = pathlib.Path(__file__).resolve().parent / "data" / "products.json"


def _product_from_dict(d: dict, index: int) -> Product:
    if not isinstance(d, dict):
        raise ValueError(f"Produkt #{index}: oczekiwano obiektu JSON.")
    try:
        name  = d["name"]
        color = Color(d["color"])
        size  = Size(d["size"])
    except KeyError as e:
        raise ValueError(f"Produkt #{index}: brak pola {e}") from e
    except ValueError as e:
        raise ValueError(f"Produkt #{index}: {e}") from e
    if not isinstance(name, str):
        raise ValueError(f"Produkt #{index}: pole 'name' musi być napisem.")
    return Product(name=name, color=color, size=size)


def load_products_json(path: pathlib.Path) -> tuple[str, list[Product]]:
    """
    Wczytuje katalog produktów z pliku JSON.

    Oczekiwany format::

        {
            "catalog_id": "przyklad-ocp",
            "products": [
                {"name": "Apple", "color": "green", "size": "small"},
                {"name": "Tree",  "color": "green", "size": "large"}
            ]
        }

    Kolejność produktów z pliku jest zachowana.

    Returns:
        (catalog_id, products)

    Raises:
        ValueError gdy plik nie jest obiektem JSON, produkt nie jest obiektem,
        ma nieznany kolor/rozmiar, nazwę inną niż napis lub brakuje pola.
    """
    raw = json.loads(pathlib.Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("Plik katalogu musi zawierać obiekt JSON.")

    catalog_id = raw.get("catalog_id", "")
    items      = raw.get("products", [])

    if not isinstance(items, list):
        raise ValueError("Pole 'products' musi być listą.")

    products = [_product_from_dict(d, i) for i, d in enumerate(items)]
    logger.debug("Wczytano %d produktów z %s", len(products), path)
    return catalog_id, products
