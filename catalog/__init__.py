"""
catalog — model produktów dla przykładów filtrowania.

Użycie:
  from catalog import Product, Color, Size, load_products_json

Moduły:
  products — Color, Size, Product, PRODUCT_ATTRIBUTES
  loader   — load_products_json, DEFAULT_CATALOG
"""

from .products import (
    Color,
    Size,
    Product,
    PRODUCT_ATTRIBUTES,
)
from .loader import (
    DEFAULT_CATALOG,
    load_products_json,
)

__all__ = [
    # products
    "Color",
    "Size",
    "Product",
    "PRODUCT_ATTRIBUTES",
    # loader
    "DEFAULT_CATALOG",
    "load_products_json",
]
