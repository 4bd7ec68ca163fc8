"""
Struktury danych dla produktów (products).

Produkt jest niemutowalnym rekordem o dyskretnych atrybutach.
Specyfikacje i filtry operują wyłącznie na odczycie tych pól.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Callable


# ---------------------------------------------------------------------------
# Enumeracje
# ---------------------------------------------------------------------------

class Color(StrEnum):
    """Kolor produktu."""
    RED   = "red"
    GREEN = "green"
    BLUE  = "blue"


class Size(StrEnum):
    """Rozmiar produktu."""
    SMALL  = "small"
    MEDIUM = "medium"
    LARGE  = "large"


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Product:
    """
    Produkt w katalogu.

    - name:  nazwa wyświetlana, np. "Apple"
    - color: kolor (Color)
    - size:  rozmiar (Size)
    """
    name:  str
    color: Color
    size:  Size

    def __str__(self) -> str:
        return f"{self.name} ({self.color}, {self.size})"


# Atrybuty produktu dostępne w wyrażeniach i definicjach JSON:
# nazwa atrybutu → konwersja wartości tekstowej (ValueError gdy niepoprawna)
PRODUCT_ATTRIBUTES: dict[str, Callable[[str], object]] = {
    "name":  str,
    "color": Color,
    "size":  Size,
}
