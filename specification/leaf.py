"""
specification/leaf.py — specyfikacje-liście (porównanie atrybutu z wartością).

  AttributeSpecification(attr, value)   ogólne: getattr(item, attr) == value
  ColorSpecification(color)             produkty o danym kolorze
  SizeSpecification(size)               produkty o danym rozmiarze

make_leaf(attr, raw) buduje liść produktu z tekstowej pary atrybut/wartość
(używane przez parser wyrażeń i loader JSON).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from catalog.products import PRODUCT_ATTRIBUTES, Color, Product, Size

from .base import Specification, T


@dataclass(frozen=True, slots=True)
class AttributeSpecification(Specification[T]):
    """Równość wskazanego atrybutu elementu z wartością ustaloną przy konstrukcji."""
    attr:  str
    value: Any

    def is_satisfied(self, item: T) -> bool:
        return getattr(item, self.attr) == self.value

    def __str__(self) -> str:
        return f"{self.attr} == {self.value}"


@dataclass(frozen=True, slots=True)
class ColorSpecification(Specification[Product]):
    color: Color

    def is_satisfied(self, item: Product) -> bool:
        return item.color == self.color

    def __str__(self) -> str:
        return f"color == {self.color}"


@dataclass(frozen=True, slots=True)
class SizeSpecification(Specification[Product]):
    size: Size

    def is_satisfied(self, item: Product) -> bool:
        return item.size == self.size

    def __str__(self) -> str:
        return f"size == {self.size}"


def make_leaf(attr: str, raw: str) -> Specification[Product]:
    """
    Buduje specyfikację-liść dla produktu z pary (atrybut, wartość tekstowa).

    Raises:
        KeyError   gdy atrybut nie należy do PRODUCT_ATTRIBUTES
        ValueError gdy wartość nie jest poprawna dla atrybutu
    """
    value = PRODUCT_ATTRIBUTES[attr](raw)
    if attr == "color":
        return ColorSpecification(value)
    if attr == "size":
        return SizeSpecification(value)
    return AttributeSpecification(attr, value)
