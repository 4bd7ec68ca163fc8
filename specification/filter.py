"""
specification/filter.py — filtrowanie kolekcji według specyfikacji.

Publiczne API:
  Filter[T]        interfejs filtra
  BetterFilter[T]  filtr ogólny: jedna metoda, dowolna specyfikacja
  ProductFilter    filtr „zamknięty”: osobna metoda na każde kryterium
"""

from __future__ import annotations

import abc
import logging
from typing import Generic, Iterable

from catalog.products import Color, Product, Size

from .base import Specification, T
from .leaf import ColorSpecification, SizeSpecification

logger = logging.getLogger(__name__)


class Filter(abc.ABC, Generic[T]):
    """
    Filtr przyjmuje kolekcję obiektów typu T i specyfikację, zwraca nową
    listę zawierającą tylko obiekty spełniające specyfikację.
    """

    @abc.abstractmethod
    def filter(self, items: Iterable[T], spec: Specification[T]) -> list[T]:
        ...


class BetterFilter(Filter[T]):
    """
    Filtr otwarty na rozszerzenia: nowe kryteria to nowe klasy
    Specification, bez zmian w samym filtrze.

    Wynik zachowuje kolejność elementów wejściowych; wejście nie jest
    modyfikowane.
    """

    def filter(self, items: Iterable[T], spec: Specification[T]) -> list[T]:
        result = [item for item in items if spec.is_satisfied(item)]
        logger.debug("Filtr %s: %d pasujących", spec, len(result))
        return result


class ProductFilter:
    """
    Filtr produktów z osobną metodą dla każdej kombinacji kryteriów.

    Każde nowe kryterium wymaga kolejnej metody (klasa nie jest zamknięta
    na modyfikacje). Metody delegują do BetterFilter, więc wyniki są
    identyczne jak dla odpowiednich specyfikacji.
    """

    def __init__(self) -> None:
        self._filter: BetterFilter[Product] = BetterFilter()

    def by_color(self, items: Iterable[Product], color: Color) -> list[Product]:
        return self._filter.filter(items, ColorSpecification(color))

    def by_size(self, items: Iterable[Product], size: Size) -> list[Product]:
        return self._filter.filter(items, SizeSpecification(size))

    def by_size_and_color(
        self,
        items: Iterable[Product],
        color: Color,
        size:  Size,
    ) -> list[Product]:
        spec = SizeSpecification(size).and_(ColorSpecification(color))
        return self._filter.filter(items, spec)
