"""
specification/base.py — bazowy kontrakt specyfikacji i koniunkcja.

Specyfikacja to czysty predykat nad elementem typu T: wynik zależy tylko
od elementu i parametrów ustalonych przy konstrukcji. Wszystkie warianty
są zamrożonymi dataclassami, więc po utworzeniu nie da się ich zmienić.

Składanie:
  a.and_(b)          → AndSpecification(a, b)
  all_of(a, b, c)    → a.and_(b).and_(c)
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from functools import reduce
from typing import Generic, TypeVar

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Specification
# ---------------------------------------------------------------------------

class Specification(abc.ABC, Generic[T]):
    """
    Warunek filtrowania dla obiektów typu T.

    Podklasy implementują is_satisfied(); ewaluacja musi być całkowita
    i bez efektów ubocznych.
    """

    __slots__ = ()

    @abc.abstractmethod
    def is_satisfied(self, item: T) -> bool:
        """Zwraca True gdy item spełnia warunek."""

    def and_(self, other: Specification[T]) -> AndSpecification[T]:
        """Koniunkcja: nowa specyfikacja spełniona gdy spełnione są obie."""
        return AndSpecification(self, other)


# ---------------------------------------------------------------------------
# AndSpecification
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AndSpecification(Specification[T]):
    """
    Koniunkcja dwóch specyfikacji.

    - first:  lewy operand
    - second: prawy operand

    Operandy są trzymane zwykłymi referencjami, więc żyją co najmniej tak
    długo jak koniunkcja. Zagnieżdżanie jest dowolne, a wynik filtrowania
    nie zależy od nawiasowania.
    """
    first:  Specification[T]
    second: Specification[T]

    def is_satisfied(self, item: T) -> bool:
        return self.first.is_satisfied(item) and self.second.is_satisfied(item)

    def __str__(self) -> str:
        return f"{self.first} AND {self.second}"


def all_of(*specs: Specification[T]) -> Specification[T]:
    """
    Składa n specyfikacji w koniunkcję przez kolejne and_() od lewej.

    Jedna specyfikacja jest zwracana bez zmian.

    Raises:
        ValueError gdy nie podano żadnej specyfikacji.
    """
    if not specs:
        raise ValueError("all_of() wymaga co najmniej jednej specyfikacji.")
    return reduce(lambda acc, spec: acc.and_(spec), specs[1:], specs[0])
