"""
specification/types.py — kody błędów i wyjątek budowania specyfikacji.

ValidationError — pojedynczy błąd z kodem, ścieżką JSON Pointer
    (lub numerem klauzuli wyrażenia) i komunikatem.
SpecificationError — wyjątek z listą błędów, podnoszony przez parser
    wyrażeń i loader JSON. Ewaluacja gotowej specyfikacji nie podnosi
    wyjątków.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorCode(StrEnum):
    """Stałe kody błędów."""

    # A — składnia / JSON Schema
    SCHEMA_VIOLATION = "E_SCHEMA_VIOLATION"
    SYNTAX           = "E_SYNTAX"

    # B — atrybuty i wartości
    ATTR_UNKNOWN     = "E_ATTR_UNKNOWN"
    VALUE_INVALID    = "E_VALUE_INVALID"


@dataclass(slots=True)
class ValidationError:
    """
    Pojedynczy błąd.

    - code:    stały identyfikator klasy błędu (ErrorCode)
    - path:    JSON Pointer, np. "/and/1/attr", albo "#2" dla klauzuli wyrażenia
    - message: czytelny opis błędu
    """

    code: ErrorCode
    path: str
    message: str


class SpecificationError(ValueError):
    """Nie udało się zbudować specyfikacji; errors zawiera wszystkie błędy."""

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors: list[ValidationError] = list(errors)
        summary = "; ".join(f"{e.path}: {e.message}" for e in self.errors)
        super().__init__(summary or "Niepoprawna specyfikacja.")

    @property
    def codes(self) -> list[ErrorCode]:
        return [e.code for e in self.errors]
