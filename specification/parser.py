"""
specification/parser.py — parsowanie tekstowych wyrażeń na specyfikacje produktów.

Składnia::

    color=green
    color=green, size=large
    name == Apple, size == large

Klauzule `atrybut=wartość` (lub `==`) oddzielone przecinkami oznaczają
koniunkcję. Wartość w cudzysłowie może zawierać przecinek:
`name="Apple, Inc"`. Nazwy atrybutów są małymi literami (jak w JSON);
inna wielkość liter daje E_ATTR_UNKNOWN. Wynik to lewostronne złożenie
liści przez and_().
"""

from __future__ import annotations

import re

from catalog.products import PRODUCT_ATTRIBUTES, Product

from .base import Specification, all_of
from .leaf import make_leaf
from .types import ErrorCode, SpecificationError, ValidationError

_CLAUSE_RE = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*)\s*==?\s*(.+?)$")


def _split_clauses(text: str) -> list[str]:
    """Dzieli wyrażenie po przecinkach leżących poza cudzysłowami."""
    clauses: list[str] = []
    current: list[str] = []
    quote: str | None = None
    for ch in text:
        if quote is not None:
            if ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch == ",":
            clauses.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    clauses.append("".join(current).strip())
    return clauses


def _parse_clause(
    clause: str,
    index:  int,
    errors: list[ValidationError],
) -> Specification[Product] | None:
    path = f"#{index}"
    m = _CLAUSE_RE.match(clause)
    if not m:
        errors.append(ValidationError(
            code=ErrorCode.SYNTAX,
            path=path,
            message=f"Nieprawidłowa klauzula: '{clause}' (oczekiwano atrybut=wartość).",
        ))
        return None

    attr = m.group(1)
    raw  = m.group(2).strip().strip("\"'")

    if attr not in PRODUCT_ATTRIBUTES:
        known = ", ".join(PRODUCT_ATTRIBUTES)
        errors.append(ValidationError(
            code=ErrorCode.ATTR_UNKNOWN,
            path=path,
            message=f"Nieznany atrybut '{attr}' (dostępne: {known}).",
        ))
        return None

    try:
        return make_leaf(attr, raw)
    except ValueError:
        errors.append(ValidationError(
            code=ErrorCode.VALUE_INVALID,
            path=path,
            message=f"Niepoprawna wartość '{raw}' dla atrybutu '{attr}'.",
        ))
        return None


def parse_expression(text: str) -> Specification[Product]:
    """
    Parsuje wyrażenie na specyfikację produktu.

    Przykłady::

        "color=green"               → ColorSpecification(green)
        "color=green, size=large"   → AndSpecification(color, size)

    Raises:
        SpecificationError ze wszystkimi błędami klauzul.
    """
    clauses = _split_clauses(text)
    if not text.strip():
        raise SpecificationError([ValidationError(
            code=ErrorCode.SYNTAX,
            path="#0",
            message="Puste wyrażenie.",
        )])

    errors: list[ValidationError] = []
    leaves: list[Specification[Product]] = []
    for i, clause in enumerate(clauses):
        leaf = _parse_clause(clause, i, errors)
        if leaf is not None:
            leaves.append(leaf)

    if errors:
        raise SpecificationError(errors)
    return all_of(*leaves)
