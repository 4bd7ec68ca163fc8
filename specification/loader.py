"""
specification/loader.py — definicje specyfikacji w JSON.

Format::

    {"attr": "color", "eq": "green"}

    {"and": [
        {"attr": "color", "eq": "green"},
        {"and": [{"attr": "size", "eq": "large"}, {"attr": "name", "eq": "Tree"}]}
    ]}

Publiczne API:
  SPEC_SCHEMA                 JSON Schema (Draft 2020-12)
  validate_spec_json(data)    -> list[ValidationError]
  spec_from_json(data)        -> Specification[Product]
  load_spec_json(path)        -> Specification[Product]

Etapy walidacji:
  A — JSON Schema        (kształt drzewa, co najmniej 2 operandy w "and")
  B — atrybuty/wartości  (atrybut z PRODUCT_ATTRIBUTES, poprawna wartość)
"""

from __future__ import annotations

import json
import logging
import pathlib
from typing import Any

import jsonschema

from catalog.products import PRODUCT_ATTRIBUTES, Product

from .base import Specification, all_of
from .leaf import make_leaf
from .types import ErrorCode, SpecificationError, ValidationError

logger = logging.getLogger(__name__)

SPEC_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$ref": "#/$defs/Spec",
    "$defs": {
        "Spec": {
            "type": "object",
            "if":   {"required": ["and"]},
            "then": {"$ref": "#/$defs/And"},
            "else": {"$ref": "#/$defs/Leaf"},
        },
        "Leaf": {
            "type": "object",
            "required": ["attr", "eq"],
            "properties": {
                "attr": {"type": "string", "pattern": "^[A-Za-z_][A-Za-z0-9_]*$"},
                "eq":   {"type": "string"},
            },
            "additionalProperties": False,
        },
        "And": {
            "type": "object",
            "required": ["and"],
            "properties": {
                "and": {
                    "type": "array",
                    "minItems": 2,
                    "items": {"$ref": "#/$defs/Spec"},
                },
            },
            "additionalProperties": False,
        },
    },
}

MAX_ERRORS = 20


# ---------------------------------------------------------------------------
# Walidacja
# ---------------------------------------------------------------------------

def _stage_schema(data: Any, errors: list[ValidationError]) -> None:
    validator = jsonschema.Draft202012Validator(SPEC_SCHEMA)
    for e in validator.iter_errors(data):
        path = (
            "/" + "/".join(str(p) for p in e.absolute_path)
            if e.absolute_path
            else "/"
        )
        errors.append(ValidationError(
            code=ErrorCode.SCHEMA_VIOLATION,
            path=path,
            message=e.message,
        ))


def _stage_attributes(node: dict, path: str, errors: list[ValidationError]) -> None:
    if len(errors) >= MAX_ERRORS:
        return

    if "and" in node:
        for i, child in enumerate(node["and"]):
            _stage_attributes(child, f"{path}/and/{i}", errors)
        return

    attr = node["attr"]
    raw  = node["eq"]
    if attr not in PRODUCT_ATTRIBUTES:
        known = ", ".join(PRODUCT_ATTRIBUTES)
        errors.append(ValidationError(
            code=ErrorCode.ATTR_UNKNOWN,
            path=f"{path}/attr",
            message=f"Nieznany atrybut '{attr}' (dostępne: {known}).",
        ))
        return
    try:
        PRODUCT_ATTRIBUTES[attr](raw)
    except ValueError:
        errors.append(ValidationError(
            code=ErrorCode.VALUE_INVALID,
            path=f"{path}/eq",
            message=f"Niepoprawna wartość '{raw}' dla atrybutu '{attr}'.",
        ))


def validate_spec_json(data: Any) -> list[ValidationError]:
    """
    Waliduje definicję specyfikacji (po json.loads).

    Etap B jest uruchamiany tylko gdy etap A nie zgłosił błędów.

    Returns:
        Lista błędów; pusta gdy definicja jest poprawna.
    """
    errors: list[ValidationError] = []
    _stage_schema(data, errors)
    if errors:
        return errors
    _stage_attributes(data, "", errors)
    return errors


# ---------------------------------------------------------------------------
# Budowanie
# ---------------------------------------------------------------------------

def _build(node: dict) -> Specification[Product]:
    if "and" in node:
        return all_of(*(_build(child) for child in node["and"]))
    return make_leaf(node["attr"], node["eq"])


def spec_from_json(data: Any) -> Specification[Product]:
    """
    Waliduje i buduje specyfikację z definicji JSON.

    Operandy "and" są składane od lewej, więc
    {"and": [a, b, c]} daje a.and_(b).and_(c).

    Raises:
        SpecificationError ze wszystkimi błędami walidacji.
    """
    errors = validate_spec_json(data)
    if errors:
        raise SpecificationError(errors)
    spec = _build(data)
    logger.debug("Zbudowano specyfikację: %s", spec)
    return spec


def load_spec_json(path: pathlib.Path) -> Specification[Product]:
    """
    Wczytuje definicję specyfikacji z pliku JSON.

    Raises:
        SpecificationError gdy pliku nie da się odczytać jako UTF-8, plik nie
        jest poprawnym JSON-em lub definicja nie przechodzi walidacji.
    """
    try:
        text = pathlib.Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SpecificationError([ValidationError(
            code=ErrorCode.SYNTAX,
            path="/",
            message=f"Nie można odczytać pliku: {e}",
        )]) from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SpecificationError([ValidationError(
            code=ErrorCode.SYNTAX,
            path="/",
            message=f"Niepoprawny JSON: {e}",
        )]) from e
    return spec_from_json(data)
