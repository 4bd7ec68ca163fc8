"""
specification — składane predykaty (wzorzec Specification) i filtry.

Publiczne API:
  Specification, AndSpecification, all_of     kontrakt i koniunkcja
  AttributeSpecification, ColorSpecification,
  SizeSpecification, make_leaf                specyfikacje-liście
  Filter, BetterFilter, ProductFilter         filtrowanie kolekcji
  parse_expression(text)                      "color=green, size=large"
  spec_from_json / load_spec_json /
  validate_spec_json / SPEC_SCHEMA            definicje JSON
  ErrorCode, ValidationError,
  SpecificationError                          błędy budowania

Typowe użycie:
    from catalog import Color, Size
    from specification import BetterFilter, ColorSpecification, SizeSpecification

    spec   = ColorSpecification(Color.GREEN).and_(SizeSpecification(Size.LARGE))
    result = BetterFilter().filter(products, spec)
"""

from .base import AndSpecification, Specification, all_of
from .leaf import (
    AttributeSpecification,
    ColorSpecification,
    SizeSpecification,
    make_leaf,
)
from .filter import BetterFilter, Filter, ProductFilter
from .parser import parse_expression
from .loader import SPEC_SCHEMA, load_spec_json, spec_from_json, validate_spec_json
from .types import ErrorCode, SpecificationError, ValidationError

__all__ = [
    # base
    "Specification",
    "AndSpecification",
    "all_of",
    # leaf
    "AttributeSpecification",
    "ColorSpecification",
    "SizeSpecification",
    "make_leaf",
    # filter
    "Filter",
    "BetterFilter",
    "ProductFilter",
    # parser / loader
    "parse_expression",
    "SPEC_SCHEMA",
    "load_spec_json",
    "spec_from_json",
    "validate_spec_json",
    # types
    "ErrorCode",
    "SpecificationError",
    "ValidationError",
]
