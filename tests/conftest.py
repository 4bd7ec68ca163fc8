"""Wspólne fixtures: przykładowe produkty i pliki katalogu."""

from __future__ import annotations

import json

import pytest

from catalog import Color, Product, Size
from specification import Specification


class Always(Specification):
    """Specyfikacja o stałym wyniku (do testów przypadków brzegowych)."""

    __slots__ = ("result",)

    def __init__(self, result: bool) -> None:
        self.result = result

    def is_satisfied(self, item) -> bool:
        return self.result


APPLE = Product("Apple", Color.GREEN, Size.SMALL)
TREE  = Product("Tree",  Color.GREEN, Size.LARGE)
HOUSE = Product("House", Color.BLUE,  Size.LARGE)


@pytest.fixture
def products() -> list[Product]:
    return [APPLE, TREE, HOUSE]


@pytest.fixture
def write_json(tmp_path):
    def _write(name: str, data) -> str:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)
    return _write
