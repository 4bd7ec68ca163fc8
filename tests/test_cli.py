"""Testy komend CLI ocp (products, filter, check)."""

import json

import pytest

from ocp.cli import main

CUSTOM_CATALOG = {
    "catalog_id": "sklep",
    "products": [
        {"name": "Lamp",  "color": "red",  "size": "medium"},
        {"name": "Chair", "color": "blue", "size": "medium"},
        {"name": "Sofa",  "color": "red",  "size": "large"},
    ],
}


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "ocp 0.1.0" in capsys.readouterr().out


def test_command_required():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


class TestProducts:
    def test_default_catalog(self, capsys):
        main(["products"])
        out = capsys.readouterr().out
        assert "przyklad-ocp" in out
        for name in ("Apple", "Tree", "House"):
            assert name in out

    def test_catalog_from_env(self, capsys, monkeypatch, write_json):
        monkeypatch.setenv("OCP_CATALOG", write_json("c.json", CUSTOM_CATALOG))
        main(["products"])
        out = capsys.readouterr().out
        assert "sklep" in out
        assert "Chair" in out
        assert "Apple" not in out

    def test_missing_catalog(self, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["products", "--catalog", str(tmp_path / "brak.json")])
        assert exc.value.code == 1
        assert "Brak pliku katalogu" in capsys.readouterr().out

    def test_broken_catalog(self, capsys, write_json):
        path = write_json("c.json", {"products": [{"name": "X", "color": "pink", "size": "small"}]})
        with pytest.raises(SystemExit) as exc:
            main(["products", "--catalog", path])
        assert exc.value.code == 1

    @pytest.mark.parametrize("data", [
        [{"name": "A", "color": "green", "size": "small"}],
        {"products": ["Apple"]},
        {"products": [{"name": None, "color": "green", "size": "small"}]},
    ])
    def test_malformed_catalog_shape(self, capsys, write_json, data):
        with pytest.raises(SystemExit) as exc:
            main(["products", "--catalog", write_json("c.json", data)])
        assert exc.value.code == 1
        assert "Błąd wczytywania katalogu" in capsys.readouterr().out

    def test_catalog_is_directory(self, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["products", "--catalog", str(tmp_path)])
        assert exc.value.code == 1

class TestFilter:
    def test_names_only(self, capsys):
        main(["filter", "--where", "color=green", "--names-only"])
        assert capsys.readouterr().out == "Apple\nTree\n"

    def test_conjunction_table(self, capsys):
        main(["filter", "--where", "color=blue, size=large"])
        out = capsys.readouterr().out
        assert "color == blue AND size == large" in out
        assert "House" in out
        assert "Apple" not in out
        assert "Tree" not in out

    def test_no_matches(self, capsys):
        main(["filter", "--where", "color=red"])
        assert "Brak pasujących" in capsys.readouterr().out

    def test_spec_file(self, capsys, write_json):
        spec = write_json("s.json", {"and": [{"attr": "color", "eq": "green"}, {"attr": "size", "eq": "large"}]})
        main(["filter", "--spec-file", spec, "--names-only"])
        assert capsys.readouterr().out == "Tree\n"

    def test_custom_catalog_keeps_order(self, capsys, write_json):
        catalog = write_json("c.json", CUSTOM_CATALOG)
        main(["filter", "-c", catalog, "-w", "color=red", "--names-only"])
        assert capsys.readouterr().out == "Lamp\nSofa\n"

    def test_invalid_expression(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["filter", "--where", "color=purple"])
        assert exc.value.code == 1
        assert "E_VALUE_INVALID" in capsys.readouterr().out

    def test_missing_spec_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["filter", "--spec-file", str(tmp_path / "brak.json")])
        assert exc.value.code == 1

    def test_non_utf8_spec_file(self, capsys, tmp_path):
        path = tmp_path / "s.json"
        path.write_bytes(b'{"attr": "name", "eq": "\xff"}')
        with pytest.raises(SystemExit) as exc:
            main(["filter", "--spec-file", str(path)])
        assert exc.value.code == 1
        assert "E_SYNTAX" in capsys.readouterr().out

    def test_spec_file_is_directory(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["filter", "--spec-file", str(tmp_path)])
        assert exc.value.code == 1

    def test_quoted_value_with_comma(self, capsys, write_json):
        catalog = write_json("c.json", {"products": [
            {"name": "Apple, Inc", "color": "red", "size": "large"},
            {"name": "Apple", "color": "red", "size": "large"},
        ]})
        main(["filter", "-c", catalog, "-w", 'name="Apple, Inc"', "--names-only"])
        assert capsys.readouterr().out == "Apple, Inc\n"

    def test_where_and_spec_file_exclusive(self, write_json):
        spec = write_json("s.json", {"attr": "color", "eq": "green"})
        with pytest.raises(SystemExit) as exc:
            main(["filter", "--where", "color=green", "--spec-file", spec])
        assert exc.value.code == 2


class TestCheck:
    def test_valid(self, capsys, write_json):
        path = write_json("s.json", {"and": [{"attr": "color", "eq": "green"}, {"attr": "size", "eq": "large"}]})
        main(["check", path])
        out = capsys.readouterr().out
        assert "OK" in out
        assert "color == green AND size == large" in out

    def test_invalid(self, capsys, write_json):
        path = write_json("s.json", {"attr": "weight", "eq": "1"})
        with pytest.raises(SystemExit) as exc:
            main(["check", path])
        assert exc.value.code == 1
        assert "E_ATTR_UNKNOWN" in capsys.readouterr().out

    def test_json_output(self, capsys, write_json):
        path = write_json("s.json", {"and": [{"attr": "color", "eq": "green"}]})
        with pytest.raises(SystemExit):
            main(["check", path, "--json"])
        out = json.loads(capsys.readouterr().out)
        assert out["is_valid"] is False
        assert out["errors"][0]["code"] == "E_SCHEMA_VIOLATION"
        assert out["errors"][0]["path"] == "/and"

    def test_json_output_valid(self, capsys, write_json):
        path = write_json("s.json", {"attr": "size", "eq": "small"})
        main(["check", path, "--json"])
        assert json.loads(capsys.readouterr().out) == {"is_valid": True, "errors": []}

    def test_bad_json(self, capsys, tmp_path):
        path = tmp_path / "s.json"
        path.write_text("[", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main(["check", str(path)])
        assert exc.value.code == 1

    def test_non_utf8_file(self, capsys, tmp_path):
        path = tmp_path / "s.json"
        path.write_bytes(b'{"attr": "name", "eq": "\xff"}')
        with pytest.raises(SystemExit) as exc:
            main(["check", str(path)])
        assert exc.value.code == 1
        assert "Błąd parsowania JSON" in capsys.readouterr().out

    def test_directory(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["check", str(tmp_path)])
        assert exc.value.code == 1
