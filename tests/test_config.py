"""Tests for encoding definitions and settings."""

import json
from pathlib import Path

import pytest

from ucm_charmap.config import (
    DEFAULT_ENCODINGS,
    EncodingDefinition,
    get_base_dir,
    get_timeout,
    load_definitions,
)


class TestEncodingDefinition:
    """Tests for EncodingDefinition."""

    def test_defaults(self) -> None:
        (ebcdic_k,) = DEFAULT_ENCODINGS
        assert ebcdic_k.name == "EBCDIC-K"
        assert ebcdic_k.var_name == "EBCDIC_K"
        assert ebcdic_k.replacement == 0x3F
        assert ebcdic_k.mapping == "file:ebcdic-k.ucm"

    def test_var_name_aliases(self) -> None:
        definition = EncodingDefinition("Windows-1252", "file:cp1252.ucm", "Windows1252, CP1252")
        assert definition.var_names == ["Windows1252", "CP1252"]
        assert definition.primary_var_name == "Windows1252"

    def test_from_dict_hex_replacement(self) -> None:
        definition = EncodingDefinition.from_dict(
            {"name": "KOI8-R", "mapping": "file:koi8-r.ucm", "replacement": "0x1a"}
        )
        assert definition.replacement == 0x1A
        assert definition.var_name == "KOI8_R"

    def test_dict_round_trip(self) -> None:
        definition = EncodingDefinition("X", "file:x.ucm", "X", 0x6F, "note")
        assert EncodingDefinition.from_dict(definition.to_dict()) == definition


class TestLoadDefinitions:
    """Tests for JSON definition files."""

    def test_list_form(self, tmp_path: Path) -> None:
        path = tmp_path / "encodings.json"
        path.write_text(json.dumps([
            {"name": "A", "mapping": "file:a.ucm", "var_name": "A"},
            {"name": "B", "mapping": "https://example.com/b.ucm", "varName": "B", "replacement": 26},
        ]))
        definitions = load_definitions(path)
        assert [d.name for d in definitions] == ["A", "B"]
        assert definitions[1].replacement == 26

    def test_object_form(self, tmp_path: Path) -> None:
        path = tmp_path / "encodings.json"
        path.write_text(json.dumps({"encodings": [{"name": "A", "mapping": "a.ucm"}]}))
        assert load_definitions(path)[0].mapping == "a.ucm"

    def test_missing_field(self, tmp_path: Path) -> None:
        path = tmp_path / "encodings.json"
        path.write_text(json.dumps([{"name": "A"}]))
        with pytest.raises(ValueError, match="#0"):
            load_definitions(path)

    def test_replacement_out_of_range(self, tmp_path: Path) -> None:
        path = tmp_path / "encodings.json"
        path.write_text(json.dumps([{"name": "A", "mapping": "a.ucm", "replacement": 300}]))
        with pytest.raises(ValueError):
            load_definitions(path)

    def test_not_json(self, tmp_path: Path) -> None:
        path = tmp_path / "encodings.json"
        path.write_text("{not json")
        with pytest.raises(ValueError):
            load_definitions(path)

    def test_wrong_shape(self, tmp_path: Path) -> None:
        path = tmp_path / "encodings.json"
        path.write_text(json.dumps({"name": "A"}))
        with pytest.raises(ValueError):
            load_definitions(path)


class TestSettings:
    """Tests for environment settings."""

    def test_base_dir_default(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.delenv("UCM_CHARMAP_BASE_DIR", raising=False)
        monkeypatch.chdir(tmp_path)
        assert get_base_dir().resolve() == tmp_path.resolve()

    def test_base_dir_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("UCM_CHARMAP_BASE_DIR", str(tmp_path))
        assert get_base_dir().resolve() == tmp_path.resolve()

    def test_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("UCM_CHARMAP_TIMEOUT", raising=False)
        assert get_timeout() == 30.0
        monkeypatch.setenv("UCM_CHARMAP_TIMEOUT", "5")
        assert get_timeout() == 5.0
        monkeypatch.setenv("UCM_CHARMAP_TIMEOUT", "soon")
        with pytest.raises(ValueError):
            get_timeout()
