"""Tests for loading the generator config."""
import json

import pytest

from modelgen.core.config import DataModelGenConfig, load_config, parse_config
from modelgen.core.errors import ShapeValidationError


def _write(tmp_path, data):
    path = tmp_path / "data_model_gen.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_valid_config(tmp_path):
    """Test that camelCase keys map onto the settings fields."""
    config = load_config(_write(tmp_path, {"outDir": "out", "inDir": "models"}))

    assert isinstance(config, DataModelGenConfig)
    assert config.out_dir == "out"
    assert config.in_dir == "models"
    assert config.allow_cycles is True


def test_allow_cycles_can_be_disabled(tmp_path):
    config = load_config(_write(tmp_path, {"outDir": "out", "inDir": "in", "allowCycles": False}))
    assert config.allow_cycles is False


def test_missing_fields_are_all_named(tmp_path):
    """Test that every missing required field is reported."""
    with pytest.raises(ShapeValidationError) as exc_info:
        load_config(_write(tmp_path, {}))
    assert exc_info.value.failures == ["outDir", "inDir"]
    assert "outDir" in str(exc_info.value)
    assert "inDir" in str(exc_info.value)


def test_wrong_typed_field(tmp_path):
    with pytest.raises(ShapeValidationError) as exc_info:
        load_config(_write(tmp_path, {"outDir": 1, "inDir": "models"}))
    assert exc_info.value.failures == ["outDir"]


def test_non_object_config_reports_root(tmp_path):
    with pytest.raises(ShapeValidationError) as exc_info:
        load_config(_write(tmp_path, ["outDir", "inDir"]))
    assert exc_info.value.failures == ["root"]


def test_invalid_json(tmp_path):
    path = tmp_path / "data_model_gen.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ShapeValidationError):
        load_config(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.json")


def test_parse_config_ignores_unknown_keys():
    config = parse_config({"outDir": "a", "inDir": "b", "comment": "x"})
    assert (config.out_dir, config.in_dir) == ("a", "b")


def test_environment_does_not_fill_missing_fields(tmp_path, monkeypatch):
    """Test that settings come from the config file alone."""
    monkeypatch.setenv("OUTDIR", "from-env")
    monkeypatch.setenv("ALLOWCYCLES", "false")
    with pytest.raises(ShapeValidationError) as exc_info:
        load_config(_write(tmp_path, {"inDir": "in"}))
    assert exc_info.value.failures == ["outDir"]


def test_environment_does_not_override_file_values(tmp_path, monkeypatch):
    monkeypatch.setenv("INDIR", "from-env")
    monkeypatch.setenv("ALLOWCYCLES", "false")
    config = load_config(_write(tmp_path, {"outDir": "out", "inDir": "in"}))
    assert config.in_dir == "in"
    assert config.allow_cycles is True


def test_undecodable_config(tmp_path):
    path = tmp_path / "data_model_gen.json"
    path.write_bytes(b'{"outDir": "\xff"}')
    with pytest.raises(ShapeValidationError) as exc_info:
        load_config(path)
    assert exc_info.value.failures == ["root (not UTF-8)"]
