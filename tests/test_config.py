"""Unit tests for configuration loading and validation."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from skrape.config import ExtractionConfig, FieldRule, ParserConfig, load_config
from skrape.exceptions import ConfigError


def _write(tmp_path: Path, data: object) -> Path:
    config_file = tmp_path / "recipe.yaml"
    config_file.write_text(yaml.dump(data))
    return config_file


def test_load_valid_config(tmp_path: Path) -> None:
    """Test a complete recipe loads with all fields."""
    config_file = _write(
        tmp_path,
        {
            "name": "cards",
            "description": "Card components",
            "parser": {"relaxed": False, "base_url": "https://example.com/"},
            "fields": [
                {"name": "title", "selector": "slot[name='title']"},
                {"name": "links", "selector": "a", "attribute": "href", "multiple": True},
            ],
        },
    )

    config = load_config(config_file)

    assert config.name == "cards"
    assert config.parser.relaxed is False
    assert config.parser.base_url == "https://example.com/"
    assert [rule.name for rule in config.fields] == ["title", "links"]
    assert config.fields[1].attribute == "href"
    assert config.fields[1].multiple is True


def test_defaults() -> None:
    """Test parser and field defaults."""
    parser = ParserConfig()
    rule = FieldRule(name="title", selector="  h1 ")

    assert parser.relaxed is True
    assert parser.base_url is None
    assert parser.encoding == "utf-8"
    assert rule.selector == "h1"
    assert rule.attribute is None
    assert rule.multiple is False


def test_blank_selector_rejected() -> None:
    """Test a whitespace-only selector is invalid."""
    with pytest.raises(ValidationError, match="selector cannot be empty"):
        FieldRule(name="title", selector="   ")


def test_duplicate_field_names_rejected() -> None:
    """Test two fields cannot share a name."""
    with pytest.raises(ValidationError, match="Duplicate field name: title"):
        ExtractionConfig(
            name="x",
            fields=[
                FieldRule(name="title", selector="h1"),
                FieldRule(name="title", selector="h2"),
            ],
        )


def test_fields_required() -> None:
    """Test a recipe needs at least one field."""
    with pytest.raises(ValidationError):
        ExtractionConfig(name="x", fields=[])


def test_missing_file(tmp_path: Path) -> None:
    """Test a missing file raises ConfigError."""
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


def test_directory_path(tmp_path: Path) -> None:
    """Test a directory path raises ConfigError."""
    with pytest.raises(ConfigError, match="not a file"):
        load_config(tmp_path)


def test_invalid_yaml(tmp_path: Path) -> None:
    """Test invalid YAML raises ConfigError."""
    config_file = tmp_path / "recipe.yaml"
    config_file.write_text("invalid: yaml: syntax: [")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(config_file)


def test_empty_file(tmp_path: Path) -> None:
    """Test an empty file raises ConfigError."""
    config_file = tmp_path / "recipe.yaml"
    config_file.write_text("")

    with pytest.raises(ConfigError, match="empty"):
        load_config(config_file)


def test_non_mapping(tmp_path: Path) -> None:
    """Test a YAML list raises ConfigError."""
    config_file = _write(tmp_path, ["a", "b"])

    with pytest.raises(ConfigError, match="YAML object/dict"):
        load_config(config_file)


def test_validation_failure(tmp_path: Path) -> None:
    """Test schema violations raise ConfigError."""
    config_file = _write(tmp_path, {"name": "x", "fields": [{"name": "title"}]})

    with pytest.raises(ConfigError, match="validation failed"):
        load_config(config_file)
