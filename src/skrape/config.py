"""Configuration system.

YAML extraction recipes validated by Pydantic models. A recipe names the
fields to pull out of a document, each as a CSS selector plus an optional
attribute. Entry point: load_config().
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from skrape.exceptions import ConfigError


class ParserConfig(BaseModel):
    """How documents are parsed and how lookups that miss behave."""

    relaxed: bool = Field(
        default=True,
        description=(
            "If True, selectors matching nothing yield empty values. "
            "If False, a missing single-element field is an error."
        ),
    )
    base_url: str | None = Field(
        default=None,
        description="Resolve relative links (href, src, ...) against this URL",
    )
    encoding: str = Field(
        default="utf-8",
        description="Encoding used to read HTML files",
    )


class FieldRule(BaseModel):
    """A single value to extract from a document."""

    name: str = Field(..., min_length=1, description="Key of the value in the result")
    selector: str = Field(
        ...,
        description="CSS selector, e.g. 'h1.title' or 'template#row slot'",
    )
    attribute: str | None = Field(
        default=None,
        description="Attribute to read; the element text is used when omitted",
    )
    multiple: bool = Field(
        default=False,
        description="Collect every match as a list instead of the first match",
    )

    @field_validator("selector")
    @classmethod
    def validate_selector(cls, v: str) -> str:
        """Strip the selector and reject blank ones."""
        v = v.strip()
        if not v:
            raise ValueError("selector cannot be empty")
        return v


class ExtractionConfig(BaseModel):
    """Root configuration model for an extraction recipe."""

    name: str = Field(..., min_length=1, description="Recipe name")
    description: str = Field(
        default="",
        description="Human-readable description of this recipe",
    )
    parser: ParserConfig = Field(
        default_factory=ParserConfig,
        description="Parsing options",
    )
    fields: list[FieldRule] = Field(
        ...,
        min_length=1,
        description="Values to extract, in output order",
    )

    @model_validator(mode="after")
    def validate_unique_field_names(self) -> "ExtractionConfig":
        """Ensure no two fields share a name."""
        seen: set[str] = set()
        for rule in self.fields:
            if rule.name in seen:
                raise ValueError(f"Duplicate field name: {rule.name}")
            seen.add(rule.name)
        return self


def load_config(path: Path) -> ExtractionConfig:
    """Load and validate YAML configuration file.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated ExtractionConfig instance

    Raises:
        ConfigError: If config file is not found, invalid YAML, or validation fails
    """
    try:
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        if not path.is_file():
            raise ValueError(f"Configuration path is not a file: {path}")

        with path.open("r", encoding="utf-8") as f:
            config_dict = yaml.safe_load(f)

        if config_dict is None:
            raise ValueError(f"Configuration file is empty: {path}")

        if not isinstance(config_dict, dict):
            raise ValueError(
                f"Configuration file must contain a YAML object/dict, "
                f"got {type(config_dict).__name__}"
            )

        return ExtractionConfig(**config_dict)
    except FileNotFoundError as e:
        raise ConfigError(f"Configuration file not found: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed for {path}:\n{e}") from e
    except ValueError as e:
        raise ConfigError(str(e)) from e
