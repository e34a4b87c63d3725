from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound
from rich.errors import StyleSyntaxError
from rich.style import Style

from diffrender.exception import ConfigError
from diffrender.share import get_config_file


class StyleConfig(BaseModel):
    """Rich style definitions for the rendered diff."""

    context: str = Field(default="dim", description="Style of context and raw lines")
    removed: str = Field(default="red", description="Style of removed lines")
    added: str = Field(default="green", description="Style of added lines")
    inverse: str = Field(default="reverse", description="Style of changed words")

    @field_validator("context", "removed", "added", "inverse")
    @classmethod
    def _validate_style(cls, value: str) -> str:
        try:
            Style.parse(value)
        except StyleSyntaxError as exc:
            raise ValueError(f"invalid style {value!r}: {exc}") from exc
        return value


class Config(BaseModel):
    """Main configuration structure."""

    styles: StyleConfig = Field(default_factory=StyleConfig)
    syntax_highlight: bool = Field(
        default=True, description="Syntax highlight lines outside intra-line diffs"
    )
    code_theme: str | None = Field(
        default=None,
        description="Pygments theme for syntax highlighting, detected from the terminal if unset",
    )

    @field_validator("code_theme")
    @classmethod
    def _validate_code_theme(cls, value: str | None) -> str | None:
        if value is None:
            return value
        try:
            get_style_by_name(value)
        except ClassNotFound as exc:
            raise ValueError(f"unknown code theme {value!r}") from exc
        return value


def get_default_config() -> Config:
    return Config()


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from a JSON or TOML file.

    A missing file yields the default configuration.
    """
    config_file = config_file or get_config_file()
    if not config_file.exists():
        logger.debug("Config file {file} not found, using defaults", file=config_file)
        return get_default_config()

    logger.debug("Loading config from {file}", file=config_file)
    try:
        text = config_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read config file {config_file}: {exc}") from exc
    return load_config_from_string(text)


def load_config_from_string(text: str) -> Config:
    """Parse configuration text, trying JSON first and TOML second."""
    data = _parse_config_text(text)
    try:
        return Config.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def _parse_config_text(text: str) -> dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as json_exc:
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as toml_exc:
            raise ConfigError(f"Invalid configuration text: {json_exc}; {toml_exc}") from toml_exc
    if not isinstance(data, dict):
        raise ConfigError("Invalid configuration text: expected a table at the top level")
    return data
