"""
Configuration models.

Parses exprcalc.toml and provides typed configuration for the renderer,
the parser and the interactive prompt.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from exprcalc.core.errors import ConfigError
from exprcalc.core.expression_lang.parser import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT
from exprcalc.core.expression_lang.renderer import DEFAULT_INDENT

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "exprcalc.toml"


class DisplayConfig(BaseModel):
    """Tree display configuration."""

    model_config = ConfigDict(extra="forbid")

    indent: int = Field(default=DEFAULT_INDENT, ge=1, le=16)
    show_tree: bool = True


class ParserConfig(BaseModel):
    """Parser limits."""

    model_config = ConfigDict(extra="forbid")

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1, le=MAX_DEPTH_LIMIT)


class ReplConfig(BaseModel):
    """Interactive prompt configuration."""

    model_config = ConfigDict(extra="forbid")

    prompt: str = "> "


class ExprCalcConfig(BaseModel):
    """Complete configuration."""

    model_config = ConfigDict(extra="forbid")

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
    repl: ReplConfig = Field(default_factory=ReplConfig)


def load_config(toml_path: Path | None = None, cwd: Path | None = None) -> ExprCalcConfig:
    """
    Load configuration from exprcalc.toml.

    Args:
        toml_path: Explicit config file; must exist when given.
        cwd: Directory searched for exprcalc.toml when no path is given.
            Defaults to the current working directory.

    Returns:
        ExprCalcConfig with parsed values or defaults

    Raises:
        ConfigError: If the file is missing (explicit path only), is not
            valid TOML, or holds unknown keys or out-of-range values.
    """
    if toml_path is None:
        candidate = (cwd or Path.cwd()) / CONFIG_FILENAME
        if not candidate.is_file():
            logger.debug("No %s found, using defaults", CONFIG_FILENAME)
            return ExprCalcConfig()
        toml_path = candidate
    elif not toml_path.is_file():
        raise ConfigError(f"Config file not found: {toml_path}")

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {toml_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {toml_path}: {e}") from e

    try:
        config = ExprCalcConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {toml_path}:\n{e}") from e

    logger.debug("Loaded configuration from %s", toml_path)
    return config
