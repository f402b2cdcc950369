# Optim Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Settings for Optim sessions, loadable from TOML or YAML.

Example `optim.toml`:

    [optim]
    args_width = 24
    help_width = 56
    default_metavar = "VALUE"
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, field_validator

from optim.logger import logger
from optim.usage import ARGS_WIDTH, HELP_WIDTH


class OptimSettings(BaseModel):
    """Layout and built-in option settings for a session."""

    args_width: int = ARGS_WIDTH
    help_width: int = HELP_WIDTH
    default_metavar: str = "ARG"

    help_short: str | None = "h"
    help_long: str | None = "help"
    help_text: str = "Print this help message"

    version_long: str = "version"
    version_text: str = "Print version information"

    @field_validator("args_width", "help_width")
    @classmethod
    def validate_width(cls, value: int) -> int:
        if value <= 2:
            raise ValueError("column widths must be greater than 2")
        return value

    @field_validator("help_short")
    @classmethod
    def validate_short(cls, value: str | None) -> str | None:
        if value is not None and len(value) != 1:
            raise ValueError("short option must be a single character")
        return value

    @field_validator("default_metavar", "version_long")
    @classmethod
    def validate_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("value must not be empty")
        return value


def find_settings_file() -> Path | None:
    """Return the first settings file found in the usual locations."""
    candidates = [
        Path.cwd() / "optim.toml",
        Path.cwd() / "optim.yaml",
        Path.cwd() / ".optim.toml",
        Path.cwd() / ".optim.yaml",
        Path(os.environ.get("OPTIM_CONFIG", "optim.toml")),
        Path.home() / ".config" / "optim" / "optim.toml",
        Path.home() / ".config" / "optim" / "optim.yaml",
    ]
    return next((path for path in candidates if path.is_file()), None)


def load_settings(path: Path | str) -> OptimSettings:
    """
    Load `OptimSettings` from a TOML or YAML file.

    Settings may sit at the top level of the file or under an `optim` table.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file type is unsupported or the content is invalid.
    """
    if isinstance(path, str):
        path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"No such settings file: {path}")

    suffix = path.suffix.lower()
    with path.open("r", encoding="UTF-8") as settings_file:
        if suffix == ".toml":
            raw: Any = toml.load(settings_file)
        elif suffix in (".yaml", ".yml"):
            raw = yaml.safe_load(settings_file) or {}
        else:
            raise ValueError(f"Unsupported settings format: {suffix}")

    if not isinstance(raw, dict):
        raise ValueError(f"Settings file {path} must contain a table or mapping")
    data = raw.get("optim", raw)
    logger.debug("Loaded settings from '%s': %s", path, data)
    return OptimSettings.model_validate(data)
