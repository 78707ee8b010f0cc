"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Constructor arguments
  2. Environment variables  (HEADINGHANDLER__FORMAT__INDENT_UNIT="    ")
  3. headinghandler.yaml    (searched in cwd, then platform config dir)
  4. Hardcoded defaults

The config file is optional. All fields have defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_DEFAULT_CONFIG_DIR = platformdirs.user_config_dir("headinghandler")


def _find_config_file() -> str | None:
    """Return the path of the first headinghandler.yaml found, or None."""
    candidates = [
        Path("headinghandler.yaml"),
        Path(_DEFAULT_CONFIG_DIR) / "headinghandler.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class FormatSettings(BaseModel):
    """How indentation and headings are spelled in the document."""

    indent_unit: str = "\t"
    heading_char: str = "#"

    @field_validator("indent_unit")
    @classmethod
    def validate_indent_unit(cls, v: str) -> str:
        if not v or not v.isspace():
            raise ValueError(f"indent_unit must be non-empty whitespace, got {v!r}")
        return v

    @field_validator("heading_char")
    @classmethod
    def validate_heading_char(cls, v: str) -> str:
        if len(v) != 1 or v.isspace():
            raise ValueError(f"heading_char must be a single visible character, got {v!r}")
        return v


class HierarchySettings(BaseModel):
    # "stop": a list line never looks past a line of another marker family.
    # "skip": such lines are ignored and the upward scan continues.
    prefix_mismatch: Literal["stop", "skip"] = "stop"


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["json", "text"] = "text"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: HEADINGHANDLER__LOGGING__LEVEL=DEBUG
        env_prefix="HEADINGHANDLER__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    format: FormatSettings = FormatSettings()
    hierarchy: HierarchySettings = HierarchySettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
