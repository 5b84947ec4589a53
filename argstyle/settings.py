# Argstyle CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""settings.py
Runtime settings for Argstyle tools, validated from parsed arguments."""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, TypeAdapter, ValidationError, field_validator

from argstyle.colors import Color
from argstyle.logger import logger
from argstyle.store import ArgumentStore

_BOOL = TypeAdapter(bool)

SETTINGS_ARGUMENTS: dict[str, tuple[str, str | None]] = {
    "color": ("color", None),
    "log_mode": ("log-mode", None),
    "log_file": ("log-file", None),
    "verbose": ("verbose", "v"),
    "foreground": ("fg", None),
    "background": ("bg", None),
}


class Settings(BaseModel):
    """
    Settings recognised on the command line of an Argstyle tool.

    `--color` and `--verbose` accept boolean words (`--color=no`); any other
    value means the flag is on.
    """

    color: bool = False
    log_mode: Literal["cli", "json"] | None = None
    log_file: str | None = None
    verbose: bool = False
    foreground: Color = Color.WHITE
    background: Color = Color.BLACK

    @field_validator("color", "verbose", mode="before")
    @classmethod
    def flag_value(cls, value: Any) -> bool:
        # `--color=no` switches off; a value that is not a boolean word
        # (`--color always`) still counts as the flag being present.
        if isinstance(value, str):
            try:
                return _BOOL.validate_python(value)
            except ValidationError:
                return True
        return bool(value)

    @field_validator("foreground", "background", mode="before")
    @classmethod
    def color_name(cls, value: Any) -> Color:
        if isinstance(value, Color):
            return value
        return Color.from_name(str(value))

    @field_validator("log_file", mode="before")
    @classmethod
    def log_file_path(cls, value: Any) -> str | None:
        if value is True:
            raise ValueError("--log-file requires a path")
        return value

    @classmethod
    def from_store(cls, store: ArgumentStore) -> Settings:
        """
        Build settings from parsed arguments.

        Invalid values are logged and replaced by the field default, so a tool
        always starts with usable settings.
        """
        raw: dict[str, Any] = {}
        for field, (name, alias) in SETTINGS_ARGUMENTS.items():
            if store.has(name, alias):
                raw[field] = store.get(name, alias)

        try:
            return cls.model_validate(raw)
        except ValidationError as error:
            invalid = {str(detail["loc"][0]) for detail in error.errors() if detail["loc"]}
            for field in sorted(invalid):
                logger.warning(
                    "Ignoring invalid value %r for '%s'", raw.get(field), field
                )
                raw.pop(field, None)
            return cls.model_validate(raw)
