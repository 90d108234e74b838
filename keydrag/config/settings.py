"""
keydrag.config.settings - Configuracion "keydrag".

Ajustes que el usuario puede cambiar:

    horizontal-step  Pixeles por paso horizontal (default 10, entero > 0).
    vertical-step    Pixeles por paso vertical (default 10, entero > 0).
    prefix           Prefijo de los bindings normales (default "A").
    slow-prefix      Prefijo de los bindings lentos (default "C-A").

KeydragSettings es un modelo de pydantic-settings: los valores se
validan al construirse y al asignarse, asi que nunca queda en un estado
invalido. Opcionalmente se cargan desde la tabla [keydrag] de un TOML:

    [keydrag]
    horizontal-step = 20
    vertical-step = 20
    prefix = "W"
    slow-prefix = "W-S"
"""

from __future__ import annotations

import logging
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from keydrag.config.keypad import DEFAULT_PREFIX, DEFAULT_SLOW_PREFIX, check_prefix
from keydrag.core.errors import SettingError
from keydrag.core.steps import DEFAULT_STEP, StepConfig

log = logging.getLogger(__name__)

TABLE = "keydrag"


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read the [keydrag] table of a TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None:
            return
        raw = toml_path.read_text(encoding="utf-8")
        try:
            data = tomllib.loads(raw)
        except tomllib.TOMLDecodeError as exc:
            raise SettingError(f"Invalid TOML in {toml_path}: {exc}") from exc
        table = data.get(TABLE, {})
        if not isinstance(table, dict):
            raise SettingError(f"[{TABLE}] in {toml_path} must be a table")
        self._data = table

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path seen by settings_customise_sources while from_toml() runs
_tls = threading.local()


class KeydragSettings(BaseSettings):
    """
    The user settings of keydrag.

    Field names are Python identifiers; the TOML keys and dump_state()
    use the dashed aliases ("horizontal-step").
    """

    model_config = SettingsConfigDict(
        validate_assignment=True,
        populate_by_name=True,
        extra="forbid",
    )

    horizontal_step: int = Field(
        DEFAULT_STEP, gt=0, strict=True, alias="horizontal-step",
        description="Number of pixels to step horizontally.",
    )
    vertical_step: int = Field(
        DEFAULT_STEP, gt=0, strict=True, alias="vertical-step",
        description="Number of pixels to step vertically.",
    )
    prefix: str = Field(
        DEFAULT_PREFIX, strict=True, alias="prefix",
        description="Key prefix for normal-speed keypad bindings.",
    )
    slow_prefix: str = Field(
        DEFAULT_SLOW_PREFIX, strict=True, alias="slow-prefix",
        description="Key prefix for slow keypad bindings.",
    )

    @field_validator("prefix", "slow_prefix")
    @classmethod
    def _valid_prefix(cls, value: str) -> str:
        # ChordParseError is a ValueError, so pydantic reports it
        return check_prefix(value)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Keyword arguments first, then the TOML table, then defaults."""
        return (
            init_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_toml(cls, path: str | Path, **overrides: Any) -> KeydragSettings:
        """
        Build settings from the [keydrag] table of *path*.

        Raises:
            SettingError:    If the file is not valid TOML or [keydrag] is
                             not a table.
            ValidationError: If the table holds unknown or invalid values.
            OSError:         If the file cannot be read.
        """
        _tls.toml_path = Path(path)
        try:
            return cls(**overrides)
        finally:
            _tls.toml_path = None

    def steps(self) -> StepConfig:
        """Current step configuration; read at each command invocation."""
        return StepConfig(self.horizontal_step, self.vertical_step)

    def dump_state(self) -> str:
        lines = [f"=== Settings {TABLE} ===", ""]
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            lines.append(f"  {field.alias:<16s} = {value!r:<8}  {field.description}")
        return "\n".join(lines)


def describe_errors(exc: ValidationError) -> str:
    """One "key: message" line per error, keyed by the TOML name."""
    return "\n".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )


def load_settings(path: str | Path) -> KeydragSettings:
    """
    Load the [keydrag] table of a TOML file.

    Raises:
        SettingError: If the file is not valid TOML, [keydrag] is not a
                      table, or it holds unknown or invalid settings.
        OSError:      If the file cannot be read.
    """
    try:
        settings = KeydragSettings.from_toml(path)
    except ValidationError as exc:
        raise SettingError(f"Invalid settings in {path}:\n{describe_errors(exc)}") from exc

    log.info(
        "Settings loaded from %s: %s",
        path, settings.model_dump(by_alias=True),
    )
    return settings
