"""Unified settings — init kwargs, env vars, and pyproject.toml in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — pytest command-line options
  2. Env vars     — ``STANDIN_*`` prefix
  3. TOML table   — ``[tool.standin]`` in the nearest ``pyproject.toml``
  4. Code defaults

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`standin.config.discovery`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from standin.config.discovery import ConfigError, find_config, load_tool_table


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from the ``[tool.standin]`` table of a pyproject.toml."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = load_tool_table(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full table for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class StandInSettings(BaseSettings):
    """Logging settings for standin.

    Settings never change how a stand-in behaves; they only decide how
    much the ``standin`` logger says and in which format.

    Attributes:
        verbose: Emit DEBUG records (one per spawned stand-in).
        log_json: Render records as JSON lines instead of console text.
        config_path: The pyproject.toml the settings were read from.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "STANDIN_",
        "extra": "ignore",
    }

    verbose: bool = False
    log_json: bool = False
    config_path: Path | None = None

    @property
    def wants_logging(self) -> bool:
        """Whether logging needs to be configured at all."""
        return self.verbose or self.log_json

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def load(cls, start: Path | None = None, **overrides: Any) -> StandInSettings:
        """Discover pyproject.toml from *start* and merge *overrides* on top.

        ``None`` overrides are dropped so unset command-line options fall
        through to env vars and the TOML table. Invalid values from any
        source raise :class:`ConfigError`.
        """
        toml_path = find_config(start)
        flags = {key: value for key, value in overrides.items() if value is not None}
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **flags)
        except ValidationError as exc:
            source = toml_path or "environment"
            raise ConfigError(f"Invalid standin settings ({source}): {exc}") from exc
        finally:
            _tls.toml_path = None
