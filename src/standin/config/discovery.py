"""Config file discovery.

Walk-up finder locates the nearest ``pyproject.toml``, similar to how git
finds .git/. The ``STANDIN_CONFIG`` env var names an explicit file instead.
Settings live in the ``[tool.standin]`` table.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "STANDIN_CONFIG"
TOOL_TABLE = "standin"


class ConfigError(ValueError):
    """Raised when a config file cannot be parsed or holds invalid values."""


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for pyproject.toml.

    Returns the path to the config file, or None if not found.
    Checks STANDIN_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_tool_table(path: Path | None) -> dict[str, Any]:
    """Return the ``[tool.standin]`` table of *path*, or ``{}``.

    Raises:
        ConfigError: The file is not valid TOML.
    """
    if path is None or not path.is_file():
        return {}
    raw = path.read_text(encoding="utf-8")
    try:
        data: dict[str, Any] = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc
    table = data.get("tool", {}).get(TOOL_TABLE, {})
    return table if isinstance(table, dict) else {}
