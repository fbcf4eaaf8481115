"""Config file loading (YAML/JSON).

String values may reference environment variables as `${NAME}` or
`${NAME:-fallback}`. A reference to an unset variable without a fallback is a
config error, reported with the key path where it occurred.
"""

from __future__ import annotations

import json
import os
import re
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import ValidationError
import yaml

from offset_timestamps.config.models import ExtensionsConfig

_ENV_REFERENCE = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<fallback>[^}]*))?\}")


class ConfigError(ValueError):
    """Raised when a config file cannot be loaded or validated."""


def _parse_yaml(text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML: {exc}") from exc


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON: {exc}") from exc


_PARSERS: dict[str, Callable[[str], Any]] = {
    ".yaml": _parse_yaml,
    ".yml": _parse_yaml,
    ".json": _parse_json,
}


def load_config(path: str | Path) -> ExtensionsConfig:
    """Load a helper config; an empty file yields the defaults."""

    config_path = Path(path).expanduser().resolve()
    parser = _PARSERS.get(config_path.suffix.lower())
    if parser is None:
        raise ConfigError(f"Unsupported config format {config_path.suffix!r} (use .yaml, .yml, or .json)")
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    document = parser(config_path.read_text(encoding="utf-8"))
    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise ConfigError("Config file must parse to an object at the root level")

    missing: list[str] = []
    resolved = _substitute_env(document, "", missing)
    if missing:
        raise ConfigError("Unset environment variable(s) in config: " + ", ".join(missing))

    try:
        return ExtensionsConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _substitute_env(value: Any, where: str, missing: list[str]) -> Any:
    if isinstance(value, dict):
        return {key: _substitute_env(item, f"{where}.{key}" if where else str(key), missing) for key, item in value.items()}
    if isinstance(value, list):
        return [_substitute_env(item, f"{where}[{index}]", missing) for index, item in enumerate(value)]
    if not isinstance(value, str):
        return value

    def replace(match: re.Match[str]) -> str:
        name = match.group("name")
        if name in os.environ:
            return os.environ[name]
        if match.group("fallback") is not None:
            return match.group("fallback")
        missing.append(f"${{{name}}} at {where}")
        return match.group(0)

    return _ENV_REFERENCE.sub(replace, value)
