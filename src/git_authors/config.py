from __future__ import annotations

import argparse
import dataclasses
import json
from pathlib import Path

from .listing import DEFAULT_EXCLUDE_PATTERN


class ConfigError(Exception):
    pass


@dataclasses.dataclass(frozen=True)
class AuthorsConfig:
    read_authors: str = ""
    authors: bool = False
    names: bool = False
    stats: bool = False
    min: int = 1
    geekrank: bool = False
    exclude_commits: str = ""
    exclude_pattern: str = DEFAULT_EXCLUDE_PATTERN
    repo: str = "."
    verbose: bool = False


def load_config(config_path: Path | None) -> dict:
    if config_path is None:
        return {}
    if not config_path.exists():
        raise ConfigError(f"cannot read config {config_path}: no such file")
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigError(f"cannot read config {config_path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config {config_path} must hold a JSON object")
    return data


def _check_type(key: str, value: object, expected: type) -> object:
    # bool is an int subclass; keep `"min": true` out.
    if expected is int and isinstance(value, bool):
        raise ConfigError(f"config key {key!r} must be an integer, got {value!r}")
    if not isinstance(value, expected):
        raise ConfigError(f"config key {key!r} must be {expected.__name__}, got {value!r}")
    return value


def build_config(args: argparse.Namespace, file_config: dict) -> AuthorsConfig:
    """
    Resolve each option: command line first, then the JSON config file, then
    the AuthorsConfig default. Unknown JSON keys are ignored.
    """
    values: dict[str, object] = {}
    for field in dataclasses.fields(AuthorsConfig):
        cli_value = getattr(args, field.name, None)
        if cli_value is not None:
            values[field.name] = cli_value
        elif field.name in file_config:
            expected = {"str": str, "bool": bool, "int": int}[str(field.type)]
            values[field.name] = _check_type(field.name, file_config[field.name], expected)
    return AuthorsConfig(**values)
