"""Configuration loading and persistence."""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.9-3.10
    import tomli as tomllib  # type: ignore[no-redef]

from slug_cli.core.constants import (
    BATCH_OUTPUT_FORMATS,
    CASE_CHOICES,
    DEFAULT_RANDOMNESS_LENGTH,
    DEFAULT_SEPARATOR,
)
from slug_cli.core.models import SlugOptions


class ConfigError(RuntimeError):
    """Raised when config file parsing or validation fails."""


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def expand_path(path_str: str) -> Path:
    """Expand user/env vars and return absolute path."""
    return Path(os.path.expandvars(path_str)).expanduser().resolve()


def default_config_path() -> Path:
    """Get default config file path."""
    raw = os.getenv("SLUG_CONFIG_FILE", "~/.config/slug/config.toml")
    return expand_path(raw)


def _default_config() -> Dict[str, Any]:
    return {
        "slug": {
            "separator": DEFAULT_SEPARATOR,
            "stop_words": [],
            "max_length": None,
            "randomness": False,
            "randomness_length": DEFAULT_RANDOMNESS_LENGTH,
            "case": "lower",
        },
        "batch": {
            "output_format": "json",
            "default_output": None,
        },
    }


DEFAULT_CONFIG: Dict[str, Any] = _default_config()


def _read_config(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    try:
        if suffix in {".toml", ""}:
            loaded = tomllib.loads(text)
        else:
            loaded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
    except Exception as exc:
        if suffix in {".toml", ""}:
            raise ConfigError(f"Invalid TOML in config file {path}: {exc}") from exc
        raise ConfigError(f"Failed to parse config file {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain an object/table at the root")
    return loaded


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from disk, merged with defaults."""
    cfg_path = path or default_config_path()
    cfg = _default_config()

    if cfg_path.exists():
        cfg = _deep_merge(cfg, _read_config(cfg_path))

    return cfg


def _toml_literal(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(value, list):
        items = ", ".join(_toml_literal(item) for item in value if item is not None)
        return f"[{items}]"
    raise TypeError(f"Unsupported TOML value type: {type(value)!r}")


def _dict_to_toml(data: Dict[str, Any], prefix: Optional[str] = None) -> str:
    lines = []
    plain_keys = []
    nested_keys = []

    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, dict):
            nested_keys.append((key, value))
        else:
            plain_keys.append((key, value))

    if prefix is not None:
        lines.append(f"[{prefix}]")

    for key, value in plain_keys:
        lines.append(f"{key} = {_toml_literal(value)}")

    if plain_keys and nested_keys:
        lines.append("")

    for index, (key, value) in enumerate(nested_keys):
        table_name = key if prefix is None else f"{prefix}.{key}"
        lines.append(_dict_to_toml(value, prefix=table_name))
        if index != len(nested_keys) - 1:
            lines.append("")

    return "\n".join(lines)


def save_config(config: Dict[str, Any], path: Optional[Path] = None) -> Path:
    """Save configuration to disk as TOML (default) or JSON."""
    cfg_path = path or default_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)

    if cfg_path.suffix.lower() == ".json":
        cfg_path.write_text(json.dumps(config, indent=2) + "\n", encoding="utf-8")
        return cfg_path

    cfg_path.write_text(_dict_to_toml(config).strip() + "\n", encoding="utf-8")
    return cfg_path


def _optional_int(section: Dict[str, Any], key: str) -> Optional[int]:
    value = section.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"slug.{key} must be an integer, got {value!r}")
    return value


def _bool(section: Dict[str, Any], key: str, default: bool = False) -> bool:
    value = section.get(key, default)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigError(f"slug.{key} must be true or false, got {value!r}")
    return value


def options_from_config(config: Dict[str, Any]) -> SlugOptions:
    """Build slug options from the ``[slug]`` table, env overrides first."""
    section = config.get("slug", {})

    separator = os.getenv("SLUG_SEPARATOR")
    if separator is None:
        separator = section.get("separator", DEFAULT_SEPARATOR)
    if not isinstance(separator, str):
        raise ConfigError(f"slug.separator must be a string, got {separator!r}")

    stop_words = section.get("stop_words") or []
    if isinstance(stop_words, str):
        stop_words = stop_words.split(",")
    if not isinstance(stop_words, list) or not all(isinstance(word, str) for word in stop_words):
        raise ConfigError("slug.stop_words must be a list of strings or a comma-separated string")

    case = str(section.get("case", "lower")).lower()
    if case not in CASE_CHOICES:
        raise ConfigError(f"slug.case must be one of {', '.join(CASE_CHOICES)}, got {case!r}")

    randomness_length = _optional_int(section, "randomness_length")

    return SlugOptions(
        separator=separator,
        stop_words=frozenset(stop_words),
        max_length=_optional_int(section, "max_length"),
        randomness=_bool(section, "randomness"),
        randomness_length=DEFAULT_RANDOMNESS_LENGTH if randomness_length is None else randomness_length,
        case=case,
    )


def resolve_output_format(config: Dict[str, Any], explicit: Optional[str] = None) -> str:
    """Resolve batch output format with CLI override first."""
    value = (explicit or config.get("batch", {}).get("output_format") or "json").lower()
    if value not in BATCH_OUTPUT_FORMATS:
        raise ConfigError(f"Unsupported batch output format: {value}")
    return value


def resolve_output_path(config: Dict[str, Any], explicit: Optional[Path] = None) -> Optional[Path]:
    """Resolve batch output file with CLI override first."""
    if explicit is not None:
        return explicit.expanduser().resolve()
    raw = os.getenv("SLUG_OUTPUT_FILE") or config.get("batch", {}).get("default_output")
    if not raw:
        return None
    return expand_path(raw)
