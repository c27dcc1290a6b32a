"""Configuration loading for marketsync (action inputs and .marketsync.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

import yaml

from .errors import ConfigError

DEFAULT_MARKETPLACE_URL = "https://market.near.ai/v1"
CONFIG_FILENAME = ".marketsync.yml"

_INPUT_PREFIX = "INPUT_"


@dataclass
class PayloadOverrides:
    """Explicit per-field values that take precedence over manifest data."""

    name: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None
    long_description: Optional[str] = None
    category: Optional[str] = None
    homepage: Optional[str] = None
    repository: Optional[str] = None
    license: Optional[str] = None
    changelog: Optional[str] = None
    tags: Optional[str] = None
    pricing: Optional[str] = None
    min_near_version: Optional[str] = None

    @classmethod
    def from_inputs(cls, inputs: Mapping[str, Any]) -> "PayloadOverrides":
        values = {}
        for attr in cls.__dataclass_fields__:
            raw = inputs.get(attr.replace("_", "-"))
            if isinstance(raw, (list, tuple)):
                raw = ",".join(str(item) for item in raw)
            values[attr] = _as_str(raw)
        return cls(**values)


@dataclass
class SyncConfig:
    """Effective settings for one submission run."""

    api_key: str
    marketplace_url: str = DEFAULT_MARKETPLACE_URL
    project_path: Path = field(default_factory=lambda: Path("."))
    dry_run: bool = False
    validate_only: bool = False
    update_existing: bool = True
    fail_on_warning: bool = False
    request_timeout: float = 30.0
    submit_retries: int = 1
    retry_backoff: float = 2.0
    overrides: PayloadOverrides = field(default_factory=PayloadOverrides)


def read_action_inputs(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Collect ``INPUT_<NAME>`` variables set by the Actions runner.

    Keys are returned as lower-case hyphenated input names, so both
    ``INPUT_API-KEY`` and ``INPUT_API_KEY`` map to ``api-key``.
    """
    env = os.environ if environ is None else environ
    inputs: Dict[str, str] = {}
    for key, value in env.items():
        if key.upper().startswith(_INPUT_PREFIX):
            inputs[_normalize_key(key[len(_INPUT_PREFIX):])] = value
    return inputs


def load_config(
    inputs: Mapping[str, Any],
    *,
    config_file: Path | None = None,
) -> SyncConfig:
    """Build a SyncConfig from explicit inputs layered over an optional YAML file."""
    merged: Dict[str, Any] = {}
    if config_file is not None and config_file.exists():
        merged.update(_read_config_file(config_file))
    for key, value in inputs.items():
        if value is None or (isinstance(value, str) and not value.strip()):
            continue
        merged[_normalize_key(key)] = value

    api_key = _as_str(merged.get("api-key"))
    if not api_key:
        raise ConfigError("Input required and not supplied: api-key")

    marketplace_url = _as_str(merged.get("marketplace-url")) or DEFAULT_MARKETPLACE_URL
    parsed_url = urlparse(marketplace_url)
    if parsed_url.scheme not in {"http", "https"} or not parsed_url.netloc:
        raise ConfigError(
            f'Input "marketplace-url" must be an http(s) URL, got "{marketplace_url}"'
        )
    project_path = Path(_as_str(merged.get("project-path")) or ".").expanduser().resolve()

    return SyncConfig(
        api_key=api_key,
        marketplace_url=marketplace_url.rstrip("/"),
        project_path=project_path,
        dry_run=_bool_option(merged, "dry-run", False),
        validate_only=_bool_option(merged, "validate-only", False),
        update_existing=_bool_option(merged, "update-existing", True),
        fail_on_warning=_bool_option(merged, "fail-on-warning", False),
        request_timeout=_float_option(merged, "request-timeout", 30.0),
        submit_retries=_int_option(merged, "submit-retries", 1),
        retry_backoff=_float_option(merged, "retry-backoff", 2.0),
        overrides=PayloadOverrides.from_inputs(merged),
    )


def _read_config_file(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return {_normalize_key(str(key)): value for key, value in loaded.items()}


def _normalize_key(key: str) -> str:
    return key.strip().lower().replace("_", "-").replace(" ", "-")


def _bool_option(values: Mapping[str, Any], key: str, default: bool) -> bool:
    raw = values.get(key)
    if raw is None:
        return default
    parsed = _as_bool(raw)
    if parsed is None:
        raise ConfigError(f'Input "{key}" must be a boolean (true/false), got "{raw}"')
    return parsed


def _float_option(values: Mapping[str, Any], key: str, default: float) -> float:
    raw = values.get(key)
    if raw is None:
        return default
    parsed = _as_float(raw)
    if parsed is None or parsed < 0:
        raise ConfigError(f'Input "{key}" must be a non-negative number, got "{raw}"')
    return parsed


def _int_option(values: Mapping[str, Any], key: str, default: int) -> int:
    raw = values.get(key)
    if raw is None:
        return default
    parsed = _as_int(raw)
    if parsed is None or parsed < 0:
        raise ConfigError(f'Input "{key}" must be a non-negative integer, got "{raw}"')
    return parsed


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        text = str(value)
        return text if text.strip() else None
    return None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None
