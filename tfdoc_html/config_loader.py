"""Helpers for resolving the optional JSON configuration file."""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

from .errors import ConfigError

CONFIG_ENV_VAR = "TFDOC_HTML_CONFIG"

KNOWN_KEYS = frozenset(
    {
        "include_outputs",
        "markdown_only",
        "s3_uri",
        "css_file",
        "no_stdout",
        "file",
        "header",
        "terraform_docs_bin",
        "terraform_bin",
    }
)
BOOL_KEYS = frozenset({"include_outputs", "markdown_only", "no_stdout"})
PATH_KEYS = frozenset({"css_file", "file"})


def _resolve_config_path(path: Optional[str]) -> Optional[str]:
    """Return the absolute config path, or None when nothing was requested."""
    candidate = path or os.environ.get(CONFIG_ENV_VAR)
    if not candidate:
        return None
    expanded = os.path.abspath(os.path.expanduser(candidate))
    if not os.path.isfile(expanded):
        raise ConfigError(f"Configuration file not found: {candidate}")
    return expanded


def _resolve_path(value: str, base_dir: str) -> str:
    """Resolve ``value`` into an absolute path relative to ``base_dir``."""
    expanded = os.path.expanduser(value)
    if os.path.isabs(expanded):
        return expanded
    return os.path.abspath(os.path.join(base_dir, expanded))


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load a JSON config file and normalize any filesystem paths.

    Returns an empty mapping when neither ``path`` nor ``TFDOC_HTML_CONFIG``
    points at a file.
    """
    config_path = _resolve_config_path(path)
    if config_path is None:
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as config_file:
            data = json.load(config_file)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Unable to read {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a JSON object.")

    unknown = sorted(set(data) - KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    base_dir = os.path.dirname(config_path)
    resolved: Dict[str, Any] = {}
    for key, value in data.items():
        if key in BOOL_KEYS and not isinstance(value, bool):
            raise ConfigError(f"{key} must be true or false.")
        if value is not None and key not in BOOL_KEYS and not isinstance(
            value, str
        ):
            raise ConfigError(f"{key} must be a string.")
        if isinstance(value, str) and key in PATH_KEYS and value:
            resolved[key] = _resolve_path(value, base_dir)
        else:
            resolved[key] = value

    return resolved
