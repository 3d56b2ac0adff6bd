"""Helpers for resolving the optional config file and runtime paths."""

import json
import os
from typing import Any, Dict, Optional

from worklist.models import DEFAULT_HEADING, WORK_LIST_ID

DEFAULT_CONFIG_NAME = "work_list.json"
CONFIG_ENV_VAR = "WORK_LIST_CONFIG"


class ConfigError(Exception):
    """Raised when runtime configuration cannot be loaded."""


def _resolve_config_path(path: Optional[str]) -> Optional[str]:
    """Return the absolute config path, or None when no default exists."""
    env_override = os.environ.get(CONFIG_ENV_VAR)
    explicit = path or env_override
    candidate = explicit or DEFAULT_CONFIG_NAME
    expanded = os.path.expanduser(candidate)
    if os.path.isabs(expanded) and os.path.isfile(expanded):
        return expanded

    search_roots = [os.getcwd(), os.path.dirname(os.path.abspath(__file__))]
    for root in search_roots:
        resolved = os.path.abspath(os.path.join(root, expanded))
        if os.path.isfile(resolved):
            return resolved

    if explicit:
        raise ConfigError(f"Configuration file not found: {candidate}")
    return None


def _resolve_path(value: str, base_dir: str) -> str:
    """Resolve ``value`` into an absolute path relative to ``base_dir``."""
    expanded = os.path.expanduser(value)
    if os.path.isabs(expanded):
        return expanded
    return os.path.abspath(os.path.join(base_dir, expanded))


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the JSON config file and normalize any filesystem paths."""
    config_path = _resolve_config_path(path)
    if config_path is None:
        return {}

    with open(config_path, "r", encoding="utf-8") as config_file:
        try:
            data = json.load(config_file)
        except json.JSONDecodeError as exc:
            raise ConfigError(
                f"Invalid JSON in {config_path}: {exc}"
            ) from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be an object: {config_path}")

    base_dir = os.path.dirname(config_path)
    resolved: Dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str) and key.endswith(("_html", "_dir", "_path")):
            resolved[key] = _resolve_path(value, base_dir)
        else:
            resolved[key] = value

    return resolved


def resolve_runtime_paths(
    *,
    config_path: Optional[str] = None,
    source_dir: Optional[str] = None,
    dest_html: Optional[str] = None,
    container_id: Optional[str] = None,
    heading: Optional[str] = None,
) -> Dict[str, Any]:
    """Resolve runtime arguments by combining CLI overrides with config."""
    config = load_config(config_path)

    resolved_source = source_dir or config.get("source_dir")
    resolved_dest = dest_html or config.get("dest_html")

    if not resolved_source:
        raise ConfigError(
            "Missing source directory. Pass it as the first argument or set"
            " source_dir in the config."
        )
    if not resolved_dest:
        raise ConfigError(
            "Missing destination HTML file. Pass it as the second argument or"
            " set dest_html in the config."
        )

    return {
        "source_dir": _resolve_path(resolved_source, os.getcwd()),
        "dest_html": _resolve_path(resolved_dest, os.getcwd()),
        "container_id": str(
            container_id or config.get("container_id") or WORK_LIST_ID
        ),
        "heading": str(heading or config.get("heading") or DEFAULT_HEADING),
    }
