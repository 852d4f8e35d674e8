"""Configuration module: tool invocation, schema and scoring settings."""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional
from ..utils.errors import ConfigError
from ..utils.logging import get_logger
from .manager import load_config
from .paths import get_defaults_path, get_user_config_path, get_project_config_path

logger = get_logger("config")

DEFAULT_TOOL = "terragrunt"
DEFAULT_SCHEMA_FILENAME = ".terragrunt-provider-schema.json"
DEFAULT_PRIORITY_FIELDS = ["id", "name", "bucket", "self_link", "project"]


@dataclass
class Settings:
    """Resolved settings for a run."""
    tool: str = DEFAULT_TOOL
    schema_filename: str = DEFAULT_SCHEMA_FILENAME
    timeout_seconds: Optional[float] = None
    run_init: bool = False
    priority_fields: List[str] = field(default_factory=lambda: list(DEFAULT_PRIORITY_FIELDS))
    overrides: Dict[str, Dict[str, float]] = field(default_factory=dict)


def load_settings(config_path: str = None) -> Settings:
    """
    Load and validate settings from YAML.

    Args:
        config_path: Path to a config YAML file. If None, packaged defaults plus
            user and project overrides are used.

    Returns:
        Settings instance

    Raises:
        ConfigError: If the config is invalid
    """
    config = load_config(config_path)
    return settings_from_dict(config)


def settings_from_dict(config: Dict[str, Any]) -> Settings:
    """Validate a merged config dictionary and build Settings from it."""
    tool = _section(config, "tool")
    schema = _section(config, "schema")
    scoring = _section(config, "scoring")

    name = tool.get("name", DEFAULT_TOOL)
    if not isinstance(name, str) or not name.strip():
        raise ConfigError("tool.name must be a non-empty string")

    schema_filename = tool.get("schema_filename", DEFAULT_SCHEMA_FILENAME)
    if not isinstance(schema_filename, str) or not schema_filename.strip():
        raise ConfigError("tool.schema_filename must be a non-empty string")

    timeout = tool.get("timeout_seconds")
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError("tool.timeout_seconds must be a positive number or null")
        timeout = float(timeout)

    run_init = schema.get("run_init", False)
    if not isinstance(run_init, bool):
        raise ConfigError("schema.run_init must be true or false")

    priority_fields = scoring.get("priority_fields", DEFAULT_PRIORITY_FIELDS)
    if not isinstance(priority_fields, list) or not all(isinstance(f, str) for f in priority_fields):
        raise ConfigError("scoring.priority_fields must be a list of strings")

    overrides = scoring.get("overrides") or {}
    if not isinstance(overrides, dict):
        raise ConfigError("scoring.overrides must map resource types to {attribute: delta}")
    validated_overrides = {}
    for resource_type, deltas in overrides.items():
        if not isinstance(deltas, dict):
            raise ConfigError(f"scoring.overrides.{resource_type} must be a mapping")
        for attribute, delta in deltas.items():
            if isinstance(delta, bool) or not isinstance(delta, (int, float)):
                raise ConfigError(f"scoring.overrides.{resource_type}.{attribute} must be a number")
        validated_overrides[str(resource_type)] = {str(a): float(d) for a, d in deltas.items()}

    return Settings(
        tool=name,
        schema_filename=schema_filename,
        timeout_seconds=timeout,
        run_init=run_init,
        priority_fields=list(priority_fields),
        overrides=validated_overrides,
    )


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = config.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"Config section '{name}' must be a dictionary")
    return value


__all__ = [
    "Settings",
    "load_settings",
    "settings_from_dict",
    "load_config",
    "get_defaults_path",
    "get_user_config_path",
    "get_project_config_path",
]
