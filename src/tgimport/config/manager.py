"""Two-tier configuration manager (defaults, user, project override)."""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from .paths import get_defaults_path, get_user_config_path, get_project_config_path
from ..utils.errors import ConfigError
from ..utils.logging import get_logger

logger = get_logger("config.manager")


def read_yaml(path: Path) -> Dict[str, Any]:
    """
    Read a YAML mapping from disk.
    
    Args:
        path: YAML file to read
        
    Returns:
        Parsed dictionary (empty for an empty file)
        
    Raises:
        ConfigError: If the file is unreadable, invalid YAML or not a mapping
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Error reading config file {path}: {e}")
    
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a dictionary")
    return data


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the full config tree.
    
    The packaged defaults are always loaded first. An explicit config_path is
    merged on top of them; otherwise the user config and then the project
    config are merged in that order.
    
    Args:
        config_path: Optional explicit YAML file
        
    Returns:
        Merged configuration dictionary
        
    Raises:
        ConfigError: If the defaults or an explicit file cannot be loaded
    """
    config = read_yaml(get_defaults_path())
    
    if config_path is not None:
        path = Path(config_path)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
        _deep_merge(config, read_yaml(path))
        logger.info(f"Loaded configuration from {path}")
        return config
    
    user_config_path = get_user_config_path()
    if user_config_path.exists():
        try:
            _deep_merge(config, read_yaml(user_config_path))
            logger.debug(f"Loaded user config from {user_config_path}")
        except ConfigError as e:
            logger.warning(f"Could not load user config from {user_config_path}: {e}")
    
    project_config_path = get_project_config_path()
    if project_config_path:
        try:
            _deep_merge(config, read_yaml(project_config_path))
            logger.info(f"Loaded project config from {project_config_path}")
        except ConfigError as e:
            logger.warning(f"Could not load project config from {project_config_path}: {e}")
    
    return config


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Deep merge override into base (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
