"""
Configuration loader for YAML-based rules configurations.
"""

import logging
import yaml
from pathlib import Path
from typing import Optional

from .game_config import RulesConfig, default_config


logger = logging.getLogger(__name__)


def load_config_from_yaml(config_path: str) -> RulesConfig:
    """
    Load rules configuration from a YAML file.
    
    Args:
        config_path: Path to the YAML configuration file
        
    Returns:
        RulesConfig instance with values from YAML file
        
    Raises:
        FileNotFoundError: If the config file doesn't exist
        yaml.YAMLError: If the YAML file is invalid
        ValueError: If the file or evil_count_table is not a mapping
    """
    config_file = Path(config_path)
    
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    with open(config_file, 'r') as f:
        config_dict = yaml.safe_load(f)
    
    if config_dict is None:
        return RulesConfig()
    
    if not isinstance(config_dict, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping, got {type(config_dict).__name__}")
    
    config = RulesConfig()
    
    for key, value in config_dict.items():
        if not hasattr(config, key):
            logger.warning(f"Unknown config key '{key}' in YAML file")
            continue
        if key == "evil_count_table":
            if not isinstance(value, dict):
                raise ValueError("Config key 'evil_count_table' must be a mapping of player count to evil count")
            # YAML keys may arrive as strings
            value = {int(k): int(v) for k, v in value.items()}
        setattr(config, key, value)
    
    return config


def load_config(config_path: Optional[str] = None) -> RulesConfig:
    """
    Load configuration from YAML file or return default.
    
    Args:
        config_path: Optional path to YAML config file. If None, returns default config.
        
    Returns:
        RulesConfig instance
    """
    if config_path is None:
        return default_config
    
    return load_config_from_yaml(config_path)
