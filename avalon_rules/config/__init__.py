"""Rules configuration module."""

from .game_config import RulesConfig, default_config
from .config_loader import load_config, load_config_from_yaml

__all__ = ['RulesConfig', 'default_config', 'load_config', 'load_config_from_yaml']
