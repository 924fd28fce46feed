"""
Avalon rules: role assignment and role reveal for a hidden-role game host.
"""

from .core import (
    AvalonRulesError, InvalidPlayerCountError, RoleOverflowError, UnknownRoleError,
    RoleName, RoleSet, Team, Player, RoleAssigner, InformationOracle,
    GameRules, create_rules,
)
from .config import RulesConfig, default_config, load_config

# Default rules instance used by the host engine
avalon_rules = create_rules()

__all__ = [
    'AvalonRulesError',
    'InvalidPlayerCountError',
    'RoleOverflowError',
    'UnknownRoleError',
    'RoleName',
    'RoleSet',
    'Team',
    'Player',
    'RoleAssigner',
    'InformationOracle',
    'GameRules',
    'create_rules',
    'RulesConfig',
    'default_config',
    'load_config',
    'avalon_rules',
]
