"""
Core rules components: role catalog, players, assignment and reveal.
"""

from .exceptions import AvalonRulesError, InvalidPlayerCountError, RoleOverflowError, UnknownRoleError
from .roles import RoleName, RoleSet, Team, parse_role, standard_role_set
from .player import Player
from .assigner import RoleAssigner
from .oracle import InformationOracle
from .rules import GameRules, create_rules

__all__ = [
    'AvalonRulesError',
    'InvalidPlayerCountError',
    'RoleOverflowError',
    'UnknownRoleError',
    'RoleName',
    'RoleSet',
    'Team',
    'parse_role',
    'standard_role_set',
    'Player',
    'RoleAssigner',
    'InformationOracle',
    'GameRules',
    'create_rules',
]
