"""
Exceptions raised by the rules module.
"""

from typing import Any


class AvalonRulesError(Exception):
    """Base class for rule configuration errors."""


class InvalidPlayerCountError(AvalonRulesError):
    """Raised when the roster size is outside the supported range."""

    def __init__(self, player_count: int, min_players: int, max_players: int, message: str = ""):
        self.player_count = player_count
        self.min_players = min_players
        self.max_players = max_players
        self.message = message or (
            f"Invalid number of players: {player_count} "
            f"(must be between {min_players} and {max_players})"
        )
        super().__init__(self.message)


class RoleOverflowError(AvalonRulesError):
    """Raised when more roles are requested than there are players."""

    def __init__(self, player_count: int, role_count: int, message: str = ""):
        self.player_count = player_count
        self.role_count = role_count
        self.message = message or (
            f"{role_count} roles do not fit {player_count} players"
        )
        super().__init__(self.message)


class UnknownRoleError(AvalonRulesError):
    """Raised when a role name is not recognised."""

    def __init__(self, role: Any, message: str = ""):
        self.role = role
        self.message = message or f"{role} is not a valid role"
        super().__init__(self.message)
