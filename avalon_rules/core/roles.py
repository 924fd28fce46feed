"""
Role definitions and faction membership for Avalon.
"""

from enum import Enum
from typing import FrozenSet, Mapping, Optional, Tuple, TYPE_CHECKING, Union
from dataclasses import dataclass

from .exceptions import InvalidPlayerCountError, UnknownRoleError

if TYPE_CHECKING:
    from ..config.game_config import RulesConfig


class Team(Enum):
    """Faction a role belongs to."""
    GOOD = "good"  # Loyal servants of Arthur
    EVIL = "evil"  # Minions of Mordred


class RoleName(str, Enum):
    """Every role that can appear in a game."""
    LOYAL_SERVANT = "Loyal Servant of Arthur"
    MERLIN = "Merlin"
    PERCIVAL = "Percival"
    MORDRED = "Mordred"
    MINION = "Minion of Mordred"
    MORGANA = "Morgana"
    OBERON = "Oberon"
    ASSASSIN = "Assassin"

    def __str__(self) -> str:
        return self.value


EVIL_ROLES: FrozenSet[RoleName] = frozenset([
    RoleName.MORDRED,
    RoleName.MINION,
    RoleName.MORGANA,
    RoleName.OBERON,
    RoleName.ASSASSIN,
])

# Special roles a host may request; fillers are added by the assigner
REQUESTABLE_ROLES: FrozenSet[RoleName] = frozenset([
    RoleName.MERLIN,
    RoleName.PERCIVAL,
    RoleName.MORGANA,
    RoleName.ASSASSIN,
    RoleName.MORDRED,
    RoleName.OBERON,
])

STANDARD_EVIL_COUNTS: Mapping[int, int] = {
    5: 2,
    6: 2,
    7: 3,
    8: 3,
    9: 3,
    10: 4,
}


def parse_role(value: Union[str, RoleName]) -> RoleName:
    """Coerce a role name coming from the host into a RoleName."""
    if isinstance(value, RoleName):
        return value
    try:
        return RoleName(value)
    except ValueError as e:
        raise UnknownRoleError(value) from e


@dataclass(frozen=True)
class RoleSet:
    """
    Immutable catalog of the roles used by one rules variant.

    Built once and handed to the assigner and oracle, so several variants
    can live side by side.
    """
    min_players: int = 5
    max_players: int = 10
    evil_roles: FrozenSet[RoleName] = EVIL_ROLES
    valid_roles: FrozenSet[RoleName] = REQUESTABLE_ROLES
    # Stored as sorted (player_count, evil_count) pairs; a mapping is accepted
    evil_count_table: Tuple[Tuple[int, int], ...] = tuple(sorted(STANDARD_EVIL_COUNTS.items()))

    def __post_init__(self):
        table = self.evil_count_table
        pairs = table.items() if isinstance(table, Mapping) else table
        object.__setattr__(self, "evil_count_table", tuple(sorted((int(n), int(e)) for n, e in pairs)))

    @classmethod
    def standard(cls) -> "RoleSet":
        """The 5-10 player table from the rulebook."""
        return cls()

    @classmethod
    def from_config(cls, config: "RulesConfig") -> "RoleSet":
        """Build a variant from player bounds and evil counts in config."""
        return cls(
            min_players=config.min_players,
            max_players=config.max_players,
            evil_count_table=config.evil_count_table,
        )

    def is_evil(self, role: Optional[Union[str, RoleName]]) -> bool:
        """Check if role is part of the evil team."""
        if role is None:
            return False
        return parse_role(role) in self.evil_roles

    def team_of(self, role: Union[str, RoleName]) -> Team:
        """Get the team a role plays for."""
        return Team.EVIL if self.is_evil(role) else Team.GOOD

    def required_evil_count(self, player_count: int) -> int:
        """
        Number of evil roles a game of this size must contain.

        Raises:
            InvalidPlayerCountError: If player_count is outside the supported range
        """
        if not self.min_players <= player_count <= self.max_players:
            raise InvalidPlayerCountError(player_count, self.min_players, self.max_players)
        counts = dict(self.evil_count_table)
        if player_count not in counts:
            raise InvalidPlayerCountError(
                player_count, self.min_players, self.max_players,
                message=f"No evil count configured for {player_count} players",
            )
        return counts[player_count]


standard_role_set = RoleSet.standard()
