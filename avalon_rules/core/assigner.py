"""
Role assignment: pads the requested roles to a legal set and deals them out.
"""

import logging
import secrets
from collections import Counter
from typing import Any, List, Optional, Sequence, Union

from .exceptions import RoleOverflowError, UnknownRoleError
from .player import Player
from .roles import RoleName, RoleSet, parse_role, standard_role_set


logger = logging.getLogger(__name__)


class RoleAssigner:
    """Deals roles to a roster using an injectable random generator."""

    def __init__(self, role_set: RoleSet = standard_role_set, rng: Optional[Any] = None):
        """
        Args:
            role_set: Catalog describing the rules variant
            rng: Object with a ``shuffle`` method, e.g. ``random.Random(seed)``.
                Defaults to ``secrets.SystemRandom()``.
        """
        self.role_set = role_set
        self.rng = rng if rng is not None else secrets.SystemRandom()

    def validate_request(self, requested_roles: Sequence[Union[str, RoleName]]) -> List[RoleName]:
        """Parse requested roles and reject anything a host may not request."""
        roles = []
        for value in requested_roles:
            role = parse_role(value)
            if role not in self.role_set.valid_roles:
                raise UnknownRoleError(role, message=f"{role.value} cannot be requested")
            roles.append(role)
        return roles

    def build_role_list(self, player_count: int, requested_roles: Sequence[Union[str, RoleName]]) -> List[RoleName]:
        """
        Pad the request with Minions and Loyal Servants to fill the table.

        Excess evil roles in the request are kept, never trimmed.

        Raises:
            InvalidPlayerCountError: If player_count is outside the supported range
            RoleOverflowError: If the padded list is longer than the roster
            UnknownRoleError: If a requested role is not recognised or not requestable
        """
        roles = self.validate_request(requested_roles)
        required_evil = self.role_set.required_evil_count(player_count)
        requested_evil = sum(1 for role in roles if self.role_set.is_evil(role))

        minions = max(0, required_evil - requested_evil)
        roles.extend([RoleName.MINION] * minions)

        servants = player_count - len(roles)
        if servants < 0:
            raise RoleOverflowError(player_count, len(roles))
        roles.extend([RoleName.LOYAL_SERVANT] * servants)

        logger.debug(
            f"Padded {len(requested_roles)} requested roles with "
            f"{minions} minions and {servants} loyal servants"
        )
        return roles

    def assign(self, players: Sequence[Player], requested_roles: Sequence[Union[str, RoleName]]) -> List[Player]:
        """
        Assign one role to every player.

        Both the roster and the role list are shuffled independently and
        then paired by position. Neither argument is modified.

        Returns:
            New Player objects with roles set, one per input player
        """
        roles = self.build_role_list(len(players), requested_roles)

        shuffled_players = list(players)
        self.rng.shuffle(shuffled_players)
        shuffled_roles = list(roles)
        self.rng.shuffle(shuffled_roles)

        assigned = [
            player.with_role(role)
            for player, role in zip(shuffled_players, shuffled_roles)
        ]

        evil_count = sum(1 for p in assigned if self.role_set.is_evil(p.role))
        counts = Counter(role.value for role in roles)
        logger.info(
            f"Assigned roles to {len(assigned)} players: "
            f"{evil_count} evil, {len(assigned) - evil_count} good ({dict(counts)})"
        )
        return assigned
