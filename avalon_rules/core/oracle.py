"""
Information each role learns about the others at the start of the game.
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence, Union

from .player import Player
from .roles import RoleName, RoleSet, parse_role, standard_role_set


logger = logging.getLogger(__name__)

# Evil role Merlin cannot see
HIDDEN_FROM_MERLIN = RoleName.MORDRED
# Evil role that neither sees nor is seen by the rest of evil
ISOLATED_EVIL = RoleName.OBERON
# Roles Percival sees without being told which is which
PERCIVAL_SIGHTINGS = (RoleName.MERLIN, RoleName.MORGANA)

Handler = Callable[[RoleName, Sequence[Player], Optional[str]], str]


class InformationOracle:
    """Builds the private reveal text for each role."""

    def __init__(self, role_set: RoleSet = standard_role_set):
        self.role_set = role_set
        self._handlers = self._handler_table()
        missing = [role for role in RoleName if role not in self._handlers]
        if missing:
            raise RuntimeError(f"No reveal handler for roles: {', '.join(r.value for r in missing)}")

    def _handler_table(self) -> Dict[RoleName, Handler]:
        """Map every role to the method producing its reveal."""
        return {
            RoleName.LOYAL_SERVANT: self._servant_message,
            RoleName.MERLIN: self._merlin_message,
            RoleName.PERCIVAL: self._percival_message,
            RoleName.MORDRED: self._evil_message,
            RoleName.MORGANA: self._evil_message,
            RoleName.ASSASSIN: self._evil_message,
            RoleName.MINION: self._evil_message,
            RoleName.OBERON: self._oberon_message,
        }

    def reveal(self, role: Union[str, RoleName], players: Sequence[Player], viewer_id: Optional[str] = None) -> str:
        """
        Get the text a player holding role is told.

        Args:
            role: Role being revealed
            players: Fully assigned roster
            viewer_id: Id of the player receiving the text. When omitted,
                the holder of role is left out only if exactly one player
                holds it; shared roles such as Minion list every holder.

        Raises:
            UnknownRoleError: If role is not recognised
        """
        role = parse_role(role)
        message = self._handlers[role](role, players, viewer_id)
        logger.debug(f"Generated reveal for {role.value}")
        return message

    def reveal_all(self, players: Sequence[Player]) -> Dict[str, str]:
        """Reveal text for every assigned player, keyed by player id."""
        return {
            p.id: self.reveal(p.role, players, viewer_id=p.id)
            for p in players
            if p.has_role
        }

    def _is_viewer(self, player: Player, role: RoleName, players: Sequence[Player], viewer_id: Optional[str]) -> bool:
        if viewer_id is not None:
            return player.id == viewer_id
        # Without a viewer, self is only known when one player holds the role
        holders = [p for p in players if p.role == role]
        return len(holders) == 1 and player is holders[0]

    def _servant_message(self, role: RoleName, players: Sequence[Player], viewer_id: Optional[str]) -> str:
        return f"You are a {RoleName.LOYAL_SERVANT.value}"

    def _merlin_message(self, role: RoleName, players: Sequence[Player], viewer_id: Optional[str]) -> str:
        evil = [
            p for p in players
            if self.role_set.is_evil(p.role) and p.role != HIDDEN_FROM_MERLIN
        ]
        return _format(role, [f"{p.name} is evil" for p in evil])

    def _percival_message(self, role: RoleName, players: Sequence[Player], viewer_id: Optional[str]) -> str:
        merlin, morgana = PERCIVAL_SIGHTINGS
        candidates = [p for p in players if p.role in PERCIVAL_SIGHTINGS]
        return _format(role, [f"{p.name} is {merlin.value} or {morgana.value}" for p in candidates])

    def _evil_message(self, role: RoleName, players: Sequence[Player], viewer_id: Optional[str]) -> str:
        evil = [
            p for p in players
            if self.role_set.is_evil(p.role)
            and p.role != ISOLATED_EVIL
            and not self._is_viewer(p, role, players, viewer_id)
        ]
        return _format(role, [f"{p.name} is evil" for p in evil])

    def _oberon_message(self, role: RoleName, players: Sequence[Player], viewer_id: Optional[str]) -> str:
        return _format(role, [])


def _format(role: RoleName, lines: List[str]) -> str:
    return "\n".join([f"You are {role.value}"] + lines)
