"""
Rules contract handed to the host game engine.
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Callable, FrozenSet, List, Optional

from .assigner import RoleAssigner
from .oracle import InformationOracle
from .player import Player
from .roles import RoleName, RoleSet
from ..config.game_config import RulesConfig, default_config


@dataclass(frozen=True)
class GameRules:
    """Bounds, requestable roles and the two hooks the engine calls."""
    min_players: int
    max_players: int
    valid_roles: FrozenSet[RoleName]
    assign_roles: Callable[..., List[Player]]
    generate_message_for_role: Callable[..., str]


def _apply_log_level(log_level: str) -> None:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid log_level in rules config: {log_level!r}")
    logging.getLogger("avalon_rules").setLevel(level)


def create_rules(config: RulesConfig = default_config, rng: Optional[Any] = None) -> GameRules:
    """
    Compose the catalog, assigner and oracle described by config.

    Args:
        config: Rules configuration
        rng: Generator with a ``shuffle`` method. When None, a seeded
            ``random.Random`` is used if config sets random_seed, otherwise
            the OS source.
    """
    if config.log_level is not None:
        _apply_log_level(config.log_level)

    if rng is None and config.random_seed is not None:
        rng = random.Random(config.random_seed)

    role_set = RoleSet.from_config(config)
    assigner = RoleAssigner(role_set, rng=rng)
    oracle = InformationOracle(role_set)

    return GameRules(
        min_players=role_set.min_players,
        max_players=role_set.max_players,
        valid_roles=role_set.valid_roles,
        assign_roles=assigner.assign,
        generate_message_for_role=oracle.reveal,
    )
