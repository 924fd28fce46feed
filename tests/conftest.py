"""
Pytest fixtures for Avalon rules tests.
"""

import random
import pytest
from typing import List

from avalon_rules.core import (
    Player, RoleName, RoleSet, RoleAssigner, InformationOracle, create_rules
)
from avalon_rules.config.game_config import RulesConfig


@pytest.fixture
def rules_config():
    """Test rules configuration with a fixed seed."""
    return RulesConfig(random_seed=1234, log_level="DEBUG")


@pytest.fixture
def rng():
    """Seeded generator for reproducible shuffles."""
    return random.Random(42)


@pytest.fixture
def role_set():
    return RoleSet.standard()


@pytest.fixture
def assigner(role_set, rng):
    return RoleAssigner(role_set, rng=rng)


@pytest.fixture
def oracle(role_set):
    return InformationOracle(role_set)


@pytest.fixture
def rules(rules_config):
    """Rules contract built from the test config."""
    return create_rules(rules_config)


@pytest.fixture
def make_players():
    """Factory for an unassigned roster of the given size."""
    def _make(count: int) -> List[Player]:
        return [Player(id=str(i), name=f"Player {i}") for i in range(1, count + 1)]
    return _make


@pytest.fixture
def reveal_roster() -> List[Player]:
    """Seven assigned players covering every role but Assassin."""
    return [
        Player(id="1", name="Player 1", role=RoleName.MERLIN),
        Player(id="2", name="Player 2", role=RoleName.MORGANA),
        Player(id="3", name="Player 3", role=RoleName.PERCIVAL),
        Player(id="4", name="Player 4", role=RoleName.MINION),
        Player(id="5", name="Player 5", role=RoleName.LOYAL_SERVANT),
        Player(id="6", name="Player 6", role=RoleName.OBERON),
        Player(id="7", name="Player 7", role=RoleName.MORDRED),
    ]
