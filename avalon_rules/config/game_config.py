"""
Rules configuration and defaults.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class RulesConfig:
    """Configuration for a rules variant."""

    # Table size
    min_players: int = 5
    max_players: int = 10
    evil_count_table: Dict[int, int] = field(default_factory=lambda: {
        5: 2,
        6: 2,
        7: 3,
        8: 3,
        9: 3,
        10: 4,
    })

    # Randomness
    random_seed: Optional[int] = None  # Seed for reproducible role assignment; None uses the OS source

    log_level: Optional[str] = None  # e.g. "INFO"; None leaves the host's logger level alone


# Default configuration instance
default_config = RulesConfig()
