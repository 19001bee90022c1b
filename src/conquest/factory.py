"""Session Factory for Conquest.

This module wires a ready-to-play :class:`~conquest.domain.turn.GameSession`
from settings, rule configuration and a random source. Use it in production
code so the registry, mission and dice all draw from the same source.

For testing, pass a scripted source instead of relying on a seed.

Example:
    # Production usage
    from conquest.factory import create_session
    session = create_session()

    # Testing usage
    from conquest.utils.rng import ScriptedRandom
    session = create_session(rng=ScriptedRandom([1, 6, 1]))
"""

from __future__ import annotations

import logging

from conquest.config import Settings, get_settings
from conquest.domain import missions
from conquest.domain.registry import initialize_registry
from conquest.domain.rules_config import (
    DEFAULT_RULES,
    DEFAULT_SEED_TABLE,
    RulesConfig,
    SeedTable,
)
from conquest.domain.turn import GameSession
from conquest.interfaces import RandomSource
from conquest.utils.rng import seeded_source

logger = logging.getLogger(__name__)


def create_session(
    *,
    settings: Settings | None = None,
    rules: RulesConfig = DEFAULT_RULES,
    seed_table: SeedTable = DEFAULT_SEED_TABLE,
    rng: RandomSource | None = None,
) -> GameSession:
    """Create a GameSession with all dependencies.

    Args:
        settings: Application settings (defaults to :func:`get_settings`)
        rules: Rule constants and color palette
        seed_table: Initial territory layout
        rng: Random source; built from ``settings.seed`` when omitted

    Returns:
        A session in the playing state

    Raises:
        ValueError: If the player's color is not part of the palette
        AllocationFailure: If the registry cannot be built
        NoValidTarget: If the palette offers no mission target
    """
    settings = settings or get_settings()
    if settings.player_color not in rules.palette:
        raise ValueError(
            f"player color {settings.player_color!r} is not in the palette {list(rules.palette)}"
        )

    source = rng if rng is not None else seeded_source(settings.seed)
    registry = initialize_registry(settings.territory_count, seed_table)
    mission = missions.assign_mission(
        settings.player_color, rules.palette, rng=source, rules=rules
    )
    logger.info(
        "New session: %d territories, player %s", len(registry), settings.player_color
    )
    return GameSession(registry, mission, settings.player_color, rng=source, rules=rules)
