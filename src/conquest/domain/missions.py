"""Mission assignment and evaluation rules."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from conquest.domain.enums import MissionKind
from conquest.domain.errors import NoValidTarget
from conquest.domain.models import Mission
from conquest.domain.registry import Registry
from conquest.domain.rules_config import DEFAULT_RULES, RulesConfig
from conquest.interfaces import RandomSource
from conquest.schemas import MissionRead
from conquest.utils.rng import random_choice

logger = logging.getLogger(__name__)

MISSION_KINDS: tuple[MissionKind, ...] = (
    MissionKind.DESTROY_ARMY,
    MissionKind.CONQUER_THRESHOLD,
)


def assign_mission(
    player_color: str,
    palette: Sequence[str],
    *,
    rng: RandomSource,
    rules: RulesConfig = DEFAULT_RULES,
) -> Mission:
    """Draw a mission for the player.

    Destroy-army targets are drawn from ``palette`` until one differs from the
    player's color, up to ``rules.missions.target_draw_attempts`` times, then
    fall back to the first eligible palette entry.
    """

    kind = random_choice(rng, list(MISSION_KINDS))["choice"]

    if kind is MissionKind.CONQUER_THRESHOLD:
        mission = Mission(kind=kind)
        logger.info("Assigned mission: %s", describe_mission(mission, rules=rules))
        return mission

    eligible = [color for color in palette if color != player_color]
    if not eligible:
        raise NoValidTarget(
            f"palette {list(palette)!r} has no color other than the player's ({player_color})"
        )

    target: str | None = None
    for attempt in range(rules.missions.target_draw_attempts):
        drawn = random_choice(rng, list(palette))["choice"]
        if drawn != player_color:
            target = drawn
            break
        logger.debug("Target draw %d hit the player's own color", attempt + 1)
    if target is None:
        target = eligible[0]

    mission = Mission(kind=kind, target_color=target)
    logger.info("Assigned mission: %s", describe_mission(mission, rules=rules))
    return mission


def evaluate_mission(
    mission: Mission,
    registry: Registry,
    player_color: str,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> bool:
    """Return whether ``mission`` is currently fulfilled. Never mutates state."""

    if mission.kind is MissionKind.DESTROY_ARMY:
        return not any(
            territory.owner_color == mission.target_color and territory.troops > 0
            for territory in registry
        )
    if mission.kind is MissionKind.CONQUER_THRESHOLD:
        owned = len(registry.territories_owned_by(player_color))
        return owned >= rules.missions.conquer_threshold
    raise ValueError(f"unknown mission kind: {mission.kind}")


def describe_mission(mission: Mission, *, rules: RulesConfig = DEFAULT_RULES) -> str:
    if mission.kind is MissionKind.DESTROY_ARMY:
        return f"Destroy the {mission.target_color} army"
    if mission.kind is MissionKind.CONQUER_THRESHOLD:
        return f"Conquer {rules.missions.conquer_threshold} territories"
    raise ValueError(f"unknown mission kind: {mission.kind}")


def mission_view(mission: Mission, *, rules: RulesConfig = DEFAULT_RULES) -> MissionRead:
    return MissionRead(
        kind=mission.kind.value,
        target_color=mission.target_color,
        description=describe_mission(mission, rules=rules),
    )
