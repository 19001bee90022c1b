"""Enumerations used by the Conquest domain."""

from __future__ import annotations

from enum import StrEnum


class MissionKind(StrEnum):
    """Victory conditions a player can be assigned."""

    DESTROY_ARMY = "destroy_army"
    CONQUER_THRESHOLD = "conquer_threshold"


class SessionState(StrEnum):
    """Lifecycle of a game session."""

    PLAYING = "playing"
    WON = "won"
    EXITED = "exited"


class SubAttackStatus(StrEnum):
    """Result classification for a single sub-attack."""

    RESOLVED = "resolved"
    MALFORMED_INPUT = "malformed_input"
    INVALID_INDEX = "invalid_index"
    ATTACKER_EMPTY = "attacker_empty"
    DEFENDER_EMPTY = "defender_empty"
