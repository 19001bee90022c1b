"""Dataclasses describing every Conquest game entity.

Territories refer to their owning force by color name rather than by a
player object, so ownership checks are plain string comparisons.  Missions
reference their target color the same way.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import MissionKind


@dataclass(slots=True)
class Territory:
    """Map territory held by a colored army."""

    name: str
    owner_color: str
    troops: int

    def __post_init__(self) -> None:
        if self.troops < 0:
            raise ValueError(f"troops must be non-negative, got {self.troops}")


@dataclass(frozen=True, slots=True)
class Mission:
    """Secret victory condition assigned at game start.

    ``target_color`` is only meaningful for :attr:`MissionKind.DESTROY_ARMY`;
    threshold missions carry ``None``.
    """

    kind: MissionKind
    target_color: str | None = None


@dataclass(slots=True)
class AttackOutcome:
    """Rolls and resulting state of a single resolved attack."""

    attacker_name: str
    defender_name: str
    attacker_color: str
    defender_color: str
    attack_roll: int
    defense_roll: int
    defender_lost_troop: bool
    conquered: bool
    troop_moved: bool
    attacker_troops: int
    defender_troops: int
    notes: list[str] = field(default_factory=list)

    @property
    def attacker_won(self) -> bool:
        return self.defender_lost_troop
