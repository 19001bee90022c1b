"""Declarative rule configuration for the Conquest domain."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SeedTable:
    """Initial territory layout as parallel (name, color, troops) columns."""

    names: tuple[str, ...] = ("Amazonas", "Cerrado", "Pantanal", "Caatinga", "Mata Atlantica")
    colors: tuple[str, ...] = ("Verde", "Azul", "Vermelho", "Amarelo", "Roxo")
    initial_troops: tuple[int, ...] = (5, 4, 6, 3, 5)

    def __post_init__(self) -> None:
        if not len(self.names) == len(self.colors) == len(self.initial_troops):
            raise ValueError(
                "seed table columns must have equal length: "
                f"{len(self.names)} names, {len(self.colors)} colors, "
                f"{len(self.initial_troops)} troop counts"
            )
        if any(troops < 0 for troops in self.initial_troops):
            raise ValueError("initial troop counts must be non-negative")

    def __len__(self) -> int:
        return len(self.names)

    def rows(self) -> list[tuple[str, str, int]]:
        """Return the table as (name, color, troops) triples."""

        return list(zip(self.names, self.colors, self.initial_troops, strict=True))


@dataclass(frozen=True, slots=True)
class CombatRules:
    """Dice used to resolve an attack."""

    die_sides: int = 6


@dataclass(frozen=True, slots=True)
class MissionRules:
    """Mission assignment and evaluation constants."""

    conquer_threshold: int = 3
    target_draw_attempts: int = 10


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for all subsystems."""

    combat: CombatRules = CombatRules()
    missions: MissionRules = MissionRules()
    palette: tuple[str, ...] = ("Verde", "Azul", "Vermelho", "Amarelo", "Roxo")


DEFAULT_SEED_TABLE = SeedTable()
DEFAULT_RULES = RulesConfig()
