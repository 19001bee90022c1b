"""Attack resolution rules."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from conquest.domain.errors import AttackerEmpty, DefenderEmpty, InvalidIndex
from conquest.domain.models import AttackOutcome, Territory
from conquest.domain.rules_config import DEFAULT_RULES, RulesConfig
from conquest.interfaces import RandomSource
from conquest.utils.rng import roll_dice

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AttackOptions:
    """Configuration for resolving an attack."""

    attack_roll: int | None = None
    defense_roll: int | None = None


def resolve_attack(
    attacker: Territory,
    defender: Territory,
    *,
    rng: RandomSource,
    options: AttackOptions | None = None,
    rules: RulesConfig = DEFAULT_RULES,
) -> AttackOutcome:
    """Roll one die per side and apply the result to both territories.

    Raises :class:`AttackerEmpty` or :class:`DefenderEmpty` before any die is
    rolled when a side has no troops.
    """

    if attacker is defender:
        raise InvalidIndex(f"territory '{attacker.name}' cannot attack itself")
    if attacker.troops <= 0:
        raise AttackerEmpty(attacker.name)
    if defender.troops <= 0:
        raise DefenderEmpty(defender.name)

    options = options or AttackOptions()
    notation = f"1d{rules.combat.die_sides}"
    attack_roll = _roll(options.attack_roll, rng, notation)
    defense_roll = _roll(options.defense_roll, rng, notation)
    logger.debug(
        "%s (%s, %d troops) attacks %s (%s, %d troops): %d vs %d",
        attacker.name,
        attacker.owner_color,
        attacker.troops,
        defender.name,
        defender.owner_color,
        defender.troops,
        attack_roll,
        defense_roll,
    )

    return apply_rolls(attacker, defender, attack_roll, defense_roll)


def apply_rolls(
    attacker: Territory,
    defender: Territory,
    attack_roll: int,
    defense_roll: int,
) -> AttackOutcome:
    """Apply a pair of rolls to the attacker and defender.

    Ties go to the attacker. Reducing the defender to zero troops conquers
    it: ownership passes to the attacker and the territory is left holding a
    single troop, taken from the attacker when it has one to spare. An
    attacker down to its last troop is left empty.
    """

    defender_color = defender.owner_color
    defender_lost_troop = False
    conquered = False
    troop_moved = False
    notes: list[str] = []

    if attack_roll >= defense_roll:
        defender.troops -= 1
        defender_lost_troop = True
        if attack_roll == defense_roll:
            notes.append("tie goes to the attacker")

        if defender.troops <= 0:
            conquered = True
            defender.owner_color = attacker.owner_color
            if attacker.troops > 1:
                attacker.troops -= 1
                troop_moved = True
            else:
                attacker.troops = 0
                notes.append(f"{attacker.name} was left without troops")
            defender.troops = 1
            logger.info(
                "%s conquered %s from %s", attacker.owner_color, defender.name, defender_color
            )

    return AttackOutcome(
        attacker_name=attacker.name,
        defender_name=defender.name,
        attacker_color=attacker.owner_color,
        defender_color=defender_color,
        attack_roll=attack_roll,
        defense_roll=defense_roll,
        defender_lost_troop=defender_lost_troop,
        conquered=conquered,
        troop_moved=troop_moved,
        attacker_troops=attacker.troops,
        defender_troops=defender.troops,
        notes=notes,
    )


def _roll(fixed: int | None, rng: RandomSource, notation: str) -> int:
    if fixed is not None:
        return fixed
    return roll_dice(rng, notation)["total"]
