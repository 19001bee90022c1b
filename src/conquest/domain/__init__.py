"""Rules layer for Conquest.

This package hosts every game rule and operates purely in-memory.  It
exposes:

* Dataclasses describing territories, missions and attack outcomes (see
  :mod:`models`).
* Enumerations and error types used across the rules layer.
* Rule configuration objects and the seed table (see :mod:`rules_config`).
* Pure rule functions for the registry, combat and missions, plus the
  :class:`~conquest.domain.turn.GameSession` orchestrator.
"""

from . import (
    enums,
    errors,
    models,
    rules_config,
    registry,
    combat,
    missions,
    commands,
    turn,
)

__all__ = [
    "combat",
    "commands",
    "enums",
    "errors",
    "missions",
    "models",
    "registry",
    "rules_config",
    "turn",
]
