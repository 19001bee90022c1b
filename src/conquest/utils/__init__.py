"""Utility functions for the Conquest game system."""

from conquest.utils.rng import (
    ScriptedRandom,
    random_choice,
    roll_dice,
    seeded_source,
)

__all__ = [
    "ScriptedRandom",
    "random_choice",
    "roll_dice",
    "seeded_source",
]
