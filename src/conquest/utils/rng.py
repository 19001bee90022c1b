"""Injectable random number sources for Conquest.

Every roll in the game is drawn from a :class:`~conquest.interfaces.RandomSource`
handed to the rules functions, never from the global :mod:`random` state.
This provides:
- Reproducibility: a seeded source always replays the same game
- Testability: scripted sources pin exact dice values
- Audit trail: helpers return the rolls they made alongside the result

Examples:
    >>> rng = seeded_source("demo")
    >>> result = roll_dice(rng, "1d6")
    >>> 1 <= result['total'] <= 6
    True

    >>> rng = ScriptedRandom([6, 1])
    >>> roll_dice(rng, "2d6")['rolls']
    [6, 1]
"""

import hashlib
import random
import re
from collections.abc import Iterable
from typing import Any

from conquest.interfaces import RandomSource


def _seed_to_int(seed: str) -> int:
    """Convert seed string to a stable 64-bit integer for random.Random().

    Args:
        seed: Seed string

    Returns:
        64-bit integer derived from SHA-256(seed)
    """
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    # Use first 8 bytes for a 64-bit integer
    return int.from_bytes(digest[:8], "big", signed=False)


def seeded_source(seed: str | None = None) -> random.Random:
    """Build a random source, seeded deterministically when ``seed`` is given.

    String seeds are hashed with SHA-256 rather than passed to
    :class:`random.Random` directly so the sequence is identical across
    interpreter runs regardless of hash randomization.

    Args:
        seed: Optional seed string; ``None`` yields an OS-seeded source

    Returns:
        A :class:`random.Random` instance
    """
    if seed is None:
        return random.Random()
    return random.Random(_seed_to_int(seed))


class ScriptedRandom:
    """Random source that replays a fixed sequence of values.

    Each call to :meth:`randint` consumes the next scripted value. Values
    outside the requested range raise ``ValueError`` so a test script that no
    longer matches the rules fails loudly.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._position = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._position

    def randint(self, a: int, b: int) -> int:
        if self._position >= len(self._values):
            raise ValueError("scripted random source exhausted")
        value = self._values[self._position]
        if not a <= value <= b:
            raise ValueError(f"scripted value {value} outside requested range [{a}, {b}]")
        self._position += 1
        return value


def _parse_dice_notation(notation: str) -> tuple[int, int]:
    """Parse dice notation like '2d6' into (num_dice, num_sides).

    Args:
        notation: Dice notation string (e.g., "2d6", "1d20", "3d6")

    Returns:
        Tuple of (number_of_dice, number_of_sides)

    Raises:
        ValueError: If notation is invalid or values are non-positive

    Examples:
        >>> _parse_dice_notation("2d6")
        (2, 6)

        >>> _parse_dice_notation("1d20")
        (1, 20)
    """
    match = re.match(r"^(\d+)d(\d+)$", notation.lower())
    if not match:
        raise ValueError(
            f"Invalid dice notation: '{notation}'. Expected format: NdM (e.g., '2d6', '1d20')"
        )

    num_dice = int(match.group(1))
    num_sides = int(match.group(2))

    if num_dice <= 0:
        raise ValueError(f"Number of dice must be positive, got {num_dice}")
    if num_sides <= 0:
        raise ValueError(f"Number of sides must be positive, got {num_sides}")

    return num_dice, num_sides


def roll_dice(rng: RandomSource, notation: str = "1d6") -> dict[str, Any]:
    """Roll dice drawn from the supplied source.

    Args:
        rng: Random source to draw from
        notation: Dice notation (e.g., "1d6", "2d6", "1d20")

    Returns:
        Dictionary containing:
            - notation: The dice notation used
            - rolls: List of individual die rolls
            - total: Sum of all rolls

    Examples:
        >>> result = roll_dice(ScriptedRandom([3, 5]), "2d6")
        >>> result['total']
        8

    Raises:
        ValueError: If dice notation is invalid
    """
    num_dice, num_sides = _parse_dice_notation(notation)

    rolls = [rng.randint(1, num_sides) for _ in range(num_dice)]

    return {
        "notation": notation,
        "rolls": rolls,
        "total": sum(rolls),
    }


def random_choice(rng: RandomSource, options: list[Any]) -> dict[str, Any]:
    """Choose uniformly from options using the supplied source.

    Args:
        rng: Random source to draw from
        options: List of options to choose from (must be non-empty)

    Returns:
        Dictionary containing:
            - choice: The selected option
            - index: Index of the selected option

    Examples:
        >>> random_choice(ScriptedRandom([1]), ["A", "B", "C"])
        {'choice': 'B', 'index': 1}

    Raises:
        ValueError: If options list is empty
    """
    if not options:
        raise ValueError("options list cannot be empty")

    index = rng.randint(0, len(options) - 1)

    return {
        "choice": options[index],
        "index": index,
    }
