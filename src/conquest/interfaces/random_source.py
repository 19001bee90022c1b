"""Random Source Protocol Interface.

This module defines the protocol (interface) for the randomness capability
consumed by the Conquest rules layer.
"""

from typing import Protocol


class RandomSource(Protocol):
    """Protocol for objects producing uniform integers.

    :class:`random.Random` satisfies this protocol, as does
    :class:`conquest.utils.rng.ScriptedRandom` for deterministic tests.
    """

    def randint(self, a: int, b: int) -> int:
        """Return a uniform integer N such that ``a <= N <= b``.

        Args:
            a: Lower bound (inclusive)
            b: Upper bound (inclusive)

        Returns:
            The drawn integer
        """
        ...
