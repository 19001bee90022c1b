"""Protocol-based interfaces for Conquest collaborators.

Rules functions depend on these protocols so tests can inject deterministic
fakes instead of patching the :mod:`random` module.
"""

from conquest.interfaces.random_source import RandomSource

__all__ = [
    "RandomSource",
]
