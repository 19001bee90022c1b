"""Error types raised by the Conquest rules layer."""

from __future__ import annotations


class ConquestError(Exception):
    """Base class for every game-rule error."""


class AllocationFailure(ConquestError):
    """Raised when the territory registry cannot be built."""


class InvalidIndex(ConquestError, ValueError):
    """Raised when a territory selection is out of range or self-targeting."""


class MalformedCommand(ConquestError, ValueError):
    """Raised when player input cannot be turned into a command."""


class NoValidTarget(ConquestError):
    """Raised when no palette color can serve as a destroy-army target."""


class SessionClosed(ConquestError, RuntimeError):
    """Raised when a command reaches a session that already ended."""


class CombatError(ConquestError):
    """Raised when an attack cannot be resolved."""

    def __init__(self, territory_name: str, message: str) -> None:
        super().__init__(message)
        self.territory_name = territory_name


class AttackerEmpty(CombatError):
    """The attacking territory has no troops left."""

    def __init__(self, territory_name: str) -> None:
        super().__init__(
            territory_name,
            f"attacking territory '{territory_name}' has no troops to attack with",
        )


class DefenderEmpty(CombatError):
    """The defending territory is already empty."""

    def __init__(self, territory_name: str) -> None:
        super().__init__(
            territory_name,
            f"defending territory '{territory_name}' is already empty",
        )
