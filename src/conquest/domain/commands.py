"""Player commands accepted by a game session."""

from __future__ import annotations

from dataclasses import dataclass

from conquest.domain.errors import MalformedCommand

MENU_ATTACK = 1
MENU_CHECK_MISSION = 2
MENU_QUIT = 0


@dataclass(frozen=True, slots=True)
class AttackCommand:
    """Perform ``count`` sub-attacks this turn.

    ``count`` is ``None`` when the menu choice was made but the number of
    attacks has not been asked yet.
    """

    count: int | None = None


@dataclass(frozen=True, slots=True)
class CheckMissionCommand:
    """Evaluate the player's mission."""


@dataclass(frozen=True, slots=True)
class QuitCommand:
    """End the session."""


@dataclass(frozen=True, slots=True)
class InvalidCommand:
    """A well-formed choice that matches no menu option."""

    raw: str


Command = AttackCommand | CheckMissionCommand | QuitCommand | InvalidCommand


def parse_int(text: str, *, what: str = "value") -> int:
    """Parse player input as an integer or raise :class:`MalformedCommand`."""

    stripped = text.strip()
    try:
        return int(stripped)
    except ValueError as exc:
        raise MalformedCommand(f"{what} must be a whole number, got {stripped!r}") from exc


def parse_menu_choice(text: str) -> Command:
    """Translate a main-menu choice into a command.

    The attack count is asked separately, so an attack choice yields an
    :class:`AttackCommand` without a count.
    """

    choice = parse_int(text, what="menu option")
    if choice == MENU_ATTACK:
        return AttackCommand()
    if choice == MENU_CHECK_MISSION:
        return CheckMissionCommand()
    if choice == MENU_QUIT:
        return QuitCommand()
    return InvalidCommand(raw=text.strip())


def parse_attack_count(text: str) -> AttackCommand:
    count = parse_int(text, what="attack count")
    if count < 1:
        raise MalformedCommand(f"attack count must be at least 1, got {count}")
    return AttackCommand(count=count)
