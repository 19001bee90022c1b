"""Turn orchestration for a single-player Conquest session."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from conquest.domain import combat, missions
from conquest.domain.commands import (
    AttackCommand,
    CheckMissionCommand,
    Command,
    InvalidCommand,
    QuitCommand,
)
from conquest.domain.enums import SessionState, SubAttackStatus
from conquest.domain.errors import (
    AttackerEmpty,
    DefenderEmpty,
    InvalidIndex,
    MalformedCommand,
    SessionClosed,
)
from conquest.domain.models import AttackOutcome, Mission
from conquest.domain.registry import Registry, list_territories
from conquest.domain.rules_config import DEFAULT_RULES, RulesConfig
from conquest.interfaces import RandomSource
from conquest.schemas import MissionRead, TerritoryRead

logger = logging.getLogger(__name__)

TargetSelector = Callable[[int, int], tuple[int, int]]
"""Callback returning ``(attacker_index, defender_index)`` for a sub-attack.

It receives the 1-based sub-attack number and the total number of sub-attacks
and may raise :class:`MalformedCommand` when the player's input is unusable.
"""

SubAttackListener = Callable[["SubAttackReport"], None]


@dataclass(slots=True)
class SubAttackReport:
    """Outcome of one sub-attack within an attack command."""

    number: int
    status: SubAttackStatus
    attacker_index: int | None = None
    defender_index: int | None = None
    outcome: AttackOutcome | None = None
    detail: str | None = None


@dataclass(slots=True)
class AttackTurnReport:
    """Every sub-attack performed for an attack command."""

    requested: int
    sub_attacks: list[SubAttackReport] = field(default_factory=list)

    @property
    def resolved(self) -> list[SubAttackReport]:
        return [report for report in self.sub_attacks if report.status is SubAttackStatus.RESOLVED]


@dataclass(slots=True)
class MissionCheck:
    """Result of evaluating the mission on demand."""

    satisfied: bool
    description: str


@dataclass(slots=True)
class CommandResult:
    """Outcome of a command handled by the session."""

    state: SessionState
    attack: AttackTurnReport | None = None
    mission: MissionCheck | None = None
    invalid_option: str | None = None


class GameSession:
    """Owns the registry and mission of one game and sequences commands.

    The session starts in :attr:`SessionState.PLAYING`. Winning the mission on
    a check or quitting ends it; commands sent afterwards raise
    :class:`SessionClosed`.
    """

    def __init__(
        self,
        registry: Registry,
        mission: Mission,
        player_color: str,
        *,
        rng: RandomSource,
        rules: RulesConfig = DEFAULT_RULES,
    ) -> None:
        self.registry = registry
        self.mission = mission
        self.player_color = player_color
        self.rules = rules
        self._rng = rng
        self._state = SessionState.PLAYING

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_over(self) -> bool:
        return self._state is not SessionState.PLAYING

    # ------------------------------------------------------------------
    # Command surface

    def handle(
        self,
        command: Command,
        selector: TargetSelector | None = None,
        *,
        on_sub_attack: SubAttackListener | None = None,
    ) -> CommandResult:
        """Dispatch a parsed command.

        ``on_sub_attack`` is called with each sub-attack report as soon as it
        is resolved, before the selector is asked for the next one.
        """

        if isinstance(command, AttackCommand):
            self._ensure_playing()
            if selector is None:
                raise ValueError("attack commands require a target selector")
            if command.count is None:
                raise MalformedCommand("attack command is missing its count")
            report = self.attack(command.count, selector, on_sub_attack=on_sub_attack)
            return CommandResult(state=self._state, attack=report)
        if isinstance(command, CheckMissionCommand):
            check = self.check_mission()
            return CommandResult(state=self._state, mission=check)
        if isinstance(command, QuitCommand):
            self.quit()
            return CommandResult(state=self._state)
        if isinstance(command, InvalidCommand):
            self._ensure_playing()
            logger.debug("Ignoring invalid menu option %r", command.raw)
            return CommandResult(state=self._state, invalid_option=command.raw)
        raise TypeError(f"unsupported command: {command!r}")

    def attack(
        self,
        count: int,
        selector: TargetSelector,
        *,
        on_sub_attack: SubAttackListener | None = None,
    ) -> AttackTurnReport:
        """Run ``count`` sub-attacks; each failure only skips its own step."""

        self._ensure_playing()
        if count < 1:
            raise MalformedCommand(f"attack count must be at least 1, got {count}")

        report = AttackTurnReport(requested=count)
        for number in range(1, count + 1):
            sub_attack = self._sub_attack(number, count, selector)
            report.sub_attacks.append(sub_attack)
            if on_sub_attack is not None:
                on_sub_attack(sub_attack)
        return report

    def check_mission(self) -> MissionCheck:
        """Evaluate the mission, ending the session when it is fulfilled."""

        self._ensure_playing()
        satisfied = missions.evaluate_mission(
            self.mission, self.registry, self.player_color, rules=self.rules
        )
        if satisfied:
            self._transition(SessionState.WON)
        return MissionCheck(satisfied=satisfied, description=self.describe_mission())

    def quit(self) -> None:
        self._ensure_playing()
        self._transition(SessionState.EXITED)

    # ------------------------------------------------------------------
    # Read-only views

    def list_territories(self) -> list[TerritoryRead]:
        return list_territories(self.registry)

    def describe_mission(self) -> str:
        return missions.describe_mission(self.mission, rules=self.rules)

    def mission_view(self) -> MissionRead:
        return missions.mission_view(self.mission, rules=self.rules)

    # ------------------------------------------------------------------
    # Internals

    def _sub_attack(self, number: int, count: int, selector: TargetSelector) -> SubAttackReport:
        try:
            attacker_index, defender_index = selector(number, count)
        except MalformedCommand as exc:
            logger.warning("Sub-attack %d/%d skipped: %s", number, count, exc)
            return SubAttackReport(
                number=number, status=SubAttackStatus.MALFORMED_INPUT, detail=str(exc)
            )

        report = SubAttackReport(
            number=number,
            status=SubAttackStatus.RESOLVED,
            attacker_index=attacker_index,
            defender_index=defender_index,
        )
        try:
            attacker, defender = self.registry.pair(attacker_index, defender_index)
            report.outcome = combat.resolve_attack(
                attacker, defender, rng=self._rng, rules=self.rules
            )
        except InvalidIndex as exc:
            report.status = SubAttackStatus.INVALID_INDEX
            report.detail = str(exc)
        except AttackerEmpty as exc:
            report.status = SubAttackStatus.ATTACKER_EMPTY
            report.detail = str(exc)
        except DefenderEmpty as exc:
            report.status = SubAttackStatus.DEFENDER_EMPTY
            report.detail = str(exc)

        if report.status is not SubAttackStatus.RESOLVED:
            logger.warning("Sub-attack %d/%d skipped: %s", number, count, report.detail)
        return report

    def _ensure_playing(self) -> None:
        if self._state is not SessionState.PLAYING:
            raise SessionClosed(f"session already ended ({self._state})")

    def _transition(self, state: SessionState) -> None:
        logger.info("Session %s -> %s", self._state, state)
        self._state = state
