"""
Console front-end for Conquest.

Renders the map, mission and attack narration with rich and turns typed
input into session commands. No game rule lives here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from conquest.domain.commands import (
    AttackCommand,
    CheckMissionCommand,
    InvalidCommand,
    QuitCommand,
    parse_attack_count,
    parse_int,
    parse_menu_choice,
)
from conquest.domain.enums import SessionState, SubAttackStatus
from conquest.domain.errors import MalformedCommand
from conquest.domain.turn import GameSession, SubAttackReport
from conquest.schemas import TerritoryRead

logger = logging.getLogger(__name__)

# Army colors of the default palette
COLOR_STYLES = {
    "Verde": "green",
    "Azul": "blue",
    "Vermelho": "red",
    "Amarelo": "yellow",
    "Roxo": "magenta",
}

MENU_LINES = (
    "  1 - Attack",
    "  2 - Check mission",
    "  0 - Quit",
)


def army_text(color: str, *, color_output: bool = True) -> Text:
    """Army name styled with its color, plain for unknown colors."""

    style = COLOR_STYLES.get(color) if color_output else None
    return Text(color, style=style or "")


class ConsoleUI:
    """Reads player input and prints game state."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        read: Callable[[], str] = input,
        color_output: bool = True,
    ) -> None:
        self.console = console or Console()
        self._read = read
        self.color_output = color_output

    def ask(self, prompt: str) -> str:
        self.console.print(prompt, end="", markup=False, highlight=False)
        return self._read()

    def pause(self) -> None:
        try:
            self.ask("\nPress Enter to continue...")
        except EOFError:
            self.console.print()

    # ------------------------------------------------------------------
    # Rendering

    def render_map(self, territories: list[TerritoryRead]) -> None:
        table = Table(title="Current Map")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Territory")
        table.add_column("Army")
        table.add_column("Troops", justify="right")

        for territory in territories:
            table.add_row(
                str(territory.index),
                territory.name,
                army_text(territory.owner_color, color_output=self.color_output),
                str(territory.troops),
            )
        self.console.print(table)

    def render_mission(self, description: str) -> None:
        self.console.print(Panel(Text(f"Objective: {description}"), title="Current Mission"))

    def render_menu(self) -> None:
        self.console.print("Menu:")
        for line in MENU_LINES:
            self.console.print(line, markup=False)

    def render_sub_attack(self, report: SubAttackReport) -> None:
        if report.status is SubAttackStatus.MALFORMED_INPUT:
            self.console.print("Invalid input. Skipping attack.", style="yellow")
            return
        if report.status is SubAttackStatus.INVALID_INDEX:
            self.console.print(
                "Invalid option (index out of range or same territory). Attack cancelled.",
                style="yellow",
            )
            return
        if report.status in (SubAttackStatus.ATTACKER_EMPTY, SubAttackStatus.DEFENDER_EMPTY):
            self.console.print(Text(f"Attack not possible: {report.detail}.", style="yellow"))
            return

        outcome = report.outcome
        if outcome is None:
            return
        line = Text()
        line.append(f"{outcome.attacker_name} (")
        line.append_text(army_text(outcome.attacker_color, color_output=self.color_output))
        line.append(f") attacks {outcome.defender_name} (")
        line.append_text(army_text(outcome.defender_color, color_output=self.color_output))
        line.append(")")
        self.console.print(line)
        self.console.print(
            f"Roll: attacker {outcome.attack_roll} vs defender {outcome.defense_roll}",
            highlight=False,
        )
        if not outcome.attacker_won:
            self.console.print("Result: the defense holds. The defender loses nothing.")
            return

        self.console.print(Text(f"Result: {outcome.defender_name} loses 1 troop."))
        if outcome.conquered:
            conquest = Text(f"{outcome.defender_name} was conquered by ", style="bold")
            conquest.append_text(
                army_text(outcome.attacker_color, color_output=self.color_output)
            )
            conquest.append("!")
            self.console.print(conquest)
            if outcome.troop_moved:
                moved = f"One troop moved from {outcome.attacker_name} to {outcome.defender_name}."
                self.console.print(Text(moved))
        for note in outcome.notes:
            self.console.print(Text(note, style="dim"))

    # ------------------------------------------------------------------
    # Input

    def select_targets(self, total_territories: int) -> Callable[[int, int], tuple[int, int]]:
        """Build a selector that asks for the attacker and defender of each sub-attack."""

        def selector(number: int, count: int) -> tuple[int, int]:
            self.console.print(f"\n[bold]>>> Attack {number} of {count} <<<[/bold]")
            try:
                attacker = parse_int(
                    self.ask(f"Choose the attacking territory (1 - {total_territories}): "),
                    what="attacker",
                )
                defender = parse_int(
                    self.ask(f"Choose the defending territory (1 - {total_territories}): "),
                    what="defender",
                )
            except EOFError as exc:
                raise MalformedCommand("input ended before the attack was chosen") from exc
            return attacker, defender

        return selector


def play(session: GameSession, ui: ConsoleUI) -> SessionState:
    """Run the menu loop until the player wins or quits."""

    while not session.is_over:
        ui.render_map(session.list_territories())
        ui.render_mission(session.describe_mission())
        ui.render_menu()

        try:
            choice = ui.ask("Choose an option: ")
        except EOFError:
            choice = None

        if choice is None:
            command = QuitCommand()
        else:
            try:
                command = parse_menu_choice(choice)
            except MalformedCommand as exc:
                logger.debug("Menu choice rejected: %s", exc)
                command = InvalidCommand(raw=choice.strip())

        if isinstance(command, AttackCommand):
            _play_attack(session, ui)
        elif isinstance(command, CheckMissionCommand):
            check = session.handle(command).mission
            if check is not None and check.satisfied:
                ui.console.print(
                    Text(f"\nCongratulations! You completed your mission: {check.description}"),
                    style="bold green",
                )
            elif check is not None:
                ui.console.print(Text(f"\nMission NOT completed yet: {check.description}"))
        elif isinstance(command, QuitCommand):
            session.handle(command)
            ui.console.print("\nLeaving the game...")
        else:
            session.handle(command)
            ui.console.print("\nInvalid option. Try again.")

        if not session.is_over:
            ui.pause()

    return session.state


def _play_attack(session: GameSession, ui: ConsoleUI) -> None:
    try:
        command = parse_attack_count(ui.ask("How many attacks do you want this turn? "))
    except MalformedCommand as exc:
        logger.debug("Attack count rejected: %s", exc)
        ui.console.print("Invalid input. Back to the menu.", style="yellow")
        return
    except EOFError:
        ui.console.print()
        return

    selector = ui.select_targets(len(session.registry))
    result = session.handle(command, selector, on_sub_attack=ui.render_sub_attack)
    if result.attack is not None:
        logger.debug(
            "Attack command finished: %d of %d sub-attacks resolved",
            len(result.attack.resolved),
            result.attack.requested,
        )

