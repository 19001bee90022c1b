"""Tests for the rich console front-end."""

from __future__ import annotations

import io
import logging
from collections.abc import Callable

from rich.console import Console

from conquest.cli import ConsoleUI, army_text, play
from conquest.domain import models as dm
from conquest.domain.enums import MissionKind, SessionState, SubAttackStatus
from conquest.domain.registry import initialize_registry
from conquest.domain.turn import GameSession, SubAttackReport
from conquest.utils.rng import ScriptedRandom


def _reader(*lines: str) -> Callable[[], str]:
    queue = list(lines)

    def read() -> str:
        if not queue:
            raise EOFError
        return queue.pop(0)

    return read


def _ui(*lines: str) -> tuple[ConsoleUI, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, width=100, color_system=None, force_terminal=False)
    return ConsoleUI(console, read=_reader(*lines)), buffer


def _session(rolls: list[int], mission: dm.Mission | None = None) -> GameSession:
    return GameSession(
        initialize_registry(5),
        mission or dm.Mission(kind=MissionKind.CONQUER_THRESHOLD),
        "Azul",
        rng=ScriptedRandom(rolls),
    )


def test_army_text_styles_known_colors():
    assert str(army_text("Verde").style) == "green"
    assert str(army_text("Preto").style) == ""
    assert str(army_text("Verde", color_output=False).style) == ""


def test_render_map_lists_every_territory():
    ui, buffer = _ui()
    ui.render_map(_session([]).list_territories())

    output = buffer.getvalue()
    for name in ("Amazonas", "Cerrado", "Pantanal", "Caatinga", "Mata Atlantica"):
        assert name in output
    assert "Vermelho" in output


def test_render_sub_attack_narrates_conquest():
    ui, buffer = _ui()
    outcome = dm.AttackOutcome(
        attacker_name="Pantanal",
        defender_name="Caatinga",
        attacker_color="Vermelho",
        defender_color="Amarelo",
        attack_roll=6,
        defense_roll=2,
        defender_lost_troop=True,
        conquered=True,
        troop_moved=True,
        attacker_troops=5,
        defender_troops=1,
    )
    ui.render_sub_attack(
        SubAttackReport(number=1, status=SubAttackStatus.RESOLVED, outcome=outcome)
    )

    output = buffer.getvalue()
    assert "Roll: attacker 6 vs defender 2" in output
    assert "Caatinga was conquered by Vermelho!" in output
    assert "One troop moved from Pantanal to Caatinga." in output


def test_render_sub_attack_reports_invalid_selection():
    ui, buffer = _ui()
    ui.render_sub_attack(SubAttackReport(number=1, status=SubAttackStatus.INVALID_INDEX))
    assert "Attack cancelled" in buffer.getvalue()


def test_quit_from_menu():
    ui, buffer = _ui("0")
    session = _session([])

    assert play(session, ui) is SessionState.EXITED
    assert "Leaving the game..." in buffer.getvalue()


def test_end_of_input_quits():
    ui, _ = _ui()
    assert play(_session([]), ui) is SessionState.EXITED


def test_invalid_and_malformed_options_keep_playing():
    ui, buffer = _ui("9", "", "abc", "", "0")
    session = _session([])

    assert play(session, ui) is SessionState.EXITED
    assert buffer.getvalue().count("Invalid option. Try again.") == 2


def test_attack_flow_skips_bad_selections():
    # 2 attacks: the first names the same territory twice, the second hits.
    ui, buffer = _ui("1", "2", "3", "3", "3", "4", "", "0")
    session = _session([6, 1])

    play(session, ui)

    output = buffer.getvalue()
    assert ">>> Attack 1 of 2 <<<" in output
    assert "Attack cancelled" in output
    assert "Caatinga loses 1 troop." in output
    assert session.registry[3].troops == 2


def test_bad_attack_count_returns_to_menu():
    ui, buffer = _ui("1", "many", "", "0")
    session = _session([])

    play(session, ui)

    assert "Invalid input. Back to the menu." in buffer.getvalue()


def test_winning_ends_the_loop():
    ui, buffer = _ui("2")
    session = _session([])
    for position in (0, 2):
        session.registry[position].owner_color = "Azul"

    assert play(session, ui) is SessionState.WON
    assert "Congratulations! You completed your mission: Conquer 3 territories" in (
        buffer.getvalue()
    )


def test_pending_mission_is_reported():
    ui, buffer = _ui("2", "", "0")
    play(_session([]), ui)
    assert "Mission NOT completed yet: Conquer 3 territories" in buffer.getvalue()


def test_render_sub_attack_narrates_held_defense():
    ui, buffer = _ui()
    outcome = dm.AttackOutcome(
        attacker_name="Amazonas",
        defender_name="Cerrado",
        attacker_color="Verde",
        defender_color="Azul",
        attack_roll=2,
        defense_roll=5,
        defender_lost_troop=False,
        conquered=False,
        troop_moved=False,
        attacker_troops=5,
        defender_troops=4,
    )
    ui.render_sub_attack(
        SubAttackReport(number=1, status=SubAttackStatus.RESOLVED, outcome=outcome)
    )

    output = buffer.getvalue()
    assert "Result: the defense holds. The defender loses nothing." in output
    assert "loses 1 troop" not in output


def test_malformed_menu_choice_keeps_typed_text(caplog):
    caplog.set_level(logging.DEBUG, logger="conquest.domain.turn")
    ui, _ = _ui("  abc ", "", "0")

    play(_session([]), ui)

    assert "Ignoring invalid menu option 'abc'" in caplog.text
