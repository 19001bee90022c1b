"""Integration tests playing whole games through the console entrypoint."""

from __future__ import annotations

import io
import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from conquest.cli import ConsoleUI, play
from conquest.config import Settings, get_settings
from conquest.domain.enums import SessionState
from conquest.factory import create_session
from conquest.main import main
from conquest.utils.rng import ScriptedRandom


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from cached settings and ambient environment."""
    for name in ("PLAYER_COLOR", "TERRITORY_COUNT", "SEED", "LOG_LEVEL", "COLOR_OUTPUT"):
        monkeypatch.delenv(f"CONQUEST_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=100, color_system=None, force_terminal=False)


def _reader(*lines: str) -> Callable[[], str]:
    queue = list(lines)

    def read() -> str:
        if not queue:
            raise EOFError
        return queue.pop(0)

    return read


def test_destroy_army_game_is_won(console):
    # Mission draw: destroy-army (0) targeting palette index 3 (Amarelo),
    # then three winning rolls for Pantanal against Caatinga.
    rng = ScriptedRandom([0, 3, 6, 1, 6, 1, 6, 1])
    session = create_session(settings=Settings(), rng=rng)
    ui = ConsoleUI(console, read=_reader("1", "3", "3", "4", "3", "4", "3", "4", "", "2"))

    final_state = play(session, ui)

    output = console.file.getvalue()
    assert final_state is SessionState.WON
    assert "Caatinga was conquered by Vermelho!" in output
    assert "Congratulations! You completed your mission: Destroy the Amarelo army" in output
    caatinga = session.list_territories()[3]
    assert (caatinga.owner_color, caatinga.troops) == ("Vermelho", 1)
    assert rng.remaining == 0


def test_player_conquers_three_territories(console):
    # Threshold mission; Cerrado (Azul, 4 troops) takes Caatinga then Amazonas.
    rolls = [1] + [6, 1] * 3 + [6, 1] * 5
    session = create_session(settings=Settings(), rng=ScriptedRandom(rolls))
    inputs = ["1", "3"] + ["2", "4"] * 3 + ["", "2", "", "1", "5"] + ["2", "1"] * 5 + ["", "2"]
    ui = ConsoleUI(console, read=_reader(*inputs))

    final_state = play(session, ui)

    assert final_state is SessionState.WON
    owners = [t.owner_color for t in session.list_territories()]
    assert owners == ["Azul", "Azul", "Vermelho", "Azul", "Roxo"]
    assert "Mission NOT completed yet: Conquer 3 territories" in console.file.getvalue()


def test_main_plays_seeded_game_until_quit(console):
    exit_code = main(
        ["--seed", "integration", "--no-color"],
        console=console,
        read=_reader("1", "1", "1", "2", "", "2", "", "0"),
    )

    output = console.file.getvalue()
    assert exit_code == 0
    assert "Current Map" in output
    assert ">>> Attack 1 of 1 <<<" in output
    assert "Roll: attacker" in output
    assert "Leaving the game..." in output


def test_main_reports_startup_failure(console, caplog):
    exit_code = main(["--territories", "9"], console=console, read=_reader())

    assert exit_code == 1
    assert "Could not start the game" in caplog.text


def test_main_rejects_unknown_player_color(console):
    assert main(["--player-color", "Preto"], console=console, read=_reader()) == 1


def test_main_rejects_invalid_settings(console):
    with pytest.raises(SystemExit) as excinfo:
        main(["--territories", "0"], console=console, read=_reader())
    assert excinfo.value.code == 2


@pytest.mark.parametrize("level", ["verbose", "loud"])
def test_main_rejects_unknown_log_level(console, level):
    with pytest.raises(SystemExit) as excinfo:
        main(["--log-level", level], console=console, read=_reader())
    assert excinfo.value.code == 2


@pytest.mark.parametrize(
    ("name", "value"),
    [("LOG_LEVEL", "loud"), ("TERRITORY_COUNT", "0"), ("TERRITORY_COUNT", "many")],
)
def test_main_rejects_invalid_environment(console, monkeypatch, name, value):
    monkeypatch.setenv(f"CONQUEST_{name}", value)

    with pytest.raises(SystemExit) as excinfo:
        main([], console=console, read=_reader())
    assert excinfo.value.code == 2


def test_log_level_is_case_insensitive():
    assert Settings(log_level="debug").log_level == "DEBUG"


@pytest.fixture(scope="module")
def project_root():
    return Path(__file__).parent.parent.parent


def _run_cli(project_root: Path, *args: str, **env: str) -> subprocess.CompletedProcess[str]:
    """Launch the game in a fresh interpreter so logging starts unconfigured."""
    environ = {key: value for key, value in os.environ.items() if not key.startswith("CONQUEST_")}
    environ["PYTHONPATH"] = str(project_root / "src")
    environ.update(env)
    return subprocess.run(
        [sys.executable, "-m", "conquest.main", *args],
        check=False,
        cwd=project_root,
        capture_output=True,
        text=True,
        input="0\n",
        env=environ,
        timeout=60,
    )


@pytest.mark.parametrize(
    ("args", "env"),
    [(("--log-level", "verbose"), {}), ((), {"CONQUEST_LOG_LEVEL": "loud"})],
)
def test_cli_reports_bad_log_level_without_traceback(project_root, args, env):
    result = _run_cli(project_root, *args, **env)

    assert result.returncode == 2
    assert "log_level" in result.stderr
    assert "Traceback" not in result.stderr


def test_cli_configures_requested_log_level(project_root):
    result = _run_cli(project_root, "--log-level", "info", "--seed", "cli")

    assert result.returncode == 0
    assert "Traceback" not in result.stderr
    assert "Game finished in state exited" in result.stderr
