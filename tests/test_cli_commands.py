from __future__ import annotations

import importlib
import json
from pathlib import Path

import pytest

typer_testing = pytest.importorskip("typer.testing")

from cryptid_finder.main import app  # noqa: E402


def _write_snapshot(tmp_path: Path) -> Path:
    path = tmp_path / "game.json"
    path.write_text(
        json.dumps(
            {
                "players": [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}],
                "tiles": [
                    {"q": 0, "r": 0, "terrain": "desert", "answers": {"1": "yes"}},
                    {"q": 1, "r": 0, "terrain": "forest", "animal": "bear"},
                    {"q": 0, "r": 1, "terrain": "water"},
                    {"q": -1, "r": 1, "terrain": "swamp", "answers": {"2": "no"}},
                ],
                "acting_player": 2,
            }
        ),
        encoding="utf-8",
    )
    return path


def _invoke(*args: str):
    return typer_testing.CliRunner().invoke(app, list(args), catch_exceptions=False)


def test_console_entrypoint_exposes_app() -> None:
    module = importlib.import_module("cryptid_finder.main")

    assert module.app is not None


def test_overlay_command(tmp_path: Path) -> None:
    result = _invoke("overlay", str(_write_snapshot(tmp_path)))

    assert result.exit_code == 0
    assert "remaining_tiles" in result.stdout


def test_clues_command_for_one_player(tmp_path: Path) -> None:
    result = _invoke("clues", str(_write_snapshot(tmp_path)), "--player", "alice")

    assert result.exit_code == 0
    assert "Alice" in result.stdout
    assert "Bob" not in result.stdout


def test_hint_command(tmp_path: Path) -> None:
    result = _invoke("hint", str(_write_snapshot(tmp_path)))

    assert result.exit_code == 0
    assert "Ask Alice about" in result.stdout
    assert "Safest 'no' for Bob" in result.stdout


def test_check_command(tmp_path: Path) -> None:
    result = _invoke("check", str(_write_snapshot(tmp_path)), "--clue", "animal:bear", "--q", "0", "--r", "0")

    assert result.exit_code == 0
    assert "'applies': True" in result.stdout


def test_unknown_player_exits_with_error(tmp_path: Path) -> None:
    result = _invoke("hint", str(_write_snapshot(tmp_path)), "--acting-player", "Zed")

    assert result.exit_code == 1
    assert "Unknown player name: Zed" in result.stdout


def test_missing_snapshot_exits_with_error(tmp_path: Path) -> None:
    result = _invoke("overlay", str(tmp_path / "nope.json"))

    assert result.exit_code == 1
    assert "Snapshot not found" in result.stdout
