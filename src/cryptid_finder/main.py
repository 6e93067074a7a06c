"""CLI entrypoint for Cryptid Finder."""

from __future__ import annotations

from typing import NoReturn

import typer
from rich import print

from cryptid_finder.cli import CliSessionView
from cryptid_finder.config import settings
from cryptid_finder.deduction.clues import ClueParseError, clue_applies, parse_clue
from cryptid_finder.models import UnknownPlayerError
from cryptid_finder.session import DeductionSession
from cryptid_finder.snapshot import SnapshotError, load_snapshot, session_from_snapshot
from cryptid_finder.telemetry import configure_logging
from cryptid_finder.world.hexgrid import Hex

app = typer.Typer(help="Deduction helper for the hidden-creature hex board game")


@app.callback()
def _setup(log_level: str = typer.Option(None, help="Override CRYPTID_FINDER_LOG_LEVEL")) -> None:
    configure_logging(log_level or settings.log_level)


def _fail(message: str) -> NoReturn:
    print({"error": message})
    raise typer.Exit(code=1)


def _load_session(snapshot_file: str | None, with_inverted: bool | None = None) -> DeductionSession:
    path = snapshot_file or settings.snapshot_path
    if not path:
        raise typer.BadParameter("Provide a snapshot file or set CRYPTID_FINDER_SNAPSHOT_PATH")
    try:
        session = session_from_snapshot(load_snapshot(path), default_with_inverted=settings.with_inverted_clues)
    except SnapshotError as exc:
        _fail(str(exc))
    if with_inverted is not None:
        session.set_with_inverted(with_inverted)
    return session


def _player_id(session: DeductionSession, reference: str) -> int:
    try:
        return session.players.resolve(reference).id
    except UnknownPlayerError as exc:
        _fail(exc.args[0])


@app.command("show-config")
def show_config() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "with_inverted_clues": settings.with_inverted_clues,
            "snapshot_path": settings.snapshot_path,
        }
    )


@app.command("clues")
def clues(
    snapshot_file: str = typer.Argument(None, help="Path to a game snapshot JSON file"),
    player: str = typer.Option(None, help="Player id or name; all players when omitted"),
    with_inverted: bool = typer.Option(None, "--with-inverted/--without-inverted", help="Include inverted clues"),
) -> None:
    """List the clues each player could still hold."""
    session = _load_session(snapshot_file, with_inverted)
    player_id = _player_id(session, player) if player else None
    print({"candidate_clues": CliSessionView(session).candidate_clues(player_id)})


@app.command("overlay")
def overlay(
    snapshot_file: str = typer.Argument(None, help="Path to a game snapshot JSON file"),
    with_inverted: bool = typer.Option(None, "--with-inverted/--without-inverted", help="Include inverted clues"),
) -> None:
    """Show which tiles can still hold the creature."""
    session = _load_session(snapshot_file, with_inverted)
    print(CliSessionView(session).overlay())


@app.command("hint")
def hint(
    snapshot_file: str = typer.Argument(None, help="Path to a game snapshot JSON file"),
    acting_player: str = typer.Option(None, help="Player id or name taking the turn; defaults to the snapshot"),
    with_inverted: bool = typer.Option(None, "--with-inverted/--without-inverted", help="Include inverted clues"),
) -> None:
    """Suggest which tile to ask each opponent about, and the safest tile to answer 'no' on."""
    session = _load_session(snapshot_file, with_inverted)
    if acting_player:
        session.set_acting_player(_player_id(session, acting_player))
    report = session.compute_hints()
    print({"hints": CliSessionView(session).hint_lines(report)})


@app.command("check")
def check(
    snapshot_file: str = typer.Argument(None, help="Path to a game snapshot JSON file"),
    clue: str = typer.Option(..., help="Clue token, e.g. 'terrain:forest' or 'not animal:bear'"),
    q: int = typer.Option(..., help="Axial q coordinate"),
    r: int = typer.Option(..., help="Axial r coordinate"),
) -> None:
    """Evaluate one clue at one hex."""
    session = _load_session(snapshot_file)
    try:
        parsed = parse_clue(clue)
    except ClueParseError as exc:
        _fail(str(exc))
    position = Hex(q, r)
    print(
        {
            "clue": str(parsed),
            "position": str(position),
            "on_map": position in session.board,
            "applies": clue_applies(parsed, position, session.board),
        }
    )


if __name__ == "__main__":
    app()
