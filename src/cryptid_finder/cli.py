"""CLI-side view over a deduction session and hint text formatting."""

from __future__ import annotations

from cryptid_finder.planning import QuestionHint, QuietTileHint
from cryptid_finder.session import DeductionSession, HintReport
from cryptid_finder.world.hexgrid import Hex


def format_positions(positions: list[Hex]) -> str:
    return ", ".join(str(position) for position in positions)


def format_question_hint(name: str, hint: QuestionHint | None) -> str:
    if hint is None:
        return f"No useful question for {name}"
    if hint.low == hint.high:
        eliminated = f"{hint.low}"
    else:
        eliminated = f"{hint.low} to {hint.high}"
    return f"Ask {name} about {format_positions(hint.tiles)}: eliminates {eliminated} of {hint.candidates} clues"


def format_quiet_hint(name: str, hint: QuietTileHint | None) -> str:
    if hint is None:
        return f"No unanswered tile left for {name}"
    return f"Safest 'no' for {name}: {format_positions(hint.tiles)} reveals {hint.diff} clues"


class CliSessionView:
    """Presents session results as plain dicts and lines for console output."""

    def __init__(self, session: DeductionSession) -> None:
        self._session = session

    def candidate_clues(self, player_id: int | None = None) -> dict[str, dict]:
        players = self._session.players
        selected = [players.get(player_id)] if player_id is not None else list(players)
        result: dict[str, dict] = {}
        for player in selected:
            clues = self._session.deduced_clues(player.id)
            result[player.name] = {"count": len(clues), "clues": [str(clue) for clue in clues]}
        return result

    def overlay(self) -> dict:
        return {
            "remaining_tiles": self._session.remaining_tiles,
            "total_tiles": len(self._session.board),
            "possible": [str(position) for position in self._session.possible_positions()],
        }

    def hint_lines(self, report: HintReport | None = None) -> list[str]:
        report = report or self._session.hints
        if report is None:
            return ["Hints not computed yet"]

        players = self._session.players
        lines = [
            format_question_hint(players.get(player_id).name, hint) for player_id, hint in report.questions.items()
        ]
        if report.acting_player is not None:
            lines.append(format_quiet_hint(players.get(report.acting_player).name, report.quiet))
        return lines
