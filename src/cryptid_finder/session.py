"""Round orchestration: answers, declared clues and cached deductions/hints."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cryptid_finder.deduction.clues import Clue
from cryptid_finder.deduction.consistency import clues_for_player
from cryptid_finder.deduction.overlay import recompute_possible
from cryptid_finder.models import Answer, PlayerList, Tile
from cryptid_finder.planning import QuestionHint, QuietTileHint, best_question, quietest_tile
from cryptid_finder.world.board import HexMap
from cryptid_finder.world.hexgrid import Hex


@dataclass(slots=True)
class SessionState:
    with_inverted: bool = False
    acting_player: int | None = None
    known_clues: dict[int, Clue] = field(default_factory=dict)
    is_known: dict[int, bool] = field(default_factory=dict)
    trial_clues: list[Clue] = field(default_factory=list)


@dataclass(slots=True)
class HintReport:
    """Result of one hint computation.

    A missing entry in ``questions`` or a ``quiet`` of None means the engine has
    nothing useful to suggest, which is different from the report itself being
    absent (not computed yet).
    """

    acting_player: int | None
    questions: dict[int, QuestionHint | None] = field(default_factory=dict)
    quiet: QuietTileHint | None = None


class DeductionSession:
    """Keeps the overlay and candidate clues in sync with the inputs of a round.

    Candidate clues and the ``possible`` overlay are recomputed from scratch after
    every input change. Hints are expensive and only computed on request; any
    input change drops them.
    """

    def __init__(
        self,
        *,
        board: HexMap,
        players: PlayerList,
        with_inverted: bool = False,
        acting_player: int | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._board = board
        self._players = players
        self._logger = logger or logging.getLogger("cryptid_finder.session")
        if acting_player is not None:
            players.get(acting_player)
        self._state = SessionState(with_inverted=with_inverted, acting_player=acting_player)

        self._deduced: dict[int, list[Clue]] | None = None
        self._hints: HintReport | None = None
        self._remaining = len(board)
        self.refresh()

    @property
    def board(self) -> HexMap:
        return self._board

    @property
    def players(self) -> PlayerList:
        return self._players

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def remaining_tiles(self) -> int:
        return self._remaining

    @property
    def hints(self) -> HintReport | None:
        """Latest hint report, or None if hints were never computed or have gone stale."""
        return self._hints

    def set_answer(self, position: Hex, player_id: int, answer: Answer) -> None:
        self._players.get(player_id)
        self._tile(position).set_answer(player_id, answer)
        self._invalidate("answer_changed", player_id=player_id, position=str(position), answer=answer.value)

    def declare_known_clue(self, player_id: int, clue: Clue) -> None:
        self._players.get(player_id)
        self._state.known_clues[player_id] = clue
        self._state.is_known[player_id] = True
        self._invalidate("known_clue_declared", player_id=player_id, clue=clue.token())

    def clear_known_clue(self, player_id: int) -> None:
        self._players.get(player_id)
        self._state.known_clues.pop(player_id, None)
        self._state.is_known[player_id] = False
        self._invalidate("known_clue_cleared", player_id=player_id)

    def set_with_inverted(self, with_inverted: bool) -> None:
        if with_inverted == self._state.with_inverted:
            return
        self._state.with_inverted = with_inverted
        self._invalidate("with_inverted_changed", with_inverted=with_inverted)

    def set_acting_player(self, player_id: int | None) -> None:
        if player_id is not None:
            self._players.get(player_id)
        self._state.acting_player = player_id
        self._hints = None
        self._logger.debug("hints_invalidated", extra={"reason": "acting_player_changed", "player_id": player_id})

    def add_trial_clue(self, clue: Clue) -> None:
        self._state.trial_clues.append(clue)
        self._refresh_overlay()

    def remove_trial_clue(self, index: int) -> Clue:
        clue = self._state.trial_clues.pop(index)
        self._refresh_overlay()
        return clue

    def deduced_clues(self, player_id: int) -> list[Clue]:
        """Candidate clues for ``player_id`` under the current answers."""
        self._players.get(player_id)
        return self._deduced_by_player()[player_id]

    def candidate_counts(self) -> dict[int, int]:
        return {player_id: len(clues) for player_id, clues in self._deduced_by_player().items()}

    def possible_positions(self) -> list[Hex]:
        return [tile.position for tile in self._board if tile.possible]

    def refresh(self) -> int:
        """Recompute candidate clues and the overlay; return the remaining tile count."""
        self._deduced = None
        return self._refresh_overlay()

    def compute_hints(self) -> HintReport:
        """Run the hint engine for every opponent and, if set, the acting player."""
        acting = self._state.acting_player
        with_inverted = self._state.with_inverted
        report = HintReport(acting_player=acting)
        for player_id in self._players.ids:
            if player_id == acting:
                continue
            report.questions[player_id] = best_question(self._board, player_id, with_inverted)
        if acting is not None:
            report.quiet = quietest_tile(self._board, acting, with_inverted)

        self._hints = report
        self._logger.info(
            "hints_computed",
            extra={
                "acting_player": acting,
                "opponents": len(report.questions),
                "with_inverted": with_inverted,
            },
        )
        return report

    def _deduced_by_player(self) -> dict[int, list[Clue]]:
        if self._deduced is None:
            self._deduced = {
                player_id: clues_for_player(self._board, player_id, self._state.with_inverted)
                for player_id in self._players.ids
            }
            self._logger.debug("deduced_clues_recomputed", extra={"players": len(self._deduced)})
        return self._deduced

    def _refresh_overlay(self) -> int:
        self._remaining = recompute_possible(
            self._board,
            self._players.ids,
            self._state.known_clues,
            self._state.is_known,
            self._deduced_by_player(),
            self._state.trial_clues,
        )
        return self._remaining

    def _invalidate(self, reason: str, **details: object) -> None:
        self._hints = None
        self._logger.debug("deductions_invalidated", extra={"reason": reason, **details})
        self.refresh()

    def _tile(self, position: Hex) -> Tile:
        tile = self._board.get(position)
        if tile is None:
            raise KeyError(f"No tile at {position}")
        return tile
