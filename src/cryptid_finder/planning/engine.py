"""Pick which unanswered tile to ask about next.

Both hints simulate an answer on every unanswered tile and recount the player's
candidate clues. The simulated answer is always written through
:func:`hypothetical_answer`, so the board is back in its original state when a
hint function returns or raises.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from cryptid_finder.deduction.consistency import clues_for_player
from cryptid_finder.models import Answer, Tile
from cryptid_finder.world.board import HexMap
from cryptid_finder.world.hexgrid import Hex

logger = logging.getLogger("cryptid_finder.planning")


@dataclass(slots=True)
class QuestionHint:
    """Tiles that split an opponent's candidate clues most evenly.

    ``low``/``high`` are the smaller and larger number of clues eliminated by the
    two possible answers on the first listed tile.
    """

    tiles: list[Hex] = field(default_factory=list)
    low: int = 0
    high: int = 0
    candidates: int = 0


@dataclass(slots=True)
class QuietTileHint:
    """Tiles where answering "no" eliminates the fewest of your own candidate clues."""

    tiles: list[Hex] = field(default_factory=list)
    diff: int = 0
    candidates: int = 0


@contextmanager
def hypothetical_answer(tile: Tile, player_id: int, answer: Answer) -> Iterator[Tile]:
    """Temporarily set one player's answer on a tile, restoring the prior answer on exit."""
    prior = tile.answer_for(player_id)
    tile.set_answer(player_id, answer)
    try:
        yield tile
    finally:
        tile.set_answer(player_id, prior)


def _candidate_count(board: HexMap, player_id: int, with_inverted: bool) -> int:
    return len(clues_for_player(board, player_id, with_inverted))


def best_question(board: HexMap, player_id: int, with_inverted: bool) -> QuestionHint | None:
    """Find the unanswered tiles whose yes/no answers eliminate the most similar number of clues.

    Returns None when the player has fewer than two candidate clues or no
    unanswered tile is left.
    """
    before = _candidate_count(board, player_id, with_inverted)
    if before < 2:
        return None

    best: QuestionHint | None = None
    best_balance: int | None = None
    for tile in board:
        if tile.answer_for(player_id) is not Answer.UNKNOWN:
            continue

        with hypothetical_answer(tile, player_id, Answer.YES):
            yes_count = _candidate_count(board, player_id, with_inverted)
        with hypothetical_answer(tile, player_id, Answer.NO):
            no_count = _candidate_count(board, player_id, with_inverted)

        gain_yes = abs(before - yes_count)
        gain_no = abs(before - no_count)
        balance = abs(gain_yes - gain_no)

        if best is None or best_balance is None or balance < best_balance:
            best_balance = balance
            best = QuestionHint(
                tiles=[tile.position],
                low=min(gain_yes, gain_no),
                high=max(gain_yes, gain_no),
                candidates=before,
            )
        elif balance == best_balance:
            best.tiles.append(tile.position)

    logger.debug(
        "best_question_evaluated",
        extra={"player_id": player_id, "candidates": before, "tiles": len(best.tiles) if best else 0},
    )
    return best


def quietest_tile(board: HexMap, player_id: int, with_inverted: bool) -> QuietTileHint | None:
    """Find the unanswered tiles where a "no" reveals the least about the player's own clue.

    ``diff == 0`` means the answer eliminates none of the player's candidate
    clues. Returns None when no unanswered tile is left.
    """
    before = _candidate_count(board, player_id, with_inverted)

    best: QuietTileHint | None = None
    for tile in board:
        if tile.answer_for(player_id) is not Answer.UNKNOWN:
            continue

        with hypothetical_answer(tile, player_id, Answer.NO):
            diff = abs(before - _candidate_count(board, player_id, with_inverted))

        if best is None or diff < best.diff:
            best = QuietTileHint(tiles=[tile.position], diff=diff, candidates=before)
        elif diff == best.diff:
            best.tiles.append(tile.position)

    logger.debug(
        "quietest_tile_evaluated",
        extra={"player_id": player_id, "candidates": before, "tiles": len(best.tiles) if best else 0},
    )
    return best
