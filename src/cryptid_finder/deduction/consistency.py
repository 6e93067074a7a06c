"""Narrow the clue catalog down to the clues a player's answers still allow."""

from __future__ import annotations

from cryptid_finder.deduction.clues import Clue, catalog_for, clue_applies
from cryptid_finder.models import Answer
from cryptid_finder.world.board import HexMap


def clues_for_player(board: HexMap, player_id: int, with_inverted: bool) -> list[Clue]:
    """Return the catalog clues not contradicted by any of the player's answers.

    A ``Yes`` answer requires the clue to apply on that tile, a ``No`` answer
    requires it not to. Output keeps catalog order; without answers the whole
    catalog is returned.
    """
    answered = [
        (tile.position, tile.answer_for(player_id) is Answer.YES)
        for tile in board
        if tile.answer_for(player_id) is not Answer.UNKNOWN
    ]
    return [
        clue
        for clue in catalog_for(board, with_inverted)
        if all(clue_applies(clue, position, board) == expected for position, expected in answered)
    ]
