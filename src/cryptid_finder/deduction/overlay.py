"""Combine every player's constraints into the per-tile ``possible`` flag."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Sequence

from cryptid_finder.deduction.clues import Clue, clue_applies
from cryptid_finder.world.board import HexMap

logger = logging.getLogger("cryptid_finder.deduction.overlay")


def recompute_possible(
    board: HexMap,
    players: Iterable[int],
    known_clues: Mapping[int, Clue],
    is_known: Mapping[int, bool],
    deduced_clues: Mapping[int, Sequence[Clue]],
    trial_clues: Sequence[Clue] = (),
) -> int:
    """Recompute ``possible`` for every tile from scratch and return how many remain.

    A tile stays possible only if, for every player, their declared clue applies
    there (when it is known) and at least one of their deduced candidates applies
    there. The deduced check runs for known players as well. Every trial clue must
    also apply.
    """
    player_ids = list(players)
    for tile in board:
        tile.possible = True

    for tile in board:
        position = tile.position
        for player_id in player_ids:
            if is_known.get(player_id, False):
                if not clue_applies(known_clues[player_id], position, board):
                    tile.possible = False
                    break
            if not any(clue_applies(clue, position, board) for clue in deduced_clues[player_id]):
                tile.possible = False
                break
        else:
            if not all(clue_applies(clue, position, board) for clue in trial_clues):
                tile.possible = False

    remaining = board.possible_count()
    logger.debug("overlay_recomputed", extra={"players": len(player_ids), "remaining_tiles": remaining})
    return remaining
