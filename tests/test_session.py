from __future__ import annotations

import pytest

from cryptid_finder.deduction.clues import Clue, TerrainClue, TwoTerrainsClue
from cryptid_finder.models import Animal, Answer, Player, PlayerList, Terrain, Tile, UnknownPlayerError
from cryptid_finder.session import DeductionSession
from cryptid_finder.world.board import HexMap
from cryptid_finder.world.hexgrid import ORIGIN, Hex


def _session(**kwargs) -> DeductionSession:
    terrains = [Terrain.DESERT, Terrain.FOREST, Terrain.WATER, Terrain.SWAMP, Terrain.MOUNTAIN, Terrain.WATER]
    tiles = [Tile(position=ORIGIN, terrain=Terrain.FOREST, animal=Animal.BEAR)]
    tiles.extend(Tile(position=position, terrain=terrain) for position, terrain in zip(ORIGIN.neighbors(), terrains))
    tiles.append(Tile(position=Hex(3, 0), terrain=Terrain.DESERT))
    players = PlayerList([Player(2, "Bob"), Player(1, "Alice"), Player(3, "Cleo")])
    return DeductionSession(board=HexMap(tiles), players=players, **kwargs)


def test_session_starts_with_full_catalog_and_open_map() -> None:
    session = _session()

    assert session.players.ids == [1, 2, 3]
    assert session.candidate_counts() == {1: 18, 2: 18, 3: 18}
    assert session.remaining_tiles == len(session.board)
    assert session.hints is None


def test_answers_narrow_candidates_and_overlay() -> None:
    session = _session()

    session.set_answer(Hex(3, 0), 1, Answer.YES)

    alice = session.deduced_clues(1)
    assert len(alice) < 18
    assert Clue(TwoTerrainsClue(Terrain.WATER, Terrain.SWAMP)) not in alice
    assert session.remaining_tiles == session.board.possible_count()


def test_known_clue_shrinks_overlay() -> None:
    session = _session()

    session.declare_known_clue(2, Clue(TwoTerrainsClue(Terrain.DESERT, Terrain.WATER)))

    assert session.state.is_known[2] is True
    assert sorted(session.possible_positions()) == sorted(
        tile.position for tile in session.board if tile.terrain in (Terrain.DESERT, Terrain.WATER)
    )

    session.clear_known_clue(2)
    assert session.remaining_tiles == len(session.board)


def test_with_inverted_doubles_the_catalog() -> None:
    session = _session()

    session.set_with_inverted(True)

    assert session.candidate_counts()[1] == 36


def test_hints_are_dropped_when_any_input_changes() -> None:
    session = _session(acting_player=3)

    report = session.compute_hints()
    assert session.hints is report
    assert set(report.questions) == {1, 2}
    assert report.quiet is not None

    session.set_answer(ORIGIN, 1, Answer.NO)
    assert session.hints is None

    session.compute_hints()
    session.declare_known_clue(1, Clue(TerrainClue(Terrain.DESERT)))
    assert session.hints is None

    session.compute_hints()
    session.set_with_inverted(True)
    assert session.hints is None

    session.compute_hints()
    session.set_acting_player(1)
    assert session.hints is None
    assert session.compute_hints().acting_player == 1


def test_report_without_useful_hint_is_not_stale() -> None:
    session = _session()
    for tile in session.board:
        for player_id in session.players.ids:
            session.set_answer(tile.position, player_id, Answer.NO)

    report = session.compute_hints()

    assert session.hints is not None
    assert report.questions == {1: None, 2: None, 3: None}
    assert report.quiet is None


def test_trial_clues_only_touch_the_overlay() -> None:
    session = _session()
    session.compute_hints()

    session.add_trial_clue(Clue(TwoTerrainsClue(Terrain.FOREST, Terrain.SWAMP)))

    assert session.remaining_tiles == 3
    assert session.candidate_counts()[1] == 18
    assert session.hints is not None

    session.remove_trial_clue(0)
    assert session.remaining_tiles == len(session.board)


def test_unknown_players_fail_fast() -> None:
    session = _session()

    with pytest.raises(UnknownPlayerError):
        session.set_answer(ORIGIN, 7, Answer.YES)
    with pytest.raises(UnknownPlayerError):
        session.deduced_clues(7)
    with pytest.raises(UnknownPlayerError):
        session.declare_known_clue(7, Clue(TerrainClue(Terrain.WATER)))
    with pytest.raises(UnknownPlayerError):
        _session(acting_player=7)


def test_answer_for_missing_tile_is_rejected() -> None:
    session = _session()

    with pytest.raises(KeyError):
        session.set_answer(Hex(9, 9), 1, Answer.YES)


def test_player_lookup_by_name_or_id() -> None:
    players = PlayerList([Player(1, "Alice"), Player(2, "Bob")])

    assert players.resolve("bob").id == 2
    assert players.resolve("1").name == "Alice"
    assert players.resolve(2).name == "Bob"
    with pytest.raises(UnknownPlayerError):
        players.resolve("Zed")
    with pytest.raises(ValueError):
        PlayerList([Player(1, "Alice"), Player(1, "Again")])
