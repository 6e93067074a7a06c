"""Load a game snapshot (board, roster, answers, declared clues) from JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from cryptid_finder.deduction.clues import Clue, parse_clue
from cryptid_finder.models import (
    Animal,
    Answer,
    Player,
    PlayerList,
    Structure,
    StructureColor,
    StructureKind,
    Terrain,
    Tile,
)
from cryptid_finder.session import DeductionSession
from cryptid_finder.world.board import HexMap
from cryptid_finder.world.hexgrid import Hex


class SnapshotError(ValueError):
    """Raised when a snapshot document cannot be read or is inconsistent."""


class PlayerRecord(BaseModel):
    id: int
    name: str = Field(min_length=1)


class StructureRecord(BaseModel):
    kind: StructureKind
    color: StructureColor


class TileRecord(BaseModel):
    """One tile. Axial snapshots use ``q``/``r``, offset snapshots use ``col``/``row``."""

    q: int | None = None
    r: int | None = None
    col: int | None = None
    row: int | None = None
    terrain: Terrain
    animal: Animal | None = None
    structure: StructureRecord | None = None
    answers: dict[int, Answer] = Field(default_factory=dict)

    def position(self, coordinates: str) -> Hex:
        if coordinates == "offset":
            if self.col is None or self.row is None:
                raise ValueError("offset snapshots need 'col' and 'row' on every tile")
            return Hex.from_offset(self.col, self.row)
        if self.q is None or self.r is None:
            raise ValueError("axial snapshots need 'q' and 'r' on every tile")
        return Hex(self.q, self.r)


class GameSnapshot(BaseModel):
    coordinates: Literal["axial", "offset"] = "axial"
    players: list[PlayerRecord]
    tiles: list[TileRecord]
    known_clues: dict[int, str] = Field(default_factory=dict)
    trial_clues: list[str] = Field(default_factory=list)
    acting_player: int | None = None
    with_inverted: bool | None = None

    @field_validator("players")
    @classmethod
    def _unique_players(cls, players: list[PlayerRecord]) -> list[PlayerRecord]:
        ids = [player.id for player in players]
        if len(ids) != len(set(ids)):
            raise ValueError("player ids must be unique")
        return players

    @model_validator(mode="after")
    def _references_known_players(self) -> GameSnapshot:
        ids = {player.id for player in self.players}
        referenced = set(self.known_clues)
        for tile in self.tiles:
            referenced.update(tile.answers)
        if self.acting_player is not None:
            referenced.add(self.acting_player)
        unknown = sorted(referenced - ids)
        if unknown:
            raise ValueError(f"snapshot references players not in the roster: {unknown}")
        return self

    def build_board(self) -> HexMap:
        tiles: list[Tile] = []
        seen: set[Hex] = set()
        for record in self.tiles:
            position = record.position(self.coordinates)
            if position in seen:
                raise SnapshotError(f"Duplicate tile position {position}")
            seen.add(position)
            tile = Tile(
                position=position,
                terrain=record.terrain,
                animal=record.animal,
                structure=Structure(record.structure.kind, record.structure.color) if record.structure else None,
            )
            for player_id, answer in record.answers.items():
                tile.set_answer(player_id, answer)
            tiles.append(tile)
        return HexMap(tiles)

    def build_players(self) -> PlayerList:
        return PlayerList([Player(id=record.id, name=record.name) for record in self.players])

    def parsed_known_clues(self) -> dict[int, Clue]:
        return {player_id: parse_clue(token) for player_id, token in self.known_clues.items()}

    def parsed_trial_clues(self) -> list[Clue]:
        return [parse_clue(token) for token in self.trial_clues]


def parse_snapshot_text(text: str) -> GameSnapshot:
    try:
        return GameSnapshot.model_validate(json.loads(text))
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Snapshot is not valid JSON: {exc}") from exc
    except ValidationError as exc:
        raise SnapshotError(f"Invalid snapshot: {exc}") from exc


def load_snapshot(path: str | Path) -> GameSnapshot:
    target = Path(path).expanduser()
    if not target.exists():
        raise SnapshotError(f"Snapshot not found: {target}")
    return parse_snapshot_text(target.read_text(encoding="utf-8"))


def session_from_snapshot(snapshot: GameSnapshot, *, default_with_inverted: bool = False) -> DeductionSession:
    """Build a ready-to-query session, with overlay computed, from a snapshot."""
    try:
        board = snapshot.build_board()
        known = snapshot.parsed_known_clues()
        trial = snapshot.parsed_trial_clues()
    except SnapshotError:
        raise
    except ValueError as exc:
        # Clue tokens and tile coordinates are only checked while building.
        raise SnapshotError(str(exc)) from exc

    with_inverted = default_with_inverted if snapshot.with_inverted is None else snapshot.with_inverted
    session = DeductionSession(
        board=board,
        players=snapshot.build_players(),
        with_inverted=with_inverted,
        acting_player=snapshot.acting_player,
    )
    for player_id, clue in known.items():
        session.declare_known_clue(player_id, clue)
    for clue in trial:
        session.add_trial_clue(clue)
    return session
