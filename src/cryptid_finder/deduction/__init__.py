"""Clue catalog, clue evaluation and the per-player/overlay deductions built on them."""

from .clues import (
    AnimalClue,
    Clue,
    ClueKind,
    ClueParseError,
    EitherAnimalClue,
    StructureColorClue,
    StructureKindClue,
    TerrainClue,
    TwoTerrainsClue,
    all_clues,
    catalog_for,
    clue_applies,
    parse_clue,
)
from .consistency import clues_for_player
from .overlay import recompute_possible

__all__ = [
    "AnimalClue",
    "Clue",
    "ClueKind",
    "ClueParseError",
    "EitherAnimalClue",
    "StructureColorClue",
    "StructureKindClue",
    "TerrainClue",
    "TwoTerrainsClue",
    "all_clues",
    "catalog_for",
    "clue_applies",
    "clues_for_player",
    "parse_clue",
    "recompute_possible",
]
