"""Clue kinds, the clue catalog and the spatial rule behind each clue."""

from __future__ import annotations

import itertools
import re
from dataclasses import dataclass
from typing import Iterable, Union

from cryptid_finder.models import Animal, StructureColor, StructureKind, Terrain
from cryptid_finder.world.board import HexMap
from cryptid_finder.world.hexgrid import Hex


class ClueParseError(ValueError):
    """Raised when a clue token cannot be understood."""


@dataclass(frozen=True, slots=True)
class TerrainClue:
    """Within one space of the terrain."""

    terrain: Terrain


@dataclass(frozen=True, slots=True)
class TwoTerrainsClue:
    """On one of two terrains. The pair is unordered and stored in declaration order."""

    first: Terrain
    second: Terrain

    def __post_init__(self) -> None:
        order = list(Terrain)
        if order.index(self.second) < order.index(self.first):
            first, second = self.second, self.first
            object.__setattr__(self, "first", first)
            object.__setattr__(self, "second", second)


@dataclass(frozen=True, slots=True)
class EitherAnimalClue:
    """Within one space of either animal territory."""


@dataclass(frozen=True, slots=True)
class AnimalClue:
    """Within two spaces of the animal territory."""

    animal: Animal


@dataclass(frozen=True, slots=True)
class StructureKindClue:
    """Within two spaces of a structure of this kind."""

    kind: StructureKind


@dataclass(frozen=True, slots=True)
class StructureColorClue:
    """Within three spaces of a structure of this color."""

    color: StructureColor


ClueKind = Union[
    TerrainClue,
    TwoTerrainsClue,
    EitherAnimalClue,
    AnimalClue,
    StructureKindClue,
    StructureColorClue,
]

CLUE_RADIUS: dict[type, int] = {
    TerrainClue: 1,
    TwoTerrainsClue: 0,
    EitherAnimalClue: 1,
    AnimalClue: 2,
    StructureKindClue: 2,
    StructureColorClue: 3,
}


@dataclass(frozen=True, slots=True)
class Clue:
    kind: ClueKind
    inverted: bool = False

    def inverse(self) -> Clue:
        return Clue(self.kind, not self.inverted)

    def __str__(self) -> str:
        text = describe(self.kind)
        return f"Not: {text}" if self.inverted else text

    def token(self) -> str:
        """Compact form accepted by :func:`parse_clue`."""
        match self.kind:
            case TerrainClue(terrain=terrain):
                body = f"terrain:{terrain.value}"
            case TwoTerrainsClue(first=first, second=second):
                body = f"two-terrains:{first.value},{second.value}"
            case EitherAnimalClue():
                body = "either-animal"
            case AnimalClue(animal=animal):
                body = f"animal:{animal.value}"
            case StructureKindClue(kind=kind):
                body = f"structure-kind:{kind.value}"
            case StructureColorClue(color=color):
                body = f"structure-color:{color.value}"
            case _:
                raise TypeError(f"Unsupported clue kind: {self.kind!r}")
        return f"not {body}" if self.inverted else body


def describe(kind: ClueKind) -> str:
    match kind:
        case TerrainClue(terrain=terrain):
            return f"Within one space of {terrain}"
        case TwoTerrainsClue(first=first, second=second):
            return f"On {first} or {second}"
        case EitherAnimalClue():
            return "Within one space of either animal"
        case AnimalClue(animal=animal):
            return f"Within two spaces of {animal} territory"
        case StructureKindClue(kind=structure_kind):
            return f"Within two spaces of a {structure_kind}"
        case StructureColorClue(color=color):
            return f"Within three spaces of a {color} structure"
    raise TypeError(f"Unsupported clue kind: {kind!r}")


def all_clues(
    structure_kinds: Iterable[StructureKind],
    structure_colors: Iterable[StructureColor],
    with_inverted: bool,
) -> list[Clue]:
    """Enumerate every clue that can be offered for the given structures.

    Base clues come first in a fixed order; with ``with_inverted`` the same
    sequence is repeated with every clue inverted.
    """
    kinds: list[ClueKind] = [TerrainClue(terrain) for terrain in Terrain]
    kinds.extend(TwoTerrainsClue(a, b) for a, b in itertools.combinations(Terrain, 2))
    kinds.append(EitherAnimalClue())
    kinds.extend(AnimalClue(animal) for animal in Animal)
    present_kinds = set(structure_kinds)
    kinds.extend(StructureKindClue(kind) for kind in StructureKind if kind in present_kinds)
    present_colors = set(structure_colors)
    kinds.extend(StructureColorClue(color) for color in StructureColor if color in present_colors)

    clues = [Clue(kind) for kind in kinds]
    if with_inverted:
        clues.extend(Clue(kind, inverted=True) for kind in kinds)
    return clues


def catalog_for(board: HexMap, with_inverted: bool) -> list[Clue]:
    return all_clues(board.structure_kinds(), board.structure_colors(), with_inverted)


def clue_applies(clue: Clue, position: Hex, board: HexMap) -> bool:
    """Evaluate ``clue`` at ``position`` against the static layout of ``board``.

    Only terrain, animals and structures are read; answers never influence the result.
    """
    radius = CLUE_RADIUS[type(clue.kind)]
    match clue.kind:
        case TerrainClue(terrain=terrain):
            found = board.any_within(position, radius, lambda tile: tile.terrain is terrain)
        case TwoTerrainsClue(first=first, second=second):
            # Only the tile itself counts, never its neighbours.
            tile = board.get(position)
            found = tile is not None and tile.terrain in (first, second)
        case EitherAnimalClue():
            found = board.any_within(position, radius, lambda tile: tile.animal is not None)
        case AnimalClue(animal=animal):
            found = board.any_within(position, radius, lambda tile: tile.animal is animal)
        case StructureKindClue(kind=kind):
            found = board.any_within(
                position,
                radius,
                lambda tile: tile.structure is not None and tile.structure.kind is kind,
            )
        case StructureColorClue(color=color):
            found = board.any_within(
                position,
                radius,
                lambda tile: tile.structure is not None and tile.structure.color is color,
            )
        case _:
            raise TypeError(f"Unsupported clue kind: {clue.kind!r}")
    return found != clue.inverted


_TOKEN_RE = re.compile(r"^(?P<negated>not\s+)?(?P<name>[a-z-]+)(?:\s*:\s*(?P<args>.+))?$", re.IGNORECASE)


def _enum_arg(enum_type, raw: str, token: str):
    try:
        return enum_type(raw.strip().lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_type)
        raise ClueParseError(
            f"Unknown {enum_type.__name__.lower()} {raw.strip()!r} in {token!r} (expected one of {choices})"
        ) from None


def parse_clue(token: str) -> Clue:
    """Parse the compact clue form, e.g. ``terrain:forest`` or ``not animal:bear``."""
    text = " ".join(token.strip().split())
    match = _TOKEN_RE.match(text)
    if not match:
        raise ClueParseError(f"Malformed clue: {token!r}")

    name = match.group("name").lower()
    args = [part for part in (match.group("args") or "").split(",") if part.strip()]
    inverted = match.group("negated") is not None

    expected_args = {
        "terrain": 1,
        "two-terrains": 2,
        "either-animal": 0,
        "animal": 1,
        "structure-kind": 1,
        "structure-color": 1,
    }
    if name not in expected_args:
        raise ClueParseError(f"Unknown clue type {name!r} in {token!r}")
    if len(args) != expected_args[name]:
        raise ClueParseError(
            f"Clue type {name!r} takes {expected_args[name]} argument(s), got {len(args)} in {token!r}"
        )

    kind: ClueKind
    if name == "terrain":
        kind = TerrainClue(_enum_arg(Terrain, args[0], token))
    elif name == "two-terrains":
        kind = TwoTerrainsClue(_enum_arg(Terrain, args[0], token), _enum_arg(Terrain, args[1], token))
    elif name == "either-animal":
        kind = EitherAnimalClue()
    elif name == "animal":
        kind = AnimalClue(_enum_arg(Animal, args[0], token))
    elif name == "structure-kind":
        kind = StructureKindClue(_enum_arg(StructureKind, args[0], token))
    else:
        kind = StructureColorClue(_enum_arg(StructureColor, args[0], token))
    return Clue(kind, inverted=inverted)
