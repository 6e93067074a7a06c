from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from cryptid_finder.world.hexgrid import Hex


class Terrain(str, Enum):
    DESERT = "desert"
    FOREST = "forest"
    WATER = "water"
    SWAMP = "swamp"
    MOUNTAIN = "mountain"

    def __str__(self) -> str:
        return self.value.title()


class Animal(str, Enum):
    BEAR = "bear"
    COUGAR = "cougar"

    def __str__(self) -> str:
        return self.value.title()


class StructureKind(str, Enum):
    SHACK = "shack"
    STONE = "stone"

    def __str__(self) -> str:
        return self.value.title()


class StructureColor(str, Enum):
    WHITE = "white"
    GREEN = "green"
    BLUE = "blue"
    BLACK = "black"

    def __str__(self) -> str:
        return self.value.title()


class Answer(str, Enum):
    """Whether a player says the creature could be on a tile."""

    UNKNOWN = "unknown"
    YES = "yes"
    NO = "no"

    def __str__(self) -> str:
        return self.value.title()


@dataclass(frozen=True, slots=True)
class Structure:
    kind: StructureKind
    color: StructureColor

    def __str__(self) -> str:
        return f"{self.color} {self.kind}"


@dataclass(slots=True)
class Tile:
    """A single hexagon of the assembled map.

    ``position``, ``terrain``, ``animal`` and ``structure`` are fixed once the map
    is built. ``answers`` changes during play and ``possible`` is derived output
    of the overlay computation.
    """

    position: Hex
    terrain: Terrain
    animal: Animal | None = None
    structure: Structure | None = None
    answers: dict[int, Answer] = field(default_factory=dict)
    possible: bool = True

    def answer_for(self, player_id: int) -> Answer:
        return self.answers.get(player_id, Answer.UNKNOWN)

    def set_answer(self, player_id: int, answer: Answer) -> None:
        if answer is Answer.UNKNOWN:
            self.answers.pop(player_id, None)
        else:
            self.answers[player_id] = answer
        self.answers = dict(sorted(self.answers.items()))


@dataclass(frozen=True, slots=True)
class Player:
    id: int
    name: str


class UnknownPlayerError(KeyError):
    """Raised when a player id or name is not part of the current roster."""


class PlayerList:
    """Stable roster of the players in a round, ordered by id."""

    def __init__(self, players: list[Player] | None = None) -> None:
        self._players: dict[int, Player] = {}
        for player in sorted(players or [], key=lambda p: p.id):
            if player.id in self._players:
                raise ValueError(f"Duplicate player id: {player.id}")
            self._players[player.id] = player

    def __iter__(self):
        return iter(self._players.values())

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    @property
    def ids(self) -> list[int]:
        return list(self._players)

    def get(self, player_id: int) -> Player:
        if player_id not in self._players:
            raise UnknownPlayerError(f"Unknown player id: {player_id}")
        return self._players[player_id]

    def by_name(self, name: str) -> Player:
        wanted = name.strip().lower()
        for player in self._players.values():
            if player.name.lower() == wanted:
                return player
        raise UnknownPlayerError(f"Unknown player name: {name}")

    def resolve(self, reference: str | int) -> Player:
        """Look a player up by id, or by name when the reference is not numeric."""
        if isinstance(reference, int):
            return self.get(reference)
        if reference.strip().lstrip("-").isdigit():
            return self.get(int(reference))
        return self.by_name(reference)
