"""Tile storage addressable by hex coordinate."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator

from cryptid_finder.models import StructureColor, StructureKind, Tile
from cryptid_finder.world.hexgrid import Hex


class HexMap:
    """Ordered tile sequence with lookup by position.

    Positions are assumed unique; the map construction step is responsible for
    that. Off-map positions simply have no tile.
    """

    def __init__(self, tiles: Iterable[Tile] = ()) -> None:
        self._tiles: list[Tile] = list(tiles)
        self._by_position: dict[Hex, Tile] = {tile.position: tile for tile in self._tiles}

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, position: object) -> bool:
        return position in self._by_position

    def get(self, position: Hex) -> Tile | None:
        return self._by_position.get(position)

    def any_within(self, center: Hex, radius: int, predicate: Callable[[Tile], bool]) -> bool:
        """Return True if any tile at distance ``<= radius`` from ``center`` satisfies ``predicate``.

        Radius 0 checks only the center. The center itself does not need a tile.
        """
        for position in center.within(radius):
            tile = self._by_position.get(position)
            if tile is not None and predicate(tile):
                return True
        return False

    def structure_kinds(self) -> list[StructureKind]:
        """Structure kinds present on the map, in declaration order."""
        present = {tile.structure.kind for tile in self._tiles if tile.structure is not None}
        return [kind for kind in StructureKind if kind in present]

    def structure_colors(self) -> list[StructureColor]:
        """Structure colors present on the map, in declaration order."""
        present = {tile.structure.color for tile in self._tiles if tile.structure is not None}
        return [color for color in StructureColor if color in present]

    def possible_count(self) -> int:
        return sum(1 for tile in self._tiles if tile.possible)
