"""Axial hex coordinates for a flat-topped hex grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True, order=True)
class Hex:
    """A cell in an axial hex grid. ``s`` is derived so that ``q + r + s == 0``."""

    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def __add__(self, other: Hex) -> Hex:
        return Hex(self.q + other.q, self.r + other.r)

    def __sub__(self, other: Hex) -> Hex:
        return Hex(self.q - other.q, self.r - other.r)

    def __neg__(self) -> Hex:
        return Hex(-self.q, -self.r)

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"

    def distance_to(self, other: Hex) -> int:
        """Number of steps between two cells."""
        delta = self - other
        return max(abs(delta.q), abs(delta.r), abs(delta.s))

    def neighbors(self) -> list[Hex]:
        return [self + direction for direction in DIRECTIONS]

    def within(self, radius: int) -> Iterator[Hex]:
        """Yield every cell at distance ``<= radius``, the center included."""
        if radius < 0:
            raise ValueError(f"Radius must not be negative: {radius}")
        for dq in range(-radius, radius + 1):
            r_min = max(-radius, -dq - radius)
            r_max = min(radius, -dq + radius)
            for dr in range(r_min, r_max + 1):
                yield Hex(self.q + dq, self.r + dr)

    @classmethod
    def from_offset(cls, col: int, row: int) -> Hex:
        """Convert odd-column offset coordinates (odd columns shoved down)."""
        return cls(col, row - (col - (col & 1)) // 2)

    def to_offset(self) -> tuple[int, int]:
        return self.q, self.r + (self.q - (self.q & 1)) // 2


ORIGIN = Hex(0, 0)

DIRECTIONS: tuple[Hex, ...] = (
    Hex(1, 0),
    Hex(1, -1),
    Hex(0, -1),
    Hex(-1, 0),
    Hex(-1, 1),
    Hex(0, 1),
)
