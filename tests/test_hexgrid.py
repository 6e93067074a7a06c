from __future__ import annotations

import pytest

from cryptid_finder.world.hexgrid import DIRECTIONS, ORIGIN, Hex


def test_distance_is_symmetric_step_count() -> None:
    assert ORIGIN.distance_to(Hex(2, -1)) == 2
    assert Hex(2, -1).distance_to(ORIGIN) == 2
    assert Hex(3, -3).distance_to(ORIGIN) == 3
    assert Hex(-2, 5).distance_to(Hex(1, 1)) == 4
    assert Hex(4, 4).distance_to(Hex(4, 4)) == 0


def test_neighbors_are_six_distinct_cells_at_distance_one() -> None:
    center = Hex(2, -3)
    neighbors = center.neighbors()

    assert len(set(neighbors)) == 6
    assert all(center.distance_to(neighbor) == 1 for neighbor in neighbors)
    assert [neighbor - center for neighbor in neighbors] == list(DIRECTIONS)


@pytest.mark.parametrize("radius", [0, 1, 2, 3])
def test_within_covers_exactly_the_cells_in_radius(radius: int) -> None:
    center = Hex(1, 2)
    cells = list(center.within(radius))

    assert len(cells) == len(set(cells)) == 1 + 3 * radius * (radius + 1)
    assert center in cells
    assert all(center.distance_to(cell) <= radius for cell in cells)
    outside = [cell for cell in center.within(radius + 1) if cell not in cells]
    assert all(center.distance_to(cell) == radius + 1 for cell in outside)


def test_within_rejects_negative_radius() -> None:
    with pytest.raises(ValueError):
        list(ORIGIN.within(-1))


def test_odd_column_offset_conversion() -> None:
    assert Hex.from_offset(0, 0) == ORIGIN
    assert Hex.from_offset(1, 0) == Hex(1, 0)
    assert Hex.from_offset(2, 1) == Hex(2, 0)
    assert Hex.from_offset(3, 2) == Hex(3, 1)
    assert Hex.from_offset(3, 2).to_offset() == (3, 2)
    assert Hex.from_offset(11, 8).to_offset() == (11, 8)
    # Odd columns sit half a row lower than their even neighbours.
    assert Hex.from_offset(0, 0).distance_to(Hex.from_offset(1, 0)) == 1
    assert Hex.from_offset(0, 0).distance_to(Hex.from_offset(1, 1)) == 2


def test_hex_arithmetic_and_text() -> None:
    assert Hex(1, 2) + Hex(-3, 1) == Hex(-2, 3)
    assert Hex(1, 2) - Hex(1, 2) == ORIGIN
    assert -Hex(1, -2) == Hex(-1, 2)
    assert Hex(1, 2).s == -3
    assert str(Hex(2, -1)) == "(2, -1)"
