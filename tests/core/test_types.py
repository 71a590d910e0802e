"""Tests for coordinate helpers."""

import pytest

from chez.core.types import (
    Coordinate,
    all_coordinates,
    chebyshev_distance,
    in_bounds,
    out_of_bounds,
    parse_square,
    square_name,
)


class TestBounds:
    @pytest.mark.parametrize("value", [0, 3, 7])
    def test_inside(self, value: int) -> None:
        assert not out_of_bounds(value)

    @pytest.mark.parametrize("value", [-1, 8, 100])
    def test_outside(self, value: int) -> None:
        assert out_of_bounds(value)

    def test_in_bounds_needs_both_axes(self) -> None:
        assert in_bounds(0, 7)
        assert not in_bounds(8, 0)
        assert not in_bounds(0, -1)


class TestSquareNames:
    def test_top_left_is_a8(self) -> None:
        assert square_name(Coordinate(0, 0)) == "a8"

    def test_bottom_right_is_h1(self) -> None:
        assert square_name(Coordinate(7, 7)) == "h1"

    def test_parse(self) -> None:
        assert parse_square("e4") == Coordinate(4, 4)
        assert parse_square("a1") == Coordinate(7, 0)

    def test_every_name_round_trips(self) -> None:
        for coord in all_coordinates():
            assert parse_square(square_name(coord)) == coord

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "a0", "e44"])
    def test_invalid_name(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)

    def test_str(self) -> None:
        assert str(Coordinate(6, 4)) == "e2"


class TestDistance:
    def test_chebyshev(self) -> None:
        assert chebyshev_distance(Coordinate(4, 4), Coordinate(5, 5)) == 1
        assert chebyshev_distance(Coordinate(4, 4), Coordinate(2, 5)) == 2
        assert chebyshev_distance(Coordinate(0, 0), Coordinate(7, 7)) == 7

    def test_all_coordinates_row_major(self) -> None:
        coords = all_coordinates()
        assert len(coords) == 64
        assert coords[0] == Coordinate(0, 0)
        assert coords[1] == Coordinate(0, 1)
        assert coords[-1] == Coordinate(7, 7)
