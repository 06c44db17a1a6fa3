"""Unit tests for /src/dots/line.py"""

import pytest

from src.core.exceptions import InvalidNotationError, LineAlreadyClaimedError
from src.core.shared_types import Orientation
from src.dots.coordinate import Coordinate
from src.dots.line import Line, LineKey


@pytest.mark.parametrize(
    "notation, key",
    [
        ("h0,0", LineKey(Orientation.HORIZONTAL, 0, 0)),
        ("v3,1", LineKey(Orientation.VERTICAL, 3, 1)),
        ("h12,40", LineKey(Orientation.HORIZONTAL, 12, 40)),
        (" v1,2 ", LineKey(Orientation.VERTICAL, 1, 2)),  # surrounding whitespace gets stripped
    ],
)
def test_key_from_notation(notation: str, key: LineKey) -> None:
    assert LineKey.from_notation(notation) == key


@pytest.mark.parametrize("notation", ["h0,0", "v3,1", "h12,40"])
def test_key_to_notation(notation: str) -> None:
    assert LineKey.from_notation(notation).to_notation() == notation


@pytest.mark.parametrize(
    "notation",
    [
        "x0,0",  # unknown orientation
        "h0",  # missing y
        "h-1,0",  # negative
        "H0,0",  # orientation is lower case
        "v\u0661,0",  # arabic-indic digit one
        "",
    ],
)
def test_invalid_notation(notation: str) -> None:
    with pytest.raises(InvalidNotationError):
        LineKey.from_notation(notation)


def test_horizontal_line_neighbors() -> None:
    """A horizontal line separates a box from the box below it"""
    line = Line(LineKey(Orientation.HORIZONTAL, 1, 2))
    assert line.boxes == (Coordinate(1, 2), Coordinate(1, 3))
    assert line.upper_box == Coordinate(1, 2)
    assert line.lower_box == Coordinate(1, 3)
    assert line.left_box is None
    assert line.right_box is None


def test_vertical_line_neighbors() -> None:
    """A vertical line separates a box from the box to its right"""
    line = Line(LineKey(Orientation.VERTICAL, 1, 2))
    assert line.boxes == (Coordinate(1, 2), Coordinate(2, 2))
    assert line.left_box == Coordinate(1, 2)
    assert line.right_box == Coordinate(2, 2)
    assert line.upper_box is None
    assert line.lower_box is None


def test_new_line_has_no_owner() -> None:
    line = Line(LineKey(Orientation.VERTICAL, 0, 0))
    assert line.owner is None
    assert not line.is_owned


def test_claim_line() -> None:
    line = Line(LineKey(Orientation.VERTICAL, 0, 0))
    line._claim("Dotty")
    assert line.owner == "Dotty"
    assert line.is_owned


def test_claim_twice() -> None:
    """Owner is written once. A second claim fails and the first owner stays."""
    line = Line(LineKey(Orientation.VERTICAL, 0, 0))
    line._claim("Dotty")
    with pytest.raises(LineAlreadyClaimedError):
        line._claim("Boxer")
    assert line.owner == "Dotty"


def test_lines_compare_by_identity() -> None:
    """Two lines with the same key are still two different lines"""
    key = LineKey(Orientation.HORIZONTAL, 0, 0)
    first = Line(key)
    second = Line(key)
    assert first != second
    assert first == first
    assert len({first, second}) == 2


def test_owner_is_read_only() -> None:
    line = Line(LineKey(Orientation.HORIZONTAL, 0, 0))
    with pytest.raises(AttributeError):
        line.owner = "sneaky"  # type: ignore[misc]


def test_no_public_way_to_set_the_owner() -> None:
    """Only the Board claims lines, so it can keep its unowned lines / open boxes up to date"""
    line = Line(LineKey(Orientation.VERTICAL, 0, 0))
    public_names = [name for name in dir(line) if not name.startswith("_")]
    assert "claim" not in public_names
    assert "set_owner" not in public_names
