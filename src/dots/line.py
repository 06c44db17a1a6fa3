"""A line is the edge shared between two neighboring boxes. Players take turns claiming them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from src.core.exceptions import InvalidNotationError, LineAlreadyClaimedError
from src.core.shared_types import Orientation, PlayerName, Side
from src.dots.coordinate import Coordinate

# 'h2,0' = horizontal line below box (2, 0). 'v0,3' = vertical line right of box (0, 3)
LINE_NOTATION = re.compile(r"^(?P<orientation>[hv])(?P<x>[0-9]+),(?P<y>[0-9]+)$")


@dataclass(frozen=True)
class LineKey:
    """
    Identifies a line by the box it was created from during generation.

    Generation only ever creates the line *below* a box (HORIZONTAL) or to the *right* of a box (VERTICAL),
    so (orientation, x, y) of that first box is unique per line.
    """

    orientation: Orientation
    x: int
    y: int

    @classmethod
    def from_notation(cls, notation: str) -> LineKey:
        match = LINE_NOTATION.match(notation.strip())
        if match is None:
            raise InvalidNotationError(
                f"Cannot interpret {notation!r} as a line. Expected something like 'h0,1' or 'v2,0'."
            )
        return cls(
            Orientation(match["orientation"]), int(match["x"]), int(match["y"])
        )

    def to_notation(self) -> str:
        return f"{self.orientation.value}{self.x},{self.y}"

    def neighbors(self) -> tuple[Coordinate, Coordinate]:
        """Coordinates of the two boxes on either side: (upper, lower) or (left, right)"""
        first = Coordinate(self.x, self.y)
        side = Side.BOTTOM if self.orientation == Orientation.HORIZONTAL else Side.RIGHT
        return first, first.neighbor(side)


class Line:
    """
    Equality is identity: the board creates exactly one Line per shared edge and hands the same instance to both boxes.

    NOTE: the line refers to its boxes by coordinate only. The boxes hold the references to the line.
    """

    def __init__(self, key: LineKey) -> None:
        self._key = key
        self._owner: Optional[PlayerName] = None

    def __repr__(self) -> str:
        return f"Line({self.notation!r}, owner={self._owner!r})"

    @property
    def key(self) -> LineKey:
        return self._key

    @property
    def notation(self) -> str:
        return self._key.to_notation()

    @property
    def orientation(self) -> Orientation:
        return self._key.orientation

    @property
    def owner(self) -> Optional[PlayerName]:
        return self._owner

    @property
    def is_owned(self) -> bool:
        return self._owner is not None

    @property
    def boxes(self) -> tuple[Coordinate, Coordinate]:
        return self._key.neighbors()

    # Only one of the two pairs below is set, depending on the orientation
    @property
    def upper_box(self) -> Optional[Coordinate]:
        return self.boxes[0] if self.orientation == Orientation.HORIZONTAL else None

    @property
    def lower_box(self) -> Optional[Coordinate]:
        return self.boxes[1] if self.orientation == Orientation.HORIZONTAL else None

    @property
    def left_box(self) -> Optional[Coordinate]:
        return self.boxes[0] if self.orientation == Orientation.VERTICAL else None

    @property
    def right_box(self) -> Optional[Coordinate]:
        return self.boxes[1] if self.orientation == Orientation.VERTICAL else None

    def _claim(self, player: PlayerName) -> None:
        """Set the owner. Called by the Board, which also takes care of its bookkeeping."""
        if self._owner is not None:
            raise LineAlreadyClaimedError(
                f"Line {self.notation} was already claimed by {self._owner}."
            )
        self._owner = player
