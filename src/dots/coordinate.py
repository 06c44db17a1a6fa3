"""
Position of a box on the grid

(placed in its own module as the box, line and board modules all need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.shared_types import Side

# (dx, dy) per side. y grows downwards: row 0 is the top row of the board.
SIDE_OFFSETS: dict[Side, tuple[int, int]] = {
    Side.TOP: (0, -1),
    Side.BOTTOM: (0, 1),
    Side.LEFT: (-1, 0),
    Side.RIGHT: (1, 0),
}

OPPOSITE_SIDE: dict[Side, Side] = {
    Side.TOP: Side.BOTTOM,
    Side.BOTTOM: Side.TOP,
    Side.LEFT: Side.RIGHT,
    Side.RIGHT: Side.LEFT,
}


@dataclass(frozen=True)
class Coordinate:
    x: int
    y: int

    def neighbor(self, side: Side) -> Coordinate:
        """The coordinate next to this one. Might be off the board, check with is_within_bounds()."""
        dx, dy = SIDE_OFFSETS[side]
        return Coordinate(self.x + dx, self.y + dy)

    def is_within_bounds(self, width: int, height: int) -> bool:
        return (0 <= self.x < width) and (0 <= self.y < height)

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)
