"""A box (cell) of the grid. It gets an owner once all of its lines have been claimed."""

from __future__ import annotations

from typing import Optional

from src.core.exceptions import BoxAlreadyOwnedError
from src.core.shared_types import PlayerName, Side
from src.dots.coordinate import Coordinate
from src.dots.line import Line


class Box:
    def __init__(self, coordinate: Coordinate) -> None:
        self._coordinate = coordinate
        self._lines: dict[Side, Line] = {}
        self._owner: Optional[PlayerName] = None

    def __repr__(self) -> str:
        return f"Box(x={self.x}, y={self.y}, owner={self._owner!r})"

    @property
    def coordinate(self) -> Coordinate:
        return self._coordinate

    @property
    def x(self) -> int:
        return self._coordinate.x

    @property
    def y(self) -> int:
        return self._coordinate.y

    @property
    def owner(self) -> Optional[PlayerName]:
        return self._owner

    @property
    def is_owned(self) -> bool:
        return self._owner is not None

    # --- LINES ---
    @property
    def top(self) -> Optional[Line]:
        return self.line(Side.TOP)

    @property
    def bottom(self) -> Optional[Line]:
        return self.line(Side.BOTTOM)

    @property
    def left(self) -> Optional[Line]:
        return self.line(Side.LEFT)

    @property
    def right(self) -> Optional[Line]:
        return self.line(Side.RIGHT)

    def line(self, side: Side) -> Optional[Line]:
        """None if the board generation never created a line on that side (see Board.generate)"""
        return self._lines.get(side)

    @property
    def lines(self) -> dict[Side, Line]:
        """Copy of the populated sides only, in top/bottom/left/right order"""
        return {side: self._lines[side] for side in Side if side in self._lines}

    def unowned_lines(self) -> list[Line]:
        return [line for line in self.lines.values() if not line.is_owned]

    def all_lines_owned(self) -> bool:
        """
        Only looks at the lines this box actually has.
        NOTE a box without any line at all (1x1 board) counts as complete, but there is no line to claim that would close it.
        """
        return all(line.is_owned for line in self._lines.values())

    # --- ONLY USED BY THE BOARD ---
    def _attach_line(self, side: Side, line: Line) -> None:
        """Link a line into one of the side slots while the board is being generated."""
        # for the typechecker / sanity: generation visits every edge once
        assert side not in self._lines, f"{self} already has a line on its {side} side"
        self._lines[side] = line

    def _close(self, player: PlayerName) -> None:
        if self._owner is not None:
            raise BoxAlreadyOwnedError(
                f"{self} already owned, cannot hand it to {player}."
            )
        self._owner = player
