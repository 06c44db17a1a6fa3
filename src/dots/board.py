"""
The Board generates the grid of boxes and the lines in between them, and resolves a claimed line into closed boxes.

A board is only ever created through Board.generate(width, height) (or Board.from_model, which calls it).
"""

import logging
from collections import Counter
from typing import Optional, Self

from src.core.exceptions import (
    BoardConstructionError,
    InvalidBoardSizeError,
    LineAlreadyClaimedError,
    UnknownLineError,
)
from src.core.models import BoardModel
from src.core.shared_types import Orientation, PlayerName, Side, Status
from src.dots.box import Box
from src.dots.coordinate import OPPOSITE_SIDE, Coordinate
from src.dots.line import Line, LineKey

logger = logging.getLogger(__name__)

# Handed to __init__ by generate() only. Anything else constructing a Board gets an error.
_GENERATE_KEY = object()


class Board:
    def __init__(self, width: int, height: int, _key: object = None) -> None:
        if _key is not _GENERATE_KEY:
            raise BoardConstructionError(
                "Boards are created with Board.generate(width, height)."
            )
        self._width = width
        self._height = height

        # dicts keep insertion order --> generation order (x outer, y inner)
        self._boxes: dict[Coordinate, Box] = {}
        self._lines: dict[LineKey, Line] = {}

        # Kept in sync on every claim, so nobody has to iterate all boxes / lines to find the open ones.
        self._open_boxes: dict[Coordinate, Box] = {}
        self._unowned_lines: set[Line] = set()

        self._claims: list[tuple[str, PlayerName]] = []

    def __repr__(self) -> str:
        return f"Board(width={self._width}, height={self._height}, open_boxes={len(self._open_boxes)})"

    # --- CREATION ---
    @classmethod
    def generate(cls, width: int, height: int) -> Self:
        """
        Factory method: build the boxes first, then the lines between them.
        ---

        Lines are only created towards the box below and the box to the right. Consequence:
        boxes on the outer edge of the board have NO line on that outer side, and are closed once their other lines are owned.
        (a 0 in either dimension gives an empty board)
        """
        _validate_dimension("width", width)
        _validate_dimension("height", height)
        board = cls(width, height, _GENERATE_KEY)

        # 1st pass: all the boxes
        for x in range(width):
            for y in range(height):
                board._add_box(Box(Coordinate(x, y)))

        # 2nd pass: the lines. Needs both neighbors to exist already
        for x in range(width):
            for y in range(height):
                box = board._boxes[Coordinate(x, y)]
                box_right = board.box(x + 1, y)
                box_below = board.box(x, y + 1)

                if box_right is not None:
                    board._connect(box, box_right, Side.RIGHT, Orientation.VERTICAL)

                if box_below is not None:
                    board._connect(box, box_below, Side.BOTTOM, Orientation.HORIZONTAL)

        logger.info(
            "Generated %dx%d board: %d boxes, %d lines",
            width,
            height,
            len(board._boxes),
            len(board._lines),
        )
        return board

    @classmethod
    def from_model(cls, model: BoardModel) -> Self:
        """Regenerate the board and replay the claims in their original order."""
        board = cls.generate(model.width, model.height)
        for notation, player in model.claims:
            board.claim_line(board.line(notation), player)
        return board

    def to_model(self) -> BoardModel:
        return BoardModel(
            width=self._width,
            height=self._height,
            claims=list(self._claims),
            status=self.status.value,
        )

    # --- QUERIES ---
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def boxes(self) -> tuple[Box, ...]:
        return tuple(self._boxes.values())

    @property
    def open_boxes(self) -> tuple[Box, ...]:
        return tuple(self._open_boxes.values())

    @property
    def lines(self) -> tuple[Line, ...]:
        return tuple(self._lines.values())

    @property
    def unowned_lines(self) -> frozenset[Line]:
        return frozenset(self._unowned_lines)

    @property
    def claims(self) -> tuple[tuple[str, PlayerName], ...]:
        """(line notation, player) in the order the lines were claimed"""
        return tuple(self._claims)

    @property
    def status(self) -> Status:
        return Status.FINISHED if self.all_boxes_owned() else Status.IN_PROGRESS

    def box(self, x: int, y: int) -> Optional[Box]:
        """None when (x, y) is off the board. Callers regularly probe for neighbors that don't exist."""
        return self._boxes.get(Coordinate(x, y))

    def line(self, notation: str) -> Line:
        key = LineKey.from_notation(notation)
        if key not in self._lines:
            raise UnknownLineError(f"There is no line {notation!r} on this board.")
        return self._lines[key]

    def all_boxes_owned(self) -> bool:
        return not self._open_boxes

    def boxes_per_player(self) -> dict[PlayerName, int]:
        """Tally of closed boxes. Players without any box are not listed."""
        return dict(
            Counter(box.owner for box in self._boxes.values() if box.owner is not None)
        )

    # --- MOVES ---
    def claim_line(self, line: Line, player: PlayerName) -> bool:
        """
        Player claims the line, then every box that is now complete gets closed for that same player.
        ----

        Returns True if at least one box was closed (the caller decides whether that grants another turn).
        All checks happen before anything is changed, so a failed claim leaves the board untouched.
        """
        if self._lines.get(line.key) is not line:
            raise UnknownLineError(f"{line!r} does not belong to this board.")
        if line.is_owned:
            raise LineAlreadyClaimedError(
                f"Line {line.notation} was already claimed by {line.owner}."
            )

        line._claim(player)
        self._unowned_lines.discard(line)
        self._claims.append((line.notation, player))

        closed_boxes = self._close_completed_boxes(line, player)
        logger.debug(
            "%s claimed %s, closed %s",
            player,
            line.notation,
            [box.coordinate.to_tuple() for box in closed_boxes],
        )
        return len(closed_boxes) > 0

    # -- PRIVATE HELPERS ---
    def _add_box(self, box: Box) -> None:
        self._boxes[box.coordinate] = box
        self._open_boxes[box.coordinate] = box

    def _add_line(self, line: Line) -> None:
        self._lines[line.key] = line
        self._unowned_lines.add(line)

    def _connect(
        self, box: Box, neighbor: Box, side: Side, orientation: Orientation
    ) -> None:
        """One line shared by both boxes: the box's `side` and the neighbor's opposite side."""
        line = Line(LineKey(orientation, box.x, box.y))
        box._attach_line(side, line)
        neighbor._attach_line(OPPOSITE_SIDE[side], line)
        self._add_line(line)

    def _close_completed_boxes(self, line: Line, player: PlayerName) -> list[Box]:
        """
        Close the open boxes that are complete now.

        NOTE Only the (at most two) boxes next to the claimed line can have changed, so those are the only ones checked.
        """
        closed: list[Box] = []
        for coordinate in line.boxes:
            box = self._open_boxes.get(coordinate)
            if box is None or not box.all_lines_owned():
                continue
            box._close(player)
            del self._open_boxes[coordinate]
            closed.append(box)
        return closed


def _validate_dimension(name: str, value: int) -> None:
    # bool is an int subclass, still not a size
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidBoardSizeError(f"{name} must be an integer, got {value!r}.")
    if value < 0:
        raise InvalidBoardSizeError(f"{name} cannot be negative, got {value}.")
