"""Orchestration of communication from API router to the domain (Board) and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    BoardResponse,
    BoxResponse,
    ClaimLineRequest,
    ClaimLineResponse,
    CreateBoardRequest,
    DeleteBoardRequest,
    GetBoardRequest,
    UnclaimedLinesRequest,
    UnclaimedLinesResponse,
)
from src.core.exceptions import RepositoryError
from src.core.models import BoardModel
from src.db.repository import BoardRepository
from src.dots.board import Board

logger = logging.getLogger(__name__)


class BoardService:
    """Orchestration of layers for a dots-and-boxes board."""

    def __init__(self, repository: BoardRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_board(self, request: CreateBoardRequest) -> BoardResponse:
        """Generate a fresh board of the requested size and store it."""

        board = Board.generate(request.width, request.height)
        _, board_id = self.repo.create_board(board.to_model())
        logger.info("Created board %s (%dx%d)", board_id, board.width, board.height)

        return self._create_board_response(board_id, board)

    def get_board_state(self, request: GetBoardRequest) -> BoardResponse:
        """
        Retrieve current board state.
        ----
        Used in "polling" loop by frontend to see the lines the other player claimed.
        """
        board = Board.from_model(self._fetch_board(request.board_id))
        return self._create_board_response(request.board_id, board)

    def unclaimed_lines(self, request: UnclaimedLinesRequest) -> UnclaimedLinesResponse:
        """Lines that can still be claimed, in generation order."""
        board = Board.from_model(self._fetch_board(request.board_id))
        return UnclaimedLinesResponse(
            board_id=request.board_id,
            lines=[line.notation for line in board.lines if not line.is_owned],
        )

    def claim_line(self, request: ClaimLineRequest) -> ClaimLineResponse:
        """Claim a line for a player. Nothing is stored if the claim is rejected by the board."""

        # Retrieve persisted BoardModel and rebuild the Board
        board = Board.from_model(self._fetch_board(request.board_id))

        # Attempt the claim
        open_before = {box.coordinate for box in board.open_boxes}
        line = board.line(request.line)
        board.claim_line(line, request.player_name)
        open_after = {box.coordinate for box in board.open_boxes}

        # store in repository
        self.repo.update_board(request.board_id, board.to_model())

        closed = sorted(coordinate.to_tuple() for coordinate in open_before - open_after)
        logger.info(
            "Board %s: %s claimed %s, closed %s",
            request.board_id,
            request.player_name,
            line.notation,
            closed,
        )
        return ClaimLineResponse(
            board_id=request.board_id,
            player_name=request.player_name,
            line=line.notation,
            closed_boxes=closed,
            board=self._create_board_response(request.board_id, board),
        )

    def delete_board(self, request: DeleteBoardRequest) -> None:
        """Handle a request to delete a Board record."""
        self.repo.delete_board(request.board_id)

    # -- Internal helpers --
    def _create_board_response(self, board_id: UUID, board: Board) -> BoardResponse:
        """Convert the Board into a BoardResponse (for board with given ID.)"""
        return BoardResponse(
            board_id=board_id,
            width=board.width,
            height=board.height,
            status=board.status,
            boxes=[
                BoxResponse(
                    x=box.x,
                    y=box.y,
                    owner=box.owner,
                    lines={side: line.notation for side, line in box.lines.items()},
                )
                for box in board.boxes
            ],
            lines={line.notation: line.owner for line in board.lines},
            boxes_per_player=board.boxes_per_player(),
            claim_history=list(board.claims),
        )

    def _fetch_board(self, board_id: UUID) -> BoardModel:
        """Attempt to find the board in the repository and raise error if it fails."""
        board_model = self.repo.get_board(board_id)
        if board_model is None:
            raise RepositoryError(f"Board with {board_id=} not found.")
        return board_model
