"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Side, Status
from src.dots.line import LINE_NOTATION

LineNotation = str
PlayerName = str

# Upper bound for width / height accepted from a request
MAX_BOARD_DIMENSION = 50


# --- REQUEST MODELS ---
class CreateBoardRequest(BaseModel):
    width: int
    height: int

    @field_validator(*["width", "height"])
    @classmethod
    def validate_dimension(cls, value: int) -> int:
        if not 1 <= value <= MAX_BOARD_DIMENSION:
            raise InvalidRequestError(
                f"Board dimensions must be between 1 and {MAX_BOARD_DIMENSION}, got {value}."
            )
        return value


class GetBoardRequest(BaseModel):
    board_id: UUID


class UnclaimedLinesRequest(BaseModel):
    board_id: UUID


class ClaimLineRequest(BaseModel):
    board_id: UUID
    player_name: str
    line: LineNotation

    @field_validator("player_name")
    @classmethod
    def validate_player_name(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Player name cannot be empty.")
        return value

    @field_validator("line")
    @classmethod
    def validate_line(cls, value: str) -> str:
        if LINE_NOTATION.match(value.strip()) is None:
            raise InvalidRequestError(
                f"Cannot interpret line: {value!r}. Expected something like 'h0,1' or 'v2,0'."
            )
        return value.strip()


class DeleteBoardRequest(BaseModel):
    board_id: UUID


# --- RESPONSE MODELS ---
class BoxResponse(BaseModel):
    x: int
    y: int
    owner: Optional[PlayerName]
    lines: dict[Side, LineNotation]


class BoardResponse(BaseModel):
    board_id: UUID
    width: int
    height: int
    status: Status
    boxes: list[BoxResponse]
    lines: dict[LineNotation, Optional[PlayerName]]
    boxes_per_player: dict[PlayerName, int]
    claim_history: list[tuple[LineNotation, PlayerName]]


class UnclaimedLinesResponse(BaseModel):
    board_id: UUID
    lines: list[LineNotation]


class ClaimLineResponse(BaseModel):
    board_id: UUID
    player_name: PlayerName
    line: LineNotation
    closed_boxes: list[tuple[int, int]]
    board: BoardResponse
