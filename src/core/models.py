"""
Contract for the Service layer.

Boundary layer data model of the information representing a board (and the claims made on it).
Both the service and the db layer send / receive this, the domain layer knows how to build a Board from it (and back).
"""

from dataclasses import dataclass, field

from src.core.shared_types import Status

# Type aliases to make BoardModel easier to read
LineNotation = str
PlayerName = str


@dataclass
class BoardModel:
    """Transport-safe representation of a board: its size plus every claim in the order it was made."""

    width: int
    height: int
    claims: list[tuple[LineNotation, PlayerName]] = field(default_factory=list)
    status: str = Status.IN_PROGRESS.value
