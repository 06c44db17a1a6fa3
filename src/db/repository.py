"""Where boards live between requests. SQLBoardRepository is the real one, the service tests use a dictionary."""

from typing import Protocol
from uuid import UUID

from src.core.models import BoardModel


class BoardRepository(Protocol):
    def get_board(self, board_id: UUID) -> BoardModel | None:
        """None for an unknown id. The service turns that into a RepositoryError."""
        ...

    def create_board(self, board: BoardModel) -> tuple[BoardModel, UUID]:
        """The repository hands out the id of a new board."""
        ...

    def update_board(self, board_id: UUID, board: BoardModel) -> BoardModel | None:
        """Replace the claims / status after a move. Size is fixed at creation."""
        ...

    def delete_board(self, board_id: UUID) -> BoardModel | None: ...
