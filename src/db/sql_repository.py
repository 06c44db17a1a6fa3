"""Implementation of (Board)Repository using SQLAlchemy"""

from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import BoardModel
from src.db.schema import DBBoard


class SQLBoardRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_board(self, board_id: UUID) -> BoardModel | None:
        """Get board by ID, if record exists."""
        board_db = self._fetch_board(board_id)
        if board_db:
            return self._to_model(board_db)
        return None

    def create_board(self, board: BoardModel) -> tuple[BoardModel, UUID]:
        """Store new board and return the stored data + newly created board ID."""

        new_id = uuid4()
        board_db = DBBoard(
            id=new_id,
            width=board.width,
            height=board.height,
            claims=self._claims_to_json(board),
            status=board.status,
        )
        self.db.add(board_db)
        self.db.commit()
        self.db.refresh(board_db)
        return self._to_model(board_db), new_id

    def update_board(self, board_id: UUID, board: BoardModel) -> BoardModel | None:
        """Add new info to existing record. Width and height never change after creation."""
        board_db = self._fetch_board(board_id)
        if not board_db:
            return None
        board_db.claims = self._claims_to_json(board)
        board_db.status = board.status
        self.db.commit()
        self.db.refresh(board_db)
        return self._to_model(board_db)

    def delete_board(self, board_id: UUID) -> BoardModel | None:
        """Remove a board's record."""
        board_db = self._fetch_board(board_id)
        if not board_db:
            return None
        board_model = self._to_model(board_db)
        self.db.delete(board_db)
        self.db.commit()
        return board_model

    def _fetch_board(self, board_id: UUID) -> DBBoard | None:
        query = select(DBBoard).where(DBBoard.id == board_id)
        return self.db.scalar(query)

    def _claims_to_json(self, board: BoardModel) -> list[list[str]]:
        """JSON has no tuples"""
        return [[notation, player] for notation, player in board.claims]

    def _to_model(self, board_db: DBBoard) -> BoardModel:
        """Convert SQLAlchemy model to data transfer model."""
        return BoardModel(
            width=board_db.width,
            height=board_db.height,
            claims=[(notation, player) for notation, player in board_db.claims],
            status=board_db.status,
        )
