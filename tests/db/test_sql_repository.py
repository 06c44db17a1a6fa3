"""Unit tests for src/db/sql_repository.py"""

from uuid import uuid4

from sqlalchemy.orm import Session

from src.core.shared_types import Status
from src.db.sql_repository import BoardModel, SQLBoardRepository


def _mock_model() -> BoardModel:
    return BoardModel(
        width=3,
        height=2,
        claims=[("v0,0", "Dotty"), ("h1,0", "Boxer")],
        status=Status.IN_PROGRESS,
    )


def test_create_board(db_session_repo: Session) -> None:
    """Conversion from a BoardModel to DBBoard for a new entry to the database."""
    model = _mock_model()
    repo = SQLBoardRepository(db_session_repo)
    record_in_db, _ = repo.create_board(model)
    assert isinstance(record_in_db, BoardModel)
    assert record_in_db == model


def test_get_board_by_id(db_session_repo: Session) -> None:
    """Create a board, then fetch it from db. Claims come back as tuples again."""
    repo = SQLBoardRepository(db_session_repo)
    expected_board, board_id = repo.create_board(_mock_model())
    board_found = repo.get_board(board_id)
    assert isinstance(board_found, BoardModel)
    assert board_found == expected_board
    assert board_found.claims[0] == ("v0,0", "Dotty")


def test_get_unknown_board(db_session_repo: Session) -> None:
    """
    Should return None if ID does not match anything in database.

    NOTE with an empty database, any id is a valid test case.
    """
    repo = SQLBoardRepository(db_session_repo)
    assert repo.get_board(uuid4()) is None

    # Now do it with creating a board, but retrieving from the wrong ID
    repo.create_board(_mock_model())
    assert repo.get_board(uuid4()) is None


def test_update_board(db_session_repo: Session) -> None:
    repo = SQLBoardRepository(db_session_repo)
    _, board_id = repo.create_board(_mock_model())

    updated = _mock_model()
    updated.claims.append(("v1,1", "Dotty"))
    updated.status = Status.FINISHED
    record = repo.update_board(board_id, updated)

    assert record == updated
    assert repo.get_board(board_id) == updated


def test_update_unknown_board(db_session_repo: Session) -> None:
    repo = SQLBoardRepository(db_session_repo)
    assert repo.update_board(uuid4(), _mock_model()) is None


def test_delete_board(db_session_repo: Session) -> None:
    repo = SQLBoardRepository(db_session_repo)
    stored, board_id = repo.create_board(_mock_model())

    deleted = repo.delete_board(board_id)

    assert deleted == stored
    assert repo.get_board(board_id) is None


def test_delete_unknown_board(db_session_repo: Session) -> None:
    repo = SQLBoardRepository(db_session_repo)
    assert repo.delete_board(uuid4()) is None
