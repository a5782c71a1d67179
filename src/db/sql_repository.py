"""BoardRepository backed by SQLAlchemy (one row in the `boards` table per board)"""

from uuid import UUID, uuid4

from sqlalchemy.orm import Session

from src.core.models import BoardModel
from src.db.schema import DBBoard


class SQLBoardRepository:
    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def add(self, board: BoardModel) -> UUID:
        record = DBBoard(id=uuid4())
        _copy_into_record(board, record)
        self.db.add(record)
        self.db.commit()
        return record.id

    def get(self, board_id: UUID) -> BoardModel | None:
        record = self.db.get(DBBoard, board_id)
        return _to_model(record) if record is not None else None

    def save(self, board_id: UUID, board: BoardModel) -> bool:
        record = self.db.get(DBBoard, board_id)
        if record is None:
            return False
        _copy_into_record(board, record)
        self.db.commit()
        return True

    def remove(self, board_id: UUID) -> bool:
        record = self.db.get(DBBoard, board_id)
        if record is None:
            return False
        self.db.delete(record)
        self.db.commit()
        return True


def _copy_into_record(board: BoardModel, record: DBBoard) -> None:
    record.placement = board.placement
    record.player = board.player
    # NOTE: always a new list, in-place changes of a JSON column are not tracked
    record.moves_uci = list(board.moves_uci)


def _to_model(record: DBBoard) -> BoardModel:
    return BoardModel(
        placement=record.placement,
        player=record.player,
        moves_uci=list(record.moves_uci),
    )
