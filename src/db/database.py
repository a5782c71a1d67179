"""Generate database session"""

import os
from functools import cache
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base

DATABASE_URL = os.environ.get("CHESSBOARD_DATABASE_URL", "sqlite:///chessboard.db")


@cache
def get_engine(url: str = DATABASE_URL) -> Engine:
    """One engine per database URL. Tables are created the first time it is requested."""
    engine = create_engine(url)
    Base.metadata.create_all(bind=engine)
    return engine


@cache
def get_session_factory(url: str = DATABASE_URL) -> sessionmaker[Session]:
    return sessionmaker(bind=get_engine(url))


def get_db(url: str = DATABASE_URL) -> Generator[Session, None, None]:
    db = get_session_factory(url)()
    try:
        yield db
    finally:
        db.close()
