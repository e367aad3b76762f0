"""Generate database session"""

import os
from typing import Generator

from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base

DATABASE_URL = os.environ.get("CHESS_MENTOR_DATABASE_URL", "sqlite:///:memory:")
ECHO_SQL = os.environ.get("CHESS_MENTOR_ECHO_SQL", "") == "1"


def build_engine(url: str = DATABASE_URL) -> Engine:
    """Create the engine and make sure all tables exist."""
    if url.startswith("sqlite:///:memory:"):
        # a single shared connection, otherwise every session sees its own (empty) in-memory database
        engine = create_engine(
            url,
            echo=ECHO_SQL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(url, echo=ECHO_SQL)
    Base.metadata.create_all(bind=engine)
    return engine


def build_session_factory(url: str = DATABASE_URL) -> sessionmaker[Session]:
    return sessionmaker(bind=build_engine(url))


def get_db(
    session_factory: sessionmaker[Session],
) -> Generator[Session, None, None]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
