from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import config


def _engine_options(url: str) -> dict:
    # a single shared connection keeps in-memory sqlite databases alive across sessions
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    return {"pool_pre_ping": True}


engine = create_engine(
    config.DATABASE_URL, echo=config.SQL_ECHO, **_engine_options(config.DATABASE_URL)
)

session_factory = sessionmaker(bind=engine, autoflush=False, autocommit=False)


class Base(DeclarativeBase):
    pass


@contextmanager
def get_db_context() -> Generator[Session, None, None]:
    """
    provide database sessions, to be used when a caller wants a single session for a block of code.
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
