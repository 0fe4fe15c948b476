"""Database session management."""

import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from studydesk.db.base import Base

# Imported for its side effect of registering the table on Base.metadata
from studydesk.db import models  # noqa: F401

logger = logging.getLogger(__name__)


def create_storage_engine(url: str, *, echo: bool = False) -> Engine:
    """
    Create the engine for the local storage file and make sure the table exists.

    An unopenable file is logged, not raised: storage is best-effort, so the
    engine is still returned and reads through it fall back to defaults.
    """
    engine = create_engine(
        url,
        echo=echo,
        # Requests are served on the event loop thread, not the creating thread
        connect_args={"check_same_thread": False},
    )
    try:
        Base.metadata.create_all(engine)
    except SQLAlchemyError as e:
        logger.warning("Local storage unavailable at %s: %s", engine.url, e)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Session factory bound to the storage engine."""
    return sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
    )
