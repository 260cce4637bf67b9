# File: authportal/db/session.py

"""
Engine and session factory construction.

Nothing is created at import time: ``create_application`` builds both from
its settings and keeps them on ``app.state``.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from authportal.core.config import Settings


def build_engine(settings: Settings) -> Engine:
    url = settings.database_url
    # SQLite connections are shared across FastAPI's worker threads
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
