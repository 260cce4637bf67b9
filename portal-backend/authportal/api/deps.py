# File: authportal/api/deps.py

from collections.abc import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from authportal.core.config import Settings
from authportal.repository.user_repository import UserRepository


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session from the
    application's session factory.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)
