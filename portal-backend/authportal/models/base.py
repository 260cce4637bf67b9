# File: authportal/models/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    ``init_db`` creates every table registered on ``Base.metadata``.
    """
    pass
