import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from authportal.models.user import User
from authportal.services.errors import UserAlreadyExistsError

logger = logging.getLogger(__name__)


class UserRepository:
    """Data access for ``User`` rows over a single session."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.execute(select(User).where(User.email == email)).scalar_one_or_none()

    def create_user(self, email: str, password_hash: str) -> User:
        user = User(email=email, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            # unique(email) lost a race with a concurrent insert
            self.db.rollback()
            logger.info("Insert for %s rejected by unique constraint", email)
            raise UserAlreadyExistsError() from exc
        self.db.refresh(user)
        return user

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(User))
