# taskapi/services/users.py
import logging
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from taskapi.errors import InvalidInput, NotFound, StorageFailure
from taskapi.models import User

log = logging.getLogger("taskapi.users")


class UserDirectory:
    """Lookup-or-create of users keyed by email."""

    def __init__(self, session: Session):
        self.session = session

    def _find(self, email: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.email == email)).first()

    def find_or_create(self, uid: str, email: str, display_name: str) -> Tuple[User, bool]:
        """
        Return (user, created). A repeated login with the same email never
        inserts a second row; the UNIQUE constraint on email settles the race
        between two first logins.
        """
        if not uid or not email or not display_name:
            raise InvalidInput("Invalid user data")

        try:
            existing = self._find(email)
            if existing:
                return existing, False

            user = User(uid=uid, email=email, display_name=display_name)
            self.session.add(user)
            try:
                self.session.commit()
            except IntegrityError:
                # lost the race: someone inserted the same email first
                self.session.rollback()
                existing = self._find(email)
                if existing is None:
                    raise
                return existing, False
            self.session.refresh(user)
            return user, True
        except SQLAlchemyError:
            self.session.rollback()
            log.exception("Error during login for %s", email)
            raise StorageFailure()

    def get_by_email(self, email: str) -> User:
        try:
            user = self._find(email)
        except SQLAlchemyError:
            log.exception("Error fetching user %s", email)
            raise StorageFailure()
        if not user:
            raise NotFound("User not found")
        return user
