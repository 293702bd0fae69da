import enum
import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from facerec.errors import NotFound, StorageError
from facerec.model.user import User
from facerec.repository.repository_user import get_user_by_name

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User does not exist."
LOOKUP_FAILED = "Unknown error in finding user."


class LookupStatus(enum.Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class UserLookup:
    """Outcome of resolving a user by name: found, not found, or a storage error."""

    status: LookupStatus
    user: Optional[User] = None
    error: Optional[Exception] = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    def unwrap(self) -> User:
        """Return the user or raise NotFound / StorageError."""
        if self.status is LookupStatus.FOUND:
            return self.user
        if self.status is LookupStatus.NOT_FOUND:
            raise NotFound(USER_NOT_FOUND)
        raise StorageError(LOOKUP_FAILED) from self.error


def lookup_user(db: Session, name: str) -> UserLookup:
    try:
        user = get_user_by_name(db, name)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Lookup of user %r failed", name, exc_info=True)
        return UserLookup(LookupStatus.ERROR, error=exc)

    if user is None:
        return UserLookup(LookupStatus.NOT_FOUND)
    return UserLookup(LookupStatus.FOUND, user=user)
