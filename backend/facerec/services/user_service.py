import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from facerec.errors import BadInput, Conflict, StorageError, storage_errors
from facerec.model.user import User
from facerec.repository import repository_face_rec, repository_user
from facerec.services.user_lookup import LookupStatus, lookup_user

logger = logging.getLogger(__name__)

USER_EXISTS = "User with this name already exists."


def create_user(db: Session, name: Optional[str]) -> User:
    if name is None or not name.strip():
        raise BadInput("Bad user input.")

    lookup = lookup_user(db, name)
    if lookup.status is LookupStatus.ERROR:
        raise StorageError("Unknown error in searching database for users.") from lookup.error
    if lookup.found:
        raise Conflict(USER_EXISTS)

    user = User(name=name)
    with storage_errors(db, "Unknown error in creating user."):
        try:
            repository_user.save_user(db, user)
            db.commit()
        except IntegrityError:
            # outro request criou o mesmo nome entre a checagem e o insert
            db.rollback()
            raise Conflict(USER_EXISTS) from None
        db.refresh(user)

    logger.info("Created user %r (%s)", user.name, user.id)
    return user


def get_user(db: Session, name: str) -> User:
    return lookup_user(db, name).unwrap()


def list_user_names(db: Session) -> List[str]:
    with storage_errors(db, "Unknown error in finding user."):
        return repository_user.list_user_names(db)


def delete_user(db: Session, name: str) -> str:
    """Delete the user and, first, the face rec it references."""
    user = lookup_user(db, name).unwrap()

    with storage_errors(db, "Unknown error in deleting user."):
        if user.face_rec is not None:
            repository_face_rec.delete_face_rec_by_id(db, user.face_rec)
        repository_user.delete_user(db, user)
        db.commit()

    logger.info("Deleted user %r", name)
    return "User deleted."
