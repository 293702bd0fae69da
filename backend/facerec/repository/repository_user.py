from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session
from facerec.model.user import User


def get_user_by_name(db: Session, name: str) -> Optional[User]:
    return db.execute(select(User).where(User.name == name)).scalar_one_or_none()


def list_user_names(db: Session) -> List[str]:
    return list(db.execute(select(User.name).order_by(User.created_at, User.name)).scalars())


def save_user(db: Session, user: User):
    db.add(user)


def link_face_rec(db: Session, user_id: str, face_rec_id: str) -> bool:
    """
    Set the user's face rec reference only if it is still empty.

    Returns False when another request linked a record first.
    """
    result = db.execute(
        update(User)
        .where(User.id == user_id, User.face_rec.is_(None))
        .values(face_rec=face_rec_id)
        .execution_options(synchronize_session="fetch")
    )
    return result.rowcount == 1


def clear_face_rec(db: Session, user: User):
    user.face_rec = None
    db.add(user)


def delete_user(db: Session, user: User):
    db.delete(user)


def delete_all_users(db: Session) -> int:
    return db.execute(delete(User)).rowcount
