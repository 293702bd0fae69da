import logging

from sqlalchemy.orm import Session

from facerec.errors import storage_errors
from facerec.repository import repository_face_rec, repository_user

logger = logging.getLogger(__name__)


def reset_all(db: Session) -> str:
    """Wipe both stores in a single transaction."""
    with storage_errors(db, "Unknown error in resetting registry."):
        face_recs = repository_face_rec.delete_all_face_recs(db)
        users = repository_user.delete_all_users(db)
        db.commit()

    logger.info("Registry reset: %d users and %d face recs removed", users, face_recs)
    return "Registry is reset."
