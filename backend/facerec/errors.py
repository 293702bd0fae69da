"""Error taxonomy shared by the services and rendered by the app as {"message": ...}."""

import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class FaceRecAPIError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadInput(FaceRecAPIError):
    status_code = 400


class Full(FaceRecAPIError):
    status_code = 403


class NotFound(FaceRecAPIError):
    status_code = 404


class Conflict(FaceRecAPIError):
    status_code = 409


class StorageError(FaceRecAPIError):
    """The store is unreachable or rejected the operation. Only `message` reaches the client."""

    status_code = 500


@contextmanager
def storage_errors(db: Session, message: str):
    """
    Wrap a block of storage calls.

    Any SQLAlchemyError rolls the session back, is logged with its traceback
    and re-raised as StorageError(message).
    """
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("%s (%s)", message, exc.__class__.__name__, exc_info=True)
        raise StorageError(message) from exc
