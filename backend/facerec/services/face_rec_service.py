import logging
from dataclasses import dataclass
from typing import List, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from facerec.config.settings import get_settings
from facerec.errors import BadInput, Conflict, Full, NotFound, storage_errors
from facerec.model.face_rec import FaceImage, FaceRec
from facerec.repository import repository_face_rec, repository_user
from facerec.services.user_lookup import lookup_user

logger = logging.getLogger(__name__)

ALREADY_SET_UP = "User already has face rec set up."
NOT_SET_UP = "User has not set up face rec."
FACE_REC_MISSING = "Face Rec entry could not be found."
NO_IMAGES = "No images uploaded."
ARRAY_FULL = "Array is full."


@dataclass(frozen=True)
class ImageBlob:
    data: bytes
    content_type: str


def _to_face_images(images: Sequence[ImageBlob]) -> List[FaceImage]:
    if not images:
        raise BadInput(NO_IMAGES)
    return [FaceImage(data=img.data, content_type=img.content_type) for img in images]


def _load_referenced(db: Session, face_rec_id: str, for_update: bool = False) -> FaceRec:
    with storage_errors(db, "Unknown error in finding face rec entry."):
        if for_update:
            face_rec = repository_face_rec.get_face_rec_for_update(db, face_rec_id)
        else:
            face_rec = repository_face_rec.get_face_rec(db, face_rec_id)
    if face_rec is None:
        logger.warning("Dangling face rec reference %s", face_rec_id)
        raise NotFound(FACE_REC_MISSING)
    return face_rec


# ============================================================
#  CREATE: cria o registro e liga ao usuário
# ------------------------------------------------------------
#  As duas escritas (FaceRec + referência no User) vão na mesma
#  transação. A ligação só acontece se a referência ainda estiver
#  vazia; se outro request ganhou a corrida, tudo é desfeito.
# ============================================================

def create_face_rec(db: Session, name: str, images: Sequence[ImageBlob]) -> FaceRec:
    user = lookup_user(db, name).unwrap()
    if user.face_rec is not None:
        raise Conflict(ALREADY_SET_UP)

    face_rec = FaceRec()
    face_rec.images.extend(_to_face_images(images))

    with storage_errors(db, "Unknown error in creating face rec entry."):
        repository_face_rec.save_face_rec(db, face_rec)
        if not repository_user.link_face_rec(db, user.id, face_rec.id):
            db.rollback()
            raise Conflict(ALREADY_SET_UP)
        db.commit()
        db.refresh(face_rec)

    logger.info("Attached face rec %s to user %r", face_rec.id, name)
    return face_rec


# ============================================================
#  APPEND: adiciona imagens a um registro existente (máx. 6)
# ============================================================

def append_face_rec_images(db: Session, name: str, images: Sequence[ImageBlob]) -> FaceRec:
    user = lookup_user(db, name).unwrap()
    if user.face_rec is None:
        raise Conflict(NOT_SET_UP)

    new_images = _to_face_images(images)
    face_rec = _load_referenced(db, user.face_rec, for_update=True)

    max_images = get_settings().max_images_per_face_rec
    if len(face_rec.images) + len(new_images) > max_images:
        raise Full(ARRAY_FULL)

    with storage_errors(db, "Unknown error in updating face rec entry."):
        try:
            repository_face_rec.append_images(db, face_rec, new_images)
            db.commit()
        except IntegrityError:
            # outro append ocupou as mesmas posições antes deste commit
            db.rollback()
            raise Full(ARRAY_FULL) from None
        db.refresh(face_rec)

    logger.info("Face rec %s now holds %d images", face_rec.id, len(face_rec.images))
    return face_rec


def get_face_rec(db: Session, name: str) -> FaceRec:
    user = lookup_user(db, name).unwrap()
    if user.face_rec is None:
        raise NotFound(NOT_SET_UP)
    return _load_referenced(db, user.face_rec)


def delete_face_rec(db: Session, name: str) -> str:
    """
    Delete the user's face rec and clear the reference.

    A user without a face rec is not an error: nothing is deleted and the
    "not set up" message is returned.
    """
    user = lookup_user(db, name).unwrap()
    if user.face_rec is None:
        return NOT_SET_UP

    face_rec_id = user.face_rec
    with storage_errors(db, "Could not delete Face Rec entry."):
        repository_face_rec.delete_face_rec_by_id(db, face_rec_id)
        repository_user.clear_face_rec(db, user)
        db.commit()

    logger.info("Deleted face rec %s of user %r", face_rec_id, name)
    return "Entry deleted."
