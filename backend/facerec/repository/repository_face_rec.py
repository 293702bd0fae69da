from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session
from facerec.model.face_rec import FaceImage, FaceRec


def get_face_rec(db: Session, face_rec_id: str) -> Optional[FaceRec]:
    return db.get(FaceRec, face_rec_id)


def get_face_rec_for_update(db: Session, face_rec_id: str) -> Optional[FaceRec]:
    """Load the record holding a row lock until the transaction ends."""
    return db.execute(
        select(FaceRec)
        .where(FaceRec.id == face_rec_id)
        .with_for_update()
        .execution_options(populate_existing=True)
    ).scalar_one_or_none()


def save_face_rec(db: Session, face_rec: FaceRec):
    db.add(face_rec)
    # garante o id gerado antes de ligá-lo ao usuário
    db.flush()


def append_images(db: Session, face_rec: FaceRec, images: List[FaceImage]):
    face_rec.images.extend(images)
    db.add(face_rec)


def delete_face_rec_by_id(db: Session, face_rec_id: str) -> bool:
    """Delete the record if it exists. A missing id is not an error."""
    face_rec = db.get(FaceRec, face_rec_id)
    if face_rec is None:
        return False
    db.delete(face_rec)
    return True


def delete_all_face_recs(db: Session) -> int:
    db.execute(delete(FaceImage))
    return db.execute(delete(FaceRec)).rowcount
