from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlalchemy.orm import Session

from facerec.config.settings import get_settings
from facerec.data.database import get_db
from facerec.errors import BadInput
from facerec.schema.schemas import FaceRecResponse, MessageResponse
from facerec.services import face_rec_service
from facerec.services.face_rec_service import ImageBlob

router = APIRouter(tags=["Face Rec"])

DEFAULT_CONTENT_TYPE = "application/octet-stream"


async def read_uploads(files: Optional[List[UploadFile]]) -> List[ImageBlob]:
    """Lê os arquivos enviados no campo multipart `image` para a memória."""
    files = files or []
    if len(files) > get_settings().max_files_per_upload:
        raise BadInput("Too many images uploaded.")

    return [
        ImageBlob(data=await f.read(), content_type=f.content_type or DEFAULT_CONTENT_TYPE)
        for f in files
    ]


@router.post("/{name}", response_model=FaceRecResponse, status_code=status.HTTP_201_CREATED)
async def create_face_rec(
    name: str,
    image: Optional[List[UploadFile]] = File(None),
    db: Session = Depends(get_db),
):
    images = await read_uploads(image)
    face_rec = face_rec_service.create_face_rec(db, name, images)
    return face_rec


@router.put("/{name}", response_model=FaceRecResponse)
async def append_face_rec_images(
    name: str,
    image: Optional[List[UploadFile]] = File(None),
    db: Session = Depends(get_db),
):
    images = await read_uploads(image)
    face_rec = face_rec_service.append_face_rec_images(db, name, images)
    return face_rec


@router.get("/{name}", response_model=FaceRecResponse)
def get_face_rec(name: str, db: Session = Depends(get_db)):
    return face_rec_service.get_face_rec(db, name)


@router.delete("/{name}", response_model=MessageResponse)
def delete_face_rec(name: str, db: Session = Depends(get_db)):
    return MessageResponse(message=face_rec_service.delete_face_rec(db, name))
