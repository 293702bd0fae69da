from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from facerec.data.database import get_db
from facerec.schema.schemas import MessageResponse, UserCreate, UserResponse
from facerec.services import user_service

router = APIRouter()


@router.post(
    "",
    response_model=UserResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    db_user = user_service.create_user(db, user.name)
    return db_user


@router.get("", response_model=List[str])
def list_users(db: Session = Depends(get_db)):
    return user_service.list_user_names(db)


@router.get("/{name}", response_model=UserResponse, response_model_exclude_none=True)
def get_user(name: str, db: Session = Depends(get_db)):
    return user_service.get_user(db, name)


@router.delete("/{name}", response_model=MessageResponse)
def delete_user(name: str, db: Session = Depends(get_db)):
    """Remove o usuário e, em cascata, o seu registro facial."""
    return MessageResponse(message=user_service.delete_user(db, name))
