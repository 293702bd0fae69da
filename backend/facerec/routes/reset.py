from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from facerec.data.database import get_db
from facerec.schema.schemas import MessageResponse
from facerec.services.reset_service import reset_all

router = APIRouter()


@router.delete("", response_model=MessageResponse)
def reset(db: Session = Depends(get_db)):
    """Limpa o banco: todos os usuários e registros faciais."""
    return MessageResponse(message=reset_all(db))
