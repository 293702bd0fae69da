# facerec/model/user.py
import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, String
from facerec.data.database import Base


def new_object_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_object_id)
    name = Column(String(100), unique=True, index=True, nullable=False)

    # Referência ao FaceRec do usuário. Sem ForeignKey: a referência vive só
    # deste lado e pode ficar pendente (dangling) se o registro sumir.
    face_rec = Column(String(32), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
