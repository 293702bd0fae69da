# Importa todas as tabelas para que Base.metadata.create_all as conheça
from facerec.data.database import Base
from facerec.model.user import User
from facerec.model.face_rec import FaceRec, FaceImage

__all__ = ["Base", "User", "FaceRec", "FaceImage"]
