from sqlalchemy import Column, ForeignKey, Integer, LargeBinary, String, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.ext.orderinglist import ordering_list
from facerec.data.database import Base
from facerec.model.user import new_object_id


class FaceRec(Base):
    __tablename__ = "face_recs"

    id = Column(String(32), primary_key=True, default=new_object_id)

    # ordem de inserção preservada através da coluna position
    images = relationship(
        "FaceImage",
        back_populates="face_rec",
        order_by="FaceImage.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class FaceImage(Base):
    __tablename__ = "face_images"
    # duas imagens nunca dividem a mesma posição: appends concorrentes falham no commit
    __table_args__ = (UniqueConstraint("face_rec_id", "position", name="uq_face_image_position"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    face_rec_id = Column(String(32), ForeignKey("face_recs.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False)

    data = Column(LargeBinary, nullable=False)
    content_type = Column(String(100), nullable=False)

    face_rec = relationship("FaceRec", back_populates="images")
