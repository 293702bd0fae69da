import base64
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_serializer


# -------------------
# User Schemas
# -------------------
class UserCreate(BaseModel):
    # opcional aqui: a ausência do nome é tratada pelo serviço como BadInput (400)
    name: Optional[str] = Field(None, description="Users name", examples=["Alfalfa"])


class UserResponse(BaseModel):
    id: str
    name: str
    face_rec: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("face_rec", "faceRec"),
        serialization_alias="faceRec",
        description="Object ID to Facial Recognition DB Entry",
    )

    class Config:
        from_attributes = True


# -------------------
# Face Rec Schemas
# -------------------
class ImageResponse(BaseModel):
    data: bytes
    content_type: str = Field(
        ...,
        validation_alias=AliasChoices("content_type", "contentType"),
        serialization_alias="contentType",
    )

    class Config:
        from_attributes = True

    @field_serializer("data", when_used="json")
    def serialize_data(self, data: bytes) -> str:
        return base64.b64encode(data).decode("ascii")


class FaceRecResponse(BaseModel):
    id: str
    images: List[ImageResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True


# -------------------
# Mensagens
# -------------------
class MessageResponse(BaseModel):
    message: str
