"""User Models."""
# Types
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4
# Beanie
from beanie import Document, PydanticObjectId as ObjId
from pydantic import BaseModel, Field
# Models
from jammit.models.common_models import camel_config


class UserModel(Document):  # pylint: disable=too-many-ancestors
    """Representation of a user in the database"""
    id: ObjId = Field(None, alias="_id")
    fief_id: UUID = Field(
        default_factory=uuid4,
        description="Identifier of the user at the identity provider.")
    email: Optional[str] = Field(
        None, description="Assigned email address of user.")
    nickname: str = Field("", description="Public name of the user.")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Timestamp of user signup.")

    @dataclass
    class Settings:
        name = "users"


class UserResponse(BaseModel):
    """Public view of a user."""
    model_config = camel_config

    id: str
    email: Optional[str] = None
    nickname: str
    written_review_count: int = 0
    received_review_count: int = 0

    @classmethod
    def from_document(cls, user: UserModel, **counts) -> "UserResponse":
        return cls(id=str(user.id), email=user.email, nickname=user.nickname,
                   **counts)


class UpdateUserRequest(BaseModel):
    """Changes a user can apply to their own profile."""
    model_config = camel_config

    nickname: str = Field(min_length=1, max_length=30,
                          description="New public name of the user.")
