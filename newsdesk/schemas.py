from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class NewPost(BaseModel):
    title: str
    content: str
    imageUrl: str = ''


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    imageUrl: str = ''
    content: str
    date: datetime


class SessionClaims(BaseModel):
    """Claims carried by the signed session cookie."""
    model_config = ConfigDict(populate_by_name=True)

    is_admin: bool = Field(False, alias='isAdmin')
