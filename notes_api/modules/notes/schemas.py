# notes_api/modules/notes/schemas.py

from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

from pydantic import BaseModel, Field, StrictBool

# Empty strings count as missing
RequiredText = Annotated[str, Field(min_length=1)]

class NoteCreateRequest(BaseModel):
    user: UUID
    title: RequiredText
    text: RequiredText

class NoteUpdateRequest(BaseModel):
    id: UUID
    user: UUID
    title: RequiredText
    text: RequiredText
    completed: StrictBool

class NoteDeleteRequest(BaseModel):
    # Optional here so a missing id gets its own message from the service
    id: Optional[UUID] = None

class NoteResponse(BaseModel):
    id: UUID
    user: UUID
    title: str
    text: str
    completed: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    username: Optional[str] = None

    class Config:
        from_attributes = True

class MessageResponse(BaseModel):
    message: str
