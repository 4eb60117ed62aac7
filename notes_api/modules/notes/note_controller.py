# notes_api/modules/notes/note_controller.py

from typing import List, Optional
from fastapi import APIRouter, Depends, status

from notes_api.modules.notes import schemas
from notes_api.modules.notes.dependencies import get_note_service
from notes_api.modules.notes.note_service import NoteService
from notes_api.common.utils.global_messages import GlobalMessages

router = APIRouter(prefix="/notes", tags=["notes"])

@router.get("", response_model=List[schemas.NoteResponse])
async def get_all_notes(service: NoteService = Depends(get_note_service)):
    """
    Retrieve all notes, each with the username of its owner.

    Responds 400 when there are no notes at all.
    """
    return await service.get_all_notes()

@router.post("", response_model=schemas.MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_new_note(
    note_request: schemas.NoteCreateRequest,
    service: NoteService = Depends(get_note_service)
):
    """
    Create a new note.

    - **user**: Id of the owning user.
    - **title**: Note title, unique across all notes.
    - **text**: Note body.
    """
    await service.create_note(note_request.user, note_request.title, note_request.text)
    return schemas.MessageResponse(message=GlobalMessages.NOTE_CREATED)

@router.patch("", response_model=schemas.MessageResponse)
async def update_note(
    note_request: schemas.NoteUpdateRequest,
    service: NoteService = Depends(get_note_service)
):
    """
    Update every field of an existing note.
    """
    updated_note = await service.update_note(
        note_request.id,
        note_request.user,
        note_request.title,
        note_request.text,
        note_request.completed,
    )
    return schemas.MessageResponse(message=GlobalMessages.note_updated(updated_note.title))

@router.delete("", response_model=schemas.MessageResponse)
async def delete_note(
    note_request: Optional[schemas.NoteDeleteRequest] = None,
    service: NoteService = Depends(get_note_service)
):
    """
    Delete a note by id.
    """
    deleted_note = await service.delete_note(note_request.id if note_request else None)
    return schemas.MessageResponse(message=GlobalMessages.note_deleted(deleted_note.title, deleted_note.id))
