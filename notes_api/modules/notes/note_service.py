# notes_api/modules/notes/note_service.py

import asyncio
import logging
from typing import List, Optional
from uuid import UUID

from notes_api.common.exceptions import ConflictError, NotFoundError, ValidationError
from notes_api.common.utils.global_messages import GlobalMessages
from notes_api.models.models import Note
from notes_api.modules.notes.note_repository import NoteRepository
from notes_api.modules.users.user_repository import UserRepository

logger = logging.getLogger(__name__)


class NoteService:
    """
    Note CRUD on top of the note and user repositories.

    Holds no per-request state; one instance is built at startup and
    shared by every request.
    """

    def __init__(self, notes: NoteRepository, users: UserRepository):
        self.notes = notes
        self.users = users

    async def get_all_notes(self) -> List[dict]:
        """
        Retrieve every note with its owner's username attached.

        Username lookups run concurrently; results keep the order of the notes.

        Raises:
            NotFoundError: If there are no notes at all.
        """
        notes = await self.notes.find_all()
        if not notes:
            raise NotFoundError(GlobalMessages.NOTES_NOT_FOUND)

        return list(await asyncio.gather(*(self._with_username(note) for note in notes)))

    async def _with_username(self, note: Note) -> dict:
        user = await self.users.find_by_id(note.user_id)
        return {
            "id": note.id,
            "user": note.user_id,
            "title": note.title,
            "text": note.text,
            "completed": note.completed,
            "created_at": note.created_at,
            "updated_at": note.updated_at,
            "username": user.username if user else None,
        }

    async def create_note(self, user_id: UUID, title: str, text: str) -> Note:
        """
        Create a note unless another note already uses the title.
        """
        duplicate = await self.notes.find_by_title(title)
        if duplicate:
            logger.info("Rejected note create, duplicate title: %s", title)
            raise ConflictError(GlobalMessages.NOTE_DUPLICATE_TITLE)

        note = await self.notes.create(user_id, title, text)
        if not note:
            raise ValidationError(GlobalMessages.NOTE_INVALID_DATA)

        logger.info("Note created: %s (%s)", note.id, note.title)
        return note

    async def update_note(
        self,
        note_id: UUID,
        user_id: UUID,
        title: str,
        text: str,
        completed: bool,
    ) -> Note:
        """
        Overwrite every mutable field of an existing note.

        A note may keep its own title; only another note holding the
        title counts as a duplicate.
        """
        note = await self.notes.find_by_id(note_id)
        if not note:
            raise NotFoundError(GlobalMessages.NOTE_NOT_FOUND)

        duplicate = await self.notes.find_by_title(title)
        if duplicate and duplicate.id != note_id:
            logger.info("Rejected note update %s, duplicate title: %s", note_id, title)
            raise ConflictError(GlobalMessages.NOTE_DUPLICATE_TITLE)

        note.user_id = user_id
        note.title = title
        note.text = text
        note.completed = completed

        updated_note = await self.notes.save(note)
        logger.info("Note updated: %s (%s)", updated_note.id, updated_note.title)
        return updated_note

    async def delete_note(self, note_id: Optional[UUID]) -> Note:
        """
        Delete a note and return the record as it was before deletion.
        """
        if not note_id:
            raise ValidationError(GlobalMessages.NOTE_ID_REQUIRED)

        note = await self.notes.find_by_id(note_id)
        if not note:
            raise NotFoundError(GlobalMessages.NOTE_NOT_FOUND)

        await self.notes.delete(note)
        logger.info("Note deleted: %s (%s)", note.id, note.title)
        return note
