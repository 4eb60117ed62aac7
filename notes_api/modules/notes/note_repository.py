# notes_api/modules/notes/note_repository.py

import logging
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.future import select

from notes_api.common.exceptions import ConflictError, NotFoundError
from notes_api.common.utils.global_messages import GlobalMessages
from notes_api.models.models import Note

logger = logging.getLogger(__name__)


class NoteRepository(ABC):
    """
    Storage interface for notes.

    Implementations raise ConflictError from `create` and `save` when the
    storage engine itself rejects a duplicate title. `create` returns None
    when the engine rejects the record for any other reason. `save` raises
    NotFoundError when the note no longer exists.
    """

    @abstractmethod
    async def find_all(self) -> List[Note]:
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, note_id: UUID) -> Optional[Note]:
        raise NotImplementedError

    @abstractmethod
    async def find_by_title(self, title: str) -> Optional[Note]:
        raise NotImplementedError

    @abstractmethod
    async def create(self, user_id: UUID, title: str, text: str) -> Optional[Note]:
        raise NotImplementedError

    @abstractmethod
    async def save(self, note: Note) -> Note:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, note: Note) -> None:
        raise NotImplementedError


class SqlAlchemyNoteRepository(NoteRepository):
    """
    NoteRepository backed by an async SQLAlchemy engine.

    Each call opens its own session, so lookups can run concurrently.
    Returned notes are detached but fully loaded.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def find_all(self) -> List[Note]:
        async with self._session_factory() as session:
            result = await session.execute(select(Note).order_by(Note.created_at, Note.id))
            return list(result.scalars().all())

    async def find_by_id(self, note_id: UUID) -> Optional[Note]:
        async with self._session_factory() as session:
            return await session.get(Note, note_id)

    async def find_by_title(self, title: str) -> Optional[Note]:
        async with self._session_factory() as session:
            result = await session.execute(select(Note).where(Note.title == title))
            return result.scalars().first()

    async def create(self, user_id: UUID, title: str, text: str) -> Optional[Note]:
        new_note = Note(user_id=user_id, title=title, text=text, completed=False)
        async with self._session_factory() as session:
            session.add(new_note)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                await self._raise_if_title_taken(session, title, exclude_id=None, error=e)
                # Rejected for some other reason, e.g. an unknown user reference
                logger.warning("Note insert rejected: %s", e.orig)
                return None
            await session.refresh(new_note)
        return new_note

    async def save(self, note: Note) -> Note:
        async with self._session_factory() as session:
            stored = await session.get(Note, note.id)
            if stored is None:
                # Deleted since the caller loaded it
                raise NotFoundError(GlobalMessages.NOTE_NOT_FOUND)
            stored.user_id = note.user_id
            stored.title = note.title
            stored.text = note.text
            stored.completed = note.completed
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                await self._raise_if_title_taken(session, note.title, exclude_id=note.id, error=e)
                raise
            await session.refresh(stored)
        return stored

    async def delete(self, note: Note) -> None:
        async with self._session_factory() as session:
            await session.execute(delete(Note).where(Note.id == note.id))
            await session.commit()

    @staticmethod
    async def _raise_if_title_taken(
        session: AsyncSession,
        title: str,
        exclude_id: Optional[UUID],
        error: IntegrityError,
    ) -> None:
        """
        Turn a unique-constraint violation on the title into a ConflictError.

        Another writer may have inserted the same title between the service's
        duplicate check and this commit.
        """
        stmt = select(Note.id).where(Note.title == title)
        if exclude_id is not None:
            stmt = stmt.where(Note.id != exclude_id)
        result = await session.execute(stmt)
        if result.first() is not None:
            logger.info("Duplicate note title rejected by storage: %s", title)
            raise ConflictError(GlobalMessages.NOTE_DUPLICATE_TITLE) from error
