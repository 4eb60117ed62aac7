"""Pytest configuration and fixtures shared across all test modules.

The environment is set before any notes_api import so that settings and
the database engine pick up the test values.
"""

import os
import tempfile
import uuid
from typing import Dict, List, Optional
from uuid import UUID

os.environ["APP_ENV"] = "testing"
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{os.path.join(tempfile.mkdtemp(), 'notes_test.db')}",
)
os.environ.setdefault("LOG_LEVEL", "warning")

import pytest

from notes_api.common.exceptions import NotFoundError
from notes_api.common.rate_limit import limiter
from notes_api.common.utils.global_messages import GlobalMessages
from notes_api.models.models import Note, User
from notes_api.modules.notes.note_repository import NoteRepository
from notes_api.modules.notes.note_service import NoteService
from notes_api.modules.users.user_repository import UserRepository


class InMemoryNoteRepository(NoteRepository):
    """Dict-backed NoteRepository for service and route tests."""

    def __init__(self) -> None:
        self.records: Dict[UUID, Note] = {}
        self.reject_creates = False

    async def find_all(self) -> List[Note]:
        return list(self.records.values())

    async def find_by_id(self, note_id: UUID) -> Optional[Note]:
        return self.records.get(note_id)

    async def find_by_title(self, title: str) -> Optional[Note]:
        return next((note for note in self.records.values() if note.title == title), None)

    async def create(self, user_id: UUID, title: str, text: str) -> Optional[Note]:
        if self.reject_creates:
            return None
        note = Note(id=uuid.uuid4(), user_id=user_id, title=title, text=text, completed=False)
        self.records[note.id] = note
        return note

    async def save(self, note: Note) -> Note:
        if note.id not in self.records:
            raise NotFoundError(GlobalMessages.NOTE_NOT_FOUND)
        self.records[note.id] = note
        return note

    async def delete(self, note: Note) -> None:
        self.records.pop(note.id, None)


class InMemoryUserRepository(UserRepository):

    def __init__(self) -> None:
        self.records: Dict[UUID, User] = {}

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        return self.records.get(user_id)

    async def create(self, username: str) -> User:
        return self.add(username)

    def add(self, username: str) -> User:
        user = User(id=uuid.uuid4(), username=username)
        self.records[user.id] = user
        return user


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with empty limiter counters."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def note_repository() -> InMemoryNoteRepository:
    return InMemoryNoteRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def note_service(note_repository, user_repository) -> NoteService:
    return NoteService(notes=note_repository, users=user_repository)
