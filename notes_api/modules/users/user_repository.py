# notes_api/modules/users/user_repository.py

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from notes_api.models.models import User


class UserRepository(ABC):
    """Read access to users, as needed by the notes module."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        raise NotImplementedError

    @abstractmethod
    async def create(self, username: str) -> User:
        raise NotImplementedError


class SqlAlchemyUserRepository(UserRepository):

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        async with self._session_factory() as session:
            return await session.get(User, user_id)

    async def create(self, username: str) -> User:
        new_user = User(username=username)
        async with self._session_factory() as session:
            session.add(new_user)
            await session.commit()
            await session.refresh(new_user)
        return new_user
