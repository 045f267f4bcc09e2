# todo_api/services/user.py

import logging
from abc import ABC, abstractmethod

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from todo_api.core.exceptions import AppError
from todo_api.core.security import create_password_hash, verify_password
from todo_api.crud import todo as crud_todo
from todo_api.crud import user as crud_user
from todo_api.models.todo_item import TodoItem
from todo_api.models.user import User

logger = logging.getLogger(__name__)


def _username_taken(username: str) -> AppError:
    return AppError(f'Username "{username}" is already taken')


class UserServices(ABC):
    """
    Business operations on user accounts used by the HTTP layer
    """

    @abstractmethod
    async def authenticate(self, username: str | None, password: str | None) -> User | None:
        """Returns the user when the credentials match, otherwise None."""

    @abstractmethod
    async def create(self, user: User, password: str | None) -> User:
        """Hashes the password and stores the user. Raises AppError."""

    @abstractmethod
    async def get_all_users(self) -> list[User]: ...

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None: ...

    @abstractmethod
    async def get_user_todos(self, username: str) -> list[TodoItem]: ...

    @abstractmethod
    async def update_user(self, user: User, password: str | None = None) -> None:
        """Overwrites the stored user; re-hashes only when a password is given. Raises AppError."""

    @abstractmethod
    async def delete_user(self, user_id: int) -> None: ...


class UserService(UserServices):
    """
    UserServices backed by the SQL database, one session per operation
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def authenticate(self, username, password):
        if not username or not password:
            return None

        async with self._session_factory() as session:
            user = await crud_user.get_user_by_username(session, username)

        if user is None or not verify_password(password, user.password_hash, user.password_salt):
            logger.info("Failed authentication for username %r", username)
            return None
        return user

    async def create(self, user, password):
        if not user.username or not user.username.strip():
            raise AppError("Username is required")
        if not password or not password.strip():
            raise AppError("Password is required")

        async with self._session_factory() as session:
            if await crud_user.get_user_by_username(session, user.username):
                raise _username_taken(user.username)

            user.password_hash, user.password_salt = create_password_hash(password)
            try:
                new_user = await crud_user.create_user(session, user)
            except IntegrityError:
                await session.rollback()
                raise _username_taken(user.username)

        logger.info("Registered user %d (%s)", new_user.id, new_user.username)
        return new_user

    async def get_all_users(self):
        async with self._session_factory() as session:
            return await crud_user.list_users(session)

    async def get_by_id(self, user_id):
        async with self._session_factory() as session:
            return await crud_user.get_user(session, user_id)

    async def get_user_todos(self, username):
        async with self._session_factory() as session:
            return await crud_todo.list_todos_by_username(session, username)

    async def update_user(self, user, password=None):
        async with self._session_factory() as session:
            stored = await crud_user.get_user(session, user.id)
            if stored is None:
                raise AppError("User not found")

            # a blank username means "keep the current one"
            username = user.username if user.username and user.username.strip() else None
            if username and username != stored.username:
                if await crud_user.get_user_by_username(session, username):
                    raise _username_taken(username)

            password_hash = password_salt = None
            if password and password.strip():
                password_hash, password_salt = create_password_hash(password)

            try:
                await crud_user.update_user(
                    session,
                    stored,
                    username=username,
                    password_hash=password_hash,
                    password_salt=password_salt,
                )
            except IntegrityError:
                await session.rollback()
                raise _username_taken(username)

        logger.info("Updated user %d (password changed: %s)", user.id, password_hash is not None)

    async def delete_user(self, user_id):
        async with self._session_factory() as session:
            deleted = await crud_user.delete_user(session, user_id)
        if deleted:
            logger.info("Deleted user %d", user_id)
