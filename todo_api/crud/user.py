# todo_api/crud/user.py

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from todo_api.models.user import User

async def create_user(
        session: AsyncSession,
        user: User
) -> User:
    """
    Persists a new User
    - password_hash / password_salt must already be set
    """
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user

async def get_user(
        session: AsyncSession,
        user_id: int
) -> User | None:
    return await session.get(User, user_id)

async def get_user_by_username(
        session: AsyncSession,
        username: str
) -> User | None:
    """
    Returns User by User Name
    """
    statement = select(User).where(User.username == username)
    result = await session.exec(statement)
    return result.first()

async def list_users(
        session: AsyncSession
) -> list[User]:
    statement = select(User).order_by(User.id)
    result = await session.exec(statement)
    return list(result.all())

async def update_user(
        session: AsyncSession,
        user: User,
        username: str | None = None,
        password_hash: bytes | None = None,
        password_salt: bytes | None = None
) -> User:
    if username:
        user.username = username
    if password_hash and password_salt:
        user.password_hash = password_hash
        user.password_salt = password_salt

    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user

async def delete_user(
        session: AsyncSession,
        user_id: int
) -> bool:
    """
    Deletes the user and, through the cascade, its todo items.
    Returns False when there was nothing to delete.
    """
    user = await session.get(User, user_id)
    if not user:
        return False
    await session.delete(user)
    await session.commit()
    return True
