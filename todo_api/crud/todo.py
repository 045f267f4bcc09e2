# todo_api/crud/todo.py

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from todo_api.models.todo_item import TodoItem
from todo_api.models.user import User

async def list_todos_by_username(
        session: AsyncSession,
        username: str
) -> list[TodoItem]:
    """
    Returns All Todo Items (of a user, looked up by name)
    """
    statement = (
        select(TodoItem)
        .join(User)
        .where(User.username == username)
        .order_by(TodoItem.id)
    )
    result = await session.exec(statement)
    return list(result.all())
