# todo_api/models/todo_item.py

from typing import TYPE_CHECKING, Optional

from sqlmodel import SQLModel, Field, Relationship

if TYPE_CHECKING:
    from todo_api.models.user import User

class TodoItem(SQLModel, table=True):
    __tablename__ = "todo_items"

    id: int | None = Field(default=None, primary_key=True)
    name: str
    is_complete: bool = False
    user_id: int = Field(foreign_key="users.id", index=True)

    user: Optional["User"] = Relationship(back_populates="todo_items")
