# todo_api/models/user.py

from typing import TYPE_CHECKING

from sqlmodel import SQLModel, Field, Relationship

if TYPE_CHECKING:
    from todo_api.models.todo_item import TodoItem

class User(SQLModel, table=True):
    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(unique=True, index=True)
    password_hash: bytes = b""
    password_salt: bytes = b""

    # selectin so the collection is already loaded when a delete cascades
    todo_items: list["TodoItem"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"lazy": "selectin", "cascade": "all, delete-orphan"},
    )
