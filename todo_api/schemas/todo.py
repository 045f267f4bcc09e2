# todo_api/schemas/todo.py

from todo_api.schemas.user import WireModel

class TodoItemOut(WireModel):
    id: int
    name: str
    is_complete: bool
    user_id: int
