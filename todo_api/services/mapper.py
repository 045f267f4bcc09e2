# todo_api/services/mapper.py

from abc import ABC, abstractmethod

from todo_api.models.todo_item import TodoItem
from todo_api.models.user import User
from todo_api.schemas.todo import TodoItemOut
from todo_api.schemas.user import UserIn, UserOut


class Mapper(ABC):
    """
    Converts between wire DTOs and persisted entities
    """

    @abstractmethod
    def to_entity(self, dto: UserIn) -> User: ...

    @abstractmethod
    def to_dto(self, user: User) -> UserOut: ...

    @abstractmethod
    def to_todo_dto(self, item: TodoItem) -> TodoItemOut: ...

    def to_dtos(self, users: list[User]) -> list[UserOut]:
        return [self.to_dto(user) for user in users]

    def to_todo_dtos(self, items: list[TodoItem]) -> list[TodoItemOut]:
        return [self.to_todo_dto(item) for item in items]


class UserMapper(Mapper):
    def to_entity(self, dto):
        # the password never lands on the entity; the service hashes it
        return User(username=dto.username)

    def to_dto(self, user):
        return UserOut.model_validate(user)

    def to_todo_dto(self, item):
        return TodoItemOut.model_validate(item)
