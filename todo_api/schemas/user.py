# todo_api/schemas/user.py

from typing import Annotated

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_pascal

class WireModel(BaseModel):
    """
    JSON keys go out in PascalCase (Id, Username, ...).
    Incoming bodies accept either PascalCase or the field names.
    """
    class Config:
        alias_generator = to_pascal
        populate_by_name = True
        from_attributes = True

class UserIn(WireModel):
    username: Annotated[str | None, Field(examples=["alice"])] = None
    password: Annotated[str | None, Field(examples=["strong_password"])] = None

class UserOut(WireModel):
    id: int
    username: str

class AuthenticatedUser(UserOut):
    token: str
