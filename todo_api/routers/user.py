# todo_api/routers/user.py

from dataclasses import dataclass
from typing import Annotated, Any, Callable

from fastapi import APIRouter, Depends, HTTPException, Response, status

from todo_api.core.exceptions import AppError
from todo_api.core.security import create_access_token
from todo_api.dependencies import get_current_user, get_mapper, get_user_service
from todo_api.schemas.todo import TodoItemOut
from todo_api.schemas.user import AuthenticatedUser, UserIn, UserOut
from todo_api.services.mapper import Mapper
from todo_api.services.user import UserServices

UserServiceDep = Annotated[UserServices, Depends(get_user_service)]
MapperDep = Annotated[Mapper, Depends(get_mapper)]


async def authenticate(
    user_in: UserIn,
    user_service: UserServiceDep
) -> AuthenticatedUser:
    """
    Logs the user in and returns a bearer token valid for 7 days
    """
    user = await user_service.authenticate(user_in.username, user_in.password)

    # same message for unknown user and wrong password
    if user is None:
        raise HTTPException(status_code=400, detail="Username or password is incorrect")

    return AuthenticatedUser(
        id=user.id,
        username=user.username,
        token=create_access_token(user.id),
    )


async def register(
    user_in: UserIn,
    user_service: UserServiceDep,
    mapper: MapperDep
) -> UserOut:
    """
    Registers a new user
    """
    user = mapper.to_entity(user_in)
    try:
        new_user = await user_service.create(user, user_in.password)
    except AppError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return mapper.to_dto(new_user)


async def get_all(
    user_service: UserServiceDep,
    mapper: MapperDep
) -> list[UserOut]:
    """
    Returns every user
    """
    users = await user_service.get_all_users()
    return mapper.to_dtos(users)


async def get_by_id(
    id: int,
    user_service: UserServiceDep,
    mapper: MapperDep
) -> UserOut:
    user = await user_service.get_by_id(id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return mapper.to_dto(user)


async def get_user_todos(
    name: str,
    user_service: UserServiceDep,
    mapper: MapperDep
) -> list[TodoItemOut]:
    """
    Returns the todo items of the user with the given name
    """
    items = await user_service.get_user_todos(name)
    return mapper.to_todo_dtos(items)


async def update(
    id: int,
    user_in: UserIn,
    user_service: UserServiceDep,
    mapper: MapperDep
) -> Response:
    """
    Updates the user; the password is re-hashed only when one is sent
    """
    user = mapper.to_entity(user_in)
    user.id = id

    try:
        await user_service.update_user(user, user_in.password)
    except AppError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return Response(status_code=status.HTTP_200_OK)


async def delete(
    id: int,
    user_service: UserServiceDep
) -> Response:
    await user_service.delete_user(id)
    return Response(status_code=status.HTTP_200_OK)


@dataclass(frozen=True)
class Route:
    path: str
    method: str
    endpoint: Callable[..., Any]
    auth_required: bool
    response_model: Any = None


ROUTES = [
    Route("/Authenticate", "POST", authenticate, False, AuthenticatedUser),
    Route("/Register", "POST", register, False, UserOut),
    Route("", "GET", get_all, True, list[UserOut]),
    Route("/{id}", "GET", get_by_id, True, UserOut),
    Route("/Todo/{name}", "GET", get_user_todos, True, list[TodoItemOut]),
    Route("/{id}", "PUT", update, True),
    Route("/{id}", "DELETE", delete, True),
]

router = APIRouter()

for route in ROUTES:
    router.add_api_route(
        route.path,
        route.endpoint,
        methods=[route.method],
        response_model=route.response_model,
        dependencies=[Depends(get_current_user)] if route.auth_required else None,
        name=route.endpoint.__name__,
    )
