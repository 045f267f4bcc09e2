# todo_api/dependencies.py

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from todo_api.core.security import TokenPayload, decode_access_token
from todo_api.services.mapper import Mapper
from todo_api.services.user import UserServices

bearer_scheme = HTTPBearer(auto_error=False)

def get_user_service(request: Request) -> UserServices:
    return request.app.state.user_service

def get_mapper(request: Request) -> Mapper:
    return request.app.state.mapper

async def get_current_user(
        credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
        user_service: Annotated[UserServices, Depends(get_user_service)]
) -> TokenPayload:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid Token",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise credentials_exception

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise credentials_exception

    # tokens outlive deleted accounts
    if await user_service.get_by_id(payload.user_id) is None:
        raise credentials_exception

    return payload
