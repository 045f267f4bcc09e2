# todo_api/core/security.py

import datetime as dt
import logging
import os

from jose import JWTError, jwt
from passlib.hash import pbkdf2_sha512
from pydantic import BaseModel

from todo_api.core.configuration import settings

logger = logging.getLogger(__name__)

SALT_SIZE = 16


class TokenPayload(BaseModel):
    """
    Verified contents of a bearer token
    """
    user_id: int
    issued_at: dt.datetime
    expires_at: dt.datetime


def create_password_hash(password: str) -> tuple[bytes, bytes]:
    """
    Returns (hash, salt) for a plaintext password.
    A fresh random salt is drawn on every call.
    """
    salt = os.urandom(SALT_SIZE)
    password_hash = pbkdf2_sha512.using(salt=salt).hash(password)
    return password_hash.encode("ascii"), salt


def verify_password(password: str, password_hash: bytes, password_salt: bytes) -> bool:
    if not password_hash or not password_salt:
        return False

    stored = password_hash.decode("ascii")
    try:
        if pbkdf2_sha512.from_string(stored).salt != password_salt:
            return False
    except ValueError:
        return False

    return pbkdf2_sha512.verify(password, stored)


def create_access_token(user_id: int, now: dt.datetime | None = None) -> str:
    """
    Signed JWT carrying the user id as subject.
    Expires ACCESS_TOKEN_EXPIRE_DAYS after issuance.
    """
    issued_at = (now or dt.datetime.now(dt.timezone.utc)).replace(microsecond=0)
    expires_at = issued_at + dt.timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)

    to_encode = {
        "sub": str(user_id),
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    return jwt.encode(to_encode, settings.SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> TokenPayload | None:
    try:
        payload = jwt.decode(token, settings.SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        logger.debug("Rejected token: %s", e)
        return None

    subject = payload.get("sub")
    if subject is None or not subject.isdigit() or "iat" not in payload or "exp" not in payload:
        return None

    return TokenPayload(
        user_id=int(subject),
        issued_at=dt.datetime.fromtimestamp(payload["iat"], dt.timezone.utc),
        expires_at=dt.datetime.fromtimestamp(payload["exp"], dt.timezone.utc),
    )
