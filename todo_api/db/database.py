# todo_api/db/database.py

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from todo_api.core.configuration import settings
# Registers the tables on SQLModel.metadata
from todo_api.models import todo_item, user  # noqa: F401

logger = logging.getLogger(__name__)


def get_engine(url: str | None = None, echo: bool | None = None) -> AsyncEngine:
    return create_async_engine(
        url or settings.DATABASE_URL,
        echo=settings.DB_ECHO if echo is None else echo,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db(engine: AsyncEngine) -> None:
    """
    Creates missing tables
    """
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables ready")


async def reset_db(engine: AsyncEngine) -> None:
    """
    Drops every table and creates them again. Development only!
    """
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.warning("Database reset: all tables dropped and recreated")
