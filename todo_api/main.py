# todo_api/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api.core.configuration import settings
from todo_api.db.database import create_session_factory, get_engine, init_db, reset_db
from todo_api.routers import user
from todo_api.services.mapper import UserMapper
from todo_api.services.user import UserService

logger = logging.getLogger(__name__)


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # every HTTP error goes out as {"message": ...}
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # malformed bodies and path params are client errors like any other
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return JSONResponse(status_code=400, content={"message": message})


def create_app(engine: AsyncEngine | None = None) -> FastAPI:
    engine = engine or get_engine()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging()
        if settings.RESET_DB_ON_STARTUP:
            await reset_db(engine)
        else:
            await init_db(engine)
        logger.info("%s %s started", settings.PROJECT_NAME, settings.PROJECT_VERSION)
        yield
        await engine.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
        description=settings.DESCRIPTION,
        summary="Minimal REST backend for a todo-list application",
        openapi_tags=settings.TAGS_METADATA,
        lifespan=lifespan,
    )

    # Services are wired once here and read back by the request dependencies
    app.state.user_service = UserService(create_session_factory(engine))
    app.state.mapper = UserMapper()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Router 등록하기
    app.include_router(user.router, prefix="/api/User", tags=["User"])

    @app.get("/")
    async def root():
        return {"message": "Todo API"}

    return app


app = create_app()
