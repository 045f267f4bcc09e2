# todo_api/core/configuration.py

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    PROJECT_NAME: str = "Todo API"
    PROJECT_VERSION: str = "1.0.0"
    DESCRIPTION: str = "User accounts, bearer tokens and todo items for a todo-list app"
    TAGS_METADATA: list[dict] = [
        {
            "name": "User",
            "description": "Authentication, registration and user management",
        },
    ]

    # Token signing
    SECRET: str = "development-secret-change-me"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./todo.db"
    DB_ECHO: bool = False
    RESET_DB_ON_STARTUP: bool = False

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]


settings = Settings()
