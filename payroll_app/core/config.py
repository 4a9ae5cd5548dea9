import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    def __init__(self):
        self.APP_ENV: str = os.getenv("APP_ENV", "production").lower()

        self.POSTGRES_USER: str = os.getenv("POSTGRES_USER", "payroll_admin")
        self.POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "payroll_pass")
        self.POSTGRES_DB: str = os.getenv("POSTGRES_DB", "payroll_db")
        self.POSTGRES_HOST: str = os.getenv("POSTGRES_HOST", "localhost")
        self.POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")

        self.APP_SECRET_KEY: str = os.getenv("APP_SECRET_KEY", "CHANGE_ME")
        self.TOKEN_TTL_DAYS: int = int(os.getenv("TOKEN_TTL_DAYS", "7"))

        self.ADMIN_USERNAME: str = os.getenv("ADMIN_USERNAME", "admin")
        self.ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "admin123")

        self.CORS_ORIGINS: list[str] = [
            o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
        ]
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def DEBUG(self) -> bool:
        # error details are only exposed to clients in development
        return self.APP_ENV in {"dev", "development"}

    @property
    def DATABASE_URL(self) -> str:
        explicit = os.getenv("DATABASE_URL")
        if explicit:
            return explicit

        # SQLite mode (no Postgres / no Docker)
        sqlite_path = os.getenv("SQLITE_PATH", "payroll_local.db")
        use_sqlite = os.getenv("USE_SQLITE", "1") == "1"

        if use_sqlite:
            return f"sqlite+aiosqlite:///./{sqlite_path}"

        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )


settings = Settings()
