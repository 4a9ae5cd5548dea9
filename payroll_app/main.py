import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import select

from payroll_app.api.router import router
from payroll_app.core.config import Settings, settings as default_settings
from payroll_app.core.errors import register_exception_handlers
from payroll_app.core.logging import configure_logging
from payroll_app.core.security import TokenCodec, hash_password
from payroll_app.db.session import Database
from payroll_app.models.admin import Admin

import payroll_app.models  # noqa: F401

logger = logging.getLogger(__name__)


async def seed_admin(db: Database, username: str, password: str) -> None:
    async with db.sessionmaker() as session:
        res = await session.execute(select(Admin).where(Admin.username == username))
        if res.scalar_one_or_none():
            return
        session.add(Admin(username=username, password_hash=hash_password(password)))
        await session.commit()
        logger.info("Seeded admin account %r", username)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = Database(settings.DATABASE_URL)
        app.state.db = db
        await db.create_all()
        await seed_admin(db, settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)
        logger.info("Database ready (%s)", db.engine.dialect.name)
        try:
            yield
        finally:
            await db.close()
            logger.info("Database connections closed")

    app = FastAPI(title="Payroll Management System", lifespan=lifespan)
    app.state.settings = settings
    app.state.tokens = TokenCodec(settings.APP_SECRET_KEY, ttl=timedelta(days=settings.TOKEN_TTL_DAYS))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app, debug=settings.DEBUG)
    app.include_router(router)
    return app


app = create_app()
