import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from payroll_app.core.errors import InternalFailure
from payroll_app.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def liveness():
    return "Payroll Management System API is running"


@router.get("/test-db")
async def test_db(db: AsyncSession = Depends(get_db)):
    try:
        db_time = (await db.execute(select(func.now()))).scalar_one()
    except (SQLAlchemyError, OSError):
        # asyncpg reports a refused connection as a bare OSError
        logger.exception("Database check failed")
        raise InternalFailure("Database connection error")
    return {"dbTime": db_time}
