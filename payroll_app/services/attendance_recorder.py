from datetime import date, datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from payroll_app.core.errors import InternalFailure
from payroll_app.models.attendance import Attendance

_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


async def record_attendance(
    db: AsyncSession,
    employee_id: int,
    in_time: Optional[datetime],
    out_time: Optional[datetime],
    today: date,
) -> bool:
    """Store the employee's attendance for ``today``.

    The first submission of a day inserts a row; later ones overwrite its
    in/out times. The write is a single INSERT .. ON CONFLICT DO UPDATE on
    (employee_id, work_date), so concurrent submissions still leave exactly
    one row. Returns True when the day had no record before this call.
    """
    dialect = db.bind.dialect.name
    try:
        insert = _INSERT_BY_DIALECT[dialect]
    except KeyError:
        raise InternalFailure(f"Attendance storage is not supported on {dialect}")

    existing_id = (
        await db.execute(
            select(Attendance.id).where(
                Attendance.employee_id == employee_id,
                Attendance.work_date == today,
            )
        )
    ).scalar_one_or_none()

    stmt = insert(Attendance).values(
        employee_id=employee_id,
        work_date=today,
        in_time=in_time,
        out_time=out_time,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[Attendance.employee_id, Attendance.work_date],
        set_={"in_time": stmt.excluded.in_time, "out_time": stmt.excluded.out_time},
    )
    await db.execute(stmt)
    await db.commit()

    return existing_id is None
