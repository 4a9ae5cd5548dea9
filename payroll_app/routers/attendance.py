from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy import select, desc
from sqlalchemy.ext.asyncio import AsyncSession

from payroll_app.core.rbac import admin_only, employee_only
from payroll_app.core.security import EmployeeClaims
from payroll_app.db.session import get_db
from payroll_app.models.attendance import Attendance
from payroll_app.models.employee import Employee
from payroll_app.schemas import AttendanceSubmit
from payroll_app.services.attendance_recorder import record_attendance

router = APIRouter(tags=["attendance"])


def get_today() -> date:
    # server clock, never the client's idea of the date
    return date.today()


@router.post("/employee/attendance")
async def submit_attendance(
    body: AttendanceSubmit,
    principal: EmployeeClaims = Depends(employee_only),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    created = await record_attendance(db, principal.id, body.inTime, body.outTime, today)
    if created:
        return {"message": "Attendance recorded successfully."}
    return {"message": "Attendance updated successfully."}


@router.get("/admin/attendance", dependencies=[Depends(admin_only)])
async def all_attendance(db: AsyncSession = Depends(get_db)):
    q = (
        select(
            Attendance.employee_id,
            Employee.name.label("employee_name"),
            Attendance.work_date,
            Attendance.in_time,
            Attendance.out_time,
        )
        .join(Employee, Attendance.employee_id == Employee.id)
        .order_by(desc(Attendance.in_time), desc(Attendance.id))
    )
    rows = (await db.execute(q)).mappings().all()
    return [dict(r) for r in rows]
