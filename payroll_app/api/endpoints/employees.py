import logging

from fastapi import APIRouter, Depends
from sqlalchemy import select, delete, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from payroll_app.api.endpoints.auth import create_employee_record
from payroll_app.core.errors import Conflict, NotFound
from payroll_app.core.rbac import admin_only
from payroll_app.db.session import get_db
from payroll_app.models.attendance import Attendance
from payroll_app.models.employee import Employee
from payroll_app.models.leave_request import LeaveRequest
from payroll_app.models.payroll_record import PayrollRecord
from payroll_app.schemas import EmployeeCreate, EmployeeUpdate

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(admin_only)])


@router.get("/api/employees/count")
async def count_employees(db: AsyncSession = Depends(get_db)):
    count = (await db.execute(select(func.count(Employee.id)))).scalar_one()
    return {"count": int(count)}


@router.get("/employees")
async def list_employees(db: AsyncSession = Depends(get_db)):
    res = await db.execute(select(Employee).order_by(Employee.id))
    return [e.public() for e in res.scalars().all()]


@router.post("/employees", status_code=201)
async def add_employee(body: EmployeeCreate, db: AsyncSession = Depends(get_db)):
    emp = await create_employee_record(db, body)
    return emp.public()


@router.put("/employees/{emp_id}")
async def update_employee(emp_id: int, body: EmployeeUpdate, db: AsyncSession = Depends(get_db)):
    emp = (await db.execute(select(Employee).where(Employee.id == emp_id))).scalar_one_or_none()
    if not emp:
        raise NotFound("Employee not found")

    emp.name = body.name.strip()
    emp.email = str(body.email).strip().lower()
    emp.phone = body.phone.strip()
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise Conflict("Email already registered")

    return emp.public()


@router.delete("/api/employees/{emp_id}")
async def delete_employee(emp_id: int, db: AsyncSession = Depends(get_db)):
    # dependent rows and the employee go together or not at all
    async with db.begin():
        exists = (await db.execute(select(Employee.id).where(Employee.id == emp_id))).scalar_one_or_none()
        if not exists:
            raise NotFound("Employee not found")

        await db.execute(delete(PayrollRecord).where(PayrollRecord.employee_id == emp_id))
        await db.execute(delete(LeaveRequest).where(LeaveRequest.employee_id == emp_id))
        await db.execute(delete(Attendance).where(Attendance.employee_id == emp_id))
        await db.execute(delete(Employee).where(Employee.id == emp_id))

    logger.info("Deleted employee %s with related records", emp_id)
    return {"message": "Employee and related payroll records deleted successfully"}
