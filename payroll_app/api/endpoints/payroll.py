import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import select, desc
from sqlalchemy.ext.asyncio import AsyncSession

from payroll_app.core.errors import NotFound, ValidationError
from payroll_app.core.rbac import admin_only, authenticated
from payroll_app.db.session import get_db
from payroll_app.models.employee import Employee
from payroll_app.models.payroll_record import PayrollRecord
from payroll_app.schemas import PayrollCreate
from payroll_app.services.payroll_calculator import MAX_MONEY, compute_payroll

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=201, dependencies=[Depends(admin_only)])
async def process_payroll(body: PayrollCreate, db: AsyncSession = Depends(get_db)):
    emp = (await db.execute(select(Employee.id).where(Employee.id == body.employeeId))).scalar_one_or_none()
    if not emp:
        raise NotFound("Employee not found")

    figures = compute_payroll(body.basicSalary, body.bonus, body.deductions, body.taxPercent)
    if abs(figures.net_salary) > MAX_MONEY or abs(figures.tax_amount) > MAX_MONEY:
        raise ValidationError("Payroll amounts exceed the supported range")

    record = PayrollRecord(
        employee_id=body.employeeId,
        basic_salary=figures.basic_salary,
        bonus=figures.bonus,
        deductions=figures.deductions,
        tax_percent=figures.tax_percent,
        tax_amount=figures.tax_amount,
        net_salary=figures.net_salary,
        payment_date=datetime.now(timezone.utc),
    )
    db.add(record)
    await db.commit()
    await db.refresh(record)

    logger.info("Processed payroll %s for employee %s", record.id, record.employee_id)
    return record.as_dict()


@router.get("/{employee_id}", dependencies=[Depends(authenticated)])
async def employee_payroll(employee_id: int, db: AsyncSession = Depends(get_db)):
    if employee_id <= 0:
        raise ValidationError("Invalid employee ID")

    res = await db.execute(
        select(PayrollRecord)
        .where(PayrollRecord.employee_id == employee_id)
        .order_by(desc(PayrollRecord.payment_date), desc(PayrollRecord.id))
    )
    return [r.as_dict() for r in res.scalars().all()]
