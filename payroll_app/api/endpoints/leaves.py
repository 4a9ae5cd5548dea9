import logging

from fastapi import APIRouter, Depends
from sqlalchemy import select, desc, func
from sqlalchemy.ext.asyncio import AsyncSession

from payroll_app.core.errors import NotFound, ValidationError
from payroll_app.core.rbac import admin_only, employee_only
from payroll_app.core.security import EmployeeClaims
from payroll_app.db.session import get_db
from payroll_app.models.employee import Employee
from payroll_app.models.leave_request import LeaveRequest, LeaveStatus
from payroll_app.schemas import LeaveCreate, LeaveStatusUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

VALID_STATUSES = [s.value for s in LeaveStatus]


async def _create_leave(db: AsyncSession, employee_id: int, body: LeaveCreate) -> LeaveRequest:
    lr = LeaveRequest(
        employee_id=employee_id,
        date=body.as_date(),
        reason=(body.reason or "").strip(),
        status=LeaveStatus.PENDING.value,
    )
    db.add(lr)
    await db.commit()
    await db.refresh(lr)
    logger.info("Employee %s requested leave %s for %s", employee_id, lr.id, lr.date)
    return lr


@router.post("/leaves", status_code=201)
async def create_leave(
    body: LeaveCreate,
    principal: EmployeeClaims = Depends(employee_only),
    db: AsyncSession = Depends(get_db),
):
    lr = await _create_leave(db, principal.id, body)
    return lr.as_dict()


@router.post("/leave-requests", status_code=201)
async def submit_leave_request(
    body: LeaveCreate,
    principal: EmployeeClaims = Depends(employee_only),
    db: AsyncSession = Depends(get_db),
):
    lr = await _create_leave(db, principal.id, body)
    return {"message": "Leave request submitted successfully", "leaveRequest": lr.as_dict()}


@router.get("/leave-requests/employee")
async def my_leave_requests(
    principal: EmployeeClaims = Depends(employee_only),
    db: AsyncSession = Depends(get_db),
):
    rows = (
        await db.execute(
            select(LeaveRequest, Employee.name)
            .join(Employee, LeaveRequest.employee_id == Employee.id)
            .where(LeaveRequest.employee_id == principal.id)
            .order_by(desc(LeaveRequest.date), desc(LeaveRequest.id))
        )
    ).all()
    return [{**lr.as_dict(), "employee_name": name} for lr, name in rows]


@router.get("/api/leave-requests/pending/count", dependencies=[Depends(admin_only)])
async def pending_leave_count(db: AsyncSession = Depends(get_db)):
    count = (
        await db.execute(
            select(func.count(LeaveRequest.id)).where(LeaveRequest.status == LeaveStatus.PENDING.value)
        )
    ).scalar_one()
    return {"count": int(count)}


@router.get("/api/leave-requests/pending", dependencies=[Depends(admin_only)])
async def pending_leave_requests(db: AsyncSession = Depends(get_db)):
    rows = (
        await db.execute(
            select(LeaveRequest, Employee.name, Employee.email)
            .join(Employee, LeaveRequest.employee_id == Employee.id)
            .where(LeaveRequest.status == LeaveStatus.PENDING.value)
            .order_by(desc(LeaveRequest.date), desc(LeaveRequest.id))
        )
    ).all()
    return [
        {**lr.as_dict(), "employee_name": name, "employee_email": email}
        for lr, name, email in rows
    ]


@router.put("/leaves/{leave_id}/status", dependencies=[Depends(admin_only)])
async def update_leave_status(leave_id: int, body: LeaveStatusUpdate, db: AsyncSession = Depends(get_db)):
    if body.status not in VALID_STATUSES:
        raise ValidationError("Invalid status", validStatuses=VALID_STATUSES)

    row = (
        await db.execute(
            select(LeaveRequest, Employee.name, Employee.email)
            .join(Employee, LeaveRequest.employee_id == Employee.id)
            .where(LeaveRequest.id == leave_id)
        )
    ).first()
    if not row:
        raise NotFound("Leave request not found", details=f"No leave request with ID {leave_id} exists")

    lr, name, email = row
    lr.status = body.status
    await db.commit()

    logger.info("Leave request %s set to %s", leave_id, body.status)
    return {
        "message": "Leave status updated successfully",
        "leaveRequest": lr.as_dict(),
        "employee": {"name": name, "email": email},
    }
