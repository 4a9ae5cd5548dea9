import logging

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from payroll_app.core.errors import Conflict, Unauthenticated
from payroll_app.core.rbac import get_token_codec
from payroll_app.core.security import (
    AdminClaims,
    EmployeeClaims,
    Role,
    TokenCodec,
    hash_password,
    verify_password,
)
from payroll_app.db.session import get_db
from payroll_app.models.admin import Admin
from payroll_app.models.employee import Employee
from payroll_app.schemas import AdminLogin, EmployeeCreate, EmployeeLogin

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_CREDENTIALS = "Invalid credentials"


@router.post("/admin/login")
async def admin_login(
    body: AdminLogin,
    db: AsyncSession = Depends(get_db),
    tokens: TokenCodec = Depends(get_token_codec),
):
    res = await db.execute(select(Admin).where(Admin.username == body.username))
    admin = res.scalar_one_or_none()

    # unknown account and wrong password look the same to the client
    if not admin or not verify_password(body.password, admin.password_hash):
        logger.info("Admin login failed for %r", body.username)
        raise Unauthenticated(INVALID_CREDENTIALS)

    token = tokens.issue(AdminClaims(id=admin.id, username=admin.username))
    logger.info("Admin %s logged in", admin.id)
    return {
        "message": "Login successful",
        "token": token,
        "role": Role.ADMIN.value,
        "user": {"id": admin.id, "username": admin.username},
    }


@router.post("/employee/login")
async def employee_login(
    body: EmployeeLogin,
    db: AsyncSession = Depends(get_db),
    tokens: TokenCodec = Depends(get_token_codec),
):
    email = body.email.strip().lower()
    res = await db.execute(select(Employee).where(Employee.email == email))
    emp = res.scalar_one_or_none()

    if not emp or not verify_password(body.password, emp.password_hash):
        logger.info("Employee login failed for %r", email)
        raise Unauthenticated(INVALID_CREDENTIALS)

    token = tokens.issue(EmployeeClaims(id=emp.id, email=emp.email))
    logger.info("Employee %s logged in", emp.id)
    return {
        "message": "Login successful",
        "token": token,
        "role": Role.EMPLOYEE.value,
        "employee": emp.public(),
    }


async def create_employee_record(db: AsyncSession, body: EmployeeCreate) -> Employee:
    """Insert an employee, failing with Conflict when the email is taken."""
    email = str(body.email).strip().lower()

    exists = (await db.execute(select(Employee.id).where(Employee.email == email))).scalar_one_or_none()
    if exists:
        raise Conflict("Email already registered")

    emp = Employee(
        name=body.name,
        email=email,
        phone=body.phone,
        password_hash=hash_password(body.password),
    )
    db.add(emp)
    try:
        await db.commit()
    except IntegrityError:
        # lost a race against another insert of the same email
        await db.rollback()
        raise Conflict("Email already registered")
    await db.refresh(emp)

    logger.info("Created employee %s", emp.id)
    return emp


@router.post("/employee/signup", status_code=201)
async def employee_signup(body: EmployeeCreate, db: AsyncSession = Depends(get_db)):
    emp = await create_employee_record(db, body)
    return {"message": "Employee registered successfully", "employee": emp.public()}
