"""
Request bodies for the JSON API.

Field names follow the wire format used by the frontend (camelCase where
the client sends camelCase).
"""
import re
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from payroll_app.core.security import MAX_PASSWORD_BYTES

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class AdminLogin(BaseModel):
    username: str
    password: str


class EmployeeLogin(BaseModel):
    email: str
    password: str


class EmployeeCreate(BaseModel):
    """Body for both self-signup and admin-add."""

    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(..., min_length=1)
    phone: str = Field("", max_length=50)

    @field_validator("password")
    @classmethod
    def check_password_length(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v

    @field_validator("name", "phone")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


class EmployeeUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    phone: str = Field("", max_length=50)


class PayrollCreate(BaseModel):
    employeeId: int = Field(..., gt=0)
    # sized to the Numeric(12, 2) and Numeric(5, 2) columns
    basicSalary: Decimal = Field(..., max_digits=12, decimal_places=2)
    bonus: Decimal = Field(Decimal(0), max_digits=12, decimal_places=2)
    deductions: Decimal = Field(Decimal(0), max_digits=12, decimal_places=2)
    taxPercent: Decimal = Field(Decimal(0), max_digits=5, decimal_places=2)


class LeaveCreate(BaseModel):
    date: str
    reason: str = ""

    @field_validator("date")
    @classmethod
    def check_iso_date(cls, v: str) -> str:
        if not ISO_DATE_RE.match(v):
            raise ValueError("Invalid date format. Use YYYY-MM-DD")
        # 2024-02-30 matches the pattern but is not a day
        date.fromisoformat(v)
        return v

    def as_date(self) -> date:
        return date.fromisoformat(self.date)


class LeaveStatusUpdate(BaseModel):
    status: str


class AttendanceSubmit(BaseModel):
    inTime: Optional[datetime] = None
    outTime: Optional[datetime] = None

    @field_validator("inTime", "outTime")
    @classmethod
    def to_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is None:
            return v
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)
