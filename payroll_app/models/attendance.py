from sqlalchemy import Column, Integer, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from payroll_app.db.base import Base


class Attendance(Base):
    __tablename__ = "attendance"
    # one row per employee per calendar day
    __table_args__ = (UniqueConstraint("employee_id", "work_date", name="uq_attendance_employee_day"),)

    id = Column(Integer, primary_key=True, index=True)

    employee_id = Column(
        Integer,
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    work_date = Column(Date, nullable=False, index=True)
    in_time = Column(DateTime(timezone=True), nullable=True, index=True)
    out_time = Column(DateTime(timezone=True), nullable=True)

    employee = relationship("Employee")
