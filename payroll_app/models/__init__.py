from payroll_app.models.admin import Admin
from payroll_app.models.employee import Employee
from payroll_app.models.payroll_record import PayrollRecord
from payroll_app.models.leave_request import LeaveRequest, LeaveStatus
from payroll_app.models.attendance import Attendance

__all__ = ["Admin", "Employee", "PayrollRecord", "LeaveRequest", "LeaveStatus", "Attendance"]
