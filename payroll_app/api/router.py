from fastapi import APIRouter

from payroll_app.api.endpoints import auth, employees, health, leaves, payroll
from payroll_app.routers import attendance


router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(auth.router, tags=["auth"])

# employee and leave routes mix bare and /api paths, so they carry full paths
router.include_router(employees.router, tags=["employees"])
router.include_router(payroll.router, prefix="/payroll", tags=["payroll"])
router.include_router(leaves.router, tags=["leaves"])

router.include_router(attendance.router)
