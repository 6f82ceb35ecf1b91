from fastapi import APIRouter

from employee_portal.api.endpoints import auth, employees, health

api_router = APIRouter(prefix="/api")
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(employees.router)
