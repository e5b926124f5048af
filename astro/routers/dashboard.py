from __future__ import annotations

from fastapi import APIRouter, Depends

from astro.domain.schemas import UserIn
from astro.routers.dependencies import get_dashboard_service
from astro.services.dashboard_service import DashboardService
from astro.services.session_service import require_admin

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"], dependencies=[Depends(require_admin)])


@router.get("/statistics")
async def statistics(dashboard: DashboardService = Depends(get_dashboard_service)):
    return await dashboard.statistics()


@router.get("/users")
def list_users(dashboard: DashboardService = Depends(get_dashboard_service)):
    return dashboard.list_users()


@router.post("/users", status_code=201)
def create_user(body: UserIn, dashboard: DashboardService = Depends(get_dashboard_service)):
    account_id = dashboard.create_user(body.phone, body.fullname, body.password, body.email, body.role)
    return {"message": "User created successfully", "userId": account_id}


@router.get("/users/phone/{phone}")
def get_user_by_phone(phone: str, dashboard: DashboardService = Depends(get_dashboard_service)):
    return dashboard.get_user_by_phone(phone)


@router.get("/users/{account_id}")
def get_user(account_id: int, dashboard: DashboardService = Depends(get_dashboard_service)):
    return dashboard.get_user(account_id)


@router.put("/users/{account_id}")
def update_user(account_id: int, body: UserIn, dashboard: DashboardService = Depends(get_dashboard_service)):
    dashboard.update_user(account_id, body.phone, body.fullname, body.email, body.role)
    return {"message": "User updated successfully"}


@router.delete("/users/{account_id}")
def delete_user(account_id: int, dashboard: DashboardService = Depends(get_dashboard_service)):
    dashboard.delete_user(account_id)
    return {"message": "User deleted successfully"}
