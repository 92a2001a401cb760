"""API v1 路由聚合"""

from fastapi import APIRouter

from app.modules.company.router import router as company_router
from app.modules.user.router import router as user_router

api_router = APIRouter()

api_router.include_router(company_router, prefix="/companies", tags=["companies"])
api_router.include_router(user_router, prefix="/users", tags=["users"])
