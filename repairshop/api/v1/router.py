from fastapi import APIRouter

# Dashboard
from repairshop.api.v1.dashboard import router as dashboard_router

api_router = APIRouter()

# --- Dashboard ---
api_router.include_router(dashboard_router)
