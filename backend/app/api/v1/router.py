from fastapi import APIRouter

from app.api.v1.odds import router as odds_router
from app.api.v1.parlays import router as parlays_router
from app.api.v1.system import router as system_router

api_router = APIRouter()
api_router.include_router(parlays_router)
api_router.include_router(odds_router)
api_router.include_router(system_router)
