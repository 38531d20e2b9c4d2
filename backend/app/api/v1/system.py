from fastapi import APIRouter

from app.config import settings

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "app_name": settings.app_name}
