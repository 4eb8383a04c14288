from fastapi import APIRouter

from app.core.config import settings
from app.schemas.response import HealthStatus

router = APIRouter()


@router.get("/health", response_model=HealthStatus)
def health_check():
    return HealthStatus(status="ok", version=settings.VERSION)
