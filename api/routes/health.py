from datetime import datetime

from fastapi import APIRouter, status

from api.schemas import HealthResponse
from config.settings import get_settings

router = APIRouter(tags=['health'])


@router.get(
	'/health',
	response_model=HealthResponse,
	status_code=status.HTTP_200_OK,
	summary='Liveness check',
)
async def health_check() -> HealthResponse:
	return HealthResponse(status='ok', app=get_settings().APP_NAME, timestamp=datetime.now())
