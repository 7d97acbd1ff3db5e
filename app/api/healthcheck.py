from fastapi import APIRouter

from app.schemas.healthcheck import HealthCheckResponse
from app.services.healthcheck import HealthCheckService

router = APIRouter(tags=["Health Check"])


@router.get("/healthcheck", response_model=HealthCheckResponse)
def healthcheck() -> HealthCheckResponse:
    """@brief Return service status and request latency metrics.

    @return HealthCheckResponse with dashboard and API latency metrics.
    """
    return HealthCheckService().healthcheck()
